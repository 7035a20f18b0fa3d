"""Pytest fixtures for skrape tests."""

import copy

import pytest
from lxml import html as lxml_html

from skrape import Doc, DocElement, html_document

A_VALID_MARKUP = """
<h2 class="welcome">headline</h2>
<p class="fancy">paragraph
    <span>foo <b>bar</b></span>
    <span>fizz <b>buzz</b></span>
</p>
"""

AN_ELEMENT_MARKUP = (
    '<div class="clazz" foo="bar" fizz="buzz">divs text '
    '<h2 class="welcome">headline</h2> '
    '<p class="fancy">paragraph <span>foo <b>bar</b></span> <span>fizz <b>buzz</b></span></p>'
    "</div>"
)

WEB_COMPONENTS_MARKUP = """
<div id="host">
    <template id="card">
        <slot name="title">Title</slot>
        <slot name="body" class="rich">Body</slot>
    </template>
    <content select=".item" class="projected">projected content</content>
    <shadow class="older">older shadow</shadow>
</div>
"""


@pytest.fixture
def a_valid_doc() -> Doc:
    """Parsed document holding a headline and a paragraph with nested spans."""
    return html_document(A_VALID_MARKUP)


@pytest.fixture
def a_valid_element() -> DocElement:
    """DocElement around a detached <div> with attributes and children.

    The div is copied out of the parsed fragment so it has no parent, like an
    element built by hand.
    """
    parsed = lxml_html.fragment_fromstring(AN_ELEMENT_MARKUP)
    return DocElement(copy.deepcopy(parsed))


@pytest.fixture
def web_components_doc() -> Doc:
    """Document using <template>, <slot>, <content> and <shadow> tags."""
    return html_document(WEB_COMPONENTS_MARKUP)


@pytest.fixture
def strict_web_components_doc() -> Doc:
    """Same document, but lookups that miss raise ElementNotFoundError."""
    return html_document(WEB_COMPONENTS_MARKUP, relaxed=False)
