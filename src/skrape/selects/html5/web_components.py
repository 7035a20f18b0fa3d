"""Selectors for web component tags: <content>, <shadow>, <slot> and <template>.

Each builder selects its tag within a scope. By default the selector is just
the tag name. A more concrete selector can be given as a raw CSS suffix, or
configured on the CssSelector handed to init (with_class, with_id, ...). When
both are used they are merged.

Examples:
    >>> doc = html_document('<template id="row"><slot name="cell"></slot></template>')
    >>> template(doc, "#row", lambda selector: selector.to_css_selector)
    'template#row'
    >>> slot(doc, init=lambda selector: selector.find_first().attribute("name"))
    'cell'
"""

from typing import Any

from skrape.selects.dom_tree_element import DomTreeElement
from skrape.types import Init, T


def content(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    """Select <content> tags.

    Args:
        scope: Doc, DocElement or CssSelector to search in
        css_selector: Raw CSS appended to the tag name, e.g. ".main" or "[select]"
        init: Optional callback receiving the CssSelector

    Returns:
        init's result, or the CssSelector when init is None
    """
    return scope.selection(f"content{css_selector}", init)


def shadow(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    """Select <shadow> tags. See content() for the arguments."""
    return scope.selection(f"shadow{css_selector}", init)


def slot(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    """Select <slot> tags. See content() for the arguments."""
    return scope.selection(f"slot{css_selector}", init)


def template(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    """Select <template> tags. See content() for the arguments."""
    return scope.selection(f"template{css_selector}", init)
