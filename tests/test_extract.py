"""Unit tests for recipe driven field extraction."""

from pathlib import Path

import pytest

from skrape import html_document
from skrape.config import ExtractionConfig, FieldRule, ParserConfig
from skrape.exceptions import ElementNotFoundError
from skrape.extract import extract, extract_field, extract_file, load_document, read_value

MARKUP = """
<template id="card">
    <slot name="title">Card title</slot>
    <slot name="body">Card body</slot>
</template>
<a href="/one">One</a>
<a href="/two">Two</a>
"""


def test_read_value() -> None:
    """Test text is read unless an attribute is named."""
    element = html_document(MARKUP).find_first("a")

    assert read_value(element) == "One"
    assert read_value(element, "href") == "/one"
    assert read_value(element, "missing") == ""


def test_extract_single_and_multiple() -> None:
    """Test first-match and all-match fields."""
    doc = html_document(MARKUP)
    rules = [
        FieldRule(name="title", selector="template#card slot[name='title']"),
        FieldRule(name="slots", selector="slot", attribute="name", multiple=True),
        FieldRule(name="links", selector="a", attribute="href", multiple=True),
    ]

    assert extract(doc, rules) == {
        "title": "Card title",
        "slots": ["title", "body"],
        "links": ["/one", "/two"],
    }


def test_extract_keeps_rule_order() -> None:
    """Test result keys follow the rule order."""
    doc = html_document(MARKUP)
    rules = [FieldRule(name="b", selector="a"), FieldRule(name="a", selector="slot")]

    assert list(extract(doc, rules)) == ["b", "a"]


def test_extract_missing_values_when_relaxed() -> None:
    """Test misses give empty values in relaxed mode."""
    doc = html_document(MARKUP)

    assert extract_field(doc, FieldRule(name="x", selector="table")) == ""
    assert extract_field(doc, FieldRule(name="x", selector="table", multiple=True)) == []


def test_extract_missing_value_raises_when_strict() -> None:
    """Test a missing single value raises in strict mode."""
    doc = html_document(MARKUP, relaxed=False)

    with pytest.raises(ElementNotFoundError):
        extract_field(doc, FieldRule(name="x", selector="table"))


def test_extract_from_element_scope() -> None:
    """Test rules can run against a DocElement."""
    card = html_document(MARKUP).find_first("template")
    rules = [FieldRule(name="names", selector="slot", attribute="name", multiple=True)]

    assert extract(card, rules) == {"names": ["title", "body"]}


def test_load_document_with_parser_options(tmp_path: Path) -> None:
    """Test files are read with the configured encoding and base URL."""
    html_file = tmp_path / "page.html"
    html_file.write_text('<a href="/café">Café</a>', encoding="latin-1")

    doc = load_document(
        html_file,
        ParserConfig(relaxed=False, base_url="https://example.com/", encoding="latin-1"),
    )

    assert doc.relaxed is False
    assert doc.find_first("a").text == "Café"
    assert doc.each_href == ["https://example.com/café"]


def test_extract_file(tmp_path: Path) -> None:
    """Test extracting a recipe from a file."""
    html_file = tmp_path / "page.html"
    html_file.write_text(MARKUP, encoding="utf-8")
    config = ExtractionConfig(
        name="cards",
        fields=[FieldRule(name="body", selector="slot[name='body']")],
    )

    assert extract_file(html_file, config) == {"body": "Card body"}
