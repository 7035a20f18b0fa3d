"""Field extraction driven by an ExtractionConfig."""

import logging
from pathlib import Path
from typing import Any

from skrape.config import ExtractionConfig, FieldRule, ParserConfig
from skrape.selects.doc import Doc, html_document
from skrape.selects.doc_element import DocElement
from skrape.selects.dom_tree_element import DomTreeElement

logger = logging.getLogger(__name__)


def read_value(element: DocElement, attribute: str | None = None) -> str:
    """Attribute value if attribute is given, else the element's text."""
    if attribute:
        return element.attribute(attribute)
    return element.text


def extract_field(scope: DomTreeElement, rule: FieldRule) -> str | list[str]:
    """Extract one field from scope.

    Raises:
        ElementNotFoundError: If the scope is strict and a single-value field misses
    """
    if rule.multiple:
        return scope.find_all(
            rule.selector,
            lambda elements: [read_value(element, rule.attribute) for element in elements],
        )
    return scope.find_first(rule.selector, lambda element: read_value(element, rule.attribute))


def extract(scope: DomTreeElement, rules: list[FieldRule]) -> dict[str, Any]:
    """Extract every rule from scope, keyed by field name in rule order.

    Examples:
        >>> doc = html_document("<h1>Title</h1><a href='/a'>A</a><a href='/b'>B</a>")
        >>> extract(doc, [
        ...     FieldRule(name="title", selector="h1"),
        ...     FieldRule(name="links", selector="a", attribute="href", multiple=True),
        ... ])
        {'title': 'Title', 'links': ['/a', '/b']}
    """
    result: dict[str, Any] = {}
    for rule in rules:
        result[rule.name] = extract_field(scope, rule)
        logger.debug(f"Extracted field '{rule.name}' using '{rule.selector}'")
    return result


def load_document(path: Path, parser: ParserConfig | None = None) -> Doc:
    """Read an HTML file and parse it with the given parser options."""
    parser = parser or ParserConfig()
    markup = path.read_text(encoding=parser.encoding)
    return html_document(markup, relaxed=parser.relaxed, base_url=parser.base_url)


def extract_file(path: Path, config: ExtractionConfig) -> dict[str, Any]:
    """Parse an HTML file and extract the recipe's fields from it."""
    doc = load_document(path, config.parser)
    logger.info(f"Extracting {len(config.fields)} field(s) from {path}")
    return extract(doc, config.fields)
