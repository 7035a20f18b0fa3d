"""CSS selector DSL: query scopes, selectors and element wrappers."""

from skrape.selects.css_selector import CssSelector
from skrape.selects.doc import Doc, html_document
from skrape.selects.doc_element import DocElement
from skrape.selects.doc_elements import DocElements
from skrape.selects.dom_tree_element import DomTreeElement

__all__ = [
    "CssSelector",
    "Doc",
    "DocElement",
    "DocElements",
    "DomTreeElement",
    "html_document",
]
