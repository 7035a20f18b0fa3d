"""skrape - typed CSS selector DSL over lxml."""

from importlib.metadata import PackageNotFoundError, version

from skrape.selects.css_selector import CssSelector
from skrape.selects.doc import Doc, html_document
from skrape.selects.doc_element import DocElement
from skrape.selects.doc_elements import DocElements

try:
    __version__ = version("skrape")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = [
    "CssSelector",
    "Doc",
    "DocElement",
    "DocElements",
    "html_document",
]
