"""Parsed HTML documents."""

import logging

from lxml import etree as lxml_etree
from lxml import html as lxml_html
from lxml.html import HtmlElement

from skrape.selects.doc_element import element_text
from skrape.selects.dom_tree_element import DomTreeElement
from skrape.types import Init, T
from skrape.utils import normalize_whitespace

logger = logging.getLogger(__name__)

EMPTY_DOCUMENT = "<html><head></head><body></body></html>"


class Doc(DomTreeElement):
    """A parsed document, the outermost query scope.

    Attributes:
        document: Root <html> element produced by lxml
        relaxed: Lookup miss policy handed down to every element and selector
    """

    def __init__(self, document: HtmlElement, relaxed: bool = True) -> None:
        super().__init__(relaxed=relaxed)
        self.document = document

    @property
    def to_css_selector(self) -> str:
        return ""

    def _query(self, css_selector: str) -> list[HtmlElement]:
        if not css_selector.strip():
            return list(self.document.iter(lxml_etree.Element))
        return list(self.document.cssselect(css_selector))

    @property
    def text(self) -> str:
        return element_text(self.document)

    @property
    def html(self) -> str:
        return lxml_html.tostring(self.document, encoding="unicode")

    @property
    def title_text(self) -> str:
        """Text of the first <title>, or "" if the document has none."""
        titles = self.document.cssselect("title")
        if not titles:
            return ""
        return normalize_whitespace(titles[0].text_content())

    def __str__(self) -> str:
        return self.html

    def __repr__(self) -> str:
        return f"Doc(relaxed={self.relaxed})"


def html_document(
    markup: str | bytes,
    init: "Init[T] | None" = None,
    *,
    relaxed: bool = True,
    base_url: str | None = None,
) -> "Doc | T":
    """Parse markup into a Doc and optionally run init against it.

    Fragments are wrapped into a full <html><body> document by lxml.

    Args:
        markup: HTML source; markup without any element (empty, whitespace or
                only comments) gives an empty document
        init: Optional callback receiving the Doc
        relaxed: If False, lookups that miss raise ElementNotFoundError
        base_url: If set, relative links are resolved against it

    Returns:
        The Doc, or init's result

    Raises:
        lxml.etree.LxmlError: Parser errors propagate unchanged from lxml

    Examples:
        >>> html_document("<h1>Hi</h1>", lambda doc: doc.find_first("h1").text)
        'Hi'
    """
    if not markup or not markup.strip():
        markup = EMPTY_DOCUMENT

    document = lxml_etree.fromstring(markup, lxml_html.html_parser, base_url=base_url)
    if document is None:
        # Comment-only markup parses to no root element at all
        document = lxml_html.document_fromstring(EMPTY_DOCUMENT, base_url=base_url)
    if base_url:
        document.make_links_absolute(base_url)
        logger.debug(f"Resolved relative links against {base_url}")

    doc = Doc(document, relaxed=relaxed)
    if init is not None:
        return init(doc)
    return doc
