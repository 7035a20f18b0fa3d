"""Read-only wrapper around a single parsed DOM node."""

from html import escape

from lxml import etree as lxml_etree
from lxml import html as lxml_html
from lxml.html import HtmlElement

from skrape.selects.doc_elements import DocElements
from skrape.selects.dom_tree_element import DomTreeElement
from skrape.utils import normalize_whitespace


# Elements whose boundaries separate words in rendered text
BLOCK_TAGS = frozenset(
    {
        "address", "article", "aside", "blockquote", "body", "br", "caption", "dd", "details",
        "dialog", "div", "dl", "dt", "fieldset", "figcaption", "figure", "footer", "form",
        "h1", "h2", "h3", "h4", "h5", "h6", "head", "header", "hr", "html", "li", "main",
        "nav", "ol", "p", "pre", "section", "summary", "table", "tbody", "td", "tfoot", "th",
        "thead", "title", "tr", "ul",
    }
)

# Elements whose text lxml serializes without escaping
RAW_TEXT_TAGS = frozenset({"script", "style"})


def element_text(node: HtmlElement) -> str:
    """Descendant text of node, whitespace normalized.

    Block element boundaries and <br> count as whitespace; inline runs such
    as foo<b>bar</b> stay joined.

    Examples:
        >>> element_text(lxml_html.fragment_fromstring("<div><p>a</p><p>b<i>c</i></p></div>"))
        'a bc'
    """
    parts: list[str] = []
    _collect_text(node, parts)
    return normalize_whitespace("".join(parts))


def _collect_text(node: HtmlElement, parts: list[str]) -> None:
    is_block = node.tag in BLOCK_TAGS
    if is_block:
        parts.append(" ")
    if node.text:
        parts.append(node.text)
    for child in node:
        if isinstance(child.tag, str):
            _collect_text(child, parts)
        if child.tail:
            parts.append(child.tail)
    if is_block:
        parts.append(" ")


class DocElement(DomTreeElement):
    """Convenience accessors over one lxml HtmlElement.

    A DocElement may wrap nothing at all: relaxed lookups that miss return
    such an absent element. Its is_present is False and every accessor
    returns an empty value. The wrapped tree is never modified.

    Attributes:
        element: The wrapped lxml node, or None for an absent match
    """

    def __init__(self, element: HtmlElement | None, relaxed: bool = True) -> None:
        super().__init__(relaxed=relaxed)
        self.element = element

    def _query(self, css_selector: str) -> list[HtmlElement]:
        if self.element is None:
            return []
        if not css_selector.strip():
            return list(self.element.iter(lxml_etree.Element))
        return list(self.element.cssselect(css_selector))

    @property
    def to_css_selector(self) -> str:
        return self.css_selector

    @property
    def tag_name(self) -> str:
        return self.element.tag if self.element is not None else ""

    @property
    def text(self) -> str:
        """Text of this element and all its descendants, whitespace normalized."""
        if self.element is None:
            return ""
        return element_text(self.element)

    @property
    def own_text(self) -> str:
        """Text of this element's direct text nodes, excluding descendants."""
        if self.element is None:
            return ""
        parts = [self.element.text or ""]
        parts.extend(child.tail or "" for child in self.element)
        return normalize_whitespace("".join(parts))

    @property
    def html(self) -> str:
        """Inner markup: leading text plus every child serialized with its tail."""
        if self.element is None:
            return ""
        leading = self.element.text or ""
        if self.element.tag not in RAW_TEXT_TAGS:
            leading = escape(leading, quote=False)
        return leading + "".join(
            lxml_html.tostring(child, encoding="unicode") for child in self.element
        )

    @property
    def outer_html(self) -> str:
        if self.element is None:
            return ""
        return lxml_html.tostring(self.element, encoding="unicode", with_tail=False)

    @property
    def class_name(self) -> str:
        return self.attribute("class").strip()

    @property
    def class_names(self) -> set[str]:
        return set(self.class_name.split())

    @property
    def css_selector(self) -> str:
        """Selector locating this element within its document.

        Uses "#id" when the element has an id. Otherwise builds
        "tag.class1.class2" and prefixes the parent's selector with " > ",
        adding ":nth-child(n)" when sibling elements would match as well.

        Examples:
            >>> doc = html_document('<div class="a"><p>x</p><p>y</p></div>')
            >>> doc.find_last("p").css_selector
            'html > body > div.a > p:nth-child(2)'
        """
        node = self.element
        if node is None:
            return ""

        element_id = (node.get("id") or "").strip()
        if element_id:
            return f"#{element_id}"

        classes = self.class_name.split()
        selector = node.tag.replace(":", "|") + "".join(f".{name}" for name in classes)

        parent = node.getparent()
        if parent is None:
            return selector

        siblings = [child for child in parent if isinstance(child.tag, str)]
        matching = [
            sibling
            for sibling in siblings
            if sibling.tag == node.tag and set(classes) <= set((sibling.get("class") or "").split())
        ]
        if len(matching) > 1:
            selector += f":nth-child({siblings.index(node) + 1})"

        return f"{DocElement(parent).css_selector} > {selector}"

    def attribute(self, key: str) -> str:
        """Value of attribute key, or "" if it is not set."""
        if self.element is None:
            return ""
        return self.element.get(key) or ""

    def has_attribute(self, key: str) -> bool:
        return self.element is not None and key in self.element.attrib

    @property
    def attributes(self) -> dict[str, str]:
        """All attributes in document order."""
        if self.element is None:
            return {}
        return dict(self.element.attrib)

    @property
    def attribute_keys(self) -> list[str]:
        return list(self.attributes.keys())

    @property
    def attribute_values(self) -> list[str]:
        return list(self.attributes.values())

    @property
    def data_attributes(self) -> dict[str, str]:
        return {key: value for key, value in self.attributes.items() if key.startswith("data-")}

    @property
    def parent(self) -> "DocElement":
        node = self.element.getparent() if self.element is not None else None
        return DocElement(node, relaxed=self.relaxed)

    @property
    def parents(self) -> DocElements:
        """Ancestors from the direct parent up to the root."""
        if self.element is None:
            return DocElements()
        return self._wrap(list(self.element.iterancestors()))

    @property
    def children(self) -> DocElements:
        if self.element is None:
            return DocElements()
        return self._wrap([child for child in self.element if isinstance(child.tag, str)])

    @property
    def siblings(self) -> DocElements:
        """Element siblings, excluding this element."""
        if self.element is None or self.element.getparent() is None:
            return DocElements()
        parent = self.element.getparent()
        return self._wrap(
            [child for child in parent if isinstance(child.tag, str) and child is not self.element]
        )

    def __str__(self) -> str:
        return self.outer_html

    def __repr__(self) -> str:
        if self.element is None:
            return "DocElement(<absent>)"
        return f"DocElement({self.css_selector!r})"
