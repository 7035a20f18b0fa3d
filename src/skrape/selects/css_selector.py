"""Configurable CSS selector built by selection() and the tag builders."""

from collections.abc import Iterable

from lxml.html import HtmlElement

from skrape.selects.dom_tree_element import DomTreeElement, join_selectors


class CssSelector(DomTreeElement):
    """A CSS selector that can be refined and then queried.

    The raw selector (usually a tag name plus an optional suffix) is merged
    with the with_* constraints; neither replaces the other. Queries run
    against the scope the selector was created from, so nested selections
    search inside the matches of their parent selector.

    Attributes:
        raw_css_selector: Raw CSS, e.g. "slot" or "template#main"
        with_class: Class name(s); a whitespace separated string or an iterable
        with_id: Element id
        with_attribute_key: Attribute that must be present
        with_attribute_keys: Attributes that must all be present
        with_attribute: (key, value) attribute that must match exactly
        with_attributes: (key, value) attributes that must all match

    Examples:
        >>> selector = CssSelector("div", scope=doc, with_class="card")
        >>> selector.with_attribute = ("data-id", "7")
        >>> selector.to_css_selector
        "div.card[data-id='7']"
    """

    def __init__(
        self,
        raw_css_selector: str = "",
        *,
        scope: DomTreeElement,
        with_class: str | Iterable[str] | None = None,
        with_id: str | None = None,
        with_attribute_key: str | None = None,
        with_attribute_keys: list[str] | None = None,
        with_attribute: tuple[str, str] | None = None,
        with_attributes: list[tuple[str, str]] | None = None,
    ) -> None:
        super().__init__(relaxed=scope.relaxed)
        self.scope = scope
        self.raw_css_selector = raw_css_selector
        self.with_class = with_class
        self.with_id = with_id
        self.with_attribute_key = with_attribute_key
        self.with_attribute_keys = with_attribute_keys
        self.with_attribute = with_attribute
        self.with_attributes = with_attributes

    @property
    def to_css_selector(self) -> str:
        """Merged selector string, in the order raw, id, classes, keys, pairs."""
        return (
            self.raw_css_selector.strip()
            + self._id_selector()
            + self._class_selector()
            + self._attribute_key_selector()
            + self._attribute_selector()
        )

    def _id_selector(self) -> str:
        return f"#{self.with_id}" if self.with_id else ""

    def _class_selector(self) -> str:
        if not self.with_class:
            return ""
        if isinstance(self.with_class, str):
            classes = self.with_class.split()
        else:
            classes = list(self.with_class)
        return "".join(f".{name}" for name in classes)

    def _attribute_key_selector(self) -> str:
        keys: list[str] = []
        if self.with_attribute_key:
            keys.append(self.with_attribute_key)
        keys.extend(self.with_attribute_keys or [])
        return "".join(f"[{key}]" for key in keys)

    def _attribute_selector(self) -> str:
        pairs: list[tuple[str, str]] = []
        if self.with_attribute:
            pairs.append(self.with_attribute)
        pairs.extend(self.with_attributes or [])
        return "".join(f"[{key}='{value}']" for key, value in pairs)

    def _query(self, css_selector: str) -> list[HtmlElement]:
        return self.scope._query(join_selectors(self.to_css_selector, css_selector))

    def __str__(self) -> str:
        return self.to_css_selector

    def __repr__(self) -> str:
        return f"CssSelector({self.to_css_selector!r})"
