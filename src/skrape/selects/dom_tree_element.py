"""Shared query surface for documents, elements and selectors.

Every scope (a parsed Doc, a single DocElement, or a CssSelector built from
either) answers the same lookups. Concrete scopes only say how a CSS query
runs against them; everything else is derived here.
"""

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, overload

from lxml.html import HtmlElement

from skrape.exceptions import ElementNotFoundError
from skrape.types import Init, T

if TYPE_CHECKING:
    from skrape.selects.css_selector import CssSelector
    from skrape.selects.doc_element import DocElement
    from skrape.selects.doc_elements import DocElements

logger = logging.getLogger(__name__)


def split_selector_group(selector: str) -> list[str]:
    """Split a selector group on its top-level commas.

    Commas inside brackets, parentheses or quoted strings are kept.

    Examples:
        >>> split_selector_group("h1, h2[title='a, b']")
        ['h1', "h2[title='a, b']"]
    """
    parts: list[str] = []
    current: list[str] = []
    depth = 0
    quote: str | None = None

    for char in selector:
        if quote:
            if char == quote:
                quote = None
        elif char in "'\"":
            quote = char
        elif char in "([":
            depth += 1
        elif char in ")]":
            depth -= 1
        elif char == "," and depth == 0:
            parts.append("".join(current).strip())
            current = []
            continue
        current.append(char)

    parts.append("".join(current).strip())
    return [part for part in parts if part]


def join_selectors(*selectors: str) -> str:
    """Join selectors with the descendant combinator, skipping empty parts.

    Selector groups are distributed, so every alternative of an outer
    group is combined with every alternative of the inner one.

    Examples:
        >>> join_selectors("div.foo", "h1")
        'div.foo h1'
        >>> join_selectors("", "h1")
        'h1'
        >>> join_selectors("h1, h2", "span")
        'h1 span, h2 span'
    """
    groups = [""]
    for selector in selectors:
        alternatives = split_selector_group(selector or "")
        if not alternatives:
            continue
        groups = [
            f"{group} {alternative}".strip() for group in groups for alternative in alternatives
        ]
    return ", ".join(group for group in groups if group)


class DomTreeElement(ABC):
    """Base class for every queryable scope.

    Attributes:
        relaxed: If True, lookups that match nothing return an absent
                 DocElement. If False, they raise ElementNotFoundError.
    """

    def __init__(self, relaxed: bool = True) -> None:
        self.relaxed = relaxed

    @property
    @abstractmethod
    def to_css_selector(self) -> str:
        """CSS selector describing this scope ("" for a whole document)."""

    @abstractmethod
    def _query(self, css_selector: str) -> list[HtmlElement]:
        """Return nodes in scope matching css_selector.

        An empty selector means every element in scope.
        """

    def _wrap(self, nodes: list[HtmlElement]) -> "DocElements":
        from skrape.selects.doc_element import DocElement
        from skrape.selects.doc_elements import DocElements

        return DocElements(DocElement(node, relaxed=self.relaxed) for node in nodes)

    @property
    def all_elements(self) -> "DocElements":
        """Every element in this scope, in document order."""
        return self._wrap(self._query(""))

    @property
    def is_present(self) -> bool:
        """True if this scope contains at least one element."""
        return len(self._query("")) > 0

    @overload
    def find_all(self, css_selector: str = "", init: None = None) -> "DocElements": ...

    @overload
    def find_all(self, css_selector: str, init: "Init[T]") -> T: ...

    def find_all(self, css_selector: str = "", init: "Init[T] | None" = None) -> Any:
        """Find all elements in scope matching css_selector.

        Args:
            css_selector: CSS query run relative to this scope. Empty selects
                          every element in scope (including the scope itself).
            init: Optional callback receiving the DocElements; its return
                  value is returned instead of the collection.

        Returns:
            DocElements, or init's result

        Examples:
            >>> doc = html_document("<p class='a'>x</p><p>y</p>")
            >>> doc.find_all("p").text
            'x y'
            >>> doc.find_all("p", lambda elements: len(elements))
            2
        """
        elements = self._wrap(self._query(css_selector))
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Selector '%s' matched %d element(s)",
                join_selectors(self.to_css_selector, css_selector),
                len(elements),
            )
        if init is not None:
            return init(elements)
        return elements

    def find_by_index(
        self,
        index: int,
        css_selector: str = "",
        init: "Init[T] | None" = None,
    ) -> Any:
        """Find the element at index among the matches of css_selector.

        Negative indexes count from the end, like list indexing.

        Raises:
            ElementNotFoundError: If nothing sits at index and the scope is strict
        """
        from skrape.selects.doc_element import DocElement

        elements = self.find_all(css_selector)
        try:
            element = elements[index]
        except IndexError:
            if not self.relaxed:
                raise ElementNotFoundError(
                    join_selectors(self.to_css_selector, css_selector), index
                ) from None
            element = DocElement(None, relaxed=self.relaxed)

        if init is not None:
            return init(element)
        return element

    def find_first(self, css_selector: str = "", init: "Init[T] | None" = None) -> Any:
        """First match of css_selector, or an absent DocElement."""
        return self.find_by_index(0, css_selector, init)

    def find_second(self, css_selector: str = "", init: "Init[T] | None" = None) -> Any:
        return self.find_by_index(1, css_selector, init)

    def find_third(self, css_selector: str = "", init: "Init[T] | None" = None) -> Any:
        return self.find_by_index(2, css_selector, init)

    def find_last(self, css_selector: str = "", init: "Init[T] | None" = None) -> Any:
        return self.find_by_index(-1, css_selector, init)

    @overload
    def selection(self, css_selector: str, init: None = None) -> "CssSelector": ...

    @overload
    def selection(self, css_selector: str, init: "Init[T]") -> T: ...

    def selection(self, css_selector: str, init: "Init[T] | None" = None) -> Any:
        """Build a CssSelector scoped to this element and run init on it.

        The selector object is handed to init as its only argument, so the
        callback can refine it (with_class, with_id, ...) before querying.

        Args:
            css_selector: Raw CSS selector, e.g. "slot" or "div.card"
            init: Optional callback receiving the CssSelector

        Returns:
            init's result, or the CssSelector itself when init is None

        Examples:
            >>> doc = html_document('<slot name="title">Hello</slot>')
            >>> def first_title(selector):
            ...     selector.with_attribute = ("name", "title")
            ...     return selector.find_first().text
            >>> doc.selection("slot", first_title)
            'Hello'
        """
        from skrape.selects.css_selector import CssSelector

        selector = CssSelector(css_selector, scope=self)
        if init is not None:
            return init(selector)
        return selector

    @property
    def each_text(self) -> list[str]:
        """Text of every element in scope."""
        return [element.text for element in self.all_elements]

    def each_attribute(self, key: str) -> list[str]:
        """Value of attribute key for every element in scope that carries it."""
        return [
            element.attribute(key) for element in self.all_elements if element.has_attribute(key)
        ]

    @property
    def each_href(self) -> list[str]:
        return self.each_attribute("href")

    @property
    def each_src(self) -> list[str]:
        return self.each_attribute("src")

    @property
    def each_link(self) -> dict[str, str]:
        """Map of link text to href for every element in scope with an href.

        Later links with the same text win.
        """
        return {
            element.text: element.attribute("href")
            for element in self.all_elements
            if element.has_attribute("href")
        }

    @property
    def each_image(self) -> dict[str, str]:
        """Map of alt text to src for every <img> in scope with a src."""
        return {
            element.attribute("alt"): element.attribute("src")
            for element in self.all_elements
            if element.tag_name == "img" and element.has_attribute("src")
        }
