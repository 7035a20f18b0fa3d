"""Collection of matched elements."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from skrape.selects.doc_element import DocElement


class DocElements(list["DocElement"]):
    """A list of DocElement with aggregate views over all of them."""

    @property
    def text(self) -> str:
        """Text of all elements joined by single spaces."""
        return " ".join(text for text in (element.text for element in self) if text)

    @property
    def html(self) -> str:
        return "\n".join(element.html for element in self)

    @property
    def outer_html(self) -> str:
        return "\n".join(element.outer_html for element in self)

    @property
    def each_text(self) -> list[str]:
        return [element.text for element in self]

    @property
    def is_present(self) -> bool:
        return len(self) > 0
