"""Selectors for inline text semantics tags."""

from typing import Any

from skrape.selects.dom_tree_element import DomTreeElement
from skrape.types import Init, T


def a(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    return scope.selection(f"a{css_selector}", init)


def span(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    return scope.selection(f"span{css_selector}", init)


def b(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    return scope.selection(f"b{css_selector}", init)


def i(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    return scope.selection(f"i{css_selector}", init)


def em(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    return scope.selection(f"em{css_selector}", init)


def strong(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    return scope.selection(f"strong{css_selector}", init)


def code(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    return scope.selection(f"code{css_selector}", init)


def small(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    return scope.selection(f"small{css_selector}", init)


def mark(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    return scope.selection(f"mark{css_selector}", init)


def abbr(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    return scope.selection(f"abbr{css_selector}", init)


def br(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    return scope.selection(f"br{css_selector}", init)


def time(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    return scope.selection(f"time{css_selector}", init)
