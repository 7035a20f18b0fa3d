"""Selectors for content sectioning tags."""

from typing import Any

from skrape.selects.dom_tree_element import DomTreeElement
from skrape.types import Init, T


def h1(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    return scope.selection(f"h1{css_selector}", init)


def h2(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    return scope.selection(f"h2{css_selector}", init)


def h3(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    return scope.selection(f"h3{css_selector}", init)


def h4(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    return scope.selection(f"h4{css_selector}", init)


def h5(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    return scope.selection(f"h5{css_selector}", init)


def h6(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    return scope.selection(f"h6{css_selector}", init)


def header(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    return scope.selection(f"header{css_selector}", init)


def footer(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    return scope.selection(f"footer{css_selector}", init)


def main(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    return scope.selection(f"main{css_selector}", init)


def nav(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    return scope.selection(f"nav{css_selector}", init)


def section(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    return scope.selection(f"section{css_selector}", init)


def article(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    return scope.selection(f"article{css_selector}", init)


def aside(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    return scope.selection(f"aside{css_selector}", init)


def address(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    return scope.selection(f"address{css_selector}", init)
