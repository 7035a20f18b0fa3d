"""Selectors for text content tags (block level grouping)."""

from typing import Any

from skrape.selects.dom_tree_element import DomTreeElement
from skrape.types import Init, T


def div(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    return scope.selection(f"div{css_selector}", init)


def p(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    return scope.selection(f"p{css_selector}", init)


def ul(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    return scope.selection(f"ul{css_selector}", init)


def ol(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    return scope.selection(f"ol{css_selector}", init)


def li(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    return scope.selection(f"li{css_selector}", init)


def dl(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    return scope.selection(f"dl{css_selector}", init)


def dt(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    return scope.selection(f"dt{css_selector}", init)


def dd(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    return scope.selection(f"dd{css_selector}", init)


def pre(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    return scope.selection(f"pre{css_selector}", init)


def blockquote(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    return scope.selection(f"blockquote{css_selector}", init)


def figure(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    return scope.selection(f"figure{css_selector}", init)


def figcaption(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    return scope.selection(f"figcaption{css_selector}", init)


def hr(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    return scope.selection(f"hr{css_selector}", init)
