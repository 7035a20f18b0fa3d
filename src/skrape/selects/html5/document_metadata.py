"""Selectors for document metadata tags."""

from typing import Any

from skrape.selects.dom_tree_element import DomTreeElement
from skrape.types import Init, T


def title(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    return scope.selection(f"title{css_selector}", init)


def meta(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    return scope.selection(f"meta{css_selector}", init)


def link(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    return scope.selection(f"link{css_selector}", init)


def base(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    return scope.selection(f"base{css_selector}", init)


def style(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    return scope.selection(f"style{css_selector}", init)
