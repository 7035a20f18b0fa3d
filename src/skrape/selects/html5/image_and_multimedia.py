"""Selectors for image and multimedia tags."""

from typing import Any

from skrape.selects.dom_tree_element import DomTreeElement
from skrape.types import Init, T


def img(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    return scope.selection(f"img{css_selector}", init)


def audio(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    return scope.selection(f"audio{css_selector}", init)


def video(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    return scope.selection(f"video{css_selector}", init)


def picture(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    return scope.selection(f"picture{css_selector}", init)


def source(
    scope: DomTreeElement, css_selector: str = "", init: "Init[T] | None" = None
) -> Any:
    return scope.selection(f"source{css_selector}", init)
