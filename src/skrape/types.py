"""Type definitions for skrape.

Callbacks passed to selection(), find_all(), find_first() and the tag
builders receive their context (a CssSelector, DocElements or DocElement)
as the only argument and may return anything.
"""

from collections.abc import Callable
from typing import Any, TypeVar

T = TypeVar("T")

Init = Callable[[Any], T]
