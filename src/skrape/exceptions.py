"""Custom exceptions for skrape."""


class SkrapeError(Exception):
    """Base exception for all skrape errors."""


class ConfigError(SkrapeError):
    """Raised when configuration is invalid or cannot be loaded."""


class ElementNotFoundError(SkrapeError):
    """Raised by a strict (non-relaxed) lookup that matched no element.

    Relaxed scopes never raise this; they hand back an absent DocElement instead.
    """

    def __init__(self, css_selector: str, index: int = 0) -> None:
        self.css_selector = css_selector
        self.index = index
        super().__init__(f"Could not find element '{css_selector}' by index {index}")
