"""
Errors raised by the theme compiler.

Both core errors are terminal for the current generation call and are
surfaced to callers unmodified.
"""

from __future__ import annotations


class ThemeError(ValueError):
    """Base class for theme compilation failures."""


class ParseError(ThemeError):
    """A token value string does not match the value grammar."""

    def __init__(self, message: str, value: str):
        super().__init__(message)
        self.value = value


class PaletteReferenceError(ThemeError):
    """A "<key> palette" reference names a color missing from the palette."""

    def __init__(
        self,
        message: str,
        ref: str,
        field_name: str | None = None,
        available: tuple[str, ...] = (),
    ):
        super().__init__(message)
        self.ref = ref
        self.field_name = field_name
        self.available = available
