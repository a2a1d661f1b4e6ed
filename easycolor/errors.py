"""Error types raised by easycolor constructors and parsers."""
from __future__ import annotations
from typing import Any, Tuple


class ColorError(ValueError):
    """Base class for every color construction or parsing failure."""


class ColorFormatError(ColorError):
    """Text does not match the grammar of the requested color type."""

    def __init__(self, text: str, type_name: str) -> None:
        self.text = text
        self.type_name = type_name
        super().__init__(f"{type_name}: '{text}' format error")


class ColorValueError(ColorError):
    """Channel values are well-formed but outside their valid range."""

    def __init__(self, type_name: str, values: Tuple[Any, ...], bound: str) -> None:
        self.type_name = type_name
        self.values = tuple(values)
        self.bound = bound
        args = ",".join(str(v) for v in self.values)
        super().__init__(f"{type_name}: args ({args}) value error, {bound}")
