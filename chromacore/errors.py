"""Exceptions raised by chromacore.

The default construction path never raises: out-of-range numbers are
saturated. These exceptions belong to the opt-in strict constructors and to
text parsing.
"""
from __future__ import annotations
from enum import Enum


class OutOfRangeError(ValueError):
    """A channel value fell outside its domain in a strict constructor."""

    def __init__(self, channel: str, value: float, minimum: float, maximum: float) -> None:
        self.channel = channel
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"channel {channel!r} expects a value in [{minimum}, {maximum}], got {value!r}"
        )


class ParseErrorKind(str, Enum):
    INVALID_HEX_LENGTH = "invalid_hex_length"
    INVALID_HEX_CHARS = "invalid_hex_chars"
    MISSING_PARENS = "missing_parens"
    INVALID_NUMBER = "invalid_number"
    INVALID_PARAM_COUNT = "invalid_param_count"
    UNKNOWN_FORMAT = "unknown_format"


_MESSAGES = {
    ParseErrorKind.INVALID_HEX_LENGTH: "hex color must have 3, 4, 6 or 8 digits",
    ParseErrorKind.INVALID_HEX_CHARS: "hex color contains non-hexadecimal characters",
    ParseErrorKind.MISSING_PARENS: "functional notation is missing parentheses",
    ParseErrorKind.INVALID_NUMBER: "functional notation contains an unparsable number",
    ParseErrorKind.INVALID_PARAM_COUNT: "functional notation has the wrong number of values",
    ParseErrorKind.UNKNOWN_FORMAT: "unsupported color notation",
}


class ColorParseError(ValueError):
    """A color string could not be parsed."""

    def __init__(self, kind: ParseErrorKind, text: str) -> None:
        self.kind = kind
        self.text = text
        super().__init__(f"{_MESSAGES[kind]}: {text!r}")
