"""ParsingStrings exception hierarchy."""

from __future__ import annotations

FORMAT_MESSAGE = "Error! Format Exception!"
OVERFLOW_MESSAGE = "Error! Overflow Exception!"


class ParsingStringsError(Exception):
    """Base exception for all ParsingStrings errors."""


class NullArgumentError(ParsingStringsError, TypeError):
    """Input reference is None (not merely empty text)."""

    def __init__(self, param_name: str = "text") -> None:
        self.param_name = param_name
        super().__init__(f"Value cannot be None. (Parameter '{param_name}')")


class NumberFormatError(ParsingStringsError, ValueError):
    """Text is not a valid numeric literal for the target type."""

    def __init__(self, text: str, message: str = FORMAT_MESSAGE) -> None:
        self.text = text
        super().__init__(message)


class NumberOverflowError(ParsingStringsError, OverflowError):
    """Text is a valid literal but outside the target type's range."""

    def __init__(self, text: str, message: str = OVERFLOW_MESSAGE) -> None:
        self.text = text
        super().__init__(message)


class UnknownNumericTypeError(ParsingStringsError, KeyError):
    """No parser is registered for the requested numeric type."""

    def __init__(self, kind: object) -> None:
        self.kind = kind
        super().__init__(f"No parser registered for numeric type {kind!r}")
