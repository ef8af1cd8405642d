"""Tagged parse results: a success value or an error kind, never a raise."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel

from parsing_strings.core.exceptions import (
    NullArgumentError,
    NumberFormatError,
    NumberOverflowError,
)
from parsing_strings.core.types import MaybeText, NumericType
from parsing_strings.parsers import get_parser


class ErrorKind(str, Enum):
    """Failure variants a parse function can raise."""

    NULL_ARGUMENT = "null_argument"
    FORMAT = "format"
    OVERFLOW = "overflow"


class ParseOutcome(BaseModel):
    """Result of running a parse function with its errors captured."""

    numeric_type: NumericType
    text: Optional[str] = None
    value: Any = None
    error: Optional[ErrorKind] = None
    message: str = ""

    model_config = {"frozen": True}

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Return the parsed value, or re-raise the captured error."""
        if self.error is None:
            return self.value
        if self.error is ErrorKind.NULL_ARGUMENT:
            raise NullArgumentError("text")
        if self.error is ErrorKind.OVERFLOW:
            raise NumberOverflowError(self.text or "", self.message)
        raise NumberFormatError(self.text or "", self.message)


def parse_outcome(kind: NumericType | str, text: MaybeText) -> ParseOutcome:
    """Run the parse function for ``kind`` and capture its raised errors.

    Sentinel answers are successes here; only raised errors become failures.
    Unknown kinds still raise UnknownNumericTypeError.
    """
    parser = get_parser(kind)
    numeric_type = NumericType(kind)
    try:
        value = parser(text)
    except NullArgumentError as exc:
        return ParseOutcome(
            numeric_type=numeric_type, text=text,
            error=ErrorKind.NULL_ARGUMENT, message=str(exc),
        )
    except NumberOverflowError as exc:
        return ParseOutcome(
            numeric_type=numeric_type, text=text,
            error=ErrorKind.OVERFLOW, message=str(exc),
        )
    except NumberFormatError as exc:
        return ParseOutcome(
            numeric_type=numeric_type, text=text,
            error=ErrorKind.FORMAT, message=str(exc),
        )
    return ParseOutcome(numeric_type=numeric_type, text=text, value=value)
