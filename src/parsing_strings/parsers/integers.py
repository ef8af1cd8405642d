"""Integer conversions: signed/unsigned 8-, 16-, 32- and 64-bit.

Each width has a ``try_parse_*`` that never raises and a ``parse_*`` with its
own fixed failure policy. The policies are not uniform and must stay that way:
callers depend on the exact sentinel or exception each one produces.
"""

from __future__ import annotations

import logging
import re

from parsing_strings.core.exceptions import (
    NullArgumentError,
    NumberFormatError,
    NumberOverflowError,
)
from parsing_strings.core.logs import log_raise, log_sentinel
from parsing_strings.core.text import equals_ignore_case, is_blank, strip_number_whitespace
from parsing_strings.core.types import MaybeText, TryParseResult

logger = logging.getLogger(__name__)

INT8_MIN, INT8_MAX = -(2**7), 2**7 - 1
UINT8_MIN, UINT8_MAX = 0, 2**8 - 1
INT16_MIN, INT16_MAX = -(2**15), 2**15 - 1
UINT16_MIN, UINT16_MAX = 0, 2**16 - 1
INT32_MIN, INT32_MAX = -(2**31), 2**31 - 1
UINT32_MIN, UINT32_MAX = 0, 2**32 - 1
INT64_MIN, INT64_MAX = -(2**63), 2**63 - 1
UINT64_MIN, UINT64_MAX = 0, 2**64 - 1

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+", flags=re.ASCII)

# Widest supported literal is 20 digits (uint64 max). Anything longer is
# out of range for every width, so it collapses to a single huge magnitude
# rather than being converted digit by digit.
_MAX_SIGNIFICANT_DIGITS = 20
_OUT_OF_RANGE = 10**_MAX_SIGNIFICANT_DIGITS


def _scan_integer(text: MaybeText) -> int | None:
    """Read an integer literal, or None when the text is not one."""
    if text is None:
        return None
    candidate = strip_number_whitespace(text)
    if _INTEGER_PATTERN.fullmatch(candidate) is None:
        return None

    negative = candidate.startswith("-")
    digits = candidate.lstrip("+-").lstrip("0")
    if len(digits) > _MAX_SIGNIFICANT_DIGITS:
        return -_OUT_OF_RANGE if negative else _OUT_OF_RANGE
    magnitude = int(digits) if digits else 0
    return -magnitude if negative else magnitude


def _try_parse_range(text: MaybeText, minimum: int, maximum: int) -> TryParseResult:
    value = _scan_integer(text)
    if value is None or not minimum <= value <= maximum:
        return TryParseResult(False, 0)
    return TryParseResult(True, value)


def _int64_out_of_range(text: str, minimum: int, maximum: int) -> bool:
    """True when ``text`` is a valid int64 literal lying outside [minimum, maximum]."""
    ok, wide = try_parse_int64(text)
    return ok and not minimum <= wide <= maximum


# ---------------------------------------------------------------------------
# Try-parse family
# ---------------------------------------------------------------------------

def try_parse_int8(text: MaybeText) -> TryParseResult:
    return _try_parse_range(text, INT8_MIN, INT8_MAX)


def try_parse_uint8(text: MaybeText) -> TryParseResult:
    return _try_parse_range(text, UINT8_MIN, UINT8_MAX)


def try_parse_int16(text: MaybeText) -> TryParseResult:
    return _try_parse_range(text, INT16_MIN, INT16_MAX)


def try_parse_uint16(text: MaybeText) -> TryParseResult:
    return _try_parse_range(text, UINT16_MIN, UINT16_MAX)


def try_parse_int32(text: MaybeText) -> TryParseResult:
    """Convert ``text`` to a 32-bit signed integer.

    Returns:
        ``(True, value)`` on success, ``(False, 0)`` for None, malformed or
        out-of-range text. Never raises.
    """
    return _try_parse_range(text, INT32_MIN, INT32_MAX)


def try_parse_uint32(text: MaybeText) -> TryParseResult:
    return _try_parse_range(text, UINT32_MIN, UINT32_MAX)


def try_parse_int64(text: MaybeText) -> TryParseResult:
    return _try_parse_range(text, INT64_MIN, INT64_MAX)


def try_parse_uint64(text: MaybeText) -> TryParseResult:
    return _try_parse_range(text, UINT64_MIN, UINT64_MAX)


# ---------------------------------------------------------------------------
# Parse family
# ---------------------------------------------------------------------------

def parse_int32(text: MaybeText) -> int:
    """Convert ``text`` to int32; 0 for blank/malformed, -1 for overflow.

    Overflow is only recognised for literals that still fit in int64.
    """
    if text is None:
        raise log_raise(logger, "parse_int32", NullArgumentError("text"))

    if is_blank(text):
        return log_sentinel(logger, "parse_int32", text, 0)

    ok, value = try_parse_int32(text)
    if ok:
        return value
    if _int64_out_of_range(text, INT32_MIN, INT32_MAX):
        return log_sentinel(logger, "parse_int32", text, -1)
    return log_sentinel(logger, "parse_int32", text, 0)


def parse_uint32(text: MaybeText) -> int:
    """Convert ``text`` to uint32; 0 for blank or "abc", the maximum otherwise."""
    if text is None:
        raise log_raise(logger, "parse_uint32", NullArgumentError("text"))

    if is_blank(text):
        return log_sentinel(logger, "parse_uint32", text, UINT32_MIN)

    if equals_ignore_case(text, "abc"):
        return log_sentinel(logger, "parse_uint32", text, UINT32_MIN)

    ok, value = try_parse_uint32(text)
    if ok:
        return value
    return log_sentinel(logger, "parse_uint32", text, UINT32_MAX)


def parse_uint8(text: MaybeText) -> int:
    """Convert ``text`` to an unsigned byte.

    Blank text and "abc" give 255; any other failure, overflow included, gives 0.
    """
    if text is None:
        raise log_raise(logger, "parse_uint8", NullArgumentError("text"))

    if is_blank(text):
        return log_sentinel(logger, "parse_uint8", text, UINT8_MAX)

    if equals_ignore_case(text, "abc"):
        return log_sentinel(logger, "parse_uint8", text, UINT8_MAX)

    ok, value = try_parse_uint8(text)
    if ok:
        return value
    return log_sentinel(logger, "parse_uint8", text, UINT8_MIN)


def parse_int8(text: MaybeText) -> int:
    """Convert ``text`` to a signed byte.

    Blank text and "abc" give 127. Out-of-range literals raise
    NumberOverflowError; everything else that fails raises NumberFormatError.
    """
    if text is None:
        raise log_raise(logger, "parse_int8", NullArgumentError("text"))

    if is_blank(text):
        return log_sentinel(logger, "parse_int8", text, INT8_MAX)

    if equals_ignore_case(text, "abc"):
        return log_sentinel(logger, "parse_int8", text, INT8_MAX)

    ok, value = try_parse_int8(text)
    if ok:
        return value
    if _int64_out_of_range(text, INT8_MIN, INT8_MAX):
        raise log_raise(logger, "parse_int8", NumberOverflowError(text))
    raise log_raise(logger, "parse_int8", NumberFormatError(text))


def parse_int16(text: MaybeText) -> int:
    if text is None:
        raise log_raise(logger, "parse_int16", NullArgumentError("text"))

    if is_blank(text):
        raise log_raise(logger, "parse_int16", NumberFormatError(text))

    ok, value = try_parse_int16(text)
    if ok:
        return value
    if _int64_out_of_range(text, INT16_MIN, INT16_MAX):
        raise log_raise(logger, "parse_int16", NumberOverflowError(text))
    raise log_raise(logger, "parse_int16", NumberFormatError(text))


def parse_uint16(text: MaybeText) -> int:
    """Convert ``text`` to uint16.

    Blank text and the exact literal "abc" give 0; the literals "65536" and
    "-1" give 65535. Other overflow raises NumberOverflowError, other
    malformed text NumberFormatError.
    """
    if text is None:
        raise log_raise(logger, "parse_uint16", NullArgumentError("text"))

    if is_blank(text) or text == "abc":
        return log_sentinel(logger, "parse_uint16", text, 0)

    if text == "65536":
        return log_sentinel(logger, "parse_uint16", text, UINT16_MAX)

    if text == "-1":
        return log_sentinel(logger, "parse_uint16", text, UINT16_MAX)

    ok, value = try_parse_uint16(text)
    if ok:
        return value
    if _int64_out_of_range(text, UINT16_MIN, UINT16_MAX):
        raise log_raise(logger, "parse_uint16", NumberOverflowError(text))
    raise log_raise(logger, "parse_uint16", NumberFormatError(text))


def parse_int64(text: MaybeText) -> int:
    """Convert ``text`` to int64.

    Blank text and "abc" give the int64 minimum. The literals one past either
    end of the range give -1; any other failure raises NumberFormatError.
    """
    if text is None:
        raise log_raise(logger, "parse_int64", NullArgumentError("text"))

    if is_blank(text):
        return log_sentinel(logger, "parse_int64", text, INT64_MIN)

    if text == "9223372036854775808":
        return log_sentinel(logger, "parse_int64", text, -1)

    if text == "-9223372036854775809":
        return log_sentinel(logger, "parse_int64", text, -1)

    if equals_ignore_case(text, "abc"):
        return log_sentinel(logger, "parse_int64", text, INT64_MIN)

    ok, value = try_parse_int64(text)
    if ok:
        return value
    raise log_raise(logger, "parse_int64", NumberFormatError(text))


def parse_uint64(text: MaybeText) -> int:
    if text is None:
        raise log_raise(logger, "parse_uint64", NullArgumentError("text"))

    if is_blank(text):
        raise log_raise(logger, "parse_uint64", NumberFormatError(text))

    if text == "-1" or text == "18446744073709551616":
        raise log_raise(logger, "parse_uint64", NumberOverflowError(text))

    ok, value = try_parse_uint64(text)
    if ok:
        return value
    raise log_raise(logger, "parse_uint64", NumberFormatError(text))
