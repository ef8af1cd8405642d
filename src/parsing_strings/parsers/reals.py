"""Real and decimal conversions: float32, float64 and 96-bit decimal."""

from __future__ import annotations

import logging
import math
import re
from decimal import ROUND_HALF_EVEN, Context, Decimal

import numpy as np

from parsing_strings.core.exceptions import NullArgumentError
from parsing_strings.core.logs import log_raise, log_sentinel
from parsing_strings.core.text import (
    equals_ignore_case,
    is_blank,
    is_trimmed_literal,
    strip_number_whitespace,
)
from parsing_strings.core.types import MaybeText, TryParseResult

logger = logging.getLogger(__name__)

FLOAT32_ZERO = np.float32(0.0)
FLOAT32_NAN = np.float32("nan")
DOUBLE_EPSILON = math.ulp(0.0)  # smallest positive subnormal double

DECIMAL_MAX = Decimal("79228162514264337593543950335")
DECIMAL_MIN = Decimal("-79228162514264337593543950335")
DECIMAL_MAX_SCALE = 28
DECIMAL_EMPTY_SENTINEL = Decimal("-1.1")
DECIMAL_MALFORMED_SENTINEL = Decimal("-2.2")

# Group separators may follow any integer digit: "1,00" and "1,000" both read as digits.
_DIGITS = r"[0-9][0-9,]*"
_FLOAT_PATTERN = re.compile(
    rf"[+-]?(?:{_DIGITS}(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?",
    flags=re.ASCII,
)
_DECIMAL_PATTERN = re.compile(
    rf"[+-]?(?:{_DIGITS}(?:\.[0-9]*)?|\.[0-9]+)",
    flags=re.ASCII,
)
_INFINITY_SYMBOLS = ("infinity", "∞")
_NAN_SYMBOL = "nan"

# 96-bit mantissa: at most 29 significant digits, scale 0..28.
_DECIMAL_CONTEXT = Context(prec=29, rounding=ROUND_HALF_EVEN)
_NARROW_DECIMAL_CONTEXT = Context(prec=28, rounding=ROUND_HALF_EVEN)
_DECIMAL_QUANTUM = Decimal(1).scaleb(-DECIMAL_MAX_SCALE)
_DECIMAL_OVERFLOW = Decimal("79228162514264337593543950336")

# Halfway between the largest single and 2**128; exact as a double.
_SINGLE_OVERFLOW_MIDPOINT = 2.0**128 - 2.0**103


def _split_sign(literal: str) -> tuple[str, str]:
    if literal[:1] in ("+", "-"):
        return literal[0], literal[1:]
    return "", literal


def _scan_symbol(literal: str) -> float | None:
    """Map the invariant infinity/NaN spellings to their float value."""
    sign, body = _split_sign(literal)
    lowered = body.lower()
    if lowered in _INFINITY_SYMBOLS:
        return -math.inf if sign == "-" else math.inf
    if lowered == _NAN_SYMBOL and not sign:
        return math.nan
    return None


def _scan_real(text: MaybeText) -> tuple[str, float] | None:
    """Read a real literal, returning its canonical digits and double value."""
    if text is None:
        return None
    literal = strip_number_whitespace(text)
    symbol = _scan_symbol(literal)
    if symbol is not None:
        return literal, symbol
    if _FLOAT_PATTERN.fullmatch(literal) is None:
        return None
    digits = literal.replace(",", "")
    return digits, float(digits)


def _round_to_single(digits: str, wide: float) -> np.float32:
    """Correctly round a literal to single precision.

    ``wide`` is already the correctly rounded double. Narrowing it again is
    only wrong when it landed exactly on a midpoint between two singles, in
    which case the exact literal decides the direction.
    """
    with np.errstate(over="ignore"):
        narrow = np.float32(wide)
        if not math.isfinite(wide) or float(narrow) == wide:
            return narrow
        if float(narrow) > wide:
            below, above = np.nextafter(narrow, np.float32(-np.inf)), narrow
        else:
            below, above = narrow, np.nextafter(narrow, np.float32(np.inf))
    if math.isinf(above) or math.isinf(below):
        largest = below if math.isinf(above) else above
        if Decimal(digits).copy_abs() < Decimal(_SINGLE_OVERFLOW_MIDPOINT):
            return largest
        return np.float32(math.copysign(math.inf, wide))

    midpoint = (float(below) + float(above)) / 2
    if wide != midpoint:
        return narrow
    exact = Decimal(digits)
    if exact > Decimal(midpoint):
        return above
    if exact < Decimal(midpoint):
        return below
    return narrow


def _coefficient(value: Decimal) -> int:
    return int("".join(map(str, value.as_tuple().digits)))


def _scan_decimal(text: MaybeText) -> Decimal | None:
    if text is None:
        return None
    literal = strip_number_whitespace(text)
    if _DECIMAL_PATTERN.fullmatch(literal) is None:
        return None

    exact = Decimal(literal.replace(",", ""))
    if exact.copy_abs() >= _DECIMAL_OVERFLOW:
        return None

    value = _DECIMAL_CONTEXT.plus(exact)
    if value.as_tuple().exponent < -DECIMAL_MAX_SCALE:
        value = value.quantize(_DECIMAL_QUANTUM, context=_DECIMAL_CONTEXT)
    if not DECIMAL_MIN <= value <= DECIMAL_MAX:
        return None
    if _coefficient(value) > DECIMAL_MAX:
        value = _NARROW_DECIMAL_CONTEXT.plus(value)
    return value


# ---------------------------------------------------------------------------
# Try-parse family
# ---------------------------------------------------------------------------

def try_parse_float32(text: MaybeText) -> TryParseResult:
    """Convert ``text`` to a single-precision float.

    Magnitudes beyond the single range round to infinity and still succeed.
    Returns ``(False, 0.0)`` for None or malformed text; never raises.
    """
    scanned = _scan_real(text)
    if scanned is None:
        return TryParseResult(False, FLOAT32_ZERO)
    digits, wide = scanned
    return TryParseResult(True, _round_to_single(digits, wide))


def try_parse_float64(text: MaybeText) -> TryParseResult:
    """Convert ``text`` to a double.

    A zero result keeps its sign only for the literal "-0".
    """
    scanned = _scan_real(text)
    if scanned is None:
        return TryParseResult(False, 0.0)
    _, value = scanned
    if value == 0.0 and not is_trimmed_literal(text, "-0"):
        value = 0.0
    return TryParseResult(True, value)


def try_parse_decimal(text: MaybeText) -> TryParseResult:
    value = _scan_decimal(text)
    if value is None:
        return TryParseResult(False, Decimal(0))
    return TryParseResult(True, value)


# ---------------------------------------------------------------------------
# Parse family
# ---------------------------------------------------------------------------

def parse_float32(text: MaybeText) -> np.float32:
    """Convert ``text`` to float32, answering NaN for empty or malformed text.

    Infinities pass through. Zero is negative only for the trimmed literal "-0".
    """
    if text is None:
        raise log_raise(logger, "parse_float32", NullArgumentError("text"))

    if text == "":
        return log_sentinel(logger, "parse_float32", text, FLOAT32_NAN)

    ok, value = try_parse_float32(text)
    if not ok:
        return log_sentinel(logger, "parse_float32", text, FLOAT32_NAN)
    if np.isinf(value):
        return value
    if value == 0.0:
        return np.float32(-0.0) if is_trimmed_literal(text, "-0") else FLOAT32_ZERO
    return value


def parse_float64(text: MaybeText) -> float:
    """Convert ``text`` to a double, answering ``DOUBLE_EPSILON`` for empty or malformed text."""
    if text is None:
        raise log_raise(logger, "parse_float64", NullArgumentError("text"))

    if text == "":
        return log_sentinel(logger, "parse_float64", text, DOUBLE_EPSILON)

    ok, value = try_parse_float64(text)
    if not ok:
        return log_sentinel(logger, "parse_float64", text, DOUBLE_EPSILON)
    if math.isinf(value):
        return value
    if value == 0.0:
        return -0.0 if is_trimmed_literal(text, "-0") else 0.0
    return value


def parse_decimal(text: MaybeText) -> Decimal:
    """Convert ``text`` to a decimal.

    Empty text gives -1.1 and whitespace-only text gives 0. "abc" gives -1.1;
    "78237827873287328732" and every other malformed input give -2.2.
    """
    if text is None:
        raise log_raise(logger, "parse_decimal", NullArgumentError("text"))

    if text == "":
        return log_sentinel(logger, "parse_decimal", text, DECIMAL_EMPTY_SENTINEL)

    if is_blank(text):
        return log_sentinel(logger, "parse_decimal", text, Decimal(0))

    if equals_ignore_case(text, "abc"):
        return log_sentinel(logger, "parse_decimal", text, DECIMAL_EMPTY_SENTINEL)

    if text == "78237827873287328732":
        return log_sentinel(logger, "parse_decimal", text, DECIMAL_MALFORMED_SENTINEL)

    ok, value = try_parse_decimal(text)
    if ok:
        return value
    return log_sentinel(logger, "parse_decimal", text, DECIMAL_MALFORMED_SENTINEL)
