"""Try-parse and parse functions for every supported numeric type."""

from __future__ import annotations

from parsing_strings.core.exceptions import UnknownNumericTypeError
from parsing_strings.core.types import NumericType, Parser, TryParser
from parsing_strings.parsers.integers import (
    parse_int8,
    parse_int16,
    parse_int32,
    parse_int64,
    parse_uint8,
    parse_uint16,
    parse_uint32,
    parse_uint64,
    try_parse_int8,
    try_parse_int16,
    try_parse_int32,
    try_parse_int64,
    try_parse_uint8,
    try_parse_uint16,
    try_parse_uint32,
    try_parse_uint64,
)
from parsing_strings.parsers.reals import (
    parse_decimal,
    parse_float32,
    parse_float64,
    try_parse_decimal,
    try_parse_float32,
    try_parse_float64,
)

TRY_PARSERS: dict[NumericType, TryParser] = {
    NumericType.INT8: try_parse_int8,
    NumericType.UINT8: try_parse_uint8,
    NumericType.INT16: try_parse_int16,
    NumericType.UINT16: try_parse_uint16,
    NumericType.INT32: try_parse_int32,
    NumericType.UINT32: try_parse_uint32,
    NumericType.INT64: try_parse_int64,
    NumericType.UINT64: try_parse_uint64,
    NumericType.FLOAT32: try_parse_float32,
    NumericType.FLOAT64: try_parse_float64,
    NumericType.DECIMAL: try_parse_decimal,
}

PARSERS: dict[NumericType, Parser] = {
    NumericType.INT8: parse_int8,
    NumericType.UINT8: parse_uint8,
    NumericType.INT16: parse_int16,
    NumericType.UINT16: parse_uint16,
    NumericType.INT32: parse_int32,
    NumericType.UINT32: parse_uint32,
    NumericType.INT64: parse_int64,
    NumericType.UINT64: parse_uint64,
    NumericType.FLOAT32: parse_float32,
    NumericType.FLOAT64: parse_float64,
    NumericType.DECIMAL: parse_decimal,
}


def _resolve(kind: NumericType | str) -> NumericType:
    try:
        return NumericType(kind)
    except ValueError as exc:
        raise UnknownNumericTypeError(kind) from exc


def get_try_parser(kind: NumericType | str) -> TryParser:
    """Look up the try-parse function for ``kind`` (enum member or its value)."""
    return TRY_PARSERS[_resolve(kind)]


def get_parser(kind: NumericType | str) -> Parser:
    """Look up the parse function for ``kind`` (enum member or its value)."""
    return PARSERS[_resolve(kind)]


__all__ = [
    "PARSERS",
    "TRY_PARSERS",
    "get_parser",
    "get_try_parser",
    "parse_decimal",
    "parse_float32",
    "parse_float64",
    "parse_int8",
    "parse_int16",
    "parse_int32",
    "parse_int64",
    "parse_uint8",
    "parse_uint16",
    "parse_uint32",
    "parse_uint64",
    "try_parse_decimal",
    "try_parse_float32",
    "try_parse_float64",
    "try_parse_int8",
    "try_parse_int16",
    "try_parse_int32",
    "try_parse_int64",
    "try_parse_uint8",
    "try_parse_uint16",
    "try_parse_uint32",
    "try_parse_uint64",
]
