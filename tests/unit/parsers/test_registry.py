"""Tests for the parser registries."""

from __future__ import annotations

import pytest

from parsing_strings.core.exceptions import UnknownNumericTypeError
from parsing_strings.core.types import NumericType
from parsing_strings.parsers import (
    PARSERS,
    TRY_PARSERS,
    get_parser,
    get_try_parser,
    parse_decimal,
    parse_int32,
    try_parse_uint16,
)


def test_every_numeric_type_is_registered():
    assert set(TRY_PARSERS) == set(NumericType)
    assert set(PARSERS) == set(NumericType)


def test_lookup_by_enum_and_value():
    assert get_parser(NumericType.INT32) is parse_int32
    assert get_parser("decimal") is parse_decimal
    assert get_try_parser("uint16") is try_parse_uint16


def test_registered_functions_match_their_names():
    for kind, func in TRY_PARSERS.items():
        assert func.__name__ == f"try_parse_{kind.value}"
    for kind, func in PARSERS.items():
        assert func.__name__ == f"parse_{kind.value}"


class TestUnknownType:
    def test_raises_unknown_numeric_type(self):
        with pytest.raises(UnknownNumericTypeError) as exc_info:
            get_parser("int128")
        assert exc_info.value.kind == "int128"

    def test_is_a_key_error(self):
        with pytest.raises(KeyError):
            get_try_parser("complex")
