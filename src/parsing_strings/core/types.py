"""Type aliases and small value types shared by the parser groups."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, NamedTuple, Optional

MaybeText = Optional[str]


class TryParseResult(NamedTuple):
    """Outcome of a try-parse call; unpacks as ``ok, value``."""

    success: bool
    value: Any


class NumericType(str, Enum):
    """Target types understood by the parser registries."""

    INT8 = "int8"
    UINT8 = "uint8"
    INT16 = "int16"
    UINT16 = "uint16"
    INT32 = "int32"
    UINT32 = "uint32"
    INT64 = "int64"
    UINT64 = "uint64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    DECIMAL = "decimal"


TryParser = Callable[[MaybeText], TryParseResult]
Parser = Callable[[MaybeText], Any]
