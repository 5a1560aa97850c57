"""Integer width classification for Scilla primitive types."""

from __future__ import annotations

import re
from enum import Enum

from scilladec.decoding.types import PrimitiveType, TypeExpr

_INT_TYPE_RE = re.compile(r"^(?P<sign>Int|Uint)(?P<bits>32|64|128|256)$")

# widths above this need arbitrary precision (JS-style doubles lose past 2^53)
NATIVE_MAX_BITS = 64


class WidthClass(Enum):
    NOT_INTEGER = "not_integer"
    NATIVE = "native"
    WIDE = "wide"


def _primitive_name(t: TypeExpr | str) -> str | None:
    if isinstance(t, str):
        return t.strip()
    if isinstance(t, PrimitiveType):
        return t.name
    return None  # ADTs are never integers


def bit_width(t: TypeExpr | str) -> int | None:
    """Bit width of an integer type (`Uint128` -> 128), None otherwise."""
    name = _primitive_name(t)
    if name is None:
        return None
    m = _INT_TYPE_RE.match(name)
    return int(m.group("bits")) if m else None


def is_signed(t: TypeExpr | str) -> bool:
    name = _primitive_name(t)
    return bool(name and name.startswith("Int") and bit_width(name) is not None)


def integer_bounds(t: TypeExpr | str) -> tuple[int, int]:
    """Inclusive (min, max) of an integer type; ValueError for non-integers."""
    bits = bit_width(t)
    if bits is None:
        raise ValueError(f"{t!r} is not an integer type")
    if is_signed(t):
        return -(2 ** (bits - 1)), 2 ** (bits - 1) - 1
    return 0, 2**bits - 1


def is_integer_type(t: TypeExpr | str) -> bool:
    return bit_width(t) is not None


def width_class(t: TypeExpr | str) -> WidthClass:
    """Classify a type as NOT_INTEGER, NATIVE (<= 64 bits) or WIDE (128/256 bits)."""
    bits = bit_width(t)
    if bits is None:
        return WidthClass.NOT_INTEGER
    return WidthClass.NATIVE if bits <= NATIVE_MAX_BITS else WidthClass.WIDE
