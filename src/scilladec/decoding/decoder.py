"""Type-driven decoder from Scilla wire values to native Python values.

`decode(type, value)` dispatches on the closed `TypeExpr` variants:

- `PrimitiveType`: integers by width class (`int` / `BigInt`), everything
  else passes through as-is
- `BoolType`: `True` / `False` constructors → `bool`
- `OptionType`: `None` → `None`, `Some v` → `decode(argtypes[0], v)`
- `AdtType`: `List`/`Map` JSON arrays get element-wise decoding, any other
  ADT instance becomes an `AdtValue` with recursively decoded arguments

Unknown primitive names are permissive (pass-through); unknown constructors
under `Bool`/`Option` are strict (`UnknownConstructor`). Values that are
already native (e.g. a second pass over simplified logs) decode to themselves.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from typing import Any

from scilladec.core.errors import ArityMismatch, NumericParseError, UnexpectedValue, UnknownConstructor
from scilladec.core.models import AdtValue, BigInt, adt_parts, is_adt_instance
from scilladec.decoding.types import AdtType, BoolType, OptionType, PrimitiveType, TypeExpr, as_type
from scilladec.decoding.widths import WidthClass, integer_bounds, is_signed, width_class

logger = logging.getLogger(__name__)

_SIGNED_LITERAL = re.compile(r"-?[0-9]+")
_UNSIGNED_LITERAL = re.compile(r"[0-9]+")


# ---------- integers ----------


def parse_integer(value: Any, type_name: str) -> int:
    """Parse an integer-typed wire value.

    Returns a plain `int` for native widths and a `BigInt` for wide ones.
    Already-parsed ints are accepted and re-tagged for the width. Values
    outside the range of the declared width raise `NumericParseError`.
    """
    wc = width_class(type_name)
    if wc is WidthClass.NOT_INTEGER:
        raise NumericParseError(f"{type_name} is not an integer type")
    lo, hi = integer_bounds(type_name)

    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise NumericParseError(f"expected a decimal string for {type_name}, got {type(value).__name__}")
    if isinstance(value, str):
        pattern = _SIGNED_LITERAL if is_signed(type_name) else _UNSIGNED_LITERAL
        if not pattern.fullmatch(value):
            raise NumericParseError(f"{value!r} is not a valid {type_name} literal")
        negative = value.startswith("-")
        digits = value.lstrip("-").lstrip("0") or "0"
        # bound the length before int() so huge literals never reach the conversion
        if len(digits) > len(str(max(hi, -lo))):
            raise NumericParseError(f"{type_name} literal of {len(digits)} digits is out of range")
        n = -int(digits, 10) if negative else int(digits, 10)
    else:
        n = int(value)

    if not lo <= n <= hi:
        raise NumericParseError(f"{n} is out of range for {type_name} [{lo}, {hi}]")
    return BigInt(n) if wc is WidthClass.WIDE else n


# ---------- ADT helpers ----------


def _checked_parts(value: Mapping[str, Any]) -> tuple[str, Sequence[Any], Sequence[Any]]:
    """Split an ADT instance and enforce len(argtypes) == len(arguments)."""
    constructor, argtypes, arguments = adt_parts(value)
    for label, seq in (("argtypes", argtypes), ("arguments", arguments)):
        if isinstance(seq, (str, bytes)) or not isinstance(seq, Sequence):
            raise UnexpectedValue(f"{constructor}: {label} must be a list, got {type(seq).__name__}")
    if len(argtypes) != len(arguments):
        raise ArityMismatch(
            f"{constructor}: {len(argtypes)} argtypes but {len(arguments)} arguments"
        )
    return constructor, argtypes, arguments


def _decode_generic(value: Mapping[str, Any]) -> AdtValue:
    constructor, argtypes, arguments = _checked_parts(value)
    logger.debug("generic ADT decode for constructor %s (%d args)", constructor, len(arguments))
    return AdtValue(
        constructor=constructor,
        arguments=tuple(decode(t, a) for t, a in zip(argtypes, arguments)),
    )


# ---------- per-variant rules ----------


def _decode_primitive(t: PrimitiveType, value: Any) -> Any:
    if width_class(t) is not WidthClass.NOT_INTEGER:
        return parse_integer(value, t.name)
    if is_adt_instance(value):
        # user ADT without type parameters, e.g. `Color` with `Red`
        return _decode_generic(value)
    return value


def _decode_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if not is_adt_instance(value):
        raise UnexpectedValue(f"Bool expects a constructor object, got {value!r}")
    constructor, _, arguments = _checked_parts(value)
    if constructor not in ("True", "False"):
        raise UnknownConstructor(f"Bool has no constructor {constructor!r}")
    if arguments:
        raise ArityMismatch(f"Bool constructor {constructor} takes no arguments, got {len(arguments)}")
    return constructor == "True"


def _decode_option(t: OptionType, value: Any) -> Any:
    if value is None:
        return None
    if not is_adt_instance(value):
        # already unwrapped
        return decode(t.inner, value)
    constructor, argtypes, arguments = _checked_parts(value)
    if constructor == "None":
        if arguments:
            raise ArityMismatch(f"None takes no arguments, got {len(arguments)}")
        return None
    if constructor == "Some":
        if len(arguments) != 1:
            raise ArityMismatch(f"Some takes exactly one argument, got {len(arguments)}")
        return decode(argtypes[0], arguments[0])
    raise UnknownConstructor(f"Option has no constructor {constructor!r}")


def _decode_list(elem: TypeExpr, value: Sequence[Any]) -> list[Any]:
    return [decode(elem, item) for item in value]


def _decode_map(key_t: TypeExpr, val_t: TypeExpr, value: Any) -> dict[Any, Any]:
    if isinstance(value, Mapping):
        return {decode(key_t, k): decode(val_t, v) for k, v in value.items()}
    out: dict[Any, Any] = {}
    for entry in value:
        if not isinstance(entry, Mapping) or "key" not in entry or "val" not in entry:
            raise UnexpectedValue(f"Map entries must be {{key, val}} objects, got {entry!r}")
        out[decode(key_t, entry["key"])] = decode(val_t, entry["val"])
    return out


def _decode_adt(t: AdtType, value: Any) -> Any:
    if t.name == "List" and len(t.args) == 1 and isinstance(value, list):
        return _decode_list(t.args[0], value)
    if t.name == "Map" and len(t.args) == 2 and not is_adt_instance(value) and isinstance(value, (list, Mapping)):
        return _decode_map(t.args[0], t.args[1], value)
    if isinstance(value, AdtValue):
        return value
    if not is_adt_instance(value):
        raise UnexpectedValue(f"{t.name} expects a constructor object, got {value!r}")
    return _decode_generic(value)


# ---------- entry point ----------


def decode(t: TypeExpr | str, value: Any) -> Any:
    """Decode one wire value against its Scilla type.

    `t` may be a parsed `TypeExpr` or a type string. Raises a `DecodeError`
    subclass on malformed types, bad integer literals, argtypes/arguments
    length mismatches and unknown `Bool`/`Option` constructors.
    """
    expr = as_type(t)
    match expr:
        case PrimitiveType():
            return _decode_primitive(expr, value)
        case BoolType():
            return _decode_bool(value)
        case OptionType():
            return _decode_option(expr, value)
        case AdtType():
            return _decode_adt(expr, value)
    raise TypeError(f"not a TypeExpr: {expr!r}")
