"""Core value models shared by the decoder, the log simplifier and bindings.

This module defines:
- `BigInt`: marker `int` for wide (128/256-bit) integers.
- `AdtValue`: decoded form of an ADT the decoder has no dedicated rule for.
- `EventParam` / `Event`: typed views of the wire JSON.
- `is_adt_instance`: shape check for `{constructor, argtypes, arguments}`.

Design notes
------------
- Python ints never lose precision, so the native/wide split is carried by
  type: wide values are `BigInt`, native ones plain `int`. Callers that
  serialize to JSON (or to a 53-bit float world) can tell them apart.
- Wire values stay plain dicts/lists/strings; nothing here wraps them.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, TypedDict


class BigInt(int):
    """Arbitrary-precision integer decoded from an `Int128`/`Uint128`/`Int256`/`Uint256`."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"BigInt({int.__repr__(self)})"

    def __str__(self) -> str:
        return int.__repr__(self)


@dataclass(frozen=True, slots=True)
class AdtValue:
    """Generic decoded ADT: constructor name plus decoded arguments in order."""

    constructor: str
    arguments: tuple[Any, ...] = ()


# === Wire shapes ===


class EventParam(TypedDict):
    vname: str
    type: str
    value: Any


# `_eventname` is not a valid class-syntax key
Event = TypedDict("Event", {"_eventname": str, "address": str, "params": list[EventParam]})


def is_adt_instance(value: Any) -> bool:
    """True if `value` looks like `{constructor, argtypes, arguments}`."""
    return isinstance(value, Mapping) and "constructor" in value


def adt_parts(value: Mapping[str, Any]) -> tuple[str, Sequence[Any], Sequence[Any]]:
    """Return (constructor, argtypes, arguments); missing lists default to empty."""
    return (
        str(value["constructor"]),
        value.get("argtypes") or (),
        value.get("arguments") or (),
    )
