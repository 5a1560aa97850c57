from __future__ import annotations

from .contracts.bindings import ContractBindings, FieldAccessor, TransitionInvoker, fill_init
from .contracts.interface import ContractInterface, load_interface
from .core.config import ChainConfig
from .core.errors import ArityMismatch, DecodeError, MalformedType, NumericParseError, UnknownConstructor
from .core.models import AdtValue, BigInt
from .decoding.decoder import decode
from .decoding.logs import simplify_logs
from .decoding.types import parse_type
from .decoding.widths import WidthClass, is_integer_type, width_class

__all__ = [
    "decode",
    "simplify_logs",
    "parse_type",
    "WidthClass",
    "is_integer_type",
    "width_class",
    "AdtValue",
    "BigInt",
    "ChainConfig",
    "ContractBindings",
    "ContractInterface",
    "FieldAccessor",
    "TransitionInvoker",
    "fill_init",
    "load_interface",
    "ArityMismatch",
    "DecodeError",
    "MalformedType",
    "NumericParseError",
    "UnknownConstructor",
]
