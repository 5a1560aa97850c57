"""Type-driven decoding of Scilla values.

This package provides:
- Type expressions (PrimitiveType, BoolType, OptionType, AdtType) and their parser
- Integer width classification (native vs wide)
- The recursive ADT decoder
- The event log simplifier built on top of it
"""

from scilladec.decoding.decoder import decode, parse_integer
from scilladec.decoding.logs import simplify_event, simplify_logs, simplify_param
from scilladec.decoding.types import (
    AdtType,
    BoolType,
    OptionType,
    PrimitiveType,
    TypeExpr,
    format_type,
    parse_type,
)
from scilladec.decoding.widths import WidthClass, bit_width, is_integer_type, width_class

__all__ = [
    "decode",
    "parse_integer",
    "simplify_event",
    "simplify_logs",
    "simplify_param",
    "AdtType",
    "BoolType",
    "OptionType",
    "PrimitiveType",
    "TypeExpr",
    "format_type",
    "parse_type",
    "WidthClass",
    "bit_width",
    "is_integer_type",
    "width_class",
]
