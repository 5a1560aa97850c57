"""Core data models, configuration, errors and collaborator interfaces.

This package provides:
- Value models (BigInt, AdtValue) and wire shapes (Event, EventParam)
- Configuration classes (ChainConfig, CallParams)
- The error hierarchy (DecodeError, BindingError and subclasses)
- Protocols for external collaborators (IStateProvider, ITransitionCaller)
"""

from scilladec.core.config import CallParams, ChainConfig
from scilladec.core.errors import (
    ArgumentCountError,
    ArityMismatch,
    BindingError,
    DecodeError,
    InvalidArgument,
    MalformedEvent,
    MalformedType,
    NumericParseError,
    UnexpectedValue,
    UnknownConstructor,
    UnknownField,
    UnknownTransition,
)
from scilladec.core.interfaces import IStateProvider, ITransitionCaller
from scilladec.core.models import AdtValue, BigInt, Event, EventParam

__all__ = [
    "CallParams",
    "ChainConfig",
    "ArgumentCountError",
    "ArityMismatch",
    "BindingError",
    "DecodeError",
    "InvalidArgument",
    "MalformedEvent",
    "MalformedType",
    "NumericParseError",
    "UnexpectedValue",
    "UnknownConstructor",
    "UnknownField",
    "UnknownTransition",
    "IStateProvider",
    "ITransitionCaller",
    "AdtValue",
    "BigInt",
    "Event",
    "EventParam",
]
