"""Error hierarchy for decoding and contract bindings.

Every error derives from `ValueError`: they all describe bad input (a type
string, a wire value, an argument list) rather than a broken runtime.
"""

from __future__ import annotations


class DecodeError(ValueError):
    """Base class for anything that prevents a value from being decoded."""


class MalformedType(DecodeError):
    """A type string could not be parsed (unbalanced parens, missing argument...)."""


class NumericParseError(DecodeError):
    """An integer-typed value is not a base-10 integer literal."""


class ArityMismatch(DecodeError):
    """An ADT instance carries an unexpected number of arguments."""


class UnknownConstructor(DecodeError):
    """A known ADT family (`Bool`, `Option`) received a constructor it does not define."""


class UnexpectedValue(DecodeError):
    """The value shape does not match its declared type (e.g. a string under `Option`)."""


class MalformedEvent(DecodeError):
    """An event log entry is missing `params`, or a param is missing `type`/`value`."""


class BindingError(ValueError):
    """Base class for contract binding lookups and argument checks."""


class UnknownField(BindingError):
    """The contract declares no such field, or the state does not contain it."""


class UnknownTransition(BindingError):
    """The contract declares no such transition."""


class ArgumentCountError(BindingError):
    """A transition or constructor received the wrong number of arguments."""


class InvalidArgument(BindingError):
    """An argument cannot be rendered for its declared type (e.g. a bad ByStr20)."""
