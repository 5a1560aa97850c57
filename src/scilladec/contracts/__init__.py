"""Contract interface metadata and name-keyed bindings.

This package provides:
- Pydantic models for `scilla-checker -contractinfo` output
- Field accessors, transition invokers and init filling
"""

from scilladec.contracts.bindings import (
    ContractBindings,
    FieldAccessor,
    TransitionInvoker,
    coerce_field,
    fill_init,
    render_value,
)
from scilladec.contracts.interface import (
    ContractField,
    ContractInterface,
    ContractParam,
    EventDecl,
    Transition,
    load_interface,
)

__all__ = [
    "ContractBindings",
    "FieldAccessor",
    "TransitionInvoker",
    "coerce_field",
    "fill_init",
    "render_value",
    "ContractField",
    "ContractInterface",
    "ContractParam",
    "EventDecl",
    "Transition",
    "load_interface",
]
