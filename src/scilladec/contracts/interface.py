"""Contract interface metadata, as produced by `scilla-checker -contractinfo`.

Only the parts bindings need are modelled: contract params, mutable fields,
transitions and declared events. Source parsing itself happens upstream.
"""

import json
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ContractParam(BaseModel):
    vname: str
    type: str


class ContractField(ContractParam):
    depth: int = 0


class Transition(BaseModel):
    vname: str
    params: Sequence[ContractParam] = ()


class EventDecl(BaseModel):
    vname: str
    params: Sequence[ContractParam] = ()


class ContractInterface(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    vname: str
    params: Sequence[ContractParam] = ()
    state_fields: Sequence[ContractField] = Field(default=(), alias="fields")
    transitions: Sequence[Transition] = ()
    events: Sequence[EventDecl] = ()

    def event_param_types(self) -> dict[str, dict[str, str]]:
        """Declared param types per event name: {event: {vname: type}}."""
        return {e.vname: {p.vname: p.type for p in e.params} for e in self.events}


InterfaceJson = Mapping[str, Any]
InterfaceSpec = InterfaceJson | Path


def _load_interface_json(spec: InterfaceSpec) -> InterfaceJson:
    if isinstance(spec, Path):
        return json.loads(spec.read_text())
    return spec


def load_interface(spec: InterfaceSpec) -> ContractInterface:
    """Validate checker output (whole document or its `contract_info` part)."""
    data = _load_interface_json(spec)
    if "contract_info" in data:
        data = data["contract_info"]
    return ContractInterface.model_validate(data)
