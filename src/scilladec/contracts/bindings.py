"""Name-keyed bindings for a deployed contract's fields and transitions.

This module exposes:
- `FieldAccessor`: async callable returning one state field, integer fields
  coerced by width (`int` / `BigInt`), everything else raw
- `TransitionInvoker`: async callable rendering args to Scilla params and
  handing them to an `ITransitionCaller`
- `ContractBindings`: explicit name → accessor / invoker maps built from a
  `ContractInterface`
- `fill_init`: constructor init params with `_scilla_version` prepended

Field access is deliberately shallower than `decode`: only integers are
coerced; Option/Bool/ADT fields come back as the raw state value.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from eth_utils import is_0x_prefixed, is_hex, is_hex_address, to_normalized_address

from scilladec.contracts.interface import ContractInterface, ContractParam, Transition
from scilladec.core.config import ChainConfig
from scilladec.core.errors import ArgumentCountError, InvalidArgument, UnknownField, UnknownTransition
from scilladec.core.interfaces import IStateProvider, ITransitionCaller
from scilladec.core.models import AdtValue, EventParam
from scilladec.decoding.decoder import parse_integer
from scilladec.decoding.widths import is_integer_type

logger = logging.getLogger(__name__)

_BYSTR_RE = re.compile(r"^ByStr(?P<n>\d*)$")

SCILLA_VERSION_PARAM: EventParam = {"vname": "_scilla_version", "type": "Uint32", "value": "0"}


# ---------- fields ----------


def coerce_field(type_str: str, raw: Any) -> Any:
    """Coerce integer-typed state values; return everything else unchanged."""
    if is_integer_type(type_str):
        return parse_integer(raw, type_str.strip())
    return raw


class FieldAccessor:
    """Fetch current state and return a single field."""

    def __init__(self, name: str, type_str: str, state_provider: IStateProvider) -> None:
        self.name = name
        self.type = type_str
        self._state = state_provider

    def read(self, state: Mapping[str, Any]) -> Any:
        """Extract and coerce this field from an already-fetched state."""
        if self.name not in state:
            raise UnknownField(f"state has no field {self.name!r}")
        return coerce_field(self.type, state[self.name])

    async def __call__(self) -> Any:
        state = await self._state.get_state()
        return self.read(state)


# ---------- transitions / init ----------


def render_value(type_str: str, arg: Any) -> Any:
    """Render one Python argument as a Scilla param value."""
    t = type_str.strip()
    if t == "Bool" and isinstance(arg, bool):
        return {"constructor": "True" if arg else "False", "argtypes": [], "arguments": []}
    if isinstance(arg, AdtValue):
        raise InvalidArgument(f"cannot render decoded ADT {arg.constructor!r} back to {t}; pass the wire object")
    if isinstance(arg, (Mapping, list)):
        return arg

    m = _BYSTR_RE.match(t)
    if m is not None:
        s = str(arg)
        if m.group("n") == "20":
            if not is_hex_address(s):
                raise InvalidArgument(f"{s!r} is not a ByStr20 address")
            return to_normalized_address(s)
        if not (is_0x_prefixed(s) and is_hex(s)):
            raise InvalidArgument(f"{s!r} is not a 0x-prefixed hex string for {t}")
        if m.group("n") and len(s) != 2 + 2 * int(m.group("n")):
            raise InvalidArgument(f"{s!r} does not hold exactly {m.group('n')} bytes for {t}")
        return s.lower()

    return str(arg)


def render_params(
    owner: str,
    params: Sequence[ContractParam],
    args: Sequence[Any],
) -> list[EventParam]:
    """Pair declared params with positional args as `{vname, type, value}`."""
    if len(args) != len(params):
        raise ArgumentCountError(f"Expected to receive {len(params)} parameters for {owner} but got {len(args)}")
    return [
        {"vname": p.vname, "type": p.type, "value": render_value(p.type, arg)}
        for p, arg in zip(params, args)
    ]


def fill_init(interface: ContractInterface, *args: Any) -> list[EventParam]:
    """Build deployment init params: `_scilla_version` first, then constructor params."""
    return [dict(SCILLA_VERSION_PARAM), *render_params(f"{interface.vname} deployment", interface.params, args)]  # type: ignore[list-item]


class TransitionInvoker:
    """Render positional args for one transition and submit the call."""

    def __init__(self, transition: Transition, caller: ITransitionCaller, config: ChainConfig) -> None:
        self.transition = transition
        self._caller = caller
        self._config = config

    @property
    def name(self) -> str:
        return self.transition.vname

    def render(self, *args: Any) -> list[EventParam]:
        return render_params(self.name, self.transition.params, args)

    async def __call__(self, *args: Any, amount: int = 0) -> Any:
        values = self.render(*args)
        logger.debug("calling transition %s with %d param(s), amount=%d", self.name, len(values), amount)
        return await self._caller.call(self.name, values, self._config.call_params(amount))


# ---------- contract bindings ----------


@dataclass(frozen=True)
class ContractBindings:
    """Field accessors and transition invokers of one contract, keyed by name."""

    name: str
    fields: Mapping[str, FieldAccessor]
    transitions: Mapping[str, TransitionInvoker]
    state_provider: IStateProvider

    @classmethod
    def from_interface(
        cls,
        interface: ContractInterface,
        *,
        state_provider: IStateProvider,
        caller: ITransitionCaller,
        config: ChainConfig,
    ) -> ContractBindings:
        return cls(
            name=interface.vname,
            fields={f.vname: FieldAccessor(f.vname, f.type, state_provider) for f in interface.state_fields},
            transitions={t.vname: TransitionInvoker(t, caller, config) for t in interface.transitions},
            state_provider=state_provider,
        )

    def field(self, name: str) -> FieldAccessor:
        try:
            return self.fields[name]
        except KeyError:
            raise UnknownField(f"{self.name} declares no field {name!r}") from None

    def transition(self, name: str) -> TransitionInvoker:
        try:
            return self.transitions[name]
        except KeyError:
            raise UnknownTransition(f"{self.name} declares no transition {name!r}") from None

    async def snapshot(self) -> dict[str, Any]:
        """Read every declared field from a single state fetch."""
        state = await self.state_provider.get_state()
        return {name: accessor.read(state) for name, accessor in self.fields.items()}
