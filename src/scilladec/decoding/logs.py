"""Event log simplification: decode every param value of every event.

Input and output share the receipt `event_logs` shape:

    [{"_eventname": ..., "address": ..., "params": [{"vname", "type", "value"}]}]

Only `value` changes; every other key is copied verbatim and ordering of
events and params is kept. Fail-fast: the first `DecodeError` aborts the
whole batch, re-raised as the same error class with the event/param named.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from scilladec.core.errors import DecodeError, MalformedEvent
from scilladec.core.models import Event, EventParam
from scilladec.decoding.decoder import decode
from scilladec.decoding.types import parse_type

logger = logging.getLogger(__name__)


def simplify_param(param: Mapping[str, Any]) -> EventParam:
    """Return a copy of `param` with its `value` decoded against its `type`."""
    if not isinstance(param, Mapping) or "type" not in param or "value" not in param:
        raise MalformedEvent(f"event param must carry 'type' and 'value': {param!r}")
    out = dict(param)
    out["value"] = decode(parse_type(param["type"]), param["value"])
    return out  # type: ignore[return-value]


def simplify_event(event: Mapping[str, Any]) -> Event:
    """Return a copy of `event` with every param simplified (order kept)."""
    if not isinstance(event, Mapping):
        raise MalformedEvent(f"event must be an object, got {type(event).__name__}")
    params = event.get("params")
    if not isinstance(params, list):
        raise MalformedEvent(f"event {event.get('_eventname')!r} has no params list")

    name = event.get("_eventname")
    simplified: list[EventParam] = []
    for param in params:
        try:
            simplified.append(simplify_param(param))
        except DecodeError as e:
            vname = param.get("vname") if isinstance(param, Mapping) else None
            raise type(e)(f"event {name!r}, param {vname!r}: {e}") from e

    out = dict(event)
    out["params"] = simplified
    return out  # type: ignore[return-value]


def simplify_logs(logs: Iterable[Mapping[str, Any]]) -> list[Event]:
    """Decode all param values of all events; raise on the first failure."""
    out = [simplify_event(event) for event in logs]
    logger.debug("simplified %d event(s)", len(out))
    return out
