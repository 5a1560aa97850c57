from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol, runtime_checkable

from scilladec.core.config import CallParams
from scilladec.core.models import EventParam


# ---------------------------------------------------------------------------
# IStateProvider
# ---------------------------------------------------------------------------

@runtime_checkable
class IStateProvider(Protocol):
    """
    Abstract source of contract state.

    Domain expectations:
    - It returns the full state of one deployed contract as a mapping from
      field name to raw wire value (strings, ADT instances, lists, maps).
    - It hides the node API, retries and timeouts.
    """

    async def get_state(self) -> Mapping[str, Any]:
        """
        Return the current contract state.

        Implementations:
        - Node-backed client (GetSmartContractState)
        - Snapshot loaded from disk
        - In-memory provider for testing
        """
        ...


# ---------------------------------------------------------------------------
# ITransitionCaller
# ---------------------------------------------------------------------------

@runtime_checkable
class ITransitionCaller(Protocol):
    """
    Abstract sink for transition invocations.

    Domain expectations:
    - `args` are already rendered as Scilla `{vname, type, value}` params.
    - Signing, nonce management and confirmation polling are the
      implementation's concern.
    """

    async def call(
        self,
        transition: str,
        args: Sequence[EventParam],
        params: CallParams,
    ) -> Any:
        """
        Submit one transition call and return the implementation's receipt object.
        """
        ...
