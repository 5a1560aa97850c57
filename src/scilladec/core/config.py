from __future__ import annotations

from dataclasses import dataclass

# 1 Li = 10^6 Qa (smallest Zilliqa unit)
QA_PER_LI = 1_000_000


@dataclass(frozen=True)
class ChainConfig:
    """Chain parameters used when invoking transitions."""

    chain_id: int
    msg_version: int = 1
    gas_price_li: int = 2_000
    gas_limit: int = 50_000
    attempts: int = 10
    timeout_ms: int = 1_000

    @property
    def version(self) -> int:
        """Transaction version: chain id in the high 16 bits, message version in the low ones."""
        return (self.chain_id << 16) + self.msg_version

    @property
    def gas_price_qa(self) -> int:
        return self.gas_price_li * QA_PER_LI

    def call_params(self, amount: int = 0) -> CallParams:
        return CallParams(
            version=self.version,
            amount=amount,
            gas_price=self.gas_price_qa,
            gas_limit=self.gas_limit,
            attempts=self.attempts,
            timeout_ms=self.timeout_ms,
        )


@dataclass(frozen=True)
class CallParams:
    """Per-call transaction parameters handed to an `ITransitionCaller`."""

    version: int
    amount: int
    gas_price: int
    gas_limit: int
    attempts: int
    timeout_ms: int
