from typing import Any
from unittest.mock import AsyncMock

import pytest

from scilladec.contracts.interface import ContractInterface, load_interface
from scilladec.core.config import ChainConfig


@pytest.fixture
def contract_state() -> dict[str, Any]:
    return {
        "_balance": "0",
        "owner": "0xec902fe17d90203d0bddd943d97b29576ece3177",
        "counter": "42",
        "total_supply": "340282366920938463463374607431768211455",
        "paused": {"constructor": "False", "argtypes": [], "arguments": []},
        "welcome_msg": "hello",
    }


@pytest.fixture
def mock_state_provider(contract_state: dict[str, Any]):
    provider = AsyncMock()
    provider.get_state = AsyncMock(return_value=contract_state)
    return provider


@pytest.fixture
def mock_caller():
    caller = AsyncMock()
    caller.call = AsyncMock(return_value={"success": True})
    return caller


@pytest.fixture
def chain_config() -> ChainConfig:
    return ChainConfig(chain_id=222)


@pytest.fixture
def contract_info() -> dict[str, Any]:
    return {
        "contract_info": {
            "scilla_major_version": "0",
            "vname": "Counter",
            "params": [
                {"vname": "owner", "type": "ByStr20"},
                {"vname": "initial", "type": "Uint64"},
            ],
            "fields": [
                {"vname": "counter", "type": "Uint64", "depth": 0},
                {"vname": "total_supply", "type": "Uint128", "depth": 0},
                {"vname": "paused", "type": "Bool", "depth": 0},
                {"vname": "welcome_msg", "type": "String", "depth": 0},
            ],
            "transitions": [
                {"vname": "Increment", "params": [{"vname": "by", "type": "Uint64"}]},
                {
                    "vname": "SetOwner",
                    "params": [
                        {"vname": "new_owner", "type": "ByStr20"},
                        {"vname": "notify", "type": "Bool"},
                    ],
                },
            ],
            "procedures": [],
            "events": [
                {
                    "vname": "Incremented",
                    "params": [
                        {"vname": "by", "type": "Uint64"},
                        {"vname": "previous", "type": "Option (Uint128)"},
                    ],
                }
            ],
            "ADTs": [],
        },
        "warnings": [],
    }


@pytest.fixture
def interface(contract_info: dict[str, Any]) -> ContractInterface:
    return load_interface(contract_info)
