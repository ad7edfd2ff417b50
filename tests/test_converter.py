"""
Tests for rendering intents with chain-native addresses.
"""
import base58
import pytest

from intentportal_sdk import ChainType, to_native_intent, to_native_reward, to_native_route
from intentportal_sdk.chain_detector import ChainTypeDetector
from intentportal_sdk.config import ChainIdRegistry
from intentportal_sdk.exceptions import AddressFormatError
from intentportal_sdk.models import Reward
from conftest import BASE, PORTAL, PROVER, SOLANA, SVM_ONLY_ADDRESS, TRON


def test_route_for_evm(route):
    native = to_native_route(route, ChainType.EVM)
    assert native["portal"] == "0x" + "44" * 20
    assert native["salt"] == "0x" + "aa" * 32
    assert native["calls"] == [{"target": "0x" + "55" * 20, "data": "0x1234", "value": 3}]
    assert native["tokens"] == [{"token": "0x" + "33" * 20, "amount": 1_000_000}]


def test_route_for_svm_drops_call_value(route):
    native = to_native_route(route, "SVM")
    assert "value" not in native["calls"][0]
    # 20-byte values render as 32-byte Solana keys
    assert native["portal"] == base58.b58encode(bytes.fromhex(PORTAL[2:])).decode()


def test_route_for_tvm(route):
    native = to_native_route(route, ChainType.TVM)
    assert native["portal"].startswith("T")
    assert len(native["portal"]) == 34
    assert native["calls"][0]["value"] == 3


def test_reward(reward):
    native = to_native_reward(reward, ChainType.EVM)
    assert native == {
        "deadline": 1000,
        "creator": "0x" + "11" * 20,
        "prover": "0x" + "22" * 20,
        "nativeAmount": 5,
        "tokens": [{"token": "0x" + "33" * 20, "amount": 7}],
    }


def test_svm_key_cannot_render_for_evm():
    reward = Reward(deadline=1, creator=SVM_ONLY_ADDRESS, prover=PROVER)
    with pytest.raises(AddressFormatError):
        to_native_reward(reward, ChainType.EVM)
    assert to_native_reward(reward, ChainType.SVM)["creator"]


def test_intent_uses_both_chains(intent):
    solana_intent = intent.model_copy(update={"destination": SOLANA, "source_chain_id": TRON})
    native = to_native_intent(solana_intent)

    assert native["sourceChainId"] == TRON
    assert native["destination"] == SOLANA
    assert native["reward"]["creator"].startswith("T")
    assert "value" not in native["route"]["calls"][0]


def test_intent_with_custom_detector(intent):
    detector = ChainTypeDetector(registry=ChainIdRegistry(tvm_chain_ids={BASE}))
    native = to_native_intent(intent, detector=detector)
    assert native["route"]["portal"].startswith("T")
    assert native["reward"]["creator"] == to_native_reward(intent.reward, ChainType.EVM)["creator"]
