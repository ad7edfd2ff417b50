"""
Pytest fixtures for the IntentPortal SDK tests.
"""
import pytest

from intentportal_sdk import chain_detector, hashing
from intentportal_sdk.config import NetworkConfig
from intentportal_sdk.models import Call, Intent, Reward, Route, TokenAmount

# Chain ids used across the suite
ETHEREUM = 1
OPTIMISM = 10
BASE = 8453
TRON = 728126428
SOLANA = 1399811149

# Native addresses
TEST_EVM_ADDRESS = "0x1234567890123456789012345678901234567890"
TEST_EVM_CHECKSUM_ADDRESS = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"  # EIP-55 test vector
TEST_TVM_ADDRESS = "TR7NHqjeKQxGTCi8q8ZY4pL8otSzgjLj6t"  # USDT on Tron
TEST_TVM_UNIVERSAL = "0x000000000000000000000000a614f803b6fd780986a42c78ec9c7f77e6ded13c"
TEST_SVM_ADDRESS = "11111111111111111111111111111112"  # System Program + 1
TEST_SVM_UNIVERSAL = "0x" + "00" * 31 + "01"

# Universal addresses (20-byte values, valid for every chain type)
PORTAL = "0x" + "00" * 12 + "44" * 20
CREATOR = "0x" + "00" * 12 + "11" * 20
PROVER = "0x" + "00" * 12 + "22" * 20
TOKEN = "0x" + "00" * 12 + "33" * 20
TARGET = "0x" + "00" * 12 + "55" * 20

# Full 32-byte key, only valid for SVM
SVM_ONLY_ADDRESS = "0x" + "66" * 32

SALT = bytes.fromhex("aa" * 32)


@pytest.fixture(autouse=True)
def _reset_defaults(monkeypatch):
    """Each test starts from the bundled networks with fresh default instances."""
    NetworkConfig.reset()
    monkeypatch.setattr(chain_detector, "_default_detector", None)
    monkeypatch.setattr(hashing, "_default_hash_utils", None)
    yield
    NetworkConfig.reset()


@pytest.fixture
def route():
    return Route(
        salt=SALT,
        deadline=2000,
        portal=PORTAL,
        native_amount=0,
        tokens=[TokenAmount(token=TOKEN, amount=1_000_000)],
        calls=[Call(target=TARGET, data=b"\x12\x34", value=3)],
    )


@pytest.fixture
def reward():
    return Reward(
        deadline=1000,
        creator=CREATOR,
        prover=PROVER,
        native_amount=5,
        tokens=[TokenAmount(token=TOKEN, amount=7)],
    )


@pytest.fixture
def intent(route, reward):
    return Intent(source_chain_id=OPTIMISM, destination=BASE, route=route, reward=reward)
