"""
Tests for the Portal data models.
"""
import pytest
from pydantic import ValidationError

from intentportal_sdk.exceptions import UnsupportedIdentifierError
from intentportal_sdk.models import Call, Intent, IntentHashes, Reward, Route, TokenAmount
from conftest import PORTAL, SALT, TARGET, TOKEN


def test_route_defaults():
    route = Route(salt=SALT, deadline=1, portal=PORTAL)
    assert route.native_amount == 0
    assert route.tokens == ()
    assert route.calls == ()


def test_hex_salt_and_data():
    route = Route(
        salt="0x" + "aa" * 32,
        deadline=1,
        portal=PORTAL,
        calls=[Call(target=TARGET, data="0xdeadbeef")],
    )
    assert route.salt == SALT
    assert route.calls[0].data == bytes.fromhex("deadbeef")
    assert route.calls[0].value == 0


def test_salt_must_be_32_bytes():
    with pytest.raises(ValidationError):
        Route(salt=b"\x00" * 31, deadline=1, portal=PORTAL)


def test_universal_address_lowercased():
    token = TokenAmount(token=TOKEN.upper().replace("0X", "0x"), amount=1)
    assert token.token == TOKEN


@pytest.mark.parametrize("address", [
    "0x1234567890123456789012345678901234567890",  # 20-byte native EVM address
    "0x" + "zz" * 32,
    "",
])
def test_rejects_non_universal_address(address):
    with pytest.raises(ValidationError):
        TokenAmount(token=address, amount=1)


def test_rejects_negative_amount():
    with pytest.raises(ValidationError):
        TokenAmount(token=TOKEN, amount=-1)


def test_camel_case_aliases(reward):
    data = {
        "sourceChainId": 10,
        "destination": 8453,
        "route": {"salt": SALT, "deadline": 1, "portal": PORTAL, "nativeAmount": 9},
        "reward": reward.model_dump(by_alias=True),
    }
    intent = Intent.model_validate(data)
    assert intent.source_chain_id == 10
    assert intent.route.native_amount == 9
    assert intent.reward.model_dump() == reward.model_dump()


def test_models_are_frozen(route):
    with pytest.raises(ValidationError):
        route.deadline = 5


def test_lists_become_tuples(route):
    assert isinstance(route.tokens, tuple)
    assert isinstance(route.calls, tuple)
    assert hash(route.tokens[0]) == hash(TokenAmount(token=TOKEN, amount=1_000_000))


def test_intent_hashes_to_hex():
    hashes = IntentHashes(intent_hash=b"\x01" * 32, route_hash=b"\x02" * 32, reward_hash=b"\x03" * 32)
    assert hashes.to_hex() == {
        "intentHash": "0x" + "01" * 32,
        "routeHash": "0x" + "02" * 32,
        "rewardHash": "0x" + "03" * 32,
    }


@pytest.mark.parametrize("field, value", [
    ("source_chain_id", "10"),
    ("destination", "8453"),
    ("source_chain_id", True),
    ("destination", 8453.0),
])
def test_chain_ids_must_be_integers(route, reward, field, value):
    data = {"source_chain_id": 10, "destination": 8453, "route": route, "reward": reward}
    data[field] = value
    with pytest.raises(UnsupportedIdentifierError):
        Intent(**data)


def test_negative_chain_id_rejected(route, reward):
    with pytest.raises(ValidationError):
        Intent(source_chain_id=-1, destination=8453, route=route, reward=reward)
