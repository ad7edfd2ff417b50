"""
Conversion of Universal-Address intents into chain-native form.

Transaction builders need the same data with every address rendered in the
native format of the chain that will consume it: route addresses for the
destination chain, reward addresses for the source chain.
"""
from typing import Any, Dict, Optional, Union

from .address import AddressNormalizer
from .chain_detector import ChainTypeDetector, get_default_detector
from .models import Intent, Reward, Route
from .types import ChainType, coerce_chain_type
from .utils import to_hex


def _token_amounts(tokens, chain_type: ChainType):
    return [
        {"token": AddressNormalizer.denormalize(t.token, chain_type), "amount": t.amount}
        for t in tokens
    ]


def to_native_route(route: Route, chain_type: Union[ChainType, str]) -> Dict[str, Any]:
    """
    Render a Route with native addresses for the given chain type.

    Raises:
        AddressFormatError: If an address does not fit the chain type
    """
    chain_type = coerce_chain_type(chain_type)
    calls = []
    for call in route.calls:
        native_call = {
            "target": AddressNormalizer.denormalize(call.target, chain_type),
            "data": to_hex(call.data),
        }
        if chain_type is not ChainType.SVM:
            native_call["value"] = call.value
        calls.append(native_call)

    return {
        "salt": to_hex(route.salt),
        "deadline": route.deadline,
        "portal": AddressNormalizer.denormalize(route.portal, chain_type),
        "nativeAmount": route.native_amount,
        "tokens": _token_amounts(route.tokens, chain_type),
        "calls": calls,
    }


def to_native_reward(reward: Reward, chain_type: Union[ChainType, str]) -> Dict[str, Any]:
    """
    Render a Reward with native addresses for the given chain type.

    Raises:
        AddressFormatError: If an address does not fit the chain type
    """
    chain_type = coerce_chain_type(chain_type)
    return {
        "deadline": reward.deadline,
        "creator": AddressNormalizer.denormalize(reward.creator, chain_type),
        "prover": AddressNormalizer.denormalize(reward.prover, chain_type),
        "nativeAmount": reward.native_amount,
        "tokens": _token_amounts(reward.tokens, chain_type),
    }


def to_native_intent(intent: Intent, detector: Optional[ChainTypeDetector] = None) -> Dict[str, Any]:
    """
    Render an Intent with route addresses native to the destination chain
    and reward addresses native to the source chain.
    """
    detector = detector or get_default_detector()
    return {
        "sourceChainId": intent.source_chain_id,
        "destination": intent.destination,
        "route": to_native_route(intent.route, detector.detect(intent.destination)),
        "reward": to_native_reward(intent.reward, detector.detect(intent.source_chain_id)),
    }
