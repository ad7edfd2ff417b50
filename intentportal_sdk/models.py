"""
Data models for the IntentPortal SDK.
"""
from typing import Annotated, Any, Dict, Tuple

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field

from .address import is_universal_address
from .chain_detector import _to_chain_id
from .utils import hex_to_bytes, to_hex


def _check_universal_address(value: str) -> str:
    if not is_universal_address(value):
        raise ValueError(f"Invalid Universal Address {value!r}, expected 0x + 64 hex characters")
    return value.lower()


def _coerce_bytes(value: Any) -> Any:
    if isinstance(value, (str, bytes, bytearray)):
        return hex_to_bytes(value)
    return value


def _check_bytes32(value: bytes) -> bytes:
    if len(value) != 32:
        raise ValueError(f"Expected 32 bytes, got {len(value)}")
    return value


UniversalAddress = Annotated[str, AfterValidator(_check_universal_address)]
HexData = Annotated[bytes, BeforeValidator(_coerce_bytes)]
Bytes32 = Annotated[bytes, BeforeValidator(_coerce_bytes), AfterValidator(_check_bytes32)]
Uint = Annotated[int, Field(ge=0)]
# Strings and bools are rejected rather than coerced
ChainId = Annotated[int, BeforeValidator(_to_chain_id), Field(ge=0)]


class PortalModel(BaseModel):
    """Immutable base for Portal data structures."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class TokenAmount(PortalModel):
    """Token and amount pair"""
    token: UniversalAddress
    amount: Uint


class Call(PortalModel):
    """Call executed on the destination chain"""
    target: UniversalAddress
    data: HexData = b""
    # Native value forwarded with the call (EVM/TVM only)
    value: Uint = 0


class Route(PortalModel):
    """What must execute on the destination chain"""
    salt: Bytes32
    deadline: Uint
    portal: UniversalAddress
    native_amount: Uint = Field(0, alias="nativeAmount")
    tokens: Tuple[TokenAmount, ...] = ()
    calls: Tuple[Call, ...] = ()


class Reward(PortalModel):
    """What the executor is paid on the source chain"""
    deadline: Uint
    creator: UniversalAddress
    prover: UniversalAddress
    native_amount: Uint = Field(0, alias="nativeAmount")
    tokens: Tuple[TokenAmount, ...] = ()


class Intent(PortalModel):
    """Cross-chain transfer request"""
    source_chain_id: ChainId = Field(..., alias="sourceChainId")
    destination: ChainId
    route: Route
    reward: Reward


class IntentHashes(PortalModel):
    """Hashes identifying an intent"""
    intent_hash: bytes = Field(..., alias="intentHash")
    route_hash: bytes = Field(..., alias="routeHash")
    reward_hash: bytes = Field(..., alias="rewardHash")

    def to_hex(self) -> Dict[str, str]:
        return {
            "intentHash": to_hex(self.intent_hash),
            "routeHash": to_hex(self.route_hash),
            "rewardHash": to_hex(self.reward_hash),
        }
