"""
Chain-specific encoding of Portal Route and Reward structures.

EVM and TVM destinations use Solidity ABI tuple encoding; SVM destinations
use the Borsh layout of the Portal program. Both are rendered from the
shared schema in ``schema.py``.
"""
import logging
from typing import Union

from ..exceptions import DecodingError
from ..models import Reward, Route
from ..types import ChainType, coerce_chain_type
from ..utils import hex_to_bytes
from .abi import decode_abi, encode_abi
from .borsh import decode_borsh, encode_borsh
from .schema import CALL, REWARD, ROUTE, TOKEN_AMOUNT, FieldKind, SchemaField, StructSchema

__all__ = [
    "PortalEncoder",
    "StructSchema",
    "SchemaField",
    "FieldKind",
    "ROUTE",
    "REWARD",
    "CALL",
    "TOKEN_AMOUNT",
]

logger = logging.getLogger(__name__)

_KINDS = {"route": (ROUTE, Route), "reward": (REWARD, Reward)}


class PortalEncoder:
    """Encodes and decodes Route/Reward data for a chain type."""

    @staticmethod
    def is_route(value: Union[Route, Reward]) -> bool:
        """True for a Route, False for a Reward."""
        return isinstance(value, Route)

    @classmethod
    def encode(cls, value: Union[Route, Reward], chain_type: Union[ChainType, str]) -> bytes:
        """
        Encode a Route or Reward for a chain type

        Args:
            value: Route or Reward with Universal Address fields
            chain_type: Chain type whose on-chain layout to produce

        Returns:
            Encoded bytes

        Raises:
            EncodingOverflowError: If an integer exceeds the chain's field width
            AddressFormatError: If an address cannot be rendered for the chain
            UnknownChainTypeError: If chain_type is not recognized
            TypeError: If value is neither a Route nor a Reward
        """
        chain_type = coerce_chain_type(chain_type)
        if isinstance(value, Route):
            schema = ROUTE
        elif isinstance(value, Reward):
            schema = REWARD
        else:
            raise TypeError(f"Expected Route or Reward, got {type(value).__name__}")

        if chain_type is ChainType.SVM:
            encoded = encode_borsh(schema, value)
        else:
            encoded = encode_abi(schema, value)

        logger.debug(f"Encoded {schema.name} for {chain_type.value}: {len(encoded)} bytes")
        return encoded

    @classmethod
    def decode(
        cls,
        data: Union[bytes, str],
        chain_type: Union[ChainType, str],
        kind: str
    ) -> Union[Route, Reward]:
        """
        Decode chain-encoded bytes back into a Route or Reward

        Args:
            data: Encoded bytes or 0x-prefixed hex
            chain_type: Chain type the data was encoded for
            kind: "route" or "reward"

        Returns:
            Route or Reward with Universal Address fields

        Raises:
            DecodingError: If the data is malformed
            ValueError: If kind is not "route" or "reward"
        """
        chain_type = coerce_chain_type(chain_type)
        if kind not in _KINDS:
            raise ValueError(f"kind must be 'route' or 'reward', got {kind!r}")
        schema, model = _KINDS[kind]

        try:
            raw = hex_to_bytes(data)
        except (TypeError, ValueError) as e:
            raise DecodingError(f"Invalid encoded {kind}: {e}") from e

        if chain_type is ChainType.SVM:
            fields = decode_borsh(schema, raw)
        else:
            fields = decode_abi(schema, raw)
        return model.model_validate(fields)
