"""
Chain type tags shared by the detector, normalizer and encoder.
"""
from enum import Enum
from typing import Union

from .exceptions import UnknownChainTypeError


class ChainType(str, Enum):
    """
    Virtual machine families a chain id can belong to.

    EVM chains use 20-byte hex addresses, TVM (Tron) uses the same 20-byte
    account hash wrapped in a base58check envelope, and SVM (Solana) uses
    32-byte Ed25519 public keys in plain base58.
    """
    EVM = "EVM"
    TVM = "TVM"
    SVM = "SVM"


def coerce_chain_type(value: Union["ChainType", str]) -> ChainType:
    """
    Convert a tag (enum member or its string value) into a ChainType.

    Raises:
        UnknownChainTypeError: If the tag is not a known chain type
    """
    if isinstance(value, ChainType):
        return value
    if isinstance(value, str):
        try:
            return ChainType(value.upper())
        except ValueError:
            pass
    raise UnknownChainTypeError(f"Unknown chain type: {value!r}")
