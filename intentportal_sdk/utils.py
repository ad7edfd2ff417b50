"""
Utility functions for the IntentPortal SDK.
"""
from typing import Union

from hexbytes import HexBytes
from web3 import Web3


def hex_to_bytes(value: Union[str, bytes, bytearray]) -> bytes:
    """
    Convert a hex string (with or without 0x prefix) or bytes to bytes.

    Args:
        value: Hex string or bytes-like value

    Returns:
        Raw bytes

    Raises:
        ValueError: If the string is not valid hex
        TypeError: If value is neither a string nor bytes
    """
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if not isinstance(value, str):
        raise TypeError(f"Expected hex string or bytes, got {type(value).__name__}")

    clean = value[2:] if value[:2] in ("0x", "0X") else value
    try:
        return bytes.fromhex(clean)
    except ValueError as e:
        raise ValueError(f"Invalid hex string: {value!r}") from e


def to_hex(value: bytes) -> str:
    """Render bytes as a 0x-prefixed lowercase hex string."""
    return "0x" + bytes(value).hex()


def keccak(data: Union[bytes, bytearray]) -> HexBytes:
    """Keccak-256 of raw bytes."""
    return Web3.keccak(bytes(data))
