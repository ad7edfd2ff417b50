"""
Address normalization between chain-native formats and Universal Addresses.

A Universal Address is a 32-byte value rendered as ``0x`` + 64 lowercase hex
characters. EVM and TVM addresses occupy the low 20 bytes with 12 leading zero
bytes; SVM public keys use all 32 bytes.
"""
import logging
from typing import Union

import base58
from web3 import Web3

from .chain_detector import (
    EVM_ADDRESS_PATTERN,
    SVM_ADDRESS_PATTERN,
    TVM_ADDRESS_PATTERN,
    UNIVERSAL_ADDRESS_PATTERN,
)
from .exceptions import AddressFormatError
from .types import ChainType, coerce_chain_type

logger = logging.getLogger(__name__)

UNIVERSAL_ADDRESS_BYTES = 32
ACCOUNT_HASH_BYTES = 20
ZERO_PADDING = b"\x00" * (UNIVERSAL_ADDRESS_BYTES - ACCOUNT_HASH_BYTES)

# Version byte of Tron mainnet addresses
TRON_ADDRESS_PREFIX = b"\x41"


def is_universal_address(value) -> bool:
    """Check that value is 0x + 64 hex characters."""
    return isinstance(value, str) and UNIVERSAL_ADDRESS_PATTERN.fullmatch(value) is not None


def to_universal_address(value: str) -> str:
    """
    Validate a Universal Address and return its canonical lowercase form.

    Raises:
        AddressFormatError: If value is not 0x + 64 hex characters
    """
    if not is_universal_address(value):
        raise AddressFormatError(
            f"Invalid Universal Address: {value!r}. Expected 0x + 64 hex characters"
        )
    return value.lower()


def pad_to_32_bytes(hex_value: str) -> str:
    """
    Left-pad a hex string (with or without 0x) to a Universal Address.

    Raises:
        AddressFormatError: If the value is not hex or longer than 32 bytes
    """
    clean = hex_value[2:] if hex_value.startswith("0x") else hex_value
    if len(clean) > UNIVERSAL_ADDRESS_BYTES * 2:
        raise AddressFormatError(f"Address too long to pad: {hex_value}. Maximum 32 bytes allowed")
    return to_universal_address("0x" + clean.rjust(UNIVERSAL_ADDRESS_BYTES * 2, "0"))


class AddressNormalizer:
    """
    Converts addresses between chain-native formats and Universal Addresses.

    The conversion rules are keyed by chain type; every method is a pure
    function of its arguments.
    """

    @classmethod
    def normalize(cls, address: str, chain_type: Union[ChainType, str]) -> str:
        """
        Normalize a chain-native address to a Universal Address

        Args:
            address: Native address (EVM hex, Tron base58check, Solana base58)
            chain_type: Chain type the address belongs to

        Returns:
            Universal Address (0x + 64 lowercase hex characters)

        Raises:
            AddressFormatError: On bad syntax, checksum mismatch or wrong length
            UnknownChainTypeError: If chain_type is not recognized
        """
        chain_type = coerce_chain_type(chain_type)
        if not isinstance(address, str):
            raise AddressFormatError(f"Address must be a string, got {type(address).__name__}")

        if chain_type is ChainType.EVM:
            return cls.normalize_evm(address)
        if chain_type is ChainType.TVM:
            return cls.normalize_tvm(address)
        return cls.normalize_svm(address)

    @classmethod
    def denormalize(cls, address: str, chain_type: Union[ChainType, str]) -> str:
        """
        Render a Universal Address in a chain's native format

        Args:
            address: Universal Address
            chain_type: Target chain type

        Returns:
            Native address string

        Raises:
            AddressFormatError: If the address is malformed or does not fit the
                target chain (non-zero high bytes for EVM/TVM)
            UnknownChainTypeError: If chain_type is not recognized
        """
        chain_type = coerce_chain_type(chain_type)
        if chain_type is ChainType.EVM:
            return cls.denormalize_to_evm(address)
        if chain_type is ChainType.TVM:
            return cls.denormalize_to_tvm(address)
        return cls.denormalize_to_svm(address)

    @classmethod
    def denormalize_to_evm(cls, address: str) -> str:
        """Universal Address to a checksummed EVM address."""
        account = cls._account_hash(address, ChainType.EVM)
        return Web3.to_checksum_address("0x" + account.hex())

    @classmethod
    def denormalize_to_tvm(cls, address: str) -> str:
        """
        Universal Address to a base58check Tron address.

        Like EVM, the 12 high bytes must be zero; they are never dropped.
        """
        account = cls._account_hash(address, ChainType.TVM)
        return base58.b58encode_check(TRON_ADDRESS_PREFIX + account).decode("ascii")

    @classmethod
    def denormalize_to_svm(cls, address: str) -> str:
        """Universal Address to a base58 Solana public key."""
        return base58.b58encode(_universal_bytes(address)).decode("ascii")

    @classmethod
    def to_native_bytes(cls, address: str, chain_type: Union[ChainType, str]) -> bytes:
        """
        Raw native bytes of a Universal Address.

        Returns the 20-byte account hash for EVM/TVM and the 32-byte public
        key for SVM.
        """
        chain_type = coerce_chain_type(chain_type)
        if chain_type is ChainType.SVM:
            return _universal_bytes(address)
        return cls._account_hash(address, chain_type)

    @staticmethod
    def normalize_evm(address: str) -> str:
        if not EVM_ADDRESS_PATTERN.fullmatch(address):
            raise AddressFormatError(f"Invalid EVM address: {address!r}")
        # Mixed-case input must carry a valid EIP-55 checksum
        if not Web3.is_address(address):
            raise AddressFormatError(f"Invalid EVM address checksum: {address}")
        return "0x" + ZERO_PADDING.hex() + address[2:].lower()

    @staticmethod
    def normalize_tvm(address: str) -> str:
        hex_form = address[2:] if address.startswith("0x") else address
        if len(hex_form) == 42 and hex_form[:2] == TRON_ADDRESS_PREFIX.hex():
            try:
                account = bytes.fromhex(hex_form)[1:]
            except ValueError as e:
                raise AddressFormatError(f"Invalid Tron hex address: {address}") from e
            return "0x" + (ZERO_PADDING + account).hex()

        if not TVM_ADDRESS_PATTERN.fullmatch(address):
            raise AddressFormatError(f"Invalid Tron address: {address!r}")
        try:
            payload = base58.b58decode_check(address)
        except ValueError as e:
            raise AddressFormatError(f"Invalid Tron address {address}: {e}") from e

        if len(payload) != len(TRON_ADDRESS_PREFIX) + ACCOUNT_HASH_BYTES:
            raise AddressFormatError(
                f"Invalid Tron address {address}: decoded to {len(payload)} bytes, expected 21"
            )
        if payload[:1] != TRON_ADDRESS_PREFIX:
            raise AddressFormatError(
                f"Invalid Tron address {address}: version byte 0x{payload[0]:02x}, expected 0x41"
            )
        return "0x" + (ZERO_PADDING + payload[1:]).hex()

    @staticmethod
    def normalize_svm(address: str) -> str:
        if not SVM_ADDRESS_PATTERN.fullmatch(address):
            raise AddressFormatError(f"Invalid Solana address: {address!r}")
        try:
            key = base58.b58decode(address)
        except ValueError as e:
            raise AddressFormatError(f"Invalid Solana address {address}: {e}") from e
        if len(key) != UNIVERSAL_ADDRESS_BYTES:
            raise AddressFormatError(
                f"Invalid Solana address {address}: decoded to {len(key)} bytes, expected 32"
            )
        return "0x" + key.hex()

    @staticmethod
    def _account_hash(address: str, chain_type: ChainType) -> bytes:
        raw = _universal_bytes(address)
        if raw[:len(ZERO_PADDING)] != ZERO_PADDING:
            logger.debug(f"Refusing lossy {chain_type.value} denormalization of {address}")
            raise AddressFormatError(
                f"Universal Address {address} has non-zero high bytes and cannot be "
                f"represented as a 20-byte {chain_type.value} address"
            )
        return raw[len(ZERO_PADDING):]


def _universal_bytes(address: str) -> bytes:
    return bytes.fromhex(to_universal_address(address)[2:])


# Convenience aliases
normalize = AddressNormalizer.normalize
denormalize = AddressNormalizer.denormalize
denormalize_to_evm = AddressNormalizer.denormalize_to_evm
denormalize_to_tvm = AddressNormalizer.denormalize_to_tvm
denormalize_to_svm = AddressNormalizer.denormalize_to_svm
