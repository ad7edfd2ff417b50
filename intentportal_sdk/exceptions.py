"""
Exceptions for the IntentPortal SDK.
"""
from typing import Optional


class IntentPortalError(Exception):
    """Base exception for all IntentPortal SDK errors."""
    pass


class ChainTypeError(IntentPortalError):
    """Base exception for chain classification errors."""
    pass


class UnsupportedIdentifierError(ChainTypeError, TypeError):
    """Raised when a chain identifier is given in an unsupported form (e.g. a chain name)."""
    pass


class UnknownChainTypeError(ChainTypeError):
    """Raised when a chain id or chain type tag cannot be classified."""
    pass


class AddressError(IntentPortalError):
    """Base exception for address errors."""
    pass


class InvalidAddressFormatError(AddressError):
    """Raised when an address matches no known chain-native syntax."""
    pass


class AddressFormatError(AddressError):
    """
    Raised when an address matches a syntax but fails a deeper check:
    checksum mismatch, non-zero padding or wrong decoded length.
    """
    pass


class EncodingError(IntentPortalError):
    """Base exception for Portal encoding errors."""
    pass


class EncodingOverflowError(EncodingError):
    """Raised when a numeric field does not fit the destination width."""

    def __init__(self, field: str, value: int, bits: int, message: Optional[str] = None):
        self.field = field
        self.value = value
        self.bits = bits
        super().__init__(
            message or f"Field '{field}' value {value} does not fit in uint{bits}"
        )


class DecodingError(EncodingError):
    """Raised when encoded Portal data cannot be decoded."""
    pass


class ConfigurationError(IntentPortalError):
    """Raised when the networks configuration is inconsistent or malformed."""
    pass
