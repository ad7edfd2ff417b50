"""
Chain type detection from chain ids and address shapes.
"""
import logging
import numbers
import re
from typing import Optional, Union

from .config import EVM_CHAIN_ID_LIMIT, ChainIdRegistry, NetworkConfig
from .exceptions import (
    InvalidAddressFormatError,
    UnknownChainTypeError,
    UnsupportedIdentifierError,
)
from .types import ChainType, coerce_chain_type

logger = logging.getLogger(__name__)

BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"

EVM_ADDRESS_PATTERN = re.compile(r"0x[0-9a-fA-F]{40}")
UNIVERSAL_ADDRESS_PATTERN = re.compile(r"0x[0-9a-fA-F]{64}")
TVM_ADDRESS_PATTERN = re.compile(r"T[1-9A-HJ-NP-Za-km-z]{33}")
SVM_ADDRESS_PATTERN = re.compile(r"[1-9A-HJ-NP-Za-km-z]{32,44}")

_ADDRESS_PATTERNS = {
    ChainType.EVM: EVM_ADDRESS_PATTERN,
    ChainType.TVM: TVM_ADDRESS_PATTERN,
    ChainType.SVM: SVM_ADDRESS_PATTERN,
}


class ChainTypeDetector:
    """
    Classifies chain ids and native addresses into chain types.

    Chain ids are resolved against an explicit registry of Tron and Solana
    ids; any other id below 2^32 is EVM. The registry is supplied at
    construction so alternate id sets can be used without touching global
    state.
    """

    ADDRESS_FORMATS = {
        ChainType.EVM: "0x-prefixed 20-byte hex address (0x + 40 hex characters)",
        ChainType.TVM: "Base58Check Tron address (34 characters starting with 'T')",
        ChainType.SVM: "Base58 Solana public key (32-44 characters)",
    }

    def __init__(
        self,
        registry: Optional[ChainIdRegistry] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the detector

        Args:
            registry: Chain id registry (defaults to the bundled networks)
            logger: Optional logger instance to use for debug logging
        """
        self.registry = registry if registry is not None else NetworkConfig.default_registry()
        self.logger = logger or logging.getLogger(__name__)

    def detect(self, chain_id: Union[int, numbers.Integral]) -> ChainType:
        """
        Detect the chain type of a numeric chain id.

        Args:
            chain_id: Chain id (any integer type)

        Returns:
            The chain type

        Raises:
            UnsupportedIdentifierError: If chain_id is not an integer
            UnknownChainTypeError: If chain_id cannot be classified
        """
        chain_id = _to_chain_id(chain_id)

        if chain_id in self.registry.tvm_chain_ids:
            chain_type = ChainType.TVM
        elif chain_id in self.registry.svm_chain_ids:
            chain_type = ChainType.SVM
        elif 0 <= chain_id < EVM_CHAIN_ID_LIMIT:
            if chain_id not in self.registry.evm_chain_ids:
                self.logger.debug(f"Chain id {chain_id} not registered, assuming EVM")
            chain_type = ChainType.EVM
        else:
            raise UnknownChainTypeError(f"Cannot determine chain type for chain id {chain_id}")

        self.logger.debug(f"Chain id {chain_id} detected as {chain_type.value}")
        return chain_type

    def get_chain_name(self, chain_id: int) -> str:
        """Human readable name for a chain id."""
        chain_id = _to_chain_id(chain_id)
        return self.registry.names.get(chain_id, f"Chain {chain_id}")

    @staticmethod
    def detect_from_address(address: str) -> ChainType:
        """
        Detect the chain type from the shape of an address.

        A 32-byte Universal Address (0x + 64 hex) is reported as EVM since
        its origin cannot be told from the value alone.

        Raises:
            InvalidAddressFormatError: If the address matches no known format
        """
        if not isinstance(address, str):
            raise InvalidAddressFormatError(f"Address must be a string, got {type(address).__name__}")

        if EVM_ADDRESS_PATTERN.fullmatch(address) or UNIVERSAL_ADDRESS_PATTERN.fullmatch(address):
            return ChainType.EVM
        if TVM_ADDRESS_PATTERN.fullmatch(address):
            return ChainType.TVM
        if not address.startswith(("0x", "T")) and SVM_ADDRESS_PATTERN.fullmatch(address):
            return ChainType.SVM

        raise InvalidAddressFormatError(f"Unrecognized address format: {address!r}")

    @staticmethod
    def is_valid_address_for_chain(address: str, chain_type: Union[ChainType, str]) -> bool:
        """Check an address against a chain's syntax without raising."""
        if not isinstance(address, str):
            return False
        try:
            pattern = _ADDRESS_PATTERNS[coerce_chain_type(chain_type)]
        except UnknownChainTypeError:
            return False
        return pattern.fullmatch(address) is not None

    @classmethod
    def get_address_format(cls, chain_type: Union[ChainType, str]) -> str:
        """
        Describe the native address format of a chain type.

        Raises:
            UnknownChainTypeError: If chain_type is not recognized
        """
        return cls.ADDRESS_FORMATS[coerce_chain_type(chain_type)]


def _to_chain_id(chain_id) -> int:
    if isinstance(chain_id, str):
        raise UnsupportedIdentifierError(
            f"Chain identifier {chain_id!r} is a string. Chain names are deprecated "
            "as identifiers; pass the numeric chain id instead"
        )
    if isinstance(chain_id, bool) or not isinstance(chain_id, numbers.Integral):
        raise UnsupportedIdentifierError(
            f"Chain id must be an integer, got {type(chain_id).__name__}"
        )
    return int(chain_id)


# Module-level default detector, created on first use
_default_detector: Optional[ChainTypeDetector] = None


def get_default_detector() -> ChainTypeDetector:
    """Get or create the detector backed by the bundled networks."""
    global _default_detector
    if _default_detector is None:
        _default_detector = ChainTypeDetector()
    return _default_detector


def detect(chain_id: int) -> ChainType:
    return get_default_detector().detect(chain_id)


def get_chain_name(chain_id: int) -> str:
    return get_default_detector().get_chain_name(chain_id)


detect_from_address = ChainTypeDetector.detect_from_address
is_valid_address_for_chain = ChainTypeDetector.is_valid_address_for_chain
get_address_format = ChainTypeDetector.get_address_format
