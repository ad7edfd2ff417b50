"""
IntentPortal SDK - canonical addresses and hashes for cross-chain Portal intents.
"""
from .version import __version__
from .types import ChainType
from .exceptions import (
    IntentPortalError,
    ChainTypeError,
    UnsupportedIdentifierError,
    UnknownChainTypeError,
    AddressError,
    InvalidAddressFormatError,
    AddressFormatError,
    EncodingError,
    EncodingOverflowError,
    DecodingError,
    ConfigurationError,
)
from .config import ChainIdRegistry, NetworkConfig
from .chain_detector import (
    ChainTypeDetector,
    detect,
    detect_from_address,
    is_valid_address_for_chain,
    get_address_format,
    get_chain_name,
)
from .address import AddressNormalizer, is_universal_address, to_universal_address, pad_to_32_bytes
from .models import TokenAmount, Call, Route, Reward, Intent, IntentHashes
from .encoding import PortalEncoder
from .hashing import (
    PortalHashUtils,
    compute_route_hash,
    compute_reward_hash,
    get_intent_hash,
    hash_encoded_route,
)
from .converter import to_native_route, to_native_reward, to_native_intent

__all__ = [
    "__version__",
    "ChainType",
    "IntentPortalError",
    "ChainTypeError",
    "UnsupportedIdentifierError",
    "UnknownChainTypeError",
    "AddressError",
    "InvalidAddressFormatError",
    "AddressFormatError",
    "EncodingError",
    "EncodingOverflowError",
    "DecodingError",
    "ConfigurationError",
    "ChainIdRegistry",
    "NetworkConfig",
    "ChainTypeDetector",
    "detect",
    "detect_from_address",
    "is_valid_address_for_chain",
    "get_address_format",
    "get_chain_name",
    "AddressNormalizer",
    "is_universal_address",
    "to_universal_address",
    "pad_to_32_bytes",
    "TokenAmount",
    "Call",
    "Route",
    "Reward",
    "Intent",
    "IntentHashes",
    "PortalEncoder",
    "PortalHashUtils",
    "compute_route_hash",
    "compute_reward_hash",
    "get_intent_hash",
    "hash_encoded_route",
    "to_native_route",
    "to_native_reward",
    "to_native_intent",
]
