"""
Portal hash utilities.

routeHash  = keccak256(encode(route, chainType(destination)))
rewardHash = keccak256(encode(reward, chainType(source)))
intentHash = keccak256(abi.encodePacked(uint64 destination, routeHash, rewardHash))
"""
import logging
from typing import Optional, Union

from hexbytes import HexBytes
from web3 import Web3

from .chain_detector import ChainTypeDetector, get_default_detector
from .encoding import PortalEncoder
from .exceptions import EncodingOverflowError
from .models import Intent, IntentHashes, Reward, Route
from .utils import hex_to_bytes, keccak

logger = logging.getLogger(__name__)

DESTINATION_BITS = 64


class PortalHashUtils:
    """
    Computes route, reward and intent hashes.

    All methods are pure; an instance only carries the chain type detector
    used to choose the encoding.
    """

    def __init__(
        self,
        detector: Optional[ChainTypeDetector] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the hash utilities

        Args:
            detector: Chain type detector (defaults to the bundled networks)
            logger: Optional logger instance to use for debug logging
        """
        self.detector = detector or get_default_detector()
        self.logger = logger or logging.getLogger(__name__)

    def compute_route_hash(self, route: Route, destination: int) -> HexBytes:
        """
        Hash a Route using the encoding of its destination chain

        Args:
            route: Route with Universal Address fields
            destination: Destination chain id

        Returns:
            32-byte keccak-256 hash
        """
        chain_type = self.detector.detect(destination)
        route_hash = keccak(PortalEncoder.encode(route, chain_type))
        self.logger.debug(f"Route hash for chain {destination} ({chain_type.value}): {route_hash.hex()}")
        return route_hash

    def compute_reward_hash(self, reward: Reward, source_chain_id: int) -> HexBytes:
        """
        Hash a Reward using the encoding of its source chain

        Args:
            reward: Reward with Universal Address fields
            source_chain_id: Source chain id

        Returns:
            32-byte keccak-256 hash
        """
        chain_type = self.detector.detect(source_chain_id)
        reward_hash = keccak(PortalEncoder.encode(reward, chain_type))
        self.logger.debug(f"Reward hash for chain {source_chain_id} ({chain_type.value}): {reward_hash.hex()}")
        return reward_hash

    def get_intent_hash(self, intent: Intent) -> IntentHashes:
        """
        Compute the intent, route and reward hashes of an intent

        Args:
            intent: The intent

        Returns:
            IntentHashes with intent_hash, route_hash and reward_hash

        Raises:
            UnknownChainTypeError: If a chain id cannot be classified
            EncodingOverflowError: If a field does not fit its chain's width
            AddressFormatError: If an address cannot be rendered for its chain
        """
        route_hash = self.compute_route_hash(intent.route, intent.destination)
        reward_hash = self.compute_reward_hash(intent.reward, intent.source_chain_id)
        intent_hash = self.combine_intent_hash(intent.destination, route_hash, reward_hash)

        return IntentHashes(
            intent_hash=intent_hash,
            route_hash=route_hash,
            reward_hash=reward_hash,
        )

    @staticmethod
    def combine_intent_hash(destination: int, route_hash: bytes, reward_hash: bytes) -> HexBytes:
        """keccak256 of the packed (uint64, bytes32, bytes32) triple."""
        if destination < 0 or destination >= 1 << DESTINATION_BITS:
            raise EncodingOverflowError("destination", destination, DESTINATION_BITS)
        return Web3.solidity_keccak(
            ["uint64", "bytes32", "bytes32"],
            [destination, bytes(route_hash), bytes(reward_hash)],
        )

    @staticmethod
    def hash_encoded_route(encoded_route: Union[bytes, str]) -> HexBytes:
        """Hash route bytes that were encoded elsewhere (e.g. by a quote service)."""
        return keccak(hex_to_bytes(encoded_route))

    def matches_encoded_route(
        self,
        route: Route,
        destination: int,
        encoded_route: Union[bytes, str]
    ) -> bool:
        """Check pre-encoded route bytes against the locally computed route hash."""
        expected = self.compute_route_hash(route, destination)
        actual = self.hash_encoded_route(encoded_route)
        if expected != actual:
            self.logger.warning(
                f"Encoded route hash mismatch for chain {destination}: "
                f"expected {expected.hex()}, got {actual.hex()}"
            )
            return False
        return True


# Module-level default instance, created on first use
_default_hash_utils: Optional[PortalHashUtils] = None


def _get_hash_utils() -> PortalHashUtils:
    global _default_hash_utils
    if _default_hash_utils is None:
        _default_hash_utils = PortalHashUtils()
    return _default_hash_utils


def compute_route_hash(route: Route, destination: int) -> HexBytes:
    return _get_hash_utils().compute_route_hash(route, destination)


def compute_reward_hash(reward: Reward, source_chain_id: int) -> HexBytes:
    return _get_hash_utils().compute_reward_hash(reward, source_chain_id)


def get_intent_hash(intent: Intent) -> IntentHashes:
    return _get_hash_utils().get_intent_hash(intent)


hash_encoded_route = PortalHashUtils.hash_encoded_route
