"""
Network configuration for the IntentPortal SDK.

Known networks are shipped as package data (``data/networks.json``) and
loaded once per process. The chain id sets used for chain type detection
are derived from them as an immutable ``ChainIdRegistry``.
"""
import importlib.resources
import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, FrozenSet, Mapping, Optional

from .exceptions import ConfigurationError
from .types import ChainType

logger = logging.getLogger(__name__)

# Chain ids at or above this bound are never classified as EVM
EVM_CHAIN_ID_LIMIT = 2 ** 32

NETWORKS_FILE_ENV = "INTENT_PORTAL_NETWORKS_FILE"


@dataclass(frozen=True)
class ChainIdRegistry:
    """
    Immutable allow-lists of chain ids per chain type.

    TVM and SVM ids are matched explicitly; EVM ids are informational
    (any unclaimed id below 2^32 is treated as EVM) but are still checked
    for collisions.

    Attributes:
        evm_chain_ids: Known EVM chain ids
        tvm_chain_ids: Tron network ids
        svm_chain_ids: Solana cluster ids
        names: Display names keyed by chain id
    """
    evm_chain_ids: FrozenSet[int] = frozenset()
    tvm_chain_ids: FrozenSet[int] = frozenset()
    svm_chain_ids: FrozenSet[int] = frozenset()
    names: Mapping[int, str] = field(default_factory=dict, compare=False, hash=False)

    def __post_init__(self):
        for attr in ("evm_chain_ids", "tvm_chain_ids", "svm_chain_ids"):
            object.__setattr__(self, attr, frozenset(getattr(self, attr)))
        object.__setattr__(self, "names", dict(self.names))
        self._validate()

    def _validate(self) -> None:
        sets = {
            ChainType.EVM: self.evm_chain_ids,
            ChainType.TVM: self.tvm_chain_ids,
            ChainType.SVM: self.svm_chain_ids,
        }
        for chain_type, ids in sets.items():
            for chain_id in ids:
                if isinstance(chain_id, bool) or not isinstance(chain_id, int):
                    raise ConfigurationError(
                        f"{chain_type.value} chain id must be an integer, got {chain_id!r}"
                    )
                if chain_id < 0:
                    raise ConfigurationError(f"Negative {chain_type.value} chain id: {chain_id}")

        collisions = (
            (self.evm_chain_ids & self.tvm_chain_ids)
            | (self.evm_chain_ids & self.svm_chain_ids)
            | (self.tvm_chain_ids & self.svm_chain_ids)
        )
        if collisions:
            raise ConfigurationError(
                f"Chain ids claimed by more than one chain type: {sorted(collisions)}"
            )

        oversized = sorted(i for i in self.evm_chain_ids if i >= EVM_CHAIN_ID_LIMIT)
        if oversized:
            raise ConfigurationError(
                f"EVM chain ids must be below 2^32, got: {oversized}"
            )

    @classmethod
    def from_networks(cls, networks: Mapping[str, Mapping[str, Any]]) -> "ChainIdRegistry":
        """
        Build a registry from a networks mapping (as found in networks.json).

        Raises:
            ConfigurationError: If an entry lacks a chain id or has an unknown type
        """
        ids: Dict[ChainType, set] = {t: set() for t in ChainType}
        names: Dict[int, str] = {}

        for key, network in networks.items():
            try:
                chain_id = network["chainId"]
                chain_type = ChainType(str(network["type"]).upper())
            except KeyError as e:
                raise ConfigurationError(f"Network '{key}' is missing field {e}") from e
            except ValueError as e:
                raise ConfigurationError(
                    f"Network '{key}' has unknown chain type {network.get('type')!r}"
                ) from e

            if chain_id in names:
                logger.warning(f"Chain id {chain_id} listed more than once (network '{key}')")
            ids[chain_type].add(chain_id)
            names[chain_id] = network.get("name", key)

        return cls(
            evm_chain_ids=frozenset(ids[ChainType.EVM]),
            tvm_chain_ids=frozenset(ids[ChainType.TVM]),
            svm_chain_ids=frozenset(ids[ChainType.SVM]),
            names=names,
        )


class NetworkConfig:
    """
    Access to the known-networks file.

    The file is read once and cached on the class. Set the
    ``INTENT_PORTAL_NETWORKS_FILE`` environment variable to load an
    alternate JSON file instead of the bundled one.
    """

    _networks_cache: Optional[Dict[str, Dict[str, Any]]] = None
    _registry_cache: Optional[ChainIdRegistry] = None

    @classmethod
    def load_networks(cls) -> Dict[str, Dict[str, Any]]:
        """
        Load network configurations.

        Returns:
            Dictionary of network configurations keyed by network name

        Raises:
            ConfigurationError: If the file cannot be read or parsed
        """
        if cls._networks_cache is not None:
            return cls._networks_cache

        override = os.environ.get(NETWORKS_FILE_ENV)
        try:
            if override:
                source = override
                content = Path(override).read_text(encoding="utf-8")
            else:
                source = "bundled networks.json"
                content = (
                    importlib.resources.files("intentportal_sdk")
                    .joinpath("data/networks.json")
                    .read_text(encoding="utf-8")
                )
            networks = json.loads(content)
        except (OSError, ValueError) as e:
            raise ConfigurationError(f"Failed to load networks configuration: {e}") from e

        if not isinstance(networks, dict):
            raise ConfigurationError("Networks configuration must be a JSON object")

        logger.info(f"Loaded {len(networks)} networks from {source}")
        cls._networks_cache = networks
        return networks

    @classmethod
    def reset(cls) -> None:
        """Drop cached networks and registry (mainly for tests)."""
        cls._networks_cache = None
        cls._registry_cache = None

    @classmethod
    def default_registry(cls) -> ChainIdRegistry:
        """Chain id registry derived from the loaded networks."""
        if cls._registry_cache is None:
            cls._registry_cache = ChainIdRegistry.from_networks(cls.load_networks())
        return cls._registry_cache

    @classmethod
    def get_network(cls, network: str) -> Dict[str, Any]:
        """
        Get configuration for a specific network.

        Args:
            network: Network name (e.g. "base", "tron", "solana")

        Returns:
            Network configuration dictionary

        Raises:
            ValueError: If the network is not found
        """
        networks = cls.load_networks()
        if network not in networks:
            available = ", ".join(sorted(networks))
            raise ValueError(f"Network '{network}' not found. Available networks: {available}")
        return networks[network]

    @classmethod
    def get_network_by_chain_id(cls, chain_id: int) -> Optional[Dict[str, Any]]:
        """Return the configuration whose chainId matches, or None."""
        for network in cls.load_networks().values():
            if network.get("chainId") == chain_id:
                return network
        return None

    @classmethod
    def get_chain_id(cls, network: str) -> int:
        return int(cls.get_network(network)["chainId"])

    @classmethod
    def get_chain_type(cls, network: str) -> ChainType:
        return ChainType(str(cls.get_network(network)["type"]).upper())

    @classmethod
    def get_rpc_url(cls, network: str, override: Optional[str] = None) -> str:
        """
        Get the RPC URL for a network.

        Precedence: explicit override, then ``<NETWORK>_RPC_URL`` from the
        environment, then the configuration file.
        """
        if override:
            return override

        env_var = f"{network.upper().replace('-', '_')}_RPC_URL"
        env_url = os.environ.get(env_var)
        if env_url:
            return env_url

        return cls.get_network(network)["rpc"]

    @classmethod
    def get_portal_address(cls, network: str) -> Optional[str]:
        """Portal address of a network as a Universal Address, or None if unset."""
        return cls._get_universal_address(network, "portal")

    @classmethod
    def get_prover_address(cls, network: str) -> Optional[str]:
        """Prover address of a network as a Universal Address, or None if unset."""
        return cls._get_universal_address(network, "prover")

    @classmethod
    def _get_universal_address(cls, network: str, key: str) -> Optional[str]:
        from .address import AddressNormalizer

        config = cls.get_network(network)
        address = config.get(key)
        if not address:
            return None
        return AddressNormalizer.normalize(address, cls.get_chain_type(network))
