"""
TIP-712 Network Configuration
Centralized configuration for chain IDs, node endpoints and runtime settings
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from dotenv import find_dotenv, load_dotenv

from tron_tip712.exceptions import ConfigurationError, UnsupportedNetworkError

logger = logging.getLogger(__name__)

DEFAULT_NETWORK = "nile"
DEFAULT_DOMAIN_NAME = "TRON TIP-712 Demo"
DEFAULT_DOMAIN_VERSION = "1"
DEFAULT_ARTIFACT_PATH = "build/contracts/Tip712Verifier.json"


class NetworkConfig:
    """Network configuration for chain IDs and node endpoints"""

    # TIP-712 chain IDs (TRON uses the lower 32 bits of block.chainid)
    CHAIN_IDS: Dict[str, int] = {
        "mainnet": 728126428,  # 0x2b6653dc
        "shasta": 2494104990,  # 0x94a9059e
        "nile": 3448148188,  # 0xcd8690dc
    }

    DEFAULT_FULL_HOSTS: Dict[str, str] = {
        "mainnet": "https://api.trongrid.io",
        "shasta": "https://api.shasta.trongrid.io",
        "nile": "https://nile.trongrid.io",
    }

    @classmethod
    def normalize_network(cls, network: Optional[str]) -> str:
        """Normalize a network name ("tron:Nile" -> "nile"); missing means nile"""
        if not network:
            return DEFAULT_NETWORK
        network = network.strip().lower()
        if network.startswith("tron:"):
            network = network[len("tron:") :]
        return network

    @classmethod
    def get_chain_id(cls, network: Optional[str]) -> int:
        """Get chain ID for network

        Args:
            network: Network name (e.g., "nile", "mainnet", "tron:nile")

        Returns:
            Chain ID as integer

        Raises:
            UnsupportedNetworkError: If network is not supported
        """
        name = cls.normalize_network(network)
        chain_id = cls.CHAIN_IDS.get(name)
        if chain_id is None:
            raise UnsupportedNetworkError(str(network), sorted(cls.CHAIN_IDS))
        return chain_id

    @classmethod
    def get_chain_id_hex(cls, network: Optional[str]) -> str:
        """Get chain ID as fixed-width hex string (e.g. "0xcd8690dc")"""
        return f"0x{cls.get_chain_id(network):08x}"

    @classmethod
    def get_full_host(cls, network: Optional[str]) -> str:
        """Get default node endpoint for network

        Raises:
            UnsupportedNetworkError: If network is not supported
        """
        name = cls.normalize_network(network)
        host = cls.DEFAULT_FULL_HOSTS.get(name)
        if host is None:
            raise UnsupportedNetworkError(str(network), sorted(cls.DEFAULT_FULL_HOSTS))
        return host


@dataclass
class Settings:
    """Runtime settings sourced from the environment"""

    private_key: str
    full_host: str = NetworkConfig.DEFAULT_FULL_HOSTS[DEFAULT_NETWORK]
    api_key: Optional[str] = None
    network: str = DEFAULT_NETWORK
    name: str = DEFAULT_DOMAIN_NAME
    version: str = DEFAULT_DOMAIN_VERSION
    verifying_contract: Optional[str] = None
    artifact_path: Path = Path(DEFAULT_ARTIFACT_PATH)


def _getenv(name: str) -> Optional[str]:
    value = os.getenv(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


def load_settings(
    require_full_host: bool = True,
    require_verifying_contract: bool = True,
    env_file: Optional[Path] = None,
) -> Settings:
    """
    Load settings from environment variables and an optional .env file.

    Variables already present in the environment take precedence over the file.

    Args:
        require_full_host: Fail when FULL_HOST is not set
        require_verifying_contract: Fail when VERIFYING_CONTRACT is not set
        env_file: .env file to load (default: search from the working directory)

    Returns:
        Settings instance

    Raises:
        ConfigurationError: If a required variable is missing
        UnsupportedNetworkError: If NETWORK names an unknown network
    """
    if env_file is not None:
        load_dotenv(env_file)
    else:
        load_dotenv(find_dotenv(usecwd=True))

    private_key = _getenv("PRIVATE_KEY")
    full_host = _getenv("FULL_HOST")
    verifying_contract = _getenv("VERIFYING_CONTRACT")

    required = {"PRIVATE_KEY": private_key}
    if require_full_host:
        required["FULL_HOST"] = full_host
    if require_verifying_contract:
        required["VERIFYING_CONTRACT"] = verifying_contract

    missing = [name for name, value in required.items() if not value]
    if missing:
        raise ConfigurationError(f"Set {', '.join(missing)} in .env", missing=missing)

    network = NetworkConfig.normalize_network(_getenv("NETWORK"))
    # Surface a typo in NETWORK here rather than at signing time
    NetworkConfig.get_chain_id(network)
    if full_host is None:
        full_host = NetworkConfig.get_full_host(network)

    settings = Settings(
        private_key=private_key,
        full_host=full_host,
        api_key=_getenv("TRON_PRO_API_KEY"),
        network=network,
        name=_getenv("NAME") or DEFAULT_DOMAIN_NAME,
        version=_getenv("VERSION") or DEFAULT_DOMAIN_VERSION,
        verifying_contract=verifying_contract,
        artifact_path=Path(_getenv("TIP712_ARTIFACT") or DEFAULT_ARTIFACT_PATH),
    )
    logger.info(
        "Settings loaded: network=%s, full_host=%s, name=%s, version=%s",
        settings.network,
        settings.full_host,
        settings.name,
        settings.version,
    )
    return settings
