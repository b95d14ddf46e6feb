"""
AsyncTron client factory.

The client is created once by the caller and passed down explicitly.
"""

import logging
from typing import Any, Optional

from tronpy import AsyncTron
from tronpy.providers.async_http import AsyncHTTPProvider

from tron_tip712.config import NetworkConfig

logger = logging.getLogger(__name__)


def create_async_tron_client(
    full_host: str,
    api_key: Optional[str] = None,
    network: Optional[str] = None,
) -> Any:
    """Create an AsyncTron client for the given node endpoint.

    Sends the TRON-PRO-API-KEY header when api_key is set.

    Args:
        full_host: Node endpoint URL (e.g. "https://nile.trongrid.io")
        api_key: Optional TronGrid API key
        network: TRON network name (mainnet/shasta/nile), default nile

    Returns:
        tronpy.AsyncTron instance
    """
    network = NetworkConfig.normalize_network(network)
    if api_key:
        provider = AsyncHTTPProvider(endpoint_uri=full_host, api_key=api_key)
    else:
        logger.warning(
            "TRON_PRO_API_KEY is not set. TronGrid requests may be rate-limited; "
            "set TRON_PRO_API_KEY in your environment/.env to use TronGrid reliably."
        )
        provider = AsyncHTTPProvider(endpoint_uri=full_host)

    logger.info("Creating AsyncTron client for network=%s (%s)", network, full_host)
    return AsyncTron(provider=provider, network=network)
