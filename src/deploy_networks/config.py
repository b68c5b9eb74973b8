"""Network descriptor table consumed by the deployment tool."""

import logging
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional, Union

from .constants import DEVELOPMENT_NETWORK, INFURA_URL_TEMPLATE, REMOTE_NETWORKS
from .credentials import Secrets, load_secrets
from .exceptions import MissingSecretError, NetworkNotFoundError
from .paths import get_secrets_path
from .provider import HDWalletProvider
from .types import NetworkDescriptor

logger = logging.getLogger(__name__)


def infura_url(network: str, project_id: str) -> str:
    """Infura HTTPS endpoint for a network name and project id."""
    return INFURA_URL_TEMPLATE.format(network=network, project_id=project_id)


def make_provider_factory(network: str, secrets: Secrets) -> Callable[[], HDWalletProvider]:
    """
    Build a zero-argument provider factory for a remote network.

    Building the factory does no I/O. Each call returns a new provider;
    connections are not cached, so callers invoke it once per run.

    Args:
        network: Infura network name (e.g., "ropsten")
        secrets: Mnemonic and project id

    Returns:
        Function creating an HDWalletProvider for the network
    """

    def provider() -> HDWalletProvider:
        if not secrets.is_complete:
            missing = "mnemonic" if not secrets.mnemonic else "project id"
            raise MissingSecretError(f"No {missing} configured for network '{network}'")
        logger.debug("Creating provider for network '%s'", network)
        return HDWalletProvider(secrets.mnemonic, infura_url(network, secrets.project_id))

    return provider


def build_networks(secrets: Secrets) -> Dict[str, NetworkDescriptor]:
    """
    Build the network descriptor table.

    Args:
        secrets: Mnemonic and project id for remote networks

    Returns:
        Mapping of network name -> descriptor with keys
        "development", "ropsten" and "rinkeby"
    """
    table: Dict[str, Any] = {"development": dict(DEVELOPMENT_NETWORK)}

    for name, params in REMOTE_NETWORKS.items():
        table[name] = {
            "provider": make_provider_factory(name, secrets),
            "gasPrice": params["gasPrice"],
            "networkId": params["networkId"],
        }

    return table


def load_networks(secrets_path: Optional[Union[Path, str]] = None) -> Dict[str, NetworkDescriptor]:
    """
    Read the secrets file and build the descriptor table.

    Args:
        secrets_path: Secrets file (defaults to $DEPLOY_NETWORKS_SECRETS or ./secrets.json)

    Returns:
        Network descriptor table
    """
    return build_networks(load_secrets(get_secrets_path(secrets_path)))


def get_network(table: Mapping[str, NetworkDescriptor], name: str) -> NetworkDescriptor:
    """
    Look up a network by name.

    Raises:
        NetworkNotFoundError: If the name is not in the table
    """
    if name not in table:
        raise NetworkNotFoundError(
            f"Network '{name}' not found. Available networks: {', '.join(sorted(table))}"
        )
    return table[name]


def is_remote(descriptor: Mapping[str, Any]) -> bool:
    """True if the descriptor reaches its network through a provider factory."""
    return callable(descriptor.get("provider"))


# Built once when the module is imported
networks = load_networks()
