"""
deploy-networks: network configuration for smart contract deployments
"""

from importlib.metadata import PackageNotFoundError, version

from .credentials import Secrets, load_secrets
from .exceptions import (
    MissingSecretError,
    NetworkConfigError,
    NetworkNotFoundError,
    ProviderError,
    RPCError,
)
from .config import build_networks, get_network, is_remote, load_networks, networks
from .provider import HDWalletProvider

try:
    __version__ = version("deploy-networks")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "networks",
    "build_networks",
    "load_networks",
    "get_network",
    "is_remote",
    "HDWalletProvider",
    "Secrets",
    "load_secrets",
    "NetworkConfigError",
    "MissingSecretError",
    "NetworkNotFoundError",
    "ProviderError",
    "RPCError",
]
