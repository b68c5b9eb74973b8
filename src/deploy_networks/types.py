"""Descriptor types for deploy-networks library."""

from typing import Callable, TypedDict, Union

from .provider import HDWalletProvider


class LocalNetworkDescriptor(TypedDict):
    """Network addressed directly by host and port."""

    protocol: str  # e.g., "http"
    host: str
    port: int
    gas: int  # Gas limit per transaction
    gasPrice: int  # Wei
    networkId: str  # "*" accepts any network id


class RemoteNetworkDescriptor(TypedDict):
    """Network reached through a lazily created wallet provider."""

    provider: Callable[[], HDWalletProvider]
    gasPrice: int  # Wei
    networkId: str  # Chain id as a decimal string


NetworkDescriptor = Union[LocalNetworkDescriptor, RemoteNetworkDescriptor]
