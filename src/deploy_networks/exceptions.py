"""Custom exception classes for deploy-networks library."""

from typing import Any, Optional


class NetworkConfigError(Exception):
    """Base exception for network configuration errors."""

    pass


class MissingSecretError(NetworkConfigError, ValueError):
    """Raised when a provider is requested without a mnemonic or project id."""

    pass


class NetworkNotFoundError(NetworkConfigError, KeyError):
    """Raised when a requested network is not in the descriptor table."""

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0]) if self.args else ""


class ProviderError(NetworkConfigError, RuntimeError):
    """Raised when the RPC endpoint cannot be reached or answers with an HTTP error."""

    pass


class RPCError(NetworkConfigError, ValueError):
    """Raised when the RPC endpoint returns a JSON-RPC error object."""

    def __init__(self, message: str, code: Optional[int] = None, data: Any = None):
        super().__init__(message)
        self.code = code
        self.data = data
