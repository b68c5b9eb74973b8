"""HD wallet provider: signs locally, submits over JSON-RPC."""

import itertools
import logging
from typing import Any, Dict, List, Optional

import requests
from eth_account import Account
from eth_account.signers.local import LocalAccount

from .constants import DEFAULT_DERIVATION_PATH, RPC_TIMEOUT
from .exceptions import MissingSecretError, ProviderError, RPCError

logger = logging.getLogger(__name__)

Account.enable_unaudited_hdwallet_features()


def _to_int(value: Any) -> int:
    """Convert a JSON-RPC quantity (hex string) or int to int."""
    if isinstance(value, str):
        return int(value, 16)
    return int(value)


class HDWalletProvider:
    """
    Connection to an RPC endpoint with accounts derived from a mnemonic.

    Transactions are signed locally and submitted with
    eth_sendRawTransaction, so the node never sees a private key.
    """

    def __init__(
        self,
        mnemonic: str,
        rpc_url: str,
        address_index: int = 0,
        num_addresses: int = 1,
        derivation_path: str = DEFAULT_DERIVATION_PATH,
    ):
        """
        Derive accounts and open a session to the endpoint.

        Args:
            mnemonic: BIP-39 seed phrase
            rpc_url: HTTP(S) JSON-RPC endpoint
            address_index: First account index to derive
            num_addresses: Number of consecutive accounts to derive
            derivation_path: HD path prefix; the account index is appended

        Raises:
            MissingSecretError: If mnemonic or rpc_url is empty
            ValueError: If num_addresses is less than 1
        """
        if not mnemonic:
            raise MissingSecretError("Mnemonic is required to create a wallet provider")
        if not rpc_url:
            raise MissingSecretError("RPC URL is required to create a wallet provider")
        if num_addresses < 1:
            raise ValueError(f"num_addresses must be at least 1, got {num_addresses}")

        self.rpc_url = rpc_url
        self._accounts: Dict[str, LocalAccount] = {}
        for index in range(address_index, address_index + num_addresses):
            account = Account.from_mnemonic(mnemonic, account_path=f"{derivation_path}{index}")
            self._accounts[account.address.lower()] = account
        self._addresses = [a.address for a in self._accounts.values()]

        self._session: Optional[requests.Session] = requests.Session()
        self._ids = itertools.count(1)
        logger.debug("Created wallet provider for %s with %d account(s)", rpc_url, num_addresses)

    def __repr__(self) -> str:
        return f"HDWalletProvider(rpc_url={self.rpc_url!r}, addresses={self._addresses!r})"

    def __enter__(self) -> "HDWalletProvider":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._session is None

    def close(self) -> None:
        """Close the underlying HTTP session."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def get_address(self, index: int = 0) -> str:
        """Checksummed address of the index-th derived account."""
        return self._addresses[index]

    def get_addresses(self) -> List[str]:
        return list(self._addresses)

    def request(self, method: str, params: Optional[List[Any]] = None) -> Any:
        """
        Make a JSON-RPC 2.0 call.

        Args:
            method: RPC method name, e.g. "eth_chainId"
            params: Positional parameters

        Returns:
            The "result" member of the response

        Raises:
            ProviderError: If the provider is closed, a network error occurs
                           or the HTTP status is not 200
            RPCError: If the response carries a JSON-RPC error
        """
        if self._session is None:
            raise ProviderError("Provider is closed")

        payload = {
            "jsonrpc": "2.0",
            "method": method,
            "params": params or [],
            "id": next(self._ids),
        }
        logger.debug("RPC %s -> %s", method, self.rpc_url)

        try:
            response = self._session.post(self.rpc_url, json=payload, timeout=RPC_TIMEOUT)

            if response.status_code != 200:
                raise ProviderError(f"RPC request failed with status {response.status_code}")

            result = response.json()
        except ValueError as e:
            raise ProviderError(f"RPC response is not valid JSON: {e}") from e
        except requests.RequestException as e:
            raise ProviderError(f"Network error during RPC call: {e}") from e

        if not isinstance(result, dict):
            raise ProviderError(f"Unexpected RPC response: {result!r}")

        if "error" in result:
            error = result["error"]
            if isinstance(error, dict):
                raise RPCError(
                    f"RPC error: {error.get('message', error)}",
                    code=error.get("code"),
                    data=error.get("data"),
                )
            raise RPCError(f"RPC error: {error}")

        if "result" not in result:
            raise ProviderError(f"RPC response for {method} has no result")

        return result["result"]

    def chain_id(self) -> int:
        return _to_int(self.request("eth_chainId"))

    def _account_for(self, address: Optional[str]) -> LocalAccount:
        if address is None:
            return self._accounts[self._addresses[0].lower()]
        try:
            return self._accounts[address.lower()]
        except KeyError:
            raise ValueError(f"Address {address} is not managed by this provider") from None

    def sign_transaction(self, tx: Dict[str, Any], address: Optional[str] = None) -> bytes:
        """
        Sign a fully populated transaction.

        Args:
            tx: Transaction fields (nonce, gas, gasPrice, chainId, to, value, data)
            address: Signing account, defaults to the first derived address

        Returns:
            Raw signed transaction bytes
        """
        account = self._account_for(address)
        signed = account.sign_transaction(tx)
        return bytes(signed.raw_transaction)

    def send_transaction(self, tx: Dict[str, Any]) -> str:
        """
        Fill in missing fields, sign and submit a transaction.

        Missing nonce, chainId, gas and gasPrice are fetched from the node.

        Args:
            tx: Transaction fields; "from" selects the signing account

        Returns:
            Transaction hash as returned by the node
        """
        tx = dict(tx)
        account = self._account_for(tx.pop("from", None))

        if "nonce" not in tx:
            tx["nonce"] = _to_int(
                self.request("eth_getTransactionCount", [account.address, "pending"])
            )
        if "chainId" not in tx:
            tx["chainId"] = self.chain_id()
        if "gasPrice" not in tx and "maxFeePerGas" not in tx:
            tx["gasPrice"] = _to_int(self.request("eth_gasPrice"))
        if "gas" not in tx:
            estimate = {"from": account.address}
            for key in ("to", "data"):
                if key in tx:
                    estimate[key] = tx[key]
            if "value" in tx:
                value = tx["value"]
                estimate["value"] = hex(value) if isinstance(value, int) else value
            tx["gas"] = _to_int(self.request("eth_estimateGas", [estimate]))

        raw = self.sign_transaction(tx, account.address)
        tx_hash = self.request("eth_sendRawTransaction", ["0x" + raw.hex()])
        logger.info("Submitted transaction %s from %s", tx_hash, account.address)
        return tx_hash
