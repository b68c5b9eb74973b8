"""Integration tests: host tool selecting a network and deploying through it."""

import json
from pathlib import Path

import pytest
import responses
from eth_account import Account

from deploy_networks import (
    HDWalletProvider,
    MissingSecretError,
    NetworkNotFoundError,
    get_network,
    is_remote,
    load_networks,
)

DEPLOYER = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"
CONTRACT_BYTECODE = "0x6080604052348015600f57600080fd5b50603f80601d6000396000f3fe"
TX_HASH = "0x" + "cd" * 32


def deploy(networks, name: str) -> dict:
    """Minimal host tool: resolve a network and submit a contract creation."""
    descriptor = get_network(networks, name)

    if not is_remote(descriptor):
        return {"rpc_url": f"{descriptor['protocol']}://{descriptor['host']}:{descriptor['port']}"}

    with descriptor["provider"]() as provider:
        tx_hash = provider.send_transaction(
            {
                "data": CONTRACT_BYTECODE,
                "value": 0,
                "gasPrice": descriptor["gasPrice"],
                "chainId": int(descriptor["networkId"]),
            }
        )
        return {"rpc_url": provider.rpc_url, "tx_hash": tx_hash}


class TestDeploymentFlow:
    """Test selecting and using networks end to end."""

    def test_development_network_needs_no_secrets(self, tmp_path: Path):
        networks = load_networks(tmp_path / "missing.json")

        assert deploy(networks, "development") == {"rpc_url": "http://localhost:7545"}

    @responses.activate
    @pytest.mark.parametrize("name,chain_id", [("ropsten", 3), ("rinkeby", 4)])
    def test_deploys_to_remote_network(
        self, temp_secrets_file: Path, sample_secrets_json, name: str, chain_id: int
    ):
        expected_url = f"https://{name}.infura.io/v3/{sample_secrets_json['projectId']}"
        submitted = []

        def handle(request):
            payload = json.loads(request.body)
            if payload["method"] == "eth_getTransactionCount":
                result = "0x0"
            elif payload["method"] == "eth_estimateGas":
                assert "to" not in payload["params"][0]
                result = "0x186a0"
            elif payload["method"] == "eth_sendRawTransaction":
                submitted.append(payload["params"][0])
                result = TX_HASH
            else:
                return (400, {}, "")
            return (200, {}, json.dumps({"jsonrpc": "2.0", "id": payload["id"], "result": result}))

        responses.add_callback(responses.POST, expected_url, callback=handle)

        networks = load_networks(temp_secrets_file)
        result = deploy(networks, name)

        assert result == {"rpc_url": expected_url, "tx_hash": TX_HASH}
        assert len(submitted) == 1
        assert Account.recover_transaction(submitted[0]) == DEPLOYER

    def test_remote_network_without_secrets_fails_when_targeted(self, tmp_path: Path):
        networks = load_networks(tmp_path / "missing.json")

        with pytest.raises(MissingSecretError):
            deploy(networks, "ropsten")

    def test_unknown_network(self, temp_secrets_file: Path):
        networks = load_networks(temp_secrets_file)

        with pytest.raises(NetworkNotFoundError):
            deploy(networks, "kovan")

    def test_factories_are_invoked_lazily(self, temp_secrets_file: Path, monkeypatch):
        """Test that loading the table creates no providers."""
        created = []
        original_init = HDWalletProvider.__init__

        def recording_init(self, *args, **kwargs):
            created.append(args)
            original_init(self, *args, **kwargs)

        monkeypatch.setattr(HDWalletProvider, "__init__", recording_init)

        networks = load_networks(temp_secrets_file)
        assert created == []

        networks["rinkeby"]["provider"]().close()
        assert len(created) == 1
