"""Shared pytest fixtures for deploy-networks tests."""

import json
from pathlib import Path
from typing import Any, Dict

import pytest

from deploy_networks.credentials import Secrets

# Well-known development mnemonic (Hardhat / Anvil default accounts)
TEST_MNEMONIC = "test test test test test test test test test test test junk"
TEST_PROJECT_ID = "0123456789abcdef0123456789abcdef"


@pytest.fixture
def sample_secrets_json() -> Dict[str, Any]:
    """Return the contents of a valid secrets.json."""
    return {"mnemonic": TEST_MNEMONIC, "projectId": TEST_PROJECT_ID}


@pytest.fixture
def mnemonic() -> str:
    """Return the test mnemonic."""
    return TEST_MNEMONIC


@pytest.fixture
def secrets() -> Secrets:
    """Return complete secrets built from the test mnemonic."""
    return Secrets(mnemonic=TEST_MNEMONIC, project_id=TEST_PROJECT_ID)


@pytest.fixture
def temp_secrets_file(tmp_path: Path, sample_secrets_json: Dict[str, Any]) -> Path:
    """Create a temporary secrets.json file with sample data."""
    secrets_path = tmp_path / "secrets.json"
    with open(secrets_path, "w") as f:
        json.dump(sample_secrets_json, f, indent=2)
    return secrets_path


@pytest.fixture
def rpc_url() -> str:
    """Return a fake RPC endpoint URL."""
    return "http://rpc.test:8545"
