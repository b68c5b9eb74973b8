"""Configuration constants for deploy-networks library."""

# Local development chain (Ganache GUI defaults)
DEVELOPMENT_NETWORK = {
    "protocol": "http",
    "host": "localhost",
    "port": 7545,
    "gas": 6721975,
    "gasPrice": 20_000_000_000,  # 2e10 wei
    "networkId": "*",  # match any network id
}

# Public test networks reached through Infura
REMOTE_NETWORKS = {
    "ropsten": {
        "gasPrice": 10_000_000_000,  # 10e9 wei
        "networkId": "3",
    },
    "rinkeby": {
        "gasPrice": 10_000_000_000,
        "networkId": "4",
    },
}

INFURA_URL_TEMPLATE = "https://{network}.infura.io/v3/{project_id}"

# BIP-44 Ethereum prefix; the account index is appended
DEFAULT_DERIVATION_PATH = "m/44'/60'/0'/0/"

SECRETS_FILENAME = "secrets.json"
SECRETS_PATH_ENV = "DEPLOY_NETWORKS_SECRETS"

RPC_TIMEOUT = 30
