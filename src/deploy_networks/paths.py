"""Path management utilities for deploy-networks library."""

import os
from pathlib import Path
from typing import Optional, Union

from .constants import SECRETS_FILENAME, SECRETS_PATH_ENV


def get_default_secrets_path() -> Path:
    """
    Get default secrets file path (current working directory).

    Returns:
        Path to ./secrets.json
    """
    return Path.cwd() / SECRETS_FILENAME


def get_secrets_path(path: Optional[Union[Path, str]] = None) -> Path:
    """
    Resolve the secrets file location.

    Args:
        path: Explicit secrets file path. When None, the DEPLOY_NETWORKS_SECRETS
              environment variable is used, then ./secrets.json

    Returns:
        Absolute path to the secrets file
    """
    if path is None:
        path = os.environ.get(SECRETS_PATH_ENV) or None

    if path is None:
        return get_default_secrets_path()

    return Path(path).absolute()
