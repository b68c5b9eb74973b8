"""Secrets file loading for deploy-networks library."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Secrets:
    """Mnemonic and Infura project id read from the secrets file."""

    mnemonic: str = field(default="", repr=False)
    project_id: str = ""

    @property
    def is_complete(self) -> bool:
        """True when both values are present and non-empty."""
        return bool(self.mnemonic) and bool(self.project_id)


def _string_field(data: dict, key: str, secrets_path: Path) -> str:
    value = data.get(key, "")
    if not isinstance(value, str):
        logger.warning("Ignoring non-string '%s' in secrets file %s", key, secrets_path)
        return ""
    return value.strip()


def load_secrets(secrets_path: Path) -> Secrets:
    """
    Load mnemonic and project id from a JSON secrets file.

    Expected format:
        {"mnemonic": "<twelve words>", "projectId": "<infura project id>"}

    Args:
        secrets_path: Path to secrets.json

    Returns:
        Secrets with empty values if the file doesn't exist or is malformed.
        Providers built from such secrets fail when invoked, not here.
    """
    try:
        with open(secrets_path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.warning("Secrets file not found at %s; remote networks are unusable", secrets_path)
        return Secrets()
    except json.JSONDecodeError as e:
        logger.warning("Secrets file %s is not valid JSON: %s", secrets_path, e)
        return Secrets()
    except UnicodeDecodeError as e:
        logger.warning("Secrets file %s is not valid UTF-8: %s", secrets_path, e)
        return Secrets()
    except OSError as e:
        logger.warning("Secrets file %s could not be read: %s", secrets_path, e.strerror or e)
        return Secrets()

    if not isinstance(data, dict):
        logger.warning("Secrets file %s must contain a JSON object", secrets_path)
        return Secrets()

    return Secrets(
        mnemonic=_string_field(data, "mnemonic", secrets_path),
        project_id=_string_field(data, "projectId", secrets_path),
    )
