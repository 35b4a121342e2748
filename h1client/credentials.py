# h1client — HackerOne API client library
# Copyright (C) 2026 h1client Contributors
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program. If not, see <https://www.gnu.org/licenses/>.

"""
h1client - Credential Manager

Resolves the HackerOne API identifier and token.

Resolution order for each credential:
  1. Environment variable (always wins)
  2. ~/.h1client/credentials.yaml (written with 0600 permissions)

Credential values are never logged.
"""

import os
import stat
import logging
from pathlib import Path
from typing import Optional

import yaml

from .config import ClientConfig, load_config


logger = logging.getLogger(__name__)


CREDENTIALS_DIR = Path.home() / ".h1client"

ENV_VARS = {
    "api_identifier": "H1_API_IDENTIFIER",
    "api_token": "H1_API_TOKEN",
}


class CredentialManager:
    """
    Manages API credentials for h1client.

    Usage:
        creds = CredentialManager()
        config = creds.get_client_config()
        if config is not None:
            client = H1Client(config)
    """

    def __init__(self, credentials_dir: Optional[Path] = None):
        self._dir = credentials_dir or CREDENTIALS_DIR
        self._file = self._dir / "credentials.yaml"
        self._cache: dict[str, str] = {}
        self._loaded = False

    @property
    def credentials_file(self) -> Path:
        return self._file

    def _load(self) -> None:
        """Load credentials from YAML file."""
        if self._loaded:
            return

        if self._file.exists():
            try:
                with open(self._file, "r") as f:
                    data = yaml.safe_load(f) or {}
                self._cache = {k: str(v) for k, v in data.items() if v}
            except (OSError, yaml.YAMLError, AttributeError) as e:
                logger.warning(f"Failed to load credentials from {self._file}: {e}")
                self._cache = {}

        self._loaded = True

    def _save(self) -> None:
        """Save credentials to YAML file with restricted permissions."""
        self._dir.mkdir(parents=True, exist_ok=True)
        try:
            os.chmod(self._dir, stat.S_IRWXU)  # 700
        except OSError:
            logger.debug(f"Could not restrict permissions on {self._dir}")

        data = {k: v for k, v in self._cache.items() if v}
        with open(self._file, "w") as f:
            yaml.safe_dump(data, f, default_flow_style=False)

        try:
            os.chmod(self._file, stat.S_IRUSR | stat.S_IWUSR)  # 600
        except OSError:
            logger.debug(f"Could not restrict permissions on {self._file}")

    # ── Get / Set ───────────────────────────────────────────────────

    def get(self, key: str) -> Optional[str]:
        """
        Get a credential value.

        Resolution: env var → file → None
        """
        env_var = ENV_VARS.get(key, "")
        if env_var:
            env_val = os.environ.get(env_var, "")
            if env_val:
                return env_val

        self._load()
        return self._cache.get(key)

    def set(self, key: str, value: str) -> None:
        """Set a credential value (persists to file)."""
        if key not in ENV_VARS:
            raise KeyError(f"Unknown credential: {key}")
        self._load()
        self._cache[key] = value
        self._save()

    def delete(self, key: str) -> bool:
        """Delete a stored credential. Returns True if it existed."""
        self._load()
        if key in self._cache:
            del self._cache[key]
            self._save()
            return True
        return False

    def has(self, key: str) -> bool:
        """Check if a credential is available (from any source)."""
        return self.get(key) is not None

    def status(self) -> dict:
        """Report where each credential comes from, without its value."""
        self._load()
        result = {}
        for key, env_var in ENV_VARS.items():
            source = "not set"
            if os.environ.get(env_var, ""):
                source = f"env ({env_var})"
            elif self._cache.get(key):
                source = f"file ({self._file.name})"
            result[key] = {"set": source != "not set", "source": source}
        return result

    # ── Client config ───────────────────────────────────────────────

    def get_client_config(self, config_path: Optional[Path] = None) -> Optional[ClientConfig]:
        """
        Build a ClientConfig from loaded settings plus credentials.

        Returns:
            ClientConfig or None if credentials are not available
        """
        identifier = self.get("api_identifier")
        token = self.get("api_token")
        if not identifier or not token:
            return None

        config = load_config(config_path).client
        config.api_identifier = identifier
        config.api_token = token
        return config


_manager: Optional[CredentialManager] = None


def get_credentials(credentials_dir: Optional[Path] = None) -> CredentialManager:
    """Get the global credential manager instance."""
    global _manager
    if _manager is None:
        _manager = CredentialManager(credentials_dir)
    return _manager


def reset_credentials() -> None:
    """Reset the global credential manager (for testing)."""
    global _manager
    _manager = None
