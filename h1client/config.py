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
h1client Configuration Management

Loads client settings from YAML files. Credentials are resolved
separately by CredentialManager and never read from these files.

Example config.yaml:

    app:
      log_level: DEBUG
    http:
      base_url: https://api.hackerone.com/v1/
      timeout: 30
      max_retries: 3
      verify_ssl: true
    rate_limit:
      requests: 600
      window: 60
    pagination:
      page_size: 100
      max_pages: 1000
"""

from pathlib import Path
from typing import Optional
from dataclasses import dataclass, field

import yaml

from .pagination import DEFAULT_MAX_PAGES, DEFAULT_PAGE_SIZE


USER_CONFIG_PATH = Path.home() / ".config" / "h1client" / "config.yaml"

DEFAULT_BASE_URL = "https://api.hackerone.com/v1/"
DEFAULT_WEB_URL = "https://hackerone.com"
DEFAULT_USER_AGENT = "h1client"


@dataclass
class ClientConfig:
    """Configuration for an H1Client."""
    api_identifier: str = ""
    api_token: str = ""
    base_url: str = DEFAULT_BASE_URL
    web_url: str = DEFAULT_WEB_URL    # Used for report links only
    user_agent: str = DEFAULT_USER_AGENT
    timeout: int = 30
    max_retries: int = 3
    rate_limit_requests: int = 600
    rate_limit_window: float = 60.0
    verify_ssl: bool = True
    page_size: int = DEFAULT_PAGE_SIZE
    max_pages: int = DEFAULT_MAX_PAGES

    def validate(self) -> list[str]:
        """Return a list of problems (empty if the config is usable)."""
        problems = []
        if not self.base_url or not isinstance(self.base_url, str):
            problems.append("http.base_url must be set")
        if not _is_int(self.timeout) or self.timeout <= 0:
            problems.append("http.timeout must be a positive integer")
        if not _is_int(self.max_retries) or self.max_retries < 0:
            problems.append("http.max_retries must be a non-negative integer")
        if not _is_int(self.rate_limit_requests) or self.rate_limit_requests <= 0:
            problems.append("rate_limit.requests must be a positive integer")
        if not _is_number(self.rate_limit_window) or self.rate_limit_window <= 0:
            problems.append("rate_limit.window must be a positive number")
        if not _is_int(self.page_size) or not 1 <= self.page_size <= DEFAULT_PAGE_SIZE:
            problems.append(f"pagination.page_size must be an integer between 1 and {DEFAULT_PAGE_SIZE}")
        if not _is_int(self.max_pages) or self.max_pages <= 0:
            problems.append("pagination.max_pages must be a positive integer")
        return problems


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass
class Config:
    """Main configuration container."""
    client: ClientConfig = field(default_factory=ClientConfig)
    log_level: str = "INFO"


def _deep_merge(base: dict, override: dict) -> dict:
    """Deep merge two dictionaries."""
    result = base.copy()

    for key, value in override.items():
        if value is None and isinstance(result.get(key), dict):
            continue
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def _section(data: dict, name: str) -> dict:
    """A top-level section as a mapping; an empty section counts as {}."""
    value = data.get(name)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"Config section '{name}' must be a mapping")
    return value


def _dict_to_config(data: dict) -> Config:
    """Convert dictionary to Config object."""
    config = Config()
    client = config.client

    app = _section(data, "app")
    config.log_level = app.get("log_level", config.log_level)

    h = _section(data, "http")
    client.base_url = h.get("base_url", client.base_url)
    client.web_url = h.get("web_url", client.web_url)
    client.user_agent = h.get("user_agent", client.user_agent)
    client.timeout = h.get("timeout", client.timeout)
    client.max_retries = h.get("max_retries", client.max_retries)
    client.verify_ssl = h.get("verify_ssl", client.verify_ssl)

    rl = _section(data, "rate_limit")
    client.rate_limit_requests = rl.get("requests", client.rate_limit_requests)
    client.rate_limit_window = rl.get("window", client.rate_limit_window)

    p = _section(data, "pagination")
    client.page_size = p.get("page_size", client.page_size)
    client.max_pages = p.get("max_pages", client.max_pages)

    return config


def _read_yaml(path: Path) -> dict:
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    return data


def load_config(config_path: Optional[Path] = None) -> Config:
    """
    Load configuration from files.

    Priority (highest to lowest):
    1. Specified config_path
    2. User config (~/.config/h1client/config.yaml)
    3. Built-in defaults

    Args:
        config_path: Optional explicit config file path

    Returns:
        Config object

    Raises:
        ValueError: If the merged configuration is invalid
    """
    config_data: dict = {}

    if USER_CONFIG_PATH.exists():
        config_data = _deep_merge(config_data, _read_yaml(USER_CONFIG_PATH))

    if config_path and config_path.exists():
        config_data = _deep_merge(config_data, _read_yaml(config_path))

    config = _dict_to_config(config_data)

    problems = config.client.validate()
    if problems:
        raise ValueError(
            "Invalid configuration:\n" + "\n".join(problems)
        )

    return config


# Global config instance (lazy loaded)
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config

    if _config is None:
        _config = load_config()

    return _config


def reset_config() -> None:
    """Reset the global configuration (for testing)."""
    global _config
    _config = None
