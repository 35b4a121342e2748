"""
h1client Test Configuration

Shared fixtures and configuration for pytest.
"""

import pytest
from pathlib import Path

from h1client.client import H1Client
from h1client.config import ClientConfig


BASE_URL = "https://api.test/v1/"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def load_fixture(fixtures_dir):
    """Return a loader for raw fixture bytes."""
    def _load(name: str) -> bytes:
        return (fixtures_dir / name).read_bytes()
    return _load


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def client_config() -> ClientConfig:
    """Client config pointing at a fake host, without retries or throttling."""
    return ClientConfig(
        api_identifier="api-example",
        api_token="secret-token",
        base_url=BASE_URL,
        web_url="https://h1.test",
        max_retries=0,
        rate_limit_requests=10_000,
    )


@pytest.fixture
def client(client_config):
    h1 = H1Client(client_config)
    yield h1
    h1.close()


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep tests away from the real ~/.config and ~/.h1client."""
    monkeypatch.setattr("h1client.config.USER_CONFIG_PATH", tmp_path / "config.yaml")
    monkeypatch.setattr("h1client.credentials.CREDENTIALS_DIR", tmp_path / ".h1client")
    monkeypatch.delenv("H1_API_IDENTIFIER", raising=False)
    monkeypatch.delenv("H1_API_TOKEN", raising=False)
