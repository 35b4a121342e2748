"""
Configuration Tests

Tests for:
- Defaults
- YAML loading and deep merge priority
- Validation
- Global config caching
"""

import pytest

from h1client import config as config_module
from h1client.config import (
    DEFAULT_BASE_URL,
    ClientConfig,
    _deep_merge,
    get_config,
    load_config,
    reset_config,
)


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


class TestDefaults:

    def test_defaults_without_files(self):
        config = load_config()

        assert config.log_level == "INFO"
        assert config.client.base_url == DEFAULT_BASE_URL
        assert config.client.page_size == 100
        assert config.client.api_identifier == ""

    def test_default_client_config_is_valid(self):
        assert ClientConfig().validate() == []


class TestLoading:

    def test_user_config(self):
        config_module.USER_CONFIG_PATH.write_text(
            "app:\n"
            "  log_level: DEBUG\n"
            "http:\n"
            "  timeout: 10\n"
            "rate_limit:\n"
            "  requests: 100\n"
            "  window: 30\n"
        )

        config = load_config()

        assert config.log_level == "DEBUG"
        assert config.client.timeout == 10
        assert config.client.rate_limit_requests == 100
        assert config.client.rate_limit_window == 30
        assert config.client.max_retries == 3

    def test_explicit_file_overrides_user_config(self, tmp_path):
        config_module.USER_CONFIG_PATH.write_text(
            "http:\n"
            "  timeout: 10\n"
            "  max_retries: 5\n"
        )
        explicit = tmp_path / "project.yaml"
        explicit.write_text(
            "http:\n"
            "  timeout: 60\n"
            "pagination:\n"
            "  page_size: 25\n"
        )

        config = load_config(explicit)

        assert config.client.timeout == 60
        assert config.client.max_retries == 5
        assert config.client.page_size == 25

    def test_missing_explicit_file_is_ignored(self, tmp_path):
        config = load_config(tmp_path / "nope.yaml")
        assert config.client.timeout == 30

    def test_empty_file(self, tmp_path):
        empty = tmp_path / "empty.yaml"
        empty.write_text("")

        assert load_config(empty).client.timeout == 30

    def test_non_mapping_file(self, tmp_path):
        bad = tmp_path / "bad.yaml"
        bad.write_text("- just\n- a list\n")

        with pytest.raises(ValueError, match="must contain a mapping"):
            load_config(bad)

    def test_deep_merge(self):
        merged = _deep_merge(
            {"http": {"timeout": 10, "max_retries": 3}, "app": {"log_level": "INFO"}},
            {"http": {"timeout": 60}},
        )

        assert merged == {
            "http": {"timeout": 60, "max_retries": 3},
            "app": {"log_level": "INFO"},
        }


class TestValidation:

    @pytest.mark.parametrize("overrides", [
        {"base_url": ""},
        {"timeout": 0},
        {"max_retries": -1},
        {"rate_limit_requests": 0},
        {"page_size": 0},
        {"page_size": 101},
        {"max_pages": 0},
        {"page_size": "50"},
        {"timeout": True},
        {"rate_limit_window": "60"},
    ])
    def test_invalid_values(self, overrides):
        assert ClientConfig(**overrides).validate()

    def test_float_window_is_valid(self):
        assert ClientConfig(rate_limit_window=0.5).validate() == []

    def test_load_rejects_invalid(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("pagination:\n  page_size: 500\n")

        with pytest.raises(ValueError, match="Invalid configuration"):
            load_config(path)

    def test_load_rejects_quoted_number(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("pagination:\n  page_size: '50'\n")

        with pytest.raises(ValueError, match="page_size"):
            load_config(path)

    def test_empty_section_uses_defaults(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("http:\npagination:\n")

        config = load_config(path)

        assert config.client.timeout == 30
        assert config.client.page_size == 100

    def test_empty_section_keeps_user_values(self, tmp_path):
        config_module.USER_CONFIG_PATH.write_text("http:\n  timeout: 10\n")
        path = tmp_path / "settings.yaml"
        path.write_text("http:\n")

        assert load_config(path).client.timeout == 10

    def test_non_mapping_section(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("rate_limit: 600\n")

        with pytest.raises(ValueError, match="'rate_limit' must be a mapping"):
            load_config(path)


class TestGlobalConfig:

    def test_cached(self):
        assert get_config() is get_config()

    def test_reset(self):
        first = get_config()
        reset_config()
        assert get_config() is not first
