"""
Property-based tests for configuration module.

Uses Hypothesis to check that environment mappings load into SystemConfig with
the documented defaults and fallbacks.
"""

import os

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from domain_finder.config import (
    DEFAULT_CATALOG_URL,
    DEFAULT_REGISTRAR_URL,
    SystemConfig,
    load_config_from_env,
)
from domain_finder.enums import ConfigurationErrorCode, TldSourceKind
from domain_finder.exceptions import ConfigurationError


@st.composite
def credential_strategy(draw) -> str:
    # Never a substring of the repr's own text
    return "sk_" + draw(st.text(
        alphabet=st.sampled_from("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_"),
        min_size=12,
        max_size=40,
    ))


class TestEnvironmentLoadingProperty:
    """Environment variables map onto the configuration dataclasses."""

    def test_empty_environment_uses_defaults(self) -> None:
        config = load_config_from_env(env={})

        assert config.registrar.base_url == DEFAULT_REGISTRAR_URL
        assert config.registrar.check_timeout_seconds == 30.0
        assert config.registrar.check_type == "FAST"
        assert not config.registrar.has_credentials
        assert config.tld_source.kind is TldSourceKind.STATIC
        assert config.tld_source.dataset_path is None
        assert config.tld_source.catalog_url == DEFAULT_CATALOG_URL
        assert config.tld_source.fetch_timeout_seconds == 10.0
        assert config.tld_source.cache_ttl_seconds == 3600.0
        assert config.logging.level == "info"
        assert config.logging.output_format == "text"
        assert config.server.host == "127.0.0.1"
        assert config.server.port == 8000

    def test_defaults_match_dataclass_defaults(self) -> None:
        assert load_config_from_env(env={}) == SystemConfig()

    @given(key=credential_strategy(), secret=credential_strategy())
    @settings(max_examples=100)
    def test_credentials_loaded(self, key: str, secret: str) -> None:
        config = load_config_from_env(env={
            "GODADDY_API_KEY": key,
            "GODADDY_API_SECRET": secret,
        })

        assert config.registrar.api_key == key
        assert config.registrar.api_secret == secret
        assert config.registrar.has_credentials
        assert secret not in repr(config.registrar)

    def test_blank_credentials_are_missing(self) -> None:
        config = load_config_from_env(env={
            "GODADDY_API_KEY": "   ",
            "GODADDY_API_SECRET": "",
        })
        assert not config.registrar.has_credentials

    @given(source=st.sampled_from(["static", "catalog", "registrar", "CATALOG", " Registrar "]))
    @settings(max_examples=20)
    def test_known_sources(self, source: str) -> None:
        config = load_config_from_env(env={"TLD_SOURCE": source})
        assert config.tld_source.kind is TldSourceKind(source.strip().lower())

    def test_unknown_source_rejected(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            load_config_from_env(env={"TLD_SOURCE": "carrier-pigeon"})

        assert exc_info.value.code == ConfigurationErrorCode.INVALID_SOURCE.value
        assert "carrier-pigeon" in exc_info.value.message

    def test_paths_urls_and_server(self) -> None:
        config = load_config_from_env(env={
            "TLD_DATASET_PATH": "/data/tlds.json",
            "TLD_CATALOG_URL": "https://catalog.test/items",
            "GODADDY_API_URL": "https://api.ote-godaddy.com",
            "HOST": "0.0.0.0",
            "PORT": "9000",
            "LOG_LEVEL": "DEBUG",
            "LOG_FORMAT": "JSON",
        })

        assert str(config.tld_source.dataset_path) == "/data/tlds.json"
        assert config.tld_source.catalog_url == "https://catalog.test/items"
        assert config.registrar.base_url == "https://api.ote-godaddy.com"
        assert config.server.host == "0.0.0.0"
        assert config.server.port == 9000
        assert config.logging.level == "debug"
        assert config.logging.output_format == "json"


class TestNumericFallbackProperty:
    """Unparsable or non-positive numbers fall back to their defaults."""

    @given(value=st.floats(min_value=0.001, max_value=1e6))
    @settings(max_examples=100)
    def test_positive_timeouts_kept(self, value: float) -> None:
        config = load_config_from_env(env={
            "DOMAIN_CHECK_TIMEOUT": repr(value),
            "TLD_CACHE_TTL": repr(value),
        })
        assert config.registrar.check_timeout_seconds == value
        assert config.tld_source.cache_ttl_seconds == value

    @pytest.mark.parametrize("raw", ["", "abc", "0", "-5", "inf", "nan"])
    def test_invalid_timeouts_fall_back(self, raw: str) -> None:
        config = load_config_from_env(env={
            "DOMAIN_CHECK_TIMEOUT": raw,
            "TLD_FETCH_TIMEOUT": raw,
            "TLD_CACHE_TTL": raw,
        })
        assert config.registrar.check_timeout_seconds == 30.0
        assert config.tld_source.fetch_timeout_seconds == 10.0
        assert config.tld_source.cache_ttl_seconds == 3600.0

    @pytest.mark.parametrize("raw", ["", "eighty", "80.5"])
    def test_invalid_port_falls_back(self, raw: str) -> None:
        assert load_config_from_env(env={"PORT": raw}).server.port == 8000


class TestDotenvProperty:
    """A .env file is read when no explicit mapping is given."""

    def test_env_file_loaded(self, tmp_path, monkeypatch) -> None:
        for name in ("GODADDY_API_KEY", "GODADDY_API_SECRET", "TLD_SOURCE"):
            monkeypatch.delenv(name, raising=False)

        env_file = tmp_path / ".env"
        env_file.write_text(
            "GODADDY_API_KEY=from-file\n"
            "GODADDY_API_SECRET=file-secret\n"
            "TLD_SOURCE=catalog\n",
            encoding="utf-8",
        )

        try:
            config = load_config_from_env(dotenv_path=env_file)
        finally:
            for name in ("GODADDY_API_KEY", "GODADDY_API_SECRET", "TLD_SOURCE"):
                os.environ.pop(name, None)

        assert config.registrar.api_key == "from-file"
        assert config.registrar.has_credentials
        assert config.tld_source.kind is TldSourceKind.CATALOG

    def test_process_environment_wins_over_file(self, tmp_path, monkeypatch) -> None:
        monkeypatch.setenv("GODADDY_API_KEY", "from-process")
        env_file = tmp_path / ".env"
        env_file.write_text("GODADDY_API_KEY=from-file\n", encoding="utf-8")

        config = load_config_from_env(dotenv_path=env_file)

        assert config.registrar.api_key == "from-process"
