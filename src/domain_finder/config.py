"""
Configuration dataclasses for the domain finder service.

This module defines the configuration structures used throughout the service,
covering registrar credentials, the TLD source and its cache, logging and the
HTTP server bind, plus loading them from the environment (and a ``.env`` file).
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .enums import ConfigurationErrorCode, TldSourceKind
from .exceptions import ConfigurationError


DEFAULT_REGISTRAR_URL = "https://api.godaddy.com"
DEFAULT_CATALOG_URL = "https://api.jpprofessionals.de/items/TLDS"


@dataclass
class RegistrarConfig:
    """Credentials and limits for the registrar (GoDaddy) API."""

    api_key: Optional[str] = None
    api_secret: Optional[str] = None
    base_url: str = DEFAULT_REGISTRAR_URL
    check_timeout_seconds: float = 30.0
    check_type: str = "FAST"

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key) and bool(self.api_secret)

    def __repr__(self) -> str:
        # Never render the secrets themselves.
        return (
            f"RegistrarConfig(base_url={self.base_url!r}, "
            f"has_credentials={self.has_credentials}, "
            f"check_timeout_seconds={self.check_timeout_seconds})"
        )


@dataclass
class TldSourceConfig:
    """Where TLD entries come from and how long remote results stay cached."""

    kind: TldSourceKind = TldSourceKind.STATIC
    dataset_path: Optional[Path] = None
    catalog_url: str = DEFAULT_CATALOG_URL
    fetch_timeout_seconds: float = 10.0
    cache_ttl_seconds: float = 3600.0


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "info"
    output_format: str = "text"  # 'json', 'text', 'both'


@dataclass
class ServerConfig:
    """HTTP server bind address."""

    host: str = "127.0.0.1"
    port: int = 8000


@dataclass
class SystemConfig:
    """Main configuration combining all sub-configurations."""

    registrar: RegistrarConfig = field(default_factory=RegistrarConfig)
    tld_source: TldSourceConfig = field(default_factory=TldSourceConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    server: ServerConfig = field(default_factory=ServerConfig)


def _int_env(env: dict, name: str, default: int) -> int:
    try:
        return int(env.get(name, default))
    except (TypeError, ValueError):
        return default


def _float_env(env: dict, name: str, default: float) -> float:
    """Positive float from the environment; anything else yields the default."""
    try:
        value = float(env.get(name, default))
    except (TypeError, ValueError):
        return default
    if not value > 0 or value == float("inf"):
        return default
    return value


def _str_env(env: dict, name: str, default: Optional[str] = None) -> Optional[str]:
    value = (env.get(name) or "").strip()
    return value or default


def load_config_from_env(
    env: Optional[dict] = None,
    dotenv_path: Optional[Path] = None,
) -> SystemConfig:
    """
    Build a SystemConfig from environment variables.

    Args:
        env: Mapping to read from; defaults to ``os.environ`` after loading ``.env``
        dotenv_path: Optional explicit ``.env`` file to load first

    Returns:
        SystemConfig populated from the environment, defaults elsewhere

    Raises:
        ConfigurationError: If TLD_SOURCE names an unknown source
    """
    if env is None:
        load_dotenv(dotenv_path=dotenv_path)
        env = dict(os.environ)

    source_name = (_str_env(env, "TLD_SOURCE", "static") or "static").lower()
    try:
        source_kind = TldSourceKind(source_name)
    except ValueError:
        raise ConfigurationError(
            code=ConfigurationErrorCode.INVALID_SOURCE.value,
            message=f"Unknown TLD source: {source_name}",
            details={"allowed": [kind.value for kind in TldSourceKind]},
        )

    dataset_path = _str_env(env, "TLD_DATASET_PATH")

    return SystemConfig(
        registrar=RegistrarConfig(
            api_key=_str_env(env, "GODADDY_API_KEY"),
            api_secret=_str_env(env, "GODADDY_API_SECRET"),
            base_url=_str_env(env, "GODADDY_API_URL", DEFAULT_REGISTRAR_URL),
            check_timeout_seconds=_float_env(env, "DOMAIN_CHECK_TIMEOUT", 30.0),
        ),
        tld_source=TldSourceConfig(
            kind=source_kind,
            dataset_path=Path(dataset_path) if dataset_path else None,
            catalog_url=_str_env(env, "TLD_CATALOG_URL", DEFAULT_CATALOG_URL),
            fetch_timeout_seconds=_float_env(env, "TLD_FETCH_TIMEOUT", 10.0),
            cache_ttl_seconds=_float_env(env, "TLD_CACHE_TTL", 3600.0),
        ),
        logging=LoggingConfig(
            level=(_str_env(env, "LOG_LEVEL", "info") or "info").lower(),
            output_format=(_str_env(env, "LOG_FORMAT", "text") or "text").lower(),
        ),
        server=ServerConfig(
            host=_str_env(env, "HOST", "127.0.0.1"),
            port=_int_env(env, "PORT", 8000),
        ),
    )
