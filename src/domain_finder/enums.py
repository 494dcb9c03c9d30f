"""
Enumeration types for the domain finder service.

These enums provide type-safe constants for TLD kinds, error codes and
logging levels throughout the service.
"""

from enum import Enum
from typing import Optional


class TldType(Enum):
    """Kind of top-level domain, as reported by the registrar."""

    GENERIC = "GENERIC"
    COUNTRY_CODE = "COUNTRY_CODE"

    @classmethod
    def parse(cls, value: object) -> Optional["TldType"]:
        """Return the matching member, or None for anything unrecognized."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


class TldSourceKind(Enum):
    """Where the TLD lookup reads its entries from."""

    STATIC = "static"
    CATALOG = "catalog"
    REGISTRAR = "registrar"


class LogLevel(Enum):
    """Logging severity levels."""

    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"


class ValidationErrorCode(Enum):
    """Error codes for request validation failures."""

    MISSING_DOMAIN = "missing_domain"
    DOMAIN_TOO_LONG = "domain_too_long"
    INVALID_TLDS = "invalid_tlds"
    TOO_MANY_TLDS = "too_many_tlds"
    TOTAL_LENGTH_EXCEEDED = "total_length_exceeded"


class ConfigurationErrorCode(Enum):
    """Error codes for configuration failures."""

    MISSING_CREDENTIALS = "missing_credentials"
    INVALID_DATASET = "invalid_dataset"
    INVALID_SOURCE = "invalid_source"


class UpstreamErrorCode(Enum):
    """Error codes for upstream API failures."""

    NETWORK_ERROR = "network_error"
    TIMEOUT = "timeout"
    HTTP_ERROR = "http_error"
    PARSE_ERROR = "parse_error"
