"""
Domain Finder - domain availability checks and TLD search behind a small HTTP API.

This package validates and expands domain-check requests into one batched
registrar call, and lists or searches known TLDs from a bundled dataset or a
cached remote source.
"""

__version__ = "0.3.0"

from domain_finder.exceptions import (
    DomainFinderError,
    ValidationError,
    ConfigurationError,
    UpstreamError,
)
from domain_finder.enums import (
    TldType,
    TldSourceKind,
    LogLevel,
    ValidationErrorCode,
    ConfigurationErrorCode,
    UpstreamErrorCode,
)
from domain_finder.config import (
    RegistrarConfig,
    TldSourceConfig,
    LoggingConfig,
    ServerConfig,
    SystemConfig,
    load_config_from_env,
)
from domain_finder.models import (
    DomainResult,
    DomainError,
    DomainsResult,
    TldEntry,
    TldDataset,
    CheckDomainsRequest,
    GetTldsRequest,
)
from domain_finder.audit_logger import (
    AuditLogger,
    LogEntry,
)
from domain_finder.request_validator import (
    RequestValidator,
    ValidatedCheck,
    build_candidates,
    resolve_page_size,
)
from domain_finder.registrar_client import RegistrarClient
from domain_finder.tld_cache import TldCache
from domain_finder.tld_sources import (
    TldSource,
    StaticTldSource,
    CatalogTldSource,
    RegistrarTldSource,
)
from domain_finder.tld_lookup import TldLookup
from domain_finder.orchestrator import DomainCheckOrchestrator
from domain_finder.services import Services, create_services

__all__ = [
    # Version
    "__version__",
    # Exceptions
    "DomainFinderError",
    "ValidationError",
    "ConfigurationError",
    "UpstreamError",
    # Enums
    "TldType",
    "TldSourceKind",
    "LogLevel",
    "ValidationErrorCode",
    "ConfigurationErrorCode",
    "UpstreamErrorCode",
    # Config
    "RegistrarConfig",
    "TldSourceConfig",
    "LoggingConfig",
    "ServerConfig",
    "SystemConfig",
    "load_config_from_env",
    # Models
    "DomainResult",
    "DomainError",
    "DomainsResult",
    "TldEntry",
    "TldDataset",
    "CheckDomainsRequest",
    "GetTldsRequest",
    # Logging
    "AuditLogger",
    "LogEntry",
    # Validation
    "RequestValidator",
    "ValidatedCheck",
    "build_candidates",
    "resolve_page_size",
    # Upstream
    "RegistrarClient",
    # TLD lookup
    "TldCache",
    "TldSource",
    "StaticTldSource",
    "CatalogTldSource",
    "RegistrarTldSource",
    "TldLookup",
    # Orchestration
    "DomainCheckOrchestrator",
    "Services",
    "create_services",
]
