"""
Service wiring for the domain finder.

Builds the registrar client, the configured TLD source and cache, the lookup and
the orchestrator from a SystemConfig. Used by both the HTTP app and the CLI.
"""

from dataclasses import dataclass
from typing import Callable, Optional

import httpx

from .audit_logger import AuditLogger
from .config import SystemConfig
from .enums import TldSourceKind
from .orchestrator import DomainCheckOrchestrator
from .registrar_client import RegistrarClient
from .tld_cache import TldCache
from .tld_lookup import TldLookup
from .tld_registry import DEFAULT_DATASET, load_dataset
from .tld_sources import (
    CatalogTldSource,
    RegistrarTldSource,
    StaticTldSource,
    TldSource,
)


@dataclass
class Services:
    """Everything a request handler needs."""

    config: SystemConfig
    orchestrator: DomainCheckOrchestrator
    tld_lookup: TldLookup
    logger: AuditLogger


def create_tld_source(
    config: SystemConfig,
    registrar_client: RegistrarClient,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> TldSource:
    """
    Create the TLD source named by the configuration.

    Raises:
        ConfigurationError: If a dataset override file is unreadable or malformed
    """
    source_config = config.tld_source

    if source_config.kind is TldSourceKind.CATALOG:
        return CatalogTldSource(source_config, transport=transport)

    if source_config.kind is TldSourceKind.REGISTRAR:
        return RegistrarTldSource(registrar_client)

    if source_config.dataset_path is not None:
        return StaticTldSource(load_dataset(source_config.dataset_path))
    return StaticTldSource(DEFAULT_DATASET)


def create_services(
    config: SystemConfig,
    logger: Optional[AuditLogger] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    clock: Optional[Callable[[], float]] = None,
) -> Services:
    """
    Wire up the service graph.

    Args:
        config: System configuration
        logger: Optional logger; one is built from ``config.logging`` otherwise
        transport: Optional httpx transport shared by all upstream clients
        clock: Optional time source for the TLD cache

    Returns:
        Services bundle
    """
    if logger is None:
        logger = AuditLogger.from_config(config.logging)

    registrar_client = RegistrarClient(
        config.registrar,
        transport=transport,
        tld_timeout=config.tld_source.fetch_timeout_seconds,
    )

    source = create_tld_source(config, registrar_client, transport=transport)

    cache = None
    if source.cacheable:
        if clock is not None:
            cache = TldCache(config.tld_source.cache_ttl_seconds, clock=clock)
        else:
            cache = TldCache(config.tld_source.cache_ttl_seconds)

    if not config.registrar.has_credentials:
        logger.warn("services", "Registrar credentials missing; domain checks will fail")

    return Services(
        config=config,
        orchestrator=DomainCheckOrchestrator(registrar_client, logger=logger),
        tld_lookup=TldLookup(source, cache=cache, logger=logger),
        logger=logger,
    )
