"""
Tests for service wiring.
"""

import asyncio
import json
from io import StringIO

import httpx
import pytest

from domain_finder.audit_logger import AuditLogger
from domain_finder.config import RegistrarConfig, SystemConfig, TldSourceConfig
from domain_finder.enums import TldSourceKind
from domain_finder.exceptions import ConfigurationError
from domain_finder.services import create_services
from domain_finder.tld_sources import (
    CatalogTldSource,
    RegistrarTldSource,
    StaticTldSource,
    TldSource,
)


def quiet_logger() -> AuditLogger:
    return AuditLogger(output_stream=StringIO())


class TestSourceSelection:
    @pytest.mark.parametrize("kind,source_type,cached", [
        (TldSourceKind.STATIC, StaticTldSource, False),
        (TldSourceKind.CATALOG, CatalogTldSource, True),
        (TldSourceKind.REGISTRAR, RegistrarTldSource, True),
    ])
    def test_kinds(self, kind, source_type, cached: bool) -> None:
        config = SystemConfig(tld_source=TldSourceConfig(kind=kind))

        services = create_services(config, logger=quiet_logger())

        assert isinstance(services.tld_lookup.source, source_type)
        assert isinstance(services.tld_lookup.source, TldSource)
        assert (services.tld_lookup.cache is not None) is cached

    def test_cache_uses_configured_ttl_and_clock(self) -> None:
        config = SystemConfig(tld_source=TldSourceConfig(
            kind=TldSourceKind.CATALOG,
            cache_ttl_seconds=120,
        ))

        services = create_services(config, logger=quiet_logger(), clock=lambda: 42.0)

        assert services.tld_lookup.cache.ttl_seconds == 120

    def test_dataset_override(self, tmp_path) -> None:
        path = tmp_path / "tlds.json"
        path.write_text(json.dumps({
            "version": "override",
            "lastUpdated": "2025-03-01T00:00:00Z",
            "total": 1,
            "tlds": [{"name": ".only", "type": "GENERIC"}],
        }), encoding="utf-8")
        config = SystemConfig(tld_source=TldSourceConfig(dataset_path=path))

        services = create_services(config, logger=quiet_logger())

        assert services.tld_lookup.source.dataset.version == "override"

    def test_broken_dataset_override(self, tmp_path) -> None:
        path = tmp_path / "tlds.json"
        path.write_text("[]", encoding="utf-8")
        config = SystemConfig(tld_source=TldSourceConfig(dataset_path=path))

        with pytest.raises(ConfigurationError):
            create_services(config, logger=quiet_logger())


class TestWiring:
    def test_missing_credentials_warned(self) -> None:
        logger = quiet_logger()

        create_services(SystemConfig(), logger=logger)

        assert [entry.message for entry in logger.entries] == [
            "Registrar credentials missing; domain checks will fail",
        ]

    def test_transport_reaches_registrar(self) -> None:
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(200, json=[{"name": "com", "type": "GENERIC"}])

        config = SystemConfig(
            registrar=RegistrarConfig(api_key="k", api_secret="s"),
            tld_source=TldSourceConfig(kind=TldSourceKind.REGISTRAR),
        )
        services = create_services(
            config,
            logger=quiet_logger(),
            transport=httpx.MockTransport(handler),
        )

        names = asyncio.run(services.tld_lookup.list_all())

        assert names == [".com"]
        assert calls[0].url.host == "api.godaddy.com"
        assert services.logger.entries == []
