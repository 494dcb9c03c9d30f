"""
Domain availability check orchestrator.

This module coordinates one availability check:
- Ordered validation of the base domain and TLD list
- Credential check before any network call
- Expansion into candidate domains (base + TLD, caller order, duplicates kept)
- One batched registrar call bounded by the configured timeout
- Upstream failures logged in full and surfaced as a generic error
"""

import time
from typing import Optional

from .audit_logger import AuditLogger
from .exceptions import UpstreamError
from .models import CheckDomainsRequest
from .registrar_client import RegistrarClient
from .request_validator import (
    DEFAULT_TLDS,
    LEGACY_TLDS,
    RequestValidator,
    build_candidates,
)


CHECK_FAILED_MESSAGE = "Failed to check domain availability"


class DomainCheckOrchestrator:
    """
    Runs domain availability checks against the registrar.

    The registrar payload is returned as-is; its ordering is decided upstream,
    so callers match results by the ``domain`` field.
    """

    COMPONENT = "check_domains"

    def __init__(
        self,
        client: RegistrarClient,
        logger: Optional[AuditLogger] = None,
    ) -> None:
        """
        Args:
            client: Registrar client used for the batched availability call
            logger: Optional audit logger
        """
        self._client = client
        self._logger = logger
        self._validator = RequestValidator(default_tlds=DEFAULT_TLDS)
        self._legacy_validator = RequestValidator(default_tlds=LEGACY_TLDS)

    async def check(self, request: CheckDomainsRequest) -> dict:
        """
        Validate a request and check every candidate domain.

        Args:
            request: Raw check request

        Returns:
            Registrar payload ``{"domains": [...]}``, verbatim

        Raises:
            ValidationError: If the request is invalid (nothing is sent)
            ConfigurationError: If registrar credentials are missing
            UpstreamError: If the registrar call fails or times out
        """
        checked = self._validator.validate(request)
        return await self._run(checked.domain, checked.tlds)

    async def check_legacy(self, domain: Optional[str]) -> dict:
        """Check a base name against the fixed legacy TLD list."""
        checked = self._legacy_validator.validate(CheckDomainsRequest(domain=domain))
        return await self._run(checked.domain, checked.tlds)

    async def _run(self, domain: str, tlds: list[str]) -> dict:
        self._client.require_credentials()

        candidates = build_candidates(domain, tlds)
        if not candidates:
            return {"domains": []}

        start_time = time.perf_counter()
        try:
            payload = await self._client.check_available(candidates)
        except UpstreamError as e:
            if self._logger:
                self._logger.log_error(
                    self.COMPONENT,
                    "Error checking domain availability",
                    error=e,
                    additional_data={
                        "domain_count": len(candidates),
                        "duration_ms": self._elapsed_ms(start_time),
                    },
                )
            raise UpstreamError(
                code=e.code,
                message=CHECK_FAILED_MESSAGE,
                details=e.details,
            ) from e

        if self._logger:
            self._logger.info(self.COMPONENT, "Checked domain availability", {
                "domain_count": len(candidates),
                "result_count": len(payload.get("domains", [])),
                "duration_ms": self._elapsed_ms(start_time),
            })

        return payload

    def _elapsed_ms(self, start_time: float) -> float:
        return round((time.perf_counter() - start_time) * 1000, 2)
