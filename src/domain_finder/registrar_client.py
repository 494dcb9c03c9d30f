"""
Registrar API client for the domain finder service.

This module talks to the GoDaddy domains API:
- Bulk availability checks, one batched request per call
- The registrar's own list of supported TLDs
- sso-key authentication from configured credentials
- Timeouts, transport errors, HTTP errors and malformed payloads mapped to
  UpstreamError with the cause kept in ``details``
"""

from typing import Any, Optional

import httpx

from .config import RegistrarConfig
from .enums import ConfigurationErrorCode, UpstreamErrorCode
from .exceptions import ConfigurationError, UpstreamError


class RegistrarClient:
    """
    Async client for the registrar's domain endpoints.

    A fresh ``httpx.AsyncClient`` is opened per call so the client holds no
    connection state between requests.
    """

    AVAILABILITY_PATH = "/v1/domains/available"
    TLDS_PATH = "/v1/domains/tlds"

    # Longest body excerpt kept in error details
    MAX_BODY_EXCERPT = 500

    def __init__(
        self,
        config: RegistrarConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        tld_timeout: float = 10.0,
    ) -> None:
        """
        Initialize the registrar client.

        Args:
            config: Registrar credentials, base URL and check timeout
            transport: Optional httpx transport (tests pass a MockTransport)
            tld_timeout: Timeout in seconds for the TLD list request
        """
        self._config = config
        self._transport = transport
        self._tld_timeout = tld_timeout

    def require_credentials(self) -> None:
        """
        Raises:
            ConfigurationError: If the API key or secret is not configured
        """
        if not self._config.has_credentials:
            raise ConfigurationError(
                code=ConfigurationErrorCode.MISSING_CREDENTIALS.value,
                message="Registrar API credentials are not configured",
                details={"required": ["GODADDY_API_KEY", "GODADDY_API_SECRET"]},
            )

    def _auth_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"sso-key {self._config.api_key}:{self._config.api_secret}",
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

    async def check_available(self, domains: list[str]) -> dict:
        """
        Check availability of all domains in one batched request.

        Args:
            domains: Full domain names, sent in the given order

        Returns:
            The registrar payload, ``{"domains": [...], "errors"?: [...]}``

        Raises:
            ConfigurationError: If credentials are missing
            UpstreamError: On timeout, transport failure, HTTP error or bad payload
        """
        self.require_credentials()

        payload = await self._request(
            "POST",
            self.AVAILABILITY_PATH,
            params={"checkType": self._config.check_type},
            json=domains,
            timeout=self._config.check_timeout_seconds,
        )

        if not isinstance(payload, dict) or not isinstance(payload.get("domains"), list):
            raise UpstreamError(
                code=UpstreamErrorCode.PARSE_ERROR.value,
                message="Availability response does not contain a domain list",
                details={"payload_type": type(payload).__name__},
            )

        return payload

    async def list_tlds(self) -> list[dict]:
        """
        Fetch the TLDs the registrar sells.

        Returns:
            List of ``{"name": ..., "type": ...}`` dicts

        Raises:
            ConfigurationError: If credentials are missing
            UpstreamError: On any upstream failure or malformed payload
        """
        self.require_credentials()

        payload = await self._request("GET", self.TLDS_PATH, timeout=self._tld_timeout)

        if not isinstance(payload, list) or any(
            not isinstance(item, dict) or not isinstance(item.get("name"), str)
            for item in payload
        ):
            raise UpstreamError(
                code=UpstreamErrorCode.PARSE_ERROR.value,
                message="TLD response is not a list of named entries",
                details={"payload_type": type(payload).__name__},
            )

        return payload

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[dict] = None,
        json: Any = None,
        timeout: float,
    ) -> Any:
        url = f"{self._config.base_url.rstrip('/')}{path}"

        try:
            async with httpx.AsyncClient(
                transport=self._transport,
                timeout=httpx.Timeout(timeout),
            ) as client:
                response = await client.request(
                    method,
                    url,
                    params=params,
                    json=json,
                    headers=self._auth_headers(),
                )
        except httpx.TimeoutException as e:
            raise UpstreamError(
                code=UpstreamErrorCode.TIMEOUT.value,
                message=f"Registrar request timed out after {timeout}s",
                details={"url": url, "cause": str(e)},
            ) from e
        except httpx.HTTPError as e:
            raise UpstreamError(
                code=UpstreamErrorCode.NETWORK_ERROR.value,
                message="Registrar request failed",
                details={"url": url, "cause": str(e), "cause_type": type(e).__name__},
            ) from e

        if not response.is_success:
            raise UpstreamError(
                code=UpstreamErrorCode.HTTP_ERROR.value,
                message=f"Registrar answered with HTTP {response.status_code}",
                details={
                    "url": url,
                    "status_code": response.status_code,
                    "body": response.text[: self.MAX_BODY_EXCERPT],
                },
            )

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError(
                code=UpstreamErrorCode.PARSE_ERROR.value,
                message="Registrar response is not valid JSON",
                details={"url": url, "cause": str(e)},
            ) from e
