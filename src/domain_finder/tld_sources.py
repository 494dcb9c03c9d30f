"""
TLD sources for the lookup endpoint.

Three interchangeable sources produce TldEntry lists:
- StaticTldSource: the bundled (or overridden) dataset, filtered in memory
- CatalogTldSource: a remote Directus-style catalog, filtered server-side
- RegistrarTldSource: the registrar's own TLD list, filtered in memory

Remote sources are marked cacheable; the lookup puts a TldCache in front of them.
"""

from abc import abstractmethod
from typing import Optional, Protocol, runtime_checkable

import httpx

from .config import TldSourceConfig
from .enums import TldType, UpstreamErrorCode
from .exceptions import UpstreamError
from .models import TldDataset, TldEntry
from .registrar_client import RegistrarClient


def infer_tld_type(name: str) -> TldType:
    """Two-letter labels are country codes, everything else is generic."""
    label = name.lstrip(".")
    if len(label) == 2 and label.isalpha():
        return TldType.COUNTRY_CODE
    return TldType.GENERIC


def filter_entries(
    entries: list[TldEntry],
    search: Optional[str] = None,
    tld_type: Optional[TldType] = None,
) -> list[TldEntry]:
    """
    Keep entries of the given type whose name contains the search text.

    ``search`` is expected already truncated and lower-cased.
    """
    result = entries
    if tld_type is not None:
        result = [entry for entry in result if entry.type == tld_type]
    if search:
        result = [entry for entry in result if search in entry.name.lower()]
    return result


@runtime_checkable
class TldSource(Protocol):
    """Protocol defining the interface for TLD sources."""

    name: str
    cacheable: bool

    @abstractmethod
    async def fetch(
        self,
        search: Optional[str],
        tld_type: Optional[TldType],
        limit: int,
    ) -> list[TldEntry]:
        """
        Return at most ``limit`` entries matching the filters.

        Raises:
            UpstreamError: If a remote source fails or answers malformed data
        """
        ...


class StaticTldSource:
    """Serves the bundled dataset; never expires, so never cached."""

    name = "static"
    cacheable = False

    def __init__(self, dataset: TldDataset) -> None:
        self._dataset = dataset

    @property
    def dataset(self) -> TldDataset:
        return self._dataset

    async def fetch(
        self,
        search: Optional[str],
        tld_type: Optional[TldType],
        limit: int,
    ) -> list[TldEntry]:
        return filter_entries(self._dataset.entries, search, tld_type)[:limit]


class CatalogTldSource:
    """
    Remote TLD catalog with server-side filtering.

    Request: ``GET {url}?fields[]=name&fields[]=type&filter[name][_icontains]=..
    &filter[type][_eq]=..&limit=N``. Response: ``{"data": [{"name": ..}, ..]}``.
    """

    name = "catalog"
    cacheable = True

    def __init__(
        self,
        config: TldSourceConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._url = config.catalog_url
        self._timeout = config.fetch_timeout_seconds
        self._transport = transport

    def _build_params(
        self,
        search: Optional[str],
        tld_type: Optional[TldType],
        limit: int,
    ) -> list[tuple[str, str]]:
        params = [("fields[]", "name"), ("fields[]", "type")]
        if search:
            params.append(("filter[name][_icontains]", search))
        if tld_type is not None:
            params.append(("filter[type][_eq]", tld_type.value))
        params.append(("limit", str(limit)))
        return params

    async def fetch(
        self,
        search: Optional[str],
        tld_type: Optional[TldType],
        limit: int,
    ) -> list[TldEntry]:
        params = self._build_params(search, tld_type, limit)

        try:
            async with httpx.AsyncClient(
                transport=self._transport,
                timeout=httpx.Timeout(self._timeout),
            ) as client:
                response = await client.get(self._url, params=params)
            response.raise_for_status()
            payload = response.json()
        except httpx.TimeoutException as e:
            raise UpstreamError(
                code=UpstreamErrorCode.TIMEOUT.value,
                message=f"TLD catalog request timed out after {self._timeout}s",
                details={"url": self._url, "cause": str(e)},
            ) from e
        except httpx.HTTPStatusError as e:
            raise UpstreamError(
                code=UpstreamErrorCode.HTTP_ERROR.value,
                message=f"TLD catalog answered with HTTP {e.response.status_code}",
                details={
                    "url": self._url,
                    "status_code": e.response.status_code,
                    "body": e.response.text[:500],
                },
            ) from e
        except httpx.HTTPError as e:
            raise UpstreamError(
                code=UpstreamErrorCode.NETWORK_ERROR.value,
                message="TLD catalog request failed",
                details={"url": self._url, "cause": str(e)},
            ) from e
        except ValueError as e:
            raise UpstreamError(
                code=UpstreamErrorCode.PARSE_ERROR.value,
                message="TLD catalog response is not valid JSON",
                details={"url": self._url, "cause": str(e)},
            ) from e

        data = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(data, list):
            raise UpstreamError(
                code=UpstreamErrorCode.PARSE_ERROR.value,
                message="Invalid response format from TLD API",
                details={"url": self._url, "payload_type": type(payload).__name__},
            )

        entries = []
        for item in data:
            if not isinstance(item, dict) or not isinstance(item.get("name"), str):
                raise UpstreamError(
                    code=UpstreamErrorCode.PARSE_ERROR.value,
                    message="Invalid response format from TLD API",
                    details={"url": self._url, "entry": repr(item)[:200]},
                )
            name = item["name"]
            entries.append(TldEntry(
                name=name,
                type=TldType.parse(item.get("type")) or infer_tld_type(name),
            ))

        return entries[:limit]


class RegistrarTldSource:
    """The registrar's list of sellable TLDs, filtered in memory."""

    name = "registrar"
    cacheable = True

    def __init__(self, client: RegistrarClient) -> None:
        self._client = client

    async def fetch(
        self,
        search: Optional[str],
        tld_type: Optional[TldType],
        limit: int,
    ) -> list[TldEntry]:
        items = await self._client.list_tlds()

        entries = []
        for item in items:
            name = item["name"]
            if not name.startswith("."):
                name = f".{name}"
            entries.append(TldEntry(
                name=name,
                type=TldType.parse(item.get("type")) or infer_tld_type(name),
            ))

        return filter_entries(entries, search, tld_type)[:limit]
