"""
TLD lookup service.

Resolves paging and filters for a TLD listing request, reads from the configured
source, and keeps unfiltered remote results in a TldCache. Source failures are
logged with their cause and surfaced to callers as a generic UpstreamError.
"""

from typing import Optional

from .audit_logger import AuditLogger
from .exceptions import UpstreamError
from .models import GetTldsRequest
from .request_validator import (
    MAX_PAGE_SIZE,
    UNBOUNDED_PAGE_SIZE,
    normalize_search,
    parse_tld_type,
    resolve_page_size,
)
from .tld_cache import TldCache
from .tld_sources import TldSource


class TldLookup:
    """
    Lists and searches known TLDs.

    The cache, when given, is consulted only for unfiltered requests; any search
    or type filter goes to the source directly.
    """

    COMPONENT = "tld_lookup"

    def __init__(
        self,
        source: TldSource,
        cache: Optional[TldCache] = None,
        logger: Optional[AuditLogger] = None,
    ) -> None:
        """
        Args:
            source: Where entries come from
            cache: Optional cache; ignored for sources that are not cacheable
            logger: Optional audit logger
        """
        self._source = source
        self._cache = cache if source.cacheable else None
        self._logger = logger

    @property
    def source(self) -> TldSource:
        return self._source

    @property
    def cache(self) -> Optional[TldCache]:
        return self._cache

    async def lookup(self, request: GetTldsRequest) -> list[str]:
        """
        List TLD names matching a request.

        Args:
            request: Raw lookup request

        Returns:
            Ordered list of at most ``pageSize`` TLD names

        Raises:
            UpstreamError: If the source fails ("Failed to fetch TLDs")
        """
        page_size = resolve_page_size(request.page_size)
        search = normalize_search(request.input)
        tld_type = parse_tld_type(request.type)
        unfiltered = search is None and tld_type is None

        if unfiltered and self._cache is not None:
            cached = self._cache.get()
            if cached is not None:
                if self._logger:
                    self._logger.debug(self.COMPONENT, "Serving TLDs from cache", {
                        "cached": len(cached),
                        "page_size": page_size,
                    })
                return cached[:page_size]

        # Unfiltered fetches for the cache take the whole capped list
        limit = MAX_PAGE_SIZE if unfiltered and self._cache is not None else page_size

        try:
            entries = await self._source.fetch(search, tld_type, limit)
        except UpstreamError as e:
            if self._logger:
                self._logger.log_error(
                    self.COMPONENT,
                    "Error fetching TLDs",
                    error=e,
                    additional_data={"source": self._source.name},
                )
            raise UpstreamError(
                code=e.code,
                message="Failed to fetch TLDs",
                details=e.details,
            ) from e

        names = [entry.name for entry in entries]

        if unfiltered and self._cache is not None and len(names) <= MAX_PAGE_SIZE:
            self._cache.put(names)

        return names[:page_size]

    async def list_all(self) -> list[str]:
        """Unfiltered listing at the maximum page size."""
        return await self.lookup(GetTldsRequest(page_size=UNBOUNDED_PAGE_SIZE))
