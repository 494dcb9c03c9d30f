"""
Request validation and shaping module.

Validates domain-check requests in a fixed order, expands a base name into its
candidate domains, and normalizes the paging and filter arguments of TLD lookups.
"""

import math
from dataclasses import dataclass
from typing import Any, Optional

from domain_finder.enums import TldType, ValidationErrorCode
from domain_finder.exceptions import ValidationError
from domain_finder.models import CheckDomainsRequest


# RFC 1035 label limit for the base name, and the full domain name limit
MAX_BASE_DOMAIN_LENGTH = 63
MAX_TOTAL_DOMAIN_LENGTH = 253
MAX_TLDS_PER_REQUEST = 100

DEFAULT_TLDS = (".com", ".net", ".org", ".de")
LEGACY_TLDS = (".com", ".net", ".de", ".org")

DEFAULT_PAGE_SIZE = 500
MAX_PAGE_SIZE = 1000
UNBOUNDED_PAGE_SIZE = -1
MAX_SEARCH_LENGTH = 100


@dataclass
class ValidatedCheck:
    """A domain-check request that passed validation."""

    domain: str
    tlds: list[str]


class RequestValidator:
    """
    Validates availability-check requests.

    Checks run in order and the first failure is raised:
    1. base domain present and a string
    2. base domain within the label limit
    3. TLDs, if given, a list of strings
    4. TLD count within the per-request limit
    5. base domain plus the longest TLD within the total length limit
    """

    def __init__(
        self,
        default_tlds: tuple[str, ...] = DEFAULT_TLDS,
        max_tlds: int = MAX_TLDS_PER_REQUEST,
    ) -> None:
        self._default_tlds = list(default_tlds)
        self._max_tlds = max_tlds

    def validate(self, request: CheckDomainsRequest) -> ValidatedCheck:
        """
        Validate a check request.

        Args:
            request: Raw request as read from the body or query

        Returns:
            ValidatedCheck with the base domain and the TLDs to combine it with

        Raises:
            ValidationError: On the first violated constraint
        """
        domain = request.domain
        if not isinstance(domain, str) or not domain:
            raise ValidationError(
                code=ValidationErrorCode.MISSING_DOMAIN.value,
                message="No base domain provided",
            )

        if len(domain) > MAX_BASE_DOMAIN_LENGTH:
            raise ValidationError(
                code=ValidationErrorCode.DOMAIN_TOO_LONG.value,
                message="Domain name too long",
                details={"length": len(domain), "max_length": MAX_BASE_DOMAIN_LENGTH},
            )

        tlds = request.tlds
        if tlds is None:
            tlds = list(self._default_tlds)

        if not isinstance(tlds, list) or any(not isinstance(tld, str) for tld in tlds):
            raise ValidationError(
                code=ValidationErrorCode.INVALID_TLDS.value,
                message="Invalid TLDs format",
            )

        if len(tlds) > self._max_tlds:
            raise ValidationError(
                code=ValidationErrorCode.TOO_MANY_TLDS.value,
                message="Too many TLDs requested",
                details={"count": len(tlds), "max_count": self._max_tlds},
            )

        longest_tld = max((len(tld) for tld in tlds), default=0)
        if len(domain) + longest_tld > MAX_TOTAL_DOMAIN_LENGTH:
            raise ValidationError(
                code=ValidationErrorCode.TOTAL_LENGTH_EXCEEDED.value,
                message="Total domain length exceeds maximum",
                details={
                    "length": len(domain) + longest_tld,
                    "max_length": MAX_TOTAL_DOMAIN_LENGTH,
                },
            )

        return ValidatedCheck(domain=domain, tlds=list(tlds))


def build_candidates(domain: str, tlds: list[str]) -> list[str]:
    """Combine a base name with each TLD, keeping order and duplicates."""
    return [f"{domain}{tld}" for tld in tlds]


def resolve_page_size(page_size: Any) -> int:
    """
    Clamp a requested page size into ``1..MAX_PAGE_SIZE``.

    Missing or non-numeric values get the default. The unbounded sentinel, other
    non-positive values and anything above the cap all become the cap.
    """
    if page_size is None or isinstance(page_size, bool):
        return DEFAULT_PAGE_SIZE
    if isinstance(page_size, float):
        if not math.isfinite(page_size):
            return MAX_PAGE_SIZE
        page_size = int(page_size)
    if not isinstance(page_size, int):
        return DEFAULT_PAGE_SIZE
    if page_size == UNBOUNDED_PAGE_SIZE or page_size <= 0 or page_size > MAX_PAGE_SIZE:
        return MAX_PAGE_SIZE
    return page_size


def normalize_search(search: Any) -> Optional[str]:
    """Truncate and lower-case a free-text filter; empty or non-string means no filter."""
    if not isinstance(search, str) or not search:
        return None
    return search[:MAX_SEARCH_LENGTH].lower()


def parse_tld_type(value: Any) -> Optional[TldType]:
    """Unrecognized type filters are ignored rather than rejected."""
    return TldType.parse(value)
