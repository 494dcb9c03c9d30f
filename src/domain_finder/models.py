"""
Data models for the domain finder service.

This module defines the request shapes accepted by the API, the TLD entries
and dataset served by the lookup, and the registrar's availability results.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from .enums import TldType


# Registrar prices are expressed in micro-units of the currency.
PRICE_MICRO_UNITS = 1_000_000


@dataclass
class DomainResult:
    """Availability of a single domain as reported by the registrar."""

    domain: str
    available: bool
    currency: Optional[str] = None
    definitive: bool = False
    period: Optional[int] = None
    price: Optional[int] = None

    @classmethod
    def from_dict(cls, data: dict) -> "DomainResult":
        return cls(
            domain=data.get("domain", ""),
            available=bool(data.get("available", False)),
            currency=data.get("currency"),
            definitive=bool(data.get("definitive", False)),
            period=data.get("period"),
            price=data.get("price"),
        )

    @property
    def display_price(self) -> Optional[float]:
        if self.price is None:
            return None
        return self.price / PRICE_MICRO_UNITS


@dataclass
class DomainError:
    """Per-domain error entry of a partial registrar response."""

    code: str
    domain: str
    message: str
    path: Optional[str] = None
    status: Optional[int] = None

    @classmethod
    def from_dict(cls, data: dict) -> "DomainError":
        return cls(
            code=data.get("code", ""),
            domain=data.get("domain", ""),
            message=data.get("message", ""),
            path=data.get("path"),
            status=data.get("status"),
        )


@dataclass
class DomainsResult:
    """Parsed form of a bulk availability response."""

    domains: list[DomainResult] = field(default_factory=list)
    errors: list[DomainError] = field(default_factory=list)

    @classmethod
    def from_payload(cls, payload: dict) -> "DomainsResult":
        return cls(
            domains=[DomainResult.from_dict(d) for d in payload.get("domains", [])],
            errors=[DomainError.from_dict(e) for e in payload.get("errors", [])],
        )

    def get(self, domain: str) -> Optional[DomainResult]:
        """Find a result by domain name; upstream order is not request order."""
        for result in self.domains:
            if result.domain.lower() == domain.lower():
                return result
        return None


@dataclass
class TldEntry:
    """A known top-level domain."""

    name: str  # Leading dot included, e.g. '.com'
    type: TldType


@dataclass
class TldDataset:
    """Versioned, bundled list of known TLDs."""

    version: str
    last_updated: str
    total: int
    entries: list[TldEntry]


@dataclass
class CheckDomainsRequest:
    """Body of a domain availability check; fields are kept raw until validated."""

    domain: Any = None
    tlds: Any = None

    @classmethod
    def from_body(cls, body: Any) -> "CheckDomainsRequest":
        if not isinstance(body, dict):
            return cls()
        return cls(domain=body.get("domain"), tlds=body.get("tlds"))


@dataclass
class GetTldsRequest:
    """Body of a TLD lookup; every field is optional."""

    input: Any = None
    page_size: Any = None
    type: Any = None

    @classmethod
    def from_body(cls, body: Any) -> "GetTldsRequest":
        if not isinstance(body, dict):
            return cls()
        return cls(
            input=body.get("input"),
            page_size=body.get("pageSize"),
            type=body.get("type"),
        )
