"""
Exception classes for the domain finder service.

All exceptions inherit from DomainFinderError and carry a machine-readable code,
a caller-safe message, optional server-side details and the HTTP status code the
API layer answers with.
"""

from typing import Optional


class DomainFinderError(Exception):
    """Base exception for all domain finder errors."""

    status_code = 500

    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[dict] = None,
    ) -> None:
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict:
        """Convert exception to dictionary for server-side logging."""
        return {
            "error_type": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(DomainFinderError):
    """Raised when a request body or query fails validation."""

    status_code = 400


class ConfigurationError(DomainFinderError):
    """Raised when required configuration (credentials, dataset) is missing or broken."""

    pass


class UpstreamError(DomainFinderError):
    """
    Raised when a third-party API fails, times out or answers with garbage.

    The message is generic; the underlying cause lives in ``details`` and is
    only ever logged.
    """

    pass
