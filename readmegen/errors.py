"""Error taxonomy for README generation.

Every failure a request can end in is one of these types. The HTTP layer
maps them to status codes in ``readmegen.responses``.
"""
from __future__ import annotations

from typing import Optional


class ReadmeGeneratorError(Exception):
    """Base class for all errors raised by this package."""


class ValidationError(ReadmeGeneratorError):
    """The submitted input is missing or malformed."""


class RepositoryNotFoundError(ReadmeGeneratorError):
    """The referenced repository does not exist or is not accessible."""

    def __init__(self, owner: str, repo: str, detail: Optional[str] = None):
        self.owner = owner
        self.repo = repo
        self.detail = detail
        super().__init__(
            f"Repository {owner}/{repo} was not found or is not accessible."
        )


class UpstreamError(ReadmeGeneratorError):
    """Any other failure talking to the GitHub API."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class GenerationError(ReadmeGeneratorError):
    """The generation backend failed for a reason other than overload."""


class ServiceOverloadedError(GenerationError):
    """The generation backend signalled capacity exhaustion."""


_OVERLOAD_MARKERS = ("503", "overloaded")


def is_overloaded(exc: BaseException) -> bool:
    """Return True when *exc* signals an overloaded/unavailable backend.

    Structured attributes are checked first (``code`` as set by google-genai's
    ``APIError``, ``response.status_code`` as on requests' ``HTTPError``,
    ``status`` as a gRPC-style name), then the message is scanned for known
    markers.
    """
    for attr in ("code", "status_code"):
        if getattr(exc, attr, None) == 503:
            return True
    response = getattr(exc, "response", None)
    if getattr(response, "status_code", None) == 503:
        return True
    status = getattr(exc, "status", None)
    if isinstance(status, str) and status.upper() == "UNAVAILABLE":
        return True

    message = str(exc).lower()
    return any(marker in message for marker in _OVERLOAD_MARKERS)


__all__ = [
    "ReadmeGeneratorError",
    "ValidationError",
    "RepositoryNotFoundError",
    "UpstreamError",
    "GenerationError",
    "ServiceOverloadedError",
    "is_overloaded",
]
