"""Validation of ``POST /generate`` input.

``validate_request`` turns a decoded JSON body into a
:class:`~readmegen.models.RepositoryReference` or raises
:class:`~readmegen.errors.ValidationError` with a user-facing message.
"""
from __future__ import annotations

from typing import Any
from urllib.parse import urlparse

from pydantic import AnyUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from readmegen.errors import ValidationError
from readmegen.models import RepositoryReference

GITHUB_HOSTS = ("github.com", "www.github.com")

_URL_ADAPTER = TypeAdapter(AnyUrl)


def parse_repo_url(url: str) -> RepositoryReference:
    """Extract ``owner`` and ``repo`` from a GitHub repository URL.

    The first two path segments are used; a trailing ``.git`` and anything
    after the second segment (sub-paths, query, fragment) are discarded.
    """
    url = url.strip()
    try:
        _URL_ADAPTER.validate_python(url)
    except PydanticValidationError:
        raise ValidationError("repoUrl must be a valid URL") from None

    parsed = urlparse(url)
    if not parsed.scheme or not parsed.netloc:
        raise ValidationError("repoUrl must be a valid URL")

    host = (parsed.hostname or "").lower()
    if host not in GITHUB_HOSTS:
        raise ValidationError("Only GitHub URLs are supported")

    segments = [s for s in parsed.path.split("/") if s]
    if len(segments) < 2:
        raise ValidationError("Invalid GitHub URL format")

    owner, repo = segments[0], segments[1]
    if repo.endswith(".git"):
        repo = repo[: -len(".git")]
    if not owner or not repo:
        raise ValidationError("Invalid GitHub URL format")

    return RepositoryReference(owner=owner, repo=repo)


def validate_request(body: Any) -> RepositoryReference:
    """Validate a decoded request body and return the repository it names."""
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")

    repo_url = body.get("repoUrl")
    if repo_url is None or repo_url == "":
        raise ValidationError("repoUrl is required")
    if not isinstance(repo_url, str):
        raise ValidationError("repoUrl must be a string")
    if not repo_url.strip():
        raise ValidationError("repoUrl is required")

    return parse_repo_url(repo_url)


__all__ = ["parse_repo_url", "validate_request", "GITHUB_HOSTS"]
