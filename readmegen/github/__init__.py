"""GitHub access: the REST client and the metadata aggregator built on it."""

from readmegen.github.aggregator import collect_metadata, resolve_license  # noqa: F401
from readmegen.github.client import GitHubClient  # noqa: F401

__all__ = ["GitHubClient", "collect_metadata", "resolve_license"]
