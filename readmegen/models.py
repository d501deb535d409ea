"""Data models shared across the package.

Request/response bodies are pydantic models; the request-scoped repository
values are frozen dataclasses so nothing downstream can mutate them.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class GenerateRequest(BaseModel):
    """Documented shape of ``POST /generate`` bodies."""
    model_config = ConfigDict(populate_by_name=True)

    repo_url: Optional[str] = Field(default=None, alias="repoUrl")


class ReadmeResponse(BaseModel):
    readme: str


class ErrorResponse(BaseModel):
    error: str


@dataclass(frozen=True)
class RepositoryReference:
    """The ``(owner, repo)`` pair identifying a GitHub repository."""
    owner: str
    repo: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


@dataclass(frozen=True)
class RepositoryMetadata:
    """Facts about a repository gathered before prompting."""
    name: str
    description: str
    url: str
    default_branch: str
    license: str
    languages: Tuple[str, ...] = field(default_factory=tuple)
    file_paths: Tuple[str, ...] = field(default_factory=tuple)
    topics: Tuple[str, ...] = field(default_factory=tuple)

    def to_context(self) -> Dict[str, Any]:
        """Return the JSON-serialisable dict embedded in the prompt."""
        return {
            "name": self.name,
            "description": self.description,
            "url": self.url,
            "default_branch": self.default_branch,
            "languages": list(self.languages),
            "license": self.license,
            "file_paths": list(self.file_paths),
            "topics": list(self.topics),
        }


__all__: List[str] = [
    "GenerateRequest",
    "ReadmeResponse",
    "ErrorResponse",
    "RepositoryReference",
    "RepositoryMetadata",
]
