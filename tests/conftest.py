"""Shared fixtures for the readmegen test suite."""
from __future__ import annotations

from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock

import pytest

from readmegen.errors import RepositoryNotFoundError
from readmegen.models import RepositoryMetadata


# ---------------------------------------------------------------------------
# GitHub payloads
# ---------------------------------------------------------------------------

def make_repo_info(**overrides: Any) -> Dict[str, Any]:
    info: Dict[str, Any] = {
        "name": "Hello-World",
        "full_name": "octocat/Hello-World",
        "description": "My first repository on GitHub!",
        "html_url": "https://github.com/octocat/Hello-World",
        "default_branch": "master",
        "license": {"key": "mit", "name": "MIT License", "spdx_id": "MIT"},
    }
    info.update(overrides)
    return info


def make_response(status_code: int = 200, payload: Any = None, text: str = "") -> MagicMock:
    """A stand-in for ``requests.Response``."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.reason = "OK" if status_code < 400 else "Error"
    resp.text = text
    if payload is None:
        resp.json.side_effect = ValueError("no json")
    else:
        resp.json.return_value = payload
    return resp


class FakeGitHubClient:
    """In-memory replacement for ``GitHubClient`` used by aggregator tests."""

    def __init__(
        self,
        repo_info: Optional[Dict[str, Any]] = None,
        paths: Optional[List[str]] = None,
        languages: Optional[Dict[str, int]] = None,
        topics: Optional[List[str]] = None,
        license_text: Optional[str] = None,
        errors: Optional[Dict[str, Exception]] = None,
    ):
        self.repo_info = repo_info if repo_info is not None else make_repo_info()
        self.paths = paths if paths is not None else ["README.md", "src", "src/app.py"]
        self.languages = languages if languages is not None else {"Python": 1200, "Shell": 40}
        self.topics = topics if topics is not None else ["cli", "docs"]
        self.license_text = license_text
        self.errors = errors or {}
        self.calls: List[str] = []
        self.closed = False

    def _maybe_fail(self, name: str) -> None:
        self.calls.append(name)
        if name in self.errors:
            raise self.errors[name]

    def get_repo(self, owner, repo):
        self._maybe_fail("get_repo")
        return self.repo_info

    def get_tree(self, owner, repo, ref="HEAD"):
        self._maybe_fail("get_tree")
        return [{"path": p, "type": "blob"} for p in self.paths]

    def list_languages(self, owner, repo):
        self._maybe_fail("list_languages")
        return self.languages

    def list_topics(self, owner, repo):
        self._maybe_fail("list_topics")
        return self.topics

    def find_license_text(self, owner, repo):
        self._maybe_fail("find_license_text")
        return self.license_text

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


@pytest.fixture
def repo_info() -> Dict[str, Any]:
    return make_repo_info()


@pytest.fixture
def fake_github() -> FakeGitHubClient:
    return FakeGitHubClient()


@pytest.fixture
def missing_repo_github() -> FakeGitHubClient:
    err = RepositoryNotFoundError("octocat", "nope")
    return FakeGitHubClient(errors={"get_repo": err, "get_tree": err})


@pytest.fixture
def sample_metadata() -> RepositoryMetadata:
    return RepositoryMetadata(
        name="Hello-World",
        description="My first repository on GitHub!",
        url="https://github.com/octocat/Hello-World",
        default_branch="master",
        license="MIT",
        languages=("Python", "Shell"),
        file_paths=("README.md", "src", "src/app.py"),
        topics=("cli", "docs"),
    )


@pytest.fixture
def github_factory():
    """Return the ``FakeGitHubClient`` class for tests that need custom payloads."""
    return FakeGitHubClient


@pytest.fixture
def response_factory():
    return make_response


@pytest.fixture
def repo_info_factory():
    return make_repo_info
