"""Thin GitHub REST API client used to gather repository metadata.

Supports unauthenticated requests. Pass a token via the ``GITHUB_TOKEN``
environment variable or the ``github_token`` constructor arg to increase
rate limits.

Every required call raises :class:`RepositoryNotFoundError` on a 404 and
:class:`UpstreamError` on any other HTTP or network failure.
"""
from __future__ import annotations

import base64
import logging
from typing import Any, Dict, List, Optional

import requests

from readmegen.config import GITHUB_API_URL, GITHUB_TIMEOUT, GITHUB_TOKEN
from readmegen.errors import RepositoryNotFoundError, UpstreamError

LOG = logging.getLogger(__name__)

LICENSE_CANDIDATES = ("LICENSE", "LICENSE.md", "LICENSE.txt")


def _error_message(resp: requests.Response) -> str:
    """Return GitHub's ``message`` field, or the start of the raw body."""
    try:
        data = resp.json()
    except ValueError:
        data = None
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return (resp.text or resp.reason or "").strip()[:300]


class GitHubClient:
    """Read-only access to the handful of GitHub endpoints the generator needs."""

    ACCEPT = "application/vnd.github+json"

    def __init__(
        self,
        github_token: Optional[str] = None,
        session: Optional[requests.Session] = None,
        api_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self.github_token = github_token or GITHUB_TOKEN
        self.api_url = (api_url or GITHUB_API_URL).rstrip("/")
        self.timeout = timeout or GITHUB_TIMEOUT
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.session.headers.update({
            "Accept": self.ACCEPT,
            "User-Agent": "readmegen",
        })
        if self.github_token:
            self.session.headers.update({"Authorization": f"Bearer {self.github_token}"})

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _get(self, owner: str, repo: str, path: str, params: Optional[dict] = None) -> Any:
        url = f"{self.api_url}/repos/{owner}/{repo}{path}"
        LOG.debug("GET %s params=%s", url, params)
        try:
            r = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            raise UpstreamError(f"GitHub request failed: {exc}") from exc

        if r.status_code == 404:
            raise RepositoryNotFoundError(owner, repo, detail=_error_message(r))
        if r.status_code >= 400:
            raise UpstreamError(
                f"GitHub API error ({r.status_code}): {_error_message(r)}",
                status_code=r.status_code,
            )
        try:
            return r.json()
        except ValueError as exc:
            raise UpstreamError(f"GitHub returned an invalid JSON response for {url}") from exc

    def get_repo(self, owner: str, repo: str) -> Dict[str, Any]:
        """Repository info: name, description, default branch, license, URL."""
        return self._get(owner, repo, "")

    def get_tree(self, owner: str, repo: str, ref: str = "HEAD") -> List[Dict[str, Any]]:
        """Full recursive tree of *ref*. ``HEAD`` resolves to the default branch."""
        data = self._get(owner, repo, f"/git/trees/{ref}", params={"recursive": "1"})
        if data.get("truncated"):
            LOG.warning("Tree for %s/%s was truncated by GitHub", owner, repo)
        return data.get("tree") or []

    def list_languages(self, owner: str, repo: str) -> Dict[str, int]:
        """Language name to byte count, largest first."""
        return self._get(owner, repo, "/languages") or {}

    def list_topics(self, owner: str, repo: str) -> List[str]:
        data = self._get(owner, repo, "/topics")
        return list(data.get("names") or [])

    def get_file_content(self, owner: str, repo: str, path: str) -> Optional[str]:
        """Return the decoded text of *path*, or None when it does not exist."""
        try:
            data = self._get(owner, repo, f"/contents/{path}")
        except RepositoryNotFoundError:
            return None

        if not isinstance(data, dict):
            # a directory listing
            return None
        content = data.get("content")
        if content is None:
            return None
        if data.get("encoding") == "base64":
            raw = base64.b64decode(content)
            return raw.decode("utf-8", errors="replace")
        return str(content)

    def find_license_text(self, owner: str, repo: str) -> Optional[str]:
        """Return the content of the first LICENSE file found at the repository root."""
        for name in LICENSE_CANDIDATES:
            text = self.get_file_content(owner, repo, name)
            if text is not None:
                LOG.debug("Found %s in %s/%s", name, owner, repo)
                return text
        return None


__all__ = ["GitHubClient", "LICENSE_CANDIDATES"]
