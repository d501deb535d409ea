"""Gather the metadata aggregate for a repository.

The five GitHub calls are independent of each other and are issued
concurrently on the default executor, then joined before the aggregate is
built. Only the LICENSE file lookup is allowed to fail.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List, Optional, Sequence

from readmegen.config import MAX_FILE_PATHS
from readmegen.github.client import GitHubClient
from readmegen.input_sanitizer import sanitize_text
from readmegen.models import RepositoryMetadata, RepositoryReference

LOG = logging.getLogger(__name__)

LICENSE_FILE_FALLBACK = "See LICENSE file"
UNLICENSED = "unlicensed"

# Placeholder values GitHub uses for licenses it could not identify
_UNIDENTIFIED_SPDX = "NOASSERTION"
_UNIDENTIFIED_NAME = "Other"


def resolve_license(repo_info: Dict[str, Any], license_text: Optional[str]) -> str:
    """Pick the license label for the prompt.

    Priority: SPDX id, license name, a license GitHub detected but could not
    identify or a root LICENSE file, and finally ``"unlicensed"``.
    """
    info = repo_info.get("license") or {}
    spdx_id = info.get("spdx_id")
    if spdx_id and spdx_id != _UNIDENTIFIED_SPDX:
        return spdx_id
    name = info.get("name")
    if name and name != _UNIDENTIFIED_NAME:
        return name
    # GitHub only attaches a license object when it found a license file,
    # which may live outside the root candidates (COPYING, LICENSE.rst)
    if info or license_text is not None:
        return LICENSE_FILE_FALLBACK
    return UNLICENSED


def limit_paths(paths: Sequence[str], max_count: int = MAX_FILE_PATHS) -> List[str]:
    """Keep the first *max_count* paths, in their original order."""
    return list(paths[:max_count])


def _safe_license_text(client: GitHubClient, owner: str, repo: str) -> Optional[str]:
    try:
        return client.find_license_text(owner, repo)
    except Exception as exc:
        LOG.warning("LICENSE lookup failed for %s/%s: %s", owner, repo, exc)
        return None


async def collect_metadata(
    ref: RepositoryReference,
    client: Optional[GitHubClient] = None,
    max_paths: int = MAX_FILE_PATHS,
) -> RepositoryMetadata:
    """Fetch repository facts concurrently and return the aggregate.

    Raises the first failure among the required calls (repository info,
    tree, languages, topics), in that order.
    """
    client = client or GitHubClient()
    owner, repo = ref.owner, ref.repo
    loop = asyncio.get_running_loop()

    LOG.info("Collecting metadata for %s", ref.full_name)
    results = await asyncio.gather(
        loop.run_in_executor(None, client.get_repo, owner, repo),
        loop.run_in_executor(None, client.get_tree, owner, repo),
        loop.run_in_executor(None, client.list_languages, owner, repo),
        loop.run_in_executor(None, client.list_topics, owner, repo),
        loop.run_in_executor(None, _safe_license_text, client, owner, repo),
        return_exceptions=True,
    )
    for result in results[:4]:
        if isinstance(result, BaseException):
            raise result
    repo_info, tree, languages, topics, license_text = results

    file_paths = [entry.get("path") for entry in tree if entry.get("path")]
    if len(file_paths) > max_paths:
        LOG.info(
            "Truncating file list for %s from %d to %d paths",
            ref.full_name, len(file_paths), max_paths,
        )

    return RepositoryMetadata(
        name=repo_info.get("name") or repo,
        description=sanitize_text(repo_info.get("description")),
        url=repo_info.get("html_url") or f"https://github.com/{owner}/{repo}",
        default_branch=repo_info.get("default_branch") or "",
        license=resolve_license(repo_info, license_text),
        languages=tuple(languages.keys()),
        file_paths=tuple(limit_paths(file_paths, max_paths)),
        topics=tuple(topics),
    )


__all__ = [
    "collect_metadata",
    "resolve_license",
    "limit_paths",
    "LICENSE_FILE_FALLBACK",
    "UNLICENSED",
]
