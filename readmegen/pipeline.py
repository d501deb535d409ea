"""README generation pipeline.

Validator → metadata aggregator → prompt builder → generation client. Each
step hands a plain value to the next; nothing is shared between requests.
"""
from __future__ import annotations

import asyncio
import functools
import logging
import time
from typing import Any, Optional

from readmegen.config import GENERATION_MAX_TOKENS, GENERATION_TEMPERATURE
from readmegen.github.aggregator import collect_metadata
from readmegen.github.client import GitHubClient
from readmegen.llm_base import LLMClient
from readmegen.llm_factory import get_llm_client
from readmegen.models import RepositoryMetadata
from readmegen.prompt_builder import build_readme_prompt
from readmegen.validation import validate_request

LOG = logging.getLogger(__name__)


class ReadmePipeline:
    """Run the generation steps for one request.

    Collaborators can be injected; by default a fresh ``GitHubClient`` and
    the configured LLM client are created per run.
    """

    def __init__(
        self,
        github_client: Optional[GitHubClient] = None,
        llm_client: Optional[LLMClient] = None,
        provider: Optional[str] = None,
        model: Optional[str] = None,
        max_tokens: int = GENERATION_MAX_TOKENS,
        temperature: float = GENERATION_TEMPERATURE,
    ):
        self.github_client = github_client
        self.llm_client = llm_client
        self.provider = provider
        self.model = model
        self.max_tokens = max_tokens
        self.temperature = temperature

    async def collect(self, body: Any) -> RepositoryMetadata:
        """Validate *body* and gather the metadata of the repository it names."""
        ref = validate_request(body)
        if self.github_client is not None:
            return await collect_metadata(ref, client=self.github_client)
        with GitHubClient() as client:
            return await collect_metadata(ref, client=client)

    async def generate(self, prompt: str) -> str:
        """Submit *prompt* to the generation backend and return the trimmed text."""
        llm = self.llm_client or get_llm_client(provider=self.provider)
        loop = asyncio.get_running_loop()
        call = functools.partial(
            llm.generate,
            prompt,
            model=self.model,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
        )
        started = time.monotonic()
        text = await loop.run_in_executor(None, call)
        LOG.info("Generation finished in %.1fs", time.monotonic() - started)
        return (text or "").strip()

    async def run(self, body: Any) -> str:
        metadata = await self.collect(body)
        prompt = build_readme_prompt(metadata)
        LOG.debug(
            "Prompt for %s: %d chars, %d paths",
            metadata.name, len(prompt), len(metadata.file_paths),
        )
        return await self.generate(prompt)


__all__ = ["ReadmePipeline"]
