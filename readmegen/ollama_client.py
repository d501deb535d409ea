"""Ollama client: generate READMEs with a local LLM via the Ollama HTTP API.

Ollama listens on ``http://localhost:11434`` by default. This client uses
``requests`` to call the non-streaming ``/api/generate`` endpoint.

Configuration (environment variables):
    OLLAMA_BASE_URL : default ``http://localhost:11434``
    OLLAMA_MODEL    : default model name, e.g. ``llama3``, ``mistral``
    OLLAMA_TIMEOUT  : request timeout in seconds (default 300)
"""
from __future__ import annotations

import logging
from typing import Optional

import requests

from readmegen.config import OLLAMA_BASE_URL, OLLAMA_MODEL, OLLAMA_TIMEOUT
from readmegen.llm_base import LLMClient

LOG = logging.getLogger(__name__)


class OllamaClient(LLMClient):
    """LLM client that calls a local Ollama instance.

    Parameters
    ----------
    base_url : str | None
        Ollama API root (default ``OLLAMA_BASE_URL`` env var).
    default_model : str | None
        Model name to use when none is provided per-call.
    """

    provider = "Ollama"

    def __init__(
        self,
        base_url: Optional[str] = None,
        default_model: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = (base_url or OLLAMA_BASE_URL).rstrip("/")
        self.default_model = default_model or OLLAMA_MODEL
        self.timeout = timeout or OLLAMA_TIMEOUT

    def generate(
        self,
        prompt: str,
        model: Optional[str] = None,
        max_tokens: int = 512,
        temperature: float = 0.0,
    ) -> str:
        model_id = self._resolve_model(model)
        LOG.debug("Calling Ollama model=%s prompt_chars=%d", model_id, len(prompt))
        try:
            resp = requests.post(
                f"{self.base_url}/api/generate",
                json={
                    "model": model_id,
                    "prompt": prompt,
                    "stream": False,
                    "options": {
                        "num_predict": max_tokens,
                        "temperature": temperature,
                    },
                },
                timeout=self.timeout,
            )
            resp.raise_for_status()
            return resp.json().get("response") or ""
        except Exception as exc:
            raise self._translate_error(exc) from exc


__all__ = ["OllamaClient"]
