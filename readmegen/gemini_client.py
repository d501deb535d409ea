"""Gemini (Google GenAI) client wrapper.

A minimal synchronous client with a ``generate(...)`` method. It expects
``GEMINI_API_KEY`` in the environment unless an explicit key is passed.

The SDK raises ``google.genai.errors.APIError`` subclasses carrying a
numeric ``code``, so overload (HTTP 503) is detected from that attribute
before falling back to the error message.
"""
from __future__ import annotations

import logging
import os
from typing import Optional

from google import genai
from google.genai import types

from readmegen.config import DEFAULT_MODEL
from readmegen.errors import GenerationError
from readmegen.llm_base import LLMClient

LOG = logging.getLogger(__name__)


class GeminiClient(LLMClient):
    """Client for Google Gemini (GenAI).

    - If ``api_key`` is not provided it is read from ``GEMINI_API_KEY``.
    - ``generate(...)`` returns the model output as a single string, or an
      empty string when the response carries no text.
    """

    provider = "Gemini"

    def __init__(self, api_key: Optional[str] = None, default_model: Optional[str] = DEFAULT_MODEL):
        self.api_key = api_key or os.environ.get("GEMINI_API_KEY")
        self.default_model = default_model
        if not self.api_key:
            raise GenerationError("GEMINI_API_KEY is not set")

        try:
            self._client = genai.Client(api_key=self.api_key)
        except Exception as exc:
            raise GenerationError(f"Failed to initialize GenAI client: {exc}") from exc

    def generate(self, prompt: str, model: Optional[str] = None, max_tokens: int = 512, temperature: float = 0.0) -> str:
        model_id = self._resolve_model(model)
        config = types.GenerateContentConfig(
            max_output_tokens=max_tokens,
            temperature=temperature,
        )
        LOG.debug("Calling Gemini model=%s prompt_chars=%d", model_id, len(prompt))
        try:
            response = self._client.models.generate_content(
                model=model_id,
                contents=prompt,
                config=config,
            )
        except Exception as exc:
            raise self._translate_error(exc) from exc
        return response.text or ""


__all__ = ["GeminiClient"]
