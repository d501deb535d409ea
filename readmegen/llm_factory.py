"""LLM provider factory: returns the right client based on configuration.

The provider is selected by the ``LLM_PROVIDER`` environment variable:

- ``gemini``  (default) uses the Gemini (Google GenAI) SDK
- ``ollama``            calls a local Ollama instance

Callers should use ``get_llm_client()`` instead of instantiating
``GeminiClient`` / ``OllamaClient`` directly so the provider can be
swapped by configuration alone.
"""
from __future__ import annotations

from typing import Optional

from readmegen.config import LLM_PROVIDER
from readmegen.llm_base import LLMClient

SUPPORTED_PROVIDERS = ("gemini", "ollama")


def get_llm_client(
    *,
    provider: Optional[str] = None,
    default_model: Optional[str] = None,
) -> LLMClient:
    """Instantiate and return the configured LLM client.

    Parameters
    ----------
    provider : str | None
        Override ``LLM_PROVIDER`` env var for this call.
    default_model : str | None
        Override the provider's default model for this instance.
    """
    prov = (provider or LLM_PROVIDER).lower().strip()
    kwargs: dict = {}
    if default_model:
        kwargs["default_model"] = default_model

    if prov == "gemini":
        from readmegen.gemini_client import GeminiClient
        return GeminiClient(**kwargs)

    if prov == "ollama":
        from readmegen.ollama_client import OllamaClient
        return OllamaClient(**kwargs)

    raise ValueError(
        f"Unknown LLM_PROVIDER '{prov}'. "
        f"Supported values: {', '.join(SUPPORTED_PROVIDERS)}"
    )


__all__ = ["get_llm_client", "SUPPORTED_PROVIDERS"]
