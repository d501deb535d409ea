"""Abstract base class for LLM clients.

Every generation backend (Gemini, Ollama, …) implements this thin interface
so the rest of the codebase stays provider-agnostic. Implementations raise
:class:`~readmegen.errors.ServiceOverloadedError` when the backend reports
it is overloaded and :class:`~readmegen.errors.GenerationError` for any
other failure.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from readmegen.errors import GenerationError, ServiceOverloadedError, is_overloaded


class LLMClient(ABC):
    """Minimal contract that all LLM backends must satisfy."""

    provider: str = ""
    default_model: Optional[str]

    @abstractmethod
    def generate(
        self,
        prompt: str,
        model: Optional[str] = None,
        max_tokens: int = 512,
        temperature: float = 0.0,
    ) -> str:
        """Return the full model response as a single string."""

    def _resolve_model(self, model: Optional[str]) -> str:
        model_id = model or self.default_model
        if not model_id:
            raise ValueError("model must be provided either via constructor or argument")
        return model_id

    def _translate_error(self, exc: Exception) -> GenerationError:
        """Map a backend exception onto the generation error taxonomy."""
        if is_overloaded(exc):
            return ServiceOverloadedError(f"{self.provider} backend is overloaded: {exc}")
        return GenerationError(f"{self.provider} API error: {exc}")


__all__ = ["LLMClient"]
