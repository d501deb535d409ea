"""Prompt construction for README generation.

``build_readme_prompt`` is a pure function: the same metadata always yields
the same prompt text.
"""
from __future__ import annotations

import json
from typing import List, Optional, Tuple

from readmegen.models import RepositoryMetadata


README_SECTIONS: Tuple[str, ...] = (
    "# Project Title",
    "## Description",
    "## Features",
    "## Installation",
    "## Usage",
    "## Tech Stack",
    "## Project Structure",
    "## License",
)

FORMATTING_RULES: Tuple[str, ...] = (
    "Use clean Markdown with lists and fenced code blocks where needed.",
    "For Project Structure, render a concise tree view up to 3 levels deep using the provided file paths.",
    "For Tech Stack, base it strictly on the languages array.",
    "Do not ask the user for information.",
    "Output ONLY the final Markdown (no surrounding backticks).",
)

README_HEADER = (
    "Generate a complete, professional README.md in pure Markdown for the GitHub "
    "repository using ONLY the provided metadata for facts (license, tech stack/languages, "
    "and project structure derived from file paths). Infer a clear description, features, "
    "and realistic usage."
)


class PromptBuilder:
    """Composable prompt builder: a header followed by N named parts.

    Usage:
      pb = PromptBuilder(README_HEADER)
      pb.add_part("Formatting rules", rules_text)
      prompt = pb.build()

    Parts keep their insertion order and are rendered as ``label:`` followed
    by the text and a blank line.
    """

    def __init__(self, template_header: str):
        self.template_header = template_header
        self.parts: List[Tuple[str, str]] = []

    def add_part(self, name: str, text: str) -> "PromptBuilder":
        self.parts.append((name.strip(), text))
        return self

    def build(self, footer: Optional[str] = None) -> str:
        lines: List[str] = [self.template_header, ""]
        for label, text in self.parts:
            lines.append(f"{label}:")
            lines.append(text)
            lines.append("")
        if footer:
            lines.append(footer)
        return "\n".join(lines).rstrip() + "\n"


def _numbered(items: Tuple[str, ...]) -> str:
    return "\n".join(f"{i}. {item}" for i, item in enumerate(items, start=1))


def _bulleted(items: Tuple[str, ...]) -> str:
    return "\n".join(f"- {item}" for item in items)


def build_readme_prompt(metadata: RepositoryMetadata) -> str:
    """Render the full generation prompt for *metadata*."""
    context = json.dumps(metadata.to_context(), indent=2, ensure_ascii=False)
    return (
        PromptBuilder(README_HEADER)
        .add_part("MANDATORY SECTIONS (this exact order)", _numbered(README_SECTIONS))
        .add_part("Formatting rules", _bulleted(FORMATTING_RULES))
        .add_part("Metadata (JSON)", context)
        .build()
    )


__all__ = ["PromptBuilder", "build_readme_prompt", "README_SECTIONS", "FORMATTING_RULES"]
