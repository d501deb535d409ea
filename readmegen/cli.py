"""Command-line runner: generate a README for a repository without the HTTP server.

Usage examples:
  readmegen https://github.com/octocat/Hello-World
  readmegen https://github.com/octocat/Hello-World -o README.md --provider ollama
  readmegen https://github.com/octocat/Hello-World --prompt-only
"""
from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from readmegen.config import (
    GENERATION_MAX_TOKENS,
    GENERATION_TEMPERATURE,
    LLM_PROVIDER,
)
from readmegen.logging_config import setup_logging
from readmegen.pipeline import ReadmePipeline
from readmegen.prompt_builder import build_readme_prompt
from readmegen.responses import error_message

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="readmegen",
        description="Generate a README.md for a public GitHub repository.",
    )
    parser.add_argument("repo_url", help="GitHub repository URL, e.g. https://github.com/owner/repo")
    parser.add_argument("-o", "--output", default=None, help="Write the result to this file instead of stdout")
    parser.add_argument("--prompt-only", action="store_true", help="Print the prompt without calling the model")
    parser.add_argument("--provider", default=LLM_PROVIDER, help="LLM provider (gemini or ollama)")
    parser.add_argument("--model", default=None, help="Model name for the selected provider")
    parser.add_argument("--max-tokens", type=int, default=GENERATION_MAX_TOKENS)
    parser.add_argument("--temperature", type=float, default=GENERATION_TEMPERATURE)
    parser.add_argument("--log-level", default=None, help="Logging level (default: LOG_LEVEL or INFO)")
    return parser


async def _run(args: argparse.Namespace) -> str:
    pipeline = ReadmePipeline(
        provider=args.provider,
        model=args.model,
        max_tokens=args.max_tokens,
        temperature=args.temperature,
    )
    body = {"repoUrl": args.repo_url}
    if args.prompt_only:
        metadata = await pipeline.collect(body)
        return build_readme_prompt(metadata)
    return await pipeline.run(body)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        text = asyncio.run(_run(args))
    except Exception as exc:
        log.debug("readmegen failed", exc_info=exc)
        print(f"Error: {error_message(exc)}", file=sys.stderr)
        return 1

    if args.output:
        Path(args.output).write_text(text + "\n", encoding="utf-8")
        log.info("README written to %s", args.output)
    else:
        print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
