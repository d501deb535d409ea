"""Router for service info and health endpoints."""
from __future__ import annotations

import os

from fastapi import APIRouter

from readmegen import config, llm_factory

router = APIRouter(tags=["health"])


@router.get("/")
async def root():
    """Short JSON with the service name and its endpoints."""
    return {
        "service": "readmegen",
        "endpoints": [
            {"path": "/generate", "method": "POST", "desc": "generate a README for a GitHub repository"},
            {"path": "/health", "method": "GET", "desc": "configuration health check"},
        ],
    }


@router.get("/health")
async def health():
    """Report which credentials are configured. Makes no external calls."""
    provider = llm_factory.LLM_PROVIDER
    if provider == "gemini":
        llm_status = "configured" if os.environ.get("GEMINI_API_KEY") else "not_configured"
    elif provider in llm_factory.SUPPORTED_PROVIDERS:
        llm_status = "configured"
    else:
        llm_status = "unknown_provider"

    return {
        "status": "healthy",
        "checks": {
            "github": {"status": "authenticated" if config.GITHUB_TOKEN else "anonymous"},
            "llm": {"provider": provider, "status": llm_status},
        },
    }
