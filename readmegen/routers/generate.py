"""Router for the README generation endpoint."""
from __future__ import annotations

import json
import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from readmegen.models import ErrorResponse, GenerateRequest, ReadmeResponse
from readmegen.pipeline import ReadmePipeline
from readmegen.responses import format_error, format_success

log = logging.getLogger(__name__)

router = APIRouter(tags=["generate"])

_ERROR_RESPONSES = {
    code: {"model": ErrorResponse}
    for code in (400, 404, 500, 503)
}


@router.post(
    "/generate",
    response_model=ReadmeResponse,
    responses=_ERROR_RESPONSES,
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": GenerateRequest.model_json_schema(by_alias=True)}},
            "required": True,
        }
    },
)
async def generate_readme_endpoint(request: Request) -> JSONResponse:
    """Generate a README for the GitHub repository in ``repoUrl``.

    The body is read raw so that every input problem, malformed JSON
    included, is reported as a 400 with an ``error`` message.
    """
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        body = None

    log.info("generate_readme_endpoint: repoUrl=%s", body.get("repoUrl") if isinstance(body, dict) else None)
    try:
        readme = await ReadmePipeline().run(body)
    except Exception as exc:
        return format_error(exc)
    return format_success(readme)
