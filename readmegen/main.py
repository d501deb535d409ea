"""FastAPI app that generates README files for GitHub repositories.

Endpoint:
  POST /generate  -> { "repoUrl": "https://github.com/owner/repo" }

Response:
  200: { "readme": "..." }
  400/404/500/503: { "error": "error message" }

Run with ``python -m uvicorn readmegen.main:app`` or ``python -m readmegen.main``.
"""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from readmegen.config import CORS_ALLOW_ORIGINS, HOST, PORT
from readmegen.logging_config import setup_logging
from readmegen.routers.generate import router as generate_router
from readmegen.routers.health import router as health_router

setup_logging()
log = logging.getLogger(__name__)

app = FastAPI(title="README Generator API")


@app.middleware("http")
async def log_requests(request: Request, call_next):
    log.info("Incoming request: %s %s", request.method, request.url.path)
    try:
        response = await call_next(request)
    except Exception as exc:
        log.exception("Error handling request %s %s: %s", request.method, request.url.path, exc)
        raise
    log.info("Response %s for %s %s", response.status_code, request.method, request.url.path)
    return response


# The endpoint is public: any origin may call it
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(generate_router)


if __name__ == "__main__":
    import uvicorn

    log.info("Server is running on http://%s:%s", HOST, PORT)
    uvicorn.run(app, host=HOST, port=PORT)
