"""Tests for readmegen.main: FastAPI endpoints tested with TestClient.

GitHub and the LLM backend are replaced through ``readmegen.pipeline`` so
tests run offline.
"""
from __future__ import annotations

import pytest
from unittest.mock import MagicMock, patch

from fastapi.testclient import TestClient

from readmegen.errors import GenerationError, UpstreamError
from readmegen.main import app

client = TestClient(app)

VALID_URL = "https://github.com/octocat/Hello-World"


@pytest.fixture
def llm():
    """Patch the LLM factory; returns the mock client."""
    mock_client = MagicMock()
    mock_client.generate.return_value = "  # Hello-World\n\nGenerated.  \n"
    with patch("readmegen.pipeline.get_llm_client", return_value=mock_client):
        yield mock_client


@pytest.fixture
def github(fake_github):
    with patch("readmegen.pipeline.GitHubClient", return_value=fake_github):
        yield fake_github


# =====================================================================
# GET / and GET /health
# =====================================================================

class TestInfoEndpoints:

    def test_root_lists_generate(self):
        data = client.get("/").json()
        assert data["service"] == "readmegen"
        assert "/generate" in [ep["path"] for ep in data["endpoints"]]

    @patch("readmegen.llm_factory.LLM_PROVIDER", "gemini")
    @patch("readmegen.config.GITHUB_TOKEN", None)
    def test_health_without_credentials(self, monkeypatch):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        resp = client.get("/health")
        assert resp.status_code == 200
        checks = resp.json()["checks"]
        assert checks["llm"] == {"provider": "gemini", "status": "not_configured"}
        assert checks["github"]["status"] == "anonymous"

    @patch("readmegen.llm_factory.LLM_PROVIDER", "gemini")
    @patch("readmegen.config.GITHUB_TOKEN", "token")
    def test_health_with_credentials(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "key")
        checks = client.get("/health").json()["checks"]
        assert checks["llm"]["status"] == "configured"
        assert checks["github"]["status"] == "authenticated"


# =====================================================================
# POST /generate: success
# =====================================================================

class TestGenerateSuccess:

    def test_returns_trimmed_readme(self, github, llm):
        resp = client.post("/generate", json={"repoUrl": VALID_URL})
        assert resp.status_code == 200
        assert resp.json() == {"readme": "# Hello-World\n\nGenerated."}

    def test_prompt_contains_metadata(self, github, llm):
        client.post("/generate", json={"repoUrl": VALID_URL})
        prompt = llm.generate.call_args.args[0]
        assert '"name": "Hello-World"' in prompt
        assert '"license": "MIT"' in prompt

    def test_empty_generation_is_valid(self, github, llm):
        llm.generate.return_value = ""
        resp = client.post("/generate", json={"repoUrl": VALID_URL})
        assert resp.status_code == 200
        assert resp.json() == {"readme": ""}

    def test_no_languages_no_topics(self, github_factory, llm):
        empty = github_factory(languages={}, topics=[])
        with patch("readmegen.pipeline.GitHubClient", return_value=empty):
            resp = client.post("/generate", json={"repoUrl": VALID_URL})
        assert resp.status_code == 200

    def test_cors_allows_any_origin(self, github, llm):
        resp = client.post(
            "/generate",
            json={"repoUrl": VALID_URL},
            headers={"Origin": "https://some-frontend.example"},
        )
        assert resp.headers.get("access-control-allow-origin") == "*"


# =====================================================================
# POST /generate: validation errors (400)
# =====================================================================

class TestGenerateValidation:

    @pytest.mark.parametrize("body, message", [
        ({}, "repoUrl is required"),
        ({"repoUrl": ""}, "repoUrl is required"),
        ({"repoUrl": 5}, "repoUrl must be a string"),
        ({"repoUrl": "not a url"}, "repoUrl must be a valid URL"),
        ({"repoUrl": "https://gitlab.com/a/b"}, "Only GitHub URLs are supported"),
        ({"repoUrl": "https://github.com/octocat"}, "Invalid GitHub URL format"),
        ([1, 2], "Request body must be a JSON object"),
    ])
    def test_bad_input(self, body, message, llm):
        resp = client.post("/generate", json=body)
        assert resp.status_code == 400
        assert resp.json() == {"error": message}
        llm.generate.assert_not_called()

    def test_malformed_json(self):
        resp = client.post(
            "/generate", content=b"{not json", headers={"Content-Type": "application/json"},
        )
        assert resp.status_code == 400
        assert "error" in resp.json()

    def test_empty_body(self):
        resp = client.post("/generate")
        assert resp.status_code == 400


# =====================================================================
# POST /generate: upstream and generation errors
# =====================================================================

class TestGenerateErrors:

    def test_repository_not_found_is_404(self, missing_repo_github, llm):
        with patch("readmegen.pipeline.GitHubClient", return_value=missing_repo_github):
            resp = client.post("/generate", json={"repoUrl": "https://github.com/octocat/nope"})
        assert resp.status_code == 404
        assert "octocat/nope" in resp.json()["error"]
        llm.generate.assert_not_called()

    def test_github_failure_is_500_with_message(self, github_factory, llm):
        failing = github_factory(errors={"get_tree": UpstreamError("GitHub API error (403): rate limit")})
        with patch("readmegen.pipeline.GitHubClient", return_value=failing):
            resp = client.post("/generate", json={"repoUrl": VALID_URL})
        assert resp.status_code == 500
        assert resp.json()["error"] == "Failed to generate README. GitHub API error (403): rate limit"

    def test_overloaded_model_is_503(self, github):
        from readmegen.gemini_client import GeminiClient

        with patch("readmegen.gemini_client.genai") as mock_genai, \
                patch("readmegen.pipeline.get_llm_client", side_effect=lambda **kw: GeminiClient(api_key="k")):
            mock_genai.Client.return_value.models.generate_content.side_effect = RuntimeError(
                "The model is overloaded. Please try again later."
            )
            resp = client.post("/generate", json={"repoUrl": VALID_URL})
        assert resp.status_code == 503
        assert resp.json() == {
            "error": "The AI model is temporarily overloaded. Please try again in a moment."
        }

    def test_generation_failure_is_500(self, github, llm):
        llm.generate.side_effect = GenerationError("Gemini API error: invalid key")
        resp = client.post("/generate", json={"repoUrl": VALID_URL})
        assert resp.status_code == 500
        assert resp.json() == {"error": "Failed to generate README. Gemini API error: invalid key"}

    def test_unexpected_error_is_500(self, github, llm):
        llm.generate.side_effect = KeyError("text")
        resp = client.post("/generate", json={"repoUrl": VALID_URL})
        assert resp.status_code == 500
        assert resp.json()["error"].startswith("Failed to generate README. ")

    def test_missing_llm_configuration_is_500(self, github):
        with patch("readmegen.pipeline.get_llm_client", side_effect=GenerationError("GEMINI_API_KEY is not set")):
            resp = client.post("/generate", json={"repoUrl": VALID_URL})
        assert resp.status_code == 500
        assert "GEMINI_API_KEY is not set" in resp.json()["error"]
