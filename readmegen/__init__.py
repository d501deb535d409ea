"""readmegen: generate README files for GitHub repositories with an LLM.

This package exposes small service modules grouped by responsibility:
- validation: checking and parsing the submitted repository URL
- github: the GitHub REST client and the concurrent metadata aggregator
- prompt_builder: rendering repository metadata into a generation prompt
- gemini_client / ollama_client: generation backends behind ``llm_factory``
- responses: mapping results and errors onto HTTP responses
- pipeline: the end-to-end flow used by both the HTTP app and the CLI
"""

__version__ = "0.1.0"
