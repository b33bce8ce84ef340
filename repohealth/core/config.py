"""Configuration model for repository analysis."""

import os

from pydantic import BaseModel, Field

from ..constants import (
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_MAX_CONCURRENCY,
    GITHUB_API_URL,
    MAX_KEY_FILE_SIZE,
)


class AnalyzerConfig(BaseModel):
    """Settings threaded into the provider client and key-file fetcher."""

    github_token: str | None = Field(
        default=None, description="Bearer token for the provider API (optional)"
    )
    api_base_url: str = Field(
        default=GITHUB_API_URL, description="Base URL of the GitHub-compatible REST API"
    )
    timeout: float = Field(
        default=DEFAULT_HTTP_TIMEOUT, gt=0, description="Per-request timeout in seconds"
    )
    max_concurrency: int = Field(
        default=DEFAULT_MAX_CONCURRENCY, ge=1, description="Simultaneous key-file fetches"
    )
    max_file_size: int = Field(
        default=MAX_KEY_FILE_SIZE, ge=1, description="Largest key file fetched, in bytes"
    )

    @classmethod
    def from_env(cls) -> "AnalyzerConfig":
        """Build a config, taking the token from ``GITHUB_TOKEN`` when set."""
        return cls(github_token=os.environ.get("GITHUB_TOKEN") or None)
