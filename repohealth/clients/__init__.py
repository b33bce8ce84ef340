"""Source provider clients."""

from .github_client import GitHubClient, parse_repo_url

__all__ = [
    "GitHubClient",
    "parse_repo_url",
]
