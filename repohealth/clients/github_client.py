import base64
import logging
import re
from typing import Any
from urllib.parse import quote

import httpx

from ..constants import DEFAULT_HTTP_TIMEOUT, GITHUB_API_URL, GITHUB_API_VERSION
from ..core.exceptions import (
    FileFetchError,
    InvalidUrlFormatError,
    ProviderError,
    RateLimitError,
    RepoNotFoundError,
)
from ..models import RepoInfo, RepoRef, TreeEntry

logger = logging.getLogger(__name__)

_REPO_URL_PATTERN = re.compile(r"github\.com/([^/]+)/([^/]+)")

TREE_ENTRY_TYPES = ("blob", "tree", "commit")


def parse_repo_url(url: str) -> RepoRef:
    """Extract owner and repository name from a GitHub URL.

    Supports formats:
    - https://github.com/owner/repo
    - https://github.com/owner/repo.git
    - https://github.com/owner/repo/
    - https://github.com/owner/repo/tree/branch
    - github.com/owner/repo
    """
    cleaned = url.strip()
    if cleaned.endswith(".git"):
        cleaned = cleaned[: -len(".git")]
    if cleaned.endswith("/"):
        cleaned = cleaned[:-1]

    match = _REPO_URL_PATTERN.search(cleaned)
    if not match:
        raise InvalidUrlFormatError(url)
    return RepoRef(owner=match.group(1), repo=match.group(2))


class GitHubClient:
    """Async client for the three read-only calls the analysis needs."""

    def __init__(
        self,
        token: str | None = None,
        base_url: str = GITHUB_API_URL,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
        }
        if token:
            self.headers["Authorization"] = f"Bearer {token}"
        self.client = httpx.AsyncClient(
            timeout=timeout, headers=self.headers, transport=transport
        )

    async def __aenter__(self) -> "GitHubClient":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.client.aclose()

    def _repo_url(self, owner: str, repo: str) -> str:
        return f"{self.base_url}/repos/{quote(owner, safe='')}/{quote(repo, safe='')}"

    @staticmethod
    def _is_rate_limited(response: httpx.Response) -> bool:
        if response.status_code == 429:
            return True
        return response.status_code == 403 and response.headers.get("x-ratelimit-remaining") == "0"

    def _raise_for_provider_status(self, response: httpx.Response, what: str) -> None:
        if response.is_success:
            return

        if self._is_rate_limited(response):
            reset = response.headers.get("x-ratelimit-reset")
            raise RateLimitError(
                f"GitHub API rate limit exceeded while fetching {what}",
                status_code=response.status_code,
                reset_at=int(reset) if reset and reset.isdigit() else None,
            )

        raise ProviderError(
            f"GitHub API error: {response.status_code} while fetching {what}",
            status_code=response.status_code,
            response_body=response.text[:500],
        )

    async def fetch_repo_info(self, owner: str, repo: str) -> RepoInfo:
        """Fetch repository metadata.

        Raises:
            RepoNotFoundError: the provider answered 404
            ProviderError: any other non-2xx answer or a transport failure
        """
        try:
            response = await self.client.get(self._repo_url(owner, repo))
        except httpx.HTTPError as e:
            raise ProviderError(f"GitHub API request failed: {e}") from e

        if response.status_code == 404:
            raise RepoNotFoundError(owner, repo)
        self._raise_for_provider_status(response, "repository")

        try:
            data = response.json()
        except ValueError as e:
            raise ProviderError(
                "GitHub API returned invalid JSON for repository",
                status_code=response.status_code,
            ) from e

        if not isinstance(data, dict):
            raise ProviderError(
                "GitHub API returned an unexpected payload for repository",
                status_code=response.status_code,
            )

        info = RepoInfo.from_api(owner, repo, data)
        logger.debug(
            f"Fetched repository info for {owner}/{repo}",
            extra={"event": "repo_info", "owner": owner, "repo": repo, "branch": info.default_branch},
        )
        return info

    async def fetch_repo_tree(self, owner: str, repo: str, branch: str) -> list[TreeEntry]:
        """Fetch the recursive file tree of ``branch``.

        A truncated tree is returned as-is; the truncation is only logged.
        """
        url = f"{self._repo_url(owner, repo)}/git/trees/{quote(branch, safe='')}"
        try:
            response = await self.client.get(url, params={"recursive": "1"})
        except httpx.HTTPError as e:
            raise ProviderError(f"Failed to fetch repository tree: {e}") from e

        self._raise_for_provider_status(response, "repository tree")

        try:
            data = response.json()
        except ValueError as e:
            raise ProviderError(
                "GitHub API returned invalid JSON for repository tree",
                status_code=response.status_code,
            ) from e

        if not isinstance(data, dict):
            raise ProviderError(
                "GitHub API returned an unexpected payload for repository tree",
                status_code=response.status_code,
            )

        if data.get("truncated"):
            logger.warning(
                f"Repository tree for {owner}/{repo} was truncated due to size",
                extra={"event": "tree_truncated", "owner": owner, "repo": repo, "branch": branch},
            )

        # Submodules show up as "commit" entries and are kept as paths
        entries = [
            TreeEntry.from_api(item)
            for item in data.get("tree") or []
            if isinstance(item, dict) and item.get("type") in TREE_ENTRY_TYPES
        ]
        logger.debug(
            f"Fetched {len(entries)} tree entries for {owner}/{repo}@{branch}",
            extra={"event": "tree", "owner": owner, "repo": repo, "entry_count": len(entries)},
        )
        return entries

    async def fetch_file_content(self, owner: str, repo: str, path: str) -> str:
        """Fetch one file's text through the contents API.

        Raises:
            FileFetchError: non-2xx answer, transport failure or undecodable content
        """
        url = f"{self._repo_url(owner, repo)}/contents/{quote(path, safe='/')}"
        try:
            response = await self.client.get(url)
        except httpx.HTTPError as e:
            raise FileFetchError(path, reason=str(e)) from e

        if not response.is_success:
            raise FileFetchError(path, status_code=response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise FileFetchError(path, status_code=response.status_code, reason="invalid JSON") from e

        if not isinstance(data, dict):
            # Directories come back as a listing
            raise FileFetchError(path, status_code=response.status_code, reason="not a file")

        content = data.get("content") or ""
        if data.get("encoding") == "base64" and content:
            try:
                return base64.b64decode(content).decode("utf-8")
            except ValueError as e:
                # binascii.Error, UnicodeDecodeError and non-ASCII input are all ValueErrors
                raise FileFetchError(path, reason="undecodable content") from e
        return str(content)
