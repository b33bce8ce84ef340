import base64
import logging
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from repohealth.clients.github_client import GitHubClient, parse_repo_url
from repohealth.core.exceptions import (
    FileFetchError,
    InvalidUrlFormatError,
    ProviderError,
    RateLimitError,
    RepoNotFoundError,
)


@pytest.fixture
def github_client():
    return GitHubClient()


@pytest.fixture
def mock_repo_response():
    return {
        "name": "react",
        "full_name": "facebook/react",
        "default_branch": "main",
        "description": "The library for web and native user interfaces.",
        "language": "JavaScript",
        "size": 12345,
        "stargazers_count": 200000,
        "forks_count": 40000,
        "open_issues_count": 900,
        "created_at": "2013-05-24T16:15:54Z",
        "updated_at": "2026-01-01T00:00:00Z",
        "topics": ["react", "ui", "javascript"],
    }


@pytest.fixture
def mock_tree_response():
    return {
        "sha": "abc123",
        "truncated": False,
        "tree": [
            {"path": "package.json", "type": "blob", "size": 1200},
            {"path": "src", "type": "tree"},
            {"path": "src/index.ts", "type": "blob", "size": 300},
            {"path": "vendor/lib", "type": "commit"},
        ],
    }


class TestParseRepoUrl:
    @pytest.mark.parametrize(
        "url, owner, repo",
        [
            ("https://github.com/facebook/react", "facebook", "react"),
            ("https://github.com/facebook/react.git", "facebook", "react"),
            ("https://github.com/facebook/react/tree/main", "facebook", "react"),
            ("https://github.com/facebook/react/tree/feature/x", "facebook", "react"),
            ("github.com/vercel/next.js", "vercel", "next.js"),
            ("https://github.com/facebook/react/", "facebook", "react"),
            ("http://www.github.com/octo/hello-world", "octo", "hello-world"),
        ],
    )
    def test_supported_formats(self, url, owner, repo):
        ref = parse_repo_url(url)
        assert ref.owner == owner
        assert ref.repo == repo

    @pytest.mark.parametrize(
        "url",
        ["https://gitlab.com/owner/repo", "", "https://github.com/owner", "not a url"],
    )
    def test_invalid(self, url):
        with pytest.raises(InvalidUrlFormatError, match="Invalid GitHub URL format"):
            parse_repo_url(url)

    def test_full_name(self):
        ref = parse_repo_url("https://github.com/facebook/react")
        assert ref.full_name == "facebook/react"
        assert ref.html_url == "https://github.com/facebook/react"


class TestGitHubClient:
    def test_init_without_token(self):
        client = GitHubClient()
        assert "Authorization" not in client.headers
        assert client.headers["Accept"] == "application/vnd.github+json"
        assert client.base_url == "https://api.github.com"

    def test_init_with_token(self):
        client = GitHubClient(token="test-token")
        assert client.headers["Authorization"] == "Bearer test-token"
        assert client.client.headers["Authorization"] == "Bearer test-token"

    def test_init_custom_host(self):
        client = GitHubClient(base_url="https://github.example.com/api/v3/", timeout=5)
        assert client.base_url == "https://github.example.com/api/v3"
        assert client.client.timeout.connect == 5

    @pytest.mark.asyncio
    async def test_async_context_manager(self):
        async with GitHubClient() as client:
            assert isinstance(client, GitHubClient)
            assert not client.client.is_closed
        assert client.client.is_closed

    @pytest.mark.asyncio
    @patch("httpx.AsyncClient.get", new_callable=AsyncMock)
    async def test_fetch_repo_info(self, mock_get, github_client, mock_repo_response):
        mock_get.return_value = httpx.Response(200, json=mock_repo_response)

        info = await github_client.fetch_repo_info("facebook", "react")

        assert mock_get.call_args.args[0] == "https://api.github.com/repos/facebook/react"
        assert info.owner == "facebook"
        assert info.repo == "react"
        assert info.default_branch == "main"
        assert info.stars == 200000
        assert info.forks == 40000
        assert info.open_issues == 900
        assert info.topics == frozenset({"react", "ui", "javascript"})

    @pytest.mark.asyncio
    @patch("httpx.AsyncClient.get", new_callable=AsyncMock)
    async def test_fetch_repo_info_not_found(self, mock_get, github_client):
        mock_get.return_value = httpx.Response(404, json={"message": "Not Found"})

        with pytest.raises(RepoNotFoundError, match="Repository not found"):
            await github_client.fetch_repo_info("owner", "missing")

    @pytest.mark.asyncio
    @patch("httpx.AsyncClient.get", new_callable=AsyncMock)
    async def test_fetch_repo_info_server_error(self, mock_get, github_client):
        mock_get.return_value = httpx.Response(502, text="Bad Gateway")

        with pytest.raises(ProviderError) as exc_info:
            await github_client.fetch_repo_info("owner", "repo")

        assert exc_info.value.status_code == 502
        assert not isinstance(exc_info.value, RepoNotFoundError)

    @pytest.mark.asyncio
    @patch("httpx.AsyncClient.get", new_callable=AsyncMock)
    async def test_fetch_repo_info_rate_limited(self, mock_get, github_client):
        mock_get.return_value = httpx.Response(
            403,
            json={"message": "API rate limit exceeded"},
            headers={"X-RateLimit-Remaining": "0", "X-RateLimit-Reset": "1700000000"},
        )

        with pytest.raises(RateLimitError) as exc_info:
            await github_client.fetch_repo_info("owner", "repo")

        assert exc_info.value.status_code == 403
        assert exc_info.value.reset_at == 1700000000

    @pytest.mark.asyncio
    @patch("httpx.AsyncClient.get", new_callable=AsyncMock)
    async def test_forbidden_without_rate_limit_is_provider_error(self, mock_get, github_client):
        mock_get.return_value = httpx.Response(403, json={"message": "Forbidden"})

        with pytest.raises(ProviderError) as exc_info:
            await github_client.fetch_repo_info("owner", "repo")

        assert not isinstance(exc_info.value, RateLimitError)

    @pytest.mark.asyncio
    @patch("httpx.AsyncClient.get", new_callable=AsyncMock)
    async def test_fetch_repo_info_transport_error(self, mock_get, github_client):
        mock_get.side_effect = httpx.ConnectError("connection refused")

        with pytest.raises(ProviderError) as exc_info:
            await github_client.fetch_repo_info("owner", "repo")

        assert exc_info.value.status_code is None

    @pytest.mark.asyncio
    @patch("httpx.AsyncClient.get", new_callable=AsyncMock)
    async def test_fetch_repo_info_unexpected_payload(self, mock_get, github_client):
        mock_get.return_value = httpx.Response(200, json=["not", "an", "object"])

        with pytest.raises(ProviderError) as exc_info:
            await github_client.fetch_repo_info("owner", "repo")

        assert exc_info.value.status_code == 200

    @pytest.mark.asyncio
    @patch("httpx.AsyncClient.get", new_callable=AsyncMock)
    async def test_fetch_repo_tree(self, mock_get, github_client, mock_tree_response):
        mock_get.return_value = httpx.Response(200, json=mock_tree_response)

        tree = await github_client.fetch_repo_tree("facebook", "react", "main")

        assert mock_get.call_args.args[0] == (
            "https://api.github.com/repos/facebook/react/git/trees/main"
        )
        assert mock_get.call_args.kwargs["params"] == {"recursive": "1"}
        assert [e.path for e in tree] == ["package.json", "src", "src/index.ts", "vendor/lib"]
        assert tree[0].size == 1200
        assert tree[1].type == "tree"
        assert tree[1].size is None
        assert tree[3].type == "commit"
        assert not tree[3].is_blob

    @pytest.mark.asyncio
    @patch("httpx.AsyncClient.get", new_callable=AsyncMock)
    async def test_fetch_repo_tree_truncated(self, mock_get, github_client, mock_tree_response, caplog):
        mock_tree_response["truncated"] = True
        mock_get.return_value = httpx.Response(200, json=mock_tree_response)

        with caplog.at_level(logging.WARNING, logger="repohealth"):
            tree = await github_client.fetch_repo_tree("facebook", "react", "main")

        assert len(tree) == 4
        assert "truncated" in caplog.text

    @pytest.mark.asyncio
    @patch("httpx.AsyncClient.get", new_callable=AsyncMock)
    async def test_fetch_repo_tree_error(self, mock_get, github_client):
        mock_get.return_value = httpx.Response(409, json={"message": "Git Repository is empty."})

        with pytest.raises(ProviderError) as exc_info:
            await github_client.fetch_repo_tree("owner", "repo", "main")

        assert exc_info.value.status_code == 409

    @pytest.mark.asyncio
    @patch("httpx.AsyncClient.get", new_callable=AsyncMock)
    async def test_fetch_repo_tree_unexpected_payload(self, mock_get, github_client):
        mock_get.return_value = httpx.Response(200, json=[{"path": "a", "type": "blob"}])

        with pytest.raises(ProviderError, match="unexpected payload"):
            await github_client.fetch_repo_tree("owner", "repo", "main")

    @pytest.mark.asyncio
    @patch("httpx.AsyncClient.get", new_callable=AsyncMock)
    async def test_fetch_file_content_base64(self, mock_get, github_client):
        text = '{\n  "name": "demo",\n  "description": "café"\n}\n'
        encoded = base64.b64encode(text.encode("utf-8")).decode("ascii")
        # The contents API wraps base64 at 60 columns
        wrapped = "\n".join(encoded[i:i + 60] for i in range(0, len(encoded), 60))
        mock_get.return_value = httpx.Response(
            200, json={"encoding": "base64", "content": wrapped}
        )

        content = await github_client.fetch_file_content("owner", "repo", "package.json")

        assert content == text
        assert mock_get.call_args.args[0] == (
            "https://api.github.com/repos/owner/repo/contents/package.json"
        )

    @pytest.mark.asyncio
    @patch("httpx.AsyncClient.get", new_callable=AsyncMock)
    async def test_fetch_file_content_plain(self, mock_get, github_client):
        mock_get.return_value = httpx.Response(200, json={"encoding": "none", "content": "node_modules/\n"})

        content = await github_client.fetch_file_content("owner", "repo", ".gitignore")

        assert content == "node_modules/\n"

    @pytest.mark.asyncio
    @patch("httpx.AsyncClient.get", new_callable=AsyncMock)
    async def test_fetch_file_content_missing_content(self, mock_get, github_client):
        mock_get.return_value = httpx.Response(200, json={"encoding": "base64", "content": ""})

        assert await github_client.fetch_file_content("owner", "repo", "README.md") == ""

    @pytest.mark.asyncio
    @patch("httpx.AsyncClient.get", new_callable=AsyncMock)
    async def test_fetch_file_content_error(self, mock_get, github_client):
        mock_get.return_value = httpx.Response(404, json={"message": "Not Found"})

        with pytest.raises(FileFetchError) as exc_info:
            await github_client.fetch_file_content("owner", "repo", "tsconfig.json")

        assert exc_info.value.path == "tsconfig.json"
        assert exc_info.value.status_code == 404
        assert "tsconfig.json" in str(exc_info.value)

    @pytest.mark.asyncio
    @patch("httpx.AsyncClient.get", new_callable=AsyncMock)
    async def test_fetch_file_content_not_utf8(self, mock_get, github_client):
        encoded = base64.b64encode(b"\xff\xfe\x00binary").decode("ascii")
        mock_get.return_value = httpx.Response(200, json={"encoding": "base64", "content": encoded})

        with pytest.raises(FileFetchError):
            await github_client.fetch_file_content("owner", "repo", "README.md")

    @pytest.mark.asyncio
    @patch("httpx.AsyncClient.get", new_callable=AsyncMock)
    async def test_fetch_file_content_non_ascii_base64(self, mock_get, github_client):
        mock_get.return_value = httpx.Response(200, json={"encoding": "base64", "content": "\u00e9=="})

        with pytest.raises(FileFetchError, match="undecodable content"):
            await github_client.fetch_file_content("owner", "repo", "README.md")

    @pytest.mark.asyncio
    @patch("httpx.AsyncClient.get", new_callable=AsyncMock)
    async def test_fetch_file_content_directory(self, mock_get, github_client):
        mock_get.return_value = httpx.Response(200, json=[{"name": "a.ts", "type": "file"}])

        with pytest.raises(FileFetchError, match="not a file"):
            await github_client.fetch_file_content("owner", "repo", "src")

    @pytest.mark.asyncio
    @patch("httpx.AsyncClient.get", new_callable=AsyncMock)
    async def test_fetch_file_content_timeout(self, mock_get, github_client):
        mock_get.side_effect = httpx.ReadTimeout("timed out")

        with pytest.raises(FileFetchError):
            await github_client.fetch_file_content("owner", "repo", "package.json")
