"""Repository health analysis.

This module sequences the provider calls (repository metadata, tree, key
files), builds the shared analysis input, runs every rule module over it
and aggregates the findings into an ``AnalysisResult``.
"""

import logging
from collections.abc import Sequence

from .clients.github_client import GitHubClient, parse_repo_url
from .core.config import AnalyzerConfig
from .key_files import fetch_key_files
from .models import AnalysisFinding, AnalysisInput, AnalysisResult, RuleModule
from .rules import RULE_MODULES
from .scoring import compute_summary

logger = logging.getLogger(__name__)


def run_rules(
    data: AnalysisInput, rules: Sequence[RuleModule] = RULE_MODULES
) -> list[AnalysisFinding]:
    """Run every rule over ``data`` and concatenate their findings."""
    findings: list[AnalysisFinding] = []
    for rule in rules:
        findings.extend(rule(data))
    return findings


def analyze_input(
    data: AnalysisInput, rules: Sequence[RuleModule] = RULE_MODULES
) -> AnalysisResult:
    """Run the rules and summarize; no I/O."""
    findings = run_rules(data, rules)
    return AnalysisResult(findings=findings, summary=compute_summary(findings))


class RepoAnalyzer:
    """Analyzer for GitHub repositories."""

    def __init__(
        self,
        config: AnalyzerConfig | None = None,
        client: GitHubClient | None = None,
        rules: Sequence[RuleModule] = RULE_MODULES,
    ):
        self.config = config or AnalyzerConfig()
        self.rules = tuple(rules)
        self._owns_client = client is None
        self.client = client or GitHubClient(
            token=self.config.github_token,
            base_url=self.config.api_base_url,
            timeout=self.config.timeout,
        )

    async def __aenter__(self) -> "RepoAnalyzer":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    async def build_input(self, owner: str, repo: str) -> AnalysisInput:
        """Fetch everything the rules need.

        Repository metadata must come first (it names the default branch),
        then the tree, then the key files selected from the tree. Any failure
        of the first two steps propagates.
        """
        repo_info = await self.client.fetch_repo_info(owner, repo)
        tree = await self.client.fetch_repo_tree(owner, repo, repo_info.default_branch)
        file_contents = await fetch_key_files(
            self.client,
            owner,
            repo,
            tree,
            max_file_size=self.config.max_file_size,
            max_concurrency=self.config.max_concurrency,
        )
        return AnalysisInput(repo_info=repo_info, tree=tuple(tree), file_contents=file_contents)

    async def analyze_repo(self, owner: str, repo: str) -> AnalysisResult:
        """Analyze ``owner/repo`` and return its findings and summary.

        Raises:
            RepoNotFoundError: the repository does not exist
            ProviderError: the provider failed on metadata or tree
        """
        data = await self.build_input(owner, repo)
        result = analyze_input(data, self.rules)

        logger.info(
            f"Analyzed {owner}/{repo}: {result.summary.total_findings} findings, "
            f"health score {result.summary.health_score}",
            extra={
                "event": "analysis_completed",
                "owner": owner,
                "repo": repo,
                "finding_count": result.summary.total_findings,
                "health_score": result.summary.health_score,
            },
        )
        return result

    async def analyze_url(self, url: str) -> AnalysisResult:
        """Parse ``url`` and analyze the repository it names.

        Raises:
            InvalidUrlFormatError: before any request when the URL is not recognized
        """
        ref = parse_repo_url(url)
        return await self.analyze_repo(ref.owner, ref.repo)


async def analyze_repo(
    owner: str, repo: str, config: AnalyzerConfig | None = None
) -> AnalysisResult:
    """Analyze one repository with a short-lived client.

    The token comes from ``config``; pass ``AnalyzerConfig.from_env()`` to use
    ``GITHUB_TOKEN``.
    """
    async with RepoAnalyzer(config=config) as analyzer:
        return await analyzer.analyze_repo(owner, repo)
