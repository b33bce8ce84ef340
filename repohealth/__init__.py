"""repohealth - rule-based code-health analysis of GitHub repositories."""

from .analyzer import RepoAnalyzer, analyze_input, analyze_repo, run_rules
from .clients.github_client import GitHubClient, parse_repo_url
from .core.config import AnalyzerConfig
from .core.exceptions import (
    FileFetchError,
    InvalidUrlFormatError,
    ProviderError,
    RateLimitError,
    RepoHealthError,
    RepoNotFoundError,
)
from .core.logging_config import configure_logging
from .models import (
    AnalysisFinding,
    AnalysisInput,
    AnalysisResult,
    AnalysisSummary,
    FindingCategory,
    FindingSeverity,
    RepoInfo,
    RepoRef,
    TreeEntry,
)
from .refactor import WorkItemDraft, finding_to_work_item, findings_to_work_items
from .scoring import compute_summary, health_score

__version__ = "0.1.0"

__all__ = [
    "AnalysisFinding",
    "AnalysisInput",
    "AnalysisResult",
    "AnalysisSummary",
    "AnalyzerConfig",
    "FileFetchError",
    "FindingCategory",
    "FindingSeverity",
    "GitHubClient",
    "InvalidUrlFormatError",
    "ProviderError",
    "RateLimitError",
    "RepoAnalyzer",
    "RepoHealthError",
    "RepoInfo",
    "RepoNotFoundError",
    "RepoRef",
    "TreeEntry",
    "WorkItemDraft",
    "analyze_input",
    "analyze_repo",
    "compute_summary",
    "configure_logging",
    "finding_to_work_item",
    "findings_to_work_items",
    "health_score",
    "parse_repo_url",
    "run_rules",
]
