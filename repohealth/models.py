"""Pydantic models for repository health analysis.

This module defines the provider data snapshot (repository metadata and
file tree), the shared input handed to every rule module, and the
findings, summary and result produced by an analysis run.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class FindingCategory(str, Enum):
    """Rule domain a finding belongs to."""

    PROJECT_STRUCTURE = "project-structure"
    DEPENDENCIES = "dependencies"
    CONFIG_QUALITY = "config-quality"
    CODE_PATTERNS = "code-patterns"
    SECURITY = "security"
    DOCUMENTATION = "documentation"
    TESTING = "testing"

    @property
    def label(self) -> str:
        return CATEGORY_LABELS[self]


class FindingSeverity(str, Enum):
    """How much a finding weighs on the health score."""

    CRITICAL = "critical"
    WARNING = "warning"
    INFO = "info"

    @property
    def label(self) -> str:
        return SEVERITY_LABELS[self]


CATEGORY_LABELS: dict[FindingCategory, str] = {
    FindingCategory.PROJECT_STRUCTURE: "Project Structure",
    FindingCategory.DEPENDENCIES: "Dependencies",
    FindingCategory.CONFIG_QUALITY: "Config Quality",
    FindingCategory.CODE_PATTERNS: "Code Patterns",
    FindingCategory.SECURITY: "Security",
    FindingCategory.DOCUMENTATION: "Documentation",
    FindingCategory.TESTING: "Testing",
}

SEVERITY_LABELS: dict[FindingSeverity, str] = {
    FindingSeverity.CRITICAL: "Critical",
    FindingSeverity.WARNING: "Warning",
    FindingSeverity.INFO: "Info",
}


class RepoRef(BaseModel):
    """Owner/name pair parsed from a repository URL."""

    model_config = ConfigDict(frozen=True)

    owner: str
    repo: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    @property
    def html_url(self) -> str:
        return f"https://github.com/{self.owner}/{self.repo}"


class RepoInfo(BaseModel):
    """Repository metadata captured at analysis time.

    Attributes:
        owner: Repository owner login.
        repo: Repository name.
        default_branch: Branch whose tree is analyzed.
        description: Free-form description, if any.
        language: Primary language reported by the provider, if any.
        size: Provider-reported repository size in KB.
        stars: Stargazer count.
        forks: Fork count.
        open_issues: Open issue count.
        created_at: Creation timestamp as reported.
        updated_at: Last update timestamp as reported.
        topics: Topic tags; order is irrelevant.
    """

    model_config = ConfigDict(frozen=True)

    owner: str
    repo: str
    default_branch: str
    description: str | None = None
    language: str | None = None
    size: int = 0
    stars: int = 0
    forks: int = 0
    open_issues: int = 0
    created_at: str | None = None
    updated_at: str | None = None
    topics: frozenset[str] = Field(default_factory=frozenset)

    @classmethod
    def from_api(cls, owner: str, repo: str, data: dict[str, Any]) -> RepoInfo:
        """Build from a ``GET /repos/{owner}/{repo}`` payload."""
        return cls(
            owner=owner,
            repo=repo,
            default_branch=data.get("default_branch") or "main",
            description=data.get("description"),
            language=data.get("language"),
            size=data.get("size") or 0,
            stars=data.get("stargazers_count") or 0,
            forks=data.get("forks_count") or 0,
            open_issues=data.get("open_issues_count") or 0,
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
            topics=frozenset(data.get("topics") or []),
        )


class TreeEntry(BaseModel):
    """One path of the recursive repository tree.

    ``commit`` entries are submodules: they count as paths but are never
    blobs, so file-based rules and the key-file fetcher ignore them.
    """

    model_config = ConfigDict(frozen=True)

    path: str
    type: Literal["blob", "tree", "commit"] = "blob"
    size: int | None = None

    @property
    def is_blob(self) -> bool:
        return self.type == "blob"

    @property
    def name(self) -> str:
        return self.path.rsplit("/", 1)[-1]

    @property
    def depth(self) -> int:
        return len(self.path.split("/"))

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> TreeEntry:
        return cls(path=data["path"], type=data["type"], size=data.get("size"))


class AnalysisInput(BaseModel):
    """Shared, read-only input to every rule module."""

    model_config = ConfigDict(frozen=True)

    repo_info: RepoInfo
    tree: tuple[TreeEntry, ...] = ()
    file_contents: dict[str, str] = Field(default_factory=dict)

    @property
    def paths(self) -> list[str]:
        return [entry.path for entry in self.tree]

    @property
    def blobs(self) -> list[TreeEntry]:
        return [entry for entry in self.tree if entry.is_blob]


class AnalysisFinding(BaseModel):
    """A single issue reported by a rule module.

    Attributes:
        id: Stable short identifier such as ``ps-no-src``.
        category: Rule domain that produced the finding.
        severity: ``critical``, ``warning`` or ``info``.
        title: Short human-readable label.
        description: Explanation with counts or file names interpolated.
        file_path: Most relevant offending file, when applicable.
        suggestion: Actionable remediation advice.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    category: FindingCategory
    severity: FindingSeverity
    title: str
    description: str
    file_path: str | None = None
    suggestion: str


class AnalysisSummary(BaseModel):
    """Counts and health score derived from a finding list."""

    model_config = ConfigDict(frozen=True)

    total_findings: int = 0
    by_category: dict[str, int] = Field(default_factory=dict)
    by_severity: dict[str, int] = Field(default_factory=dict)
    health_score: int = Field(default=100, ge=0, le=100)


class AnalysisResult(BaseModel):
    """Output of one analysis run."""

    findings: list[AnalysisFinding] = Field(default_factory=list)
    summary: AnalysisSummary = Field(default_factory=AnalysisSummary)

    def finding_ids(self) -> set[str]:
        return {finding.id for finding in self.findings}

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly representation; unset file paths are omitted."""
        return {
            "findings": [
                finding.model_dump(mode="json", exclude_none=True)
                for finding in self.findings
            ],
            "summary": self.summary.model_dump(mode="json"),
        }


RuleModule = Callable[[AnalysisInput], list[AnalysisFinding]]
