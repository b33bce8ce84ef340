"""Finding aggregation and health score."""

from collections import Counter
from collections.abc import Iterable, Mapping

from .constants import (
    CRITICAL_PENALTY,
    INFO_PENALTY,
    MAX_HEALTH_SCORE,
    MIN_HEALTH_SCORE,
    WARNING_PENALTY,
)
from .models import AnalysisFinding, AnalysisSummary, FindingSeverity

SEVERITY_PENALTIES: dict[FindingSeverity, int] = {
    FindingSeverity.CRITICAL: CRITICAL_PENALTY,
    FindingSeverity.WARNING: WARNING_PENALTY,
    FindingSeverity.INFO: INFO_PENALTY,
}


def health_score(by_severity: Mapping[str, int]) -> int:
    """Linear penalty score: 100 minus a fixed cost per finding, clamped to [0, 100]."""
    penalty = sum(
        weight * by_severity.get(severity.value, 0)
        for severity, weight in SEVERITY_PENALTIES.items()
    )
    return max(MIN_HEALTH_SCORE, min(MAX_HEALTH_SCORE, MAX_HEALTH_SCORE - penalty))


def compute_summary(findings: Iterable[AnalysisFinding]) -> AnalysisSummary:
    """Group findings by category and severity and derive the health score.

    Categories or severities without findings are absent from the mappings.
    """
    findings = list(findings)
    by_category = Counter(f.category.value for f in findings)
    by_severity = Counter(f.severity.value for f in findings)

    return AnalysisSummary(
        total_findings=len(findings),
        by_category=dict(by_category),
        by_severity=dict(by_severity),
        health_score=health_score(by_severity),
    )
