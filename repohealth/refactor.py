"""Turn findings into refactor work-item drafts.

Only the conversion lives here; storing the drafts is up to the caller.
"""

from collections.abc import Collection, Iterable
from typing import Literal

from pydantic import BaseModel, ConfigDict

from .models import AnalysisFinding, FindingSeverity

Priority = Literal["high", "medium", "low"]

SEVERITY_PRIORITY: dict[FindingSeverity, Priority] = {
    FindingSeverity.CRITICAL: "high",
    FindingSeverity.WARNING: "medium",
    FindingSeverity.INFO: "low",
}


class WorkItemDraft(BaseModel):
    """Backlog item proposed for one finding."""

    model_config = ConfigDict(frozen=True)

    finding_id: str
    title: str
    description: str
    type: str = "refactor"
    priority: Priority
    status: str = "backlog"


def finding_to_work_item(finding: AnalysisFinding) -> WorkItemDraft:
    lines = [
        finding.description,
        "",
        f"**Category**: {finding.category.value}",
        f"**Suggestion**: {finding.suggestion}",
    ]
    if finding.file_path:
        lines.append(f"**File**: {finding.file_path}")

    return WorkItemDraft(
        finding_id=finding.id,
        title=f"[Refactor] {finding.title}",
        description="\n".join(lines),
        priority=SEVERITY_PRIORITY[finding.severity],
    )


def findings_to_work_items(
    findings: Iterable[AnalysisFinding],
    selected_ids: Collection[str] | None = None,
) -> list[WorkItemDraft]:
    """Convert findings in order, keeping only ``selected_ids`` when given."""
    return [
        finding_to_work_item(finding)
        for finding in findings
        if selected_ids is None or finding.id in selected_ids
    ]
