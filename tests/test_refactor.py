"""Tests for refactor work-item drafts."""

import pytest

from repohealth.models import AnalysisFinding, FindingCategory, FindingSeverity
from repohealth.refactor import finding_to_work_item, findings_to_work_items


def make_finding(finding_id, severity, file_path=None):
    return AnalysisFinding(
        id=finding_id,
        category=FindingCategory.SECURITY,
        severity=severity,
        title="Environment files committed to repository",
        description="Found committed environment files: .env.",
        file_path=file_path,
        suggestion="Remove .env files from the repository.",
    )


class TestFindingToWorkItem:
    @pytest.mark.parametrize(
        "severity, priority",
        [
            (FindingSeverity.CRITICAL, "high"),
            (FindingSeverity.WARNING, "medium"),
            (FindingSeverity.INFO, "low"),
        ],
    )
    def test_priority_mapping(self, severity, priority):
        assert finding_to_work_item(make_finding("x", severity)).priority == priority

    def test_draft_fields(self):
        draft = finding_to_work_item(make_finding("sec-env-exposed", FindingSeverity.CRITICAL, ".env"))

        assert draft.finding_id == "sec-env-exposed"
        assert draft.title == "[Refactor] Environment files committed to repository"
        assert draft.type == "refactor"
        assert draft.status == "backlog"
        assert draft.description == (
            "Found committed environment files: .env.\n"
            "\n"
            "**Category**: security\n"
            "**Suggestion**: Remove .env files from the repository.\n"
            "**File**: .env"
        )

    def test_file_line_omitted_without_path(self):
        draft = finding_to_work_item(make_finding("x", FindingSeverity.INFO))
        assert "**File**" not in draft.description


class TestFindingsToWorkItems:
    def test_selection(self):
        findings = [
            make_finding("a", FindingSeverity.INFO),
            make_finding("b", FindingSeverity.WARNING),
            make_finding("c", FindingSeverity.CRITICAL),
        ]

        assert [d.finding_id for d in findings_to_work_items(findings)] == ["a", "b", "c"]
        assert [d.finding_id for d in findings_to_work_items(findings, {"c", "a"})] == ["a", "c"]
        assert findings_to_work_items(findings, set()) == []
