"""Project layout checks."""

from ..constants import MAX_NESTING_DEPTH, MAX_ROOT_FILES
from ..models import AnalysisFinding, AnalysisInput, FindingCategory, FindingSeverity
from .utils import has_test_directory, has_test_filename

CATEGORY = FindingCategory.PROJECT_STRUCTURE


def check_project_structure(data: AnalysisInput) -> list[AnalysisFinding]:
    findings: list[AnalysisFinding] = []
    paths = data.paths

    if not any(p == "src" or p.startswith("src/") for p in paths):
        findings.append(AnalysisFinding(
            id="ps-no-src",
            category=CATEGORY,
            severity=FindingSeverity.WARNING,
            title="No src/ directory found",
            description=(
                "The project does not have a src/ directory. Organizing source code "
                "in a dedicated directory improves maintainability."
            ),
            suggestion="Create a src/ directory and move source files into it.",
        ))

    if not any(has_test_directory(p) or has_test_filename(p) for p in paths):
        findings.append(AnalysisFinding(
            id="ps-no-tests",
            category=CATEGORY,
            severity=FindingSeverity.WARNING,
            title="No test directory or test files found",
            description=(
                "No test directory (test/, tests/, __tests__/, spec/) or test files "
                "(.test.*, .spec.*) were found."
            ),
            suggestion="Add a test directory and start writing unit tests for critical functionality.",
        ))

    deep_paths = [p for p in paths if len(p.split("/")) > MAX_NESTING_DEPTH]
    if deep_paths:
        findings.append(AnalysisFinding(
            id="ps-deep-nesting",
            category=CATEGORY,
            severity=FindingSeverity.INFO,
            title="Deeply nested directory structure",
            description=(
                f"{len(deep_paths)} file(s) are nested more than {MAX_NESTING_DEPTH} levels "
                "deep, which can make navigation difficult."
            ),
            file_path=deep_paths[0],
            suggestion="Consider flattening the directory structure to reduce nesting complexity.",
        ))

    root_files = [entry for entry in data.blobs if "/" not in entry.path]
    if len(root_files) > MAX_ROOT_FILES:
        findings.append(AnalysisFinding(
            id="ps-too-many-root-files",
            category=CATEGORY,
            severity=FindingSeverity.INFO,
            title="Too many files in root directory",
            description=(
                f"Found {len(root_files)} files in the root directory. This can make "
                "the project harder to navigate."
            ),
            suggestion="Move configuration and utility files into appropriate subdirectories.",
        ))

    return findings
