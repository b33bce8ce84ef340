"""README, LICENSE and supporting documentation checks."""

from ..constants import DOCS_MIN_REPO_FILES
from ..models import AnalysisFinding, AnalysisInput, FindingCategory, FindingSeverity

CATEGORY = FindingCategory.DOCUMENTATION

README_NAMES = frozenset({"readme.md", "readme", "readme.txt", "readme.rst"})
LICENSE_NAMES = frozenset({
    "license",
    "license.md",
    "license.txt",
    "licence",
    "licence.md",
    "copying",
})
CONTRIBUTING_NAMES = frozenset({"contributing.md", "contributing"})
CHANGELOG_NAMES = frozenset({"changelog.md", "changelog", "changes.md", "history.md"})
DOCS_PREFIXES = ("docs/", "doc/")


def check_documentation(data: AnalysisInput) -> list[AnalysisFinding]:
    findings: list[AnalysisFinding] = []
    paths = data.paths
    lowered = {p.lower() for p in paths}

    if not lowered & README_NAMES:
        findings.append(AnalysisFinding(
            id="doc-no-readme",
            category=CATEGORY,
            severity=FindingSeverity.WARNING,
            title="No README file",
            description=(
                "The project is missing a README file. A README is essential for "
                "project documentation."
            ),
            suggestion="Add a README.md with project description, setup instructions, and usage examples.",
        ))

    if not lowered & LICENSE_NAMES:
        findings.append(AnalysisFinding(
            id="doc-no-license",
            category=CATEGORY,
            severity=FindingSeverity.INFO,
            title="No LICENSE file",
            description=(
                "The project does not include a LICENSE file. Without a license, the "
                "code is under default copyright."
            ),
            suggestion="Add an appropriate open source license (MIT, Apache-2.0, etc.) or a proprietary license.",
        ))

    # Small repositories are not expected to carry extra documentation
    if len(data.blobs) <= DOCS_MIN_REPO_FILES:
        return findings

    has_docs_dir = any(p.startswith(DOCS_PREFIXES) for p in paths)
    has_contributing = bool(lowered & CONTRIBUTING_NAMES)
    has_changelog = bool(lowered & CHANGELOG_NAMES)

    if not (has_docs_dir or has_contributing or has_changelog):
        findings.append(AnalysisFinding(
            id="doc-minimal",
            category=CATEGORY,
            severity=FindingSeverity.INFO,
            title="Minimal documentation",
            description=(
                "The project has no docs/ directory, CONTRIBUTING guide, or CHANGELOG. "
                "For a project of this size, more documentation would help contributors."
            ),
            suggestion="Consider adding a docs/ directory with guides, a CONTRIBUTING.md, and a CHANGELOG.md.",
        ))

    return findings
