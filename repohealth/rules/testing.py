"""Test framework, CI and test-volume checks."""

from ..constants import MIN_TEST_RATIO, TESTING_MIN_SOURCE_FILES
from ..models import AnalysisFinding, AnalysisInput, FindingCategory, FindingSeverity
from .utils import (
    MANIFEST_PATH,
    dependency_names,
    is_config_file,
    is_source_file,
    is_vendored,
    load_manifest,
)

CATEGORY = FindingCategory.TESTING

TEST_FRAMEWORKS = frozenset({
    "jest",
    "vitest",
    "mocha",
    "ava",
    "tape",
    "cypress",
    "playwright",
    "@playwright/test",
})

CI_FILES = frozenset({
    ".gitlab-ci.yml",
    ".circleci/config.yml",
    "Jenkinsfile",
    ".travis.yml",
    "azure-pipelines.yml",
})
CI_PREFIXES = (".github/workflows/",)

TEST_MARKERS = (".test.", ".spec.", "__tests__/", "/test/")


def is_test_file(path: str) -> bool:
    return any(marker in path for marker in TEST_MARKERS)


def _is_countable_source(path: str) -> bool:
    return (
        is_source_file(path)
        and not is_vendored(path)
        and not is_config_file(path)
        and not path.endswith(".d.ts")
    )


def check_testing(data: AnalysisInput) -> list[AnalysisFinding]:
    findings: list[AnalysisFinding] = []
    paths = data.paths

    # No manifest may simply mean "not a buildable package"
    fetched, manifest = load_manifest(data.file_contents)
    if fetched:
        declared: set[str] = set()
        if manifest is not None:
            declared.update(dependency_names(manifest, "dependencies"))
            declared.update(dependency_names(manifest, "devDependencies"))
        if not declared & TEST_FRAMEWORKS:
            findings.append(AnalysisFinding(
                id="test-no-framework",
                category=CATEGORY,
                severity=FindingSeverity.WARNING,
                title="No test framework detected",
                description="No testing framework (Jest, Vitest, Mocha, etc.) was found in dependencies.",
                file_path=MANIFEST_PATH,
                suggestion="Add a test framework like Vitest or Jest to enable automated testing.",
            ))

    has_ci = any(p in CI_FILES or p.startswith(CI_PREFIXES) for p in paths)
    if not has_ci:
        findings.append(AnalysisFinding(
            id="test-no-ci",
            category=CATEGORY,
            severity=FindingSeverity.INFO,
            title="No CI/CD configuration found",
            description="No continuous integration configuration was detected (GitHub Actions, GitLab CI, etc.).",
            suggestion="Add CI/CD configuration to automate testing and deployment.",
        ))

    sources = [e.path for e in data.blobs if _is_countable_source(e.path)]
    test_count = sum(1 for p in sources if is_test_file(p))
    source_count = len(sources) - test_count

    if source_count > TESTING_MIN_SOURCE_FILES:
        if test_count == 0:
            findings.append(AnalysisFinding(
                id="test-no-tests",
                category=CATEGORY,
                severity=FindingSeverity.WARNING,
                title="No test files found",
                description=f"Found {source_count} source files but no test files.",
                suggestion="Start adding tests for critical business logic and utilities.",
            ))
        else:
            ratio = test_count / source_count
            if ratio < MIN_TEST_RATIO:
                findings.append(AnalysisFinding(
                    id="test-low-ratio",
                    category=CATEGORY,
                    severity=FindingSeverity.INFO,
                    title="Low test coverage ratio",
                    description=(
                        f"Only {test_count} test files for {source_count} source files "
                        f"({ratio * 100:.1f}% ratio)."
                    ),
                    suggestion="Aim for better test coverage by adding tests for key modules.",
                ))

    return findings
