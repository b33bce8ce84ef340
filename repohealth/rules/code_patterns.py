"""Filename-level consistency checks on JS/TS sources."""

import re
from collections import defaultdict

from ..constants import (
    LARGE_FILE_BYTES,
    MIN_SOURCE_FILES_PER_DIR,
    MIXED_LANGUAGE_LOWER,
    MIXED_LANGUAGE_UPPER,
)
from ..models import AnalysisFinding, AnalysisInput, FindingCategory, FindingSeverity
from .utils import JS_EXTENSIONS, TS_EXTENSIONS, is_config_file, is_source_file, is_vendored

CATEGORY = FindingCategory.CODE_PATTERNS

_CAMEL_CASE = re.compile(r"[a-z][A-Z]")


def _counts_for_language(path: str) -> bool:
    return not (is_vendored(path) or is_config_file(path) or path.startswith("."))


def _is_kebab_case(filename: str) -> bool:
    return "-" in filename


def _is_camel_case(filename: str) -> bool:
    stem = filename.rsplit(".", 1)[0] if "." in filename else filename
    return bool(_CAMEL_CASE.search(stem))


def count_inconsistent_directories(paths: list[str]) -> int:
    """Count directories whose source files mix kebab-case and camelCase names."""
    by_directory: dict[str, list[str]] = defaultdict(list)
    for path in paths:
        directory, _, filename = path.rpartition("/")
        if directory and is_source_file(filename):
            by_directory[directory].append(filename)

    inconsistent = 0
    for filenames in by_directory.values():
        if len(filenames) < MIN_SOURCE_FILES_PER_DIR:
            continue
        if any(map(_is_kebab_case, filenames)) and any(map(_is_camel_case, filenames)):
            inconsistent += 1
    return inconsistent


def check_code_patterns(data: AnalysisInput) -> list[AnalysisFinding]:
    findings: list[AnalysisFinding] = []
    blobs = data.blobs

    js_count = sum(
        1 for e in blobs if e.path.endswith(JS_EXTENSIONS) and _counts_for_language(e.path)
    )
    ts_count = sum(
        1 for e in blobs if e.path.endswith(TS_EXTENSIONS) and _counts_for_language(e.path)
    )
    if js_count and ts_count:
        js_share = js_count / (js_count + ts_count)
        if MIXED_LANGUAGE_LOWER < js_share < MIXED_LANGUAGE_UPPER:
            findings.append(AnalysisFinding(
                id="cp-mixed-js-ts",
                category=CATEGORY,
                severity=FindingSeverity.WARNING,
                title="Mixed JavaScript and TypeScript files",
                description=(
                    f"Found {js_count} JS files and {ts_count} TS files. Mixing languages "
                    "increases maintenance complexity."
                ),
                suggestion="Consider migrating all files to TypeScript for consistent type safety.",
            ))

    large_files = [
        e for e in blobs
        if is_source_file(e.path) and e.size is not None and e.size > LARGE_FILE_BYTES
    ]
    if large_files:
        findings.append(AnalysisFinding(
            id="cp-large-files",
            category=CATEGORY,
            severity=FindingSeverity.INFO,
            title="Large source files detected",
            description=(
                f"{len(large_files)} file(s) exceed {LARGE_FILE_BYTES // 1000}KB, which may "
                "indicate they need to be split."
            ),
            file_path=large_files[0].path,
            suggestion=(
                "Break large files into smaller, focused modules for better readability "
                "and maintainability."
            ),
        ))

    inconsistent = count_inconsistent_directories([e.path for e in blobs])
    if inconsistent:
        findings.append(AnalysisFinding(
            id="cp-naming-inconsistent",
            category=CATEGORY,
            severity=FindingSeverity.INFO,
            title="Inconsistent file naming conventions",
            description=(
                f"{inconsistent} director(ies) have mixed naming conventions "
                "(kebab-case and camelCase)."
            ),
            suggestion="Adopt a consistent file naming convention across the project.",
        ))

    return findings
