"""Tooling configuration checks."""

from ..models import AnalysisFinding, AnalysisInput, FindingCategory, FindingSeverity
from .utils import MANIFEST_PATH

CATEGORY = FindingCategory.CONFIG_QUALITY

TSCONFIG_PATH = "tsconfig.json"

LINT_CONFIG_FILES = frozenset({
    ".eslintrc",
    ".eslintrc.js",
    ".eslintrc.json",
    ".eslintrc.yml",
    ".eslintrc.yaml",
    ".eslintrc.cjs",
    "eslint.config.js",
    "eslint.config.mjs",
    "eslint.config.ts",
    ".biome.json",
    "biome.json",
    ".oxlintrc.json",
})

FORMATTER_CONFIG_FILES = frozenset({
    ".prettierrc",
    ".prettierrc.js",
    ".prettierrc.json",
    ".prettierrc.yml",
    ".prettierrc.yaml",
    ".prettierrc.cjs",
    "prettier.config.js",
    "prettier.config.mjs",
    ".biome.json",
    "biome.json",
    ".editorconfig",
})


def strict_mode_enabled(tsconfig: str) -> bool:
    # Raw text search so that tsconfig files with comments still work
    return '"strict"' in tsconfig and "true" in tsconfig


def check_config_quality(data: AnalysisInput) -> list[AnalysisFinding]:
    findings: list[AnalysisFinding] = []
    paths = set(data.paths)

    if ".gitignore" not in paths:
        findings.append(AnalysisFinding(
            id="cfg-no-gitignore",
            category=CATEGORY,
            severity=FindingSeverity.WARNING,
            title="No .gitignore file",
            description=(
                "The project is missing a .gitignore file. This may lead to committing "
                "unwanted files."
            ),
            suggestion="Add a .gitignore file appropriate for your project type.",
        ))

    tsconfig = data.file_contents.get(TSCONFIG_PATH)
    if tsconfig and not strict_mode_enabled(tsconfig):
        findings.append(AnalysisFinding(
            id="cfg-no-strict",
            category=CATEGORY,
            severity=FindingSeverity.WARNING,
            title="TypeScript strict mode not enabled",
            description=(
                'The tsconfig.json does not have "strict": true. Strict mode catches '
                "more potential errors."
            ),
            file_path=TSCONFIG_PATH,
            suggestion='Enable "strict": true in tsconfig.json compilerOptions.',
        ))

    if not paths & LINT_CONFIG_FILES:
        manifest = data.file_contents.get(MANIFEST_PATH) or ""
        if '"eslintConfig"' not in manifest:
            findings.append(AnalysisFinding(
                id="cfg-no-linter",
                category=CATEGORY,
                severity=FindingSeverity.INFO,
                title="No linter configuration found",
                description="No ESLint, Biome, or OxLint configuration file was detected.",
                suggestion="Add a linter to enforce code quality standards.",
            ))

    if not paths & FORMATTER_CONFIG_FILES:
        findings.append(AnalysisFinding(
            id="cfg-no-formatter",
            category=CATEGORY,
            severity=FindingSeverity.INFO,
            title="No code formatter configuration",
            description="No Prettier, Biome, or EditorConfig file was found.",
            suggestion="Add a code formatter for consistent code style across the team.",
        ))

    return findings
