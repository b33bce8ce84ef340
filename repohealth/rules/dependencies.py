"""Dependency hygiene checks on the package manifest."""

from ..constants import MAX_PROD_DEPENDENCIES
from ..models import AnalysisFinding, AnalysisInput, FindingCategory, FindingSeverity
from .utils import MANIFEST_PATH, dependency_names, load_manifest

CATEGORY = FindingCategory.DEPENDENCIES

LOCKFILES = ("package-lock.json", "yarn.lock", "pnpm-lock.yaml", "bun.lockb")

# Substrings of package names that only belong in devDependencies
DEV_TOOL_MARKERS = (
    "eslint",
    "prettier",
    "jest",
    "vitest",
    "typescript",
    "@types/",
    "webpack",
    "rollup",
    "vite",
    "nodemon",
    "ts-node",
)


def check_dependencies(data: AnalysisInput) -> list[AnalysisFinding]:
    """Inspect lockfile presence and the parsed manifest.

    An unparsable manifest yields a single critical finding and skips every
    check that needs the parsed content.
    """
    findings: list[AnalysisFinding] = []
    paths = set(data.paths)

    if MANIFEST_PATH in paths and not paths.intersection(LOCKFILES):
        findings.append(AnalysisFinding(
            id="dep-no-lockfile",
            category=CATEGORY,
            severity=FindingSeverity.WARNING,
            title="No lockfile found",
            description=(
                "The project has a package.json but no lockfile "
                "(package-lock.json, yarn.lock, pnpm-lock.yaml, bun.lockb)."
            ),
            file_path=MANIFEST_PATH,
            suggestion=(
                "Run npm install, yarn install, or pnpm install to generate a lockfile "
                "for reproducible builds."
            ),
        ))

    fetched, manifest = load_manifest(data.file_contents)
    if not fetched:
        return findings

    if manifest is None:
        findings.append(AnalysisFinding(
            id="dep-invalid-pkg",
            category=CATEGORY,
            severity=FindingSeverity.CRITICAL,
            title="Invalid package.json",
            description="The package.json file contains invalid JSON and cannot be parsed.",
            file_path=MANIFEST_PATH,
            suggestion="Fix the JSON syntax errors in package.json.",
        ))
        return findings

    deps = dependency_names(manifest, "dependencies")

    dev_in_prod = [d for d in deps if any(marker in d for marker in DEV_TOOL_MARKERS)]
    if dev_in_prod:
        findings.append(AnalysisFinding(
            id="dep-dev-in-prod",
            category=CATEGORY,
            severity=FindingSeverity.WARNING,
            title="Dev dependencies in production",
            description=(
                "The following packages are likely development tools but are listed "
                f"in dependencies: {', '.join(dev_in_prod)}."
            ),
            file_path=MANIFEST_PATH,
            suggestion="Move these packages to devDependencies to reduce production bundle size.",
        ))

    if len(deps) > MAX_PROD_DEPENDENCIES:
        findings.append(AnalysisFinding(
            id="dep-too-many",
            category=CATEGORY,
            severity=FindingSeverity.INFO,
            title="Large number of dependencies",
            description=(
                f"The project has {len(deps)} production dependencies. This may increase "
                "bundle size and security surface."
            ),
            file_path=MANIFEST_PATH,
            suggestion="Review dependencies and remove unused ones. Consider using bundler tree-shaking.",
        ))

    scripts = manifest.get("scripts")
    if not isinstance(scripts, dict) or not scripts:
        findings.append(AnalysisFinding(
            id="dep-no-scripts",
            category=CATEGORY,
            severity=FindingSeverity.INFO,
            title="No npm scripts defined",
            description="No scripts are defined in package.json.",
            file_path=MANIFEST_PATH,
            suggestion='Add common scripts like "dev", "build", "test", and "lint" for standardized workflows.',
        ))

    return findings
