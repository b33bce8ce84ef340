"""Committed secret and credential file checks."""

from ..constants import MAX_LISTED_SECRET_FILES
from ..models import AnalysisFinding, AnalysisInput, FindingCategory, FindingSeverity

CATEGORY = FindingCategory.SECURITY

ENV_TEMPLATE_SUFFIXES = (".example", ".sample", ".template")

# Matched against the basename, either exactly or as a suffix
SECRET_FILE_PATTERNS = (
    "credentials.json",
    "service-account.json",
    "gcp-key.json",
    ".pem",
    ".key",
    ".p12",
    ".pfx",
    "id_rsa",
    "id_ed25519",
    "id_ecdsa",
)


def is_env_file(path: str) -> bool:
    return path.startswith(".env") and not path.endswith(ENV_TEMPLATE_SUFFIXES)


def is_secret_file(path: str) -> bool:
    filename = path.rsplit("/", 1)[-1]
    return filename.endswith(SECRET_FILE_PATTERNS)


def _summarize(paths: list[str], limit: int) -> str:
    listed = ", ".join(paths[:limit])
    if len(paths) > limit:
        listed += f" and {len(paths) - limit} more"
    return listed


def check_security(data: AnalysisInput) -> list[AnalysisFinding]:
    findings: list[AnalysisFinding] = []
    paths = data.paths

    env_files = [p for p in paths if is_env_file(p)]
    if env_files:
        findings.append(AnalysisFinding(
            id="sec-env-exposed",
            category=CATEGORY,
            severity=FindingSeverity.CRITICAL,
            title="Environment files committed to repository",
            description=(
                f"Found committed environment files: {', '.join(env_files)}. "
                "These may contain secrets."
            ),
            file_path=env_files[0],
            suggestion=(
                "Remove .env files from the repository and add them to .gitignore. "
                "Use .env.example for templates."
            ),
        ))

    secret_files = [p for p in paths if is_secret_file(p)]
    if secret_files:
        findings.append(AnalysisFinding(
            id="sec-secret-files",
            category=CATEGORY,
            severity=FindingSeverity.CRITICAL,
            title="Potential secret files in repository",
            description=(
                "Found files that may contain secrets: "
                f"{_summarize(secret_files, MAX_LISTED_SECRET_FILES)}."
            ),
            file_path=secret_files[0],
            suggestion=(
                "Remove secret files from the repository, rotate compromised credentials, "
                "and add patterns to .gitignore."
            ),
        ))

    return findings
