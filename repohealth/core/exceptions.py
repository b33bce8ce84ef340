"""Custom exception hierarchy for repohealth.

Setup failures (URL parsing, repository metadata, tree) surface to the
caller as one of these types. Single-file fetch failures are raised as
``FileFetchError`` and isolated by the key-file fetcher.
"""


class RepoHealthError(Exception):
    """Base exception for all repohealth errors.

    Callers can catch every repohealth-specific failure with a single
    except clause when they do not need to tell the cases apart.
    """
    pass


# =============================================================================
# Validation Errors
# =============================================================================

class ValidationError(RepoHealthError):
    """Base exception for input validation errors."""
    pass


class InvalidUrlFormatError(ValidationError):
    """The string does not contain a recognizable github.com/owner/repo path."""

    def __init__(self, url: str, message: str = "Invalid GitHub URL format"):
        super().__init__(message)
        self.url = url


# =============================================================================
# Client Errors (API/Network)
# =============================================================================

class ClientError(RepoHealthError):
    """Base exception for source provider errors."""
    pass


class RepoNotFoundError(ClientError):
    """The provider returned 404 for the repository resource."""

    def __init__(self, owner: str, repo: str):
        super().__init__(f"Repository not found: {owner}/{repo}")
        self.owner = owner
        self.repo = repo


class ProviderError(ClientError):
    """Non-2xx response (or transport failure) from the provider API."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: str | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


class RateLimitError(ProviderError):
    """Provider rate limit exhausted."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        reset_at: int | None = None,
    ):
        super().__init__(message, status_code=status_code)
        self.reset_at = reset_at


class FileFetchError(ClientError):
    """A single file's content could not be fetched or decoded."""

    def __init__(self, path: str, status_code: int | None = None, reason: str | None = None):
        message = f"Failed to fetch file: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.path = path
        self.status_code = status_code
