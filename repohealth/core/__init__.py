"""Core utilities for configuration, logging and errors."""

from .config import AnalyzerConfig
from .exceptions import (
    ClientError,
    FileFetchError,
    InvalidUrlFormatError,
    ProviderError,
    RateLimitError,
    RepoHealthError,
    RepoNotFoundError,
    ValidationError,
)
from .logging_config import AnalysisLogFormatter, configure_logging, get_logger

__all__ = [
    # Config
    "AnalyzerConfig",
    # Logging
    "AnalysisLogFormatter",
    "configure_logging",
    "get_logger",
    # Exceptions
    "RepoHealthError",
    "ValidationError",
    "InvalidUrlFormatError",
    "ClientError",
    "RepoNotFoundError",
    "ProviderError",
    "RateLimitError",
    "FileFetchError",
]
