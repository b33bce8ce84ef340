"""Constants and configuration values for repohealth.

This module centralizes the thresholds and limits used by the provider
client, the key-file fetcher and the rule modules.
"""

import os

# =============================================================================
# Provider API
# =============================================================================

GITHUB_API_URL = os.environ.get("GITHUB_API_URL", "https://api.github.com")
GITHUB_API_VERSION = "2022-11-28"

# Per-request timeout in seconds
DEFAULT_HTTP_TIMEOUT = float(os.environ.get("REPOHEALTH_HTTP_TIMEOUT", 30))


# =============================================================================
# Key-file fetching
# =============================================================================

# Files larger than this (as reported by the tree) are never fetched
MAX_KEY_FILE_SIZE = 100_000

# Upper bound on simultaneous content requests
DEFAULT_MAX_CONCURRENCY = int(os.environ.get("REPOHEALTH_MAX_CONCURRENCY", 8))


# =============================================================================
# Rule thresholds
# =============================================================================

MAX_NESTING_DEPTH = 7
MAX_ROOT_FILES = 15
MAX_PROD_DEPENDENCIES = 30
LARGE_FILE_BYTES = 15_000
MIN_SOURCE_FILES_PER_DIR = 3
MIXED_LANGUAGE_LOWER = 0.1
MIXED_LANGUAGE_UPPER = 0.9
DOCS_MIN_REPO_FILES = 20
TESTING_MIN_SOURCE_FILES = 10
MIN_TEST_RATIO = 0.1
MAX_LISTED_SECRET_FILES = 5


# =============================================================================
# Health score
# =============================================================================

CRITICAL_PENALTY = 15
WARNING_PENALTY = 8
INFO_PENALTY = 3
MAX_HEALTH_SCORE = 100
MIN_HEALTH_SCORE = 0
