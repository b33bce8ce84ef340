"""Bounded fetching of root-level configuration and documentation files."""

import asyncio
import logging
from collections.abc import Sequence

from .clients.github_client import GitHubClient
from .constants import DEFAULT_MAX_CONCURRENCY, MAX_KEY_FILE_SIZE
from .models import TreeEntry

logger = logging.getLogger(__name__)

# Root-only allowlist; nested copies of these names are never fetched
KEY_FILES = (
    "package.json",
    "tsconfig.json",
    ".gitignore",
    ".eslintrc.json",
    ".eslintrc.js",
    "eslint.config.js",
    "eslint.config.mjs",
    ".prettierrc",
    ".prettierrc.json",
    "biome.json",
    ".biome.json",
    "README.md",
    "readme.md",
)


def select_key_files(
    tree: Sequence[TreeEntry], max_file_size: int = MAX_KEY_FILE_SIZE
) -> list[str]:
    """Return the allowlisted paths present in ``tree`` that are worth fetching.

    Entries whose reported size exceeds ``max_file_size`` are skipped; entries
    without a reported size are kept.
    """
    entries = {entry.path: entry for entry in tree if entry.is_blob}
    selected = []

    for path in KEY_FILES:
        entry = entries.get(path)
        if entry is None:
            continue
        if entry.size is not None and entry.size > max_file_size:
            logger.debug(
                f"Skipping {path}: {entry.size} bytes exceeds {max_file_size}",
                extra={"event": "key_file_skipped", "path": path},
            )
            continue
        selected.append(path)

    return selected


async def fetch_key_files(
    client: GitHubClient,
    owner: str,
    repo: str,
    tree: Sequence[TreeEntry],
    max_file_size: int = MAX_KEY_FILE_SIZE,
    max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
) -> dict[str, str]:
    """Fetch every selected key file concurrently.

    Each fetch is isolated: a failure drops that file from the result and
    never affects its siblings. The returned mapping holds only the files
    that were fetched successfully.
    """
    paths = select_key_files(tree, max_file_size)
    if not paths:
        return {}

    semaphore = asyncio.Semaphore(max_concurrency)

    async def fetch_one(path: str) -> str:
        async with semaphore:
            return await client.fetch_file_content(owner, repo, path)

    results = await asyncio.gather(*(fetch_one(path) for path in paths), return_exceptions=True)

    file_contents: dict[str, str] = {}
    for path, result in zip(paths, results):
        if isinstance(result, BaseException):
            if not isinstance(result, Exception):
                # Cancellation and interpreter exits are not per-file failures
                raise result
            logger.warning(
                f"Could not fetch key file {path}: {result}",
                extra={"event": "key_file_failed", "owner": owner, "repo": repo, "path": path, "error": str(result)},
            )
            continue
        file_contents[path] = result

    logger.debug(
        f"Fetched {len(file_contents)}/{len(paths)} key files for {owner}/{repo}",
        extra={"event": "key_files", "owner": owner, "repo": repo, "file_count": len(file_contents)},
    )
    return file_contents
