"""Shared helpers for rule modules."""

import json
from typing import Any

MANIFEST_PATH = "package.json"

JS_EXTENSIONS = (".js", ".jsx")
TS_EXTENSIONS = (".ts", ".tsx")
SOURCE_EXTENSIONS = JS_EXTENSIONS + TS_EXTENSIONS

CONFIG_SUFFIXES = (".config.js", ".config.mjs", ".config.cjs", ".config.ts")

TEST_DIRECTORIES = ("test", "tests", "__tests__", "spec")


def is_source_file(path: str) -> bool:
    return path.endswith(SOURCE_EXTENSIONS)


def is_config_file(path: str) -> bool:
    return path.endswith(CONFIG_SUFFIXES)


def is_vendored(path: str) -> bool:
    return "node_modules" in path


def has_test_directory(path: str) -> bool:
    """True when any directory segment of ``path`` is a conventional test dir."""
    return any(segment in TEST_DIRECTORIES for segment in path.split("/")[:-1])


def has_test_filename(path: str) -> bool:
    return ".test." in path or ".spec." in path


def load_manifest(file_contents: dict[str, str]) -> tuple[bool, dict[str, Any] | None]:
    """Parse the fetched package manifest.

    Returns:
        Tuple of (manifest was fetched, parsed object or None when it is not
        a valid JSON object)
    """
    content = file_contents.get(MANIFEST_PATH)
    if content is None:
        return False, None

    try:
        data = json.loads(content)
    except (ValueError, RecursionError):
        return True, None

    if not isinstance(data, dict):
        return True, None
    return True, data


def dependency_names(manifest: dict[str, Any], key: str) -> list[str]:
    group = manifest.get(key)
    if not isinstance(group, dict):
        return []
    return list(group)
