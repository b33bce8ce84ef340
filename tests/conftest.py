"""Shared fixtures for the unit suite."""

import json

import pytest

from repohealth.models import AnalysisInput, RepoInfo, TreeEntry


@pytest.fixture
def repo_info():
    return RepoInfo(
        owner="test",
        repo="repo",
        default_branch="main",
        language="TypeScript",
        size=1000,
        created_at="2026-01-01T00:00:00Z",
        updated_at="2026-01-01T00:00:00Z",
    )


@pytest.fixture
def make_input(repo_info):
    """Factory for analysis inputs.

    ``tree`` accepts plain paths (treated as blobs) or dicts; ``files`` maps
    paths to contents, with dict/list values serialized as JSON.
    """

    def _make(tree=(), files=None):
        entries = []
        for item in tree:
            if isinstance(item, str):
                entries.append(TreeEntry(path=item, type="blob"))
            else:
                entries.append(TreeEntry(**item))

        contents = {}
        for path, value in (files or {}).items():
            contents[path] = value if isinstance(value, str) else json.dumps(value)

        return AnalysisInput(repo_info=repo_info, tree=tuple(entries), file_contents=contents)

    return _make
