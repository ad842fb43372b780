"""Shared test fixtures and utilities."""

import pytest

from minivcs.context import RepoContext
from minivcs.index import IndexStore
from minivcs.ops import save_username


@pytest.fixture
def repo(tmp_path, monkeypatch):
    """Create an initialized repository in tmp_path and chdir into it."""
    monkeypatch.chdir(tmp_path)
    return RepoContext.init()


@pytest.fixture
def author(repo):
    """Configure a username for commits."""
    save_username("Alice", repo)
    return "Alice"


@pytest.fixture
def write_file(tmp_path):
    """Factory fixture to write files relative to tmp_path."""
    def _write(path: str, content: str = "test content"):
        file_path = tmp_path / path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content)
        return file_path
    return _write


@pytest.fixture
def make_tracked(repo, write_file):
    """Factory fixture to create files and add them to the index."""
    def _make_tracked(**files):
        index = IndexStore(repo)
        for name, content in files.items():
            write_file(name, content)
            index.track(name)
        return index.list_tracked()
    return _make_tracked
