"""Tests for the commit store."""

import os
import stat

import pytest

from minivcs.commit_store import CommitStore
from minivcs.core import TrackedFiles
from minivcs.errors import CommitExistsError, CommitNotFoundError, MissingFileError
from minivcs.hashing import hash_text


class TestCreateCommit:
    """Test snapshot creation."""

    def test_first_commit_id_is_hash_of_one(self, repo, make_tracked):
        tracked = make_tracked(**{"a.txt": "X"})
        store = CommitStore(repo)

        commit = store.create_commit(tracked, "Alice", "m1")

        assert commit.commit_id == hash_text("1")
        assert commit.author == "Alice"
        assert commit.message == "m1"
        assert (repo.commits_dir / commit.commit_id / "a.txt").read_text() == "X"

    def test_sequential_commits_get_distinct_ids(self, repo, make_tracked):
        tracked = make_tracked(**{"a.txt": "X"})
        store = CommitStore(repo)

        first = store.create_commit(tracked, "Alice", "m1")
        second = store.create_commit(tracked, "Alice", "m2")

        assert first.commit_id != second.commit_id
        assert second.commit_id == hash_text("2")
        assert store.count() == 2

    def test_stored_copies_are_read_only(self, repo, make_tracked):
        tracked = make_tracked(**{"a.txt": "X"})

        commit = CommitStore(repo).create_commit(tracked, "Alice", "m1")

        mode = stat.S_IMODE(commit.snapshot["a.txt"].stat().st_mode)
        assert mode == 0o444

    def test_nested_file_stored_flat_by_name(self, repo, make_tracked):
        tracked = make_tracked(**{"src/model.py": "code"})

        commit = CommitStore(repo).create_commit(tracked, "Alice", "m1")

        assert list(commit.snapshot) == ["model.py"]
        assert (repo.commits_dir / commit.commit_id / "model.py").read_text() == "code"

    def test_duplicate_names_store_first(self, repo, write_file):
        write_file("one/data.csv", "first")
        write_file("two/data.csv", "second")
        tracked = TrackedFiles(files=["one/data.csv", "two/data.csv", "one/data.csv"])

        commit = CommitStore(repo).create_commit(tracked, "Alice", "m1")

        assert commit.snapshot["data.csv"].read_text() == "first"

    def test_zero_tracked_files_creates_empty_commit(self, repo):
        commit = CommitStore(repo).create_commit(TrackedFiles(), "Alice", "empty")

        assert commit.snapshot == {}
        assert (repo.commits_dir / commit.commit_id).is_dir()

    def test_missing_tracked_file_fails(self, repo, make_tracked, tmp_path):
        tracked = make_tracked(**{"a.txt": "X", "b.txt": "Y"})
        (tmp_path / "b.txt").unlink()

        with pytest.raises(MissingFileError) as exc_info:
            CommitStore(repo).create_commit(tracked, "Alice", "m1")

        assert exc_info.value.path == "b.txt"

    def test_missing_file_does_not_touch_earlier_commits(self, repo, make_tracked, tmp_path):
        tracked = make_tracked(**{"a.txt": "X"})
        store = CommitStore(repo)
        first = store.create_commit(tracked, "Alice", "m1")

        (tmp_path / "a.txt").unlink()
        with pytest.raises(MissingFileError):
            store.create_commit(tracked, "Alice", "m2")

        assert first.snapshot["a.txt"].read_text() == "X"

    def test_refuses_to_reuse_existing_directory(self, repo, make_tracked):
        tracked = make_tracked(**{"a.txt": "X"})
        store = CommitStore(repo)
        store.create_commit(tracked, "Alice", "m1")
        second = store.create_commit(tracked, "Alice", "m2")

        # Removing commit 1 shrinks the count so commit 2's id comes up again
        first_dir = repo.commits_dir / hash_text("1")
        for item in first_dir.iterdir():
            item.unlink()
        first_dir.rmdir()

        with pytest.raises(CommitExistsError) as exc_info:
            store.create_commit(tracked, "Alice", "m3")

        assert exc_info.value.commit_id == second.commit_id
        assert second.snapshot["a.txt"].read_text() == "X"


class TestLatestSnapshot:
    """Test lookup of the most recent commit."""

    def test_empty_without_commits(self, repo):
        snapshot = CommitStore(repo).latest_snapshot()

        assert snapshot.is_empty
        assert snapshot.commit_id is None

    def test_latest_is_most_recent_commit(self, repo, make_tracked, tmp_path):
        tracked = make_tracked(**{"a.txt": "X"})
        store = CommitStore(repo)
        store.create_commit(tracked, "Alice", "m1")
        (tmp_path / "a.txt").write_text("Y")
        second = store.create_commit(tracked, "Alice", "m2")

        snapshot = store.latest_snapshot()

        assert snapshot.commit_id == second.commit_id
        assert snapshot.files["a.txt"].read_text() == "Y"

    def test_equal_mtimes_fall_back_to_sequence(self, repo, make_tracked):
        tracked = make_tracked(**{"a.txt": "X"})
        store = CommitStore(repo)
        first = store.create_commit(tracked, "Alice", "m1")
        second = store.create_commit(tracked, "Alice", "m2")

        stamp = 1_700_000_000
        os.utime(repo.commits_dir / first.commit_id, (stamp, stamp))
        os.utime(repo.commits_dir / second.commit_id, (stamp, stamp))

        assert store.latest_commit_dir().name == second.commit_id

    def test_modification_time_takes_precedence(self, repo, make_tracked):
        tracked = make_tracked(**{"a.txt": "X"})
        store = CommitStore(repo)
        first = store.create_commit(tracked, "Alice", "m1")
        second = store.create_commit(tracked, "Alice", "m2")

        os.utime(repo.commits_dir / first.commit_id, (2_000_000_000, 2_000_000_000))
        os.utime(repo.commits_dir / second.commit_id, (1_000_000_000, 1_000_000_000))

        assert store.latest_commit_dir().name == first.commit_id


class TestFindCommit:
    """Test lookup by identifier."""

    def test_find_existing(self, repo, make_tracked):
        tracked = make_tracked(**{"a.txt": "X"})
        store = CommitStore(repo)
        commit = store.create_commit(tracked, "Alice", "m1")

        assert store.find_commit(commit.commit_id) == repo.commits_dir / commit.commit_id

    def test_prefix_does_not_match(self, repo, make_tracked):
        tracked = make_tracked(**{"a.txt": "X"})
        store = CommitStore(repo)
        commit = store.create_commit(tracked, "Alice", "m1")

        with pytest.raises(CommitNotFoundError):
            store.find_commit(commit.commit_id[:12])

    def test_unknown_id(self, repo):
        with pytest.raises(CommitNotFoundError) as exc_info:
            CommitStore(repo).find_commit("deadbeef")

        assert exc_info.value.commit_id == "deadbeef"
