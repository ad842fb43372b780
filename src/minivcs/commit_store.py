"""Commit store: immutable snapshots under vcs/commits/<commit_id>/.

Directory Structure:
    vcs/commits/<sha256 of commit number>/<file name>

Each commit directory holds flat copies of the tracked files, named by
their base name. Only ``create_commit`` writes here, and stored copies
are read-only (0o444).

The identifier of commit number ``n`` is ``hash_text(str(n))`` where ``n``
is the number of existing commit directories plus one. Identifiers are
unique only while that count grows.
"""

from pathlib import Path
from typing import Dict, List, Optional
import logging
import os
import shutil

from .context import RepoContext
from .core import Commit, Snapshot, TrackedFiles
from .errors import CommitExistsError, CommitNotFoundError, MissingFileError
from .hashing import hash_text

logger = logging.getLogger(__name__)

READ_ONLY = 0o444


class CommitStore:
    """Creates and looks up commit snapshots."""

    def __init__(self, ctx: Optional[RepoContext] = None):
        self.ctx = ctx or RepoContext()

    @property
    def commits_dir(self) -> Path:
        return self.ctx.commits_dir

    def commit_dirs(self) -> List[Path]:
        """All commit directories, sorted by name."""
        if not self.commits_dir.exists():
            return []
        return sorted(p for p in self.commits_dir.iterdir() if p.is_dir())

    def count(self) -> int:
        return len(self.commit_dirs())

    def next_commit_id(self) -> str:
        """Identifier the next commit will receive."""
        return hash_text(str(self.count() + 1))

    def _sequence_numbers(self, dirs: List[Path]) -> Dict[str, int]:
        """Recover creation order from identifiers (id of commit n -> n)."""
        return {hash_text(str(n)): n for n in range(1, len(dirs) + 1)}

    def latest_commit_dir(self) -> Optional[Path]:
        """Most recently created commit directory.

        Primary key is the directory modification time. Equal times (coarse
        clocks, fast successive commits) fall back to the sequence number
        encoded in the identifier.
        """
        dirs = self.commit_dirs()
        if not dirs:
            return None
        sequence = self._sequence_numbers(dirs)
        return max(dirs, key=lambda p: (p.stat().st_mtime_ns, sequence.get(p.name, 0)))

    def snapshot_of(self, commit_dir: Path) -> Snapshot:
        """List files physically stored in a commit directory."""
        files = {
            item.name: item.resolve()
            for item in sorted(commit_dir.iterdir())
            if item.is_file()
        }
        return Snapshot(commit_id=commit_dir.name, files=files)

    def latest_snapshot(self) -> Snapshot:
        """Snapshot of the most recent commit, empty if there are none."""
        latest = self.latest_commit_dir()
        if latest is None:
            return Snapshot()
        return self.snapshot_of(latest)

    def find_commit(self, commit_id: str) -> Path:
        """Find a commit directory by exact identifier.

        Raises:
            CommitNotFoundError: If no directory has that name
        """
        for commit_dir in self.commit_dirs():
            if commit_dir.name == commit_id:
                return commit_dir
        raise CommitNotFoundError(commit_id)

    def create_commit(self, tracked: TrackedFiles, author: str, message: str) -> Commit:
        """Copy every tracked file into a new commit directory.

        Files are stored under their base name; when several tracked paths
        share a name, the first in tracking order is stored.

        Raises:
            MissingFileError: If a tracked file no longer exists. The new
                directory may be left behind partially written.
            CommitExistsError: If the allocated identifier is already taken.
        """
        commit_id = self.next_commit_id()
        commit_dir = self.commits_dir / commit_id
        self.commits_dir.mkdir(parents=True, exist_ok=True)
        try:
            commit_dir.mkdir()
        except FileExistsError:
            raise CommitExistsError(commit_id)

        stored: Dict[str, Path] = {}
        for path_str in tracked.files:
            source = self.ctx.absolute(path_str)
            if not source.is_file():
                raise MissingFileError(path_str)

            name = source.name
            if name in stored:
                logger.debug("Skipping %s: %s already stored in this commit", path_str, name)
                continue

            dest = commit_dir / name
            shutil.copy2(source, dest)
            os.chmod(dest, READ_ONLY)
            stored[name] = dest.resolve()
            logger.debug("Stored %s -> %s", path_str, dest)

        logger.debug("Created commit %s with %d files", commit_id[:12], len(stored))
        return Commit(commit_id=commit_id, author=author, message=message, snapshot=stored)
