"""Change detection between tracked files and the latest commit.

Comparison is whole-file, by SHA256 digest. Only files present in the
latest snapshot are examined:

- a committed file with no tracked counterpart is ignored (no deletion
  signal)
- a tracked file that is not in the snapshot does not count as a change
"""

from pathlib import Path
from typing import Optional
import logging

from .core import Snapshot, TrackedFiles
from .errors import MissingFileError
from .hashing import compute_file_digest

logger = logging.getLogger(__name__)


def has_changes(
    snapshot: Snapshot,
    tracked: TrackedFiles,
    root: Optional[Path] = None,
    chunk_size: int = 8192,
) -> bool:
    """Check whether any tracked file differs from its stored copy.

    Args:
        snapshot: Latest commit snapshot (file name -> stored copy)
        tracked: Currently tracked files
        root: Directory tracked paths are relative to (default: cwd)
        chunk_size: Read size used for digests

    Returns:
        True on the first matched pair whose digests differ

    Raises:
        MissingFileError: If a matched tracked file is gone from disk
    """
    root = root or Path.cwd()
    tracked_by_name = tracked.by_name()

    for name, committed in snapshot.files.items():
        path_str = tracked_by_name.get(name)
        if path_str is None:
            logger.debug("Committed file %s is no longer tracked, ignoring", name)
            continue

        current = root / path_str
        if not current.is_file():
            raise MissingFileError(path_str)

        if compute_file_digest(current, chunk_size) != compute_file_digest(committed, chunk_size):
            logger.debug("Detected change in %s", path_str)
            return True

    return False
