"""Checkout: restore working files from a commit snapshot.

Every file stored in the commit replaces the same-named file in the
repository root. Working files that are not part of the commit are left
untouched, so this is a partial restore rather than a reset.
"""

from pathlib import Path
from typing import List, Optional
import contextlib
import logging
import os
import shutil

from .commit_store import CommitStore
from .context import RepoContext
from .errors import MissingCommitIdError

logger = logging.getLogger(__name__)

WORKING_FILE_MODE = 0o644


def _materialize_copy(src: Path, dest: Path) -> None:
    """Copy a stored file over ``dest`` via temp file + rename.

    The destination either keeps its old content or receives the full new
    content. Permissions are reset because stored copies are read-only.
    """
    tmp = dest.with_name(f".{dest.name}.checkout")
    try:
        shutil.copy2(src, tmp)
        os.chmod(tmp, WORKING_FILE_MODE)
        os.replace(str(tmp), str(dest))
        logger.debug("Restored %s <- %s", dest, src)
    finally:
        with contextlib.suppress(OSError):
            tmp.unlink()


def checkout(commit_id: Optional[str], ctx: Optional[RepoContext] = None) -> List[Path]:
    """Restore working files from the commit with the given identifier.

    Returns:
        Paths of the restored working files

    Raises:
        MissingCommitIdError: If no identifier was given
        CommitNotFoundError: If no commit has that identifier; nothing is
            written in that case
    """
    if not commit_id:
        raise MissingCommitIdError()

    ctx = ctx or RepoContext()
    store = CommitStore(ctx)
    snapshot = store.snapshot_of(store.find_commit(commit_id))

    restored = []
    for name, stored_copy in snapshot.files.items():
        dest = ctx.root / name
        _materialize_copy(stored_copy, dest)
        restored.append(dest)

    logger.debug("Checked out %s (%d files)", commit_id[:12], len(restored))
    return restored
