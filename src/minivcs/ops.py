"""Core operations for minivcs: identity and the commit pipeline."""

from pathlib import Path
from typing import Optional
import logging
import os
import tempfile

from .commit_store import CommitStore
from .config import VcsSettings, load_settings
from .context import RepoContext
from .core import Commit
from .diffing import has_changes
from .errors import (
    InvalidMessageError,
    MissingMessageError,
    NoIdentityConfigured,
    NothingToCommitError,
)
from .history import HistoryLog
from .index import IndexStore

logger = logging.getLogger(__name__)


# ============= Atomic Write Helpers =============

def _atomic_write_text(path: Path, text: str) -> None:
    """Atomically write text to file.

    Writes to a temp file in the same directory, fsyncs it, then renames it
    over the target so readers never see a half-written file.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    with tempfile.NamedTemporaryFile(
        mode="w",
        delete=False,
        dir=path.parent,
        prefix=f".{path.name}.tmp-",
        suffix=""
    ) as f:
        f.write(text)
        f.flush()
        os.fsync(f.fileno())
        tmp = Path(f.name)

    try:
        os.replace(tmp, path)
    except OSError:
        tmp.unlink(missing_ok=True)
        raise


# ============= Identity =============

def load_username(ctx: Optional[RepoContext] = None) -> Optional[str]:
    """Load the configured username, or None if not configured."""
    if ctx is None:
        ctx = RepoContext()

    if not ctx.config_path.exists():
        return None

    name = ctx.config_path.read_text().strip()
    return name or None


def save_username(username: str, ctx: Optional[RepoContext] = None) -> None:
    """Save the username atomically, replacing any previous one."""
    if ctx is None:
        ctx = RepoContext.init()

    _atomic_write_text(ctx.config_path, username)
    logger.debug("Username set to %s", username)


# ============= Commit Pipeline =============

def commit(
    message: Optional[str],
    author: Optional[str],
    ctx: Optional[RepoContext] = None,
    settings: Optional[VcsSettings] = None,
) -> Commit:
    """Snapshot tracked files into a new commit and log it.

    The first commit always succeeds. Later commits require at least one
    tracked file whose content differs from its copy in the latest commit.

    Args:
        message: Commit message (required, non-empty)
        author: Configured username, loaded by the caller
        ctx: Repository context (default: current directory)
        settings: Tool settings (default: loaded from vcs/settings.yaml)

    Returns:
        The created Commit

    Raises:
        MissingMessageError: If no message was given
        InvalidMessageError: If the message spans more than one line
        NoIdentityConfigured: If no author is configured
        NothingToCommitError: If nothing changed since the latest commit
        MissingFileError: If a tracked file was removed from disk
    """
    if not message:
        raise MissingMessageError()
    if "\n" in message or "\r" in message:
        raise InvalidMessageError()
    if not author:
        raise NoIdentityConfigured()

    if ctx is None:
        ctx = RepoContext()
    if settings is None:
        settings = load_settings(ctx.root)

    tracked = IndexStore(ctx).list_tracked()
    store = CommitStore(ctx)

    latest = store.latest_snapshot()
    if not latest.is_empty and not has_changes(
        latest, tracked, root=ctx.root, chunk_size=settings.hash_chunk_size
    ):
        raise NothingToCommitError()

    new_commit = store.create_commit(tracked, author, message)
    HistoryLog(ctx).append(new_commit.commit_id, author, message)
    logger.info("Committed %s (%d files)", new_commit.commit_id[:12], len(new_commit.snapshot))
    return new_commit
