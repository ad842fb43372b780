"""Core data models for minivcs.

History is a flat, append-only list: commits carry no parent pointers and
there are no branches. Each commit is identified by a hash of the commit
count at creation time, not of its content.
"""

from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .constants import LOG_FIELD_SEPARATOR


# ============= File Tracking =============

class TrackedFiles(BaseModel):
    """Tracked files list (stored in vcs/index.txt).

    Order is tracking order. Duplicates are kept; the index is append-only.
    """

    files: List[str] = Field(default_factory=list)

    def by_name(self) -> Dict[str, str]:
        """Map base file name to the first tracked path carrying it."""
        names: Dict[str, str] = {}
        for path_str in self.files:
            names.setdefault(Path(path_str).name, path_str)
        return names


# ============= Snapshots & Commits =============

class Snapshot(BaseModel):
    """Files physically stored in one commit directory."""

    commit_id: Optional[str] = None
    files: Dict[str, Path] = Field(default_factory=dict)  # name -> stored copy

    @property
    def is_empty(self) -> bool:
        return not self.files


class Commit(BaseModel):
    """An immutable commit: identifier, metadata and stored snapshot."""

    model_config = ConfigDict(frozen=True)

    commit_id: str
    author: str
    message: str
    snapshot: Dict[str, Path] = Field(default_factory=dict)


# ============= History =============

class LogEntry(BaseModel):
    """One line of vcs/log.txt."""

    model_config = ConfigDict(frozen=True)

    commit_id: str
    author: str
    message: str

    def to_line(self) -> str:
        """Serialize as ``commit_id/author/message``."""
        return LOG_FIELD_SEPARATOR.join((self.commit_id, self.author, self.message))
