"""History log: append-only record of commits in vcs/log.txt.

Each line is ``commit_id/author/message``. The message is the last field,
so a ``/`` inside it cannot be told apart from a separator: such lines keep
their first three fields and the message is cut at the embedded separator.
Entries are one line each, so multi-line messages are refused.
"""

from pathlib import Path
from typing import List, Optional
import logging

from .constants import LOG_FIELD_SEPARATOR
from .context import RepoContext
from .core import LogEntry
from .errors import InvalidMessageError, LogFormatError

logger = logging.getLogger(__name__)


def parse_log_line(line: str) -> LogEntry:
    """Parse one persisted log line.

    Raises:
        LogFormatError: If the line has fewer than three fields
    """
    fields = line.split(LOG_FIELD_SEPARATOR)
    if len(fields) < 3:
        raise LogFormatError(line)
    if len(fields) > 3:
        logger.warning(
            "Log line has %d fields, keeping the first three: %r", len(fields), line
        )
    commit_id, author, message = fields[:3]
    return LogEntry(commit_id=commit_id, author=author, message=message)


class HistoryLog:
    """Reads and appends commit entries, oldest first."""

    def __init__(self, ctx: Optional[RepoContext] = None):
        self.ctx = ctx or RepoContext()

    @property
    def path(self) -> Path:
        return self.ctx.log_path

    def append(self, commit_id: str, author: str, message: str) -> LogEntry:
        """Append one entry to the end of the log."""
        if "\n" in message or "\r" in message:
            raise InvalidMessageError()
        entry = LogEntry(commit_id=commit_id, author=author, message=message)
        has_entries = self.path.exists() and self.path.stat().st_size > 0
        with self.path.open("a") as f:
            f.write(f"\n{entry.to_line()}" if has_entries else entry.to_line())
        logger.debug("Logged commit %s by %s", commit_id[:12], author)
        return entry

    def read_all(self) -> List[LogEntry]:
        """Read every entry, oldest first."""
        if not self.path.exists():
            return []
        with self.path.open() as f:
            return [parse_log_line(line.rstrip("\n")) for line in f if line.strip()]
