"""Custom exceptions for minivcs.

Core operations raise these; the CLI catches them at the command boundary
and turns each one into a single human-readable line.
"""


class VcsError(RuntimeError):
    """Base class for all minivcs errors."""
    pass


# Index Errors
class NotFoundError(VcsError):
    """Path given to ``add`` does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Can't find '{path}'.")


# Commit Errors
class MissingFileError(VcsError):
    """A tracked file was removed from disk after it was tracked."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Can't find '{path}'.")


class MissingMessageError(VcsError):
    """``commit`` invoked without a message."""

    def __init__(self):
        super().__init__("Message was not passed.")


class InvalidMessageError(VcsError):
    """Commit message spans more than one line."""

    def __init__(self):
        super().__init__("Message must be a single line.")


class NothingToCommitError(VcsError):
    """No tracked file changed since the latest commit (soft condition)."""

    def __init__(self):
        super().__init__("Nothing to commit.")


class NoIdentityConfigured(VcsError):
    """No username has been configured yet (soft condition)."""

    def __init__(self):
        super().__init__("Please, tell me who you are.")


class CommitExistsError(VcsError):
    """Commit directory for a freshly allocated identifier already exists."""

    def __init__(self, commit_id: str):
        self.commit_id = commit_id
        super().__init__(
            f"Commit {commit_id} already exists. "
            f"Refusing to overwrite an existing snapshot."
        )


# Checkout Errors
class CommitNotFoundError(VcsError):
    """``checkout`` given an identifier with no commit directory."""

    def __init__(self, commit_id: str):
        self.commit_id = commit_id
        super().__init__("Commit does not exist.")


class MissingCommitIdError(VcsError):
    """``checkout`` invoked without an identifier."""

    def __init__(self):
        super().__init__("Commit id was not passed.")


# CLI Errors
class UnrecognizedCommandError(VcsError):
    """Unknown top-level command."""

    def __init__(self, command: str):
        self.command = command
        super().__init__(f"'{command}' is not a SVCS command.")


# Storage Errors
class LogFormatError(VcsError):
    """A history log line does not carry the three expected fields."""

    def __init__(self, line: str):
        self.line = line
        super().__init__(f"Malformed log entry: {line!r}")
