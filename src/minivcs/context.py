"""Repository context for managing paths and layout creation."""

from pathlib import Path
from typing import Optional, Union

from .constants import (
    COMMITS_DIR,
    CONFIG_FILE,
    INDEX_FILE,
    LOG_FILE,
    SETTINGS_FILE,
    VCS_DIR,
)


class RepoContext:
    """Resolves repository paths relative to a working directory.

    The repository lives in ``<root>/vcs``. Unlike tools that walk up the
    directory tree, the root is always the directory the tool is run from.
    """

    def __init__(self, root: Optional[Path] = None):
        self.root = Path(root or Path.cwd()).resolve()

    @classmethod
    def init(cls, path: Optional[Path] = None) -> "RepoContext":
        """Create the repository layout if absent and return the context.

        Creates vcs/, an empty vcs/log.txt and vcs/commits/. Existing
        content is never touched.
        """
        ctx = cls(path)
        ctx.storage_dir.mkdir(exist_ok=True)
        ctx.log_path.touch(exist_ok=True)
        ctx.commits_dir.mkdir(exist_ok=True)
        return ctx

    def absolute(self, path: Union[str, Path]) -> Path:
        """Get absolute path from a working-directory-relative path."""
        return self.root / path

    @property
    def storage_dir(self) -> Path:
        """Get the repository storage directory."""
        return self.root / VCS_DIR

    @property
    def config_path(self) -> Path:
        """Get path to the username file."""
        return self.storage_dir / CONFIG_FILE

    @property
    def index_path(self) -> Path:
        """Get path to tracked files list."""
        return self.storage_dir / INDEX_FILE

    @property
    def log_path(self) -> Path:
        """Get path to the history log."""
        return self.storage_dir / LOG_FILE

    @property
    def commits_dir(self) -> Path:
        """Get directory holding one sub-directory per commit."""
        return self.storage_dir / COMMITS_DIR

    @property
    def settings_path(self) -> Path:
        """Get path to optional settings file."""
        return self.storage_dir / SETTINGS_FILE
