"""Index store: the ordered list of tracked file paths."""

from pathlib import Path
from typing import Optional, Union
import logging

from .context import RepoContext
from .core import TrackedFiles
from .errors import NotFoundError

logger = logging.getLogger(__name__)


class IndexStore:
    """Reads and appends to vcs/index.txt."""

    def __init__(self, ctx: Optional[RepoContext] = None):
        self.ctx = ctx or RepoContext()

    @property
    def path(self) -> Path:
        return self.ctx.index_path

    def exists(self) -> bool:
        """Check whether any file has ever been tracked."""
        return self.path.exists()

    def list_tracked(self) -> TrackedFiles:
        """Load tracked files in tracking order."""
        if not self.path.exists():
            return TrackedFiles()

        with self.path.open() as f:
            lines = [line.rstrip("\n") for line in f]
        return TrackedFiles(files=[line for line in lines if line.strip()])

    def track(self, path: Union[str, Path]) -> str:
        """Append a path to the index.

        Paths are stored as given and resolved against the repository root.
        Already tracked paths are appended again.

        Raises:
            NotFoundError: If the path is not an existing regular file; the
                index is untouched.
        """
        path_str = str(path)
        if not path_str or not self.ctx.absolute(path_str).is_file():
            raise NotFoundError(path_str)

        needs_separator = self.path.exists() and self.path.stat().st_size > 0
        with self.path.open("a") as f:
            f.write(f"\n{path_str}" if needs_separator else path_str)

        logger.debug("Tracked %s", path_str)
        return path_str
