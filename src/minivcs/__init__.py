"""minivcs - minimal local version control."""

from .constants import VCS_VERSION as __version__
from .checkout import checkout
from .commit_store import CommitStore
from .context import RepoContext
from .history import HistoryLog
from .index import IndexStore
from .ops import commit, load_username, save_username

__all__ = [
    "__version__",
    "CommitStore",
    "HistoryLog",
    "IndexStore",
    "RepoContext",
    "checkout",
    "commit",
    "load_username",
    "save_username",
]
