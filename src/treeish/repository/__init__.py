"""Access to git repositories: listings, object content and history."""

from .base_repository import BaseRepository
from .commit_info import Author, CommitInfo
from .git_repository import GitRepository

__all__ = [
    "Author",
    "BaseRepository",
    "CommitInfo",
    "GitRepository",
]
