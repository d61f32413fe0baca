"""Commit metadata returned by repository history queries."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Author:
    """The author of a commit."""

    name: str
    email: str

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"


@dataclass(frozen=True)
class CommitInfo:
    """Metadata of a single commit.

    Attributes:
        sha (str): The commit's object id.
        message (str): The full commit message, without trailing whitespace.
        author (Author): Who wrote the change.
        authored_at (datetime): When the change was written, timezone-aware.
    """

    sha: str
    message: str
    author: Author
    authored_at: datetime

    @property
    def summary(self) -> str:
        """The first line of the commit message."""
        return self.message.split("\n", 1)[0]
