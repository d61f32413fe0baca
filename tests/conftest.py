"""Test configuration and fixtures for treeish."""

from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

import pytest

from treeish.repository.base_repository import BaseRepository
from treeish.repository.commit_info import Author, CommitInfo
from treeish.tree_view.tree_entry import TreeEntry
from treeish.types import EntryKind

MODES = {"tree": "040000", "blob": "100644", "commit": "160000"}


def make_sha(seed: str) -> str:
    """Build a 40-character object id from a short hex seed."""
    return (seed * 40)[:40]


def make_line(kind: str, sha: str, path: str, size: Optional[int] = None, mode: Optional[str] = None) -> str:
    """Format one line the way ``git ls-tree -l`` prints it."""
    size_field = "-" if size is None else str(size)
    return f"{mode or MODES[kind]} {kind} {sha} {size_field:>7}\t{path}"


class FakeRepository(BaseRepository):
    """In-memory repository returning canned listings, contents and history."""

    def __init__(self) -> None:
        self.listings: Dict[Tuple[str, str], List[str]] = {}
        self.objects: Dict[str, bytes] = {}
        self.history: Dict[str, List[CommitInfo]] = {}
        self.commits: Dict[str, CommitInfo] = {}
        self.calls: List[Tuple[str, ...]] = []

    def ls_tree(self, ref: str, subject: Optional[TreeEntry] = None) -> List[str]:
        path = subject.full_path if subject is not None else ""
        self.calls.append(("ls_tree", ref, path))
        return list(self.listings.get((ref, path), []))

    def cat_file(self, sha: str) -> bytes:
        self.calls.append(("cat_file", sha))
        return self.objects[sha]

    def log_path(self, ref: str, path: str, max_count: Optional[int] = None) -> List[CommitInfo]:
        self.calls.append(("log_path", ref, path))
        commits = self.history.get(path, [])
        return commits[:max_count] if max_count is not None else commits

    def get_commit(self, ref: str) -> CommitInfo:
        self.calls.append(("get_commit", ref))
        return self.commits[ref]


@pytest.fixture
def line():
    """Factory for ``git ls-tree -l`` output lines."""
    return make_line


@pytest.fixture
def sha():
    """Factory for 40-character object ids."""
    return make_sha


@pytest.fixture
def fake_repository():
    return FakeRepository()


@pytest.fixture
def commit():
    """A sample commit."""
    return CommitInfo(
        sha=make_sha("9f"),
        message="Add main entry point\n\nWires the CLI into the server.",
        author=Author("Ada Lovelace", "ada@example.com"),
        authored_at=datetime(2024, 3, 1, 12, 30, tzinfo=timezone.utc),
    )


@pytest.fixture
def src_tree():
    """Entry for a top-level ``src`` directory."""
    return TreeEntry("040000", EntryKind.TREE, make_sha("b"), None, "src", "")
