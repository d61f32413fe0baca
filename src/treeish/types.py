from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class EntryKind(str, Enum):
    """Enumeration of git object kinds that can appear in a tree listing.

    The values are the exact tokens printed by ``git ls-tree``.

    Attributes:
        TREE: A directory
        BLOB: A file
        COMMIT: A submodule (an embedded repository pinned at a commit)
    """

    TREE = "tree"
    BLOB = "blob"
    COMMIT = "commit"
