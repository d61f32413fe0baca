"""Single-level views of git trees.

This module provides the entry parser for ``git ls-tree`` output and the TreeView
class built on top of it.
"""

from .entry_node import EntryNode
from .tree_entry import TreeEntry, parse_line
from .tree_view import Crumb, TreeView, build_view
from .view_state import ViewState

__all__ = [
    "Crumb",
    "EntryNode",
    "TreeEntry",
    "TreeView",
    "ViewState",
    "build_view",
    "parse_line",
]
