"""Single-level views of git trees.

This package parses the output of ``git ls-tree`` into ordered, one-directory
views of a versioned tree, with blob detection and breadcrumb navigation.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("treeish")
except PackageNotFoundError:
    __version__ = "unknown"
