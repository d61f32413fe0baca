"""View state enum distinguishing the three shapes a tree view can take."""

from enum import Enum


class ViewState(str, Enum):
    """The shape of a TreeView.

    Values:
        ROOT: The view lists the top level of the tree (it may be empty)
        DIRECTORY: The view lists the direct children of a path (it may be empty)
        BLOB: The inspected path is a single file; the view has no children
    """

    ROOT = "root"
    DIRECTORY = "directory"
    BLOB = "blob"
