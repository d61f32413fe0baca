"""Output strategy base class defining the interface for rendering tree views.

This module provides the abstract base class that defines how a TreeView is turned into
output, together with the optional breadcrumb trail and last-commit information.
"""

from abc import ABC, abstractmethod
from typing import Iterator, Optional

from treeish.repository.commit_info import CommitInfo
from treeish.tree_view.tree_entry import TreeEntry
from treeish.tree_view.tree_view import TreeView


class OutputStrategy(ABC):
    """Abstract base class defining the interface for tree view output formatting strategies.

    This class implements the Strategy pattern for rendering a view in different formats
    (e.g., a ``tree``-like text listing, JSON). Output is produced as a stream of chunks
    so that callers can write it incrementally.

    Example:
        >>> class NamesStrategy(OutputStrategy):
        ...     def stream_view(self, view, show_sizes=False, include_breadcrumb=False, last_commit=None):
        ...         for entry in view:
        ...             yield entry.name + "\\n"
        ...
        ...     def get_file_extension(self) -> str:
        ...         return ".txt"
        >>> "".join(NamesStrategy().stream_view(TreeView()))
        ''
    """

    @abstractmethod
    def stream_view(
        self,
        view: TreeView,
        show_sizes: bool = False,
        include_breadcrumb: bool = False,
        last_commit: Optional[CommitInfo] = None,
    ) -> Iterator[str]:
        """Render a view.

        Args:
            view: The view to render.
            show_sizes: Whether to include blob sizes.
            include_breadcrumb: Whether to include the breadcrumb trail of the view.
            last_commit: The last commit touching the view's path, if it should be shown.

        Yields:
            Chunks of output, each ending in a newline.
        """
        pass

    @abstractmethod
    def get_file_extension(self) -> str:
        """Get the appropriate file extension for this output format.

        Returns:
            The file extension including the leading dot (e.g., ".txt", ".json").
        """
        pass

    @staticmethod
    def view_label(view: TreeView) -> str:
        """Label identifying the inspected path, e.g. "HEAD:src/main.go" or "main:" for a root."""
        if view.subject is None:
            return f"{view.ref}:"
        return f"{view.ref}:{view.subject.full_path}"

    @staticmethod
    def crumb_label(label: object) -> str:
        if isinstance(label, TreeEntry):
            return label.name
        return str(label)
