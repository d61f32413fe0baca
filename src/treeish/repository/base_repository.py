from abc import ABC, abstractmethod
from typing import List, Optional

from treeish.repository.commit_info import CommitInfo
from treeish.tree_view.tree_entry import TreeEntry


class BaseRepository(ABC):
    """
    Abstract base class defining the capabilities a TreeView needs from a repository.

    A view is a pure transformation of listing lines. Everything that touches a real
    repository (running ``ls-tree``, reading object content, walking history) is
    delegated to an implementation of this interface, which callers hand to the view
    explicitly. Tests can substitute an in-memory implementation.

    Example:
        >>> class StaticRepository(BaseRepository):
        ...     def ls_tree(self, ref, subject=None):
        ...         return ["100644 blob " + "a" * 40 + "       5\\tREADME.md"]
        ...     def cat_file(self, sha):
        ...         return b"hello"
        ...     def log_path(self, ref, path, max_count=None):
        ...         return []
        ...     def get_commit(self, ref):
        ...         raise NotImplementedError
        >>> from treeish.tree_view import TreeView
        >>> [entry.name for entry in TreeView.from_repository(StaticRepository())]
        ['README.md']
    """

    @abstractmethod
    def ls_tree(self, ref: str, subject: Optional[TreeEntry] = None) -> List[str]:
        """
        List a path of the tree named by ref, in ``git ls-tree -l`` format.

        Args:
            ref (str): The tree-ish to list.
            subject (Optional[TreeEntry]): The path to list. None lists the top level of
                the tree; a tree entry lists its direct children; any other entry yields
                the single line describing that entry.

        Returns:
            List[str]: The output lines, without trailing newlines.

        Raises:
            GitCommandError: If the listing cannot be produced.
        """
        pass

    @abstractmethod
    def cat_file(self, sha: str) -> bytes:
        """
        Read the raw content of an object.

        Args:
            sha (str): The object id.

        Returns:
            bytes: The object content, unmodified.

        Raises:
            GitCommandError: If the object cannot be read.
        """
        pass

    @abstractmethod
    def log_path(self, ref: str, path: str, max_count: Optional[int] = None) -> List[CommitInfo]:
        """
        List the commits reachable from ref that modify path, newest first.

        Args:
            ref (str): Where to start walking history.
            path (str): The path to follow.
            max_count (Optional[int]): Stop after this many commits. None means no limit.

        Returns:
            List[CommitInfo]: The matching commits, possibly empty.

        Raises:
            GitCommandError: If history cannot be read.
        """
        pass

    @abstractmethod
    def get_commit(self, ref: str) -> CommitInfo:
        """
        Resolve a ref to the commit it points at.

        Raises:
            GitCommandError: If ref does not name a commit.
        """
        pass
