"""Single-level views of a git tree built from ``git ls-tree`` output.

This module provides the TreeView class, which turns a batch of listing lines into the
ordered direct children of one path of a tree, detects when that path is a single file,
and derives a breadcrumb trail for it.
"""

from collections.abc import MutableSequence
from typing import TYPE_CHECKING, Any, Iterable, List, NamedTuple, Optional, Set, Tuple, Union, overload

from treeish.exceptions import NoHistoryError, NotABlobError
from treeish.tree_view.entry_node import EntryNode
from treeish.tree_view.tree_entry import TreeEntry, parse_line
from treeish.tree_view.view_state import ViewState
from treeish.types import EntryKind

if TYPE_CHECKING:
    from treeish.exclusion_rules.base_rules import BaseExclusionRules
    from treeish.repository.base_repository import BaseRepository
    from treeish.repository.commit_info import Author, CommitInfo


class Crumb(NamedTuple):
    """One step of a breadcrumb trail.

    Attributes:
        path: Path from the root of the tree up to and including this step.
        label: The path segment, or the blob entry itself for the file at the end of a
            blob view's trail.
    """

    path: str
    label: Union[str, TreeEntry]


def sort_key(entry: TreeEntry) -> Tuple[bool, str]:
    """Sort key placing trees first, then blobs and submodules, each group by name.

    Names compare case-sensitively by code point.
    """
    return (entry.kind is not EntryKind.TREE, entry.name)


def _segments(path: str) -> List[str]:
    return path.split("/") if path else []


class TreeView(MutableSequence):  # type: ignore[type-arg]
    """The direct children of one path in a git tree, or the single file at that path.

    A view is built once from the listing of a (ref, path) pair. The children are unique
    by name and sorted with directories first. When the inspected path turns out to be a
    file, the view has no children and exposes the file through ``blob`` instead.

    The view behaves as a mutable sequence of its children: it supports indexing,
    assignment, deletion, insertion, ``len()`` and iteration. Edits only affect the
    in-memory view. Adding children to a file view clears ``blob``, so the view then
    reports itself as a directory.

    Attributes:
        ref (str): The tree-ish the view was built from, passed through unchanged.
        subject (Optional[TreeEntry]): The entry for the inspected path; None for the root.
        blob (Optional[TreeEntry]): The file entry when the inspected path is a file.

    Example:
        >>> lines = [
        ...     "100644 blob " + "a" * 40 + "       5\\tREADME.md",
        ...     "040000 tree " + "b" * 40 + "       -\\tsrc",
        ... ]
        >>> view = TreeView.from_output_lines("HEAD", None, lines)
        >>> [entry.name for entry in view]
        ['src', 'README.md']
        >>> view.is_root()
        True
    """

    def __init__(
        self,
        ref: str = "HEAD",
        subject: Optional[TreeEntry] = None,
        children: Optional[Iterable[TreeEntry]] = None,
        blob: Optional[TreeEntry] = None,
    ) -> None:
        """Initialize a TreeView from already-prepared parts.

        Most callers should use from_output_lines() or from_repository(), which apply the
        filtering, ordering and blob detection rules. This constructor takes the parts
        as given.

        Args:
            ref: The tree-ish the view belongs to. Defaults to "HEAD".
            subject: The entry for the inspected path, or None for the root.
            children: The entries to list. Defaults to none.
            blob: The file entry, for views of a single file.

        Raises:
            ValueError: If a blob is given for the root or together with children.
        """
        self.ref = ref
        self.subject = subject
        self._children: List[TreeEntry] = list(children) if children is not None else []
        if blob is not None and (subject is None or self._children):
            raise ValueError("A blob view needs a subject and cannot have children")
        self.blob = blob

    @classmethod
    def from_output_lines(cls, ref: str, subject: Optional[TreeEntry], lines: Iterable[str]) -> "TreeView":
        """Build a view from the lines of a ``git ls-tree`` listing.

        The listing may be recursive. Below a subject, only entries exactly one level
        down are kept; at the root, every entry contributes its first path segment, so
        ``src/main.go`` stands in for ``src`` when the listing has no line for ``src``
        itself. The first line for a given name wins and supplies its mode, kind, object
        id and size. The result is sorted with trees first. If the subject is a path
        with no children and the listing is a single line whose object id equals the
        subject's, the view represents that single file.

        Args:
            ref: The tree-ish that was listed.
            subject: The entry for the inspected path, or None for the root.
            lines: The raw output lines. Empty lines are ignored.

        Returns:
            The finished view.

        Raises:
            MalformedEntryError: If a non-empty line cannot be parsed.

        Example:
            >>> from treeish.types import EntryKind
            >>> sha = "c" * 40
            >>> subject = TreeEntry("100644", EntryKind.BLOB, sha, 12, "main.go", "src")
            >>> view = TreeView.from_output_lines("HEAD", subject, ["100644 blob " + sha + "      12\\tsrc/main.go"])
            >>> view.is_blob(), len(view)
            (True, 0)
        """
        lines = list(lines)
        view = cls(ref, subject)
        prefix = _segments(subject.full_path) if subject is not None else []
        parent_path = subject.full_path if subject is not None else ""
        seen: Set[str] = set()

        for line in lines:
            entry = parse_line(line)
            if entry is None:
                continue
            name = cls._direct_child_name(prefix, entry)
            if name is None or name in seen:
                continue
            seen.add(name)
            view._children.append(TreeEntry(entry.mode, entry.kind, entry.sha, entry.size, name, parent_path))

        view._children.sort(key=sort_key)
        view._detect_blob(lines)
        return view

    @classmethod
    def from_repository(
        cls, repository: "BaseRepository", ref: str = "HEAD", subject: Optional[TreeEntry] = None
    ) -> "TreeView":
        """List a path through a repository and build its view.

        Args:
            repository: Source of listings; see BaseRepository.ls_tree().
            ref: The tree-ish to inspect. Defaults to "HEAD".
            subject: The entry for the path to inspect, or None for the root.

        Returns:
            The finished view.

        Raises:
            GitCommandError: If the repository fails to produce the listing.
            MalformedEntryError: If the listing cannot be parsed.
        """
        return cls.from_output_lines(ref, subject, repository.ls_tree(ref, subject))

    @staticmethod
    def _direct_child_name(prefix: List[str], entry: TreeEntry) -> Optional[str]:
        """Return the name under which entry is a direct child of prefix, if it is one."""
        segments = entry.full_path.split("/")
        if not prefix:
            return segments[0] or None
        depth = len(prefix)
        if len(segments) != depth + 1 or segments[:depth] != prefix:
            return None
        return segments[depth] or None

    def _detect_blob(self, lines: List[str]) -> None:
        # no children: empty folder or blob
        lines = [line for line in lines if line.strip()]
        if self._children or self.subject is None or len(lines) != 1:
            return
        entry = parse_line(lines[0])
        if entry is not None and entry.sha == self.subject.sha:
            self.blob = entry

    @property
    def state(self) -> ViewState:
        if self.blob is not None:
            return ViewState.BLOB
        if self.subject is None:
            return ViewState.ROOT
        return ViewState.DIRECTORY

    def is_root(self) -> bool:
        return self.subject is None

    def is_blob(self) -> bool:
        """Tell whether the inspected path resolved to a single file."""
        return self.blob is not None

    def is_binary(self) -> bool:
        """Tell whether the subject is a blob, i.e. whether it has content to fetch."""
        return self.subject is not None and self.subject.is_blob()

    def get_parent(self) -> Optional[str]:
        """Get the path of the parent of the inspected path.

        Returns:
            None for the root, an empty string for top-level paths, otherwise the subject's
            path without its last segment.
        """
        if self.subject is None:
            return None
        return self.subject.full_path.rpartition("/")[0]

    @property
    def children(self) -> List[TreeEntry]:
        """A copy of the children, in view order."""
        return list(self._children)

    def get_breadcrumb(self) -> List[Crumb]:
        """Get the breadcrumb trail from the root of the tree to the inspected path.

        Each step carries the path up to that point and a label. In a blob view, steps
        whose segment equals the file name are labelled with the blob entry itself.

        Returns:
            The trail, empty for the root.

        Example:
            >>> from treeish.types import EntryKind
            >>> subject = TreeEntry("040000", EntryKind.TREE, "d" * 40, None, "b", "a")
            >>> TreeView("HEAD", subject).get_breadcrumb()
            [Crumb(path='a', label='a'), Crumb(path='a/b', label='b')]
        """
        crumbs: List[Crumb] = []
        if self.subject is None:
            return crumbs
        path_so_far = ""
        for segment in self.subject.full_path.split("/"):
            label: Union[str, TreeEntry] = segment
            if self.blob is not None and segment == self.blob.name:
                label = self.blob
            crumbs.append(Crumb(path_so_far + segment, label))
            path_so_far += segment + "/"
        return crumbs

    def get_tree(self) -> EntryNode:
        """Get the view as an anytree hierarchy one level deep.

        Returns:
            A node for the inspected path (named after the ref for the root) whose
            children are nodes for the view's children, in view order.
        """
        if self.subject is None:
            root = EntryNode(self.ref)
        else:
            root = EntryNode.from_entry(self.subject)
        for entry in self._children:
            EntryNode.from_entry(entry, parent=root)
        return root

    def exclude(self, rules: "BaseExclusionRules") -> "TreeView":
        """Get a copy of the view without the children matched by exclusion rules.

        Trees are matched with a trailing slash so that directory-only patterns such as
        "build/" apply to them.

        Args:
            rules: The exclusion rules to apply.

        Returns:
            A new view with the same ref, subject and blob.
        """
        kept = [
            entry
            for entry in self._children
            if not rules.exclude(entry.full_path + "/" if entry.is_tree() else entry.full_path)
        ]
        return TreeView(self.ref, self.subject, kept, self.blob)

    def get_binary_data(self, repository: "BaseRepository") -> bytes:
        """Fetch the raw content of the file this view represents.

        Args:
            repository: Source of object content; see BaseRepository.cat_file().

        Returns:
            The content of the blob.

        Raises:
            NotABlobError: If the view does not represent a file.
            GitCommandError: If the repository fails to produce the content.
        """
        target = self.blob
        if target is None and self.subject is not None and self.subject.is_blob():
            target = self.subject
        if target is None or not target.is_blob():
            raise NotABlobError(self.subject.full_path if self.subject is not None else "")
        return repository.cat_file(target.sha)

    def get_last_commit(self, repository: "BaseRepository", ref: Optional[str] = None) -> "CommitInfo":
        """Get the most recent commit that modified the inspected path.

        For the root this is the commit the ref points at.

        Args:
            repository: Source of history; see BaseRepository.log_path().
            ref: Where to start looking. Defaults to the view's ref.

        Raises:
            NoHistoryError: If no commit modifies the path.
            GitCommandError: If the repository fails to produce the history.
        """
        ref = ref or self.ref
        if self.subject is None:
            return repository.get_commit(ref)
        commits = repository.log_path(ref, self.subject.full_path, max_count=1)
        if not commits:
            raise NoHistoryError(ref, self.subject.full_path)
        return commits[0]

    def get_last_commit_message(self, repository: "BaseRepository", ref: Optional[str] = None) -> str:
        return self.get_last_commit(repository, ref).message

    def get_last_commit_author(self, repository: "BaseRepository", ref: Optional[str] = None) -> "Author":
        return self.get_last_commit(repository, ref).author

    @overload
    def __getitem__(self, index: int) -> TreeEntry: ...

    @overload
    def __getitem__(self, index: slice) -> List[TreeEntry]: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[TreeEntry, List[TreeEntry]]:
        return self._children[index]

    def __setitem__(self, index: Union[int, slice], value: Any) -> None:
        self._children[index] = value
        if self._children:
            self.blob = None

    def __delitem__(self, index: Union[int, slice]) -> None:
        del self._children[index]

    def __len__(self) -> int:
        return len(self._children)

    def insert(self, index: int, value: TreeEntry) -> None:
        self._children.insert(index, value)
        self.blob = None

    def __repr__(self) -> str:
        path = self.subject.full_path if self.subject is not None else ""
        return f"TreeView(ref={self.ref!r}, path={path!r}, state={self.state.value!r}, children={len(self)})"


def build_view(ref: str, subject: Optional[TreeEntry], lines: Iterable[str]) -> TreeView:
    """Build a view from listing lines; see TreeView.from_output_lines."""
    return TreeView.from_output_lines(ref, subject, lines)
