"""Text output strategy rendering tree views like the Unix ``tree`` command."""

from typing import Iterator, Optional

from treeish.repository.commit_info import CommitInfo
from treeish.tree_view.entry_node import EntryNode
from treeish.tree_view.tree_entry import TreeEntry
from treeish.tree_view.tree_view import TreeView

from .base_strategy import OutputStrategy

BREADCRUMB_SEPARATOR = " / "


class TextOutputStrategy(OutputStrategy):
    """Output strategy producing a human-readable listing.

    Directories are listed first with a trailing slash, then files and submodules.
    Submodules show the commit they are pinned at. A blob view prints a single line for
    the file.

    Example:
        >>> lines = [
        ...     "040000 tree " + "b" * 40 + "       -\\tsrc",
        ...     "100644 blob " + "a" * 40 + "       5\\tREADME.md",
        ... ]
        >>> view = TreeView.from_output_lines("main", None, lines)
        >>> print("".join(TextOutputStrategy().stream_view(view, show_sizes=True)), end="")
        main:
        ├── src/
        └── README.md (5 bytes)
    """

    def stream_view(
        self,
        view: TreeView,
        show_sizes: bool = False,
        include_breadcrumb: bool = False,
        last_commit: Optional[CommitInfo] = None,
    ) -> Iterator[str]:
        if include_breadcrumb and not view.is_root():
            yield self.format_breadcrumb(view) + "\n"

        if view.blob is not None:
            yield self.view_label(view) + self._size_suffix(view.blob, show_sizes) + "\n"
        else:
            root = view.get_tree()
            suffix = "/" if view.subject is not None else ""
            yield self.view_label(view) + suffix + "\n"
            children = root.children
            for i, node in enumerate(children):
                connector = "└── " if i == len(children) - 1 else "├── "
                yield connector + self._format_node(node, show_sizes) + "\n"

        if last_commit is not None:
            yield self.format_commit(last_commit) + "\n"

    def format_breadcrumb(self, view: TreeView) -> str:
        """Join the breadcrumb labels of a view, e.g. "src / cmd / main.go"."""
        return BREADCRUMB_SEPARATOR.join(self.crumb_label(crumb.label) for crumb in view.get_breadcrumb())

    @staticmethod
    def format_commit(commit: CommitInfo) -> str:
        date = commit.authored_at.strftime("%Y-%m-%d")
        return f"Last commit: {commit.sha[:7]} {commit.summary} ({commit.author.name}, {date})"

    def _format_node(self, node: EntryNode, show_sizes: bool) -> str:
        entry = node.entry
        if entry is None:
            return str(node.name)
        if entry.is_tree():
            return f"{entry.name}/"
        if entry.is_submodule():
            return f"{entry.name} @ {entry.sha[:7]}"
        return entry.name + self._size_suffix(entry, show_sizes)

    @staticmethod
    def _size_suffix(entry: TreeEntry, show_sizes: bool) -> str:
        if not show_sizes or entry.size is None:
            return ""
        return f" ({entry.size} bytes)"

    def get_file_extension(self) -> str:
        return ".txt"
