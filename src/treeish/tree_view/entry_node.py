"""Node representation for tree entries in a rendered hierarchy."""

from typing import Any, Optional

from anytree import Node

from treeish.tree_view.tree_entry import TreeEntry


class EntryNode(Node):  # type: ignore
    """Node class wrapping a TreeEntry in an anytree hierarchy.

    Extends anytree.Node so that a view can be handed to anything that walks or renders
    anytree structures. The node of the inspected path itself carries the subject entry,
    which is None for the root of the tree.

    Attributes:
        name (str): The display name (entry name, or the ref for the root node).
        parent (Optional[EntryNode]): The parent node in the hierarchy.
        entry (Optional[TreeEntry]): The entry this node stands for.
        children (tuple[EntryNode]): The child nodes (inherited from anytree.Node).

    Example:
        >>> from treeish.types import EntryKind
        >>> root = EntryNode("HEAD")
        >>> child = EntryNode.from_entry(TreeEntry("040000", EntryKind.TREE, "b" * 40, None, "src"), parent=root)
        >>> child.is_dir
        True
        >>> [node.name for node in root.children]
        ['src']
    """

    def __init__(
        self,
        name: str,
        parent: Optional["EntryNode"] = None,
        entry: Optional[TreeEntry] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, **kwargs)
        self.entry = entry

    @classmethod
    def from_entry(cls, entry: TreeEntry, parent: Optional["EntryNode"] = None) -> "EntryNode":
        return cls(entry.name, parent=parent, entry=entry)

    @property
    def is_dir(self) -> bool:
        """True for tree entries and for the root of the tree."""
        return self.entry is None or self.entry.is_tree()
