"""JSON output strategy for tree views.

This module provides a strategy for rendering a view, its breadcrumb and its last commit
as a single JSON document.
"""

import json
from typing import Any, Dict, Iterator, Optional

from treeish.repository.commit_info import CommitInfo
from treeish.tree_view.tree_entry import TreeEntry
from treeish.tree_view.tree_view import TreeView

from .base_strategy import OutputStrategy


class JSONOutputStrategy(OutputStrategy):
    """Output strategy that renders a view as one JSON object.

    The document has the following structure:
    {
        "ref": "HEAD",
        "path": "src",             # "" for the root
        "state": "directory",      # "root", "directory" or "blob"
        "parent": "",              # null for the root
        "children": [{"mode": ..., "kind": ..., "sha": ..., "size": ..., "name": ..., "path": ...}],
        "blob": null,              # an entry object for blob views
        "breadcrumb": [{"path": "src", "label": "src"}],  # only if requested
        "last_commit": {...}       # only if provided
    }

    Sizes are omitted from entries unless requested, and are null for trees and
    submodules.

    Attributes:
        indent (Optional[int]): Indentation passed to the JSON encoder.

    Example:
        >>> view = TreeView.from_output_lines("HEAD", None, ["040000 tree " + "b" * 40 + "       -\\tsrc"])
        >>> document = json.loads("".join(JSONOutputStrategy().stream_view(view)))
        >>> document["state"], [child["name"] for child in document["children"]]
        ('root', ['src'])
    """

    def __init__(self, indent: Optional[int] = 2) -> None:
        self.indent = indent

    def stream_view(
        self,
        view: TreeView,
        show_sizes: bool = False,
        include_breadcrumb: bool = False,
        last_commit: Optional[CommitInfo] = None,
    ) -> Iterator[str]:
        data: Dict[str, Any] = {
            "ref": view.ref,
            "path": view.subject.full_path if view.subject is not None else "",
            "state": view.state.value,
            "parent": view.get_parent(),
            "children": [self._entry_to_dict(entry, show_sizes) for entry in view],
            "blob": self._entry_to_dict(view.blob, show_sizes) if view.blob is not None else None,
        }
        if include_breadcrumb:
            data["breadcrumb"] = [
                {"path": crumb.path, "label": self.crumb_label(crumb.label)} for crumb in view.get_breadcrumb()
            ]
        if last_commit is not None:
            data["last_commit"] = {
                "sha": last_commit.sha,
                "message": last_commit.message,
                "author": {"name": last_commit.author.name, "email": last_commit.author.email},
                "authored_at": last_commit.authored_at.isoformat(),
            }
        yield json.dumps(data, indent=self.indent) + "\n"

    @staticmethod
    def _entry_to_dict(entry: TreeEntry, show_sizes: bool) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "mode": entry.mode,
            "kind": entry.kind.value,
            "sha": entry.sha,
            "name": entry.name,
            "path": entry.path,
        }
        if show_sizes:
            result["size"] = entry.size
        return result

    def get_file_extension(self) -> str:
        return ".json"
