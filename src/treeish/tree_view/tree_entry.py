"""Tree entry representation and the parser for ``git ls-tree`` output lines."""

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from treeish.exceptions import MalformedEntryError
from treeish.types import EntryKind

_MODE_RE = re.compile(r"^[0-7]{6}$")
_SHA_RE = re.compile(r"^[0-9a-f]{4,64}$")

# Size column printed by ``ls-tree -l`` for trees and submodules
UNKNOWN_SIZE_TOKEN = "-"


@dataclass(frozen=True)
class TreeEntry:
    """One row of a git tree listing.

    Entries are immutable and compare equal when every field matches, so they can be
    used as dictionary keys or collected into sets.

    Attributes:
        mode (str): The file mode exactly as git prints it (e.g. "100644", "040000").
        kind (EntryKind): Whether the entry is a tree, a blob or a submodule commit.
        sha (str): The object id of the entry.
        size (Optional[int]): Size in bytes, or None when git reports no size ("-").
        name (str): The last path component.
        path (str): The parent path, empty for top-level entries.

    Example:
        >>> entry = TreeEntry("100644", EntryKind.BLOB, "a" * 40, 12, "main.go", "src")
        >>> entry.full_path
        'src/main.go'
        >>> TreeEntry("040000", EntryKind.TREE, "b" * 40, None, "src", "").full_path
        'src'
    """

    mode: str
    kind: EntryKind
    sha: str
    size: Optional[int]
    name: str
    path: str = ""

    @property
    def full_path(self) -> str:
        """The path of the entry relative to the root of the tree."""
        if self.path:
            return f"{self.path}/{self.name}"
        return self.name

    def is_tree(self) -> bool:
        return self.kind is EntryKind.TREE

    def is_blob(self) -> bool:
        return self.kind is EntryKind.BLOB

    def is_submodule(self) -> bool:
        return self.kind is EntryKind.COMMIT

    @classmethod
    def from_output_line(cls, line: str) -> Optional["TreeEntry"]:
        """Parse a single line of ``git ls-tree`` (optionally ``-l``) output.

        The header fields (mode, kind, object id and, in long format, the size) are
        separated by runs of spaces or tabs; the path follows the last tab. Git
        right-aligns the size column, so it may carry leading padding. Lines without
        any tab are read positionally: the path is whatever follows the header.

        Args:
            line: One line of output, with or without its trailing newline.

        Returns:
            The parsed entry, or None if the line is empty.

        Raises:
            MalformedEntryError: If a non-empty line does not have the expected shape.

        Example:
            >>> entry = TreeEntry.from_output_line("100644 blob " + "c" * 40 + "      12\\tsrc/main.go")
            >>> (entry.name, entry.path, entry.size)
            ('main.go', 'src', 12)
            >>> TreeEntry.from_output_line("") is None
            True
        """
        text = line.rstrip("\r\n")
        if not text.strip():
            return None

        if "\t" in text:
            header, _, full_path = text.rpartition("\t")
            fields = header.split()
        else:
            fields, full_path = _split_untabbed(line, text)

        if len(fields) < 3:
            raise MalformedEntryError(line, "missing header fields")
        if len(fields) > 4:
            raise MalformedEntryError(line, "unexpected header fields")

        mode, kind_token, sha = fields[0], fields[1], fields[2]
        if not _MODE_RE.match(mode):
            raise MalformedEntryError(line, f"invalid mode {mode!r}")
        try:
            kind = EntryKind(kind_token)
        except ValueError:
            raise MalformedEntryError(line, f"unknown object kind {kind_token!r}") from None
        if not _SHA_RE.match(sha):
            raise MalformedEntryError(line, f"invalid object id {sha!r}")

        size: Optional[int] = None
        if len(fields) == 4 and fields[3] != UNKNOWN_SIZE_TOKEN:
            try:
                size = int(fields[3])
            except ValueError:
                raise MalformedEntryError(line, f"invalid size {fields[3]!r}") from None

        full_path = _unquote_path(full_path)
        if not full_path:
            raise MalformedEntryError(line, "missing path field")

        parent, _, name = full_path.rpartition("/")
        return cls(mode=mode, kind=kind, sha=sha, size=size, name=name, path=parent)


def parse_line(line: str) -> Optional[TreeEntry]:
    """Parse one line of ``git ls-tree`` output; see TreeEntry.from_output_line."""
    return TreeEntry.from_output_line(line)


def _is_size_token(token: str) -> bool:
    return token == UNKNOWN_SIZE_TOKEN or token.isdigit()


def _split_untabbed(line: str, text: str) -> Tuple[List[str], str]:
    """Split a line that has no tab into its header fields and its path.

    A fourth field that looks like a size is taken as the size column; the path is the
    remainder of the line, internal spaces included.
    """
    tokens = text.split(None, 4)
    if len(tokens) == 5 and _is_size_token(tokens[3]):
        return tokens[:4], tokens[4]
    tokens = text.split(None, 3)
    if len(tokens) < 4:
        raise MalformedEntryError(line, "missing path field")
    return tokens[:3], tokens[3]


def _unquote_path(path: str) -> str:
    """Undo git's C-style quoting of paths with unusual characters.

    With ``core.quotePath`` (the default) git wraps such paths in double quotes and
    escapes non-ASCII bytes as octal sequences, e.g. ``"caf\\303\\251.txt"``.
    """
    if len(path) < 2 or not (path.startswith('"') and path.endswith('"')):
        return path
    body = path[1:-1]
    try:
        return body.encode("latin-1").decode("unicode_escape").encode("latin-1").decode("utf-8")
    except (UnicodeDecodeError, UnicodeEncodeError):
        return path
