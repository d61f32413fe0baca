from typing import Sequence


class MalformedEntryError(Exception):
    """
    Exception raised when a line of ``git ls-tree`` output cannot be parsed.

    A malformed line means either corrupted output from git or a mismatch between the
    command that produced the listing and the format expected here. It is never
    recovered from silently.

    Attributes:
        raw_line (str): The offending line, exactly as received.
        reason (str): Short description of what was missing or invalid.

    Example:
        >>> error = MalformedEntryError("100644 blob", "missing path field")
        >>> str(error)
        "Malformed tree entry (missing path field): '100644 blob'"
    """

    def __init__(self, raw_line: str, reason: str = "unrecognized format") -> None:
        """
        Initialize the exception with the offending line.

        Args:
            raw_line (str): The line that failed to parse.
            reason (str, optional): What was wrong with it. Defaults to "unrecognized format".
        """
        self.raw_line = raw_line
        self.reason = reason
        super().__init__(f"Malformed tree entry ({reason}): {raw_line!r}")


class GitCommandError(Exception):
    """
    Exception raised when an invocation of the git binary fails.

    Attributes:
        command (Sequence[str]): The git command line that was run.
        stderr (str): Whatever git wrote to its standard error stream.

    Example:
        >>> error = GitCommandError(["git", "ls-tree", "nope"], "fatal: Not a valid object name nope")
        >>> str(error)
        'git ls-tree nope failed: fatal: Not a valid object name nope'
    """

    def __init__(self, command: Sequence[str], stderr: str = "") -> None:
        self.command = list(command)
        self.stderr = stderr.strip()
        message = f"{' '.join(self.command)} failed"
        if self.stderr:
            message += f": {self.stderr}"
        super().__init__(message)


class PathNotFoundError(Exception):
    """
    Exception raised when a path does not exist in the tree named by a ref.

    Attributes:
        ref (str): The tree-ish that was inspected.
        path (str): The path that could not be found.

    Example:
        >>> str(PathNotFoundError("HEAD", "docs/missing.md"))
        "Path 'docs/missing.md' does not exist in 'HEAD'"
    """

    def __init__(self, ref: str, path: str) -> None:
        self.ref = ref
        self.path = path
        super().__init__(f"Path '{path}' does not exist in '{ref}'")


class NotABlobError(Exception):
    """Exception raised when file content is requested for a view that is not a file."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Not a file: '{path or '/'}'")


class NoHistoryError(Exception):
    """Exception raised when no commit touches the inspected path."""

    def __init__(self, ref: str, path: str) -> None:
        self.ref = ref
        self.path = path
        super().__init__(f"No commit in '{ref}' modifies '{path}'")
