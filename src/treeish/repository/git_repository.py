"""Repository implementation backed by a local git working copy via GitPython."""

from pathlib import Path
from typing import List, Optional

from git import Repo
from git.exc import BadName, BadObject, CommandError, InvalidGitRepositoryError, NoSuchPathError
from git.objects import Commit
from git.util import hex_to_bin

from treeish.exceptions import GitCommandError, PathNotFoundError
from treeish.repository.base_repository import BaseRepository
from treeish.repository.commit_info import Author, CommitInfo
from treeish.tree_view.tree_entry import TreeEntry, parse_line
from treeish.types import PathType


class GitRepository(BaseRepository):
    """Runs listings, object reads and history queries against a local repository.

    Every call spawns (or reuses) a git process through GitPython and blocks until it
    completes. Failures of the git binary are raised as treeish.exceptions.GitCommandError.

    Attributes:
        repo_path (Path): The path the repository was opened from.
        repo (Repo): The underlying GitPython repository object.

    Example:
        >>> repository = GitRepository(".")  # doctest: +SKIP
        >>> subject = repository.resolve_subject("HEAD", "src")  # doctest: +SKIP
        >>> repository.ls_tree("HEAD", subject)  # doctest: +SKIP
        ['100644 blob 3b18e512dba79e4c8300dd08aeb37f8e728b8dad      12\\tsrc/main.go']
    """

    def __init__(self, repo_path: PathType = ".") -> None:
        """Open the repository containing repo_path.

        Args:
            repo_path: A path inside the working copy (or a bare repository). Parent
                directories are searched for the repository root.

        Raises:
            FileNotFoundError: If repo_path does not exist.
            NotADirectoryError: If repo_path is not inside a git repository.
        """
        self.repo_path = Path(repo_path)
        try:
            self.repo = Repo(self.repo_path, search_parent_directories=True)
        except NoSuchPathError:
            raise FileNotFoundError(f"Repository path does not exist: {self.repo_path}") from None
        except InvalidGitRepositoryError:
            raise NotADirectoryError(f"Not a git repository: {self.repo_path}") from None

    def _git(self, command: str, *args: str) -> str:
        try:
            return str(getattr(self.repo.git, command)(*args))
        except CommandError as e:
            raise GitCommandError([str(part) for part in e.command], str(e.stderr)) from e

    def ls_tree(self, ref: str, subject: Optional[TreeEntry] = None) -> List[str]:
        args = ["-l", ref]
        if subject is not None:
            # A trailing slash lists a directory's contents rather than the directory itself
            args += ["--", subject.full_path + "/" if subject.is_tree() else subject.full_path]
        output = self._git("ls_tree", *args)
        return output.splitlines()

    def cat_file(self, sha: str) -> bytes:
        try:
            return bytes(self.repo.odb.stream(hex_to_bin(sha)).read())
        except (BadObject, ValueError) as e:
            raise GitCommandError(["git", "cat-file", "blob", sha], str(e)) from e

    def log_path(self, ref: str, path: str, max_count: Optional[int] = None) -> List[CommitInfo]:
        kwargs = {} if max_count is None else {"max_count": max_count}
        try:
            commits = list(self.repo.iter_commits(ref, paths=path, **kwargs))
        except CommandError as e:
            raise GitCommandError([str(part) for part in e.command], str(e.stderr)) from e
        return [self._commit_info(commit) for commit in commits]

    def get_commit(self, ref: str) -> CommitInfo:
        try:
            commit = self.repo.commit(ref)
        except (BadName, BadObject, ValueError) as e:
            raise GitCommandError(["git", "rev-parse", ref], str(e)) from e
        return self._commit_info(commit)

    def resolve_subject(self, ref: str, path: str) -> Optional[TreeEntry]:
        """Find the entry for a path, to be used as the subject of a view.

        Args:
            ref: The tree-ish to look in.
            path: A path relative to the root of the tree. Leading and trailing slashes
                are ignored; an empty path stands for the root.

        Returns:
            The entry describing path, or None for the root.

        Raises:
            PathNotFoundError: If the path does not exist in ref.
            GitCommandError: If git fails, for example because ref is unknown.
        """
        path = path.strip("/")
        if not path:
            return None
        for line in self._git("ls_tree", "-l", ref, "--", path).splitlines():
            entry = parse_line(line)
            if entry is not None and entry.full_path == path:
                return entry
        raise PathNotFoundError(ref, path)

    @staticmethod
    def _commit_info(commit: Commit) -> CommitInfo:
        message = commit.message
        if isinstance(message, bytes):
            message = message.decode("utf-8", errors="replace")
        return CommitInfo(
            sha=commit.hexsha,
            message=message.rstrip(),
            author=Author(commit.author.name or "", commit.author.email or ""),
            authored_at=commit.authored_datetime,
        )
