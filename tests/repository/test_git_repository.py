"""Integration tests for GitRepository against a real repository built with GitPython."""

import shutil

import pytest
from git import Actor, Repo

from treeish.exceptions import GitCommandError, PathNotFoundError
from treeish.repository.git_repository import GitRepository
from treeish.tree_view.tree_view import TreeView
from treeish.types import EntryKind

pytestmark = pytest.mark.skipif(shutil.which("git") is None, reason="git binary not available")

AUTHOR = Actor("Ada Lovelace", "ada@example.com")


@pytest.fixture
def git_repo(tmp_path):
    """Create a repository with two commits.

    Layout at HEAD:
        README.md
        src/main.go
        src/internal/util.go
        docs/guide.md
    """
    repo = Repo.init(tmp_path)
    (tmp_path / "src" / "internal").mkdir(parents=True)
    (tmp_path / "docs").mkdir()
    (tmp_path / "README.md").write_text("# Demo\n")
    (tmp_path / "src" / "main.go").write_text("package main\n")
    (tmp_path / "src" / "internal" / "util.go").write_text("package internal\n")
    repo.index.add(["README.md", "src/main.go", "src/internal/util.go"])
    repo.index.commit("Initial import", author=AUTHOR, committer=AUTHOR)

    (tmp_path / "docs" / "guide.md").write_text("Read me first.\n")
    (tmp_path / "src" / "main.go").write_text("package main\n\nfunc main() {}\n")
    repo.index.add(["docs/guide.md", "src/main.go"])
    repo.index.commit("Add guide\n\nAlso fills in main.", author=AUTHOR, committer=AUTHOR)
    return tmp_path


def test_open_missing_path(tmp_path):
    with pytest.raises(FileNotFoundError):
        GitRepository(tmp_path / "missing")


def test_open_non_repository(tmp_path):
    with pytest.raises(NotADirectoryError):
        GitRepository(tmp_path)


def test_root_view(git_repo):
    repository = GitRepository(git_repo)
    view = TreeView.from_repository(repository, "HEAD", None)
    assert [entry.name for entry in view] == ["docs", "src", "README.md"]
    assert view[2].size == len("# Demo\n")


def test_directory_view(git_repo):
    repository = GitRepository(git_repo)
    subject = repository.resolve_subject("HEAD", "src")
    assert subject.kind is EntryKind.TREE
    view = TreeView.from_repository(repository, "HEAD", subject)
    assert [entry.full_path for entry in view] == ["src/internal", "src/main.go"]
    assert not view.is_blob()


def test_blob_view_and_content(git_repo):
    repository = GitRepository(git_repo)
    subject = repository.resolve_subject("HEAD", "/src/main.go")
    view = TreeView.from_repository(repository, "HEAD", subject)
    assert view.is_blob()
    assert view.blob.full_path == "src/main.go"
    assert view.get_binary_data(repository) == b"package main\n\nfunc main() {}\n"


def test_older_ref(git_repo):
    repository = GitRepository(git_repo)
    view = TreeView.from_repository(repository, "HEAD~1", None)
    assert [entry.name for entry in view] == ["src", "README.md"]


def test_resolve_subject_root_and_missing(git_repo):
    repository = GitRepository(git_repo)
    assert repository.resolve_subject("HEAD", "") is None
    assert repository.resolve_subject("HEAD", "/") is None
    with pytest.raises(PathNotFoundError):
        repository.resolve_subject("HEAD", "docs/missing.md")


def test_unknown_ref(git_repo):
    repository = GitRepository(git_repo)
    with pytest.raises(GitCommandError):
        repository.ls_tree("no-such-branch")
    with pytest.raises(GitCommandError):
        repository.get_commit("no-such-branch")


def test_cat_file_unknown_object(git_repo):
    repository = GitRepository(git_repo)
    with pytest.raises(GitCommandError):
        repository.cat_file("0123456789abcdef0123456789abcdef01234567")


def test_history(git_repo):
    repository = GitRepository(git_repo)
    commits = repository.log_path("HEAD", "src/main.go")
    assert [c.summary for c in commits] == ["Add guide", "Initial import"]
    assert commits[0].author.name == "Ada Lovelace"
    assert commits[0].message == "Add guide\n\nAlso fills in main."
    assert repository.log_path("HEAD", "README.md", max_count=1)[0].summary == "Initial import"


def test_last_commit_through_view(git_repo):
    repository = GitRepository(git_repo)
    subject = repository.resolve_subject("HEAD", "README.md")
    view = TreeView.from_repository(repository, "HEAD", subject)
    assert view.get_last_commit_message(repository) == "Initial import"
    assert TreeView("HEAD").get_last_commit(repository).summary == "Add guide"
