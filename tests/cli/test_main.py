"""Unit tests for the CLI main module."""

import json
from typing import Optional
from unittest.mock import patch

import pytest

from treeish.cli.main import create_strategy, main
from treeish.exceptions import GitCommandError, PathNotFoundError
from treeish.output_strategies.json_strategy import JSONOutputStrategy
from treeish.output_strategies.text_strategy import TextOutputStrategy
from treeish.tree_view.tree_entry import TreeEntry, parse_line

from conftest import FakeRepository, make_line, make_sha


class ResolvingRepository(FakeRepository):
    """Fake repository that can also resolve user paths."""

    def resolve_subject(self, ref: str, path: str) -> Optional[TreeEntry]:
        path = path.strip("/")
        if not path:
            return None
        for line in self.listings.get((ref, path.rpartition("/")[0]), []):
            entry = parse_line(line)
            if entry is not None and entry.full_path == path:
                return entry
        raise PathNotFoundError(ref, path)


@pytest.fixture
def repository(commit):
    repository = ResolvingRepository()
    repository.listings[("HEAD", "")] = [
        make_line("blob", make_sha("a"), "README.md", 5),
        make_line("blob", make_sha("e"), "poetry.lock", 900),
        make_line("tree", make_sha("b"), "src"),
    ]
    repository.listings[("HEAD", "src")] = [make_line("blob", make_sha("c"), "src/main.py", 12)]
    repository.listings[("HEAD", "src/main.py")] = [make_line("blob", make_sha("c"), "src/main.py", 12)]
    repository.history["src/main.py"] = [commit]
    return repository


def run_main(argv, repository):
    with patch("sys.argv", ["treeish", *argv]), patch("treeish.cli.main.GitRepository", return_value=repository):
        main()


def test_create_strategy():
    assert isinstance(create_strategy("text"), TextOutputStrategy)
    assert isinstance(create_strategy("json"), JSONOutputStrategy)
    with pytest.raises(ValueError):
        create_strategy("xml")


def test_main_lists_root(repository, capsys):
    run_main([], repository)
    assert capsys.readouterr().out == "HEAD:\n├── src/\n├── README.md\n└── poetry.lock\n"


def test_main_lists_directory_with_ignore(repository, capsys):
    run_main(["-i", "*.lock", "-s"], repository)
    assert capsys.readouterr().out == "HEAD:\n├── src/\n└── README.md (5 bytes)\n"


def test_main_blob_as_json(repository, capsys):
    run_main(["-f", "json", "-b", "-l", "src/main.py"], repository)
    document = json.loads(capsys.readouterr().out)
    assert document["state"] == "blob"
    assert document["breadcrumb"][-1] == {"path": "src/main.py", "label": "main.py"}
    assert document["last_commit"]["author"]["name"] == "Ada Lovelace"


def test_main_writes_output_file(repository, tmp_path, capsys):
    output = tmp_path / "listing.txt"
    run_main(["-o", str(output), "src"], repository)
    assert output.read_text(encoding="utf-8") == "HEAD:src/\n└── main.py\n"
    assert capsys.readouterr().out == ""


def test_main_warns_without_history(repository, capsys):
    run_main(["-l", "src"], repository)
    captured = capsys.readouterr()
    assert captured.out == "HEAD:src/\n└── main.py\n"
    assert captured.err.startswith("Warning: No commit in 'HEAD' modifies 'src'")


def test_main_unknown_path(repository, capsys):
    with patch("sys.exit") as mock_exit:
        run_main(["docs/missing.md"], repository)
    assert "Error: Path 'docs/missing.md' does not exist in 'HEAD'" in capsys.readouterr().err
    mock_exit.assert_called_once_with(1)


def test_main_git_failure(repository, capsys):
    def fail(ref, subject=None):
        raise GitCommandError(["git", "ls-tree", "-l", ref], "fatal: Not a valid object name")

    repository.ls_tree = fail
    with patch("sys.exit") as mock_exit:
        run_main(["-r", "nope"], repository)
    assert "Error: git ls-tree -l nope failed: fatal: Not a valid object name" in capsys.readouterr().err
    mock_exit.assert_called_once_with(1)


def test_main_rejects_option_like_ref(repository, capsys):
    with patch("sys.exit") as mock_exit:
        run_main(["--ref=--output=x"], repository)
    assert "Error: Invalid ref" in capsys.readouterr().err
    mock_exit.assert_called_once_with(1)


def test_main_usage_error(repository):
    with pytest.raises(SystemExit) as excinfo:
        run_main(["--no-such-option"], repository)
    assert excinfo.value.code == 2


def test_main_interrupted(repository):
    def interrupt(ref, subject=None):
        raise KeyboardInterrupt

    repository.ls_tree = interrupt
    with pytest.raises(SystemExit) as excinfo:
        run_main([], repository)
    assert excinfo.value.code == 130
