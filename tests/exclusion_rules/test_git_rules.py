import pytest

from treeish.exclusion_rules.base_rules import BaseExclusionRules
from treeish.exclusion_rules.git_rules import GitIgnoreExclusionRules


@pytest.fixture
def rules_file(tmp_path):
    path = tmp_path / ".treeishignore"
    path.write_text("# generated\n*.lock\nbuild/\n\n!keep.lock\n")
    return path


def test_empty_rules_exclude_nothing():
    rules = GitIgnoreExclusionRules()
    assert not rules.exclude("README.md")
    assert not rules.exclude("src/")


def test_load_rules_from_file(rules_file):
    rules = GitIgnoreExclusionRules(rules_file)
    assert rules.exclude("Cargo.lock")
    assert rules.exclude("vendor/yarn.lock")
    assert rules.exclude("build/")
    assert not rules.exclude("keep.lock")
    assert not rules.exclude("build.sh")


def test_load_rules_from_multiple_files(tmp_path, rules_file):
    other = tmp_path / "more"
    other.write_text("*.min.js\n")
    rules = GitIgnoreExclusionRules([str(rules_file), other])
    assert rules.exclude("app.min.js")
    assert rules.exclude("poetry.lock")


def test_missing_rules_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        GitIgnoreExclusionRules(tmp_path / "absent")


def test_directory_patterns_match_only_directories():
    rules = GitIgnoreExclusionRules()
    rules.add_rule("docs/")
    assert rules.exclude("docs/")
    assert not rules.exclude("docs")


def test_rules_apply_in_order(rules_file):
    rules = GitIgnoreExclusionRules()
    rules.add_rule("!keep.lock")
    rules.load_rules(rules_file)
    rules.add_rule("keep.lock")
    assert rules.exclude("keep.lock")


def test_anchored_patterns_use_full_paths():
    rules = GitIgnoreExclusionRules()
    rules.add_rule("/src/generated/")
    assert rules.exclude("src/generated/")
    assert not rules.exclude("lib/src/generated/")


def test_base_rules_optional_capabilities():
    class NeverExclude(BaseExclusionRules):
        def exclude(self, path: str) -> bool:
            return False

    rules = NeverExclude()
    with pytest.raises(NotImplementedError):
        rules.add_rule("*.txt")
    with pytest.raises(NotImplementedError):
        rules.load_rules("rules.txt")
