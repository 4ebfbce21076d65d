import pytest

from foldertree.exclusion_rules.git_rules import GitIgnoreExclusionRules


@pytest.fixture
def temp_gitignore(tmp_path):
    gitignore = tmp_path / ".gitignore"
    gitignore.write_text("*.txt\n!important.txt\nsubdir/\n*.py[cod]\n**/__pycache__/\n")
    return gitignore


@pytest.mark.parametrize(
    "path,expected",
    [
        ("file.txt", True),
        ("important.txt", False),
        ("file.py", False),
        ("file.pyc", True),
        ("subdir/file.py", True),
        ("subdir/", True),
        ("pkg/__pycache__/", True),
        ("pkg/module.py", False),
    ],
)
def test_exclude(temp_gitignore, path, expected):
    rules = GitIgnoreExclusionRules(temp_gitignore)
    assert rules.exclude(path) is expected


def test_exclude_entry_uses_relative_path_with_directory_slash():
    rules = GitIgnoreExclusionRules()
    rules.add_rule("build/")

    assert rules.exclude_entry("build", "/srv/build", "build", is_dir=True)
    assert not rules.exclude_entry("build", "/srv/build", "build", is_dir=False)


def test_anchored_pattern_only_matches_at_root():
    rules = GitIgnoreExclusionRules()
    rules.add_rule("/dist")

    assert rules.exclude_entry("dist", "/srv/dist", "dist", is_dir=True)
    assert not rules.exclude_entry("dist", "/srv/pkg/dist", "pkg/dist", is_dir=True)


def test_add_rule_negation_order():
    rules = GitIgnoreExclusionRules()
    rules.add_rule("*.log")
    rules.add_rule("!keep.log")

    assert rules.exclude("debug.log")
    assert not rules.exclude("keep.log")


def test_load_multiple_files(tmp_path):
    first = tmp_path / ".gitignore"
    second = tmp_path / ".npmignore"
    first.write_text("*.log\n")
    second.write_text("node_modules/\n")

    rules = GitIgnoreExclusionRules([first, str(second)])

    assert rules.exclude("app.log")
    assert rules.exclude("node_modules/")


def test_has_rules(tmp_path):
    comments_only = tmp_path / ".gitignore"
    comments_only.write_text("# nothing here\n\n")

    rules = GitIgnoreExclusionRules(comments_only)
    assert not rules.has_rules()

    rules.add_rule("*.tmp")
    assert rules.has_rules()


def test_missing_rules_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        GitIgnoreExclusionRules(tmp_path / "missing")
