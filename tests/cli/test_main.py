"""Unit tests for the CLI main module."""

from unittest.mock import patch

import pytest

from foldertree.cli.main import format_counts, main
from foldertree.tree.renderer import TreeCounts


def run_main(argv):
    with patch("sys.argv", ["foldertree", *argv]):
        main()


def test_format_counts():
    assert format_counts(TreeCounts(directories=2, files=5, placeholders=0)) == "Directories: 2\nFiles: 5"
    assert format_counts(TreeCounts(directories=1, files=1, placeholders=3)) == (
        "Directories: 1\nFiles: 1\nCollapsed groups: 3"
    )


def test_main_full_tree(project, capsys):
    run_main(["--sort", "-i", "node_modules", "-i", "*.log", str(project)])

    assert capsys.readouterr().out == (
        "└── project\n"
        "    ├── app.txt\n"
        "    ├── docs\n"
        "    │   └── readme.md\n"
        "    └── src\n"
        "        ├── main.py\n"
        "        └── utils\n"
        "            └── helpers.py\n"
    )


def test_main_single_selection(project, capsys):
    run_main(["--sort", "-s", str(project / "src"), str(project)])

    assert capsys.readouterr().out == "└── src\n    ├── main.py\n    └── utils\n        └── helpers.py\n"


def test_main_multiple_selections(project, capsys):
    run_main(["--sort", "-s", str(project / "src" / "utils"), "-s", str(project / "docs"), str(project)])

    assert capsys.readouterr().out == (
        "└── project\n"
        "    ├── docs\n"
        "    │   └── readme.md\n"
        "    ├── src\n"
        "    │   ├── utils\n"
        "    │   │   └── helpers.py\n"
        "    │   └── ...\n"
        "    └── ...\n"
    )


def test_main_relative_selections_resolve_against_root(project, tmp_path, monkeypatch, capsys):
    elsewhere = tmp_path / "elsewhere"
    elsewhere.mkdir()
    monkeypatch.chdir(elsewhere)

    run_main(["--sort", "-s", "src/utils", "-s", "docs", str(project)])

    assert capsys.readouterr().out == (
        "└── project\n"
        "    ├── docs\n"
        "    │   └── readme.md\n"
        "    ├── src\n"
        "    │   ├── utils\n"
        "    │   │   └── helpers.py\n"
        "    │   └── ...\n"
        "    └── ...\n"
    )


def test_main_exclude_files(project, capsys):
    patterns = project / "patterns.txt"
    patterns.write_text("# generated\nnode_modules\npatterns\n")
    gitignore = project / ".gitignore"
    gitignore.write_text("*.log\ndocs/\n.gitignore\n")

    run_main(["--sort", "-x", str(patterns), "-e", str(gitignore), str(project)])

    assert capsys.readouterr().out == (
        "└── project\n"
        "    ├── app.txt\n"
        "    └── src\n"
        "        ├── main.py\n"
        "        └── utils\n"
        "            └── helpers.py\n"
    )


def test_main_output_file_and_summary(project, tmp_path, capsys):
    output = tmp_path / "tree.txt"

    run_main(["--sort", "-o", str(output), "-S", "-s", str(project / "docs"), "-s", str(project / "src"), str(project)])

    captured = capsys.readouterr()
    assert captured.out == ""
    assert output.read_text(encoding="utf-8").startswith("└── project\n")
    assert captured.err == "Directories: 3\nFiles: 3\nCollapsed groups: 1\n"


def test_main_missing_root(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        run_main([str(tmp_path / "missing")])

    assert exc_info.value.code == 1
    assert "Error: Path does not exist" in capsys.readouterr().err


def test_main_selection_outside_root(project, tmp_path, capsys):
    outside = tmp_path / "outside"
    outside.mkdir()

    with pytest.raises(SystemExit) as exc_info:
        run_main(["-s", str(outside), str(project)])

    assert exc_info.value.code == 1
    assert "outside the root" in capsys.readouterr().err


def test_main_invalid_pattern(project, capsys):
    with pytest.raises(SystemExit) as exc_info:
        run_main(["-i", "**", str(project)])

    assert exc_info.value.code == 1
    assert "Error: Invalid exclude pattern '**'" in capsys.readouterr().err


def test_main_missing_gitignore_file(project, capsys):
    with pytest.raises(SystemExit) as exc_info:
        run_main(["-e", str(project / "missing.gitignore"), str(project)])

    assert exc_info.value.code == 1
    assert "Rules file not found" in capsys.readouterr().err


def test_main_permission_denied(project, capsys):
    with patch("foldertree.cli.main.TreeBuilder.build", side_effect=_permission_error(project)):
        with pytest.raises(SystemExit) as exc_info:
            run_main([str(project)])

    assert exc_info.value.code == 126
    assert "Error: Cannot read" in capsys.readouterr().err


def test_main_broken_pipe(project):
    with (
        patch("foldertree.cli.main.write_output", side_effect=BrokenPipeError()),
        patch("foldertree.cli.main.os.open", return_value=99),
        patch("foldertree.cli.main.os.dup2") as mock_dup2,
        patch("foldertree.cli.main.sys.stdout") as mock_stdout,
    ):
        mock_stdout.fileno.return_value = 1
        with pytest.raises(SystemExit) as exc_info:
            run_main([str(project)])

    assert exc_info.value.code == 141
    mock_dup2.assert_called_once_with(99, 1)


def _permission_error(project):
    from foldertree.exceptions import FilesystemError

    try:
        raise PermissionError(13, "Permission denied")
    except PermissionError as cause:
        error = FilesystemError(str(project / "docs"), "Permission denied")
        error.__cause__ = cause
        return error
