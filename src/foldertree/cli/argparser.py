"""Command-line argument parsing for foldertree.

This module defines the command-line interface for foldertree,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path
from typing import Any, List, Optional, Sequence, Type, Union

from foldertree import __version__
from foldertree.exclusion_rules.base_rules import BaseExclusionRules


def create_exclusion_action(
    pattern_rules: BaseExclusionRules, gitignore_rules: BaseExclusionRules
) -> Type[argparse.Action]:
    """Create a custom action class that feeds exclusion options into rule objects.

    Patterns given with ``-i`` and pattern files given with ``-x`` go to
    ``pattern_rules``; ``.gitignore`` files given with ``-e`` go to ``gitignore_rules``.
    Rules are added as the options are parsed, so their command-line order is kept.

    Args:
        pattern_rules: Wildcard rules object updated by ``-i`` and ``-x``.
        gitignore_rules: Gitignore rules object updated by ``-e``.

    Returns:
        A custom action class for use with argparse.
    """

    class ExclusionRulesAction(argparse.Action):
        """Action to update exclusion rules as arguments are processed."""

        def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
            super().__init__(option_strings, dest, **kwargs)

        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return

            if option_string in ("-e", "--exclude"):
                gitignore_rules.load_rules(Path(str(values)))
            elif option_string in ("-x", "--exclude-from"):
                pattern_rules.load_rules(Path(str(values)))
            else:  # -i/--ignore
                pattern_rules.add_rule(str(values))

            recorded = getattr(namespace, self.dest, None) or []
            setattr(namespace, self.dest, recorded + [values])

    return ExclusionRulesAction


def create_parser(pattern_rules: BaseExclusionRules, gitignore_rules: BaseExclusionRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        pattern_rules: Wildcard rules object to update during parsing.
        gitignore_rules: Gitignore rules object to update during parsing.

    Returns:
        An ArgumentParser instance configured with foldertree's options.
    """
    description = """
    foldertree: draw a directory hierarchy as a text tree.

    The tree is drawn with Unicode connectors, one line per entry, ready to paste
    into documentation, issues or chat. When one or more folders are selected the
    tree is pruned: only the way down to the selected folders and their contents is
    shown, and unrelated siblings are collapsed into a single "..." line.
    """

    epilog = """
    Examples:
      # Draw the current directory
      foldertree

      # Draw a project, skipping dependencies and logs
      foldertree -i node_modules -i "*.log" /path/to/project

      # Read exclude patterns from a file, one per line
      foldertree -x .foldertreeignore /path/to/project

      # Apply .gitignore rules as well
      foldertree -e .gitignore /path/to/project

      # Highlight one folder (the tree is rooted at it)
      foldertree -s /path/to/project/src /path/to/project

      # Highlight two folders below their common ancestor
      foldertree -s src/api -s src/models /path/to/project

      # Write the tree to a file and print counts to stderr
      foldertree -o tree.txt -S /path/to/project
    """

    parser = argparse.ArgumentParser(
        prog="foldertree",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"foldertree {__version__}", help="Show the version and exit"
    )

    ExclusionAction = create_exclusion_action(pattern_rules, gitignore_rules)

    parser.add_argument(
        "root",
        type=Path,
        nargs="?",
        default=Path("."),
        help="The directory to draw (default: the current directory).",
    )
    parser.add_argument(
        "-s",
        "--select",
        type=Path,
        metavar="DIR",
        action="append",
        default=[],
        help=(
            "Folder to highlight, absolute or relative to ROOT; unrelated siblings are collapsed "
            "(can be specified multiple times)."
        ),
    )
    parser.add_argument(
        "-i",
        "--ignore",
        type=str,
        metavar="PATTERN",
        action=ExclusionAction,
        help=(
            "Exclude entries whose name or full path contains a match for PATTERN. The first '*' "
            "matches any sequence of characters (can be specified multiple times)."
        ),
    )
    parser.add_argument(
        "-x",
        "--exclude-from",
        type=Path,
        metavar="FILE",
        action=ExclusionAction,
        help="File of exclude patterns, one per line, in the same syntax as -i (can be specified multiple times).",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        type=Path,
        metavar="FILE",
        action=ExclusionAction,
        help="Path to a .gitignore-style file whose rules also exclude entries (can be specified multiple times).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )
    parser.add_argument(
        "--sort",
        action="store_true",
        help="Sort entries by name instead of keeping the order the filesystem lists them in.",
    )
    parser.add_argument(
        "--no-follow-symlinks",
        action="store_true",
        help="Do not descend into symbolic links to directories.",
    )
    parser.add_argument(
        "-P",
        "--permission-action",
        choices=["ignore", "fail"],
        default="fail",
        help="How to handle unreadable entries below the root (default: fail).",
    )
    parser.add_argument(
        "-S",
        "--summary",
        action="store_true",
        help="Print directory, file and collapsed-entry counts to stderr.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log traversal details to stderr.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.output is not None and args.output.is_dir():
        raise ValueError(f"Output path is a directory: {args.output}")
