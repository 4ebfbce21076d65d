"""Command-line interface for foldertree.

This module is the host of the build, prune and render pipeline: it reads
the root, the selected folders and the exclusion rules from the command line,
runs the pipeline once and writes the rendered tree to stdout or a file.

Exit Codes:
    0: Successful completion
    1: Runtime error during execution
    2: Command-line syntax error
    126: Permission denied
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe on Unix-like systems

Example:
    # Draw a project without its dependencies
    $ foldertree -i node_modules /path/to/project

    # Highlight the src folder
    $ foldertree -s /path/to/project/src /path/to/project
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

from foldertree.cli.argparser import create_parser, validate_args
from foldertree.exceptions import FilesystemError, FolderTreeError
from foldertree.exclusion_rules.composite_rules import CompositeExclusionRules
from foldertree.exclusion_rules.git_rules import GitIgnoreExclusionRules
from foldertree.exclusion_rules.wildcard_rules import WildcardExclusionRules
from foldertree.selection import validate_selection
from foldertree.tree.builder import TreeBuilder
from foldertree.tree.permission_action import PermissionAction
from foldertree.tree.pruner import prune
from foldertree.tree.renderer import TreeCounts, count_nodes, render


def setup_logging(verbose: bool) -> None:
    """Send log records to stderr, at DEBUG level when ``verbose`` is set."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s | %(name)s | %(message)s",
        stream=sys.stderr,
    )


def format_counts(counts: TreeCounts) -> str:
    """Format the counts into a human-readable string.

    Args:
        counts: Node counts of the rendered tree.

    Returns:
        A formatted string showing all counts with appropriate labels.
    """
    result = [
        f"Directories: {counts.directories}",
        f"Files: {counts.files}",
    ]
    if counts.placeholders:
        result.append(f"Collapsed groups: {counts.placeholders}")
    return "\n".join(result)


def write_output(text: str, output: Optional[Path]) -> None:
    """Write the rendered tree to ``output``, or to stdout when it is None."""
    if output is not None:
        output.write_text(text, encoding="utf-8")
        return
    sys.stdout.write(text)
    sys.stdout.flush()


def main() -> None:
    """Main entry point for the foldertree command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        126: Permission denied
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe on Unix-like systems
    """
    try:
        pattern_rules = WildcardExclusionRules()
        gitignore_rules = GitIgnoreExclusionRules()

        parser = create_parser(pattern_rules, gitignore_rules)
        args = parser.parse_args()
        validate_args(args)
        setup_logging(args.verbose)

        permission_action = {
            "ignore": PermissionAction.IGNORE,
            "fail": PermissionAction.RAISE,
        }[args.permission_action]

        builder = TreeBuilder(
            CompositeExclusionRules([pattern_rules, gitignore_rules]),
            permission_action=permission_action,
            follow_symlinks=not args.no_follow_symlinks,
            sort_entries=args.sort,
        )
        tree = builder.build(args.root)
        if args.select:
            tree = prune(tree, validate_selection(args.root, args.select))

        write_output(render(tree), args.output)

        if args.summary:
            print(format_counts(count_nodes(tree)), file=sys.stderr)

    except BrokenPipeError:
        # Keep the interpreter from complaining about stdout again at shutdown
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        sys.exit(141)
    except KeyboardInterrupt:
        sys.exit(130)
    except FilesystemError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(126 if isinstance(e.__cause__, PermissionError) else 1)
    except (FolderTreeError, OSError, ValueError) as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
