"""Validation of selected folders before pruning.

The pruner assumes every selected folder exists, is a directory and lies
inside the tree root. This module checks those preconditions on behalf of
the host and reports each violation with its own error kind.
"""

import os
from typing import List, Sequence

from foldertree.exceptions import InvalidSelectionError, NotFoundError
from foldertree.paths import is_ancestor_or_self, normalize_path
from foldertree.types import PathType


def validate_selection(root: PathType, selected_paths: Sequence[PathType]) -> List[str]:
    """Check the selected folders against ``root`` and return them normalised.

    A relative selection is taken relative to ``root``, not to the working directory.
    Containment is decided on path segments after collapsing ``..``, so
    ``root/../elsewhere`` is rejected even though it starts with ``root``.

    Args:
        root: Root of the tree that will be pruned.
        selected_paths: Folders chosen by the user, absolute or relative to ``root``.

    Returns:
        Absolute, normalised paths in the order given.

    Raises:
        InvalidSelectionError: If nothing is selected, or a selection is not a
            directory or lies outside ``root``.
        NotFoundError: If a selection does not exist.
    """
    if not selected_paths:
        raise InvalidSelectionError("No folders selected")

    root_path = normalize_path(root)
    validated = []
    for selected in selected_paths:
        path = normalize_path(os.path.join(root_path, selected))
        if not os.path.exists(path):
            raise NotFoundError(path)
        if not os.path.isdir(path):
            raise InvalidSelectionError(f"Selected path is not a directory: {path}")
        if not is_ancestor_or_self(root_path, path):
            raise InvalidSelectionError(f"Selected folder is outside the root {root_path}: {path}")
        validated.append(path)
    return validated
