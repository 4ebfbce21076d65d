"""Path normalisation and segment-wise ancestry tests.

Ancestry is decided by comparing normalised path segments rather than by
computing relative paths, so separators and ``..`` components never leak
into the comparison.
"""

import os
from pathlib import PurePath
from typing import Tuple

from foldertree.types import PathType


def normalize_path(path: PathType) -> str:
    """Return the absolute, normalised form of ``path``.

    ``..`` and ``.`` components are collapsed; symbolic links are not resolved.

    Example:
        >>> normalize_path("/srv/app/../data/./logs")
        '/srv/data/logs'
    """
    return os.path.normpath(os.path.abspath(os.fspath(path)))


def path_parts(path: PathType) -> Tuple[str, ...]:
    """Split a normalised path into its segments.

    Example:
        >>> path_parts("/srv/data/")
        ('/', 'srv', 'data')
    """
    return PurePath(normalize_path(path)).parts


def is_ancestor_or_self(ancestor: PathType, candidate: PathType) -> bool:
    """Check whether ``candidate`` is ``ancestor`` itself or lies beneath it.

    Example:
        >>> is_ancestor_or_self("/srv", "/srv/data")
        True
        >>> is_ancestor_or_self("/srv/data", "/srv")
        False
        >>> is_ancestor_or_self("/srv/data", "/srv/database")
        False
    """
    return is_segment_prefix(path_parts(ancestor), path_parts(candidate))


def is_segment_prefix(prefix: Tuple[str, ...], parts: Tuple[str, ...]) -> bool:
    """Check whether the segment tuple ``prefix`` starts ``parts``."""
    return len(prefix) <= len(parts) and parts[: len(prefix)] == prefix
