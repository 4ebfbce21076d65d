"""Permission action enum for handling read errors during directory traversal."""

from enum import Enum


class PermissionAction(str, Enum):
    """Action to take when a directory entry cannot be read during traversal.

    Values:
        RAISE: Abort the whole build with a FilesystemError (default behavior)
        IGNORE: Keep the entry as a node but skip its contents, logging a warning
    """

    RAISE = "raise"
    IGNORE = "ignore"
