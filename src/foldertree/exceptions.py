"""Error kinds raised while building, pruning or rendering a folder tree.

Every error is terminal for the current invocation: no partial tree is
returned. The command-line host translates each kind into a message on
stderr and an exit code.
"""


class FolderTreeError(Exception):
    """Base class for all foldertree errors."""


class NotFoundError(FolderTreeError):
    """
    Exception raised when the root path or a selected path does not exist.

    Attributes:
        path (str): The path that could not be found.

    Example:
        >>> error = NotFoundError("/missing/dir")
        >>> str(error)
        'Path does not exist: /missing/dir'
    """

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Path does not exist: {path}")


class FilesystemError(FolderTreeError):
    """
    Exception raised when a stat or directory listing fails during traversal.

    The originating ``OSError`` is chained as ``__cause__`` so callers can
    distinguish permission problems from other I/O failures.

    Attributes:
        path (str): The path whose access failed.

    Example:
        >>> error = FilesystemError("/root/secret", "Permission denied")
        >>> str(error)
        'Cannot read /root/secret: Permission denied'
    """

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(f"Cannot read {path}: {message}")


class InvalidSelectionError(FolderTreeError, ValueError):
    """
    Exception raised when the set of selected folders cannot be used for pruning.

    This covers an empty selection, a selection that is not a directory, and a
    selection lying outside the root of the tree.

    Example:
        >>> error = InvalidSelectionError("No folders selected")
        >>> str(error)
        'No folders selected'
    """

    pass


class NoCommonAncestorError(FolderTreeError):
    """Exception raised when the selected folders share no node in the tree."""

    pass


class InvalidPatternError(FolderTreeError, ValueError):
    """
    Exception raised when an exclude pattern does not compile to a regular expression.

    Attributes:
        pattern (str): The exclude pattern as supplied by the user.

    Example:
        >>> error = InvalidPatternError("**", "multiple repeat at position 2")
        >>> str(error)
        "Invalid exclude pattern '**': multiple repeat at position 2"
    """

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        super().__init__(f"Invalid exclude pattern {pattern!r}: {reason}")
