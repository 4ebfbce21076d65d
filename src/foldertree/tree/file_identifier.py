"""File identifier for recognising a directory reached again through a symlink."""

import os
from typing import NamedTuple


class FileIdentifier(NamedTuple):
    """Identity of a filesystem object as the pair of its device ID and inode number.

    The builder records the identifier of every directory on the branch it is currently
    walking; meeting one of them again means a symbolic link points back up the branch.

    Note:
        On Windows, inode numbers might be handled differently than on Unix systems,
        but Python's os.stat implementation provides values that can be used
        for uniquely identifying files.
    """

    device_id: int
    inode_number: int

    @classmethod
    def from_stat(cls, stat_result: os.stat_result) -> "FileIdentifier":
        return cls(stat_result.st_dev, stat_result.st_ino)
