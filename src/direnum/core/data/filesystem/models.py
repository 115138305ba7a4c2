"""File type and attribute value types."""

from __future__ import annotations

import stat
from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum


class FileType(IntEnum):
    """Enumeration of file types a path can resolve to."""

    NONE = 0  # not determined, or an error occurred while determining it
    NOT_FOUND = -1  # pseudo-type: absence is not an error
    REGULAR = 1
    DIRECTORY = 2
    SYMLINK = 3
    BLOCK = 4
    CHARACTER = 5
    FIFO = 6
    SOCKET = 7
    UNKNOWN = 8  # exists, but of a type not covered above

    @classmethod
    def from_mode(cls, mode: int) -> FileType:
        """Classify a ``st_mode`` value.

        Args:
            mode: Mode bits from a stat result

        Returns:
            Matching file type, UNKNOWN for anything unrecognised
        """
        if stat.S_ISREG(mode):
            return cls.REGULAR
        if stat.S_ISDIR(mode):
            return cls.DIRECTORY
        if stat.S_ISLNK(mode):
            return cls.SYMLINK
        if stat.S_ISBLK(mode):
            return cls.BLOCK
        if stat.S_ISCHR(mode):
            return cls.CHARACTER
        if stat.S_ISFIFO(mode):
            return cls.FIFO
        if stat.S_ISSOCK(mode):
            return cls.SOCKET
        return cls.UNKNOWN


@dataclass(frozen=True, slots=True)
class Attribute:
    """Size, classification and modification time of a filesystem object."""

    bytes: int
    is_directory: bool
    modified: datetime
