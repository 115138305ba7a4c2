"""Directory entry model produced by the directory iterator."""

from __future__ import annotations

from dataclasses import dataclass, field

from .path import FsPath


@dataclass(frozen=True, slots=True)
class DirectoryEntry:
    """One member of a directory.

    Entries compare and hash by name only: classification and size are
    carried along but never take part in equality. Each iterator step
    produces a new entry, so holding on to one across an advance is safe.

    Attributes:
        name: Member name within its parent directory (not a full path)
        is_directory: Whether the member was a directory when enumerated
        size: Byte length reported by the listing, 0 for directories
    """

    name: str
    is_directory: bool = field(default=False, compare=False)
    size: int = field(default=0, compare=False)

    def __fspath__(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name

    @property
    def path(self) -> FsPath:
        """Entry name as a path value."""
        return FsPath(self.name)
