"""Lexical path value used as the identity key of directory entries."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .models import FileType

# Both separators are accepted so names coming from either platform split the same way
_SEPARATORS = ("/", "\\")


@dataclass(frozen=True, slots=True)
class FsPath:
    """A path string, handled lexically.

    The text is not required to exist on disk, nor to be valid for the
    current operating system. Only ``what()`` touches the filesystem.
    """

    text: str = ""

    def __str__(self) -> str:
        return self.text

    def __fspath__(self) -> str:
        return self.text

    @property
    def is_empty(self) -> bool:
        """True when the path has no text at all."""
        return not self.text

    @property
    def name(self) -> str:
        """Last component of the path.

        Returns:
            Text after the final separator, or the whole text if there is none
        """
        index = _last_separator(self.text)
        return self.text[index + 1 :] if index >= 0 else self.text

    def root(self) -> FsPath:
        """Containing part of the path, up to and including the last separator."""
        index = _last_separator(self.text)
        return FsPath(self.text[: index + 1]) if index >= 0 else FsPath()

    def what(self) -> FileType:
        """Classify the path on disk without following a final symlink.

        Returns:
            FileType of the object, NOT_FOUND if it does not exist,
            NONE if the lookup failed for any other reason
        """
        if self.is_empty:
            return FileType.NOT_FOUND
        try:
            return FileType.from_mode(os.lstat(self.text).st_mode)
        except FileNotFoundError:
            return FileType.NOT_FOUND
        except OSError:
            return FileType.NONE


def _last_separator(text: str) -> int:
    return max(text.rfind(sep) for sep in _SEPARATORS)
