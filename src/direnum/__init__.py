"""direnum - non-recursive directory enumeration.

This package provides a single forward iterator over the members of a
directory, backed by the native listing facility of the platform, plus a
small command-line front end.
"""

from direnum.__main__ import main
from direnum.core.data.filesystem import (
    DirectoryEntry,
    DirectoryIterator,
    list_directory,
)

__all__ = [
    "DirectoryEntry",
    "DirectoryIterator",
    "list_directory",
    "main",
]
