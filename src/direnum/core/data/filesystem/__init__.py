"""Directory enumeration over native listing backends."""

from __future__ import annotations

from .backends import (
    BACKENDS,
    NATIVE_BACKEND_NAME,
    ListingBackend,
    NativeRecord,
    ScandirBackend,
    StatBackend,
    get_backend,
)
from .entry import DirectoryEntry
from .handle import ListingHandle
from .iterator import DirectoryIterator, is_pseudo_entry, list_directory
from .models import Attribute, FileType
from .operations import (
    file_attrib,
    filesize,
    mkdir,
    modified_file_time,
    path_current,
    path_user,
    rmdir,
    rmfile,
    root,
)
from .path import FsPath

__all__ = [
    "BACKENDS",
    "NATIVE_BACKEND_NAME",
    "Attribute",
    "DirectoryEntry",
    "DirectoryIterator",
    "FileType",
    "FsPath",
    "ListingBackend",
    "ListingHandle",
    "NativeRecord",
    "ScandirBackend",
    "StatBackend",
    "file_attrib",
    "filesize",
    "get_backend",
    "is_pseudo_entry",
    "list_directory",
    "mkdir",
    "modified_file_time",
    "path_current",
    "path_user",
    "rmdir",
    "rmfile",
    "root",
]
