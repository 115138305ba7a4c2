"""Search-handle backend for the Windows family."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from typing import cast, override

from .base import ListingBackend, NativeRecord, PathLike

logger = logging.getLogger(__name__)


class ScandirBackend(ListingBackend):
    """Backend taking classification and size from the listing record itself.

    On Windows a search handle returns attributes and size along with each
    name, and ``DirEntry`` serves ``is_dir()`` and ``stat()`` from that data
    without another system call. Elsewhere the same calls fall back to a
    lookup, which keeps this backend usable on any platform.
    """

    name: str = "scandir"

    @override
    def open(self, path: PathLike) -> Iterator[os.DirEntry[str]]:
        return os.scandir(os.fspath(path))

    @override
    def read_next(self, resource: object) -> NativeRecord | None:
        handle = cast(Iterator[os.DirEntry[str]], resource)
        try:
            dirent = next(handle, None)
        except OSError as exc:
            logger.debug("Search handle read failed: %s", exc)
            return None
        if dirent is None:
            return None

        try:
            is_directory = dirent.is_dir()
            size = 0 if is_directory else dirent.stat().st_size
        except OSError as exc:
            logger.debug("Attribute lookup failed for %s: %s", dirent.name, exc)
            return NativeRecord(name=dirent.name)

        return NativeRecord(name=dirent.name, is_directory=is_directory, size=size)

    @override
    def close(self, resource: object) -> None:
        close = getattr(resource, "close", None)
        if close is not None:
            close()
