"""Directory-stream backend for the POSIX family."""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Iterator
from dataclasses import dataclass
from typing import override

from .base import ListingBackend, NativeRecord, PathLike

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _DirectoryStream:
    """An open directory stream plus the directory it was opened on."""

    directory: str
    stream: Iterator[os.DirEntry[str]]


class StatBackend(ListingBackend):
    """Backend reading names from a directory stream.

    Directory streams only carry names, so every record is classified and
    sized by a fresh ``stat`` of ``directory/name``. That lookup follows
    symbolic links. When it fails the record is still returned, with the
    directory flag and size left at their defaults.
    """

    name: str = "stat"

    @override
    def open(self, path: PathLike) -> _DirectoryStream:
        directory = os.fspath(path)
        return _DirectoryStream(directory=directory, stream=os.scandir(directory))

    @override
    def read_next(self, resource: object) -> NativeRecord | None:
        assert isinstance(resource, _DirectoryStream)
        try:
            dirent = next(resource.stream, None)
        except OSError as exc:
            # A failing read ends the listing; it is not surfaced to the caller
            logger.debug("Directory read failed in %s: %s", resource.directory, exc)
            return None
        if dirent is None:
            return None

        try:
            st = os.stat(os.path.join(resource.directory, dirent.name))
        except OSError as exc:
            logger.debug("Status lookup failed for %s: %s", dirent.name, exc)
            return NativeRecord(name=dirent.name)

        is_directory = stat.S_ISDIR(st.st_mode)
        return NativeRecord(
            name=dirent.name,
            is_directory=is_directory,
            size=0 if is_directory else st.st_size,
        )

    @override
    def close(self, resource: object) -> None:
        assert isinstance(resource, _DirectoryStream)
        close = getattr(resource.stream, "close", None)
        if close is not None:
            close()
