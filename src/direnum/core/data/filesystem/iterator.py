"""Non-recursive directory iterator over a native listing backend."""

from __future__ import annotations

import copy
import logging
import weakref
from collections.abc import Iterator
from types import TracebackType
from typing import Self

from .backends import ListingBackend, PathLike, get_backend
from .entry import DirectoryEntry
from .handle import ListingHandle

logger = logging.getLogger(__name__)


def is_pseudo_entry(name: str) -> bool:
    """Check whether a listed name is a self or ancestor reference.

    Any name made only of dots is treated as one, whatever its length.
    This covers "." and ".." as well as longer runs.

    Args:
        name: Name as returned by the native listing

    Returns:
        True if the name must be skipped
    """
    return not name.lstrip(".")


class DirectoryIterator:
    """Forward iterator over the members of one directory.

    ``DirectoryIterator(path)`` opens the listing and loads the first real
    entry straight away. ``DirectoryIterator()`` is the end marker: it is
    terminal from the start and every exhausted iterator compares equal to
    it. Both loop styles work::

        for entry in DirectoryIterator(path):
            ...

        it, end = DirectoryIterator(path), DirectoryIterator()
        while it != end:
            use(it.current)
            it.advance()

    A path that cannot be opened (missing, not a directory, access denied)
    produces an iterator that is terminal at once, exactly like an empty
    directory. Nothing is raised.

    The native resource is owned through a reference-counted handle. It is
    released when the listing is exhausted, on ``close()``, when leaving a
    ``with`` block, or when the last owner is garbage collected, and only
    ever once. Copies share the handle and the read position of the
    underlying listing. A single instance must not be advanced from several
    threads at once.
    """

    __hash__ = None  # pyright: ignore[reportAssignmentType]

    def __init__(self, path: PathLike | None = None, backend: ListingBackend | None = None) -> None:
        """Open a directory listing, or build the end marker.

        Args:
            path: Directory to enumerate; None builds the end marker
            backend: Listing backend, defaults to the native one for this platform
        """
        self._backend: ListingBackend | None = backend
        self._handle: ListingHandle | None = None
        self._finalizer: weakref.finalize | None = None
        self._current: DirectoryEntry | None = None
        self._terminal: bool = True

        if path is not None:
            self._open(path)

    @property
    def terminal(self) -> bool:
        """True when no further entries are available."""
        return self._terminal

    @property
    def current(self) -> DirectoryEntry | None:
        """Entry the iterator is positioned on, None once terminal."""
        return self._current

    def advance(self) -> Self:
        """Move to the next entry.

        Advancing a terminal iterator does nothing.

        Returns:
            This iterator, after advancing
        """
        if self._handle is not None:
            self._read()
        return self

    def post_advance(self) -> DirectoryIterator:
        """Move to the next entry, returning the position before the move.

        Returns:
            A copy of this iterator taken before advancing
        """
        previous = copy.copy(self)
        _ = self.advance()
        return previous

    def close(self) -> None:
        """Release the listing early and become terminal."""
        self._release()
        self._current = None
        self._terminal = True

    def _open(self, path: PathLike) -> None:
        if self._backend is None:
            self._backend = get_backend()
        try:
            resource = self._backend.open(path)
        except OSError as exc:
            logger.debug("Cannot open %s for listing: %s", path, exc)
            return

        self._adopt(ListingHandle(self._backend, resource))
        self._terminal = False
        self._read()

    def _read(self) -> None:
        assert self._handle is not None
        while (record := self._handle.read_next()) is not None:
            if is_pseudo_entry(record.name):
                continue
            self._current = DirectoryEntry(
                name=record.name,
                is_directory=record.is_directory,
                size=record.size,
            )
            return

        self._current = None
        self._terminal = True
        self._release()

    def _adopt(self, handle: ListingHandle) -> None:
        self._handle = handle
        # The callback holds the handle, not the iterator, so collection is not delayed
        self._finalizer = weakref.finalize(self, handle.release)

    def _release(self) -> None:
        if self._finalizer is not None:
            # finalize objects run their callback at most once
            _ = self._finalizer()
        self._finalizer = None
        self._handle = None

    def __copy__(self) -> DirectoryIterator:
        clone = DirectoryIterator(backend=self._backend)
        clone._current = self._current
        clone._terminal = self._terminal
        if self._handle is not None:
            clone._adopt(self._handle.retain())
        return clone

    def __deepcopy__(self, memo: dict[int, object]) -> DirectoryIterator:
        # A native listing cannot be duplicated; share it like a shallow copy
        return self.__copy__()

    def __iter__(self) -> Iterator[DirectoryEntry]:
        return self

    def __next__(self) -> DirectoryEntry:
        if self._terminal or self._current is None:
            raise StopIteration
        entry = self._current
        _ = self.advance()
        return entry

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DirectoryIterator):
            return NotImplemented
        if self._terminal or other._terminal:
            return self._terminal and other._terminal
        assert self._current is not None and other._current is not None
        return self._current.name == other._current.name

    def __repr__(self) -> str:
        if self._terminal:
            return "DirectoryIterator(<end>)"
        return f"DirectoryIterator(current={self._current!r})"


def list_directory(path: PathLike, backend: ListingBackend | None = None) -> list[DirectoryEntry]:
    """Collect every member of a directory.

    Args:
        path: Directory to enumerate
        backend: Listing backend, defaults to the native one

    Returns:
        Entries in native enumeration order, empty if the path cannot be listed
    """
    with DirectoryIterator(path, backend) as iterator:
        return list(iterator)
