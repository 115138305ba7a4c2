"""Capability interface over a native directory-listing facility."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass

type PathLike = str | os.PathLike[str]


@dataclass(frozen=True, slots=True)
class NativeRecord:
    """One record read from a native listing.

    Attributes:
        name: Member name as returned by the listing
        is_directory: Directory flag, False when it could not be determined
        size: Byte length, 0 for directories or when it could not be determined
    """

    name: str
    is_directory: bool = False
    size: int = 0


class ListingBackend(ABC):
    """Contract for opening, reading and closing a native directory listing.

    The resource returned by ``open`` is opaque to callers. ``close`` is not
    guaranteed to be safe when called twice on the same resource, so callers
    must arrange for it to run exactly once.
    """

    name: str = "abstract"

    @abstractmethod
    def open(self, path: PathLike) -> object:
        """Open a directory for listing.

        Args:
            path: Directory to list

        Returns:
            Opaque native resource

        Raises:
            OSError: If the path is missing, not a directory or inaccessible
        """
        pass

    @abstractmethod
    def read_next(self, resource: object) -> NativeRecord | None:
        """Read the next record from an open listing.

        Args:
            resource: Resource returned by ``open``

        Returns:
            The next record, or None at end of directory
        """
        pass

    @abstractmethod
    def close(self, resource: object) -> None:
        """Release a resource returned by ``open``."""
        pass
