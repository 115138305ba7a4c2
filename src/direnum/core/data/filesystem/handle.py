"""Reference-counted ownership of one native listing resource."""

from __future__ import annotations

import logging

from .backends import ListingBackend, NativeRecord

logger = logging.getLogger(__name__)


class ListingHandle:
    """Owner of an open native listing resource.

    A handle starts with one reference, held by whoever opened it. Each
    additional owner calls ``retain`` and every owner calls ``release``
    once. The backend's close routine runs when the last reference is
    released, and never again afterwards.
    """

    __slots__ = ("_backend", "_resource", "_refs")

    def __init__(self, backend: ListingBackend, resource: object) -> None:
        """Take ownership of an open resource.

        Args:
            backend: Backend that opened the resource
            resource: Opaque resource returned by ``backend.open``
        """
        self._backend: ListingBackend = backend
        self._resource: object | None = resource
        self._refs: int = 1

    @property
    def closed(self) -> bool:
        """True once the native resource has been released."""
        return self._resource is None

    @property
    def refs(self) -> int:
        """Number of owners still holding the handle."""
        return self._refs

    def retain(self) -> ListingHandle:
        """Register one more owner.

        Returns:
            This handle, for chaining into the new owner

        Raises:
            RuntimeError: If the resource was already released
        """
        if self._resource is None:
            raise RuntimeError("Cannot retain a closed listing handle")
        self._refs += 1
        return self

    def release(self) -> None:
        """Drop one owner, closing the resource when none remain."""
        if self._resource is None:
            return
        self._refs -= 1
        if self._refs > 0:
            return

        resource, self._resource = self._resource, None
        logger.debug("Closing %s listing resource", self._backend.name)
        self._backend.close(resource)

    def read_next(self) -> NativeRecord | None:
        """Read the next record, or None at end of directory or once closed."""
        if self._resource is None:
            return None
        return self._backend.read_next(self._resource)
