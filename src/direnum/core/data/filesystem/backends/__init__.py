"""Native listing backends and build-time backend selection."""

from __future__ import annotations

import os
from typing import Final

from .base import ListingBackend, NativeRecord, PathLike
from .posix import StatBackend
from .windows import ScandirBackend

BACKENDS: Final[dict[str, type[ListingBackend]]] = {
    StatBackend.name: StatBackend,
    ScandirBackend.name: ScandirBackend,
}

# Resolved once, when the package is imported
NATIVE_BACKEND_NAME: Final[str] = ScandirBackend.name if os.name == "nt" else StatBackend.name


def get_backend(name: str = "auto") -> ListingBackend:
    """Create a listing backend by name.

    Args:
        name: "auto" for the native backend of this platform, or a key of BACKENDS

    Returns:
        New backend instance

    Raises:
        ValueError: If the name is not a known backend
    """
    key = NATIVE_BACKEND_NAME if name == "auto" else name
    try:
        backend_cls = BACKENDS[key]
    except KeyError:
        known = ", ".join(sorted(["auto", *BACKENDS]))
        msg = f"Unknown listing backend '{name}'. Valid options: {known}"
        raise ValueError(msg) from None
    return backend_cls()


__all__ = [
    "BACKENDS",
    "NATIVE_BACKEND_NAME",
    "ListingBackend",
    "NativeRecord",
    "PathLike",
    "ScandirBackend",
    "StatBackend",
    "get_backend",
]
