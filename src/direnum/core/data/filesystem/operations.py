"""Single-call filesystem helpers: attributes, sizes and directory maintenance.

Every helper reports failure through its return value and logs the
underlying error at DEBUG level. Nothing here raises ``OSError``.
"""

from __future__ import annotations

import logging
import os
import stat
from datetime import datetime
from pathlib import Path

from .backends import PathLike
from .iterator import DirectoryIterator
from .models import Attribute
from .path import FsPath

logger = logging.getLogger(__name__)


def file_attrib(path: PathLike) -> Attribute | None:
    """Look up size, directory flag and modification time.

    Args:
        path: File or directory to inspect

    Returns:
        Attribute for the path, or None if it cannot be accessed
    """
    try:
        st = os.stat(path)
    except OSError as exc:
        logger.debug("Attribute lookup failed for %s: %s", path, exc)
        return None

    is_directory = stat.S_ISDIR(st.st_mode)
    return Attribute(
        bytes=0 if is_directory else st.st_size,
        is_directory=is_directory,
        modified=datetime.fromtimestamp(st.st_mtime),
    )


def filesize(path: PathLike) -> int:
    """Size of a file in bytes, 0 for directories or if it cannot be accessed."""
    try:
        st = os.stat(path)
    except OSError as exc:
        logger.debug("Size lookup failed for %s: %s", path, exc)
        return 0
    return 0 if stat.S_ISDIR(st.st_mode) else st.st_size


def modified_file_time(path: PathLike) -> datetime | None:
    """Local modification time of a path, None if it cannot be accessed."""
    try:
        return datetime.fromtimestamp(os.stat(path).st_mtime)
    except OSError as exc:
        logger.debug("Modification time lookup failed for %s: %s", path, exc)
        return None


def mkdir(path: PathLike) -> tuple[bool, bool]:
    """Create a directory, including any missing parents.

    Args:
        path: Directory to create

    Returns:
        Tuple of (directory exists afterwards, it already existed before)
    """
    target = Path(path)
    if target.is_dir():
        return True, True
    try:
        target.mkdir(parents=True)
    except FileExistsError:
        # Lost a race with another creator, or a non-directory is in the way
        return target.is_dir(), target.is_dir()
    except OSError as exc:
        logger.debug("Cannot create directory %s: %s", path, exc)
        return False, False
    return True, False


def rmfile(path: PathLike) -> bool:
    """Remove a single file.

    Returns:
        True if the file was removed
    """
    try:
        os.remove(path)
    except OSError as exc:
        logger.debug("Cannot remove file %s: %s", path, exc)
        return False
    return True


def rmdir(path: PathLike, fails_if_not_empty: bool) -> bool:
    """Remove a directory.

    A symbolic link passed as ``path`` is refused without touching its target.

    Args:
        path: Directory to remove
        fails_if_not_empty: When False, the directory's contents are removed
            first, depth first. When True, a non-empty directory is left alone.

    Returns:
        True if the directory was removed
    """
    directory = os.fspath(path)
    if os.path.islink(directory):
        logger.debug("Not removing %s: it is a symbolic link", directory)
        return False
    if not fails_if_not_empty:
        # Collect before deleting so the listing is not modified while it is read
        with DirectoryIterator(directory) as iterator:
            entries = list(iterator)
        for entry in entries:
            child = os.path.join(directory, entry.name)
            if entry.is_directory and not os.path.islink(child):
                _ = rmdir(child, fails_if_not_empty=False)
            else:
                _ = rmfile(child)

    try:
        os.rmdir(directory)
    except OSError as exc:
        logger.debug("Cannot remove directory %s: %s", directory, exc)
        return False
    return True


def path_user() -> str:
    """Home directory of the current user, empty if it cannot be determined."""
    try:
        return str(Path.home())
    except (OSError, RuntimeError) as exc:
        logger.debug("Cannot determine home directory: %s", exc)
        return ""


def path_current() -> str:
    """Current working directory, empty if it no longer exists."""
    try:
        return os.getcwd()
    except OSError as exc:
        logger.debug("Cannot determine working directory: %s", exc)
        return ""


def root(path: PathLike) -> str:
    """Path text up to and including its last separator, empty if it has none."""
    return FsPath(os.fspath(path)).root().text
