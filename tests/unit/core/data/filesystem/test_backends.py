"""Test suite for native listing backends."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path
from typing import override
from unittest.mock import Mock, patch

import pytest

from direnum.core.data.filesystem.backends import (
    BACKENDS,
    NATIVE_BACKEND_NAME,
    ListingBackend,
    NativeRecord,
    ScandirBackend,
    StatBackend,
    get_backend,
)
from direnum.core.data.filesystem.backends.posix import _DirectoryStream  # pyright: ignore[reportPrivateUsage]


class FailingStream(Iterator[os.DirEntry[str]]):
    """Directory stream whose every read fails."""

    @override
    def __next__(self) -> os.DirEntry[str]:
        raise OSError("device went away")


def drain(backend: ListingBackend, path: Path) -> list[NativeRecord]:
    resource = backend.open(path)
    records: list[NativeRecord] = []
    try:
        while (record := backend.read_next(resource)) is not None:
            records.append(record)
    finally:
        backend.close(resource)
    return records


@pytest.mark.unit
class TestBackendSelection:
    """Test backend registry and native selection."""

    def test_native_backend_matches_platform(self) -> None:
        """Windows uses search-handle records, everything else uses stat."""
        expected = "scandir" if os.name == "nt" else "stat"

        assert NATIVE_BACKEND_NAME == expected
        assert isinstance(get_backend(), BACKENDS[expected])

    def test_get_backend_by_name(self) -> None:
        """Every registered name resolves to its class."""
        assert isinstance(get_backend("stat"), StatBackend)
        assert isinstance(get_backend("scandir"), ScandirBackend)

    def test_get_backend_returns_new_instances(self) -> None:
        """Backends are not shared between callers."""
        assert get_backend("stat") is not get_backend("stat")

    def test_unknown_backend(self) -> None:
        """Unknown names are rejected with the valid options."""
        with pytest.raises(ValueError, match="Unknown listing backend 'ftp'.*auto, scandir, stat"):
            _ = get_backend("ftp")


@pytest.mark.unit
@pytest.mark.parametrize("backend_cls", [StatBackend, ScandirBackend], ids=["stat", "scandir"])
class TestBackendContract:
    """Test the open / read_next / close contract on real directories."""

    def test_records_carry_classification_and_size(
        self, backend_cls: type[ListingBackend], sample_tree: Path
    ) -> None:
        """Files report their size, directories report size 0."""
        records = {record.name: record for record in drain(backend_cls(), sample_tree)}

        assert records["a.txt"] == NativeRecord("a.txt", is_directory=False, size=12)
        assert records["b.txt"] == NativeRecord("b.txt", is_directory=False, size=0)
        assert records["sub"] == NativeRecord("sub", is_directory=True, size=0)

    def test_open_missing_raises(self, backend_cls: type[ListingBackend], tmp_path: Path) -> None:
        """Open failures surface as OSError for the iterator to absorb."""
        with pytest.raises(FileNotFoundError):
            _ = backend_cls().open(tmp_path / "missing")

    def test_open_file_raises(self, backend_cls: type[ListingBackend], sample_tree: Path) -> None:
        """A regular file cannot be opened for listing."""
        with pytest.raises(OSError):
            _ = backend_cls().open(sample_tree / "a.txt")

    def test_end_of_directory_is_none(self, backend_cls: type[ListingBackend], empty_dir: Path) -> None:
        """An empty directory reads as end of directory at once."""
        backend = backend_cls()
        resource = backend.open(empty_dir)

        assert backend.read_next(resource) is None
        backend.close(resource)


@pytest.mark.unit
class TestStatBackend:
    """Test StatBackend per-record lookups."""

    def test_stat_failure_gives_partial_record(self, sample_tree: Path) -> None:
        """A failing status lookup keeps the name and defaults the rest."""
        backend = StatBackend()
        resource = backend.open(sample_tree)

        with patch("direnum.core.data.filesystem.backends.posix.os.stat", side_effect=PermissionError("denied")):
            record = backend.read_next(resource)

        backend.close(resource)
        assert record is not None
        assert record.name in {"a.txt", "b.txt", "sub"}
        assert not record.is_directory
        assert record.size == 0

    def test_read_failure_ends_listing(self, tmp_path: Path) -> None:
        """An error from the directory stream is treated as end of directory."""
        resource = _DirectoryStream(directory=str(tmp_path), stream=FailingStream())

        assert StatBackend().read_next(resource) is None


@pytest.mark.unit
class TestScandirBackend:
    """Test ScandirBackend per-record lookups."""

    def test_attribute_failure_gives_partial_record(self) -> None:
        """A failing attribute lookup keeps the name and defaults the rest."""
        dirent = Mock(spec=["name", "is_dir", "stat"])
        dirent.name = "locked"
        dirent.is_dir.side_effect = PermissionError("denied")

        record = ScandirBackend().read_next(iter([dirent]))

        assert record == NativeRecord("locked")
        assert not record.is_directory
        assert record.size == 0

    def test_read_failure_ends_listing(self) -> None:
        """An error from the search handle is treated as end of directory."""
        assert ScandirBackend().read_next(FailingStream()) is None

    def test_close_tolerates_plain_iterators(self) -> None:
        """Resources without a close method are simply dropped."""
        ScandirBackend().close(iter([]))
