"""Test suite for reference-counted listing handles."""

from __future__ import annotations

import pytest

from direnum.core.data.filesystem.backends import NativeRecord
from direnum.core.data.filesystem.handle import ListingHandle
from tests.fixtures.listing_backends import FakeBackend


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend(listings={"/d": ["one", "two"]})


@pytest.mark.unit
class TestListingHandle:
    """Test the ListingHandle ownership rules."""

    def test_single_owner_release_closes(self, backend: FakeBackend) -> None:
        """Releasing the only reference closes the resource."""
        handle = ListingHandle(backend, backend.open("/d"))

        handle.release()

        assert handle.closed
        assert handle.refs == 0
        assert backend.close_calls == 1

    def test_release_after_close_is_noop(self, backend: FakeBackend) -> None:
        """Extra releases never reach the backend."""
        handle = ListingHandle(backend, backend.open("/d"))

        handle.release()
        handle.release()

        assert backend.close_calls == 1

    def test_closes_on_last_release(self, backend: FakeBackend) -> None:
        """Retained handles stay open until every owner released."""
        handle = ListingHandle(backend, backend.open("/d"))
        assert handle.retain() is handle
        _ = handle.retain()
        assert handle.refs == 3

        handle.release()
        handle.release()
        assert not handle.closed
        assert backend.close_calls == 0

        handle.release()
        assert handle.closed
        assert backend.close_calls == 1

    def test_retain_after_close_fails(self, backend: FakeBackend) -> None:
        """A closed handle cannot gain owners."""
        handle = ListingHandle(backend, backend.open("/d"))
        handle.release()

        with pytest.raises(RuntimeError, match="closed listing handle"):
            _ = handle.retain()

    def test_read_next(self, backend: FakeBackend) -> None:
        """Reads are forwarded to the backend until the listing ends."""
        handle = ListingHandle(backend, backend.open("/d"))

        assert handle.read_next() == NativeRecord("one")
        assert handle.read_next() == NativeRecord("two")
        assert handle.read_next() is None

    def test_read_after_close_returns_none(self, backend: FakeBackend) -> None:
        """A closed handle reads as end of directory."""
        handle = ListingHandle(backend, backend.open("/d"))
        handle.release()

        assert handle.read_next() is None
