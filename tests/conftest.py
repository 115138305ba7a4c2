"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest

from tests.fixtures.listing_backends import FakeBackend


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Directory holding a.txt (12 bytes), b.txt (empty) and subdirectory sub."""
    root = tmp_path / "D"
    root.mkdir()
    _ = (root / "a.txt").write_bytes(b"hello world\n")
    _ = (root / "b.txt").write_bytes(b"")
    (root / "sub").mkdir()
    _ = (root / "sub" / "nested.txt").write_text("not listed")
    return root


@pytest.fixture
def empty_dir(tmp_path: Path) -> Path:
    """An existing directory with no members."""
    path = tmp_path / "empty"
    path.mkdir()
    return path


@pytest.fixture
def fake_backend() -> FakeBackend:
    """In-memory backend with a few canned listings."""
    return FakeBackend(
        listings={
            "/data": [".", "..", "alpha", "beta", "gamma"],
            "/dots-last": ["alpha", ".", ".."],
            "/only-dots": [".", "..", "..."],
            "/empty": [],
        },
        denied={"/secret"},
    )


@pytest.fixture(autouse=True)
def restore_root_logger() -> Generator[None, None, None]:
    """Undo handler changes made by configure_logging during a test."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
