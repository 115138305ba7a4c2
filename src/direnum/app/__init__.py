"""Application module for direnum."""

from __future__ import annotations

from direnum.app.cli import cli

__all__ = [
    "cli",
]
