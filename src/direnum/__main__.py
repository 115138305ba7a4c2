"""Application entry point for direnum."""

from __future__ import annotations

from direnum.app.cli import cli

__all__ = ["main"]


def main() -> None:
    """Run the command-line interface."""
    cli()


if __name__ == "__main__":
    main()
