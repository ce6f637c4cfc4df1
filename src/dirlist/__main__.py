"""Application entry point for dirlist."""

from __future__ import annotations

from dirlist.app.cli import cli

__all__ = ["main"]


def main() -> None:
    """Run the command-line interface and exit with its status."""
    cli(prog_name="dirlist")


if __name__ == "__main__":
    main()
