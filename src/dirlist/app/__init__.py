"""Application module for dirlist."""

from __future__ import annotations

from dirlist.app.cli import cli
from dirlist.app.runner import ApplicationRunner

__all__ = [
    "cli",
    "ApplicationRunner",
]
