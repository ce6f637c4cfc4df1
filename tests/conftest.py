"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Generator, Mapping
from pathlib import Path

import pytest

from dirlist.utils.logging import PACKAGE_LOGGER

# Nested mapping: str values are file contents, Mapping values are directories
TreeLayout = Mapping[str, "str | TreeLayout"]


def build_tree(root: Path, layout: TreeLayout) -> None:
    """Create files and directories under ``root`` from a nested mapping."""
    for name, content in layout.items():
        target = root / name
        if isinstance(content, str):
            _ = target.write_text(content)
        else:
            target.mkdir()
            build_tree(target, content)


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[TreeLayout], Path]:
    """Return a factory that builds a directory tree inside ``tmp_path``."""

    def factory(layout: TreeLayout) -> Path:
        root = tmp_path / "root"
        root.mkdir()
        build_tree(root, layout)
        return root

    return factory


@pytest.fixture
def set_mtime() -> Callable[[Path, float], None]:
    """Return a helper that sets both access and modification time of a path."""

    def setter(path: Path, timestamp: float) -> None:
        os.utime(path, (timestamp, timestamp))

    return setter


@pytest.fixture(autouse=True)
def reset_package_logger() -> Generator[None, None, None]:
    """Drop handlers installed by configure_logging between tests."""
    yield
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
