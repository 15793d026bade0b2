"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[..., Path]:
    """Build a directory tree under tmp_path from relative paths.

    Paths ending in ``/`` are created as directories, everything else as
    small files (parent directories are created as needed).
    """

    def _make(*paths: str) -> Path:
        for rel in paths:
            target = tmp_path / rel
            if rel.endswith("/"):
                target.mkdir(parents=True, exist_ok=True)
            else:
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_text("content")
        return tmp_path

    return _make


@pytest.fixture
def project_tree(make_tree: Callable[..., Path]) -> Path:
    """Sample .NET-style project tree with nested build output."""
    return make_tree(
        "src/App/App.csproj",
        "src/App/bin/Debug/App.dll",
        "src/App/obj/project.assets.json",
        "src/Lib/binary/keep.txt",
        "src/Lib/cabinet/",
        "src/Lib/obj2/",
        "tools/bin/debug/tool.exe",
        "docs/readme.md",
    )
