# tests/conftest.py
# AI-Mind (C) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
Pytest configuration for imports-graph tests.

Ensures the src package is importable and provides on-disk source trees.
"""

import shutil
import subprocess
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

# Add src directory to path for local packages
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


@pytest.fixture
def make_tree(tmp_path):
    """Write a {relative_path: content} mapping under tmp_path.

    Returns the root directory.
    """

    def _make(files: dict[str, str]) -> Path:
        for rel, content in files.items():
            path = tmp_path / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return tmp_path

    return _make


@pytest.fixture
def no_git():
    """Make git tracking unavailable so every walked file is scanned."""
    with patch("imports_graph.files.git_tracked_files", return_value=None) as mock:
        yield mock


@pytest.fixture
def git_init():
    """Turn a directory into a fresh git repository, skipping without git."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")

    def _init(root: Path) -> Path:
        subprocess.run(["git", "init", "-q"], cwd=root, check=True, capture_output=True)
        return root

    return _init
