# imports_graph/graph/tree.py
# AI-Mind (c) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
Directory tree assembly.

Groups files into nested dicts mirroring their directories. The tree drives
the cluster layout of the DOT output.
"""

from typing import Iterable, Iterator

from .models import DirectoryTree, FileId


def build_tree(files: Iterable[FileId]) -> DirectoryTree:
    """Build a nested directory tree from FileIds.

    Directory segments map to nested dicts. A file is stored under its full
    FileId (not its basename) with value None, so leaves keep their identity.

    Example:
        ["a/x.ts", "b.ts"] -> {"a": {"a/x.ts": None}, "b.ts": None}
    """
    tree: DirectoryTree = {}
    for file in sorted(files):
        *dirs, _ = file.split("/")
        level = tree
        for name in dirs:
            level = level.setdefault(name, {})
        level[file] = None
    return tree


def iter_leaves(tree: DirectoryTree) -> Iterator[FileId]:
    """Yield every file leaf of a tree, depth first in insertion order."""
    for key, child in tree.items():
        if child is None:
            yield key
        else:
            yield from iter_leaves(child)
