# imports_graph/graph/heights.py
# AI-Mind (c) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""Node sizing from incoming and outgoing edge weight."""

from collections import Counter
from typing import Iterable

from .models import Edge, FileId, HeightMap

HEIGHT_SCALE = 0.25
MIN_HEIGHT = 0.5


def compute_heights(edges: Iterable[Edge], files: Iterable[FileId]) -> HeightMap:
    """Compute a display height for every file.

    Each edge adds its weight to the importer's outgoing and the imported
    file's incoming total. The larger total decides the height, so files
    with many dependents or many dependencies are drawn taller.

    Args:
        edges: Edges between files of the set
        files: The scanned file set

    Returns:
        FileId -> height, at least MIN_HEIGHT. Only files of the set appear.
    """
    outgoing: Counter[FileId] = Counter()
    incoming: Counter[FileId] = Counter()

    for edge in edges:
        outgoing[edge.importer] += edge.weight
        incoming[edge.imported] += edge.weight

    return {
        file: max(incoming[file], outgoing[file]) * HEIGHT_SCALE + MIN_HEIGHT
        for file in files
    }
