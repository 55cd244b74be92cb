# imports_graph/graph/builder.py
# AI-Mind (c) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
Edge construction for the imports graph.

Each file is read and scanned independently in a thread pool. Workers only
return their own results; merging and sorting happen after all of them
finish, so no state is shared between threads.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, Optional

from .extractor import extract
from .models import Edge, FileId, Label
from .resolver import resolve

logger = logging.getLogger(__name__)

FileReader = Callable[[FileId], str]


def file_imports(
    importer: FileId, content: str, known: frozenset[FileId]
) -> dict[FileId, list[Label]]:
    """Collect label fragments per imported file of the scanned set.

    Args:
        importer: FileId of the file being scanned
        content: Source code of the file
        known: The scanned file set; imports outside it are dropped

    Returns:
        imported FileId -> label fragments in source order, including
        the empty fragments of bare imports.
    """
    imports: dict[FileId, list[Label]] = {}
    for label, raw_path in extract(content):
        target = resolve(importer, raw_path)
        if target not in known:
            continue
        imports.setdefault(target, []).append(label)
    return imports


def build_edges(
    files: Iterable[FileId],
    read_file: FileReader,
    max_workers: Optional[int] = None,
) -> list[Edge]:
    """Build the edge list for a set of files.

    Args:
        files: The scanned file set
        read_file: Returns the content of a FileId
        max_workers: Thread pool size, None for the executor default

    Returns:
        Edges sorted by (importer, imported). Repeated imports between the
        same pair are merged into one edge. Self-loops are kept.
    """
    known = frozenset(files)

    def scan(importer: FileId) -> dict[FileId, list[Label]]:
        try:
            content = read_file(importer)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read {importer}: {e}")
            return {}
        return file_imports(importer, content, known)

    ordered = sorted(known)
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        results = list(pool.map(scan, ordered))

    edges = []
    for importer, imports in zip(ordered, results):
        for imported, labels in imports.items():
            edges.append(Edge(importer, imported, tuple(labels)))

    edges.sort(key=lambda edge: (edge.importer, edge.imported))
    loops = sum(1 for edge in edges if edge.is_self_loop)
    logger.debug(f"Built {len(edges)} edges from {len(ordered)} files, {loops} self-imports")
    return edges
