# imports_graph/pipeline.py
# AI-Mind (c) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
End-to-end graph generation.

Composes the stages in order:
- Discover the scanned file set (walk, git tracking, ignore patterns)
- Build edges (extract + resolve per file, concurrently)
- Compute node heights
- Assemble the directory tree and serialize everything to DOT
"""

import logging
from functools import partial
from pathlib import Path
from typing import Iterable

from .config import GraphConfig
from .files import discover_files, read_source
from .graph import DotOptions, build_edges, build_tree, compute_heights, iter_leaves, render_dot
from .render import render_svg

logger = logging.getLogger(__name__)


def create_graph(config: GraphConfig) -> str:
    """Generate the DOT text of the imports graph for a configuration.

    Raises:
        IgnorePatternError: If an ignore pattern is invalid.
        FileNotFoundError: If the root directory does not exist.
    """
    files = discover_files(config.root, config.extensions, config.ignore)

    edges = build_edges(
        files,
        partial(read_source, config.root),
        max_workers=config.max_workers,
    )
    logger.info(f"Built {len(edges)} edges between {len(files)} files")

    heights = compute_heights(edges, files)
    tree = build_tree(files)
    logger.info(f"Rendering {sum(1 for _ in iter_leaves(tree))} nodes")
    options = DotOptions(no_dir=config.no_dir, reverse=config.reverse)
    return render_dot(tree, edges, heights, options)


def imports_graph_dot(
    root: str = ".",
    ignore: Iterable[str] = (),
    no_dir: bool = False,
    reverse: bool = False,
) -> str:
    """Return DOT text of the imports graph for a root directory."""
    config = GraphConfig(
        root=Path(root), ignore=list(ignore), no_dir=no_dir, reverse=reverse
    )
    return create_graph(config)


def imports_graph_svg(
    root: str = ".",
    ignore: Iterable[str] = (),
    no_dir: bool = False,
    reverse: bool = False,
) -> str:
    """Return the imports graph for a root directory rendered as SVG."""
    return render_svg(imports_graph_dot(root, ignore, no_dir, reverse))
