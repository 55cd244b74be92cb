# imports_graph/graph/__init__.py
# AI-Mind (c) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
Imports graph construction.

Components:
- extract: Finds static and dynamic imports in a source file
- resolve: Normalizes a relative import path against the importing file
- build_edges: Runs extraction and resolution over the scanned file set
- compute_heights: Sizes nodes from their incoming and outgoing edges
- build_tree: Groups files into nested directories for clustering
- iter_leaves: Walks the file leaves of a directory tree
- render_dot: Serializes the tree and edges to DOT
"""

from .models import DirectoryTree, Edge, FileId, HeightMap, Label
from .extractor import ExtractedImport, extract
from .resolver import resolve
from .builder import build_edges
from .heights import compute_heights
from .tree import build_tree, iter_leaves
from .dot import DotOptions, render_dot

__all__ = [
    # Core types
    "FileId",
    "Label",
    "Edge",
    "DirectoryTree",
    "HeightMap",
    # Extraction
    "ExtractedImport",
    "extract",
    "resolve",
    # Graph
    "build_edges",
    "compute_heights",
    "build_tree",
    "iter_leaves",
    # Visualization
    "DotOptions",
    "render_dot",
]
