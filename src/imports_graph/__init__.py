# imports_graph/__init__.py
# AI-Mind (c) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
Imports dependency graph for JavaScript / TypeScript source trees.

Scans a directory, finds which files import which, and emits a DOT graph
with one cluster per directory, ready for Graphviz.

Usage:
    from imports_graph import imports_graph_dot
    dot = imports_graph_dot("src", ignore=["*.test.ts"])

Components:
- GraphConfig: Run options, from code, YAML or environment
- create_graph: Full pipeline from a GraphConfig to DOT text
- imports_graph_dot / imports_graph_svg: One-call helpers
- graph: Extraction, resolution, edges, heights, tree and DOT writer
"""

from .config import GraphConfig
from .files import IgnorePatternError, discover_files
from .pipeline import create_graph, imports_graph_dot, imports_graph_svg
from .render import RenderError, render_svg

__all__ = [
    # Config
    "GraphConfig",
    # Pipeline
    "create_graph",
    "imports_graph_dot",
    "imports_graph_svg",
    "discover_files",
    # Rendering
    "render_svg",
    # Errors
    "IgnorePatternError",
    "RenderError",
]
