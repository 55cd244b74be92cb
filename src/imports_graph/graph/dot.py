# imports_graph/graph/dot.py
# AI-Mind (c) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
DOT diagram generation from the imports graph.

Produces a `strict digraph` with one cluster per directory and one node per
file, followed by all edges outside of any cluster. Indentation depth is
passed down explicitly while recursing.
"""

import posixpath
import re
from dataclasses import dataclass
from typing import Iterable

from .models import LABEL_SEPARATOR, DirectoryTree, Edge, FileId, HeightMap
from .heights import MIN_HEIGHT

INDENT = "\t"

GRAPH_ATTRIBUTES = (
    'graph [ rankdir="LR"; labelloc="b"; concentrate=true; '
    "overlap=false; splines=true; color=blue]"
)
NODE_ATTRIBUTES = "node [shape=box, fontsize=16, color=blue];"
EDGE_ATTRIBUTES = "edge [fontsize=12, color=blue];"
NO_CLUSTER_RANK = 'clusterrank="none";'
CLUSTER_FONTSIZE = 24

_NON_WORD_RE = re.compile(r"\W", re.ASCII)


@dataclass(frozen=True)
class DotOptions:
    """Rendering switches.

    Attributes:
        no_dir: Disable cluster ranking so directories do not group nodes.
        reverse: Draw arrows from the imported file to the importer.
        name: Graph name.
    """

    no_dir: bool = False
    reverse: bool = False
    name: str = "imports"


def render_dot(
    tree: DirectoryTree,
    edges: Iterable[Edge],
    heights: HeightMap,
    options: DotOptions = DotOptions(),
) -> str:
    """Generate the DOT text for an imports graph.

    Args:
        tree: Directory tree of the scanned files
        edges: Edges between files of the tree
        heights: Node heights, files missing here get MIN_HEIGHT
        options: Rendering switches

    Returns:
        DOT graph definition string.
    """
    lines = [f"strict digraph {options.name} {{"]
    lines.append(_indent(1) + GRAPH_ATTRIBUTES)
    lines.append(_indent(1) + NODE_ATTRIBUTES)
    lines.append(_indent(1) + EDGE_ATTRIBUTES)
    if options.no_dir:
        lines.append(_indent(1) + NO_CLUSTER_RANK)

    lines.extend(_render_level(tree, heights, cluster_names(tree), "", 1))

    for edge in edges:
        lines.append(_indent(1) + _render_edge(edge, options.reverse))

    lines.append("}")
    return "\n".join(lines) + "\n"


def _render_level(
    tree: DirectoryTree,
    heights: HeightMap,
    names: dict[str, str],
    dir_path: str,
    depth: int,
) -> list[str]:
    lines = []
    for key, child in tree.items():
        if child is None:
            height = heights.get(key, MIN_HEIGHT)
            lines.append(_indent(depth) + _render_node(key, height))
            continue

        path = posixpath.join(dir_path, key) if dir_path else key
        lines.append(f"{_indent(depth)}subgraph {names[path]} {{")
        lines.append(
            f'{_indent(depth + 1)}label = "{escape(key)}"; fontsize={CLUSTER_FONTSIZE};'
        )
        lines.extend(_render_level(child, heights, names, path, depth + 1))
        lines.append(_indent(depth) + "}")
    return lines


def _render_node(file: FileId, height: float) -> str:
    name = escape(file)
    label = escape(posixpath.basename(file))
    return (
        f'"{name}"[label="{label}"; height={height}; '
        f'href="{name}"; tooltip="{name}"];'
    )


def _render_edge(edge: Edge, reverse: bool = False) -> str:
    source, target = edge.importer, edge.imported
    if reverse:
        source, target = target, source

    statement = f'"{escape(source)}" -> "{escape(target)}"'
    if edge.label:
        statement += f' [label="{escape(edge.label)}"]'
    return statement + ";"


def subgraph_name(dir_path: str) -> str:
    """Cluster name for a directory path.

    Every non-word character becomes an underscore:
        "ui-components/forms" -> "cluster_ui_components_forms"
    """
    return "cluster_" + _NON_WORD_RE.sub("_", dir_path)


def cluster_names(tree: DirectoryTree) -> dict[str, str]:
    """Assign every directory of a tree a distinct cluster name.

    Graphviz merges subgraphs that share a name, so directories whose paths
    sanitize to the same name get a numeric suffix in tree order:
        "a-b", "a_b" -> "cluster_a_b", "cluster_a_b_2"

    Returns:
        Directory path -> cluster name.
    """
    names: dict[str, str] = {}
    used: set[str] = set()

    def visit(level: DirectoryTree, dir_path: str) -> None:
        for key, child in level.items():
            if child is None:
                continue
            path = posixpath.join(dir_path, key) if dir_path else key
            base = name = subgraph_name(path)
            suffix = 1
            while name in used:
                suffix += 1
                name = f"{base}_{suffix}"
            used.add(name)
            names[path] = name
            visit(child, path)

    visit(tree, "")
    return names


def escape(text: str) -> str:
    """Escape text for use inside a DOT double-quoted string.

    Backslashes and double quotes are escaped, label line breaks become
    the DOT `\\n` escape.
    """
    return (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace(LABEL_SEPARATOR, "\\n")
    )


def _indent(depth: int) -> str:
    return INDENT * depth
