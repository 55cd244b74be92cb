# imports_graph/render.py
# AI-Mind (c) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""Rendering of DOT text to SVG through Graphviz."""

import logging

import graphviz

logger = logging.getLogger(__name__)


class RenderError(RuntimeError):
    """Graphviz could not render the graph."""


def render_svg(dot: str, engine: str = "dot") -> str:
    """Lay out DOT text and return the SVG document.

    Args:
        dot: DOT graph definition
        engine: Graphviz layout engine

    Returns:
        SVG markup as string.

    Raises:
        RenderError: If the Graphviz executable is missing or fails.
    """
    source = graphviz.Source(dot, engine=engine)
    try:
        return source.pipe(format="svg", encoding="utf-8")
    except graphviz.ExecutableNotFound as e:
        raise RenderError(f"Graphviz executable not found: {e}") from e
    except graphviz.CalledProcessError as e:
        logger.debug(f"Graphviz stderr: {e.stderr}")
        raise RenderError(f"Graphviz failed to render the graph: {e}") from e
