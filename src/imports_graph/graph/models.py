# imports_graph/graph/models.py
# AI-Mind (c) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
Data models for the imports graph.

These models represent the dependency structure between source files.
Everything here is built once per run and never mutated afterwards.
"""

from dataclasses import dataclass
from typing import Optional


# File identity: slash-separated path relative to the scanned root
# - "a.ts", "ui/pubsub.ts", "server/router.ts"
FileId = str

# What is imported from a file: "Router", "* as path", "A as B"
Label = str

# Separator between label fragments of one merged edge
LABEL_SEPARATOR = "\n"

# Directory segment -> nested tree, or full FileId -> None for a file leaf
DirectoryTree = dict[str, Optional["DirectoryTree"]]

HeightMap = dict[FileId, float]


@dataclass(frozen=True)
class Edge:
    """A dependency between two files of the scanned set.

    The direction is always importer -> imported. Several import statements
    between the same pair are merged into one edge whose label fragments
    keep the order they were first seen in the importer's source. Empty
    fragments from bare imports are kept so they count toward the weight,
    but are left out of the displayed label.
    """

    importer: FileId
    imported: FileId
    # One fragment per import statement; bare imports contribute ""
    labels: tuple[Label, ...] = ()

    @property
    def label(self) -> Label:
        """Merged label text, empty when nothing named is imported."""
        return LABEL_SEPARATOR.join(label for label in self.labels if label)

    @property
    def weight(self) -> float:
        """Visual weight of the edge: one plus half a unit per label fragment."""
        # An edge without fragments still counts as one
        lines = max(len(self.labels), 1)
        return 1 + lines / 2

    @property
    def is_self_loop(self) -> bool:
        return self.importer == self.imported
