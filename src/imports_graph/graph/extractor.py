# imports_graph/graph/extractor.py
# AI-Mind (c) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
Import extraction for JavaScript / TypeScript source files.

A lexical approximation of import syntax: only statements that reference
another file through a quoted string literal are recognized. Anything the
patterns do not understand is skipped, so a missed edge is preferred over
a false one.

Handles:
- import X from "./x"            (default)
- import X as Y from "./x"       (default with rename)
- import { A, B as C } from "./x" (named, may span lines)
- import * as ns from "./x"      (namespace)
- import type { T } from "./x"   (type-only)
- export { A } from "./x"        (re-export)
- import "./x"                   (side effect, no label)
- const { A } = await import("./x") / import("./x") (dynamic)
"""

import re
from typing import NamedTuple

from .models import Label

_IDENT = r"[A-Za-z_$][\w$]*"

_CLAUSE = (
    r"(?:type\s+)?"
    rf"(?:{_IDENT}(?:\s+as\s+{_IDENT})?\s*,?\s*)?"
    rf"(?:\{{[^{{}}]*\}}|\*(?:\s+as\s+{_IDENT})?)?"
)

_QUOTED_PATH = r"(?P<quote>[\"'])(?P<path>[^\"'\n]+)(?P=quote)"

STATIC_IMPORT_RE = re.compile(
    rf"^[ \t]*(?:import|export)\s+(?P<items>{_CLAUSE})\s*from\s*{_QUOTED_PATH}",
    re.MULTILINE,
)

SIDE_EFFECT_IMPORT_RE = re.compile(
    rf"^[ \t]*import\s*{_QUOTED_PATH}",
    re.MULTILINE,
)

DYNAMIC_IMPORT_RE = re.compile(
    r"(?:\{(?P<names>[^{}]*)\}\s*=\s*await\s+)?"
    rf"(?<![\w$.])import\s*\(\s*{_QUOTED_PATH}\s*\)"
)

_TYPE_PREFIX_RE = re.compile(r"^type\s+")


class ExtractedImport(NamedTuple):
    """One label fragment imported from a raw (unresolved) path."""

    label: Label
    path: str


def extract(content: str) -> list[ExtractedImport]:
    """Extract every (label, raw path) pair a file imports.

    Static and dynamic imports are returned in the order they appear in the
    source. A statement importing several names yields one entry per name;
    a statement importing nothing by name yields a single empty label.

    Args:
        content: Source code as string.

    Returns:
        List of ExtractedImport in source order.
    """
    found: list[tuple[int, list[ExtractedImport]]] = []

    for match in STATIC_IMPORT_RE.finditer(content):
        found.append((match.start(), _entries(match.group("items"), match.group("path"))))

    for match in SIDE_EFFECT_IMPORT_RE.finditer(content):
        found.append((match.start(), [ExtractedImport("", match.group("path"))]))

    for match in DYNAMIC_IMPORT_RE.finditer(content):
        found.append((match.start(), _entries(match.group("names") or "", match.group("path"))))

    found.sort(key=lambda item: item[0])
    return [entry for _, entries in found for entry in entries]


def split_labels(items: str) -> list[Label]:
    """Split an import clause into label fragments.

    Braces and `type` prefixes are dropped; renames and namespace imports
    keep their `as` text.

    Examples:
        "{ A, B as C }"   -> ["A", "B as C"]
        "X, * as ns"      -> ["X", "* as ns"]
        "type { T }"      -> ["T"]
    """
    text = items.replace("{", "").replace("}", "")
    text = _strip_type(text.strip())

    labels = []
    for item in text.split(","):
        item = _strip_type(" ".join(item.split()))
        if item:
            labels.append(item)
    return labels


def _entries(items: str, path: str) -> list[ExtractedImport]:
    labels = split_labels(items)
    if not labels:
        return [ExtractedImport("", path)]
    return [ExtractedImport(label, path) for label in labels]


def _strip_type(text: str) -> str:
    return _TYPE_PREFIX_RE.sub("", text)
