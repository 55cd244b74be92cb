# imports_graph/graph/resolver.py
# AI-Mind (c) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
Import path resolution.

Turns the raw string of an import statement into a FileId candidate that
can be compared against the scanned file set.
"""

import posixpath

from .models import FileId


def is_relative(raw_path: str) -> bool:
    """Check if an import path is relative to the importing file."""
    return raw_path.startswith(".")


def resolve(importer: FileId, raw_path: str) -> str:
    """Resolve a raw import path against the importing file.

    Args:
        importer: FileId of the file containing the import
        raw_path: Path string as written in the import statement

    Returns:
        Normalized FileId candidate for relative paths. Anything else
        (packages, URLs, bare specifiers) is returned unchanged and will
        normally fail the membership test in the builder.

    Examples:
        ("a/x.ts", "../b/y.ts")  -> "b/y.ts"
        ("a.ts", "./b.ts")       -> "b.ts"
        ("a.ts", "jsr:@std/fs")  -> "jsr:@std/fs"
    """
    if not is_relative(raw_path):
        return raw_path

    joined = posixpath.join(posixpath.dirname(importer), raw_path)
    return posixpath.normpath(joined)
