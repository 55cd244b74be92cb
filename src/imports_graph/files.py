# imports_graph/files.py
# AI-Mind (c) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
Discovery of the scanned file set.

The file set is every file under the root with a known extension, limited
to files git tracks (or would track) when the root is inside a repository,
minus anything matching an ignore pattern.
"""

import logging
import re
import subprocess
from pathlib import Path
from typing import Iterable, Optional

from .graph.models import FileId

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = (".ts", ".js", ".mjs")

# Directories never walked into
SKIP_DIRS = {".git"}


class IgnorePatternError(ValueError):
    """An ignore pattern could not be compiled."""

    def __init__(self, pattern: str, error: re.error):
        super().__init__(f"Invalid ignore pattern {pattern!r}: {error}")
        self.pattern = pattern


def normalize_pattern(pattern: str) -> str:
    """Strip a leading "./" so patterns match root-relative FileIds."""
    return pattern[2:] if pattern.startswith("./") else pattern


def compile_ignore_patterns(patterns: Iterable[str]) -> list[re.Pattern]:
    """Compile ignore patterns into anchored regular expressions.

    `*` matches any run of characters and each pattern must match the whole
    FileId. The rest of the pattern is regular expression syntax.

    Raises:
        IgnorePatternError: If a pattern is not a valid expression.
    """
    compiled = []
    for pattern in patterns:
        body = normalize_pattern(pattern).replace("*", ".*")
        try:
            compiled.append(re.compile(f"^{body}$"))
        except re.error as e:
            raise IgnorePatternError(pattern, e) from e
    return compiled


def is_ignored(file: FileId, patterns: Iterable[re.Pattern]) -> bool:
    return any(regex.match(file) for regex in patterns)


def git_tracked_files(root: Path) -> Optional[set[FileId]]:
    """List files git tracks or would track under root.

    Runs `git ls-files -z -co --exclude-standard`, which includes untracked
    files that are not gitignored. Output is NUL separated so paths are
    never C-quoted.

    Returns:
        Root-relative paths, or None if git is unavailable or root is not
        inside a repository.
    """
    try:
        process = subprocess.run(
            ["git", "ls-files", "-z", "-co", "--exclude-standard"],
            cwd=root,
            capture_output=True,
            encoding="utf-8",
            check=True,
        )
    except (OSError, subprocess.CalledProcessError) as e:
        logger.warning(f"Git file tracking unavailable for {root}, using all files: {e}")
        return None

    return {path for path in process.stdout.split("\0") if path}


def walk_files(root: Path, extensions: Iterable[str] = DEFAULT_EXTENSIONS) -> list[FileId]:
    """Find files under root with one of the given extensions.

    Returns:
        Sorted root-relative POSIX paths.
    """
    suffixes = set(extensions)
    files = []
    for path in root.rglob("*"):
        rel = path.relative_to(root)
        if SKIP_DIRS.intersection(rel.parts):
            continue
        if path.suffix in suffixes and path.is_file():
            files.append(rel.as_posix())
    return sorted(files)


def discover_files(
    root: Path,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    ignore: Iterable[str] = (),
) -> list[FileId]:
    """Build the scanned file set for a root directory.

    Ignore patterns are compiled before anything is read so a bad pattern
    fails the run immediately.

    Raises:
        IgnorePatternError: If an ignore pattern is invalid.
        FileNotFoundError: If root is not a directory.
    """
    patterns = compile_ignore_patterns(ignore)

    root = Path(root)
    if not root.is_dir():
        raise FileNotFoundError(f"Root directory not found: {root}")

    files = walk_files(root, extensions)

    tracked = git_tracked_files(root)
    if tracked is not None:
        files = [file for file in files if file in tracked]

    files = [file for file in files if not is_ignored(file, patterns)]
    logger.info(f"Found {len(files)} files under {root}")
    return files


def read_source(root: Path, file: FileId) -> str:
    """Read a file of the set as UTF-8 text."""
    with open(Path(root) / file, encoding="utf-8") as f:
        return f.read()
