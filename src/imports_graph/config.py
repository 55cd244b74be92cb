# imports_graph/config.py
# AI-Mind (C) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
Configuration model for imports-graph runs.

A GraphConfig can be built directly, loaded from a YAML file, or read from
environment variables (with .env support).
"""

import os
from pathlib import Path
from typing import Literal, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

from .files import DEFAULT_EXTENSIONS, normalize_pattern

ENV_PREFIX = "IMPORTS_GRAPH_"


class GraphConfig(BaseModel):
    """Options for one graph run.

    Attributes:
        root: Directory to scan.
        ignore: Ignore patterns, `*` matching any run of characters.
        no_dir: Disable directory cluster ranking.
        reverse: Draw arrows from imported file to importer.
        extensions: File extensions to scan.
        max_workers: Thread pool size for reading files, None for default.
        output_format: "dot" for DOT text, "svg" to render through Graphviz.

    Example YAML:
        root: src
        ignore:
          - "*.test.ts"
          - vendor/*
        no_dir: false
        reverse: true
        extensions: [".ts", ".tsx"]
    """

    root: Path = Path(".")
    ignore: list[str] = []
    no_dir: bool = False
    reverse: bool = False
    extensions: list[str] = list(DEFAULT_EXTENSIONS)
    max_workers: Optional[int] = None
    output_format: Literal["dot", "svg"] = "dot"

    @field_validator("ignore")
    @classmethod
    def _strip_dot_slash(cls, value: list[str]) -> list[str]:
        return [normalize_pattern(pattern) for pattern in value]

    @field_validator("extensions")
    @classmethod
    def _dotted_extensions(cls, value: list[str]) -> list[str]:
        return [ext if ext.startswith(".") else f".{ext}" for ext in value]

    @field_validator("max_workers")
    @classmethod
    def _positive_workers(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value < 1:
            raise ValueError("max_workers must be at least 1")
        return value

    @classmethod
    def from_yaml(cls, config_path: Path) -> "GraphConfig":
        """Load config from a YAML file.

        Raises:
            FileNotFoundError: If the file does not exist.
            yaml.YAMLError: If the file is not valid YAML.
            pydantic.ValidationError: If the values are invalid.
        """
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "GraphConfig":
        """Load config from IMPORTS_GRAPH_* environment variables.

        Unset variables keep their defaults.
        """
        if dotenv_path is not None:
            load_dotenv(dotenv_path)
        else:
            load_dotenv()

        values: dict = {}
        root = _getenv("ROOT")
        if root:
            values["root"] = root
        ignore = _getenv("IGNORE")
        if ignore:
            values["ignore"] = _split_list(ignore)
        extensions = _getenv("EXTENSIONS")
        if extensions:
            values["extensions"] = _split_list(extensions)
        for flag in ("no_dir", "reverse"):
            raw = _getenv(flag.upper())
            if raw:
                values[flag] = raw.lower() in ("1", "true", "yes")
        max_workers = _getenv("MAX_WORKERS")
        if max_workers:
            values["max_workers"] = int(max_workers)
        output_format = _getenv("FORMAT")
        if output_format:
            values["output_format"] = output_format.lower()

        return cls(**values)


def _getenv(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _split_list(raw: str) -> list[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]
