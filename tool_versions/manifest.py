"""
Tool-version manifest parsing.

Reads an asdf-style ``.tool-versions`` file (one ``<tool> <version>`` pair per
line) into an ordered mapping of tool name to version.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional

from .logging_config import get_logger


# Manifest file looked up in the working directory
DEFAULT_MANIFEST = ".tool-versions"

ToolVersionMap = dict[str, Optional[str]]


class ManifestError(OSError):
    """
    Raised when a manifest cannot be opened or read.

    Attributes:
        message: Human-readable error message
        path: Path of the manifest that failed
    """
    def __init__(self, message: str, path: str | os.PathLike[str]):
        self.message = message
        self.path = str(path)
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class ToolVersionEntry:
    """
    One manifest line.

    Attributes:
        name: Tool name (first field, empty for blank lines)
        version: Version (second field), None when the line has a single field
    """
    name: str
    version: str | None = None


def parse_line(line: str) -> ToolVersionEntry:
    """
    Split a manifest line into name and version.

    Fields are separated by runs of whitespace. Anything after the second
    field is ignored. A line with fewer than two fields is not rejected: it
    yields an entry whose version is None.

    Args:
        line: Raw line, with or without its terminator

    Returns:
        ToolVersionEntry for the line
    """
    fields = line.rstrip("\r\n").split(None, 2)
    name = fields[0] if fields else ""
    version = fields[1] if len(fields) > 1 else None
    return ToolVersionEntry(name=name, version=version)


def iter_entries(path: str | os.PathLike[str]) -> Iterator[ToolVersionEntry]:
    """
    Lazily yield one entry per line of the manifest.

    The file is opened with universal newlines, so CRLF terminators never
    leak into the version field, and a leading UTF-8 BOM is dropped. The
    handle is closed once the iterator is exhausted, closed or raises.

    Raises:
        ManifestError: If the file cannot be opened or a read fails
    """
    try:
        with open(path, "r", encoding="utf-8-sig") as f:
            for line in f:
                yield parse_line(line)
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestError(f"Cannot read manifest {path}: {e}", path) from e


def parse_tool_versions(path: str | os.PathLike[str]) -> ToolVersionMap:
    """
    Parse a tool-version manifest.

    Args:
        path: Path to the manifest file

    Returns:
        Mapping of tool name to version in file order. A tool listed more
        than once keeps the version from its last line.

    Raises:
        ManifestError: If the file is missing or unreadable. No partial
            mapping is returned.
    """
    logger = get_logger()
    logger.debug(f"Parsing manifest: {path}")

    tools: ToolVersionMap = {}
    for entry in iter_entries(path):
        tools[entry.name] = entry.version

    logger.debug(f"Parsed {len(tools)} tool(s) from {path}")
    return tools


def get_manifest_path(filename: str = DEFAULT_MANIFEST, cwd: str | os.PathLike[str] | None = None) -> Path:
    """Resolve the manifest path against the working directory.

    Absolute filenames are returned unchanged.
    """
    if os.path.isabs(filename):
        return Path(filename)
    base = Path(cwd) if cwd is not None else Path.cwd()
    return base / filename


def tools_to_json(tools: ToolVersionMap) -> str:
    """Serialize a ToolVersionMap to a JSON object string, keeping file order."""
    return json.dumps(tools, ensure_ascii=False)
