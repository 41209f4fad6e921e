"""
Snapshot repository (persistence).

This module provides *only* the on-disk rendering of SnapshotEntry rows and the
full-overwrite sinks they are written to. Every export replaces the previous
snapshot; nothing accumulates across exports.

Line format (note the trailing separator):
    <name> | <kindLabel> | <stockQuantity> |
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Union

from domain.product import ProductKind
from domain.snapshot import SnapshotEntry

# Default file name for the snapshot, relative to the working directory.
DEFAULT_SNAPSHOT_PATH: str = "inventory.txt"

_SEPARATOR: str = " | "


def format_snapshot_line(entry: SnapshotEntry) -> str:
    """Render one SnapshotEntry as a snapshot line (no newline)."""

    return f"{entry.name}{_SEPARATOR}{entry.kind.value}{_SEPARATOR}{entry.stock_quantity}{_SEPARATOR}"


def parse_snapshot_line(line: str) -> SnapshotEntry:
    """
    Parse one snapshot line back into a SnapshotEntry.

    Product names may themselves contain " | ", so the kind and stock are taken
    from the right-hand end of the line.

    Raises:
        ValueError: If the line does not follow the snapshot format.
    """

    text = line.rstrip()
    terminator = _SEPARATOR.rstrip()
    if not text.endswith(terminator):
        raise ValueError(f"Malformed snapshot line (missing trailing separator): {line!r}")
    body = text[: -len(terminator)]

    parts = body.rsplit(_SEPARATOR, 2)
    if len(parts) != 3:
        raise ValueError(f"Malformed snapshot line (expected name | kind | stock): {line!r}")

    name, kind_label, stock = parts
    try:
        kind = ProductKind(kind_label)
    except ValueError:
        raise ValueError(f"Unknown product kind in snapshot line: {kind_label!r}") from None
    try:
        stock_quantity = int(stock)
    except ValueError:
        raise ValueError(f"Stock quantity is not an integer in snapshot line: {stock!r}") from None

    return SnapshotEntry(name=name, kind=kind, stock_quantity=stock_quantity)


def parse_snapshot_lines(lines: Iterable[str]) -> List[SnapshotEntry]:
    """Parse every non-blank line of a snapshot."""

    return [parse_snapshot_line(line) for line in lines if line.strip()]


class FileSnapshotStore:
    """
    Snapshot sink backed by a text file.

    overwrite() opens the file in write mode, truncating whatever the previous
    export left behind.
    """

    def __init__(self, path: Union[str, Path] = DEFAULT_SNAPSHOT_PATH) -> None:
        self.path = Path(path)

    def overwrite(self, lines: Iterable[str]) -> None:
        with self.path.open("w", encoding="utf-8") as f:
            for line in lines:
                f.write(line + "\n")

    def read_lines(self) -> List[str]:
        if not self.path.exists():
            return []
        return self.path.read_text(encoding="utf-8").splitlines()

    def __repr__(self) -> str:
        return f"FileSnapshotStore({str(self.path)!r})"


class MemorySnapshotStore:
    """In-process snapshot sink; holds only the most recent export."""

    def __init__(self) -> None:
        self.lines: List[str] = []

    def overwrite(self, lines: Iterable[str]) -> None:
        self.lines = list(lines)

    def read_lines(self) -> List[str]:
        return list(self.lines)

    def __repr__(self) -> str:
        return f"MemorySnapshotStore(lines={len(self.lines)})"


__all__ = [
    "DEFAULT_SNAPSHOT_PATH",
    "FileSnapshotStore",
    "MemorySnapshotStore",
    "format_snapshot_line",
    "parse_snapshot_line",
    "parse_snapshot_lines",
]
