"""
Storage sink interfaces.

The catalog writes through these two interfaces only; file-backed and in-memory
implementations live in the audit log and snapshot repositories.
"""

from __future__ import annotations

from typing import Iterable, List, Protocol


class AuditSink(Protocol):
    """Append-only line destination for the audit trail."""

    def append(self, line: str) -> None: ...


class SnapshotSink(Protocol):
    """Full-overwrite line destination for inventory snapshots."""

    def overwrite(self, lines: Iterable[str]) -> None: ...

    def read_lines(self) -> List[str]: ...


__all__ = ["AuditSink", "SnapshotSink"]
