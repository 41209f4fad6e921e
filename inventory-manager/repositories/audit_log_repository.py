"""
Audit log repository (persistence).

This module provides *only* the on-disk rendering of AuditRecord events and the
append-only sinks they are written to. It does not decide which events are
recorded; that belongs to the catalog service.

Line format:
    <YYYY-MM-DD HH:MM:SS> <EventKind> - <name> | Quantity: <n>
    <YYYY-MM-DD HH:MM:SS> Discount - <name> | Discount: <percentage>%
"""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path
from typing import List, Union

from domain.audit import AuditRecord
from domain.time import format_timestamp

# Default file name for the audit trail, relative to the working directory.
DEFAULT_AUDIT_LOG_PATH: str = "transaction_log.txt"


def format_percentage(value: Decimal) -> str:
    """Render a percentage without trailing zeros or exponent (20, 12.5, 0.25)."""

    text = format(value.normalize(), "f")
    return "0" if text == "-0" else text


def format_audit_line(record: AuditRecord) -> str:
    """Render one AuditRecord as a single audit log line (no newline)."""

    prefix = (
        f"{format_timestamp(record.timestamp)} "
        f"{record.event_kind.value} - {record.product_name}"
    )
    if record.is_quantity_event:
        return f"{prefix} | Quantity: {record.magnitude}"
    return f"{prefix} | Discount: {format_percentage(record.magnitude)}%"


class FileAuditLog:
    """
    Append-only audit log backed by a text file.

    The file is opened in append mode for every line and closed again; existing
    content is never truncated.
    """

    def __init__(self, path: Union[str, Path] = DEFAULT_AUDIT_LOG_PATH) -> None:
        self.path = Path(path)

    def append(self, line: str) -> None:
        with self.path.open("a", encoding="utf-8") as f:
            f.write(line + "\n")

    def read_lines(self) -> List[str]:
        if not self.path.exists():
            return []
        return self.path.read_text(encoding="utf-8").splitlines()

    def __repr__(self) -> str:
        return f"FileAuditLog({str(self.path)!r})"


class MemoryAuditLog:
    """In-process audit log; lines accumulate for the lifetime of the object."""

    def __init__(self) -> None:
        self.lines: List[str] = []

    def append(self, line: str) -> None:
        self.lines.append(line)

    def read_lines(self) -> List[str]:
        return list(self.lines)

    def __repr__(self) -> str:
        return f"MemoryAuditLog(lines={len(self.lines)})"


__all__ = [
    "DEFAULT_AUDIT_LOG_PATH",
    "FileAuditLog",
    "MemoryAuditLog",
    "format_audit_line",
    "format_percentage",
]
