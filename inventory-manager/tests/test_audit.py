"""
Tests for `domain/audit.py` and `repositories/audit_log_repository.py`.

Covers contract rules:
- Sale/Restock records carry integer quantities; Discount records carry a Decimal percentage.
- Audit records are immutable (frozen).
- Line format: `<timestamp> <kind> - <name> | Quantity: <n>` or `... | Discount: <pct>%`.
- The file audit log only ever appends.
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import datetime
from decimal import Decimal

import pytest

from domain.audit import AuditRecord, EventKind
from domain.time import format_timestamp
from repositories.audit_log_repository import (
    FileAuditLog,
    MemoryAuditLog,
    format_audit_line,
    format_percentage,
)

STAMP = datetime(2025, 5, 9, 8, 4, 3, 123456)


def test_format_timestamp_drops_sub_seconds() -> None:
    """Verify timestamps render as YYYY-MM-DD HH:MM:SS."""

    assert format_timestamp(STAMP) == "2025-05-09 08:04:03"


@pytest.mark.parametrize(
    "kind, magnitude",
    [
        (EventKind.SALE, Decimal("3")),
        (EventKind.RESTOCK, True),
        (EventKind.DISCOUNT, 20),
    ],
)
def test_magnitude_type_must_match_event_kind(kind: EventKind, magnitude: object) -> None:
    """Verify quantity events need an int and discount events need a Decimal."""

    with pytest.raises(ValueError):
        AuditRecord(timestamp=STAMP, event_kind=kind, product_name="Milk", magnitude=magnitude)  # type: ignore[arg-type]


def test_audit_record_requires_product_name() -> None:
    """Verify an empty product name is rejected."""

    with pytest.raises(ValueError):
        AuditRecord(timestamp=STAMP, event_kind=EventKind.SALE, product_name="", magnitude=1)


def test_audit_record_is_immutable() -> None:
    """Verify AuditRecord cannot be mutated after creation."""

    record = AuditRecord(timestamp=STAMP, event_kind=EventKind.SALE, product_name="Milk", magnitude=2)

    with pytest.raises(FrozenInstanceError):
        record.magnitude = 5  # type: ignore[misc]


def test_format_audit_line_for_quantity_events() -> None:
    """Verify Sale and Restock lines carry the quantity."""

    sale = AuditRecord(timestamp=STAMP, event_kind=EventKind.SALE, product_name="Laptop", magnitude=3)
    restock = AuditRecord(timestamp=STAMP, event_kind=EventKind.RESTOCK, product_name="Milk", magnitude=10)

    assert format_audit_line(sale) == "2025-05-09 08:04:03 Sale - Laptop | Quantity: 3"
    assert format_audit_line(restock) == "2025-05-09 08:04:03 Restock - Milk | Quantity: 10"


def test_format_audit_line_for_discount_events() -> None:
    """Verify Discount lines carry the percentage with a % sign."""

    record = AuditRecord(
        timestamp=STAMP,
        event_kind=EventKind.DISCOUNT,
        product_name="Gadget",
        magnitude=Decimal("12.50"),
    )

    assert format_audit_line(record) == "2025-05-09 08:04:03 Discount - Gadget | Discount: 12.5%"


@pytest.mark.parametrize(
    "value, expected",
    [
        (Decimal("20"), "20"),
        (Decimal("20.00"), "20"),
        (Decimal("12.5"), "12.5"),
        (Decimal("0.25"), "0.25"),
        (Decimal("150"), "150"),
        (Decimal("-0"), "0"),
    ],
)
def test_format_percentage_has_no_trailing_zeros_or_exponent(value: Decimal, expected: str) -> None:
    """Verify percentages render as plain numbers."""

    assert format_percentage(value) == expected


def test_file_audit_log_appends_across_instances(tmp_path) -> None:
    """Verify existing log content is kept and new lines accumulate."""

    path = tmp_path / "transaction_log.txt"
    path.write_text("earlier line\n", encoding="utf-8")

    FileAuditLog(path).append("first")
    FileAuditLog(path).append("second")

    assert FileAuditLog(path).read_lines() == ["earlier line", "first", "second"]


def test_file_audit_log_missing_file_reads_empty(tmp_path) -> None:
    """Verify reading a log that was never written returns no lines."""

    assert FileAuditLog(tmp_path / "absent.txt").read_lines() == []


def test_memory_audit_log_accumulates() -> None:
    """Verify the in-memory log keeps every appended line in order."""

    log = MemoryAuditLog()
    log.append("a")
    log.append("b")

    assert log.read_lines() == ["a", "b"]
