"""
Tests for `domain/snapshot.py` and `repositories/snapshot_repository.py`.

Covers contract rules:
- Snapshot line format is `<name> | <kindLabel> | <stock> | ` (trailing separator).
- Parsing is the inverse of formatting and rejects malformed lines.
- Every write fully replaces the previous snapshot.
"""

from __future__ import annotations

import pytest

from domain.product import Product, ProductKind
from domain.snapshot import SnapshotEntry
from repositories.snapshot_repository import (
    FileSnapshotStore,
    MemorySnapshotStore,
    format_snapshot_line,
    parse_snapshot_line,
    parse_snapshot_lines,
)


def test_snapshot_entry_of_product_copies_name_kind_and_stock() -> None:
    """Verify SnapshotEntry.of keeps only what the snapshot line carries."""

    entry = SnapshotEntry.of(Product.perishable("Milk", "2.50", 12, "2025-06-01"))

    assert entry == SnapshotEntry(name="Milk", kind=ProductKind.PERISHABLE, stock_quantity=12)


def test_format_snapshot_line_keeps_trailing_separator() -> None:
    """Verify the exported line format."""

    entry = SnapshotEntry(name="Laptop", kind=ProductKind.DURABLE, stock_quantity=5)

    assert format_snapshot_line(entry) == "Laptop | Electronics | 5 | "


def test_parse_snapshot_line_reads_exported_line() -> None:
    """Verify a written line parses back to the same entry, with or without newline."""

    entry = SnapshotEntry(name="Bread", kind=ProductKind.PERISHABLE, stock_quantity=0)

    assert parse_snapshot_line(format_snapshot_line(entry)) == entry
    assert parse_snapshot_line("Bread | Food | 0 |\n") == entry


def test_parse_snapshot_line_allows_separator_inside_name() -> None:
    """Verify kind and stock are taken from the right-hand end."""

    entry = parse_snapshot_line("Cable | USB-C | Electronics | 7 | ")

    assert entry.name == "Cable | USB-C"
    assert entry.kind is ProductKind.DURABLE
    assert entry.stock_quantity == 7


@pytest.mark.parametrize(
    "line",
    [
        "Laptop | Electronics | 5",
        "Laptop | 5 | ",
        "Laptop | Toys | 5 | ",
        "Laptop | Electronics | five | ",
        "Laptop | Electronics | -1 | ",
        " | Electronics | 5 | ",
    ],
)
def test_parse_snapshot_line_rejects_malformed_lines(line: str) -> None:
    """Verify malformed snapshot lines raise ValueError."""

    with pytest.raises(ValueError):
        parse_snapshot_line(line)


def test_parse_snapshot_lines_skips_blank_lines() -> None:
    """Verify blank lines between entries are ignored."""

    entries = parse_snapshot_lines(["A | Food | 1 | ", "", "   ", "B | Electronics | 2 | "])

    assert [e.name for e in entries] == ["A", "B"]


def test_file_snapshot_store_overwrites_previous_content(tmp_path) -> None:
    """Verify each overwrite truncates what the previous export wrote."""

    store = FileSnapshotStore(tmp_path / "inventory.txt")

    store.overwrite(["A | Food | 1 | ", "B | Food | 2 | "])
    store.overwrite(["C | Electronics | 3 | "])

    assert store.read_lines() == ["C | Electronics | 3 | "]


def test_file_snapshot_store_missing_file_reads_empty(tmp_path) -> None:
    """Verify reading before any export returns no lines."""

    assert FileSnapshotStore(tmp_path / "inventory.txt").read_lines() == []


def test_memory_snapshot_store_keeps_only_latest_export() -> None:
    """Verify the in-memory store replaces its lines on every overwrite."""

    store = MemorySnapshotStore()
    store.overwrite(iter(["x", "y"]))
    store.overwrite(["z"])

    assert store.read_lines() == ["z"]
