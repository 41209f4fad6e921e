"""
Domain: Inventory snapshot entries.

A snapshot holds one entry per product: its name, kind and stock on hand at export
time. It does not carry price or the kind-specific attribute, so a Product cannot
be rebuilt from a snapshot entry alone.
"""

from __future__ import annotations

from dataclasses import dataclass

from .product import Product, ProductKind


@dataclass(frozen=True, slots=True)
class SnapshotEntry:
    name: str
    kind: ProductKind
    stock_quantity: int

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("name must be non-empty")
        if self.stock_quantity < 0:
            raise ValueError("stock_quantity must be >= 0")

    @staticmethod
    def of(product: Product) -> "SnapshotEntry":
        return SnapshotEntry(
            name=product.name,
            kind=product.kind,
            stock_quantity=product.stock_quantity,
        )
