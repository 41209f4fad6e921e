"""
Catalog service: the in-memory inventory and its transactional operations.

Handles:
- One Product per name (adding a duplicate is rejected, the existing entry kept)
- Sales guarded against insufficient stock
- Unbounded percentage discounts
- Threshold restocking by a fixed amount
- Audit records for every sale, discount and restock
- Full-overwrite snapshot export

Business conditions (duplicate, not found, insufficient stock) come back as a
CatalogResult and are never raised. Sink failures are logged and never abort the
operation that triggered them.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable, Dict, Iterator, List, Optional

from domain.audit import AuditRecord, EventKind, Magnitude
from domain.product import Number, Product, to_decimal
from domain.snapshot import SnapshotEntry
from repositories.audit_log_repository import format_audit_line
from repositories.sinks import AuditSink, SnapshotSink
from repositories.snapshot_repository import format_snapshot_line, parse_snapshot_lines

logger = logging.getLogger(__name__)

# Units added to every product found below the restock threshold.
RESTOCK_AMOUNT: int = 10

Clock = Callable[[], datetime]


def local_now() -> datetime:
    """Current local wall-clock time."""

    return datetime.now()


class CatalogOutcome(str, Enum):
    OK = "ok"
    DUPLICATE_PRODUCT = "duplicate_product"
    PRODUCT_NOT_FOUND = "product_not_found"
    INSUFFICIENT_STOCK = "insufficient_stock"


@dataclass(frozen=True, slots=True)
class CatalogResult:
    """
    Result of a catalog operation.

    Truthy iff the operation succeeded, so `if catalog.sell(...)` reads as a
    plain success check; `outcome` says why it did not.
    """

    outcome: CatalogOutcome
    message: str = ""

    @property
    def success(self) -> bool:
        return self.outcome is CatalogOutcome.OK

    def __bool__(self) -> bool:
        return self.success


class CatalogListing:
    """Restartable view of product descriptions in name order."""

    def __init__(self, products: Dict[str, Product]) -> None:
        self._products = products

    def __iter__(self) -> Iterator[str]:
        for name in sorted(self._products):
            yield self._products[name].describe()

    def __len__(self) -> int:
        return len(self._products)


class Catalog:
    """
    Owns every Product in the session, keyed by name.

    Products are mutated in place through the catalog's own operations only;
    get() hands out detached copies.
    """

    def __init__(
        self,
        audit_sink: AuditSink,
        snapshot_sink: SnapshotSink,
        clock: Clock = local_now,
    ) -> None:
        self._products: Dict[str, Product] = {}
        self._audit_sink = audit_sink
        self._snapshot_sink = snapshot_sink
        self._clock = clock
        self.restock_amount = RESTOCK_AMOUNT

    def __len__(self) -> int:
        return len(self._products)

    def __contains__(self, name: object) -> bool:
        return name in self._products

    def names(self) -> List[str]:
        return sorted(self._products)

    def get(self, name: str) -> Optional[Product]:
        """Detached copy of the named product, or None."""

        product = self._products.get(name)
        return copy.copy(product) if product is not None else None

    def add_product(self, product: Product) -> CatalogResult:
        if product.name in self._products:
            message = f"Product with name '{product.name}' already exists. Skipping..."
            logger.info(message)
            return CatalogResult(CatalogOutcome.DUPLICATE_PRODUCT, message)

        self._products[product.name] = product
        logger.debug("Added %s product %r", product.kind_label(), product.name)
        return CatalogResult(CatalogOutcome.OK)

    def list_all(self) -> CatalogListing:
        return CatalogListing(self._products)

    def sell(self, name: str, quantity: int) -> CatalogResult:
        """
        Sell quantity units of the named product.

        Only a successful sale is written to the audit trail.

        Raises:
            TypeError: If quantity is not an int. Nothing is changed.
        """

        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise TypeError(f"quantity must be an int, got {type(quantity).__name__}")

        product = self._products.get(name)
        if product is None:
            return self._not_found(name)

        if not product.try_sell(quantity):
            message = (
                f"Insufficient stock for '{name}': requested {quantity}, "
                f"on hand {product.stock_quantity}."
            )
            logger.info(message)
            return CatalogResult(CatalogOutcome.INSUFFICIENT_STOCK, message)

        self.record_event(EventKind.SALE, name, quantity)
        return CatalogResult(CatalogOutcome.OK)

    def discount(self, name: str, percentage: Number) -> CatalogResult:
        """
        Apply a percentage discount to the named product.

        The percentage is not range-checked here (see Product.apply_discount_percent).
        """

        product = self._products.get(name)
        if product is None:
            return self._not_found(name)

        pct = to_decimal(percentage)
        product.apply_discount_percent(pct)
        self.record_event(EventKind.DISCOUNT, name, pct)
        return CatalogResult(CatalogOutcome.OK)

    def check_and_restock(self, threshold: int) -> List[str]:
        """
        Restock every product whose stock is below threshold.

        Eligibility is decided for all products before any of them is restocked.

        Returns:
            Names of the restocked products, in catalog order.
        """

        eligible = [
            self._products[name]
            for name in sorted(self._products)
            if self._products[name].stock_quantity < threshold
        ]
        for product in eligible:
            self._restock(product)
        return [product.name for product in eligible]

    def _restock(self, product: Product) -> None:
        product.adjust_stock(self.restock_amount)
        self.record_event(EventKind.RESTOCK, product.name, self.restock_amount)
        logger.info("Restocked %s by %d units.", product.name, self.restock_amount)

    def export_snapshot(self) -> None:
        """Replace the snapshot with one line per product, in catalog order."""

        lines = [
            format_snapshot_line(SnapshotEntry.of(self._products[name]))
            for name in sorted(self._products)
        ]
        try:
            self._snapshot_sink.overwrite(lines)
        except OSError:
            logger.warning(
                "Failed to write inventory snapshot",
                exc_info=True,
                extra={"sink": repr(self._snapshot_sink), "product_count": len(lines)},
            )

    def read_snapshot(self) -> List[SnapshotEntry]:
        """
        Read back the entries currently held by the snapshot sink.

        Products are not rebuilt from these entries.

        Raises:
            ValueError: If the stored snapshot is malformed.
            OSError: If the snapshot sink cannot be read.
        """

        return parse_snapshot_lines(self._snapshot_sink.read_lines())

    def record_event(self, event_kind: EventKind, name: str, magnitude: Magnitude) -> None:
        """Append one timestamped audit line. Sink failures are logged, not raised."""

        record = AuditRecord(
            timestamp=self._clock(),
            event_kind=event_kind,
            product_name=name,
            magnitude=magnitude,
        )
        try:
            self._audit_sink.append(format_audit_line(record))
        except OSError:
            logger.warning(
                "Failed to write audit record",
                exc_info=True,
                extra={
                    "event_kind": event_kind.value,
                    "product_name": name,
                    "sink": repr(self._audit_sink),
                },
            )

    def _not_found(self, name: str) -> CatalogResult:
        message = f"Product '{name}' not found."
        logger.info(message)
        return CatalogResult(CatalogOutcome.PRODUCT_NOT_FOUND, message)


__all__ = [
    "Catalog",
    "CatalogListing",
    "CatalogOutcome",
    "CatalogResult",
    "RESTOCK_AMOUNT",
    "local_now",
]
