"""
Domain: Audit trail events.

Contract excerpts implemented here:
- Every successful sale, every applied discount and every restock produces exactly one
  audit record.
- Sale and Restock records carry an integer quantity; Discount records carry the
  decimal percentage that was applied.
- Audit records are append-only: never mutated, never deleted.

This module captures the events only. Writing them out lives with persistence.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Union

Magnitude = Union[int, Decimal]


class EventKind(str, Enum):
    SALE = "Sale"
    DISCOUNT = "Discount"
    RESTOCK = "Restock"


@dataclass(frozen=True, slots=True)
class AuditRecord:
    """
    Immutable record of one catalog event.

    The timestamp is supplied by the caller; the domain never reads the clock.
    """

    timestamp: datetime
    event_kind: EventKind
    product_name: str
    magnitude: Magnitude

    def __post_init__(self) -> None:
        if not self.product_name:
            raise ValueError("product_name must be non-empty")
        if self.event_kind is EventKind.DISCOUNT:
            if not isinstance(self.magnitude, Decimal):
                raise ValueError("Discount records carry a Decimal percentage")
        elif isinstance(self.magnitude, bool) or not isinstance(self.magnitude, int):
            raise ValueError(f"{self.event_kind.value} records carry an integer quantity")

    @property
    def is_quantity_event(self) -> bool:
        return self.event_kind is not EventKind.DISCOUNT
