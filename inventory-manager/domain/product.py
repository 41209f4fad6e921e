"""
Domain: Product catalog entries.

Contract excerpts implemented here:
- A Product is exactly one of two kinds: DURABLE (labelled "Electronics", carries a
  warranty period in months) or PERISHABLE (labelled "Food", carries an opaque
  expiration date string).
- name is the identity key and never changes after construction. Neither do the
  kind or the kind-specific attribute. Only price and stock_quantity mutate.
- stock_quantity never goes negative through try_sell; a failed sale leaves
  stock untouched.
- Discounts are applied as price -= price * percentage / 100 with no range check.
  Percentages over 100 drive the price negative and negative percentages raise it.

Kind-specific behavior (describe, kind_label) dispatches on the kind tag; there
is no subclass per kind.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum
from typing import Optional, Union

Number = Union[Decimal, int, float, str]

_CENTS = Decimal("0.01")

# Fields fixed at construction; assigning them afterwards raises.
_IMMUTABLE_FIELDS = frozenset({"name", "kind", "warranty_months", "expiration_date"})


class ProductKind(str, Enum):
    DURABLE = "Electronics"
    PERISHABLE = "Food"


def to_decimal(value: Number) -> Decimal:
    """
    Convert a caller-supplied amount to Decimal.

    Floats go through their string form so 19.99 stays 19.99.
    """

    if isinstance(value, bool):
        raise TypeError("amount must be numeric, not bool")
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except InvalidOperation as e:
        raise ValueError(f"not a decimal amount: {value!r}") from e


def format_price(price: Decimal) -> str:
    """Price rounded to cents; values too large to quantize are shown as stored."""

    try:
        return str(price.quantize(_CENTS, rounding=ROUND_HALF_UP))
    except InvalidOperation:
        return str(price)


@dataclass(slots=True)
class Product:
    """
    One catalog entry.

    Use Product.durable(...) / Product.perishable(...) rather than passing the
    kind-specific attribute by hand.
    """

    name: str
    price: Decimal
    stock_quantity: int
    kind: ProductKind
    warranty_months: Optional[int] = None
    expiration_date: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("name must be non-empty")
        self.price = to_decimal(self.price)
        if self.price < 0:
            raise ValueError("price must be >= 0")
        if self.stock_quantity < 0:
            raise ValueError("stock_quantity must be >= 0")

        if self.kind is ProductKind.DURABLE:
            if self.warranty_months is None or self.expiration_date is not None:
                raise ValueError("durable products carry warranty_months and no expiration_date")
            if self.warranty_months < 0:
                raise ValueError("warranty_months must be >= 0")
        elif self.kind is ProductKind.PERISHABLE:
            if self.expiration_date is None or self.warranty_months is not None:
                raise ValueError("perishable products carry expiration_date and no warranty_months")
        else:
            raise ValueError(f"unknown product kind: {self.kind!r}")

    def __setattr__(self, name: str, value: object) -> None:
        if name in _IMMUTABLE_FIELDS and hasattr(self, name):
            raise AttributeError(f"{name} cannot change after construction")
        object.__setattr__(self, name, value)

    @staticmethod
    def durable(name: str, price: Number, stock_quantity: int, warranty_months: int) -> "Product":
        return Product(
            name=name,
            price=to_decimal(price),
            stock_quantity=stock_quantity,
            kind=ProductKind.DURABLE,
            warranty_months=warranty_months,
        )

    @staticmethod
    def perishable(name: str, price: Number, stock_quantity: int, expiration_date: str) -> "Product":
        return Product(
            name=name,
            price=to_decimal(price),
            stock_quantity=stock_quantity,
            kind=ProductKind.PERISHABLE,
            expiration_date=expiration_date,
        )

    def kind_label(self) -> str:
        """Stable discriminator: "Electronics" or "Food"."""

        return self.kind.value

    def describe(self) -> str:
        """Two-line human-readable summary: common fields, then the kind-specific one."""

        summary = (
            f"Product Name: {self.name}, "
            f"Price: ${format_price(self.price)}, "
            f"Stock Quantity: {self.stock_quantity}"
        )
        if self.kind is ProductKind.DURABLE:
            return f"{summary}\nWarranty Period: {self.warranty_months} months"
        return f"{summary}\nExpiration Date: {self.expiration_date}"

    def apply_discount_percent(self, percentage: Number) -> None:
        """Reduce price by price * percentage / 100. No range validation."""

        self.price -= self.price * (to_decimal(percentage) / Decimal(100))

    def adjust_stock(self, delta: int) -> None:
        """Unguarded stock change; try_sell is the guarded path for sales."""

        self.stock_quantity += delta

    def try_sell(self, quantity: int) -> bool:
        """
        Decrement stock by quantity if enough is on hand.

        Returns False and leaves stock unchanged when it is not.
        """

        if self.stock_quantity >= quantity:
            self.adjust_stock(-quantity)
            return True
        return False


__all__ = [
    "Number",
    "Product",
    "ProductKind",
    "format_price",
    "to_decimal",
]
