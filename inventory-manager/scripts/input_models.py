"""
Input models for the interactive inventory console.

Pydantic types for validating what an operator types at each prompt, plus the
ProductEntry model that turns a completed product form into a domain Product.

Range checks for interactive input live here, not in the domain: the catalog
trusts the values it is given.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Literal, Optional

from pydantic import BaseModel, Field, TypeAdapter, model_validator

from domain.product import Product

NonNegativeInt = Annotated[int, Field(ge=0)]
PositiveInt = Annotated[int, Field(ge=1)]
NonNegativeAmount = Annotated[Decimal, Field(ge=0, allow_inf_nan=False)]
ProductName = Annotated[str, Field(min_length=1)]
ProductType = Literal["electronics", "food"]
YesNo = Literal["yes", "no"]

# Prompt validators
NON_NEGATIVE_INT: TypeAdapter[int] = TypeAdapter(NonNegativeInt)
POSITIVE_INT: TypeAdapter[int] = TypeAdapter(PositiveInt)
NON_NEGATIVE_AMOUNT: TypeAdapter[Decimal] = TypeAdapter(NonNegativeAmount)
PRODUCT_NAME: TypeAdapter[str] = TypeAdapter(ProductName)
PRODUCT_TYPE: TypeAdapter[str] = TypeAdapter(ProductType)
YES_NO: TypeAdapter[str] = TypeAdapter(YesNo)


class ProductEntry(BaseModel):
    """A product as entered at the console, before it becomes a domain Product."""

    name: ProductName
    price: NonNegativeAmount
    stock_quantity: NonNegativeInt
    product_type: ProductType
    warranty_months: Optional[NonNegativeInt] = None
    expiration_date: Optional[str] = None

    @model_validator(mode="after")
    def _kind_attribute_present(self) -> "ProductEntry":
        if self.product_type == "electronics" and self.warranty_months is None:
            raise ValueError("electronics entries need warranty_months")
        if self.product_type == "food" and self.expiration_date is None:
            raise ValueError("food entries need expiration_date")
        return self

    def to_product(self) -> Product:
        if self.product_type == "electronics":
            return Product.durable(self.name, self.price, self.stock_quantity, self.warranty_months)
        return Product.perishable(self.name, self.price, self.stock_quantity, self.expiration_date)


__all__ = [
    "NON_NEGATIVE_AMOUNT",
    "NON_NEGATIVE_INT",
    "POSITIVE_INT",
    "PRODUCT_NAME",
    "PRODUCT_TYPE",
    "ProductEntry",
    "YES_NO",
]
