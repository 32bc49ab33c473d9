"""Entity: Product transfer object."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, field_serializer

if TYPE_CHECKING:
    from .table import ProductTable


class ProductDTO(BaseModel):
    """Wire representation of a product.

    Every field is optional so that presence is checked by the service, which
    reports the offending field by name instead of a generic schema error.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int | None = Field(default=None, description="Product identifier")
    name: str | None = Field(default=None, description="Product name")
    price: Decimal | None = Field(default=None, description="Product price")

    @field_serializer("price")
    def _serialize_price(self, price: Decimal | None) -> float | None:
        return float(price) if price is not None else None

    @classmethod
    def from_table(cls, row: ProductTable) -> ProductDTO:
        return cls.model_validate(row)

    def to_table(self) -> ProductTable:
        from .table import ProductTable

        return ProductTable(id=self.id, name=self.name, price=self.price)
