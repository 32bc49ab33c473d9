"""Domain errors raised by the catalog services."""

from __future__ import annotations


class CatalogError(Exception):
    """Base class for catalog domain errors."""


class InvalidValueError(CatalogError):
    """A product field failed validation."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"invalid value provided for the field {field}")


class NotFoundError(CatalogError):
    """A lookup yielded no product."""

    def __init__(self, product_id: int | None = None) -> None:
        self.product_id = product_id
        if product_id is not None:
            message = f"Product not found with the ID {product_id}"
        else:
            message = "Products not found"
        super().__init__(message)
