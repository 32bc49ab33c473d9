"""Product business service: validation and mapping around the repository."""

from __future__ import annotations

import re
from decimal import Decimal

from loguru import logger

from src.catalog.core.exceptions import InvalidValueError, NotFoundError
from src.catalog.entities.service.product import ProductDTO, ProductRepository

PRODUCT_NAME_PATTERN = re.compile(r"^[0-9A-Za-z ]+$")
_LETTER = re.compile(r"[A-Za-z]")

# Column limits: BIGINT ids, NUMERIC(19, 2) prices
MAX_PRODUCT_ID = 2**63 - 1
_PRICE_CENTS = Decimal("0.01")
_PRICE_LIMIT = Decimal(10) ** 17


def is_valid_product_name(name: str | None) -> bool:
    """Return True for a non-blank name made of ASCII letters, digits and spaces.

    At least one letter is required, so purely numeric names are rejected.
    """
    if name is None or not name.strip():
        return False
    return bool(PRODUCT_NAME_PATTERN.fullmatch(name) and _LETTER.search(name))


def is_valid_product_id(product_id: int | None) -> bool:
    return product_id is not None and 0 < product_id <= MAX_PRODUCT_ID


def is_valid_price(price: Decimal | None) -> bool:
    """Return True for a positive price that is stored without rounding."""
    if price is None or not price.is_finite():
        return False
    if price <= 0 or price >= _PRICE_LIMIT:
        return False
    return price == price.quantize(_PRICE_CENTS)


class ProductService:
    """Validate-then-delegate operations on products."""

    def __init__(self, repository: ProductRepository) -> None:
        self._repository = repository

    def get_product_by_id(self, product_id: int) -> ProductDTO:
        logger.debug("Fetching product {}", product_id)
        if not is_valid_product_id(product_id):
            logger.warning("Rejected product id {}", product_id)
            raise InvalidValueError("id")

        row = self._repository.get(product_id)
        if row is None:
            logger.warning("Product {} not found", product_id)
            raise NotFoundError(product_id)

        return ProductDTO.from_table(row)

    def get_all_products(self) -> list[ProductDTO]:
        logger.debug("Listing all products")
        rows = self._repository.list_all()
        if not rows:
            logger.warning("No products stored")
            raise NotFoundError()

        return [ProductDTO.from_table(row) for row in rows]

    def save_product(self, product: ProductDTO) -> None:
        """Validate ``product`` and write it through the repository.

        Checks run in order (id, name, price) and the first failure raises
        :class:`InvalidValueError` naming that field. Nothing is written unless
        every check passes.
        """
        self._validate(product)
        self._repository.upsert(product.to_table())
        logger.info("Saved product {}", product.id)

    def _validate(self, product: ProductDTO) -> None:
        if not is_valid_product_id(product.id):
            logger.warning("Rejected product: invalid id {}", product.id)
            raise InvalidValueError("id")
        if not is_valid_product_name(product.name):
            logger.warning("Rejected product {}: invalid name", product.id)
            raise InvalidValueError("name")
        if not is_valid_price(product.price):
            logger.warning("Rejected product {}: invalid price", product.id)
            raise InvalidValueError("price")
