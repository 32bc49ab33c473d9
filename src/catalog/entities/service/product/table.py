"""Product database table model."""

from decimal import Decimal

from sqlalchemy import BigInteger, Column, Integer, Numeric, String
from sqlmodel import Field, SQLModel


class ProductTable(SQLModel, table=True):
    """Database persistence model for products.

    This represents how a product is stored in the database. It is kept
    separate from the transfer object so that the wire format can change
    without touching the schema.
    """

    __tablename__ = "products"

    # INTEGER on SQLite keeps the rowid alias
    id: int | None = Field(
        default=None,
        primary_key=True,
        sa_type=BigInteger().with_variant(Integer, "sqlite"),
    )
    name: str = Field(sa_column=Column(String(255), nullable=False))
    price: Decimal = Field(sa_column=Column(Numeric(19, 2), nullable=False))
