"""Unit tests for the product transfer object and table model."""

from decimal import Decimal

from sqlalchemy import BigInteger
from sqlalchemy.dialects import postgresql

from src.catalog.entities.service.product import ProductDTO, ProductTable


class TestProductDTO:
    """Test the ProductDTO wire model."""

    def test_all_fields_optional(self):
        """Presence is checked by the service, not by the schema."""
        dto = ProductDTO()

        assert dto.id is None
        assert dto.name is None
        assert dto.price is None

    def test_parses_json_numbers_as_decimal(self):
        dto = ProductDTO.model_validate({"id": 1, "name": "Widget", "price": 10.5})

        assert dto.price == Decimal("10.5")

    def test_serializes_price_as_number(self):
        dto = ProductDTO(id=1, name="Widget", price=Decimal("10.50"))

        assert dto.model_dump(mode="json") == {"id": 1, "name": "Widget", "price": 10.5}

    def test_round_trip_through_table(self):
        dto = ProductDTO(id=7, name="Gadget", price=Decimal("3.25"))

        row = dto.to_table()

        assert isinstance(row, ProductTable)
        assert ProductDTO.from_table(row) == dto


class TestProductTable:
    """Test the ProductTable persistence model."""

    def test_table_name(self):
        assert ProductTable.__tablename__ == "products"

    def test_columns_not_nullable(self):
        columns = ProductTable.__table__.columns

        assert columns["id"].primary_key
        assert not columns["name"].nullable
        assert not columns["price"].nullable

    def test_id_is_bigint(self):
        id_type = ProductTable.__table__.columns["id"].type

        assert isinstance(id_type, BigInteger)
        assert id_type.compile(dialect=postgresql.dialect()) == "BIGINT"
