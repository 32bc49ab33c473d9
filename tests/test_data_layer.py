"""Data layer tests against an in-memory SQLite database.

Covers:
- ProductRepository lookups, listing and upserts
- ProductService running on top of a real repository
- DbSessionService session handling
"""

from decimal import Decimal

import pytest
from sqlmodel import Session, select

from src.catalog.core.exceptions import InvalidValueError, NotFoundError
from src.catalog.core.services import DbSessionService, ProductService
from src.catalog.entities.service.product import (
    ProductDTO,
    ProductRepository,
    ProductTable,
)


class TestProductRepository:
    """Test ProductRepository with a real database."""

    def test_get_missing_returns_none(self, product_repository: ProductRepository):
        assert product_repository.get(1) is None

    def test_list_all_empty(self, product_repository: ProductRepository):
        assert product_repository.list_all() == []

    def test_upsert_inserts_row(
        self, product_repository: ProductRepository, db_service: DbSessionService
    ):
        saved = product_repository.upsert(
            ProductTable(id=5, name="Widget", price=Decimal("19.99"))
        )

        assert saved.id == 5

        # Written through: visible from an unrelated session
        with db_service.get_session() as other:
            row = other.get(ProductTable, 5)
            assert row is not None
            assert row.name == "Widget"
            assert row.price == Decimal("19.99")

    def test_upsert_overwrites_by_id(
        self, product_repository: ProductRepository, session: Session
    ):
        product_repository.upsert(ProductTable(id=1, name="Old Name", price=Decimal("1")))
        product_repository.upsert(ProductTable(id=1, name="New Name", price=Decimal("2")))

        rows = session.exec(select(ProductTable)).all()
        assert len(rows) == 1
        assert rows[0].name == "New Name"
        assert rows[0].price == Decimal("2")

    def test_list_all_ordered_by_id(
        self, product_repository: ProductRepository, seed_products
    ):
        seed_products((3, "Gamma", "3"), (1, "Alpha", "1"), (2, "Beta", "2"))

        rows = product_repository.list_all()

        assert [row.id for row in rows] == [1, 2, 3]

    def test_get_existing(self, product_repository: ProductRepository, seed_products):
        seed_products((2, "Beta", "2.50"))

        row = product_repository.get(2)

        assert row is not None
        assert row.name == "Beta"
        assert row.price == Decimal("2.50")


class TestProductServiceWithDatabase:
    """ProductService end to end over a real repository."""

    @pytest.fixture
    def service(self, product_repository: ProductRepository) -> ProductService:
        return ProductService(product_repository)

    def test_save_then_read(self, service: ProductService):
        service.save_product(ProductDTO(id=1, name="Test Product", price=Decimal("10")))

        assert service.get_product_by_id(1) == ProductDTO(
            id=1, name="Test Product", price=Decimal("10")
        )
        assert [p.id for p in service.get_all_products()] == [1]

    def test_rejected_save_writes_nothing(self, service: ProductService):
        with pytest.raises(InvalidValueError):
            service.save_product(ProductDTO(id=1, name="123", price=Decimal("10")))

        with pytest.raises(NotFoundError):
            service.get_all_products()


class TestDbSessionService:
    """Test session helpers on DbSessionService."""

    def test_health_check(self, db_service: DbSessionService):
        assert db_service.health_check() is True

    def test_session_scope_commits(self, db_service: DbSessionService):
        with db_service.session_scope() as session:
            session.add(ProductTable(id=1, name="Widget", price=Decimal("1")))

        with db_service.get_session() as session:
            assert session.get(ProductTable, 1) is not None

    def test_session_scope_rolls_back_on_error(self, db_service: DbSessionService):
        with pytest.raises(RuntimeError):
            with db_service.session_scope() as session:
                session.add(ProductTable(id=1, name="Widget", price=Decimal("1")))
                session.flush()
                raise RuntimeError("boom")

        with db_service.get_session() as session:
            assert session.get(ProductTable, 1) is None
