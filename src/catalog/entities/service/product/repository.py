from sqlmodel import Session, select

from .table import ProductTable


class ProductRepository:
    """Data-access layer for products."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, product_id: int) -> ProductTable | None:
        return self._session.get(ProductTable, product_id)

    def list_all(self) -> list[ProductTable]:
        statement = select(ProductTable).order_by(ProductTable.id)
        return list(self._session.exec(statement).all())

    def upsert(self, product: ProductTable) -> ProductTable:
        """Insert or overwrite a product by id and commit immediately."""
        merged = self._session.merge(product)
        self._session.commit()
        self._session.refresh(merged)
        return merged
