"""Entities module with entity-centric structure.

Each entity has its own package containing:
- entity.py: Transfer object exposed on the wire
- table.py: Database persistence model
- repository.py: Data access layer
"""

from .service.product import ProductDTO, ProductRepository, ProductTable

__all__ = [
    "ProductDTO",
    "ProductTable",
    "ProductRepository",
]
