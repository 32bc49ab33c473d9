"""Entity package: Product."""

from .entity import ProductDTO
from .repository import ProductRepository
from .table import ProductTable

__all__ = ["ProductDTO", "ProductRepository", "ProductTable"]
