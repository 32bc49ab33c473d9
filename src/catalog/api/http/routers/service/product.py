"""Product API router: get by id, list, save."""

from fastapi import APIRouter, Depends, Response, status

from src.catalog.api.http.deps import get_product_service
from src.catalog.core.services import ProductService
from src.catalog.entities.service.product import ProductDTO

router = APIRouter(prefix="/products", tags=["products"])


@router.get("/{product_id}", response_model=ProductDTO)
def get_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
) -> ProductDTO:
    """Get a product by ID."""
    return service.get_product_by_id(product_id)


@router.get("", response_model=list[ProductDTO])
def list_products(
    service: ProductService = Depends(get_product_service),
) -> list[ProductDTO]:
    """List all products."""
    return service.get_all_products()


@router.post("", status_code=status.HTTP_201_CREATED, response_class=Response)
def save_product(
    product: ProductDTO,
    service: ProductService = Depends(get_product_service),
) -> Response:
    """Create or overwrite a product. Answers with an empty body."""
    service.save_product(product)
    return Response(status_code=status.HTTP_201_CREATED)
