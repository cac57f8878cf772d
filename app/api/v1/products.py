"""
==============================================================================
Product Endpoints
==============================================================================

CRUD and search for catalog products.

==============================================================================
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, status

from app.core.dependencies import get_product_service
from app.services.product_service import ProductService
from app.schemas.product import ProductCreate, ProductUpdate, ProductDetail
from app.schemas.common import IdResponse, OkResponse


router = APIRouter(prefix="/products", tags=["Products"])


class ProductController:
    """Controller for product operations."""

    def __init__(self, service: ProductService):
        self._service = service

    def create(self, data: ProductCreate) -> IdResponse:
        product = self._service.create(data)
        return IdResponse(id=product.id)

    def find(self, query: Optional[str]) -> List[ProductDetail]:
        if query:
            products = self._service.find_by_query(query)
        else:
            products = self._service.find_all()
        return [ProductDetail.from_entity(p) for p in products]

    def get(self, product_id: int) -> ProductDetail:
        return ProductDetail.from_entity(self._service.find_by_id(product_id))

    def update(self, product_id: int, data: ProductUpdate) -> OkResponse:
        self._service.update(product_id, data)
        return OkResponse()

    def delete(self, product_id: int) -> OkResponse:
        self._service.delete(product_id)
        return OkResponse()


@router.post("", response_model=IdResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    request: ProductCreate,
    service: ProductService = Depends(get_product_service)
):
    """Create a product, optionally linked to a category."""
    return ProductController(service).create(request)


@router.get("", response_model=List[ProductDetail])
async def find_products(
    query: Optional[str] = Query(None, description="Substring of name, description or category name"),
    service: ProductService = Depends(get_product_service)
):
    """List products, optionally filtered by query."""
    return ProductController(service).find(query)


@router.get("/{product_id}", response_model=ProductDetail)
async def get_product(
    product_id: int = Path(...),
    service: ProductService = Depends(get_product_service)
):
    """Get a single product."""
    return ProductController(service).get(product_id)


@router.put("/{product_id}", response_model=OkResponse)
async def update_product(
    request: ProductUpdate,
    product_id: int = Path(...),
    service: ProductService = Depends(get_product_service)
):
    """Update a product."""
    return ProductController(service).update(product_id, request)


@router.delete("/{product_id}", response_model=OkResponse)
async def delete_product(
    product_id: int = Path(...),
    service: ProductService = Depends(get_product_service)
):
    """Delete a product."""
    return ProductController(service).delete(product_id)
