"""
==============================================================================
Category Endpoints
==============================================================================

CRUD and search for the category tree.

==============================================================================
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, status

from app.core.dependencies import get_category_service
from app.services.category_service import CategoryService
from app.schemas.category import (
    CategoryCreate,
    CategoryUpdate,
    CategoryDetail,
    CategoryWithSubCategories,
)
from app.schemas.common import IdResponse, OkResponse


router = APIRouter(prefix="/categories", tags=["Categories"])


class CategoryController:
    """Controller for category operations."""

    def __init__(self, service: CategoryService):
        self._service = service

    def create(self, data: CategoryCreate) -> IdResponse:
        """Create category."""
        category = self._service.create(data)
        return IdResponse(id=category.id)

    def find(self, query: Optional[str]) -> List[CategoryWithSubCategories]:
        """List all categories, or those matching query."""
        if query:
            categories = self._service.find_by_query(query)
        else:
            categories = self._service.find_all()
        return [CategoryWithSubCategories.from_entity(c) for c in categories]

    def get(self, category_id: int) -> CategoryDetail:
        """Get category by id."""
        return CategoryDetail.from_entity(self._service.find_by_id(category_id))

    def update(self, category_id: int, data: CategoryUpdate) -> OkResponse:
        """Update category."""
        self._service.update(category_id, data)
        return OkResponse()

    def delete(self, category_id: int) -> OkResponse:
        """Delete category."""
        self._service.delete(category_id)
        return OkResponse()


@router.post("", response_model=IdResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    request: CategoryCreate,
    service: CategoryService = Depends(get_category_service)
):
    """Create a category, optionally under an existing parent."""
    return CategoryController(service).create(request)


@router.get("", response_model=List[CategoryWithSubCategories])
async def find_categories(
    query: Optional[str] = Query(None, description="Substring of name or description"),
    service: CategoryService = Depends(get_category_service)
):
    """List categories with their direct sub-categories."""
    return CategoryController(service).find(query)


@router.get("/{category_id}", response_model=CategoryDetail)
async def get_category(
    category_id: int = Path(...),
    service: CategoryService = Depends(get_category_service)
):
    """Get a single category."""
    return CategoryController(service).get(category_id)


@router.put("/{category_id}", response_model=OkResponse)
async def update_category(
    request: CategoryUpdate,
    category_id: int = Path(...),
    service: CategoryService = Depends(get_category_service)
):
    """Rename, describe or move a category."""
    return CategoryController(service).update(category_id, request)


@router.delete("/{category_id}", response_model=OkResponse)
async def delete_category(
    category_id: int = Path(...),
    service: CategoryService = Depends(get_category_service)
):
    """Delete a category without sub-categories or products."""
    return CategoryController(service).delete(category_id)
