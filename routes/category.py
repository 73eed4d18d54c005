# routes/category.py
from fastapi import APIRouter, HTTPException
import logging

from services.catalog_store import catalog_dependency
from schemas.productManagement.category import CategoryResponse, CategoryListResponse

router = APIRouter(prefix="/categories", tags=["categories"])
logger = logging.getLogger(__name__)


@router.get("", response_model=CategoryListResponse)
def get_categories(catalog: catalog_dependency):
    """All categories and subcategories in alphabetical order"""
    try:
        return CategoryListResponse(categories=catalog.categories())
    except Exception as e:
        logger.error(f"Error fetching categories: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal server error")

@router.get("/{category_id}", response_model=CategoryResponse)
def get_category(category_id: int, catalog: catalog_dependency):
    category = catalog.category(category_id)
    if not category:
        raise HTTPException(status_code=404, detail="Category not found")
    return category

@router.get("/{category_id}/subcategories", response_model=CategoryListResponse)
def get_subcategories(category_id: int, catalog: catalog_dependency):
    if not catalog.category(category_id):
        raise HTTPException(status_code=404, detail="Category not found")
    return CategoryListResponse(categories=catalog.subcategories(category_id))
