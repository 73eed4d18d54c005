# routes/products.py
from fastapi import APIRouter, HTTPException, Query, status
from typing import Optional
import logging

from functions.query_params import parse_optional_id, parse_optional_bool
from models.Products import Product
from schemas.productManagement.Products import FeedProduct, ProductFeedResponse
from services.catalog_store import catalog_dependency, like_pattern, LIKE_ESCAPE
from services.search_config import (
    FEED_DEFAULT_PAGE_SIZE, FEED_MAX_PAGE_SIZE, FEED_MAX_PAGE, PRODUCT_PLACEHOLDER_IMAGE
)

router = APIRouter(prefix="/products", tags=["products"])
logger = logging.getLogger(__name__)


def to_feed_product(product: Product) -> FeedProduct:
    supplier = product.supplier
    return FeedProduct(
        id=product.id,
        name=product.name or "",
        brand=product.brand or "",
        image_url=product.image_url or PRODUCT_PLACEHOLDER_IMAGE,
        supplier_name=supplier.business_name if supplier else "",
        price_per_unit=product.price_per_unit or 0,
        is_verified=bool(supplier.is_verified) if supplier else False,
        is_sample_available=bool(product.is_sample_available),
        is_active=bool(product.is_active),
    )


@router.get("/feed", response_model=ProductFeedResponse)
def get_product_feed(
    catalog: catalog_dependency,
    page: int = Query(1, ge=1, le=FEED_MAX_PAGE, description="Page number, starting at 1"),
    page_size: int = Query(FEED_DEFAULT_PAGE_SIZE, ge=1, description=f"Products per page, capped at {FEED_MAX_PAGE_SIZE}"),
    category: Optional[str] = Query(None, description="Filter by category ID"),
    subcategory: Optional[str] = Query(None, description="Filter by subcategory ID"),
    q: Optional[str] = Query(None, description="Plain substring match on name, description and brand"),
    sample_available: Optional[str] = Query(None, description="Only products with samples"),
    dropship_available: Optional[str] = Query(None, description="Only products available for dropship"),
):
    """Newest-first browse feed of approved suppliers' active products"""
    try:
        page_size = min(page_size, FEED_MAX_PAGE_SIZE)
        offset = (page - 1) * page_size

        query = catalog.approved_products()

        category_id = parse_optional_id(category)
        if category_id is not None:
            query = query.filter(Product.category_id == category_id)
        subcategory_id = parse_optional_id(subcategory)
        if subcategory_id is not None:
            query = query.filter(Product.subcategory_id == subcategory_id)
        if parse_optional_bool(sample_available):
            query = query.filter(Product.is_sample_available == True)
        if parse_optional_bool(dropship_available):
            query = query.filter(Product.is_dropship_available == True)
        if q and q.strip():
            pattern = like_pattern(q.strip())
            query = query.filter(
                Product.name.ilike(pattern, escape=LIKE_ESCAPE)
                | Product.description.ilike(pattern, escape=LIKE_ESCAPE)
                | Product.brand.ilike(pattern, escape=LIKE_ESCAPE)
            )

        query = query.order_by(Product.created_at.desc(), Product.id.desc())
        rows, total = catalog.fetch_page(query, offset, page_size)

        logger.info(f"Product feed page {page}: {len(rows)} of {total} products")

        return ProductFeedResponse(
            products=[to_feed_product(row) for row in rows],
            page=page,
            pageSize=page_size,
            hasMore=offset + len(rows) < total,
            total=total,
        )
    except Exception as e:
        logger.error(f"Product feed error: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error retrieving products"
        )
