# services/search_service.py
import logging
import math
import time
from dataclasses import dataclass, field
from typing import List, Union

from sqlalchemy.orm import Query

from models.Products import Product
from models.Suppliers import SupplierBusiness
from schemas.productManagement.search import (
    CatalogEntry, ScoredEntry, SearchRequest, SortOption, ProductSearchResponse
)
from services.catalog_store import CatalogStore
from services.search_config import PRODUCT_PLACEHOLDER_IMAGE, SEARCH_MATCH_THRESHOLD
from services.search_utils import rank_entries_by_relevance, highlight_entry

logger = logging.getLogger(__name__)

SORT_COLUMNS = {
    SortOption.PRICE_ASC: (Product.price_per_unit, "asc"),
    SortOption.PRICE_DESC: (Product.price_per_unit, "desc"),
    SortOption.NAME_ASC: (Product.name, "asc"),
    SortOption.NAME_DESC: (Product.name, "desc"),
    SortOption.CREATED_AT_ASC: (Product.created_at, "asc"),
    SortOption.CREATED_AT_DESC: (Product.created_at, "desc"),
}


# ---------------- SORT STRATEGIES ----------------
@dataclass(frozen=True)
class DatabaseSort:
    """Order pushed down to the catalog store and applied before pagination."""
    sort: SortOption

    def apply(self, query: Query) -> Query:
        # relevance has no column, the store falls back to recency
        column, direction = SORT_COLUMNS.get(self.sort, SORT_COLUMNS[SortOption.CREATED_AT_DESC])
        ordered = column.asc() if direction == "asc" else column.desc()
        # id keeps equal keys in a stable order across calls
        return query.order_by(ordered, Product.id.desc() if direction == "desc" else Product.id.asc())


@dataclass(frozen=True)
class InMemoryRescorePage:
    """
    Fetch one page with the fallback order, then re-rank that page by text
    relevance. Ranking never moves entries across page boundaries.
    """
    fallback: DatabaseSort
    threshold: float = SEARCH_MATCH_THRESHOLD

    def apply(self, query: Query) -> Query:
        return self.fallback.apply(query)

    def rescore(self, entries: List[CatalogEntry], text: str) -> List[ScoredEntry]:
        return rank_entries_by_relevance(entries, text, self.threshold)


SortStrategy = Union[DatabaseSort, InMemoryRescorePage]


def choose_sort_strategy(request: SearchRequest) -> SortStrategy:
    if not request.has_text_query:
        return DatabaseSort(request.sort)
    fallback = SortOption.CREATED_AT_DESC if request.sort == SortOption.RELEVANCE else request.sort
    return InMemoryRescorePage(DatabaseSort(fallback))


@dataclass
class CatalogPage:
    entries: List[CatalogEntry] = field(default_factory=list)
    total: int = 0


# ---------------- CATALOG FILTER ----------------
def to_catalog_entry(product: Product) -> CatalogEntry:
    supplier = product.supplier
    return CatalogEntry(
        id=product.id,
        name=product.name,
        brand=product.brand or "",
        description=product.description or "",
        hsn_code=product.hsn_code or "",
        category_name=product.category.name if product.category else "",
        subcategory_name=product.subcategory.name if product.subcategory else "",
        supplier_name=supplier.business_name if supplier else "",
        is_verified=bool(supplier.is_verified) if supplier else False,
        image_url=product.image_url or PRODUCT_PLACEHOLDER_IMAGE,
        price_per_unit=product.price_per_unit or 0,
        is_sample_available=bool(product.is_sample_available),
        is_dropship_available=bool(product.is_dropship_available),
        tags=product.tags or [],
        colors=product.colors or [],
        sizes=product.sizes or [],
    )


def build_catalog_filters(request: SearchRequest) -> list:
    """Conjunctive SQL conditions for the structured filters of a request"""
    filters = []

    if request.category_id is not None:
        filters.append(Product.category_id == request.category_id)
    if request.subcategory_id is not None:
        filters.append(Product.subcategory_id == request.subcategory_id)

    # Buyers enter rupees, the catalog stores paise
    if request.price_min is not None:
        filters.append(Product.price_per_unit >= request.price_min * 100)
    if request.price_max is not None:
        filters.append(Product.price_per_unit <= request.price_max * 100)

    if request.city:
        filters.append(SupplierBusiness.city == request.city)
    if request.state:
        filters.append(SupplierBusiness.state == request.state)

    if request.sample_available:
        filters.append(Product.is_sample_available == True)
    if request.dropship_available:
        filters.append(Product.is_dropship_available == True)

    return filters


def filter_catalog(store: CatalogStore, request: SearchRequest, strategy: SortStrategy) -> CatalogPage:
    query = store.active_products()
    filters = build_catalog_filters(request)
    if filters:
        query = query.filter(*filters)
    query = strategy.apply(query)

    rows, total = store.fetch_page(query, request.offset, request.limit)
    logger.info(f"Catalog filter matched {total} products, fetched {len(rows)} (page {request.page})")
    return CatalogPage(entries=[to_catalog_entry(row) for row in rows], total=total)


def _matches_any(values: List[str], wanted: List[str]) -> bool:
    return any(item in values for item in wanted)


def filter_by_attributes(entries: list, request: SearchRequest) -> list:
    """
    Tag, color and size filters. Any listed value matches within one
    attribute; every supplied attribute must match.
    """
    if request.tags:
        entries = [entry for entry in entries if _matches_any(entry.tags, request.tags)]
    if request.colors:
        entries = [entry for entry in entries if _matches_any(entry.colors, request.colors)]
    if request.sizes:
        entries = [entry for entry in entries if _matches_any(entry.sizes, request.sizes)]
    return entries


# ---------------- PIPELINE ----------------
def search_products(store: CatalogStore, request: SearchRequest) -> ProductSearchResponse:
    """
    Full product search: filter and paginate in the store, re-rank the page
    when there is free text, apply attribute filters and highlight matches.
    """
    start_time = time.time()
    strategy = choose_sort_strategy(request)
    page = filter_catalog(store, request, strategy)

    if isinstance(strategy, InMemoryRescorePage):
        results = strategy.rescore(page.entries, request.query)
    else:
        results = [ScoredEntry(**entry.model_dump()) for entry in page.entries]

    results = filter_by_attributes(results, request)

    if request.has_text_query:
        results = [highlight_entry(entry, request.query) for entry in results]

    processing_time = (time.time() - start_time) * 1000
    logger.info(
        f"Search '{request.query}' sort={request.sort.value} returned {len(results)} of {page.total} "
        f"in {processing_time:.2f}ms"
    )

    return ProductSearchResponse(
        data=results,
        total=page.total,
        page=request.page,
        limit=request.limit,
        totalPages=math.ceil(page.total / request.limit),
        query=request.query,
    )
