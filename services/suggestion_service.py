# services/suggestion_service.py
import logging
from typing import List

from schemas.productManagement.search import (
    AutocompleteItem, BrandSuggestion, CategorySuggestion, ProductSuggestion, SuggestionSet
)
from services.catalog_store import CatalogStore
from services.search_config import (
    SUGGESTION_MIN_LENGTH, AUTOCOMPLETE_MIN_LENGTH, SUGGESTION_GROUP_LIMIT
)

logger = logging.getLogger(__name__)


def get_search_suggestions(store: CatalogStore, query: str, limit: int) -> SuggestionSet:
    """
    Typeahead groups for the search box: products by name or brand, categories
    and brands. No scoring, results come back in store order.
    """
    if not query or len(query) < SUGGESTION_MIN_LENGTH:
        return SuggestionSet()

    products = store.match_products(query, limit)
    categories = store.match_categories(query, SUGGESTION_GROUP_LIMIT)
    brands = store.match_brands(query, SUGGESTION_GROUP_LIMIT)

    logger.info(
        f"Suggestions for '{query}': {len(products)} products, "
        f"{len(categories)} categories, {len(brands)} brands"
    )

    return SuggestionSet(
        products=[
            ProductSuggestion(
                id=product.id,
                name=product.name,
                brand=product.brand or "",
                category_name=product.category.name if product.category else "",
            )
            for product in products
        ],
        categories=[CategorySuggestion.model_validate(category) for category in categories],
        # Occurrence counts are not tracked yet
        brands=[BrandSuggestion(name=brand, count=1) for brand in brands],
        popular_searches=[],
    )


def get_autocomplete_suggestions(store: CatalogStore, query: str, limit: int) -> List[AutocompleteItem]:
    if not query or len(query) < AUTOCOMPLETE_MIN_LENGTH:
        return []

    products = store.match_products(query, limit)
    return [
        AutocompleteItem(
            id=product.id,
            text=product.name,
            type="product",
            category=product.category.name if product.category else "",
            brand=product.brand or "",
        )
        for product in products
    ]
