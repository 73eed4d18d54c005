# routes/search.py
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from typing import Union
import logging

from schemas.productManagement.search import (
    SearchType, ProductSearchResponse, SuggestionsResponse, AutocompleteResponse, SearchErrorResponse
)
from services.catalog_store import catalog_dependency
from services.query_understanding import normalize_search_params, SearchValidationError
from services.search_service import search_products
from services.suggestion_service import get_search_suggestions, get_autocomplete_suggestions

router = APIRouter(tags=["search"])
logger = logging.getLogger(__name__)


def search_error(status_code: int, error: str, message: str) -> JSONResponse:
    body = SearchErrorResponse(error=error, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


@router.get(
    "/search",
    response_model=Union[ProductSearchResponse, SuggestionsResponse, AutocompleteResponse],
    response_model_exclude_none=True,
    responses={
        422: {"model": SearchErrorResponse},
        500: {"model": SearchErrorResponse},
    },
)
def search_endpoint(request: Request, catalog: catalog_dependency):
    """
    Catalog search.

    - type=products (default): filtered, paginated products, re-ranked by
      fuzzy relevance and highlighted when ``q`` is given
    - type=suggestions: products, categories and brands matching ``q`` (2+ chars)
    - type=autocomplete: product name completions for ``q`` (1+ chars)

    Filters: category, subcategory, price_min, price_max (rupees), city, state,
    sample_available, dropship_available, tags, colors, sizes (comma separated).
    Sort: relevance, price_asc, price_desc, name_asc, name_desc,
    created_at_asc, created_at_desc.
    """
    try:
        search_request = normalize_search_params(request.query_params)
    except SearchValidationError as e:
        logger.warning(f"Rejected search parameters: {e}")
        return search_error(status.HTTP_422_UNPROCESSABLE_ENTITY, "Invalid search parameters", str(e))

    try:
        if search_request.search_type == SearchType.SUGGESTIONS:
            suggestions = get_search_suggestions(catalog, search_request.query, search_request.suggestion_limit)
            return SuggestionsResponse(data=suggestions)

        if search_request.search_type == SearchType.AUTOCOMPLETE:
            items = get_autocomplete_suggestions(catalog, search_request.query, search_request.suggestion_limit)
            return AutocompleteResponse(data=items)

        return search_products(catalog, search_request)

    except Exception as e:
        logger.error(f"Search endpoint error: {e}", exc_info=True)
        return search_error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Search failed",
            "An error occurred while searching",
        )
