# services/query_understanding.py
import logging
from typing import Mapping, Optional

from functions.query_params import (
    parse_optional_int, parse_optional_id, parse_optional_float, parse_optional_bool, parse_csv_list, clamp
)
from schemas.productManagement.search import SearchRequest, SearchType, SortOption
from services.search_config import (
    DEFAULT_LIMIT, MAX_LIMIT, DEFAULT_PAGE, MAX_PAGE, SUGGESTION_DEFAULT_LIMIT, LENIENT_FILTER_PARSING
)

logger = logging.getLogger(__name__)

# Query string names of the numeric parameters, checked in strict mode
INT_PARAMS = ("limit", "page")
ID_PARAMS = ("category", "subcategory")
FLOAT_PARAMS = ("price_min", "price_max")


class SearchValidationError(ValueError):
    """Raised in strict mode when a numeric search parameter is malformed or out of range."""

    def __init__(self, field: str, value: str):
        self.field = field
        self.value = value
        super().__init__(f"Invalid value for '{field}': {value!r}")


def _raw(params: Mapping[str, str], key: str) -> Optional[str]:
    value = params.get(key)
    if value is None:
        return None
    return str(value)


def _check_strict(params: Mapping[str, str]):
    for key in INT_PARAMS:
        value = _raw(params, key)
        if value not in (None, "") and parse_optional_int(value) is None:
            raise SearchValidationError(key, value)
    for key in ID_PARAMS:
        value = _raw(params, key)
        if value not in (None, "") and parse_optional_id(value) is None:
            raise SearchValidationError(key, value)
    for key in FLOAT_PARAMS:
        value = _raw(params, key)
        if value not in (None, "") and parse_optional_float(value) is None:
            raise SearchValidationError(key, value)


def _parse_sort(value: Optional[str]) -> SortOption:
    if value is None or value.strip() == "":
        return SortOption.RELEVANCE
    try:
        return SortOption(value.strip().lower())
    except ValueError:
        logger.debug(f"Unknown sort key '{value}', falling back to {SortOption.CREATED_AT_DESC.value}")
        return SortOption.CREATED_AT_DESC


def _parse_type(value: Optional[str]) -> SearchType:
    try:
        return SearchType((value or "").strip().lower())
    except ValueError:
        return SearchType.PRODUCTS


def normalize_search_params(params: Mapping[str, str], lenient: bool = LENIENT_FILTER_PARSING) -> SearchRequest:
    """
    Turn raw query string values into a SearchRequest.

    Malformed numeric filters are treated as absent when ``lenient`` is set,
    otherwise the first offending parameter raises SearchValidationError.
    Out of range pagination is clamped rather than rejected in both modes.
    """
    if not lenient:
        _check_strict(params)

    query = (_raw(params, "q") or "").strip()

    raw_limit = parse_optional_int(_raw(params, "limit"))
    limit = clamp(raw_limit, 1, MAX_LIMIT) if raw_limit is not None else DEFAULT_LIMIT

    raw_page = parse_optional_int(_raw(params, "page"))
    page = clamp(raw_page, 1, MAX_PAGE) if raw_page is not None else DEFAULT_PAGE

    suggestion_limit = limit if raw_limit is not None else SUGGESTION_DEFAULT_LIMIT

    request = SearchRequest(
        query=query,
        search_type=_parse_type(_raw(params, "type")),
        page=page,
        limit=limit,
        suggestion_limit=suggestion_limit,
        category_id=parse_optional_id(_raw(params, "category")),
        subcategory_id=parse_optional_id(_raw(params, "subcategory")),
        price_min=parse_optional_float(_raw(params, "price_min")),
        price_max=parse_optional_float(_raw(params, "price_max")),
        city=(_raw(params, "city") or "").strip() or None,
        state=(_raw(params, "state") or "").strip() or None,
        sample_available=bool(parse_optional_bool(_raw(params, "sample_available"))),
        dropship_available=bool(parse_optional_bool(_raw(params, "dropship_available"))),
        tags=parse_csv_list(_raw(params, "tags")),
        colors=parse_csv_list(_raw(params, "colors")),
        sizes=parse_csv_list(_raw(params, "sizes")),
        sort=_parse_sort(_raw(params, "sort")),
    )
    logger.debug(f"Normalized search request: {request.model_dump()}")
    return request
