# schemas/search.py
from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import List, Optional
from enum import Enum


class SortOption(str, Enum):
    RELEVANCE = "relevance"
    PRICE_ASC = "price_asc"
    PRICE_DESC = "price_desc"
    NAME_ASC = "name_asc"
    NAME_DESC = "name_desc"
    CREATED_AT_ASC = "created_at_asc"
    CREATED_AT_DESC = "created_at_desc"


class SearchType(str, Enum):
    PRODUCTS = "products"
    SUGGESTIONS = "suggestions"
    AUTOCOMPLETE = "autocomplete"


class SearchRequest(BaseModel):
    """Validated search parameters. Built by the query normalizer, never mutated."""
    model_config = ConfigDict(frozen=True)

    query: str = ""
    search_type: SearchType = SearchType.PRODUCTS
    page: int = Field(1, ge=1)
    limit: int = Field(20, ge=1, le=100)
    suggestion_limit: int = Field(8, ge=1, le=100)

    category_id: Optional[int] = None
    subcategory_id: Optional[int] = None
    # Major currency units as entered by the buyer
    price_min: Optional[float] = None
    price_max: Optional[float] = None
    city: Optional[str] = None
    state: Optional[str] = None
    sample_available: bool = False
    dropship_available: bool = False
    tags: List[str] = Field(default_factory=list)
    colors: List[str] = Field(default_factory=list)
    sizes: List[str] = Field(default_factory=list)

    sort: SortOption = SortOption.RELEVANCE

    @model_validator(mode="before")
    @classmethod
    def relevance_requires_query(cls, data):
        # Nothing to rank without free text, fall back to recency
        if isinstance(data, dict):
            query = (data.get("query") or "").strip()
            sort = data.get("sort", SortOption.RELEVANCE)
            if not query and sort in (SortOption.RELEVANCE, SortOption.RELEVANCE.value):
                data = {**data, "sort": SortOption.CREATED_AT_DESC}
        return data

    @property
    def has_text_query(self) -> bool:
        return bool(self.query)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class CatalogEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    brand: str = ""
    description: str = ""
    hsn_code: str = ""
    category_name: str = ""
    subcategory_name: str = ""
    supplier_name: str = ""
    is_verified: bool = False
    image_url: str
    price_per_unit: int = 0
    is_sample_available: bool = False
    is_dropship_available: bool = False
    tags: List[str] = []
    colors: List[str] = []
    sizes: List[str] = []


class ScoredEntry(CatalogEntry):
    relevance_score: Optional[float] = None
    highlighted_name: Optional[str] = None
    highlighted_description: Optional[str] = None


class ProductSearchResponse(BaseModel):
    success: bool = True
    data: List[ScoredEntry]
    total: int
    page: int
    limit: int
    totalPages: int
    query: str


# Suggestions
class ProductSuggestion(BaseModel):
    id: int
    name: str
    brand: str = ""
    category_name: str = ""

class CategorySuggestion(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str

class BrandSuggestion(BaseModel):
    name: str
    count: int = 1

class SuggestionSet(BaseModel):
    products: List[ProductSuggestion] = []
    categories: List[CategorySuggestion] = []
    brands: List[BrandSuggestion] = []
    popular_searches: List[str] = []

class SuggestionsResponse(BaseModel):
    success: bool = True
    data: SuggestionSet


class AutocompleteItem(BaseModel):
    id: int
    text: str
    type: str = "product"
    category: str = ""
    brand: str = ""

class AutocompleteResponse(BaseModel):
    success: bool = True
    data: List[AutocompleteItem]


class SearchErrorResponse(BaseModel):
    error: str
    message: Optional[str] = None
