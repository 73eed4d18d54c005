# schemas/product.py
from pydantic import BaseModel
from typing import List

class FeedProduct(BaseModel):
    id: int
    name: str
    brand: str = ""
    image_url: str
    supplier_name: str = ""
    price_per_unit: int = 0
    is_verified: bool = False
    is_sample_available: bool = False
    is_active: bool = True

class ProductFeedResponse(BaseModel):
    products: List[FeedProduct]
    page: int
    pageSize: int
    hasMore: bool
    total: int
