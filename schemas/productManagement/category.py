# schemas/category.py
from pydantic import BaseModel, ConfigDict
from datetime import datetime
from typing import Optional, List

class CategoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    slug: str
    image: Optional[str] = None
    description: Optional[str] = None
    parent_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

class CategoryListResponse(BaseModel):
    categories: List[CategoryResponse]
