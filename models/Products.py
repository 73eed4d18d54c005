from sqlalchemy import (
    Column, Integer, String, Text, ForeignKey,
    Boolean, DateTime, JSON
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship
from db.database import Base
from datetime import datetime

# JSONB on Postgres, plain JSON elsewhere
JSONList = JSON().with_variant(JSONB(), "postgresql")


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, index=True)
    brand = Column(String(255), nullable=True, index=True)
    description = Column(Text, nullable=True)
    hsn_code = Column(String(20), nullable=True)

    # Minor currency units (paise)
    price_per_unit = Column(Integer, nullable=False, default=0)

    image_url = Column(Text, nullable=True)

    is_active = Column(Boolean, default=True)
    is_sample_available = Column(Boolean, default=False)
    is_dropship_available = Column(Boolean, default=False)

    tags = Column(JSONList, default=list)     # Example: ["cotton", "summer"]
    colors = Column(JSONList, default=list)   # Example: ["Red", "Blue"]
    sizes = Column(JSONList, default=list)    # Example: ["S", "M", "L"]

    # Relationships
    category_id = Column(Integer, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True)
    category = relationship("Category", foreign_keys=[category_id])

    subcategory_id = Column(Integer, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True)
    subcategory = relationship("Category", foreign_keys=[subcategory_id])

    supplier_id = Column(Integer, ForeignKey("supplier_businesses.id", ondelete="CASCADE"), nullable=True)
    supplier = relationship("SupplierBusiness")

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    deleted_at = Column(DateTime, nullable=True)
