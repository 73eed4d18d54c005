from sqlalchemy import Column, Integer, String, Boolean, DateTime
from db.database import Base
from datetime import datetime


class SupplierBusiness(Base):
    __tablename__ = "supplier_businesses"

    id = Column(Integer, primary_key=True, index=True)
    business_name = Column(String(255), nullable=False)
    is_verified = Column(Boolean, default=False)
    city = Column(String(100), nullable=True, index=True)
    state = Column(String(100), nullable=True, index=True)
    # PENDING, APPROVED or REJECTED; only approved suppliers show up in the browse feed
    status = Column(String(20), default="PENDING", nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
