"""Pytest fixtures: in-memory SQLite catalog and a TestClient on the app.

DATABASE_URL must be set before anything imports db.database, so it is
forced here at module import time.
"""

import os

os.environ["DATABASE_URL"] = "sqlite://"

from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from db.database import Base, SessionLocal, engine
from main import app
from models.Categories import Category
from models.Products import Product
from models.Suppliers import SupplierBusiness
from services.catalog_store import CatalogStore

BASE_TIME = datetime(2025, 1, 1, 12, 0, 0)


@pytest.fixture
def db_session():
    """Fresh schema per test."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def catalog(db_session) -> CatalogStore:
    return CatalogStore(db_session)


@pytest.fixture
def client(db_session) -> TestClient:
    with TestClient(app) as test_client:
        yield test_client


class CatalogFactory:
    """Small helper that inserts catalog rows with sensible defaults."""

    def __init__(self, session):
        self.session = session
        self._counter = 0

    def category(self, name: str, parent=None) -> Category:
        self._counter += 1
        category = Category(
            name=name,
            slug=f"{name.lower().replace(' ', '-')}-{self._counter}",
            parent_id=parent.id if parent else None,
        )
        self.session.add(category)
        self.session.commit()
        self.session.refresh(category)
        return category

    def supplier(self, name: str = "Acme Traders", **kwargs) -> SupplierBusiness:
        data = {"business_name": name, "is_verified": True, "city": "Surat", "state": "Gujarat", "status": "APPROVED"}
        data.update(kwargs)
        supplier = SupplierBusiness(**data)
        self.session.add(supplier)
        self.session.commit()
        self.session.refresh(supplier)
        return supplier

    def product(self, name: str, supplier, category, **kwargs) -> Product:
        self._counter += 1
        data = {
            "name": name,
            "brand": None,
            "description": "",
            "hsn_code": None,
            "price_per_unit": 1000,
            "is_active": True,
            "supplier_id": supplier.id,
            "category_id": category.id,
            "tags": [],
            "colors": [],
            "sizes": [],
            "created_at": BASE_TIME + timedelta(minutes=self._counter),
        }
        data.update(kwargs)
        product = Product(**data)
        self.session.add(product)
        self.session.commit()
        self.session.refresh(product)
        return product


@pytest.fixture
def factory(db_session) -> CatalogFactory:
    return CatalogFactory(db_session)


@pytest.fixture
def apparel_catalog(factory):
    """Two apparel products used by the fuzzy search scenarios."""
    apparel = factory.category("Apparel")
    tops = factory.category("Tops", parent=apparel)
    bottoms = factory.category("Bottoms", parent=apparel)
    supplier = factory.supplier("Acme Traders")

    shirt = factory.product(
        "Red T-Shirt", supplier, apparel,
        subcategory_id=tops.id, brand="Acme", description="Cotton crew neck tee",
        hsn_code="6109", price_per_unit=29900,
        tags=["cotton", "summer"], colors=["Red"], sizes=["M", "L"],
    )
    jeans = factory.product(
        "Blue Jeans", supplier, apparel,
        subcategory_id=bottoms.id, brand="Levis", description="Classic denim jeans",
        hsn_code="6203", price_per_unit=149900,
        tags=["denim"], colors=["Blue"], sizes=["32", "34"],
    )
    return {"shirt": shirt, "jeans": jeans, "apparel": apparel, "tops": tops, "bottoms": bottoms, "supplier": supplier}
