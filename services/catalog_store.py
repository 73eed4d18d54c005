# services/catalog_store.py
from typing import Annotated, List, Optional, Tuple

from fastapi import Depends
from sqlalchemy.orm import Session, Query, joinedload

from db.connection import db_dependency
from functions.query_params import INT64_MIN, INT64_MAX
from models.Products import Product
from models.Categories import Category
from models.Suppliers import SupplierBusiness

LIKE_ESCAPE = "\\"


def like_pattern(text: str) -> str:
    """Substring ILIKE pattern with the user's own wildcards escaped"""
    escaped = (
        text.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )
    return f"%{escaped}%"


class CatalogStore:
    """
    Read-only view of the catalog for a single request.

    Every search component receives the store explicitly instead of reaching
    for a session on its own, so one request always reads through one session.
    """

    def __init__(self, db: Session):
        self.db = db

    # -------- products --------
    def active_products(self) -> Query:
        """Active, non-deleted products joined to their supplier and category"""
        return (
            self.db.query(Product)
            .join(Product.supplier)
            .join(Product.category)
            .options(
                joinedload(Product.supplier),
                joinedload(Product.category),
                joinedload(Product.subcategory),
            )
            .filter(Product.is_active == True, Product.deleted_at.is_(None))
        )

    def approved_products(self) -> Query:
        """Active products of approved suppliers, used by the browse feed"""
        return (
            self.db.query(Product)
            .join(Product.supplier)
            .options(joinedload(Product.supplier))
            .filter(
                Product.is_active == True,
                Product.deleted_at.is_(None),
                SupplierBusiness.status == "APPROVED",
            )
        )

    def fetch_page(self, query: Query, offset: int, limit: int) -> Tuple[List[Product], int]:
        """Return one window of rows plus the count of the whole filtered set"""
        total = query.order_by(None).count()
        rows = query.offset(offset).limit(limit).all()
        return rows, total

    def match_products(self, text: str, limit: int) -> List[Product]:
        pattern = like_pattern(text)
        return (
            self.db.query(Product)
            .options(joinedload(Product.category))
            .filter(
                Product.is_active == True,
                Product.deleted_at.is_(None),
                (Product.name.ilike(pattern, escape=LIKE_ESCAPE)) | (Product.brand.ilike(pattern, escape=LIKE_ESCAPE)),
            )
            .order_by(Product.id)
            .limit(limit)
            .all()
        )

    def match_brands(self, text: str, limit: int) -> List[str]:
        rows = (
            self.db.query(Product.brand)
            .filter(
                Product.is_active == True,
                Product.deleted_at.is_(None),
                Product.brand.isnot(None),
                Product.brand.ilike(like_pattern(text), escape=LIKE_ESCAPE),
            )
            .distinct()
            .order_by(Product.brand)
            .limit(limit)
            .all()
        )
        return [row[0] for row in rows]

    # -------- categories --------
    def match_categories(self, text: str, limit: int) -> List[Category]:
        return (
            self.db.query(Category)
            .filter(Category.name.ilike(like_pattern(text), escape=LIKE_ESCAPE))
            .order_by(Category.id)
            .limit(limit)
            .all()
        )

    def categories(self) -> List[Category]:
        return self.db.query(Category).order_by(Category.name, Category.id).all()

    def category(self, category_id: int) -> Optional[Category]:
        if not INT64_MIN <= category_id <= INT64_MAX:
            return None
        return self.db.query(Category).filter(Category.id == category_id).first()

    def subcategories(self, parent_id: int) -> List[Category]:
        return (
            self.db.query(Category)
            .filter(Category.parent_id == parent_id)
            .order_by(Category.name, Category.id)
            .all()
        )


def get_catalog(db: db_dependency) -> CatalogStore:
    return CatalogStore(db)


catalog_dependency = Annotated[CatalogStore, Depends(get_catalog)]
