from fastapi import Depends
from sqlalchemy.orm import Session
from .database import engine, SessionLocal
from typing import Annotated
from models.Categories import Base as CategoriesBase
from models.Suppliers import Base as SuppliersBase
from models.Products import Base as ProductsBase

CategoriesBase.metadata.create_all(bind=engine) # for categories models
SuppliersBase.metadata.create_all(bind=engine) # for supplier businesses
ProductsBase.metadata.create_all(bind=engine) # for products models

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


db_dependency = Annotated[Session, Depends(get_db)]
