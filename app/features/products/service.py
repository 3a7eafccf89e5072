from datetime import datetime
from typing import List, Optional
from sqlalchemy.orm import Session
from app.features.products.schemas import ProductCreate, ProductUpdate
from app.models.product import Product
from app.utils.errors import NotFound

def get_product(db: Session, product_id: int) -> Product:
    product = db.query(Product).filter(Product.id == product_id).first()
    if not product:
        raise NotFound("Product not found")
    return product

def list_products(db: Session, category: Optional[str] = None, featured: Optional[bool] = None) -> List[Product]:
    query = db.query(Product)
    # category takes precedence; featured only applies to the full catalog
    if category:
        query = query.filter(Product.category == category)
    elif featured is not None:
        query = query.filter(Product.featured == featured)
    return query.order_by(Product.id).all()

def create_product(db: Session, data: ProductCreate) -> Product:
    product = Product(**data.model_dump())
    db.add(product)
    db.commit()
    db.refresh(product)
    return product

def update_product(db: Session, product_id: int, data: ProductUpdate) -> Product:
    product = get_product(db, product_id)
    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(product, field, value)
    product.updated_at = datetime.utcnow()
    db.commit()
    db.refresh(product)
    return product

def delete_product(db: Session, product_id: int):
    product = get_product(db, product_id)
    db.delete(product)
    db.commit()
