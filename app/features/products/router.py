from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from typing import List, Optional
from app.config.database import get_db
from app.features.access.permissions import Permission, require_permission
from app.features.audit.router import log_action
from app.features.products import service
from app.features.products.schemas import ProductCreate, ProductResponse, ProductUpdate
from app.models.user import User

router = APIRouter(prefix="/api/products", tags=["Products"])

get_product_manager = require_permission(Permission.PRODUCTS_MANAGE)

@router.get("", response_model=List[ProductResponse])
def read_products(category: Optional[str] = None, featured: Optional[bool] = None, db: Session = Depends(get_db)):
    # featured=false means "no filter", matching the storefront query strings
    return service.list_products(db, category=category, featured=True if featured else None)

@router.get("/{product_id}", response_model=ProductResponse)
def read_product(product_id: int, db: Session = Depends(get_db)):
    return service.get_product(db, product_id)

@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
def create_product(payload: ProductCreate, db: Session = Depends(get_db), manager: User = Depends(get_product_manager)):
    product = service.create_product(db, payload)
    log_action(db, user_id=manager.id, action="CREATE_PRODUCT", details=f"Created product: {product.name} (ID: {product.id})")
    return product

@router.put("/{product_id}", response_model=ProductResponse)
def update_product(product_id: int, payload: ProductUpdate, db: Session = Depends(get_db), manager: User = Depends(get_product_manager)):
    product = service.update_product(db, product_id, payload)
    log_action(db, user_id=manager.id, action="UPDATE_PRODUCT", details=f"Updated product: {product.name} (ID: {product.id})")
    return product

@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(product_id: int, db: Session = Depends(get_db), manager: User = Depends(get_product_manager)):
    service.delete_product(db, product_id)
    log_action(db, user_id=manager.id, action="DELETE_PRODUCT", details=f"Deleted product ID: {product_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
