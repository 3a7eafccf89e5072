from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from app.config.database import get_db
from app.features.access.permissions import Permission, require_any_permission
from app.features.audit.router import log_action
from app.features.auth.dependencies import get_current_user
from app.features.orders import service
from app.features.orders.schemas import OrderCreate, OrderResponse, OrderUpdate
from app.models.user import User

router = APIRouter(prefix="/api/orders", tags=["Orders"])

get_order_editor = require_any_permission(Permission.ORDERS_UPDATE, Permission.ORDERS_UPDATE_PAYMENT)

@router.get("", response_model=List[OrderResponse])
def read_orders(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return service.list_orders(db, current_user)

@router.get("/{order_id}", response_model=OrderResponse)
def read_order(order_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return service.get_order_for(db, order_id, current_user)

@router.post("", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
def create_order(payload: OrderCreate, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return service.create_order(db, current_user, payload)

@router.put("/{order_id}", response_model=OrderResponse)
def update_order(order_id: int, payload: OrderUpdate, db: Session = Depends(get_db), editor: User = Depends(get_order_editor)):
    order = service.update_order(db, order_id, payload, editor)
    log_action(db, user_id=editor.id, action="UPDATE_ORDER", details=f"Order ID {order.id}: payment={order.payment_status}, shipping={order.shipping_status}, status={order.status}")
    return order
