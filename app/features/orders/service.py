"""Order persistence.

Orders are priced from the catalog at creation time and written together
with their items in a single transaction. Stock levels are left untouched.
"""
import logging
from typing import List
from sqlalchemy.orm import Session
from app.features.access.permissions import Permission, has_permission
from app.features.orders.pricing import checkout_totals, to_cents
from app.features.orders.schemas import OrderCreate, OrderUpdate, PaymentStatus
from app.models.order import Order, OrderItem
from app.models.product import Product
from app.models.user import User
from app.utils.errors import Forbidden, InvalidOperation, NotFound, ValidationError

logger = logging.getLogger(__name__)

PAYMENT_TRANSITIONS = {
    PaymentStatus.PENDING: {PaymentStatus.COMPLETED, PaymentStatus.FAILED},
    PaymentStatus.COMPLETED: set(),
    PaymentStatus.FAILED: set(),
}

def list_orders(db: Session, viewer: User) -> List[Order]:
    query = db.query(Order)
    if not has_permission(viewer, Permission.ORDERS_VIEW_ALL):
        query = query.filter(Order.user_id == viewer.id)
    return query.order_by(Order.created_at.desc(), Order.id.desc()).all()

def get_order(db: Session, order_id: int) -> Order:
    order = db.query(Order).filter(Order.id == order_id).first()
    if not order:
        raise NotFound("Order not found")
    return order

def get_order_for(db: Session, order_id: int, viewer: User) -> Order:
    order = get_order(db, order_id)
    if order.user_id != viewer.id and not has_permission(viewer, Permission.ORDERS_VIEW_ALL):
        raise Forbidden()
    return order

def create_order(db: Session, user: User, data: OrderCreate) -> Order:
    product_ids = {item.product_id for item in data.items}
    products = {p.id: p for p in db.query(Product).filter(Product.id.in_(product_ids)).all()}
    missing = sorted(product_ids - products.keys())
    if missing:
        raise ValidationError(f"Unknown product id(s): {', '.join(str(i) for i in missing)}")

    subtotal = sum(to_cents(products[item.product_id].price) * item.quantity for item in data.items)
    totals = checkout_totals(subtotal)

    order = Order(
        user_id=user.id,
        status="pending",
        total=totals["total"],
        shipping_address=data.shipping_address.model_dump(by_alias=True),
        payment_method=data.payment_method,
        payment_status=PaymentStatus.PENDING.value,
        shipping_status="pending",
    )
    for item in data.items:
        order.items.append(OrderItem(
            product_id=item.product_id,
            quantity=item.quantity,
            price=products[item.product_id].price,
        ))

    try:
        db.add(order)
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(order)

    if data.total is not None and to_cents(data.total) != to_cents(order.total):
        logger.warning("Order %s: client total %s replaced by %s", order.id, data.total, order.total)
    logger.info("Order %s created by user %s with %d item(s), total %s", order.id, user.id, len(order.items), order.total)
    return order

def _check_payment_transition(current: str, new: PaymentStatus):
    current = PaymentStatus(current)
    if new == current:
        return
    if new not in PAYMENT_TRANSITIONS[current]:
        raise InvalidOperation(f"Payment status cannot change from {current.value} to {new.value}")

def update_order(db: Session, order_id: int, data: OrderUpdate, editor: User) -> Order:
    changes = data.model_dump(exclude_unset=True)

    # Payment-only editors (accountants) are narrowed to paymentStatus
    if not has_permission(editor, Permission.ORDERS_UPDATE):
        if changes.get("payment_status") is None:
            raise ValidationError("No payment status provided")
        changes = {"payment_status": changes["payment_status"]}

    order = get_order(db, order_id)

    if changes.get("payment_status") is not None:
        _check_payment_transition(order.payment_status, changes["payment_status"])
        changes["payment_status"] = changes["payment_status"].value
    if changes.get("shipping_address") is not None:
        changes["shipping_address"] = data.shipping_address.model_dump(by_alias=True)

    for field, value in changes.items():
        if value is not None:
            setattr(order, field, value)
    db.commit()
    db.refresh(order)
    return order
