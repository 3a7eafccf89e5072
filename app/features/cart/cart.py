"""Model of the storefront cart.

The cart lives in the browser's local storage under the ``cart`` key as a
JSON list of line items. Prices and names are captured when an item is
added and are never re-checked against the catalog; the order endpoint
reprices everything at checkout.

The server never imports this module: the cart is client state. It is kept
as the reference for the checkout payload the storefront builds and is
exercised by the test suite.
"""
import json
from typing import Callable, Dict, List, Optional
from pydantic import Field, TypeAdapter
from app.features.orders.pricing import checkout_totals, to_cents
from app.utils.schemas import CamelModel

CART_UPDATED = "cartUpdated"

class CartItem(CamelModel):
    id: int # product id
    name: str
    price: float = Field(..., ge=0)
    image_url: Optional[str] = None
    quantity: int = Field(1, ge=1)

_items_adapter = TypeAdapter(List[CartItem])

class Cart:
    def __init__(self, items: Optional[List[CartItem]] = None):
        self._items: List[CartItem] = list(items or [])
        self._listeners: List[Callable[[str, "Cart"], None]] = []

    @classmethod
    def from_json(cls, raw: Optional[str]) -> "Cart":
        """Load the local-storage form; a missing value is an empty cart."""
        if not raw:
            return cls()
        return cls(_items_adapter.validate_python(json.loads(raw)))

    def to_json(self) -> str:
        return json.dumps([item.model_dump(by_alias=True) for item in self._items])

    @property
    def items(self) -> List[CartItem]:
        return list(self._items)

    def __len__(self):
        return len(self._items)

    def subscribe(self, listener: Callable[[str, "Cart"], None]) -> Callable[[], None]:
        """Register a listener called after every mutation; returns an unsubscribe function."""
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def _notify(self):
        for listener in list(self._listeners):
            listener(CART_UPDATED, self)

    def _find(self, product_id: int) -> Optional[CartItem]:
        for item in self._items:
            if item.id == product_id:
                return item
        return None

    def add(self, product_id: int, name: str, price: float, image_url: Optional[str] = None, quantity: int = 1) -> CartItem:
        if quantity < 1:
            raise ValueError("Quantity must be at least 1")
        item = self._find(product_id)
        if item:
            item.quantity += quantity
        else:
            item = CartItem(id=product_id, name=name, price=price, image_url=image_url, quantity=quantity)
            self._items.append(item)
        self._notify()
        return item

    def update_quantity(self, product_id: int, quantity: int) -> CartItem:
        if quantity < 1:
            raise ValueError("Quantity must be at least 1")
        item = self._find(product_id)
        if item is None:
            raise KeyError(product_id)
        item.quantity = quantity
        self._notify()
        return item

    def remove(self, product_id: int):
        self._items = [item for item in self._items if item.id != product_id]
        self._notify()

    def clear(self):
        self._items = []
        self._notify()

    def subtotal(self) -> float:
        return float(sum((to_cents(item.price) * item.quantity for item in self._items), to_cents(0)))

    def totals(self) -> Dict[str, float]:
        return checkout_totals(self.subtotal())

    def to_order_payload(self, shipping_address: dict, payment_method: str) -> dict:
        """Request body for ``POST /api/orders``."""
        return {
            "shippingAddress": shipping_address,
            "paymentMethod": payment_method,
            "total": self.totals()["total"],
            "items": [
                {"productId": item.id, "quantity": item.quantity, "price": item.price}
                for item in self._items
            ],
        }
