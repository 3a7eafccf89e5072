from datetime import datetime
from enum import Enum
from typing import List, Optional
from pydantic import Field
from app.utils.schemas import CamelModel

class PaymentStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"

class ShippingAddress(CamelModel):
    address: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    postal_code: str = Field(..., min_length=1)
    country: str = Field(..., min_length=1)

class OrderItemCreate(CamelModel):
    product_id: int
    quantity: int = Field(..., ge=1)
    price: Optional[float] = None # sent by the storefront, replaced by the catalog price

class OrderCreate(CamelModel):
    shipping_address: ShippingAddress
    payment_method: str = Field(..., min_length=1)
    items: List[OrderItemCreate] = Field(..., min_length=1)
    total: Optional[float] = None # recomputed server-side

class OrderUpdate(CamelModel):
    status: Optional[str] = None
    total: Optional[float] = Field(None, ge=0)
    shipping_address: Optional[ShippingAddress] = None
    payment_method: Optional[str] = None
    payment_status: Optional[PaymentStatus] = None
    shipping_status: Optional[str] = None

class OrderItemResponse(CamelModel):
    id: int
    order_id: int
    product_id: int
    quantity: int
    price: float

class OrderResponse(CamelModel):
    id: int
    user_id: int
    status: str
    total: float
    shipping_address: dict
    payment_method: str
    payment_status: str
    shipping_status: str
    created_at: Optional[datetime] = None
    items: List[OrderItemResponse] = Field(default_factory=list)
