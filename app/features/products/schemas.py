from datetime import datetime
from typing import Any, Dict, Optional
from pydantic import Field, field_validator
from app.utils.schemas import CamelModel, reject_null

class ProductCreate(CamelModel):
    name: str = Field(..., min_length=1)
    description: str
    price: float = Field(..., ge=0)
    category: str = Field(..., min_length=1)
    image_url: Optional[str] = None
    specifications: Dict[str, Any] = Field(default_factory=dict)
    stock: int = Field(0, ge=0)
    featured: bool = False

class ProductUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    category: Optional[str] = Field(None, min_length=1)
    image_url: Optional[str] = None
    specifications: Optional[Dict[str, Any]] = None
    stock: Optional[int] = Field(None, ge=0)
    featured: Optional[bool] = None

    @field_validator("name", "description", "price", "category", "specifications", "stock", "featured")
    @classmethod
    def required_columns(cls, value):
        return reject_null(value)

class ProductResponse(CamelModel):
    id: int
    name: str
    description: str
    price: float
    category: str
    image_url: Optional[str] = None
    specifications: Dict[str, Any] = Field(default_factory=dict)
    stock: int
    featured: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
