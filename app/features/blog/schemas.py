from datetime import datetime
from typing import Optional
from pydantic import Field, field_validator
from app.utils.schemas import CamelModel, reject_null

class BlogPostCreate(CamelModel):
    title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    image_url: Optional[str] = None
    is_approved: bool = False

class BlogPostUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1)
    content: Optional[str] = Field(None, min_length=1)
    image_url: Optional[str] = None
    is_approved: Optional[bool] = None

    @field_validator("title", "content", "is_approved")
    @classmethod
    def required_columns(cls, value):
        return reject_null(value)

class BlogPostResponse(CamelModel):
    id: int
    title: str
    content: str
    image_url: Optional[str] = None
    author_id: Optional[int] = None
    is_approved: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
