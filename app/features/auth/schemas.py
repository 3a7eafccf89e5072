import re
from datetime import datetime
from typing import Optional
from pydantic import EmailStr, Field, field_validator
from app.features.access.permissions import Role
from app.utils.schemas import CamelModel

USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9_]+$")

class RegisterRequest(CamelModel):
    username: str = Field(..., min_length=3, max_length=50)
    email: EmailStr
    full_name: str = Field(..., min_length=2)
    password: str = Field(..., min_length=8)
    confirm_password: str
    phone: Optional[str] = None
    role: Optional[Role] = None

    @field_validator("username")
    @classmethod
    def username_charset(cls, value: str) -> str:
        if not USERNAME_PATTERN.match(value):
            raise ValueError("Username can only contain letters, numbers, and underscores")
        return value

    @field_validator("role", mode="before")
    @classmethod
    def blank_role(cls, value):
        return value or None

class LoginRequest(CamelModel):
    username: str = Field(..., min_length=1) # username or email
    password: str = Field(..., min_length=1)

class UserResponse(CamelModel):
    id: int
    username: str
    email: str
    full_name: str
    phone: Optional[str] = None
    role: str
    created_at: Optional[datetime] = None
