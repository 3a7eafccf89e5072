from typing import Optional
from pydantic import EmailStr, Field, field_validator
from app.features.access.permissions import Role
from app.utils.schemas import CamelModel, reject_null

class UserUpdate(CamelModel):
    """Fields a super admin may change on any account."""
    full_name: Optional[str] = Field(None, min_length=2)
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    role: Optional[Role] = None
    password: Optional[str] = Field(None, min_length=8)

    @field_validator("full_name", "email", "role", "password")
    @classmethod
    def required_columns(cls, value):
        return reject_null(value)

class ProfileUpdate(CamelModel):
    full_name: Optional[str] = Field(None, min_length=2)
    email: Optional[EmailStr] = None
    phone: Optional[str] = None

    @field_validator("full_name", "email")
    @classmethod
    def required_columns(cls, value):
        return reject_null(value)

class PasswordChange(CamelModel):
    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=8)
    confirm_password: Optional[str] = None
