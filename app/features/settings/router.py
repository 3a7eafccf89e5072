from datetime import datetime
from fastapi import APIRouter, Depends
from pydantic import EmailStr, Field
from sqlalchemy.orm import Session
from typing import Optional
from app.config.database import get_db
from app.features.access.permissions import Permission, require_permission
from app.features.audit.router import log_action
from app.features.settings.service import get_site_settings, update_site_settings
from app.models.user import User
from app.utils.schemas import CamelModel

router = APIRouter(prefix="/api", tags=["Settings"])

class PublicSettings(CamelModel):
    site_name: str
    site_description: str
    contact_email: str
    contact_phone: str
    enable_blog: bool
    enable_shop: bool

class SiteSettingsResponse(PublicSettings):
    maintenance_mode: bool
    updated_at: Optional[datetime] = None

class SiteSettingsUpdate(CamelModel):
    site_name: Optional[str] = Field(None, min_length=1)
    site_description: Optional[str] = None
    contact_email: Optional[EmailStr] = None
    contact_phone: Optional[str] = None
    maintenance_mode: Optional[bool] = None
    enable_blog: Optional[bool] = None
    enable_shop: Optional[bool] = None

get_settings_admin = require_permission(Permission.SETTINGS_MANAGE)

@router.get("/settings", response_model=SiteSettingsResponse)
def read_settings(db: Session = Depends(get_db), admin: User = Depends(get_settings_admin)):
    return get_site_settings(db)

@router.put("/settings", response_model=SiteSettingsResponse)
def update_settings(payload: SiteSettingsUpdate, db: Session = Depends(get_db), admin: User = Depends(get_settings_admin)):
    changes = payload.model_dump(exclude_unset=True)
    row = update_site_settings(db, changes)
    log_action(db, user_id=admin.id, action="UPDATE_SETTINGS", details=f"Changed: {', '.join(sorted(changes)) or 'nothing'}")
    return row

@router.get("/public-settings", response_model=PublicSettings)
def read_public_settings(db: Session = Depends(get_db)):
    return get_site_settings(db)
