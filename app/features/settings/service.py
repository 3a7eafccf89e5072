from datetime import datetime
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.models.setting import SITE_SETTINGS_ID, SiteSettings

def get_site_settings(db: Session) -> SiteSettings:
    """The single settings row, created with defaults on first access."""
    row = db.query(SiteSettings).filter(SiteSettings.id == SITE_SETTINGS_ID).first()
    if row:
        return row

    row = SiteSettings(id=SITE_SETTINGS_ID)
    db.add(row)
    try:
        db.commit()
    except IntegrityError:
        # Another request created the row first
        db.rollback()
        return db.query(SiteSettings).filter(SiteSettings.id == SITE_SETTINGS_ID).one()
    db.refresh(row)
    return row

def update_site_settings(db: Session, changes: dict) -> SiteSettings:
    row = get_site_settings(db)
    for field, value in changes.items():
        if value is not None:
            setattr(row, field, value)
    row.updated_at = datetime.utcnow()
    db.commit()
    db.refresh(row)
    return row
