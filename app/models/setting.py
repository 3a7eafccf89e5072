from sqlalchemy import Column, Integer, String, Boolean, DateTime, CheckConstraint
from datetime import datetime
from app.config.database import Base

SITE_SETTINGS_ID = 1

class SiteSettings(Base):
    __tablename__ = "site_settings"
    __table_args__ = (CheckConstraint("id = 1", name="site_settings_single_row"),)

    id = Column(Integer, primary_key=True, default=SITE_SETTINGS_ID)
    site_name = Column(String, nullable=False, default="Limpias Technologies")
    site_description = Column(String, nullable=False, default="Your trusted partner in solar technology solutions")
    contact_email = Column(String, nullable=False, default="contact@limpiastech.com")
    contact_phone = Column(String, nullable=False, default="+1234567890")
    maintenance_mode = Column(Boolean, nullable=False, default=False)
    enable_blog = Column(Boolean, nullable=False, default=True)
    enable_shop = Column(Boolean, nullable=False, default=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
