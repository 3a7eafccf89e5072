import logging
from datetime import datetime
from fastapi import APIRouter, Depends, Response, status
from pydantic import EmailStr
from sqlalchemy.orm import Session
from typing import List, Optional
from app.config.database import get_db
from app.features.access.permissions import Permission, require_permission
from app.models.contact import NewsletterSubscription
from app.models.user import User
from app.utils.schemas import CamelModel

router = APIRouter(prefix="/api/newsletter", tags=["Newsletter"])

logger = logging.getLogger(__name__)

class SubscriptionCreate(CamelModel):
    email: EmailStr

class SubscriptionResponse(CamelModel):
    id: int
    email: str
    created_at: Optional[datetime] = None

@router.post("", response_model=SubscriptionResponse, status_code=status.HTTP_201_CREATED)
def subscribe(payload: SubscriptionCreate, response: Response, db: Session = Depends(get_db)):
    email = payload.email.strip().lower()
    existing = db.query(NewsletterSubscription).filter(NewsletterSubscription.email == email).first()
    if existing:
        response.status_code = status.HTTP_200_OK
        return existing

    subscription = NewsletterSubscription(email=email)
    db.add(subscription)
    db.commit()
    db.refresh(subscription)
    logger.info("New newsletter subscription (id=%s)", subscription.id)
    return subscription

@router.get("", response_model=List[SubscriptionResponse])
def read_subscriptions(db: Session = Depends(get_db), admin: User = Depends(require_permission(Permission.NEWSLETTER_VIEW))):
    return db.query(NewsletterSubscription).order_by(NewsletterSubscription.id).all()
