"""Server-side sessions stored in the ``sessions`` table.

The cookie only carries a signed session id. Sessions last
``SESSION_MAX_AGE_DAYS`` from issuance and are never extended by use.
"""
import logging
from datetime import datetime, timedelta
from typing import Optional
from fastapi import Response
from sqlalchemy.orm import Session
from app.config.settings import settings
from app.models.session import UserSession
from app.models.user import User
from app.utils.security import new_session_id, sign_session_id

logger = logging.getLogger(__name__)

def create_session(db: Session, user: User) -> UserSession:
    session = UserSession(
        sid=new_session_id(),
        user_id=user.id,
        expires_at=datetime.utcnow() + timedelta(days=settings.SESSION_MAX_AGE_DAYS),
    )
    db.add(session)
    db.commit()
    db.refresh(session)
    return session

def get_session_user(db: Session, sid: str) -> Optional[User]:
    """Current user row behind a session id, or None when missing or expired."""
    session = db.query(UserSession).filter(UserSession.sid == sid).first()
    if not session:
        return None
    if session.expires_at <= datetime.utcnow():
        db.delete(session)
        db.commit()
        return None
    # Re-read the user so role changes apply from the next request on
    return db.query(User).filter(User.id == session.user_id).first()

def destroy_session(db: Session, sid: str) -> bool:
    deleted = db.query(UserSession).filter(UserSession.sid == sid).delete()
    db.commit()
    return deleted > 0

def destroy_user_sessions(db: Session, user_id: int) -> int:
    deleted = db.query(UserSession).filter(UserSession.user_id == user_id).delete()
    db.commit()
    return deleted

def purge_expired_sessions(db: Session) -> int:
    deleted = db.query(UserSession).filter(UserSession.expires_at <= datetime.utcnow()).delete()
    db.commit()
    if deleted:
        logger.info("Purged %d expired sessions", deleted)
    return deleted

def set_session_cookie(response: Response, session: UserSession):
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=sign_session_id(session.sid, session.expires_at),
        max_age=settings.session_max_age_seconds,
        domain=settings.COOKIE_DOMAIN,
        secure=settings.is_production,
        httponly=True,
        samesite="lax",
    )

def clear_session_cookie(response: Response):
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        domain=settings.COOKIE_DOMAIN,
        secure=settings.is_production,
        httponly=True,
        samesite="lax",
    )
