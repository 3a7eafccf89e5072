from typing import Optional
from fastapi import Depends, Request
from sqlalchemy.orm import Session
from app.config.database import get_db
from app.config.settings import settings
from app.features.auth.sessions import get_session_user
from app.models.user import User
from app.utils.errors import Unauthorized
from app.utils.security import unsign_session_id

def get_session_id(request: Request) -> Optional[str]:
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not token:
        return None
    return unsign_session_id(token)

def get_optional_user(request: Request, db: Session = Depends(get_db)) -> Optional[User]:
    sid = get_session_id(request)
    if sid is None:
        return None
    return get_session_user(db, sid)

def get_current_user(user: Optional[User] = Depends(get_optional_user)) -> User:
    if user is None:
        raise Unauthorized("Not authenticated")
    return user
