import logging
from typing import Optional
from fastapi import Request, Response
from sqlalchemy.orm import Session
from app.features.access.permissions import Permission, Role, has_permission
from app.features.auth.dependencies import get_session_id
from app.features.auth.schemas import RegisterRequest
from app.features.auth.sessions import clear_session_cookie, create_session, destroy_session, set_session_cookie
from app.models.user import User
from app.utils.errors import DuplicateIdentifier, Forbidden, InvalidCredentials, PasswordMismatch
from app.utils.security import get_password_hash, verify_password

logger = logging.getLogger(__name__)

def get_user_by_username(db: Session, username: str) -> Optional[User]:
    return db.query(User).filter(User.username == username).first()

def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email.strip().lower()).first()

def authenticate_user(db: Session, identifier: str, password: str) -> User:
    """Check a username or email (anything containing "@") against its password hash."""
    identifier = identifier.strip()
    if "@" in identifier:
        user = get_user_by_email(db, identifier)
    else:
        user = get_user_by_username(db, identifier)

    if not user or not verify_password(password, user.hashed_password):
        logger.warning("Failed login attempt for %s", identifier)
        raise InvalidCredentials()
    return user

def register_user(db: Session, data: RegisterRequest, acting_user: Optional[User] = None) -> User:
    if data.password != data.confirm_password:
        raise PasswordMismatch()
    if get_user_by_username(db, data.username):
        raise DuplicateIdentifier("Username already exists")
    if get_user_by_email(db, data.email):
        raise DuplicateIdentifier("Email already exists")

    role = data.role or Role.CUSTOMER
    if role != Role.CUSTOMER and not has_permission(acting_user, Permission.USERS_MANAGE):
        raise Forbidden("Only a super admin can assign staff roles")

    user = User(
        username=data.username,
        email=data.email.strip().lower(),
        hashed_password=get_password_hash(data.password),
        full_name=data.full_name,
        phone=data.phone,
        role=role.value,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Registered user %s (id=%s, role=%s)", user.username, user.id, user.role)
    return user

def start_session(db: Session, request: Request, response: Response, user: User):
    """Log a user in, replacing any session the request already carried."""
    previous = get_session_id(request)
    if previous:
        destroy_session(db, previous)
    session = create_session(db, user)
    set_session_cookie(response, session)
    logger.info("User %s logged in", user.username)

def end_session(db: Session, request: Request, response: Response):
    sid = get_session_id(request)
    if sid:
        destroy_session(db, sid)
    clear_session_cookie(response)
