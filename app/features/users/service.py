import logging
from typing import List
from sqlalchemy.orm import Session
from app.features.auth.service import get_user_by_email
from app.features.auth.sessions import destroy_user_sessions
from app.features.users.schemas import PasswordChange, ProfileUpdate, UserUpdate
from app.models.order import Order
from app.models.user import User
from app.utils.errors import DuplicateIdentifier, InvalidCredentials, InvalidOperation, NotFound, PasswordMismatch
from app.utils.security import get_password_hash, verify_password

logger = logging.getLogger(__name__)

# The bootstrap super admin account can never be removed
PROTECTED_USER_ID = 1

def list_users(db: Session) -> List[User]:
    return db.query(User).order_by(User.id).all()

def get_user(db: Session, user_id: int) -> User:
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFound("User not found")
    return user

def _apply_email(db: Session, user: User, email: str):
    email = email.strip().lower()
    existing = get_user_by_email(db, email)
    if existing and existing.id != user.id:
        raise DuplicateIdentifier("Email already exists")
    user.email = email

def update_user(db: Session, user_id: int, data: UserUpdate) -> User:
    user = get_user(db, user_id)
    changes = data.model_dump(exclude_unset=True)

    if changes.get("email") is not None:
        _apply_email(db, user, changes.pop("email"))
    if changes.get("password"):
        user.hashed_password = get_password_hash(changes.pop("password"))
    if changes.get("role") is not None:
        user.role = changes.pop("role").value
    for field in ("full_name", "phone"):
        if field in changes:
            setattr(user, field, changes[field])

    db.commit()
    db.refresh(user)
    return user

def delete_user(db: Session, user_id: int, acting_user: User):
    if user_id == PROTECTED_USER_ID:
        raise InvalidOperation("The primary administrator account cannot be deleted")
    if user_id == acting_user.id:
        raise InvalidOperation("Cannot delete your own account")

    user = get_user(db, user_id)
    if db.query(Order).filter(Order.user_id == user.id).first():
        raise InvalidOperation("Users with orders cannot be deleted")
    destroy_user_sessions(db, user.id)
    db.delete(user)
    db.commit()
    logger.info("Deleted user %s (id=%s)", user.username, user_id)

def update_profile(db: Session, user: User, data: ProfileUpdate) -> User:
    changes = data.model_dump(exclude_unset=True)
    if changes.get("email") is not None:
        _apply_email(db, user, changes.pop("email"))
    if changes.get("full_name") is not None:
        user.full_name = changes["full_name"]
    if "phone" in changes:
        user.phone = changes["phone"]
    db.commit()
    db.refresh(user)
    return user

def change_password(db: Session, user: User, data: PasswordChange):
    if not verify_password(data.current_password, user.hashed_password):
        raise InvalidCredentials("Current password is incorrect")
    if data.confirm_password is not None and data.confirm_password != data.new_password:
        raise PasswordMismatch()
    user.hashed_password = get_password_hash(data.new_password)
    db.commit()
    logger.info("User %s changed their password", user.username)
