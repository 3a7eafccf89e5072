import secrets
from datetime import datetime
from typing import Optional
from jose import jwt, JWTError
from passlib.context import CryptContext
from app.config.settings import settings

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=settings.BCRYPT_ROUNDS)

def verify_password(plain_password, hashed_password):
    return pwd_context.verify(plain_password, hashed_password)

def get_password_hash(password):
    return pwd_context.hash(password)

def new_session_id() -> str:
    return secrets.token_hex(32)

def sign_session_id(sid: str, expires_at: datetime) -> str:
    """Wrap a session id in a signed token so the cookie cannot be forged."""
    return jwt.encode({"sid": sid, "exp": expires_at}, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

def unsign_session_id(token: str) -> Optional[str]:
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None
    return payload.get("sid")
