from typing import Optional
from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.orm import Session
from app.config.database import get_db
from app.features.auth.dependencies import get_current_user, get_optional_user
from app.features.auth.schemas import LoginRequest, RegisterRequest, UserResponse
from app.features.auth.service import authenticate_user, end_session, register_user, start_session
from app.models.user import User
from app.utils.schemas import Message

router = APIRouter(prefix="/api", tags=["Auth"])

@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(
    payload: RegisterRequest,
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
    current_user: Optional[User] = Depends(get_optional_user),
):
    user = register_user(db, payload, acting_user=current_user)
    # A signed-in admin creating an account keeps their own session
    if current_user is None:
        start_session(db, request, response, user)
    return user

@router.post("/login", response_model=UserResponse)
def login(credentials: LoginRequest, request: Request, response: Response, db: Session = Depends(get_db)):
    user = authenticate_user(db, credentials.username, credentials.password)
    start_session(db, request, response, user)
    return user

@router.post("/logout", response_model=Message)
def logout(request: Request, response: Response, db: Session = Depends(get_db)):
    end_session(db, request, response)
    return {"message": "Logged out successfully"}

@router.get("/user", response_model=UserResponse)
def read_current_user(current_user: User = Depends(get_current_user)):
    return current_user
