from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from typing import List
from app.config.database import get_db
from app.features.access.permissions import Permission, require_permission
from app.features.audit.router import log_action
from app.features.auth.dependencies import get_current_user
from app.features.auth.schemas import UserResponse
from app.features.users import service
from app.features.users.schemas import PasswordChange, ProfileUpdate, UserUpdate
from app.models.user import User
from app.utils.schemas import Message

router = APIRouter(prefix="/api", tags=["Users"])

get_admin_user = require_permission(Permission.USERS_MANAGE)

@router.get("/users", response_model=List[UserResponse])
def read_users(db: Session = Depends(get_db), admin: User = Depends(get_admin_user)):
    return service.list_users(db)

# Declared before /users/{user_id} so "password" is not parsed as an id
@router.put("/users/password", response_model=Message)
def change_password(payload: PasswordChange, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    service.change_password(db, current_user, payload)
    return {"message": "Password updated successfully"}

@router.put("/users/{user_id}", response_model=UserResponse)
def update_user(user_id: int, payload: UserUpdate, db: Session = Depends(get_db), admin: User = Depends(get_admin_user)):
    user = service.update_user(db, user_id, payload)
    changed = ", ".join(sorted(payload.model_dump(exclude_unset=True, exclude={"password"}).keys()))
    log_action(db, user_id=admin.id, action="UPDATE_USER", details=f"Updated user {user.username} (ID: {user_id}): {changed}")
    return user

@router.delete("/users/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: int, db: Session = Depends(get_db), admin: User = Depends(get_admin_user)):
    service.delete_user(db, user_id, admin)
    log_action(db, user_id=admin.id, action="DELETE_USER", details=f"Deleted user ID: {user_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.get("/profile", response_model=UserResponse)
def read_profile(current_user: User = Depends(get_current_user)):
    return current_user

@router.put("/profile", response_model=UserResponse)
def update_profile(payload: ProfileUpdate, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return service.update_profile(db, current_user, payload)
