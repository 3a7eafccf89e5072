from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from typing import List, Optional
from app.config.database import get_db
from app.features.access.permissions import Permission, require_permission
from app.features.audit.router import log_action
from app.features.auth.dependencies import get_optional_user
from app.features.blog import service
from app.features.blog.schemas import BlogPostCreate, BlogPostResponse, BlogPostUpdate
from app.models.user import User

router = APIRouter(prefix="/api/blog-posts", tags=["Blog"])

@router.get("", response_model=List[BlogPostResponse])
def read_posts(db: Session = Depends(get_db), viewer: Optional[User] = Depends(get_optional_user)):
    return service.list_posts(db, viewer)

@router.get("/{post_id}", response_model=BlogPostResponse)
def read_post(post_id: int, db: Session = Depends(get_db), viewer: Optional[User] = Depends(get_optional_user)):
    return service.get_post(db, post_id, viewer)

@router.post("", response_model=BlogPostResponse, status_code=status.HTTP_201_CREATED)
def create_post(payload: BlogPostCreate, db: Session = Depends(get_db), author: User = Depends(require_permission(Permission.BLOG_WRITE))):
    return service.create_post(db, payload, author)

@router.put("/{post_id}", response_model=BlogPostResponse)
def update_post(post_id: int, payload: BlogPostUpdate, db: Session = Depends(get_db), editor: User = Depends(require_permission(Permission.BLOG_WRITE))):
    was_approved = service.get_post(db, post_id, editor).is_approved
    post = service.update_post(db, post_id, payload, editor)
    if post.is_approved != was_approved:
        action = "APPROVE_BLOG_POST" if post.is_approved else "UNAPPROVE_BLOG_POST"
        log_action(db, user_id=editor.id, action=action, details=f"Blog post: {post.title} (ID: {post.id})")
    return post

@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_post(post_id: int, db: Session = Depends(get_db), admin: User = Depends(require_permission(Permission.BLOG_DELETE))):
    service.delete_post(db, post_id)
    log_action(db, user_id=admin.id, action="DELETE_BLOG_POST", details=f"Deleted blog post ID: {post_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
