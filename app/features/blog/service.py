"""Blog posts.

Editors without approval rights always write unapproved drafts; only
approvers may publish, and only callers allowed to see drafts can read them.
"""
from datetime import datetime
from typing import List, Optional
from sqlalchemy.orm import Session
from app.features.access.permissions import Permission, has_permission
from app.features.blog.schemas import BlogPostCreate, BlogPostUpdate
from app.models.blog import BlogPost
from app.models.user import User
from app.utils.errors import Forbidden, NotFound

def can_view_unapproved(user: Optional[User]) -> bool:
    return has_permission(user, Permission.BLOG_VIEW_UNAPPROVED)

def list_posts(db: Session, viewer: Optional[User] = None) -> List[BlogPost]:
    query = db.query(BlogPost)
    if not can_view_unapproved(viewer):
        query = query.filter(BlogPost.is_approved.is_(True))
    return query.order_by(BlogPost.created_at.desc(), BlogPost.id.desc()).all()

def get_post(db: Session, post_id: int, viewer: Optional[User] = None) -> BlogPost:
    post = db.query(BlogPost).filter(BlogPost.id == post_id).first()
    # Drafts are invisible, not forbidden, to the public
    if not post or (not post.is_approved and not can_view_unapproved(viewer)):
        raise NotFound("Blog post not found")
    return post

def create_post(db: Session, data: BlogPostCreate, author: User) -> BlogPost:
    post = BlogPost(
        title=data.title,
        content=data.content,
        image_url=data.image_url,
        author_id=author.id,
        is_approved=data.is_approved if has_permission(author, Permission.BLOG_APPROVE) else False,
    )
    db.add(post)
    db.commit()
    db.refresh(post)
    return post

def update_post(db: Session, post_id: int, data: BlogPostUpdate, editor: User) -> BlogPost:
    post = get_post(db, post_id, viewer=editor)
    if not has_permission(editor, Permission.BLOG_EDIT_ANY) and post.author_id != editor.id:
        raise Forbidden("You can only edit your own posts")

    changes = data.model_dump(exclude_unset=True)
    if not has_permission(editor, Permission.BLOG_APPROVE):
        changes.pop("is_approved", None)
    if changes.get("is_approved") is None:
        changes.pop("is_approved", None)

    for field, value in changes.items():
        setattr(post, field, value)
    post.updated_at = datetime.utcnow()
    db.commit()
    db.refresh(post)
    return post

def delete_post(db: Session, post_id: int):
    post = db.query(BlogPost).filter(BlogPost.id == post_id).first()
    if not post:
        raise NotFound("Blog post not found")
    db.delete(post)
    db.commit()
