from datetime import datetime
from fastapi import APIRouter, Depends, status
from pydantic import EmailStr, Field
from sqlalchemy.orm import Session
from typing import List, Optional
from app.config.database import get_db
from app.features.access.permissions import Permission, require_permission
from app.features.audit.router import log_action
from app.models.contact import ContactSubmission
from app.models.user import User
from app.utils.errors import NotFound
from app.utils.schemas import CamelModel

router = APIRouter(prefix="/api/contact", tags=["Contact"])

class ContactCreate(CamelModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    subject: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)

class ContactResponse(CamelModel):
    id: int
    name: str
    email: str
    subject: str
    message: str
    is_resolved: bool
    created_at: Optional[datetime] = None

get_contact_manager = require_permission(Permission.CONTACT_MANAGE)

@router.post("", response_model=ContactResponse, status_code=status.HTTP_201_CREATED)
def submit_contact_form(payload: ContactCreate, db: Session = Depends(get_db)):
    submission = ContactSubmission(**payload.model_dump(), is_resolved=False)
    db.add(submission)
    db.commit()
    db.refresh(submission)
    return submission

@router.get("", response_model=List[ContactResponse])
def read_submissions(db: Session = Depends(get_db), admin: User = Depends(get_contact_manager)):
    return db.query(ContactSubmission).order_by(ContactSubmission.created_at.desc(), ContactSubmission.id.desc()).all()

@router.put("/{submission_id}", response_model=ContactResponse)
def resolve_submission(submission_id: int, db: Session = Depends(get_db), admin: User = Depends(get_contact_manager)):
    submission = db.query(ContactSubmission).filter(ContactSubmission.id == submission_id).first()
    if not submission:
        raise NotFound("Contact submission not found")

    submission.is_resolved = True
    db.commit()
    db.refresh(submission)

    log_action(db, user_id=admin.id, action="RESOLVE_CONTACT", details=f"Resolved contact submission ID: {submission_id}")
    return submission
