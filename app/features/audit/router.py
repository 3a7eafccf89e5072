import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List, Optional
from datetime import datetime
from app.config.database import get_db
from app.features.access.permissions import Permission, require_permission
from app.models.audit import AuditLog
from app.models.user import User
from app.utils.schemas import CamelModel

router = APIRouter(prefix="/api/audit", tags=["Audit"])

logger = logging.getLogger(__name__)

class AuditResponse(CamelModel):
    id: int
    user_id: Optional[int] = None
    action: str
    details: Optional[str] = None
    timestamp: datetime

def log_action(db: Session, user_id: int, action: str, details: str = None):
    log = AuditLog(user_id=user_id, action=action, details=details)
    db.add(log)
    db.commit()
    logger.info("%s by user %s: %s", action, user_id, details)

@router.get("", response_model=List[AuditResponse])
def read_audit_logs(db: Session = Depends(get_db), current_user: User = Depends(require_permission(Permission.AUDIT_VIEW))):
    return db.query(AuditLog).order_by(AuditLog.timestamp.desc(), AuditLog.id.desc()).limit(100).all()
