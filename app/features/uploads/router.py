import logging
import os
from fastapi import APIRouter, Depends, File, UploadFile, status
from pydantic import BaseModel
from app.config.settings import settings
from app.features.access.permissions import Permission, has_permission
from app.features.auth.dependencies import get_current_user
from app.features.uploads.images import ALLOWED_MIME_TYPES, UPLOAD_SIZES, process_image, resolve_upload_type, unique_filename
from app.models.user import User
from app.utils.errors import Forbidden, ValidationError

router = APIRouter(prefix="/api/upload", tags=["Uploads"])

logger = logging.getLogger(__name__)

# Permission needed per upload type; other types only need a session
UPLOAD_PERMISSIONS = {
    "products": Permission.PRODUCTS_MANAGE,
    "blog": Permission.BLOG_WRITE,
}

class UploadResponse(BaseModel):
    url: str
    filename: str

@router.post("/{upload_type}", response_model=UploadResponse, status_code=status.HTTP_201_CREATED)
async def upload_image(upload_type: str, file: UploadFile = File(...), current_user: User = Depends(get_current_user)):
    upload_type = resolve_upload_type(upload_type)
    required = UPLOAD_PERMISSIONS.get(upload_type)
    if required and not has_permission(current_user, required):
        raise Forbidden()

    if file.content_type not in ALLOWED_MIME_TYPES:
        raise ValidationError("Only image files are allowed!")
    data = await file.read(settings.MAX_UPLOAD_SIZE + 1)
    if len(data) > settings.MAX_UPLOAD_SIZE:
        raise ValidationError(f"File too large (max {settings.MAX_UPLOAD_SIZE // (1024 * 1024)}MB)")

    processed = process_image(data, UPLOAD_SIZES.get(upload_type))

    directory = os.path.join(settings.UPLOAD_DIR, upload_type)
    os.makedirs(directory, exist_ok=True)
    filename = unique_filename(file.filename)
    with open(os.path.join(directory, filename), "wb") as f:
        f.write(processed)

    logger.info("User %s uploaded %s/%s (%d bytes)", current_user.id, upload_type, filename, len(processed))
    return {"url": f"/uploads/{upload_type}/{filename}", "filename": filename}
