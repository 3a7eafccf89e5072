"""Image processing for uploads: fit inside a box, never enlarge, re-encode as JPEG."""
import io
import os
import secrets
import time
from typing import Optional, Tuple
from PIL import Image, UnidentifiedImageError
from app.utils.errors import ValidationError

JPEG_QUALITY = 80

# Bounding box per upload type; anything else is stored unresized under "general"
UPLOAD_SIZES = {
    "products": (800, 800),
    "blog": (1200, 800),
    "profiles": (300, 300),
}
GENERAL_UPLOAD_TYPE = "general"

ALLOWED_MIME_TYPES = {"image/jpeg", "image/png", "image/gif", "image/webp"}

def resolve_upload_type(upload_type: str) -> str:
    return upload_type if upload_type in UPLOAD_SIZES else GENERAL_UPLOAD_TYPE

def unique_filename(original_name: Optional[str]) -> str:
    extension = os.path.splitext(original_name or "")[1].lower() or ".jpg"
    return f"{int(time.time() * 1000)}-{secrets.token_hex(8)}{extension}"

def process_image(data: bytes, size: Optional[Tuple[int, int]] = None, quality: int = JPEG_QUALITY) -> bytes:
    try:
        image = Image.open(io.BytesIO(data))
        image.load()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError):
        raise ValidationError("Only image files are allowed!")

    if size:
        # thumbnail() keeps the aspect ratio and only ever shrinks
        image.thumbnail(size, Image.Resampling.LANCZOS)
    if image.mode not in ("RGB", "L"):
        image = image.convert("RGB")

    output = io.BytesIO()
    image.save(output, format="JPEG", quality=quality)
    return output.getvalue()
