"""
Resume uploads, stored on local disk and served from /uploads.
"""
import logging
import os
import time
from typing import AsyncIterator, Optional
from app.core.config import settings
from app.core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def _safe_filename(filename: str) -> str:
    name = os.path.basename(filename.replace("\\", "/")).strip()
    return "".join(ch if ch.isalnum() or ch in "._-" else "_" for ch in name)


class UploadService:
    def __init__(self, upload_dir: Optional[str] = None, base_url: Optional[str] = None,
                 max_bytes: Optional[int] = None):
        self.upload_dir = upload_dir or settings.UPLOAD_DIR
        self.base_url = (base_url or settings.PUBLIC_BASE_URL).rstrip("/")
        self.max_bytes = max_bytes or settings.MAX_UPLOAD_BYTES

    async def save_resume(self, user_id: int, filename: Optional[str], chunks: AsyncIterator[bytes]) -> str:
        """Stream an uploaded resume to disk and return its public URL."""
        safe_name = _safe_filename(filename or "")
        if not safe_name:
            raise ValidationError("Filename is required", fields=["filename"])

        # Namespaced per user; the timestamp prefix avoids collisions
        relative_path = f"{user_id}/{int(time.time() * 1000)}-{safe_name}"
        target = os.path.join(self.upload_dir, *relative_path.split("/"))
        os.makedirs(os.path.dirname(target), exist_ok=True)

        written = 0
        try:
            with open(target, "wb") as out:
                async for chunk in chunks:
                    if not chunk:
                        continue
                    written += len(chunk)
                    if written > self.max_bytes:
                        raise ValidationError("Uploaded file is too large", fields=["file"])
                    out.write(chunk)
        except Exception:
            # Never leave a partial file behind
            os.remove(target)
            raise

        if written == 0:
            os.remove(target)
            raise ValidationError("Request body is empty", fields=["file"])

        url = f"{self.base_url}/uploads/{relative_path}"
        logger.info(f"Resume uploaded successfully: {url}")
        return url


_upload_service_instance = None

def get_upload_service() -> UploadService:
    global _upload_service_instance
    if _upload_service_instance is None:
        _upload_service_instance = UploadService()
    return _upload_service_instance
