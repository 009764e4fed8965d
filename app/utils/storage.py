"""
Resume upload adapter.

Validates the file, then hands it to the configured file host and returns
the public URL that ends up in the application's resumeUrl.
"""

import asyncio
import io
import logging
import os
import uuid
from datetime import datetime

import cloudinary
import cloudinary.uploader

from app.config import get_cloudinary_credentials, get_public_base_url, get_resume_storage_backend
from app.database import get_fs_bucket
from app.errors import ConfigurationError, ResumeUploadError, ResumeValidationError

logger = logging.getLogger(__name__)

MAX_RESUME_BYTES = 5 * 1024 * 1024  # 5MB

ALLOWED_RESUME_TYPES = [
    "application/pdf",
    "application/msword",  # .doc
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",  # .docx
    "application/zip",
    "application/x-zip-compressed",
    "application/x-7z-compressed",
    "application/x-rar-compressed",
    "image/jpeg",
    "image/png",
]

RESUME_FOLDER = "recruitment_cvs"


def validate_resume(content_type: str, size: int):
    """Reject oversized or unsupported files before anything is uploaded."""
    if size > MAX_RESUME_BYTES:
        raise ResumeValidationError("File size cannot exceed 5MB.")
    if content_type not in ALLOWED_RESUME_TYPES:
        raise ResumeValidationError("Invalid file type. Please upload a supported format.")


def file_extension(filename: str) -> str:
    extension = os.path.splitext(filename or "")[1].lstrip(".").lower()
    return extension or "bin"


class CloudinaryStorage:
    def __init__(self, credentials: dict):
        cloudinary.config(secure=True, **credentials)

    def _upload_sync(self, filename: str, contents: bytes) -> dict:
        return cloudinary.uploader.upload(
            io.BytesIO(contents),
            folder=RESUME_FOLDER,
            resource_type="raw",
            filename_override=filename or "resume",
            use_filename=True,
            unique_filename=True,
            overwrite=False,
            format=file_extension(filename),
        )

    async def upload(self, filename: str, contents: bytes, content_type: str) -> str:
        loop = asyncio.get_running_loop()
        try:
            result = await loop.run_in_executor(None, self._upload_sync, filename, contents)
        except Exception as e:
            logger.exception("Cloudinary upload failed for %s", filename)
            raise ResumeUploadError("File upload failed.") from e

        url = result.get("secure_url")
        if not url:
            raise ResumeUploadError("File upload failed.")
        logger.info("Uploaded resume %s to %s", filename, url)
        return url


class GridFSStorage:
    def __init__(self, fs_bucket, base_url: str = ""):
        if fs_bucket is None:
            raise ConfigurationError("GridFS bucket is not available; is MongoDB connected?")
        self.fs_bucket = fs_bucket
        self.base_url = base_url

    async def upload(self, filename: str, contents: bytes, content_type: str) -> str:
        stored_name = f"{RESUME_FOLDER}/{uuid.uuid4().hex}.{file_extension(filename)}"
        try:
            file_id = await self.fs_bucket.upload_from_stream(
                filename=stored_name,
                source=io.BytesIO(contents),
                metadata={
                    "content_type": content_type,
                    "original_filename": filename,
                    "uploaded_at": datetime.utcnow(),
                },
            )
        except Exception as e:
            logger.exception("GridFS upload failed for %s", filename)
            raise ResumeUploadError("File upload failed.") from e

        url = f"{self.base_url}/resumes/{file_id}"
        logger.info("Stored resume %s in GridFS as %s", filename, file_id)
        return url


def get_resume_storage():
    """FastAPI dependency returning the configured resume storage backend."""
    backend = get_resume_storage_backend()
    if backend == "cloudinary":
        credentials = get_cloudinary_credentials()
        if not credentials:
            raise ConfigurationError("Cloudinary credentials are not configured.")
        return CloudinaryStorage(credentials)
    if backend == "gridfs":
        return GridFSStorage(get_fs_bucket(), get_public_base_url())
    raise ConfigurationError(f"Unknown RESUME_STORAGE backend: {backend}")
