# ========================================
# app/routes/resume.py - SERVE RESUMES STORED IN GRIDFS
# ========================================

import io
import logging

from bson import ObjectId
from fastapi import APIRouter, HTTPException
from fastapi.responses import StreamingResponse
from gridfs.errors import NoFile

from app.database import get_fs_bucket
from app.errors import INTERNAL_ERROR_DETAIL, ConfigurationError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Resumes"])


# Resume URLs are public, like the hosted Cloudinary links
@router.get("/resumes/{file_id}")
async def download_resume(file_id: str):
    if not ObjectId.is_valid(file_id):
        raise HTTPException(status_code=404, detail="Resume not found")

    fs_bucket = get_fs_bucket()
    if fs_bucket is None:
        raise ConfigurationError("GridFS bucket is not available; is MongoDB connected?")

    try:
        grid_out = await fs_bucket.open_download_stream(ObjectId(file_id))
        contents = await grid_out.read()
    except NoFile:
        raise HTTPException(status_code=404, detail="Resume not found")
    except Exception:
        logger.exception("Failed to read resume %s", file_id)
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR_DETAIL)

    metadata = grid_out.metadata or {}
    filename = metadata.get("original_filename") or grid_out.filename

    return StreamingResponse(
        io.BytesIO(contents),
        media_type=metadata.get("content_type", "application/octet-stream"),
        headers={
            "Content-Disposition": f'inline; filename="{filename}"'
        }
    )
