# ========================================
# app/routes/submit.py - PUBLIC APPLICATION FORM
# ========================================

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status

from app.database import get_db
from app.errors import (
    INTERNAL_ERROR_DETAIL,
    ApplicationValidationError,
    RecruitmentClosedError,
    ResumeUploadError,
    ResumeValidationError,
)
from app.repositories.application import ApplicationRepository
from app.repositories.recruitment_status import RecruitmentStatusRepository
from app.schemas.application import ApplicationSubmitResponse, validate_application_fields
from app.utils.storage import get_resume_storage, validate_resume

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Applications"])


@router.post("/submit", status_code=status.HTTP_201_CREATED, response_model=ApplicationSubmitResponse)
async def submit_application(
    full_name: Optional[str] = Form(None, alias="fullName"),
    nim: Optional[str] = Form(None),
    major: Optional[str] = Form(None),
    lnt_class: Optional[str] = Form(None, alias="lntClass"),
    position: Optional[str] = Form(None),
    binusian_email: Optional[str] = Form(None, alias="binusianEmail"),
    private_email: Optional[str] = Form(None, alias="privateEmail"),
    resume: Optional[UploadFile] = File(None),
    storage=Depends(get_resume_storage),
):
    """Submit a candidate application with a resume file. Public."""

    logger.info("New application submission received")
    db = get_db()

    fields = {
        "fullName": full_name,
        "nim": nim,
        "major": major,
        "lntClass": lnt_class,
        "position": position,
        "binusianEmail": binusian_email,
        "privateEmail": private_email,
    }

    try:
        is_open = await RecruitmentStatusRepository(db).get()
    except Exception:
        logger.exception("Could not read recruitment status")
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR_DETAIL)

    # 1. Validate everything before touching the file host
    try:
        if not is_open:
            raise RecruitmentClosedError()
        validate_application_fields(fields)
        if resume is None:
            raise ResumeValidationError("Resume file is required.")
        contents = await resume.read()
        validate_resume(resume.content_type, len(contents))
    except RecruitmentClosedError as e:
        logger.warning("Submission rejected: recruitment is closed")
        raise HTTPException(status_code=403, detail=e.message)
    except (ApplicationValidationError, ResumeValidationError) as e:
        logger.warning("Submission rejected: %s", e.message)
        raise HTTPException(status_code=400, detail=e.message)

    # 2. Upload the resume, then persist the application
    try:
        resume_url = await storage.upload(resume.filename, contents, resume.content_type)
        application = await ApplicationRepository(db).create({**fields, "resumeUrl": resume_url})
    except ResumeUploadError as e:
        raise HTTPException(status_code=500, detail=e.message)
    except ApplicationValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except Exception:
        logger.exception("Failed to store application")
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR_DETAIL)

    return {"message": "Application submitted successfully!", "data": application}
