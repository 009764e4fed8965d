# ========================================
# app/routes/admin_applications.py - ADMIN APPLICATION MANAGEMENT
# ========================================

import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, HTTPException

from app.database import get_db
from app.errors import INTERNAL_ERROR_DETAIL, ApplicationNotFound, ApplicationValidationError
from app.repositories.application import ApplicationRepository
from app.schemas.admin import MessageResponse
from app.schemas.application import ApplicationDetailResponse, ApplicationListResponse, ApplicationUpdateResponse
from app.utils.auth import get_current_admin

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["Admin - Applications"])


# ✅ 1. LIST ALL APPLICATIONS (newest first)
@router.get("/applications", response_model=ApplicationListResponse)
async def list_applications(admin: str = Depends(get_current_admin)):
    try:
        applications = await ApplicationRepository(get_db()).list()
    except Exception:
        logger.exception("Failed to fetch applications")
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR_DETAIL)

    return {"applications": applications}


# ✅ 2. GET ONE APPLICATION
@router.get("/applications/{application_id}", response_model=ApplicationDetailResponse)
async def get_application(application_id: str, admin: str = Depends(get_current_admin)):
    try:
        application = await ApplicationRepository(get_db()).get(application_id)
    except ApplicationNotFound as e:
        raise HTTPException(status_code=404, detail=e.message)
    except Exception:
        logger.exception("Failed to fetch application %s", application_id)
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR_DETAIL)

    return {"application": application}


# ✅ 3. UPDATE APPLICATION (full record)
@router.put("/applications/{application_id}", response_model=ApplicationUpdateResponse)
async def update_application(
    application_id: str,
    payload: Dict[str, Any] = Body(...),
    admin: str = Depends(get_current_admin),
):
    try:
        application = await ApplicationRepository(get_db()).update(application_id, payload)
    except ApplicationValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except ApplicationNotFound as e:
        raise HTTPException(status_code=404, detail=e.message)
    except Exception:
        logger.exception("Failed to update application %s", application_id)
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR_DETAIL)

    logger.info("Admin %s updated application %s", admin, application_id)
    return {"message": "Application updated successfully", "application": application}


# ✅ 4. DELETE APPLICATION
@router.delete("/applications/{application_id}", response_model=MessageResponse)
async def delete_application(application_id: str, admin: str = Depends(get_current_admin)):
    try:
        await ApplicationRepository(get_db()).delete(application_id)
    except ApplicationNotFound as e:
        raise HTTPException(status_code=404, detail=e.message)
    except Exception:
        logger.exception("Failed to delete application %s", application_id)
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR_DETAIL)

    logger.info("Admin %s deleted application %s", admin, application_id)
    return {"message": "Application deleted successfully"}
