import logging

from fastapi import APIRouter, Depends, HTTPException

from app.database import get_db
from app.errors import INTERNAL_ERROR_DETAIL
from app.repositories.recruitment_status import RecruitmentStatusRepository
from app.schemas.recruitment import RecruitmentStatusResponse, RecruitmentToggleResponse
from app.utils.auth import get_current_admin

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Recruitment Status"])


# Public: is the form open?
@router.get("/api/recruitment-status", response_model=RecruitmentStatusResponse)
async def get_recruitment_status():
    try:
        is_open = await RecruitmentStatusRepository(get_db()).get()
    except Exception:
        logger.exception("Failed to get recruitment status")
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR_DETAIL)

    return {"isRecruitmentOpen": is_open}


# Admin: open/close the recruitment window
@router.post("/api/admin/recruitment", response_model=RecruitmentToggleResponse)
async def toggle_recruitment_status(admin: str = Depends(get_current_admin)):
    try:
        is_open = await RecruitmentStatusRepository(get_db()).toggle()
    except Exception:
        logger.exception("Failed to update recruitment status")
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR_DETAIL)

    logger.info("Admin %s set recruitment %s", admin, "open" if is_open else "closed")
    return {"success": True, "isRecruitmentOpen": is_open}
