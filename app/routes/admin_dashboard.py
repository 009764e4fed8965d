# ========================================
# app/routes/admin_dashboard.py - ADMIN DASHBOARD (behind the /admin route guard)
# ========================================

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from app.dashboard.view_model import DEFAULT_DIRECTION, filter_and_sort
from app.database import get_db
from app.errors import INTERNAL_ERROR_DETAIL
from app.repositories.application import ApplicationRepository
from app.repositories.recruitment_status import RecruitmentStatusRepository
from app.schemas.admin import MessageResponse
from app.schemas.dashboard import DashboardResponse
from app.utils.auth import get_current_admin
from app.utils.export import create_csv_response_headers, export_applications_to_csv, export_filename

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["Admin - Dashboard"])


class DashboardQuery:
    """Search, sort and filter inputs shared by the dashboard and its export."""

    def __init__(
        self,
        search: str = Query("", description="Matches full name, NIM or major"),
        sort: str = Query("submissionDate", description="Column to sort by"),
        direction: str = Query(DEFAULT_DIRECTION, pattern="^(asc|desc)$"),
        lnt_class: List[str] = Query([], description="Keep only these LnT classes"),
        position: List[str] = Query([], description="Keep only these positions"),
    ):
        self.search = search
        self.sort = sort
        self.direction = direction
        self.lnt_class = lnt_class
        self.position = position

    def apply(self, applications):
        try:
            return filter_and_sort(
                applications,
                search_query=self.search,
                sort_key=self.sort,
                direction=self.direction,
                selected_classes=self.lnt_class,
                selected_positions=self.position,
            )
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))


async def _load_applications():
    try:
        return await ApplicationRepository(get_db()).list()
    except Exception:
        logger.exception("Failed to fetch applications for the dashboard")
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR_DETAIL)


# ✅ 1. LOGIN PAGE (public)
@router.get("/login", response_model=MessageResponse)
async def login_page():
    return {"message": "POST your email and password to /api/admin/login"}


# ✅ 2. DASHBOARD VIEW
@router.get("", response_model=DashboardResponse)
async def dashboard(query: DashboardQuery = Depends(), admin: str = Depends(get_current_admin)):
    applications = await _load_applications()
    visible = query.apply(applications)

    try:
        is_open = await RecruitmentStatusRepository(get_db()).get()
    except Exception:
        logger.exception("Failed to get recruitment status for the dashboard")
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR_DETAIL)

    return {
        "total": len(applications),
        "showing": len(visible),
        "isRecruitmentOpen": is_open,
        "sort": {"key": query.sort, "direction": query.direction},
        "applications": visible,
    }


# ✅ 3. EXPORT CURRENT VIEW TO CSV
@router.get("/export")
async def export_dashboard(query: DashboardQuery = Depends(), admin: str = Depends(get_current_admin)):
    visible = query.apply(await _load_applications())
    logger.info("Admin %s exported %d applications", admin, len(visible))

    return Response(
        content=export_applications_to_csv(visible),
        media_type="text/csv",
        headers=create_csv_response_headers(export_filename())
    )
