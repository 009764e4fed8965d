# ========================================
# app/routes/admin_auth.py - ADMIN LOGIN / LOGOUT
# ========================================

import logging

from fastapi import APIRouter, HTTPException, Response
from fastapi.concurrency import run_in_threadpool

from app.errors import INTERNAL_ERROR_DETAIL
from app.schemas.admin import AdminLogin, LoginResponse, MessageResponse
from app.utils.auth import clear_session_cookie, create_access_token, set_session_cookie
from app.utils.security import authenticate_admin

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["Admin - Authentication"])


# ✅ 1. LOGIN
@router.post("/login", response_model=LoginResponse)
async def login(credentials: AdminLogin, response: Response):
    """Check admin credentials and set the session cookie."""

    if not credentials.email or not credentials.password:
        raise HTTPException(status_code=400, detail="Email and password are required.")

    # argon2 verification is CPU bound
    try:
        email = await run_in_threadpool(authenticate_admin, credentials.email, credentials.password)
    except Exception:
        logger.exception("Admin login failed while checking credentials")
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR_DETAIL)

    if email is None:
        logger.warning("Failed admin login for %s", credentials.email)
        raise HTTPException(status_code=401, detail="Invalid email or password.")

    token = create_access_token(email)
    set_session_cookie(response, token)
    logger.info("Admin %s logged in", email)

    return {"success": True}


# ✅ 2. LOGOUT
@router.post("/logout", response_model=MessageResponse)
async def logout(response: Response):
    """Clear the session cookie."""
    clear_session_cookie(response)
    return {"message": "Logged out"}
