import logging

from fastapi import Request
from fastapi.responses import RedirectResponse
from starlette.middleware.base import BaseHTTPMiddleware

from app.config import SESSION_COOKIE_NAME
from app.utils.auth import clear_session_cookie, verify_admin_token

logger = logging.getLogger(__name__)

ADMIN_PREFIX = "/admin"
LOGIN_PATH = "/admin/login"


def is_guarded_path(path: str) -> bool:
    if path.startswith(LOGIN_PATH):
        return False
    return path == ADMIN_PREFIX or path.startswith(ADMIN_PREFIX + "/")


class AdminRouteGuard(BaseHTTPMiddleware):
    """Redirects unauthenticated requests for /admin pages to the login page."""

    async def dispatch(self, request: Request, call_next):
        if not is_guarded_path(request.url.path):
            return await call_next(request)

        token = request.cookies.get(SESSION_COOKIE_NAME)
        if not token:
            return RedirectResponse(url=LOGIN_PATH)

        if verify_admin_token(token) is None:
            logger.info("Rejected admin session for %s; clearing cookie", request.url.path)
            response = RedirectResponse(url=LOGIN_PATH)
            clear_session_cookie(response)
            return response

        return await call_next(request)
