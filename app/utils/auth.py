import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import APIKeyCookie
from jose import JWTError, jwt

from app.config import SESSION_COOKIE_NAME, SESSION_MAX_AGE_SECONDS, get_jwt_secret, is_development
from app.errors import ConfigurationError

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE = timedelta(seconds=SESSION_MAX_AGE_SECONDS)

# Session token travels in an http-only cookie
cookie_scheme = APIKeyCookie(name=SESSION_COOKIE_NAME, auto_error=False)


def _signing_secret() -> str:
    secret = get_jwt_secret()
    if not secret:
        raise ConfigurationError("JWT_SECRET environment variable is not set.")
    return secret


def create_access_token(email: str, issued_at: Optional[datetime] = None) -> str:
    issued_at = issued_at or datetime.now(timezone.utc)
    to_encode = {
        "sub": email,
        "email": email,
        "iat": int(issued_at.timestamp()),
        "exp": int((issued_at + ACCESS_TOKEN_EXPIRE).timestamp()),
    }
    return jwt.encode(to_encode, _signing_secret(), algorithm=ALGORITHM)


def decode_access_token(token: Optional[str], now: Optional[datetime] = None) -> Optional[str]:
    """Admin e-mail for a correctly signed, unexpired token; None otherwise."""
    if not token:
        return None

    try:
        payload = jwt.decode(
            token,
            _signing_secret(),
            algorithms=[ALGORITHM],
            options={"verify_exp": False},
        )
    except JWTError:
        return None

    email = payload.get("sub")
    expires_at = payload.get("exp")
    if not email or not isinstance(expires_at, (int, float)):
        return None

    current = now or datetime.now(timezone.utc)
    if current.timestamp() >= expires_at:
        return None
    return email


def verify_admin_token(token: Optional[str]) -> Optional[str]:
    """Shared check behind the /admin route guard and the admin API dependency."""
    try:
        return decode_access_token(token)
    except ConfigurationError as exc:
        logger.error("Cannot verify admin session: %s", exc.message)
        return None


async def get_current_admin(token: Optional[str] = Depends(cookie_scheme)) -> str:
    email = verify_admin_token(token)
    if email is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    return email


def set_session_cookie(response, token: str):
    response.set_cookie(
        key=SESSION_COOKIE_NAME,
        value=token,
        max_age=SESSION_MAX_AGE_SECONDS,
        path="/",
        httponly=True,
        secure=not is_development(),
        samesite="lax",
    )


def clear_session_cookie(response):
    response.set_cookie(
        key=SESSION_COOKIE_NAME,
        value="",
        max_age=0,
        path="/",
        httponly=True,
        secure=not is_development(),
        samesite="lax",
    )
