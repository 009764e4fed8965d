"""
Domain errors raised below the route layer.

Routers translate these into HTTPException responses; anything else that
escapes a database or storage call becomes a generic 500.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

INTERNAL_ERROR_DETAIL = "An internal server error occurred."


class PraetorianError(Exception):
    """Base class for errors with a caller-safe message."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(PraetorianError):
    pass


class ApplicationValidationError(PraetorianError):
    def __init__(self, message: str, field: str = None):
        super().__init__(message)
        self.field = field


class ApplicationNotFound(PraetorianError):
    def __init__(self, application_id: str):
        super().__init__("Application not found")
        self.application_id = application_id


class ResumeValidationError(PraetorianError):
    pass


class ResumeUploadError(PraetorianError):
    pass


class RecruitmentClosedError(PraetorianError):
    def __init__(self):
        super().__init__("Recruitment is currently closed.")


def describe_validation_error(errors) -> str:
    """Turn the first pydantic error into 'Missing required field: x' style text."""
    if not errors:
        return "Invalid request."
    error = errors[0]
    loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
    field = loc[-1] if loc else "request"
    if error.get("type") == "missing":
        return f"Missing required field: {field}"
    ctx_error = (error.get("ctx") or {}).get("error")
    message = str(ctx_error) if ctx_error else error.get("msg", "invalid value")
    return f"Invalid {field}: {message}"


async def request_validation_handler(request: Request, exc: RequestValidationError):
    detail = describe_validation_error(exc.errors())
    logger.warning("Rejected request to %s: %s", request.url.path, detail)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": detail})


async def configuration_error_handler(request: Request, exc: ConfigurationError):
    logger.error("Server misconfiguration while handling %s: %s", request.url.path, exc.message)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": INTERNAL_ERROR_DETAIL},
    )


def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ConfigurationError, configuration_error_handler)
