"""RFC 7807 Problem Details error handling.

All errors leave the API in one JSON shape:

    {
        "type": "about:blank",
        "title": "Forbidden",
        "status": 403,
        "detail": "Invalid secret",
        "instance": "/api/v1/sync"
    }
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = structlog.get_logger()


class AppError(Exception):
    """Base application error."""

    def __init__(self, detail: str, status_code: int = 500, error_type: str = "about:blank"):
        self.detail = detail
        self.status_code = status_code
        self.error_type = error_type
        super().__init__(detail)


class ForbiddenError(AppError):
    """Caller presented a wrong or missing shared secret."""

    def __init__(self, detail: str = "Invalid secret"):
        super().__init__(detail=detail, status_code=403)


class StorageError(AppError):
    """The expense store rejected a read or write."""

    def __init__(self, detail: str = "Expense storage unavailable"):
        super().__init__(detail=detail, status_code=503)


def _build_problem_detail(
    status: int,
    title: str,
    detail: str,
    error_type: str = "about:blank",
    instance: str = "",
) -> dict:
    """Build RFC 7807 Problem Details response body."""
    body = {
        "type": error_type,
        "title": title,
        "status": status,
        "detail": detail,
    }
    if instance:
        body["instance"] = instance
    return body


_STATUS_TITLES = {
    400: "Bad Request",
    403: "Forbidden",
    404: "Not Found",
    405: "Method Not Allowed",
    422: "Unprocessable Entity",
    500: "Internal Server Error",
    503: "Service Unavailable",
}


def register_error_handlers(app: FastAPI) -> None:
    """Register global exception handlers on the FastAPI app."""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        body = _build_problem_detail(
            status=exc.status_code,
            title=_STATUS_TITLES.get(exc.status_code, "Error"),
            detail=exc.detail,
            error_type=exc.error_type,
            instance=str(request.url.path),
        )
        return JSONResponse(status_code=exc.status_code, content=body)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
        body = _build_problem_detail(
            status=exc.status_code,
            title=_STATUS_TITLES.get(exc.status_code, "Error"),
            detail=detail,
            instance=str(request.url.path),
        )
        return JSONResponse(status_code=exc.status_code, content=body)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        fields = [".".join(str(p) for p in err.get("loc", ())) for err in exc.errors()]
        body = _build_problem_detail(
            status=422,
            title=_STATUS_TITLES[422],
            detail="Invalid request: " + ", ".join(fields),
            instance=str(request.url.path),
        )
        return JSONResponse(status_code=422, content=body)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("unhandled_error", error=str(exc), path=str(request.url.path))
        body = _build_problem_detail(
            status=500,
            title="Internal Server Error",
            detail="An unexpected error occurred",
            instance=str(request.url.path),
        )
        return JSONResponse(status_code=500, content=body)
