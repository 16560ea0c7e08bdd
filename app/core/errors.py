from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


class ApiError(Exception):
    """An error that maps directly onto an `{error, details?}` JSON response."""

    def __init__(self, status_code: int, error: str, details: Optional[str] = None):
        super().__init__(error)
        self.status_code = status_code
        self.error = error
        self.details = details

    def to_body(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"error": self.error}
        if self.details is not None:
            body["details"] = self.details
        return body


def internal_error(exc: BaseException) -> ApiError:
    return ApiError(500, "Internal server error", details=str(exc) or "Unknown error")


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # framework-level errors (unknown route, wrong method) use the same envelope
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )
