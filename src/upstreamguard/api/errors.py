"""Upstream taxonomy → HTTP 응답 변환. 실패 종류만 보고 cause chain은 보지 않는다."""

from datetime import datetime, timezone

from fastapi.responses import JSONResponse
from pydantic import BaseModel

from upstreamguard.exceptions import UpstreamError


class ErrorResponse(BaseModel):
    timestamp: str
    status: int
    error: str
    message: str


def error_body(exc: UpstreamError, now: datetime | None = None) -> ErrorResponse:
    now = now or datetime.now(timezone.utc)
    return ErrorResponse(
        timestamp=now.isoformat().replace("+00:00", "Z"),
        status=exc.status_code,
        error=exc.error,
        message=exc.message,
    )


def error_response(exc: UpstreamError) -> JSONResponse:
    """UpstreamTimeoutError → 504, UpstreamBadGatewayError → 502."""
    return JSONResponse(status_code=exc.status_code, content=error_body(exc).model_dump())
