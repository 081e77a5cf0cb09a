"""FastAPI 앱 팩토리 + upstream exception handler."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from upstreamguard.api.deps import get_config
from upstreamguard.api.errors import error_response
from upstreamguard.api.routes import resources
from upstreamguard.exceptions import UpstreamError
from upstreamguard.logging_config import setup_logging_from_config


def create_app() -> FastAPI:
    setup_logging_from_config(get_config())
    app = FastAPI(title="upstream-guard", version="0.1.0")

    app.include_router(resources.router, prefix="/api/resources", tags=["resources"])

    # 로깅은 interceptor가 이미 했으므로 여기서는 응답 변환만
    @app.exception_handler(UpstreamError)
    async def handle_upstream_error(request: Request, exc: UpstreamError) -> JSONResponse:
        return error_response(exc)

    return app


app = create_app()
