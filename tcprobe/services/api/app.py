from __future__ import annotations

from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from tcprobe.common.logging import get_logger
from tcprobe.common.settings import get_settings
from tcprobe.services.api.routers import health, probe
from tcprobe.services.probe.ffprobe_adapter import FFprobeError

cfg = get_settings()
logger = get_logger(__name__)


async def ffprobe_error_handler(request: Request, exc: FFprobeError) -> JSONResponse:
    # also covers failures raised while resolving the report source dependency
    logger.warning("ffprobe failure on %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=HTTPStatus.BAD_GATEWAY,
        content={"detail": {"kind": "FFprobeError", "detail": str(exc)}},
    )


def create_app() -> FastAPI:
    app = FastAPI(
        title="tcprobe API",
        version="0.1.0",
        docs_url=f"{cfg.api.prefix}/docs",
        openapi_url=f"{cfg.api.prefix}/openapi.json",
    )

    app.add_exception_handler(FFprobeError, ffprobe_error_handler)

    # Routers
    app.include_router(health.router)
    app.include_router(probe.router)
    return app

app = create_app()
