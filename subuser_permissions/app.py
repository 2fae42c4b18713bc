from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .audit_logging import LoggingMiddleware, LogSink, record_rejection
from .config import settings
from .constants.permissions import ALL_PERMISSIONS
from .errors import PermissionValidationError
from .routers import permissions

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "%s started (%s) with %s registered permissions",
        settings.app_name,
        settings.environment,
        len(ALL_PERMISSIONS),
    )
    yield


def create_app(sink: LogSink | None = None) -> FastAPI:
    app = FastAPI(title=settings.app_name, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware, sink=sink)

    app.include_router(permissions.router, prefix="/permissions", tags=["permissions"])

    @app.exception_handler(PermissionValidationError)
    async def permission_error_handler(request: Request, exc: PermissionValidationError):
        record_rejection(request, exc)
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": str(exc), "error": exc.code, "permission": exc.permission},
        )

    @app.get("/healthz")
    async def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="127.0.0.1", port=8000)
