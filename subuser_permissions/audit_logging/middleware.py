from __future__ import annotations

import time
from uuid import uuid4

from fastapi import Request, Response, status
from starlette.middleware.base import BaseHTTPMiddleware

from ..errors import PermissionValidationError
from .events import AccessEvent, PermissionRejection, outcome_for
from .sinks import LogSink, build_default_sink

_REJECTION_STATE = "permission_rejection"


def record_rejection(request: Request, exc: PermissionValidationError) -> PermissionRejection:
    """Remember a rejected permission so the access log entry for this request carries it."""
    rejection = PermissionRejection.from_error(exc)
    setattr(request.state, _REJECTION_STATE, rejection)
    return rejection


class LoggingMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, *, sink: LogSink | None = None) -> None:
        super().__init__(app)
        self._sink = sink or build_default_sink()

    async def dispatch(self, request: Request, call_next) -> Response:
        started = time.perf_counter()
        request_id = request.headers.get("x-request-id") or uuid4().hex
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        try:
            response = await call_next(request)
            status_code = response.status_code
        finally:
            event = self._build_event(request, status_code, started, request_id)
            await self._sink.write(event.to_payload())

        response.headers.setdefault("x-request-id", request_id)
        return response

    def _build_event(
        self,
        request: Request,
        status_code: int,
        started: float,
        request_id: str,
    ) -> AccessEvent:
        rejection: PermissionRejection | None = getattr(request.state, _REJECTION_STATE, None)
        return AccessEvent(
            method=request.method,
            path=request.url.path,
            status_code=status_code,
            outcome=outcome_for(status_code, rejection),
            client_ip=request.client.host if request.client else None,
            request_id=request_id,
            latency_ms=int((time.perf_counter() - started) * 1000),
            user_agent=request.headers.get("user-agent"),
            rejected_permission=rejection.permission if rejection else None,
            rejection_code=rejection.code if rejection else None,
        )
