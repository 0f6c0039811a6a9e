"""Middleware HTTP: correlation_id, log de acesso e rede de segurança de erros.

Exceções não tratadas pelos handlers viram 500 {"error": true, "message"};
nenhuma falha de requisição derruba o processo.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from app.observability.correlation import (
    CORRELATION_HEADER,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)

if TYPE_CHECKING:
    from starlette.middleware.base import RequestResponseEndpoint
    from starlette.requests import Request
    from starlette.responses import Response

logger = logging.getLogger(__name__)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Define correlation_id, registra a requisição e captura erros inesperados."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        token = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        started_at = time.perf_counter()
        try:
            try:
                response = await call_next(request)
            except Exception as exc:
                logger.exception(
                    "request_unhandled_error",
                    extra={
                        "method": request.method,
                        "path": request.url.path,
                        "error_type": type(exc).__name__,
                    },
                )
                response = JSONResponse(
                    status_code=500,
                    content={"error": True, "message": str(exc) or type(exc).__name__},
                )

            response.headers[CORRELATION_HEADER] = get_correlation_id()
            logger.info(
                "request_completed",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": response.status_code,
                    "latency_ms": round((time.perf_counter() - started_at) * 1000, 2),
                },
            )
            return response
        finally:
            reset_correlation_id(token)
