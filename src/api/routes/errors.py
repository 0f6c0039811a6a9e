"""Mapeamento de RelayError para respostas HTTP."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi.responses import JSONResponse

from app.errors import RelayError, UpstreamError

if TYPE_CHECKING:
    from fastapi import FastAPI, Request

logger = logging.getLogger(__name__)


async def relay_error_handler(request: Request, exc: RelayError) -> JSONResponse:
    """Converte RelayError em JSON com o status da exceção."""
    extra = {
        "method": request.method,
        "path": request.url.path,
        "status_code": exc.status_code,
        "error_type": type(exc).__name__,
    }
    if isinstance(exc, UpstreamError):
        extra["integration"] = exc.integration
    log = logger.warning if exc.status_code >= 500 else logger.info
    log("request_failed", extra=extra)
    return JSONResponse(content=exc.as_payload(), status_code=exc.status_code)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RelayError, relay_error_handler)  # type: ignore[arg-type]
