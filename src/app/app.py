"""Aplicação ASGI do QuoteIt API Hub.

O módulo configura logging no import e expõe `app` para o uvicorn:

    uvicorn app.app:app --host 0.0.0.0 --port $PORT

Testes montam instâncias isoladas com create_app(settings, transport=...).
"""

from __future__ import annotations

import os
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import create_api_router, register_error_handlers
from app.bootstrap import build_services, initialize_app, validate_runtime_settings
from app.infra.http import create_async_http_client
from app.observability import CORRELATION_HEADER, RequestContextMiddleware
from config.logging import get_logger
from config.settings import AppSettings, load_app_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Callable

    import httpx

# Logging JSON precisa estar ativo antes do primeiro logger.info
initialize_app()

logger = get_logger(__name__)

CORS_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
CORS_HEADERS = ["Content-Type", "Authorization"]


def _build_lifespan(
    transport: httpx.AsyncBaseTransport | None,
    drive_service_factory: Callable[[str], Any] | None,
) -> Callable[[FastAPI], Any]:
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Gerencia ciclo de vida da aplicação.

        Startup:
        - Valida configurações
        - Cria o AsyncClient compartilhado e os conectores

        Shutdown:
        - Fecha o AsyncClient
        """
        settings: AppSettings = app.state.settings
        logger.info("app_starting", extra={"environment": settings.base.environment})
        validate_runtime_settings(settings)

        http_client = create_async_http_client(
            settings.base.upstream_timeout_seconds, transport=transport
        )
        app.state.http_client = http_client
        app.state.services = build_services(
            settings, http_client, drive_service_factory=drive_service_factory
        )
        logger.info("app_ready", extra={"configured": settings.configured_integrations()})

        try:
            yield
        finally:
            logger.info("app_shutting_down")
            await http_client.aclose()

    return lifespan


def create_app(
    settings: AppSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    drive_service_factory: Callable[[str], Any] | None = None,
) -> FastAPI:
    """Monta FastAPI com middlewares, handlers de erro e rotas.

    Args:
        settings: Snapshot de configuração (default: variáveis de ambiente).
        transport: Transport httpx alternativo (testes).
        drive_service_factory: Factory do resource Drive (testes).

    """
    settings = settings or load_app_settings()

    fastapi_app = FastAPI(
        title="QuoteIt API Hub",
        description="Relay server-side para Compulife, GHL, Anthropic, Google e Supabase",
        version=settings.base.version,
        lifespan=_build_lifespan(transport, drive_service_factory),
        docs_url=None if settings.base.is_production else "/docs",
        redoc_url=None,
        openapi_url=None if settings.base.is_production else "/openapi.json",
    )
    fastapi_app.state.settings = settings

    fastapi_app.add_middleware(RequestContextMiddleware)
    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.base.allowed_origins),
        allow_credentials=True,
        allow_methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
        expose_headers=[CORRELATION_HEADER],
    )

    register_error_handlers(fastapi_app)
    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service_version": settings.base.version})

    return fastapi_app


app = create_app()


def main() -> None:
    """Console script: sobe o uvicorn na porta de PORT (default 8080)."""
    import uvicorn

    port = int(os.getenv("PORT", "8080"))
    logger.info("server_starting", extra={"port": port})
    uvicorn.run(app, host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
