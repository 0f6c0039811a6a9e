"""Health check do relay: status e integrações com credenciais configuradas."""

from __future__ import annotations

from datetime import UTC, datetime

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from api.routes.dependencies import get_settings
from api.routes.ghl.router import GHL_PREFIX, list_ghl_endpoints
from config.settings import AppSettings

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    version: str
    timestamp: str
    configured: dict[str, bool]
    ghl_endpoints: list[str]


@router.get("/", response_model=HealthResponse)
async def health_check(settings: AppSettings = Depends(get_settings)) -> HealthResponse:
    """Liveness + flags de configuração (nunca expõe valores)."""
    return HealthResponse(
        status="ok",
        service=settings.base.service_name,
        version=settings.base.version,
        timestamp=datetime.now(UTC).isoformat(),
        configured=settings.configured_integrations(),
        ghl_endpoints=list_ghl_endpoints(GHL_PREFIX),
    )
