"""Router principal do GHL: agrega os endpoints de CRM."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.routing import APIRoute

from api.routes.ghl.calendars import router as calendars_router
from api.routes.ghl.contacts import router as contacts_router
from api.routes.ghl.conversations import router as conversations_router
from api.routes.ghl.crm import router as crm_router

GHL_PREFIX = "/ghl"

# Ordem de registro; a listagem do health check segue a mesma ordem
GHL_ROUTERS: tuple[APIRouter, ...] = (
    contacts_router,
    conversations_router,
    calendars_router,
    crm_router,
)

router = APIRouter()

for _sub_router in GHL_ROUTERS:
    router.include_router(_sub_router)


def list_ghl_endpoints(prefix: str = GHL_PREFIX) -> list[str]:
    """Lista "MÉTODO /path" de cada rota declarada nos sub-routers GHL."""
    endpoints = []
    for sub_router in GHL_ROUTERS:
        for route in sub_router.routes:
            if not isinstance(route, APIRoute):
                continue
            for method in sorted(route.methods):
                endpoints.append(f"{method:<6} {prefix}{route.path}")
    return endpoints
