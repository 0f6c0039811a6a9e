"""Agregador de rotas: registra todos os routers por integração.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.anthropic.router import router as anthropic_router
from api.routes.compulife.router import router as compulife_router
from api.routes.drive.router import router as drive_router
from api.routes.ghl.router import GHL_PREFIX
from api.routes.ghl.router import router as ghl_router
from api.routes.health.router import router as health_router
from api.routes.supabase.router import router as supabase_router
from api.routes.vision.router import router as vision_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # GET / (health) e POST / (ações Compulife) compartilham a raiz
    api_router.include_router(health_router, tags=["health"])
    api_router.include_router(compulife_router, tags=["compulife"])

    api_router.include_router(ghl_router, prefix=GHL_PREFIX, tags=["ghl"])
    api_router.include_router(anthropic_router, tags=["anthropic"])
    api_router.include_router(drive_router, prefix="/drive", tags=["google-drive"])
    api_router.include_router(vision_router, prefix="/vision", tags=["google-vision"])
    api_router.include_router(supabase_router, prefix="/supabase", tags=["supabase"])

    return api_router
