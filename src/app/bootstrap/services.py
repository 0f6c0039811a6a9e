"""Factories dos conectores: um por integração, todos no mesmo AsyncClient.

O cache de token OAuth do Google é criado aqui uma vez por processo.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from api.connectors.anthropic import AnthropicClient
from api.connectors.compulife import CompulifeClient
from api.connectors.ghl import GHLClient
from api.connectors.supabase import SupabaseStorageClient
from api.connectors.vision import VisionClient
from app.infra.google import GoogleDriveClient, GoogleOAuthTokenCache, build_drive_service
from app.infra.http import UpstreamHttpClient

if TYPE_CHECKING:
    from collections.abc import Callable

    import httpx

    from config.settings import AppSettings


@dataclass(frozen=True)
class RelayServices:
    """Conectores prontos para uso pelas rotas."""

    compulife: CompulifeClient
    ghl: GHLClient
    anthropic: AnthropicClient
    vision: VisionClient
    supabase: SupabaseStorageClient
    google_tokens: GoogleOAuthTokenCache
    drive: GoogleDriveClient


def build_services(
    settings: AppSettings,
    http_client: httpx.AsyncClient,
    *,
    drive_service_factory: Callable[[str], Any] | None = None,
) -> RelayServices:
    """Monta todos os conectores a partir das settings.

    Args:
        settings: Snapshot imutável de configuração.
        http_client: AsyncClient compartilhado (timeout já aplicado).
        drive_service_factory: Factory do resource Drive (testes injetam fake).
    """

    def upstream(integration: str) -> UpstreamHttpClient:
        return UpstreamHttpClient(http_client, integration=integration)

    google_tokens = GoogleOAuthTokenCache(settings.drive, upstream("google_oauth"))
    return RelayServices(
        compulife=CompulifeClient(settings.compulife, upstream("compulife")),
        ghl=GHLClient(settings.ghl, upstream("ghl")),
        anthropic=AnthropicClient(settings.anthropic, upstream("anthropic")),
        vision=VisionClient(settings.vision, upstream("google_vision")),
        supabase=SupabaseStorageClient(settings.supabase, upstream("supabase")),
        google_tokens=google_tokens,
        drive=GoogleDriveClient(
            settings.drive,
            google_tokens,
            service_factory=drive_service_factory or build_drive_service,
        ),
    )
