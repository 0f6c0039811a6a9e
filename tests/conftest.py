"""Configuração do pytest para o projeto QuoteIt API Hub."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

import httpx
import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from config.settings import (  # noqa: E402
    AnthropicSettings,
    AppSettings,
    BaseSettings,
    CompulifeSettings,
    GHLSettings,
    GoogleDriveSettings,
    GoogleVisionSettings,
    SupabaseSettings,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from fastapi.testclient import TestClient


def make_settings(**overrides: Any) -> AppSettings:
    """AppSettings com todas as integrações configuradas (valores fake)."""
    settings = AppSettings(
        base=BaseSettings(allowed_origins=("https://quoteitengine.com",)),
        compulife=CompulifeSettings(auth_id="AUTH-123", remote_ip="10.0.0.1"),
        ghl=GHLSettings(api_key="pit-test-key", location_id="loc-1"),
        anthropic=AnthropicSettings(api_key="sk-ant-test"),
        drive=GoogleDriveSettings(
            client_id="client-id",
            client_secret="client-secret",
            refresh_token="refresh-token",
            folder_id="root-folder",
        ),
        vision=GoogleVisionSettings(api_key="vision-key"),
        supabase=SupabaseSettings(url="https://proj.supabase.co", key="service-key"),
    )
    return replace(settings, **overrides)


@dataclass
class FakeRoute:
    method: str
    url_prefix: str
    status: int
    body: str
    headers: dict[str, str] = field(default_factory=dict)


class FakeUpstream:
    """Upstream fake sobre httpx.MockTransport.

    Registra cada request e responde com a primeira rota cujo método e
    prefixo de URL casam. Sem rota: 599 com corpo texto.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._routes: list[FakeRoute] = []

    def add(
        self,
        method: str,
        url_prefix: str,
        *,
        json_body: Any = None,
        text: str | None = None,
        status: int = 200,
    ) -> None:
        body = text if text is not None else json.dumps(json_body)
        self._routes.append(FakeRoute(method.upper(), url_prefix, status, body))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        for route in self._routes:
            if request.method == route.method and str(request.url).startswith(route.url_prefix):
                return httpx.Response(route.status, text=route.body)
        return httpx.Response(599, text=f"no fake route for {request.method} {request.url}")

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=self.transport)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "nenhuma chamada upstream registrada"
        return self.requests[-1]


@pytest.fixture
def settings() -> AppSettings:
    return make_settings()


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def make_client(
    upstream: FakeUpstream,
) -> Callable[..., Iterator[TestClient]]:
    """Factory de TestClient com lifespan ativo e upstream fake."""
    from contextlib import contextmanager

    from fastapi.testclient import TestClient

    from app.app import create_app

    @contextmanager
    def _make(
        app_settings: AppSettings | None = None,
        *,
        drive_service_factory: Callable[[str], Any] | None = None,
    ) -> Iterator[TestClient]:
        app = create_app(
            app_settings or make_settings(),
            transport=upstream.transport,
            drive_service_factory=drive_service_factory,
        )
        with TestClient(app, raise_server_exceptions=False) as client:
            yield client

    return _make
