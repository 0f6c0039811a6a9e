"""Settings base do QuoteIt API Hub.

Valores comuns a todas as integrações: ambiente, CORS do frontend e
timeout das chamadas upstream. Cada integração tem seu próprio módulo
em config.settings; este só cobre o que não pertence a nenhuma delas.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]

_ENVIRONMENT_ALIASES: dict[str, Environment] = {
    "production": "production",
    "prod": "production",
    "staging": "staging",
    "stage": "staging",
}

DEFAULT_ALLOWED_ORIGINS: tuple[str, ...] = (
    "https://quoteitengine.com",
    "https://www.quoteitengine.com",
    "https://quoteit.insure",
    "https://www.quoteit.insure",
)


@dataclass(frozen=True)
class BaseSettings:
    """Ambiente e parâmetros HTTP compartilhados.

    Attributes:
        environment: development, staging ou production
        service_name: Identificação em logs e no health check
        version: Versão reportada em GET /
        allowed_origins: Origins aceitas pelo CORSMiddleware
        upstream_timeout_seconds: Timeout do httpx.AsyncClient compartilhado
    """

    environment: Environment = "development"
    service_name: str = "quoteit-api-hub"
    version: str = "6.2.0"
    allowed_origins: tuple[str, ...] = DEFAULT_ALLOWED_ORIGINS
    upstream_timeout_seconds: float = 30.0

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    def validate(self) -> list[str]:
        """Lista problemas de configuração; vazia quando tudo está ok."""
        errors: list[str] = []
        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")
        if not self.allowed_origins:
            errors.append("ALLOWED_ORIGINS não pode ser vazio")
        if self.is_production and "*" in self.allowed_origins:
            errors.append("ALLOWED_ORIGINS=* proibido em production")
        if self.upstream_timeout_seconds <= 0:
            errors.append("UPSTREAM_TIMEOUT_SECONDS deve ser > 0")
        return errors


def parse_environment(raw: str) -> Environment:
    """Normaliza ENVIRONMENT; valor desconhecido vira development."""
    return _ENVIRONMENT_ALIASES.get(raw.strip().lower(), "development")


def parse_origins(raw: str | None) -> tuple[str, ...]:
    """Converte lista separada por vírgulas em tupla de origins.

    Vazio ou ausente mantém os origins padrão do frontend.
    """
    if not raw:
        return DEFAULT_ALLOWED_ORIGINS
    origins = tuple(item.strip() for item in raw.split(",") if item.strip())
    return origins or DEFAULT_ALLOWED_ORIGINS


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """BaseSettings lida do ambiente uma única vez por processo."""
    return BaseSettings(
        environment=parse_environment(os.getenv("ENVIRONMENT", "development")),
        service_name=os.getenv("SERVICE_NAME", "quoteit-api-hub"),
        allowed_origins=parse_origins(os.getenv("ALLOWED_ORIGINS")),
        upstream_timeout_seconds=float(os.getenv("UPSTREAM_TIMEOUT_SECONDS", "30")),
    )
