"""Settings da Anthropic (Messages API, usada como OCR de lead cards)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

ANTHROPIC_MESSAGES_URL = "https://api.anthropic.com/v1/messages"


@dataclass(frozen=True)
class AnthropicSettings:
    """Configurações da Anthropic.

    Attributes:
        api_key: Chave da API (header x-api-key)
        model: Modelo usado na forma simplificada {image, prompt}
        api_version: Valor do header anthropic-version
        max_tokens: max_tokens da forma simplificada
        messages_url: Endpoint de mensagens
    """

    api_key: str = ""
    model: str = "claude-sonnet-4-20250514"
    api_version: str = "2023-06-01"
    max_tokens: int = 4096
    messages_url: str = ANTHROPIC_MESSAGES_URL

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def validate(self) -> list[str]:
        """Valida configurações da Anthropic."""
        errors: list[str] = []
        if not self.api_key:
            errors.append("ANTHROPIC_API_KEY não configurado")
        if self.max_tokens <= 0:
            errors.append("ANTHROPIC_MAX_TOKENS deve ser > 0")
        return errors


def _load_anthropic_from_env() -> AnthropicSettings:
    """Carrega AnthropicSettings de variáveis de ambiente."""
    return AnthropicSettings(
        api_key=os.getenv("ANTHROPIC_API_KEY", ""),
        model=os.getenv("ANTHROPIC_MODEL", "claude-sonnet-4-20250514"),
        api_version=os.getenv("ANTHROPIC_VERSION", "2023-06-01"),
        max_tokens=int(os.getenv("ANTHROPIC_MAX_TOKENS", "4096")),
    )


@lru_cache(maxsize=1)
def get_anthropic_settings() -> AnthropicSettings:
    """Retorna instância cacheada de AnthropicSettings."""
    return _load_anthropic_from_env()
