"""Settings do GoHighLevel (CRM via LeadConnector API v2)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

GHL_BASE_URL = "https://services.leadconnectorhq.com"
GHL_API_VERSION = "2021-07-28"


@dataclass(frozen=True)
class GHLSettings:
    """Configurações do GoHighLevel.

    Attributes:
        api_key: Private Integration token (pit-...) ou API key
        location_id: Sub-account (location) usada em todas as chamadas
        base_url: URL base da API
        api_version: Valor do header Version
    """

    api_key: str = ""
    location_id: str = ""
    base_url: str = GHL_BASE_URL
    api_version: str = GHL_API_VERSION

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def validate(self) -> list[str]:
        """Valida configurações do GHL."""
        errors: list[str] = []
        if not self.api_key:
            errors.append("GHL_API_KEY não configurado")
        if self.api_key and not self.location_id:
            errors.append("GHL_API_KEY configurado sem GHL_LOCATION_ID")
        return errors


def _load_ghl_from_env() -> GHLSettings:
    """Carrega GHLSettings de variáveis de ambiente."""
    return GHLSettings(
        api_key=os.getenv("GHL_API_KEY", ""),
        location_id=os.getenv("GHL_LOCATION_ID", ""),
    )


@lru_cache(maxsize=1)
def get_ghl_settings() -> GHLSettings:
    """Retorna instância cacheada de GHLSettings."""
    return _load_ghl_from_env()
