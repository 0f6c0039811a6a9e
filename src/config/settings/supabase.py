"""Settings do Supabase Storage."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class SupabaseSettings:
    """Configurações do Supabase Storage.

    Attributes:
        url: URL do projeto (https://<ref>.supabase.co)
        key: Service role key (Bearer + apikey)
        bucket: Bucket de destino dos uploads
    """

    url: str = ""
    key: str = ""
    bucket: str = "uploads"

    @property
    def configured(self) -> bool:
        return bool(self.url and self.key)

    @property
    def storage_url(self) -> str:
        return f"{self.url.rstrip('/')}/storage/v1"

    def missing(self) -> list[str]:
        required = {"SUPABASE_URL": self.url, "SUPABASE_KEY": self.key}
        return [name for name, value in required.items() if not value]

    def validate(self) -> list[str]:
        errors = [f"{name} não configurado" for name in self.missing()]
        if not self.bucket:
            errors.append("SUPABASE_BUCKET não pode ser vazio")
        return errors


def _load_supabase_from_env() -> SupabaseSettings:
    """Carrega SupabaseSettings de variáveis de ambiente."""
    return SupabaseSettings(
        url=os.getenv("SUPABASE_URL", ""),
        key=os.getenv("SUPABASE_KEY", ""),
        bucket=os.getenv("SUPABASE_BUCKET", "uploads"),
    )


@lru_cache(maxsize=1)
def get_supabase_settings() -> SupabaseSettings:
    """Retorna instância cacheada de SupabaseSettings."""
    return _load_supabase_from_env()
