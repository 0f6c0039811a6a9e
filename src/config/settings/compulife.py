"""Settings da Compulife (API de cotação de seguros).

A Compulife autoriza chamadas privadas pelo IP de origem declarado
junto com o COMPULIFEAUTHORIZATIONID; o relay sai por IP fixo.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

COMPULIFE_BASE_URL = "https://www.compulifeapi.com/api"
DEFAULT_REMOTE_IP = "162.220.232.99"


@dataclass(frozen=True)
class CompulifeSettings:
    """Configurações da Compulife.

    Attributes:
        auth_id: COMPULIFEAUTHORIZATIONID da conta
        remote_ip: IP de egress declarado (REMOTE_IP)
        base_url: URL base da API
    """

    auth_id: str = ""
    remote_ip: str = DEFAULT_REMOTE_IP
    base_url: str = COMPULIFE_BASE_URL

    @property
    def configured(self) -> bool:
        return bool(self.auth_id)

    def validate(self) -> list[str]:
        """Valida configurações da Compulife."""
        errors: list[str] = []
        if not self.auth_id:
            errors.append("COMPULIFE_AUTH_ID não configurado")
        if not self.remote_ip:
            errors.append("REMOTE_IP não pode ser vazio")
        return errors


def _load_compulife_from_env() -> CompulifeSettings:
    """Carrega CompulifeSettings de variáveis de ambiente."""
    return CompulifeSettings(
        auth_id=os.getenv("COMPULIFE_AUTH_ID", ""),
        remote_ip=os.getenv("REMOTE_IP", DEFAULT_REMOTE_IP),
        base_url=os.getenv("COMPULIFE_BASE_URL", COMPULIFE_BASE_URL),
    )


@lru_cache(maxsize=1)
def get_compulife_settings() -> CompulifeSettings:
    """Retorna instância cacheada de CompulifeSettings."""
    return _load_compulife_from_env()
