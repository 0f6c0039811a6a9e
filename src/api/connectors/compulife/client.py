"""Cliente da API Compulife.

Dois tipos de chamada:
- pública: GET simples (listas de categorias, companhias, produtos)
- privada: GET com o JSON de parâmetros + credenciais em ?COMPULIFE=,
  autorizada pelo IP de egress declarado
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.compulife.params import attach_credentials, build_private_url
from app.errors import NotConfiguredError
from app.infra.http import passthrough_reply

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.infra.http import UpstreamHttpClient, UpstreamReply
    from config.settings import CompulifeSettings

logger = logging.getLogger(__name__)


class CompulifeClient:
    """Cliente Compulife sobre o dispatcher upstream compartilhado."""

    def __init__(self, settings: CompulifeSettings, upstream: UpstreamHttpClient) -> None:
        self._settings = settings
        self._upstream = upstream

    async def get_public(self, path: str) -> UpstreamReply:
        """GET em endpoint público (sem credenciais)."""
        result = await self._upstream.get(f"{self._settings.base_url}{path}")
        return passthrough_reply(result)

    async def get_private(self, path: str, params: Mapping[str, str]) -> UpstreamReply:
        """GET em endpoint privado com credenciais injetadas.

        Raises:
            NotConfiguredError: Se COMPULIFE_AUTH_ID estiver vazio (antes de qualquer IO).
        """
        if not self._settings.auth_id:
            raise NotConfiguredError("COMPULIFE_AUTH_ID")

        envelope = attach_credentials(params, self._settings)
        url = build_private_url(self._settings.base_url, path, envelope)
        logger.debug(
            "compulife_private_call",
            extra={"path": path, "param_count": len(envelope)},
        )
        result = await self._upstream.get(url)
        return passthrough_reply(result)
