"""Cliente da Anthropic Messages API."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.connectors.anthropic.payload import build_messages_payload, is_passthrough
from app.errors import NotConfiguredError
from app.infra.http import to_reply

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.infra.http import UpstreamHttpClient, UpstreamReply
    from config.settings import AnthropicSettings

logger = logging.getLogger(__name__)


class AnthropicClient:
    """Encaminha chamadas de texto/visão com a API key do servidor."""

    def __init__(self, settings: AnthropicSettings, upstream: UpstreamHttpClient) -> None:
        self._settings = settings
        self._upstream = upstream

    def ensure_configured(self) -> None:
        if not self._settings.api_key:
            raise NotConfiguredError("ANTHROPIC_API_KEY")

    async def create_message(self, body: Mapping[str, Any]) -> UpstreamReply:
        """Envia o corpo (passthrough ou forma simplificada) para /v1/messages.

        Raises:
            NotConfiguredError: ANTHROPIC_API_KEY vazio; checado antes do corpo.
            ClientInputError: Forma simplificada sem imagem.
        """
        self.ensure_configured()
        payload = build_messages_payload(body, self._settings)
        logger.info(
            "anthropic_request",
            extra={"mode": "passthrough" if is_passthrough(body) else "simplified"},
        )
        result = await self._upstream.post(
            self._settings.messages_url,
            headers={
                "x-api-key": self._settings.api_key,
                "anthropic-version": self._settings.api_version,
                "Content-Type": "application/json",
            },
            json=payload,
        )
        return to_reply(result)
