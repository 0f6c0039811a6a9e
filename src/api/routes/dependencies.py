"""Dependências FastAPI compartilhadas pelas rotas.

Settings e conectores vivem em app.state (montados no lifespan);
as rotas nunca leem variáveis de ambiente diretamente.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from fastapi import Request, Response
from fastapi.responses import JSONResponse

from app.bootstrap import RelayServices
from app.errors import ClientInputError
from config.settings import AppSettings

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from app.infra.http import UpstreamReply

# Status que não podem carregar corpo
BODYLESS_STATUSES = frozenset({204, 304})


def get_settings(request: Request) -> AppSettings:
    return request.app.state.settings


def get_services(request: Request) -> RelayServices:
    return request.app.state.services


async def read_json_object(request: Request) -> dict[str, Any]:
    """Lê o corpo como objeto JSON; corpo vazio vira {}.

    Raises:
        ClientInputError: JSON inválido ou corpo que não é objeto.
    """
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        body = json.loads(raw)
    except ValueError as exc:
        raise ClientInputError("Invalid JSON body") from exc
    if not isinstance(body, dict):
        raise ClientInputError("JSON object body required")
    return body


def configured_json_body(
    connector: Callable[[RelayServices], Any],
) -> Callable[[Request], Awaitable[dict[str, Any]]]:
    """Dependency que exige a integração configurada antes de ler o corpo.

    Credencial ausente responde 500 "not configured" mesmo com corpo inválido.
    """

    async def _configured_body(request: Request) -> dict[str, Any]:
        connector(get_services(request)).ensure_configured()
        return await read_json_object(request)

    return _configured_body


def reply_response(reply: UpstreamReply) -> Response:
    """Resposta HTTP com o payload upstream e o status propagado."""
    if reply.status_code in BODYLESS_STATUSES:
        return Response(status_code=reply.status_code)
    return JSONResponse(content=reply.payload, status_code=reply.status_code)
