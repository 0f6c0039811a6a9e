"""Roteamento de ações do endpoint multiplexado `POST /`.

O discriminador é o campo `action` do corpo (default: ping).
Ação desconhecida vira erro 400 listando as ações válidas.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from api.connectors.compulife.fields import HEALTH_ANALYZER_ACTION, QUOTE_ACTION
from api.connectors.compulife.params import translate
from app.errors import ClientInputError
from app.infra.http import UpstreamReply

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Mapping

    from api.connectors.compulife.client import CompulifeClient

    ActionHandler = Callable[[CompulifeClient, Mapping[str, Any]], Awaitable[UpstreamReply]]

DEFAULT_ACTION = "ping"
DEFAULT_CATEGORY = "Life"
SIDE_BY_SIDE_PATH = "/sidebyside"


async def _ping(client: CompulifeClient, body: Mapping[str, Any]) -> UpstreamReply:
    payload = {
        "status": "ok",
        "service": "compulife-proxy",
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return UpstreamReply(payload=payload, status_code=200, ok=True)


async def _get_categories(client: CompulifeClient, body: Mapping[str, Any]) -> UpstreamReply:
    return await client.get_public("/CategoryList")


async def _get_companies(client: CompulifeClient, body: Mapping[str, Any]) -> UpstreamReply:
    category = str(body.get("category") or DEFAULT_CATEGORY)
    return await client.get_public(f"/CompanyList/{quote(category, safe='')}")


async def _get_products(client: CompulifeClient, body: Mapping[str, Any]) -> UpstreamReply:
    company = body.get("company")
    if not company:
        raise ClientInputError("company required")
    return await client.get_public(f"/ProductList/{quote(str(company), safe='')}")


async def _quote(client: CompulifeClient, body: Mapping[str, Any]) -> UpstreamReply:
    return await client.get_private(SIDE_BY_SIDE_PATH, translate(QUOTE_ACTION, body))


async def _quote_health_analyzer(
    client: CompulifeClient,
    body: Mapping[str, Any],
) -> UpstreamReply:
    return await client.get_private(SIDE_BY_SIDE_PATH, translate(HEALTH_ANALYZER_ACTION, body))


ACTIONS: dict[str, ActionHandler] = {
    "ping": _ping,
    "get-categories": _get_categories,
    "get-companies": _get_companies,
    "get-products": _get_products,
    "quote-sidebyside": _quote,
    "quote-compare": _quote,
    "quote-health-analyzer": _quote_health_analyzer,
}


def resolve_action(body: Mapping[str, Any]) -> tuple[str, ActionHandler]:
    """Seleciona o handler da ação pedida.

    Raises:
        ClientInputError: Ação desconhecida (inclui a lista de ações válidas).
    """
    action = body.get("action") or DEFAULT_ACTION
    handler = ACTIONS.get(action) if isinstance(action, str) else None
    if handler is None:
        raise ClientInputError(
            f"Unknown action: {action}",
            details={"valid_actions": list(ACTIONS)},
        )
    return action, handler


async def dispatch_action(client: CompulifeClient, body: Mapping[str, Any]) -> UpstreamReply:
    """Resolve a ação e executa o handler correspondente."""
    _, handler = resolve_action(body)
    return await handler(client, body)
