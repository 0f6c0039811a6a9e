"""Tradução de campos inbound para parâmetros Compulife e injeção de credenciais."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from api.connectors.compulife.fields import ACTION_FIELDS

if TYPE_CHECKING:
    from collections.abc import Mapping

    from config.settings import CompulifeSettings

AUTH_ID_FIELD = "COMPULIFEAUTHORIZATIONID"
REMOTE_IP_FIELD = "REMOTE_IP"
CREDENTIAL_FIELDS = (AUTH_ID_FIELD, REMOTE_IP_FIELD)

QUERY_PARAMETER = "COMPULIFE"

# Mesmo conjunto de caracteres preservados por encodeURIComponent
_URI_COMPONENT_SAFE = "-_.!~*'()"


def stringify(value: Any) -> str:
    """Representação textual enviada à Compulife.

    Strings passam intactas; o resto vira texto JSON
    (True -> "true", None -> "null", 250000 -> "250000").
    """
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def translate(action: str, inbound: Mapping[str, Any]) -> dict[str, str]:
    """Monta o conjunto de parâmetros outbound de uma ação.

    Só copia campos do whitelist da ação; campos ausentes são omitidos,
    exceto os que têm default. Ações compostas traduzem a base primeiro
    e estendem o resultado sem sobrescrever chaves já produzidas.

    Args:
        action: Chave de ACTION_FIELDS (ex: "quote", "health-analyzer").
        inbound: Mapeamento inbound sem validação estrutural.

    Raises:
        KeyError: Se a ação não existe na tabela.
    """
    spec = ACTION_FIELDS[action]
    params = translate(spec.extends, inbound) if spec.extends else {}

    for name in spec.whitelist:
        if name in params:
            continue
        if name in inbound:
            params[name] = stringify(inbound[name])
        elif name in spec.defaults:
            params[name] = spec.defaults[name]
    return params


def attach_credentials(
    params: Mapping[str, str],
    settings: CompulifeSettings,
) -> dict[str, str]:
    """Novo mapeamento com as credenciais do servidor primeiro.

    Credenciais vêm sempre de settings; os nomes não pertencem a nenhum
    whitelist, então nenhum campo inbound consegue sobrescrevê-las.
    """
    return {
        AUTH_ID_FIELD: settings.auth_id,
        REMOTE_IP_FIELD: settings.remote_ip,
        **{name: value for name, value in params.items() if name not in CREDENTIAL_FIELDS},
    }


def build_private_url(base_url: str, path: str, envelope: Mapping[str, str]) -> str:
    """URL de endpoint privado com o JSON completo em ?COMPULIFE=."""
    encoded = quote(json.dumps(dict(envelope), separators=(",", ":")), safe=_URI_COMPONENT_SAFE)
    return f"{base_url}{path}/?{QUERY_PARAMETER}={encoded}"
