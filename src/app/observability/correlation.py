"""correlation_id por requisição inbound.

Lido do header x-correlation-id (quando o frontend envia) ou gerado,
guardado em ContextVar e injetado nos logs pelo CorrelationIdFilter.
"""

from __future__ import annotations

import re
import uuid
from contextvars import ContextVar, Token

CORRELATION_HEADER = "x-correlation-id"

# IDs vindos do browser entram em logs: só caracteres seguros, tamanho limitado
_SAFE_ID = re.compile(r"^[A-Za-z0-9._:-]{1,128}$")

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual (ou string vazia)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id no contexto atual.

    Valores ausentes ou fora do formato seguro são substituídos por um UUID novo.

    Returns:
        Token para reset posterior via reset_correlation_id().
    """
    value = correlation_id if correlation_id and _SAFE_ID.match(correlation_id) else None
    return _correlation_id.set(value or generate_correlation_id())


def reset_correlation_id(token: Token[str]) -> None:
    _correlation_id.reset(token)


def generate_correlation_id() -> str:
    return str(uuid.uuid4())
