"""Resultado tipado das chamadas upstream.

Toda resposta upstream é lida como texto e vira:
- Structured: corpo JSON parseado
- Raw: corpo não-JSON, devolvido como {"raw": <texto>, "status": <http>}

Chamadores tratam os dois ramos explicitamente em vez de inspecionar
o formato do payload.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

# Tamanho do trecho do corpo usado como mensagem de erro
_MESSAGE_SNIPPET_CHARS = 200


@dataclass(frozen=True, slots=True)
class Structured:
    """Corpo upstream parseado com sucesso."""

    value: Any
    status: int
    text: str = field(default="", repr=False)

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    @property
    def payload(self) -> Any:
        return self.value


@dataclass(frozen=True, slots=True)
class Raw:
    """Corpo upstream que não é JSON."""

    text: str
    status: int

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    @property
    def payload(self) -> dict[str, Any]:
        return {"raw": self.text, "status": self.status}


DispatchResult = Structured | Raw


@dataclass(frozen=True, slots=True)
class UpstreamReply:
    """Resposta pronta para devolver ao browser (payload + status HTTP)."""

    payload: Any
    status_code: int
    ok: bool


def parse_body(text: str, status: int) -> DispatchResult:
    """Tenta parsear o corpo como JSON; em falha devolve Raw."""
    try:
        value = json.loads(text)
    except ValueError:
        return Raw(text=text, status=status)
    return Structured(value=value, status=status, text=text)


def error_envelope(result: DispatchResult) -> dict[str, Any]:
    """Envelope {error, status, message, data} para status não-2xx."""
    if isinstance(result, Structured):
        data = result.value
        message = _extract_message(data) or result.text[:_MESSAGE_SNIPPET_CHARS]
    else:
        data = {"raw": result.text}
        message = result.text[:_MESSAGE_SNIPPET_CHARS]
    return {"error": True, "status": result.status, "message": message, "data": data}


def to_reply(result: DispatchResult) -> UpstreamReply:
    """Converte resultado upstream em resposta, com envelope em não-2xx."""
    if result.ok:
        return UpstreamReply(payload=result.payload, status_code=result.status, ok=True)
    return UpstreamReply(payload=error_envelope(result), status_code=result.status, ok=False)


def _extract_message(data: Any) -> Any:
    if not isinstance(data, dict):
        return None
    for key in ("message", "msg"):
        if data.get(key):
            return data[key]
    nested = data.get("error")
    if isinstance(nested, dict) and nested.get("message"):
        return nested["message"]
    return None


def passthrough_reply(result: DispatchResult) -> UpstreamReply:
    """Devolve o corpo upstream sem envelope, qualquer que seja o status."""
    return UpstreamReply(payload=result.payload, status_code=result.status, ok=result.ok)
