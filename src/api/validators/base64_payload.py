"""Validação de conteúdo binário enviado em base64 pelo browser."""

from __future__ import annotations

import base64
import binascii
from typing import Any

from app.errors import ClientInputError

_DATA_URL_PREFIX = "data:"


def strip_data_url(value: str) -> tuple[str, str | None]:
    """Separa `data:<mime>;base64,<dados>` em (dados, mime)."""
    if not value.startswith(_DATA_URL_PREFIX) or "," not in value:
        return value, None
    header, data = value.split(",", 1)
    mime = header[len(_DATA_URL_PREFIX):].split(";", 1)[0] or None
    return data, mime


def decode_base64_field(value: Any, field_name: str) -> bytes:
    """Decodifica um campo base64 (aceita data URL).

    Raises:
        ClientInputError: Campo ausente, vazio ou base64 inválido.
    """
    if not value or not isinstance(value, str):
        raise ClientInputError(f"{field_name} (base64) required")
    data, _ = strip_data_url(value.strip())
    data = "".join(data.split())
    try:
        decoded = base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ClientInputError(f"{field_name} is not valid base64") from exc
    if not decoded:
        raise ClientInputError(f"{field_name} (base64) required")
    return decoded
