"""Conector GoHighLevel: CRM (contatos, conversas, agenda, pipelines)."""

from .client import GHLClient, path_segment
from .payloads import (
    build_appointment,
    build_call_log,
    build_message,
    build_note,
    search_field,
    tel_uri,
)

__all__ = [
    "GHLClient",
    "build_appointment",
    "build_call_log",
    "build_message",
    "build_note",
    "path_segment",
    "search_field",
    "tel_uri",
]
