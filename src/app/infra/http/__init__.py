"""Infra HTTP: dispatcher upstream e resultado tipado."""

from app.infra.http.client import UpstreamHttpClient, create_async_http_client
from app.infra.http.result import (
    DispatchResult,
    Raw,
    Structured,
    UpstreamReply,
    error_envelope,
    parse_body,
    passthrough_reply,
    to_reply,
)

__all__ = [
    "DispatchResult",
    "Raw",
    "Structured",
    "UpstreamHttpClient",
    "UpstreamReply",
    "create_async_http_client",
    "error_envelope",
    "parse_body",
    "passthrough_reply",
    "to_reply",
]
