"""Conector Anthropic: leitura de lead cards por visão."""

from .client import AnthropicClient
from .payload import LEAD_CARD_PROMPT, build_messages_payload, is_passthrough

__all__ = [
    "LEAD_CARD_PROMPT",
    "AnthropicClient",
    "build_messages_payload",
    "is_passthrough",
]
