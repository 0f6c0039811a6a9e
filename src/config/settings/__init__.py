"""Agregador de settings do QuoteIt API Hub.

Re-exporta todas as settings e funções de cada módulo.
Uma seção por integração para isolamento de mudanças.
"""

from __future__ import annotations

from config.settings.anthropic import (
    ANTHROPIC_MESSAGES_URL,
    AnthropicSettings,
    get_anthropic_settings,
)
from config.settings.app import AppSettings, load_app_settings
from config.settings.base import (
    DEFAULT_ALLOWED_ORIGINS,
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.compulife import (
    COMPULIFE_BASE_URL,
    CompulifeSettings,
    get_compulife_settings,
)
from config.settings.ghl import (
    GHL_API_VERSION,
    GHL_BASE_URL,
    GHLSettings,
    get_ghl_settings,
)
from config.settings.google import (
    GOOGLE_TOKEN_URL,
    GOOGLE_VISION_URL,
    GoogleDriveSettings,
    GoogleVisionSettings,
    get_drive_settings,
    get_vision_settings,
)
from config.settings.supabase import SupabaseSettings, get_supabase_settings

__all__ = [
    # Constants
    "ANTHROPIC_MESSAGES_URL",
    "COMPULIFE_BASE_URL",
    "DEFAULT_ALLOWED_ORIGINS",
    "GHL_API_VERSION",
    "GHL_BASE_URL",
    "GOOGLE_TOKEN_URL",
    "GOOGLE_VISION_URL",
    # Settings
    "AnthropicSettings",
    "AppSettings",
    "BaseSettings",
    "CompulifeSettings",
    "Environment",
    "GHLSettings",
    "GoogleDriveSettings",
    "GoogleVisionSettings",
    "SupabaseSettings",
    # Loaders
    "get_anthropic_settings",
    "get_base_settings",
    "get_compulife_settings",
    "get_drive_settings",
    "get_ghl_settings",
    "get_supabase_settings",
    "get_vision_settings",
    "load_app_settings",
]
