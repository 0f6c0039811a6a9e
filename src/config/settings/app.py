"""Settings agregadas da aplicação.

AppSettings é construída uma vez no startup e passada explicitamente
para os componentes (via app.state), nunca lida de estado global
dentro dos handlers.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from config.settings.anthropic import AnthropicSettings, get_anthropic_settings
from config.settings.base import BaseSettings, get_base_settings
from config.settings.compulife import CompulifeSettings, get_compulife_settings
from config.settings.ghl import GHLSettings, get_ghl_settings
from config.settings.google import (
    GoogleDriveSettings,
    GoogleVisionSettings,
    get_drive_settings,
    get_vision_settings,
)
from config.settings.supabase import SupabaseSettings, get_supabase_settings


@dataclass(frozen=True)
class AppSettings:
    """Snapshot imutável de todas as settings do relay."""

    base: BaseSettings = field(default_factory=BaseSettings)
    compulife: CompulifeSettings = field(default_factory=CompulifeSettings)
    ghl: GHLSettings = field(default_factory=GHLSettings)
    anthropic: AnthropicSettings = field(default_factory=AnthropicSettings)
    drive: GoogleDriveSettings = field(default_factory=GoogleDriveSettings)
    vision: GoogleVisionSettings = field(default_factory=GoogleVisionSettings)
    supabase: SupabaseSettings = field(default_factory=SupabaseSettings)

    def configured_integrations(self) -> dict[str, bool]:
        """Mapa integração -> credenciais presentes (usado no health check)."""
        return {
            "compulife": self.compulife.configured,
            "ghl": self.ghl.configured,
            "anthropic": self.anthropic.configured,
            "google_drive": self.drive.configured,
            "google_vision": self.vision.configured,
            "supabase": self.supabase.configured,
        }

    def validate(self) -> list[str]:
        """Valida todas as seções, prefixando o nome de cada uma."""
        sections = {
            "base": self.base,
            "compulife": self.compulife,
            "ghl": self.ghl,
            "anthropic": self.anthropic,
            "google_drive": self.drive,
            "google_vision": self.vision,
            "supabase": self.supabase,
        }
        return [
            f"{name}: {error}"
            for name, section in sections.items()
            for error in section.validate()
        ]


def load_app_settings() -> AppSettings:
    """Monta AppSettings a partir das settings cacheadas de cada seção."""
    return AppSettings(
        base=get_base_settings(),
        compulife=get_compulife_settings(),
        ghl=get_ghl_settings(),
        anthropic=get_anthropic_settings(),
        drive=get_drive_settings(),
        vision=get_vision_settings(),
        supabase=get_supabase_settings(),
    )
