"""Conector Supabase Storage."""

from .client import DEFAULT_SIGNED_URL_SECONDS, SupabaseStorageClient, normalize_object_path

__all__ = [
    "DEFAULT_SIGNED_URL_SECONDS",
    "SupabaseStorageClient",
    "normalize_object_path",
]
