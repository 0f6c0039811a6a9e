"""Infra Google: token OAuth cacheado e client do Drive."""

from app.infra.google.drive_client import (
    DriveUpload,
    GoogleDriveClient,
    build_drive_service,
    folder_query,
)
from app.infra.google.oauth_token_cache import CachedAccessToken, GoogleOAuthTokenCache

__all__ = [
    "CachedAccessToken",
    "DriveUpload",
    "GoogleDriveClient",
    "GoogleOAuthTokenCache",
    "build_drive_service",
    "folder_query",
]
