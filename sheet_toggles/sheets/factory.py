from __future__ import annotations

from collections.abc import Mapping

from ..config.loader import ServiceAccountConfig, Settings
from ..errors import ConfigError
from .file_source import FileSheetSource
from .google import GoogleSheetSource

"""Pick the row source described by the settings."""

__all__ = [
    "make_source",
]


def make_source(settings: Settings, environ: Mapping[str, str] | None = None) -> FileSheetSource | GoogleSheetSource:
    """Build the configured row source.

    Raises:
        ConfigError: unknown source type, file source without a path, or
            Google source without service account credentials
    """
    source = settings.source
    if source.type == "file":
        if not source.path:
            raise ConfigError("source.path is required for a file source")
        return FileSheetSource(source.path, limit=settings.max_rows)
    if source.type == "google":
        return GoogleSheetSource(ServiceAccountConfig.from_env(environ), limit=settings.max_rows)
    raise ConfigError(f"unknown source type: {source.type}")
