from __future__ import annotations

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..errors import ConfigError
from ..sheets.records import MAX_ROWS

"""Settings loader.

Responsibilities:
- Load YAML config/toggles.yml (optional; defaults when absent)
- Validate against the bundled config_schema.json
- Apply environment overrides (PORT) and read service account credentials
"""

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "SCHEMA_PATH",
    "ServerConfig",
    "ServiceAccountConfig",
    "Settings",
    "SourceConfig",
    "load_settings",
]

DEFAULT_CONFIG_PATH = Path("config/toggles.yml")
SCHEMA_PATH = Path(__file__).parent / "config_schema.json"

ENV_CLIENT_EMAIL = "GOOGLE_SERVICE_ACCOUNT_EMAIL"
ENV_PRIVATE_KEY = "GOOGLE_PRIVATE_KEY"
ENV_PORT = "PORT"


@dataclass(frozen=True)
class ServiceAccountConfig:
    """Google service account credentials, taken from the environment."""
    client_email: str
    private_key: str

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ServiceAccountConfig:
        env = os.environ if environ is None else environ
        email = env.get(ENV_CLIENT_EMAIL)
        key = env.get(ENV_PRIVATE_KEY)
        if not email or not key:
            raise ConfigError("Missing required environment variables!")
        # keys pasted into .env / CI secrets usually carry literal "\n"
        return cls(client_email=email, private_key=key.replace("\\n", "\n"))


@dataclass(frozen=True)
class SourceConfig:
    type: str = "google"  # google | file
    path: str | None = None  # file source only


@dataclass(frozen=True)
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 8080


@dataclass(frozen=True)
class Settings:
    """Root settings object."""
    source: SourceConfig = field(default_factory=SourceConfig)
    max_rows: int = MAX_ROWS
    server: ServerConfig = field(default_factory=ServerConfig)


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the bundled JSON schema.

    Raises:
        ConfigError: schema file missing or invalid, or data fails validation
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")
    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def _port_from_env(environ: Mapping[str, str], default: int) -> int:
    raw = environ.get(ENV_PORT)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigError(f"invalid {ENV_PORT}: {raw!r}") from e


def load_settings(path: Path = DEFAULT_CONFIG_PATH, environ: Mapping[str, str] | None = None) -> Settings:
    """Load settings from ``path``; a missing file means all defaults.

    The ``PORT`` environment variable overrides ``server.port``.
    """
    env = os.environ if environ is None else environ
    data: dict[str, Any] = {}
    if path.exists():
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"invalid yaml: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"config root must be a mapping: {path}")
        _validate_config_schema(data)

    src_raw = data.get("source", {})
    srv_raw = data.get("server", {})
    server_defaults = ServerConfig()
    return Settings(
        source=SourceConfig(type=src_raw.get("type", "google"), path=src_raw.get("path")),
        max_rows=data.get("max_rows", MAX_ROWS),
        server=ServerConfig(
            host=srv_raw.get("host", server_defaults.host),
            port=_port_from_env(env, srv_raw.get("port", server_defaults.port)),
        ),
    )
