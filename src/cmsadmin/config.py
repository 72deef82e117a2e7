"""Configuration loaded from .cms-admin.toml, env vars, and CLI flags.

Loading order: defaults → TOML file → env vars → CLI flags.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator

from cmsadmin.content.store import SchemaDeletePolicy
from cmsadmin.preferences.storage import PREFERENCES_FILENAME

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".cms-admin.toml"
CONFIG_SEARCH_PATHS = [
    Path("."),
]
GLOBAL_CONFIG_DIR = Path.home() / ".config" / "cms-admin"


class StorageConfig(BaseModel):
    """[storage] section."""

    preferences_file: str = str(GLOBAL_CONFIG_DIR / PREFERENCES_FILENAME)

    @property
    def preferences_path(self) -> Path:
        return Path(self.preferences_file).expanduser()


class ContentConfig(BaseModel):
    """[content] section."""

    seed_demo: bool = True
    on_schema_delete: SchemaDeletePolicy = SchemaDeletePolicy.RETAIN


class ServerConfig(BaseModel):
    """[server] section: the health-check service."""

    host: str = "127.0.0.1"
    port: int = 8080


class LoggingConfig(BaseModel):
    """[logging] section."""

    level: str = "WARNING"

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.upper()
        if value not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level {value!r}")
        return value


class CmsAdminConfig(BaseModel):
    """Top-level configuration for the admin shell."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    content: ContentConfig = Field(default_factory=ContentConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(path: str | Path | None = None) -> CmsAdminConfig:
    """Load configuration from a TOML file.

    Search order:
    1. Explicit path (if provided)
    2. .cms-admin.toml in CWD
    3. ~/.config/cms-admin/config.toml

    Then overlay environment variables.

    Args:
        path: Explicit path to a TOML file.

    Returns:
        Merged CmsAdminConfig.
    """
    data: dict[str, object] = {}

    if path is not None:
        toml_path = Path(path)
        if toml_path.exists():
            data = _load_toml(toml_path)
        else:
            logger.warning("Config file not found: %s", toml_path)
    else:
        for search_dir in CONFIG_SEARCH_PATHS:
            candidate = search_dir / CONFIG_FILENAME
            if candidate.exists():
                data = _load_toml(candidate)
                logger.info("Loaded config from %s", candidate)
                break
        global_config = GLOBAL_CONFIG_DIR / "config.toml"
        if not data and global_config.exists():
            data = _load_toml(global_config)
            logger.info("Loaded config from %s", global_config)

    config = CmsAdminConfig()
    if data:
        try:
            config = CmsAdminConfig.model_validate(data)
        except ValidationError as exc:
            logger.warning("Invalid config, using defaults: %s", exc)

    return _apply_env_vars(config)


def merge_cli_overrides(config: CmsAdminConfig, **cli_kwargs: object) -> CmsAdminConfig:
    """Overlay explicitly-set CLI flags onto the config.

    Only overrides values where the CLI flag was explicitly provided
    (i.e., not None).

    Args:
        config: Base config.
        **cli_kwargs: CLI flag values, e.g. ``server_port``, ``log_level``.

    Returns:
        Updated config with CLI overrides applied.
    """
    data = config.model_dump()

    mapping: dict[str, tuple[str, str]] = {
        "preferences_file": ("storage", "preferences_file"),
        "seed_demo": ("content", "seed_demo"),
        "on_schema_delete": ("content", "on_schema_delete"),
        "server_host": ("server", "host"),
        "server_port": ("server", "port"),
        "log_level": ("logging", "level"),
    }

    for key, value in cli_kwargs.items():
        if value is None:
            continue
        if key in mapping:
            section, field = mapping[key]
            data[section][field] = value

    return CmsAdminConfig.model_validate(data)


def _load_toml(path: Path) -> dict[str, object]:
    """Load a TOML file and return the data dict."""
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (tomllib.TOMLDecodeError, OSError) as exc:
        logger.warning("Failed to parse %s: %s", path, exc)
        return {}


def _apply_env_vars(config: CmsAdminConfig) -> CmsAdminConfig:
    """Apply environment variable overrides to config."""
    data = config.model_dump()

    env_mapping: dict[str, tuple[str, str]] = {
        "CMS_ADMIN_PREFERENCES_FILE": ("storage", "preferences_file"),
        "CMS_ADMIN_SEED_DEMO": ("content", "seed_demo"),
        "CMS_ADMIN_ON_SCHEMA_DELETE": ("content", "on_schema_delete"),
        "CMS_ADMIN_HOST": ("server", "host"),
        "CMS_ADMIN_PORT": ("server", "port"),
        "CMS_ADMIN_LOG_LEVEL": ("logging", "level"),
    }

    applied = False
    for env_var, (section, field) in env_mapping.items():
        value = os.environ.get(env_var)
        if value is not None:
            data[section][field] = value
            applied = True

    if not applied:
        return config
    try:
        return CmsAdminConfig.model_validate(data)
    except ValidationError as exc:
        logger.warning("Ignoring invalid environment overrides: %s", exc)
        return config
