"""Configuration management for mediainform.

Supports loading configuration from:
1. Environment variables (MEDIAINFORM_*)
2. Config file (~/.mediainform/config.yaml)
3. Default values

Example config file (~/.mediainform/config.yaml):
    provider:
      name: mediainfo-cli
      mediainfo_path: /usr/local/bin/mediainfo
      timeout_seconds: 60
      library_file: /opt/mediainfo/lib/libmediainfo.so.0
    logging:
      level: INFO
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

# Config file search locations (in priority order)
CONFIG_LOCATIONS = [
    Path.home() / ".mediainform" / "config.yaml",
    Path.home() / ".config" / "mediainform" / "config.yaml",
    Path(".mediainform.yaml"),
]


@dataclass
class ProviderConfig:
    """MediaInfo provider configuration."""

    # None picks the first available provider by priority
    name: str | None = None
    mediainfo_path: str = "mediainfo"
    timeout_seconds: int = 60
    library_file: str | None = None


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"


@dataclass
class MediaInformConfig:
    """Main configuration for mediainform."""

    provider: ProviderConfig = field(default_factory=ProviderConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _load_yaml_config() -> dict[str, Any]:
    """Load configuration from the first YAML file found."""
    for config_path in CONFIG_LOCATIONS:
        if config_path.exists():
            try:
                with open(config_path, encoding="utf-8") as f:
                    data = yaml.safe_load(f)
                    return data if isinstance(data, dict) else {}
            except (OSError, yaml.YAMLError):
                continue
    return {}


def _get_env(key: str, default: Any = None) -> Any:
    """Get environment variable with MEDIAINFORM_ prefix."""
    return os.environ.get(f"MEDIAINFORM_{key}", default)


def _log_level(value: Any) -> str:
    """Normalize a level name, falling back to WARNING for unknown names."""
    level = str(value).upper()
    if not isinstance(logging.getLevelName(level), int):
        return "WARNING"
    return level


def load_config() -> MediaInformConfig:
    """Load configuration from file and environment variables.

    Priority (highest first):
    1. Environment variables (MEDIAINFORM_*)
    2. Config file (~/.mediainform/config.yaml)
    3. Default values
    """
    file_config = _load_yaml_config()

    # Provider
    provider_config = file_config.get("provider") or {}
    provider = ProviderConfig(
        name=_get_env("PROVIDER") or provider_config.get("name"),
        mediainfo_path=_get_env("MEDIAINFO_PATH")
        or provider_config.get("mediainfo_path", "mediainfo"),
        timeout_seconds=int(_get_env("TIMEOUT") or provider_config.get("timeout_seconds", 60)),
        library_file=_get_env("LIBRARY_FILE") or provider_config.get("library_file"),
    )

    # Logging
    logging_config = file_config.get("logging") or {}
    log = LoggingConfig(
        level=_log_level(_get_env("LOG_LEVEL") or logging_config.get("level", "WARNING")),
    )

    return MediaInformConfig(provider=provider, logging=log)


# Global config instance (lazy loaded)
_config: MediaInformConfig | None = None


def get_config() -> MediaInformConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Reset the global configuration (for testing)."""
    global _config
    _config = None
