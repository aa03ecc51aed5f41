"""
Renderer Configuration
======================

Pydantic model for everything a renderer is built from, plus a YAML loader.

Example stencil.yaml:
    engine_version: v4
    locale: en-US
    log_level: info
    site_settings:
      cdn_url: https://cdn.example.com
    theme_settings:
      show_banner: true
    translations:
      header:
        welcome: "Welcome, {name}!"
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from stencil_common.constants import (
    DEFAULT_ENGINE_VERSION,
    DEFAULT_LOG_LEVEL,
    LOG_LEVELS,
    SUPPORTED_ENGINE_VERSIONS,
    EnvVars,
)
from stencil_common.errors import ConfigError


class RendererConfig(BaseModel):
    """Validated renderer configuration."""

    engine_version: str = DEFAULT_ENGINE_VERSION
    site_settings: Dict[str, Any] = {}
    theme_settings: Dict[str, Any] = {}
    locale: Optional[str] = None
    translations: Dict[str, Any] = {}
    log_level: str = DEFAULT_LOG_LEVEL

    model_config = ConfigDict(extra="ignore")

    @field_validator("engine_version", mode="before")
    @classmethod
    def normalize_engine_version(cls, v: Any) -> str:
        """Unknown or missing engine versions fall back to the default build."""
        if isinstance(v, str) and v.strip().lower() in SUPPORTED_ENGINE_VERSIONS:
            return v.strip().lower()
        return DEFAULT_ENGINE_VERSION

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.lower()
        if level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: '{v}'. Valid levels: {', '.join(LOG_LEVELS)}")
        return level


def load_config(path: Optional[Union[str, Path]] = None) -> RendererConfig:
    """
    Load a RendererConfig from YAML, applying environment overrides.

    A missing ``path`` (or a path that does not exist) yields the defaults.

    Raises:
        ConfigError: the file is not valid YAML or fails validation
    """
    data: Dict[str, Any] = {}

    if path is not None and Path(path).exists():
        try:
            loaded = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}", path=str(path)) from e
        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ConfigError(f"Config file must contain a mapping: {path}", path=str(path))
        data.update(loaded)

    env_version = os.getenv(EnvVars.ENGINE_VERSION)
    if env_version:
        data["engine_version"] = env_version
    env_level = os.getenv(EnvVars.LOG_LEVEL)
    if env_level:
        data["log_level"] = env_level

    try:
        return RendererConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid renderer configuration: {e}") from e
