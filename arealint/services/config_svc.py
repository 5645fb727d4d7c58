#!/usr/bin/env python3
# ======================================================================
#  Config Service - Configuration loading and caching
#  - Loads config from YAML, then applies CLI overrides
#  - Validates the composed mapping with AreaConfig
#  - Caches the composed config; reload() re-reads the file
# ======================================================================

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from arealint.helpers.dto.config_dto import AreaConfig
from arealint.helpers.exceptions import ConfigError

CONFIG_ENV_VAR = "AREALINT_CONFIG"
DEFAULT_CONFIG_FILES = ("arealint.yaml", "arealint.yml", ".arealint.yaml")


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge override into base. Nested dicts merge, lists are extended, scalars replaced."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = _merge(current, value)
        elif isinstance(current, list) and isinstance(value, list):
            merged[key] = [*current, *value]
        else:
            merged[key] = value
    return merged


class ConfigService:
    """
    Service for loading and caching analysis configuration.

    Sources, later ones winning:
      1) Built-in defaults (AreaConfig field defaults)
      2) YAML file: explicit path, else $AREALINT_CONFIG, else ./arealint.yaml if present
      3) Overrides dict passed in (list values extend the file's lists)
    """

    def __init__(self, config_path: Path | None = None, search_dir: Path | None = None) -> None:
        self.config_path = config_path
        self.search_dir = search_dir or Path.cwd()
        self._config: AreaConfig | None = None
        self._logger = logging.getLogger(__name__)

    def get_config(self, overrides: dict[str, Any] | None = None, force_reload: bool = False) -> AreaConfig:
        """
        Get the composed configuration.

        Overrides bypass the cache, like a one-off compose.

        Raises:
            ConfigError: If the file cannot be read or the result fails validation
        """
        if overrides:
            return self._compose(overrides)
        if self._config is None or force_reload:
            self._config = self._compose()
        return self._config

    def reload(self) -> AreaConfig:
        """Force reload configuration from all sources."""
        self._logger.info("Reloading configuration from all sources")
        return self.get_config(force_reload=True)

    def find_config_file(self) -> Path | None:
        """Locate the YAML file to load, or None to run on defaults."""
        if self.config_path is not None:
            if not self.config_path.is_file():
                raise ConfigError(f"Config file not found: {self.config_path}")
            return self.config_path

        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            path = Path(env_path)
            if not path.is_file():
                raise ConfigError(f"Config file from ${CONFIG_ENV_VAR} not found: {path}")
            return path

        for name in DEFAULT_CONFIG_FILES:
            candidate = self.search_dir / name
            if candidate.is_file():
                return candidate
        return None

    # ----------------------------------------------------------------------
    # Private composition logic
    # ----------------------------------------------------------------------

    def _read_yaml(self, path: Path) -> dict[str, Any]:
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Could not load config from {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
        return data

    def _compose(self, overrides: dict[str, Any] | None = None) -> AreaConfig:
        data: dict[str, Any] = {}

        path = self.find_config_file()
        if path is not None:
            self._logger.info(f"[ConfigService] Loading {path}")
            data = self._read_yaml(path)
        else:
            self._logger.debug("[ConfigService] No config file found, using defaults")

        if overrides:
            data = _merge(data, overrides)

        try:
            return AreaConfig.model_validate(data)
        except ValidationError as e:
            source = str(path) if path else "overrides"
            raise ConfigError(f"Invalid configuration ({source}):\n{e}") from e
