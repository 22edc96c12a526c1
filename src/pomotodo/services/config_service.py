"""Persistent user settings.

Settings are addressed by dot-separated keys (``ui.theme``,
``logging.level``) in the CLI and stored as one JSON document.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir
from pydantic import BaseModel, ValidationError

from pomotodo.models.config_models import AppConfig


class ConfigKeyError(KeyError):
    """Raised for a dot-separated key that does not name a setting."""


def parse_value(raw: str) -> Any:
    """Convert a CLI string into bool or int where it looks like one."""
    if raw.lower() in ("true", "false"):
        return raw.lower() == "true"
    if raw.lstrip("-").isdigit():
        return int(raw)
    return raw


class ConfigService:
    """Reads and writes config.json in the platform config directory.

    The file is loaded lazily on first access and written back after every
    change. A missing file means first run and is created with defaults.
    """

    FILENAME = "config.json"

    def __init__(self, config_dir: Path | None = None):
        self.config_dir = config_dir or Path(user_config_dir("pomotodo"))
        self.config_path = self.config_dir / self.FILENAME
        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """The current configuration, loaded on first use."""
        return self._config if self._config is not None else self.load_config()

    def load_config(self) -> AppConfig:
        """Read config.json, writing defaults when it does not exist yet.

        Raises:
            RuntimeError: If the file exists but cannot be read or validated
        """
        try:
            raw = self.config_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            self._config = AppConfig()
            self.save_config()
            return self._config
        except OSError as e:
            raise RuntimeError(f"Failed to load config: {e}") from e

        try:
            self._config = AppConfig.model_validate_json(raw)
        except ValidationError as e:
            raise RuntimeError(f"Failed to load config: {e}") from e
        return self._config

    def save_config(self) -> None:
        """Write the configuration, readable by the owner only."""
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            self.config_path.write_text(
                self.config.model_dump_json(indent=2), encoding="utf-8"
            )
            self.config_path.chmod(0o600)
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}") from e

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key (e.g. ``ui.theme``)."""
        return self._lookup(self.config, key)

    def set(self, key: str, value: Any) -> Any:
        """Set a configuration value by dot-separated key and persist it.

        Raises:
            ConfigKeyError: If the key does not exist
            ValueError: If pydantic rejects the value
        """
        *parents, leaf = key.split(".")
        target: Any = self.config
        if parents:
            target = self._lookup(self.config, ".".join(parents))
        if not isinstance(target, BaseModel) or leaf not in type(target).model_fields:
            raise ConfigKeyError(key)

        try:
            setattr(target, leaf, value)
        except ValidationError as e:
            raise ValueError(f"Invalid value for '{key}': {value!r}") from e

        self.save_config()
        return getattr(target, leaf)

    def reset(self, key: str | None = None) -> None:
        """Reset configuration to defaults, either entirely or for one key."""
        if key is not None:
            self.set(key, self._lookup(AppConfig(), key))
            return
        self._config = AppConfig()
        self.save_config()

    @staticmethod
    def _lookup(config: AppConfig, key: str) -> Any:
        value: Any = config
        for part in key.split("."):
            if not isinstance(value, BaseModel) or part not in type(value).model_fields:
                raise ConfigKeyError(key)
            value = getattr(value, part)
        return value


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Return the shared ConfigService instance."""
    return ConfigService()
