"""Configuration for timephrase.

Settings are merged from several sources, later sources overriding earlier
ones:

    defaults
       |
       +---> FileConfigSource (YAML, JSON, TOML)
       |
       +---> EnvConfigSource (TIMEPHRASE_* variables)
       |
       v
    Settings

Usage:
    >>> from timephrase.config import get_settings, load_settings
    >>>
    >>> settings = load_settings("timephrase.yaml")
    >>> settings.locale
    'de_de'
    >>>
    >>> # TIMEPHRASE_LOCALE=fr in the environment
    >>> get_settings().locale
    'fr'
"""

from __future__ import annotations

import json
import logging
import os
import threading
import tomllib
from abc import ABC, abstractmethod
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping

import yaml

from timephrase.errors import ConfigError

logger = logging.getLogger(__name__)

ENV_PREFIX = "TIMEPHRASE_"
LOG_FORMATS = ("console", "json")


@dataclass(frozen=True)
class Settings:
    """Library settings.

    Attributes:
        locale: Default locale code when none is passed explicitly.
        log_level: Level for the ``timephrase`` logger.
        log_format: "console" or "json".
    """

    locale: str = "en_us"
    log_level: str = "WARNING"
    log_format: str = "console"

    def __post_init__(self) -> None:
        if self.log_format not in LOG_FORMATS:
            raise ConfigError(
                f"Invalid log_format {self.log_format!r}; expected one of {', '.join(LOG_FORMATS)}"
            )
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ConfigError(f"Invalid log_level {self.log_level!r}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Settings":
        """Create settings from a mapping, ignoring unknown keys."""
        return cls().merge(data)

    def merge(self, data: Mapping[str, Any]) -> "Settings":
        """Return a copy with values from ``data`` applied."""
        known = {f.name for f in fields(self)}
        unknown = set(data) - known
        if unknown:
            logger.debug("Ignoring unknown settings: %s", ", ".join(sorted(unknown)))
        updates = {
            key: str(value)
            for key, value in data.items()
            if key in known and value is not None
        }
        return replace(self, **updates)

    def to_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


# =============================================================================
# Configuration Sources
# =============================================================================


class ConfigSource(ABC):
    """Source of configuration values."""

    @abstractmethod
    def load(self) -> dict[str, Any]:
        """Load configuration from source.

        Returns:
            Dictionary of configuration values.
        """
        pass


class EnvConfigSource(ConfigSource):
    """Environment variable configuration source.

    Example:
        TIMEPHRASE_LOCALE=fr
        TIMEPHRASE_LOG_LEVEL=debug

        Will produce:
        {"locale": "fr", "log_level": "debug"}
    """

    def __init__(
        self,
        prefix: str = ENV_PREFIX,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._prefix = prefix
        self._environ = environ

    def load(self) -> dict[str, Any]:
        environ = os.environ if self._environ is None else self._environ
        return {
            key[len(self._prefix) :].lower(): value
            for key, value in environ.items()
            if key.startswith(self._prefix) and value
        }


class FileConfigSource(ConfigSource):
    """File-based configuration source.

    Supports YAML, JSON, and TOML formats, detected from the file extension.
    A ``timephrase`` table or key, if present, is used instead of the top level
    so settings can live in a shared file such as ``pyproject.toml`` under
    ``[tool.timephrase]``.
    """

    def __init__(self, path: str | Path, *, required: bool = False) -> None:
        self._path = Path(path)
        self._required = required

    def load(self) -> dict[str, Any]:
        if not self._path.exists():
            if self._required:
                raise ConfigError(f"Configuration file not found: {self._path}")
            return {}

        content = self._path.read_text(encoding="utf-8")
        suffix = self._path.suffix.lower()

        try:
            if suffix in (".yaml", ".yml"):
                data = yaml.safe_load(content) or {}
            elif suffix == ".json":
                data = json.loads(content)
            elif suffix == ".toml":
                data = tomllib.loads(content)
            else:
                raise ConfigError(f"Unsupported file format: {suffix}")
        except (yaml.YAMLError, json.JSONDecodeError, tomllib.TOMLDecodeError) as e:
            raise ConfigError(f"Failed to parse {self._path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Configuration in {self._path} must be a mapping")

        section = None
        if suffix == ".toml":
            tool = data.get("tool", {})
            if not isinstance(tool, dict):
                raise ConfigError(f"[tool] in {self._path} must be a table")
            section = tool.get("timephrase")
        if section is None:
            section = data.get("timephrase", data)
        if not isinstance(section, dict):
            raise ConfigError(f"timephrase settings in {self._path} must be a mapping")
        return dict(section)


# =============================================================================
# Loading
# =============================================================================


def load_settings(
    path: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """Build settings from defaults, an optional file and the environment.

    Args:
        path: Configuration file. Falls back to ``TIMEPHRASE_CONFIG``.
        environ: Environment mapping (defaults to ``os.environ``).

    Returns:
        Settings instance.

    Raises:
        ConfigError: If the file is unreadable or a value is invalid.
    """
    env = os.environ if environ is None else environ
    if path is None and env.get(f"{ENV_PREFIX}CONFIG"):
        path = env[f"{ENV_PREFIX}CONFIG"]

    sources: list[ConfigSource] = []
    if path is not None:
        sources.append(FileConfigSource(path, required=True))
    sources.append(EnvConfigSource(environ=env))

    settings = Settings()
    for source in sources:
        values = source.load()
        values.pop("config", None)
        settings = settings.merge(values)

    logger.debug("Loaded settings: %s", settings.to_dict())
    return settings


_settings: Settings | None = None
_settings_lock = threading.Lock()


def get_settings() -> Settings:
    """Get process-wide settings, loading them on first use."""
    global _settings
    with _settings_lock:
        if _settings is None:
            _settings = load_settings()
        return _settings


def set_settings(settings: Settings) -> None:
    """Replace process-wide settings."""
    global _settings
    with _settings_lock:
        _settings = settings


def reset_settings() -> None:
    """Forget cached settings so the next call reloads them."""
    global _settings
    with _settings_lock:
        _settings = None
