"""Library settings loaded from compote.yaml and the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

SETTINGS_FILENAME = "compote.yaml"

MAX_WORKERS_VAR = "COMPOTE_MAX_WORKERS"
LOG_LEVEL_VAR = "COMPOTE_LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    """Tunables for compote aggregators.

    Attributes:
        max_workers: Thread pool size for querying merged sources; None or 1
            queries them one after another.
        log_level: Level name applied to the ``compote`` logger.
    """

    max_workers: Optional[int] = None
    log_level: str = "WARNING"


class SettingsLoader:
    """Handles loading and parsing of compote.yaml settings files."""

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """Initialize settings loader.

        Args:
            config_path: Path to compote.yaml file. If None, looks in current
                directory and parent directories.
        """
        self.config_path = self._find_config_file(config_path)
        self._config: Optional[Dict[str, Any]] = None

    def _find_config_file(
        self, config_path: Optional[Union[str, Path]] = None
    ) -> Optional[Path]:
        if config_path is not None:
            path = Path(config_path)
            if path.exists():
                return path
            return None

        current = Path.cwd()
        while True:
            candidate = current / SETTINGS_FILENAME
            if candidate.exists():
                return candidate
            if current == current.parent:
                return None
            current = current.parent

    def load(self) -> Dict[str, Any]:
        """Load the settings file.

        Returns:
            Parsed settings dictionary, or empty dict if no settings file.

        Raises:
            ValueError: If the settings file is invalid YAML or not a mapping.
        """
        if self.config_path is None:
            return {}

        if self._config is not None:
            return self._config

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {SETTINGS_FILENAME} at {self.config_path}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"{SETTINGS_FILENAME} at {self.config_path} must contain a mapping")
        self._config = data
        return self._config

    def get_section(self, name: str) -> Dict[str, Any]:
        """Get a top-level section of the settings file.

        Args:
            name: Section name, e.g. 'merge' or 'logging'.

        Returns:
            Section dictionary, empty if absent.
        """
        section = self.load().get(name) or {}
        if not isinstance(section, dict):
            raise ValueError(f"Section {name!r} in {SETTINGS_FILENAME} must be a mapping")
        return section


def _parse_max_workers(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        workers = int(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"max_workers must be an integer, got {value!r}") from e
    if workers < 1:
        raise ValueError(f"max_workers must be at least 1, got {workers}")
    return workers


def _parse_log_level(value: Any) -> str:
    level = str(value).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Unknown log level: {value!r}")
    return level


def load_settings(
    config_path: Optional[Union[str, Path]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Settings:
    """Build Settings from compote.yaml, overridden by environment variables.

    Args:
        config_path: Explicit settings file, or None to search for one.
        environ: Environment variables to read, defaults to ``os.environ``.

    Returns:
        Settings instance.
    """
    env = os.environ if environ is None else environ
    loader = SettingsLoader(config_path)
    merge_section = loader.get_section("merge")
    logging_section = loader.get_section("logging")

    # empty variables fall back to the file
    max_workers = env.get(MAX_WORKERS_VAR) or merge_section.get("max_workers")
    log_level = env.get(LOG_LEVEL_VAR) or logging_section.get("level") or Settings.log_level

    return Settings(
        max_workers=_parse_max_workers(max_workers),
        log_level=_parse_log_level(log_level),
    )


def configure_logging(level: Union[str, int]) -> None:
    """Set the level of the ``compote`` logger.

    Args:
        level: Level name (e.g. 'DEBUG') or number.
    """
    logging.getLogger("compote").setLevel(level.upper() if isinstance(level, str) else level)
