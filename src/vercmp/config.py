"""Configuration loading from vercmp.toml or pyproject.toml."""

import logging
import tomllib
from pathlib import Path
from typing import Any, Final, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .comparator import DEFAULT_MAX_DEPTH
from .exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME: Final = "vercmp.toml"
PYPROJECT_FILENAME: Final = "pyproject.toml"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class Settings(BaseModel):
    """Settings shared by the CLI and library helpers.

    Attributes:
        max_depth: Deepest nesting level the comparator explores.
        strict_parsing: Reject non-numeric major and minor segments instead
            of reading them as 0.
        log_level: Level for the vercmp logger when run from the CLI.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, ge=1)
    strict_parsing: bool = False
    log_level: LogLevel = "WARNING"


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {path}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e


def _extract_section(path: Path, data: dict[str, Any]) -> dict[str, Any] | None:
    if path.name == PYPROJECT_FILENAME:
        section = data.get("tool", {}).get("vercmp")
    else:
        section = data.get("vercmp")

    if section is None:
        return None
    if not isinstance(section, dict):
        raise ConfigError(f"vercmp configuration in {path} must be a table")
    return section


def find_config_file(search_dir: Path | None = None) -> Path | None:
    """Find a configuration file in a directory.

    ``vercmp.toml`` takes precedence over ``pyproject.toml``. A
    ``pyproject.toml`` only counts if it has a ``[tool.vercmp]`` table.

    Args:
        search_dir: Directory to search. Defaults to the current directory.

    Returns:
        Path to the config file, or None if there is none.
    """
    directory = search_dir or Path.cwd()

    candidate = directory / CONFIG_FILENAME
    if candidate.is_file():
        return candidate

    candidate = directory / PYPROJECT_FILENAME
    if candidate.is_file():
        data = _read_toml(candidate)
        if _extract_section(candidate, data) is not None:
            return candidate

    return None


def load_settings(
    config_path: Path | None = None, search_dir: Path | None = None
) -> Settings:
    """Load settings.

    Args:
        config_path: Explicit path to a vercmp.toml or pyproject.toml.
        search_dir: Directory searched when no path is given.

    Returns:
        Loaded settings, or defaults when no configuration exists.

    Raises:
        ConfigError: If the file is missing, unreadable or invalid.
    """
    path = config_path or find_config_file(search_dir)
    if path is None:
        logger.debug("No configuration found, using defaults")
        return Settings()

    section = _extract_section(path, _read_toml(path))
    if section is None:
        if config_path is not None and path.name != PYPROJECT_FILENAME:
            raise ConfigError(f"No [vercmp] table in {path}")
        return Settings()

    try:
        settings = Settings.model_validate(section)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e

    logger.debug("Loaded settings from %s: %s", path, settings)
    return settings
