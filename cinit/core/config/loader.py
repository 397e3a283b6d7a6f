"""
User defaults loader — reads an optional config.yml of preferred defaults.

The file only replaces the built-in defaults of the precedence chain.
Values in it are never treated as explicit input, so the wizard still
asks about every field (with the file's value pre-selected).

Search order:
    --config PATH  >  CINIT_CONFIG env var  >  $XDG_CONFIG_HOME/c-init/config.yml
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from cinit.core.models.options import ColorMode, Compiler, Strictness

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = "c-init"
CONFIG_FILE_NAME = "config.yml"
CONFIG_ENV_VAR = "CINIT_CONFIG"


class ConfigError(Exception):
    """Raised when the user defaults file is invalid or unreadable."""


class UserDefaults(BaseModel):
    """Preferred defaults; anything left unset falls back to the built-ins."""

    model_config = ConfigDict(extra="forbid")

    cc: Compiler = Compiler.CLANG
    strictness: Strictness = Strictness.STRICT
    linter_strictness: Strictness | None = None
    color: ColorMode = ColorMode.AUTO
    no_git: bool = False
    no_commit: bool = False
    no_hello: bool = False
    no_tests: bool = False


def default_config_path() -> Path:
    """Location of the per-user config file (may not exist)."""
    base = os.environ.get("XDG_CONFIG_HOME")
    root = Path(base) if base else Path.home() / ".config"
    return root / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def find_config_file(explicit: Path | None = None) -> Path | None:
    """Locate the defaults file to load.

    An explicit path (CLI flag or env var) is returned even if missing, so
    that ``load_defaults`` can report it. The implicit location is only
    returned when the file exists.
    """
    if explicit is not None:
        return explicit

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)

    candidate = default_config_path()
    return candidate if candidate.is_file() else None


def load_defaults(path: Path | None = None) -> UserDefaults:
    """Load and validate the user defaults file.

    Args:
        path: Explicit path. If None, the default search applies.

    Returns:
        Validated UserDefaults (built-in values when no file is found).

    Raises:
        ConfigError: If the file is missing (when explicit) or invalid.
    """
    path = find_config_file(path)
    if path is None:
        return UserDefaults()

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading user defaults from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return UserDefaults()

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    # Accept the CLI spellings too (linter-strictness, no-git, ...)
    normalized = {str(key).replace("-", "_"): value for key, value in data.items()}

    try:
        defaults = UserDefaults.model_validate(normalized)
    except ValidationError as e:
        raise ConfigError(f"Invalid defaults in {path}: {e}") from e

    logger.info("Loaded user defaults from %s", path)
    return defaults
