"""Configuration with XDG paths and precedence resolution.

oasgen has very little to configure: the default backend and two output
preferences. They are read from JSON files and the environment:

* **Directory layout** -- XDG Base Directory compliant on Linux/BSD,
  ``~/.oasgen/`` on macOS and Windows. See :func:`get_config_dir` and
  :func:`get_data_dir` (crash logs).
* **User config** -- ``<config_dir>/config.json``, deserialised into
  :class:`OasgenConfig`.
* **Project config** -- ``./oasgen.json`` in the working directory, same
  shape, overriding the user config key by key.
* **Precedence resolution** -- :func:`resolve_config` merges the
  environment, project config and user config into the effective
  configuration. Command-line options override it per command.
"""

from __future__ import annotations

import json
import logging
import os
import platform
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError

from oasgen.code.registry import DEFAULT_BACKEND
from oasgen.exceptions import ConfigError

logger = logging.getLogger(__name__)

_APP_NAME = "oasgen"
_CONFIG_FILENAME = "config.json"
_PROJECT_CONFIG_FILENAME = "oasgen.json"

BACKEND_ENV_VAR = "OASGEN_BACKEND"


class OutputConfig(BaseModel):
    """Default output preferences stored in :class:`OasgenConfig`."""

    no_color: bool = Field(default=False, description="Disable colour output")
    quiet: bool = Field(default=False, description="Suppress informational messages")


class OasgenConfig(BaseModel):
    """Effective configuration.

    Loaded by :func:`load_global_config` and layered by
    :func:`resolve_config`.
    """

    backend: str = Field(default=DEFAULT_BACKEND, description="Default code backend")
    output: OutputConfig = Field(default_factory=OutputConfig)


# --- XDG path resolution ---


def _is_xdg_platform() -> bool:
    """Return True if the platform supports XDG Base Directory spec (Linux/FreeBSD)."""
    return platform.system() == "Linux" or platform.system().endswith("BSD")


def _fallback_base_dir() -> Path:
    """Fallback base directory for non-XDG platforms (macOS, Windows)."""
    return Path.home() / f".{_APP_NAME}"


def _xdg_base(env_var: str, default_segments: tuple[str, ...]) -> Path:
    """Resolve an XDG base directory from an env var with fallback segments under $HOME."""
    env_value = os.environ.get(env_var, "")
    if env_value:
        return Path(env_value)
    base = Path.home()
    for seg in default_segments:
        base = base / seg
    return base


def get_config_dir() -> Path:
    """Return the configuration directory. It is not created.

    On Linux/BSD: ``$XDG_CONFIG_HOME/oasgen/`` (default ``~/.config/oasgen/``).
    On macOS/Windows: ``~/.oasgen/``.
    """
    if _is_xdg_platform():
        return _xdg_base("XDG_CONFIG_HOME", (".config",)) / _APP_NAME
    return _fallback_base_dir()


def get_data_dir() -> Path:
    """Return the data directory (crash logs), creating it if necessary.

    On Linux/BSD: ``$XDG_DATA_HOME/oasgen/`` (default ``~/.local/share/oasgen/``).
    On macOS/Windows: ``~/.oasgen/data/``.
    """
    if _is_xdg_platform():
        path = _xdg_base("XDG_DATA_HOME", (".local", "share")) / _APP_NAME
    else:
        path = _fallback_base_dir() / "data"
    path.mkdir(parents=True, exist_ok=True)
    return path


# --- Config files ---


def _read_json_object(path: Path, what: str) -> Optional[dict[str, Any]]:
    """Read a JSON object from *path*, or return ``None`` if it does not exist."""
    if not path.is_file():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Invalid {what} config at {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid {what} config at {path}: expected a JSON object")
    logger.debug("Loaded %s config from %s", what, path)
    return data


def load_global_config() -> OasgenConfig:
    """Load the user configuration from the config directory.

    Returns:
        The deserialised :class:`OasgenConfig`. If the file does not exist,
        a default instance is returned.

    Raises:
        ConfigError: If the file exists but contains invalid JSON or fails
            Pydantic validation.
    """
    path = get_config_dir() / _CONFIG_FILENAME
    data = _read_json_object(path, "global")
    if data is None:
        return OasgenConfig()
    try:
        return OasgenConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid global config at {path}: {exc}") from exc


def load_project_config() -> Optional[dict[str, Any]]:
    """Load project-local configuration from ``./oasgen.json``.

    Returns:
        The parsed JSON as a dict, or ``None`` if the file does not exist.

    Raises:
        ConfigError: If the file exists but is not a JSON object.
    """
    return _read_json_object(Path.cwd() / _PROJECT_CONFIG_FILENAME, "project")


# --- Precedence resolution ---


def resolve_config() -> OasgenConfig:
    """Resolve config with full precedence chain.

    Precedence (high to low):
        1. Environment variables (``OASGEN_BACKEND``)
        2. Project config (``./oasgen.json``)
        3. User config (``~/.config/oasgen/config.json``)
        4. Defaults

    Command-line options sit above all of these; the commands that take
    them (``generate --backend``) apply them to the resolved config.

    Raises:
        ConfigError: If a config file is invalid.
    """
    # 4 + 3. Defaults, then the user config.
    merged = load_global_config().model_dump()

    # 2. Project config, merged key by key.
    project = load_project_config()
    if project is not None:
        merged = _merge(merged, project)

    # 1. Environment variable
    env_backend = os.environ.get(BACKEND_ENV_VAR)
    if env_backend:
        merged["backend"] = env_backend

    try:
        return OasgenConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    result = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = _merge(result[key], value)
        else:
            result[key] = value
    return result
