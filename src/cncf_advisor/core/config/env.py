"""Environment loading helpers.

Users can keep launcher settings (``CNCF_ADVISOR_LOG_LEVEL``,
``CNCF_ADVISOR_DEBUG``, ``JAVA_HOME``) in a user env file instead of the
MCP host's config:

    $XDG_CONFIG_HOME/cncf-tech-advisor/.env   (default ~/.config/...)

Values from the file never override variables already present in the
process environment. There is no project-level .env: the launcher runs from
whatever directory the MCP host picks, and everything loaded here is passed
on to the server process.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable

from dotenv import dotenv_values

logger = logging.getLogger(__name__)


def get_xdg_config_home() -> Path:
    if xdg_home := os.environ.get("XDG_CONFIG_HOME"):
        return Path(xdg_home)
    return Path.home() / ".config"


def get_user_env_path() -> Path:
    """Return the path of the user env file."""
    return get_xdg_config_home() / "cncf-tech-advisor" / ".env"


def _read_env(path: Path) -> dict[str, str]:
    if not path.exists():
        return {}
    values = dotenv_values(path)
    out: dict[str, str] = {}
    for k, v in values.items():
        if k is None or v is None:
            continue
        out[str(k)] = str(v)
    return out


def load_user_env(paths: Iterable[Path] | None = None) -> list[str]:
    """Load variables from the user env file(s) into os.environ.

    Args:
        paths: explicit env file paths (defaults to the user env file)

    Returns:
        Names of the variables that were set.
    """
    if paths is None:
        paths = [get_user_env_path()]

    loaded: list[str] = []
    for p in paths:
        for k, v in _read_env(Path(p)).items():
            if k not in os.environ:
                os.environ[k] = v
                loaded.append(k)
    if loaded:
        logger.debug("Loaded %d variable(s) from user env: %s", len(loaded), ", ".join(loaded))
    return loaded


__all__ = ["get_user_env_path", "get_xdg_config_home", "load_user_env"]
