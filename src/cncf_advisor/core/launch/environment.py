"""
Environment construction for the server process.

Precedence, lowest to highest:
    inherited environment < forced Quarkus settings

The forced settings enable the stdio transport, pin the HTTP root path,
disable the startup banner and set the log level. Users pick the log level
with CNCF_ADVISOR_LOG_LEVEL.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

LOG_LEVEL_OVERRIDE = "CNCF_ADVISOR_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"

STDIO_ENABLED_KEY = "QUARKUS_MCP_SERVER_STDIO_ENABLED"
HTTP_ROOT_PATH_KEY = "QUARKUS_MCP_SERVER_HTTP_ROOT_PATH"
LOG_LEVEL_KEY = "QUARKUS_LOG_LEVEL"
BANNER_ENABLED_KEY = "QUARKUS_BANNER_ENABLED"


def merge_env(*layers: Mapping[str, str]) -> dict[str, str]:
    """
    Overlay environment mappings in order; later layers win.

    None of the inputs is modified.

    Examples:
        >>> merge_env({"A": "1", "B": "1"}, {"B": "2"})
        {'A': '1', 'B': '2'}
    """
    merged: dict[str, str] = {}
    for layer in layers:
        merged.update(layer)
    return merged


def forced_env(log_level: str) -> dict[str, str]:
    """Return the settings that always override the inherited environment."""
    return {
        STDIO_ENABLED_KEY: "true",
        HTTP_ROOT_PATH_KEY: "/mcp",
        LOG_LEVEL_KEY: log_level,
        BANNER_ENABLED_KEY: "false",
    }


def build_server_env(base_env: Mapping[str, str] | None = None) -> dict[str, str]:
    """
    Build the complete environment for the server process.

    Args:
        base_env: Inherited environment (defaults to os.environ)

    Returns:
        A new dict: ``base_env`` with the forced settings applied. Values are
        passed through unvalidated.

    Examples:
        >>> env = build_server_env({"PATH": "/usr/bin", "CNCF_ADVISOR_LOG_LEVEL": "DEBUG"})
        >>> env["QUARKUS_LOG_LEVEL"], env["PATH"]
        ('DEBUG', '/usr/bin')
    """
    if base_env is None:
        base_env = os.environ
    log_level = base_env.get(LOG_LEVEL_OVERRIDE) or DEFAULT_LOG_LEVEL
    return merge_env(base_env, forced_env(log_level))


__all__ = [
    "BANNER_ENABLED_KEY",
    "DEFAULT_LOG_LEVEL",
    "HTTP_ROOT_PATH_KEY",
    "LOG_LEVEL_KEY",
    "LOG_LEVEL_OVERRIDE",
    "STDIO_ENABLED_KEY",
    "build_server_env",
    "forced_env",
    "merge_env",
]
