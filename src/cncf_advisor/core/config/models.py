"""
Configuration data models for the launcher.

The launcher has no config file of its own: every value here is a constant
of the release, except ``java_home`` which comes from the environment.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_VERSION = "1.0.0"
DEFAULT_REPOSITORY = "jeanlopezxyz/cncf-tech-advisor-mcp"
DEFAULT_DOCKER_IMAGE = "ghcr.io/jeanlopezxyz/cncf-tech-advisor-mcp"
INSTALL_DIR_NAME = ".cncf-tech-advisor-mcp"


def default_install_dir() -> Path:
    """Return the single directory the launcher looks in for the artifact."""
    return Path.home() / INSTALL_DIR_NAME


class LauncherConfig(BaseModel):
    """
    Release constants and host settings used to locate and run the server.

    Example:
        >>> config = LauncherConfig.from_env({"JAVA_HOME": "/opt/jdk-21"})
        >>> config.jar_name
        'cncf-tech-advisor-mcp-1.0.0-runner.jar'
    """

    model_config = ConfigDict(frozen=True)

    version: str = Field(default=DEFAULT_VERSION, description="Server release version")
    repository: str = Field(
        default=DEFAULT_REPOSITORY,
        description="GitHub owner/name of the server repository",
    )
    docker_image: str = Field(
        default=DEFAULT_DOCKER_IMAGE,
        description="Container image published for the server",
    )
    jar_name: str = Field(
        default=f"cncf-tech-advisor-mcp-{DEFAULT_VERSION}-runner.jar",
        description="Filename of the JAR artifact",
    )
    native_name: str = Field(
        default=f"cncf-tech-advisor-mcp-{DEFAULT_VERSION}-runner",
        description="Filename of the native executable artifact",
    )
    install_dir: Path = Field(
        default_factory=default_install_dir,
        description="Directory holding the artifact",
    )
    java_home: str | None = Field(
        default=None,
        description="JAVA_HOME used to find the java binary for the JAR",
    )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> LauncherConfig:
        """Build the config, reading host settings from ``environ`` (defaults to os.environ)."""
        if environ is None:
            environ = os.environ
        return cls(java_home=environ.get("JAVA_HOME") or None)

    @property
    def repository_url(self) -> str:
        return f"https://github.com/{self.repository}"

    @property
    def releases_url(self) -> str:
        return f"{self.repository_url}/releases"

    @property
    def documentation_url(self) -> str:
        return f"{self.repository_url}#readme"


__all__ = [
    "DEFAULT_DOCKER_IMAGE",
    "DEFAULT_REPOSITORY",
    "DEFAULT_VERSION",
    "INSTALL_DIR_NAME",
    "LauncherConfig",
    "default_install_dir",
]
