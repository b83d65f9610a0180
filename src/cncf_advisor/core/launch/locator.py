"""
Artifact location for the launch service.

The server is expected in exactly one place: the install directory from
LauncherConfig, under the filename of the selected artifact kind. The same
path is used for the existence check and for spawning.
"""

from __future__ import annotations

import logging
from pathlib import Path

from cncf_advisor.core.config.models import LauncherConfig
from cncf_advisor.core.launch.errors import ArtifactNotFoundError
from cncf_advisor.core.launch.models import ArtifactKind

logger = logging.getLogger(__name__)


def artifact_filename(kind: ArtifactKind, config: LauncherConfig) -> str:
    if kind is ArtifactKind.NATIVE:
        return config.native_name
    return config.jar_name


def artifact_path(kind: ArtifactKind, config: LauncherConfig) -> Path:
    """Return where the artifact of ``kind`` is installed."""
    return Path(config.install_dir) / artifact_filename(kind, config)


def locate_artifact(kind: ArtifactKind, config: LauncherConfig) -> Path:
    """
    Find the installed server artifact.

    Args:
        kind: Artifact kind selected for this platform
        config: Launcher configuration

    Returns:
        Path to the artifact

    Raises:
        ArtifactNotFoundError: If nothing exists at the install location
    """
    path = artifact_path(kind, config)
    if not path.exists():
        raise ArtifactNotFoundError(path, kind)
    logger.debug("Found %s artifact at %s", kind.value, path)
    return path


__all__ = ["artifact_filename", "artifact_path", "locate_artifact"]
