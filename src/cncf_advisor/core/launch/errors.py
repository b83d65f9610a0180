"""Exceptions raised by the launch service."""

from __future__ import annotations

from pathlib import Path

from cncf_advisor.core.launch.models import ArtifactKind


class LauncherError(Exception):
    """Base exception for launcher errors."""


class ArtifactNotFoundError(LauncherError):
    """Server artifact missing from the install directory."""

    def __init__(self, path: Path, kind: ArtifactKind) -> None:
        self.path = path
        self.kind = kind
        super().__init__(f"Server {kind.value} artifact not found at {path}")


class SpawnError(LauncherError):
    """The server process could not be started."""

    def __init__(self, command: str, cause: BaseException) -> None:
        self.command = command
        self.cause = cause
        super().__init__(str(cause) or cause.__class__.__name__)


class LauncherStateError(LauncherError):
    """Operation not valid in the launcher's current state."""


__all__ = [
    "ArtifactNotFoundError",
    "LauncherError",
    "LauncherStateError",
    "SpawnError",
]
