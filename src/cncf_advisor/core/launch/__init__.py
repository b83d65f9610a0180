"""
Launch service for locating and running the MCP server.

Modules:
    detector: Host platform -> native or JAR artifact
    locator: Artifact path under the install directory
    environment: Child environment with the forced Quarkus settings
    supervisor: Spawning, signal relay and exit-code propagation
    models: Data models (PlatformKey, ArtifactKind, LaunchSpec)
    errors: Launcher exception hierarchy

Example Usage:
    >>> from cncf_advisor.core.launch import ServerLauncher
    >>> launcher = ServerLauncher()
    >>> exit_code = asyncio.run(launcher.start())
"""

from cncf_advisor.core.launch.detector import (
    SUPPORT_MATRIX,
    current_platform,
    detect_artifact,
    is_native_supported,
)
from cncf_advisor.core.launch.environment import build_server_env, forced_env, merge_env
from cncf_advisor.core.launch.errors import (
    ArtifactNotFoundError,
    LauncherError,
    LauncherStateError,
    SpawnError,
)
from cncf_advisor.core.launch.locator import artifact_path, locate_artifact
from cncf_advisor.core.launch.models import (
    ArtifactKind,
    ChildProcess,
    LaunchSpec,
    LauncherState,
    PlatformKey,
)
from cncf_advisor.core.launch.supervisor import ServerLauncher, spawn_inherited

__all__ = [
    # Detector
    "SUPPORT_MATRIX",
    "current_platform",
    "detect_artifact",
    "is_native_supported",
    # Locator
    "artifact_path",
    "locate_artifact",
    # Environment
    "build_server_env",
    "forced_env",
    "merge_env",
    # Supervisor
    "ServerLauncher",
    "spawn_inherited",
    # Errors
    "ArtifactNotFoundError",
    "LauncherError",
    "LauncherStateError",
    "SpawnError",
    # Models
    "ArtifactKind",
    "ChildProcess",
    "LaunchSpec",
    "LauncherState",
    "PlatformKey",
]
