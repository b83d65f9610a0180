"""
Data models for the launch service.

Defines the platform key, the artifact selection, the frozen launch spec and
the interface expected of a spawned server process.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Protocol


class ArtifactKind(str, Enum):
    """Which form of the server artifact to run."""

    NATIVE = "native"  # Platform-compiled executable, no runtime needed
    JAR = "jar"  # Runnable JAR, needs a Java runtime


class LauncherState(str, Enum):
    """Lifecycle of a ServerLauncher."""

    NOT_STARTED = "not_started"
    RUNNING = "running"
    TERMINATED = "terminated"


@dataclass(frozen=True)
class PlatformKey:
    """
    Normalized host platform.

    Attributes:
        os: Operating system identifier ("linux", "darwin", "win32", ...)
        arch: CPU architecture identifier ("x64", "arm64", ...)
    """

    os: str
    arch: str

    def __str__(self) -> str:
        return f"{self.os} {self.arch}"


@dataclass(frozen=True)
class LaunchSpec:
    """
    Everything needed to spawn the server process.

    Built once per start and never modified afterwards; ``env`` is exposed
    as a read-only mapping.

    Attributes:
        command: Program to execute (artifact path or java binary)
        args: Arguments passed after the command
        env: Complete environment for the child
        inherit_stdio: Whether stdin/stdout/stderr are shared with the parent
    """

    command: str
    args: tuple[str, ...] = ()
    env: Mapping[str, str] = field(default_factory=dict)
    inherit_stdio: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))
        object.__setattr__(self, "env", MappingProxyType(dict(self.env)))

    @property
    def argv(self) -> list[str]:
        """Full argument vector, command first."""
        return [self.command, *self.args]


class ChildProcess(Protocol):
    """The subset of asyncio.subprocess.Process the supervisor relies on."""

    pid: int

    async def wait(self) -> int: ...

    def terminate(self) -> None: ...


__all__ = [
    "ArtifactKind",
    "ChildProcess",
    "LaunchSpec",
    "LauncherState",
    "PlatformKey",
]
