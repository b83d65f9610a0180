"""
Server process supervisor.

Runs the server artifact as a child process sharing the launcher's stdin,
stdout and stderr, and owns it until it exits:

- SIGINT/SIGTERM received by the launcher are relayed to the child as a
  terminate request; the launcher itself keeps waiting for the child.
- The child's exit code becomes the launcher's result, unchanged. A child
  that dies of the relayed SIGTERM counts as a clean shutdown.

There is no shutdown timeout and no kill escalation: a child that ignores
the terminate request keeps the launcher waiting.

Usage:
    >>> launcher = ServerLauncher()
    >>> exit_code = asyncio.run(launcher.start())
"""

from __future__ import annotations

import asyncio
import logging
import os
import signal
import sys
from collections.abc import Awaitable, Callable, Mapping
from pathlib import Path
from typing import Any

from cncf_advisor.core.config.models import LauncherConfig
from cncf_advisor.core.launch.detector import current_platform, detect_artifact
from cncf_advisor.core.launch.environment import build_server_env
from cncf_advisor.core.launch.errors import LauncherStateError, SpawnError
from cncf_advisor.core.launch.locator import locate_artifact
from cncf_advisor.core.launch.models import (
    ArtifactKind,
    ChildProcess,
    LaunchSpec,
    LauncherState,
    PlatformKey,
)

logger = logging.getLogger(__name__)

SpawnFn = Callable[[LaunchSpec], Awaitable[ChildProcess]]

RELAYED_SIGNALS: tuple[signal.Signals, ...] = (signal.SIGINT, signal.SIGTERM)

SHUTDOWN_NOTICE = "\nShutting down CNCF Tech Advisor MCP Server...\n"


async def spawn_inherited(spec: LaunchSpec) -> asyncio.subprocess.Process:
    """
    Start ``spec`` as an asyncio subprocess.

    With ``inherit_stdio`` the child gets the parent's file descriptors
    directly; nothing is piped or buffered in between.
    """
    stream = None if spec.inherit_stdio else asyncio.subprocess.DEVNULL
    return await asyncio.create_subprocess_exec(
        spec.command,
        *spec.args,
        env=dict(spec.env),
        stdin=stream,
        stdout=stream,
        stderr=stream,
    )


def resolve_java_command(java_home: str | None) -> str:
    """
    Return the java binary used to run the JAR.

    Prefers ``$JAVA_HOME/bin/java`` when it exists, otherwise plain ``java``
    resolved from PATH at spawn time.
    """
    if java_home:
        binary = "java.exe" if os.name == "nt" else "java"
        candidate = Path(java_home) / "bin" / binary
        if candidate.exists():
            return str(candidate)
        logger.debug("JAVA_HOME set but %s does not exist, using PATH", candidate)
    return "java"


def normalize_exit_code(returncode: int) -> int:
    """
    Convert a subprocess return code to a process exit code.

    A negative code means the child was killed by that signal and maps to
    the shell convention ``128 + signum``.
    """
    if returncode < 0:
        return 128 + (-returncode)
    return returncode


class ServerLauncher:
    """
    Owns the lifecycle of a single server process.

    The platform and artifact kind are fixed at construction; the install
    location, environment and launch spec are computed by ``start()``.
    A launcher runs at most one child, once.

    Example:
        >>> launcher = ServerLauncher(LauncherConfig.from_env())
        >>> code = asyncio.run(launcher.start())  # blocks until the server exits
    """

    def __init__(
        self,
        config: LauncherConfig | None = None,
        *,
        platform_key: PlatformKey | None = None,
        spawn: SpawnFn = spawn_inherited,
        handle_signals: bool = True,
    ) -> None:
        """
        Initialize the launcher.

        Args:
            config: Launcher configuration (read from the environment if None)
            platform_key: Platform override (detected from the host if None)
            spawn: Coroutine function that starts a LaunchSpec
            handle_signals: Whether to relay SIGINT/SIGTERM while running
        """
        self._config = config or LauncherConfig.from_env()
        self._platform = platform_key or current_platform()
        self._artifact = detect_artifact(self._platform)
        self._spawn = spawn
        self._handle_signals = handle_signals

        self._state = LauncherState.NOT_STARTED
        self._process: ChildProcess | None = None
        self._stop_requested = False
        self._loop_signals: list[signal.Signals] = []
        self._previous_handlers: dict[signal.Signals, Any] = {}

    @property
    def config(self) -> LauncherConfig:
        return self._config

    @property
    def platform(self) -> PlatformKey:
        return self._platform

    @property
    def artifact(self) -> ArtifactKind:
        return self._artifact

    @property
    def is_native(self) -> bool:
        return self._artifact is ArtifactKind.NATIVE

    @property
    def state(self) -> LauncherState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._process is not None

    def resolve(self) -> Path:
        """
        Locate the artifact for this platform.

        Raises:
            ArtifactNotFoundError: If it is not installed
        """
        return locate_artifact(self._artifact, self._config)

    def build_launch_spec(
        self, artifact_path: Path, base_env: Mapping[str, str] | None = None
    ) -> LaunchSpec:
        """
        Build the command line and environment for the server.

        Args:
            artifact_path: Resolved artifact location
            base_env: Inherited environment (defaults to os.environ)
        """
        env = build_server_env(base_env)
        if self._artifact is ArtifactKind.NATIVE:
            return LaunchSpec(command=str(artifact_path), env=env)
        java = resolve_java_command(env.get("JAVA_HOME") or self._config.java_home)
        return LaunchSpec(command=java, args=("-jar", str(artifact_path)), env=env)

    async def start(self) -> int:
        """
        Resolve, spawn and supervise the server until it exits.

        Returns:
            The server's exit code (128 + signum if it was killed by a signal,
            0 if it ended on the terminate request sent by ``stop()``)

        Raises:
            ArtifactNotFoundError: If the artifact is not installed
            SpawnError: If the process could not be started
            LauncherStateError: If this launcher was already started
        """
        if self._state is not LauncherState.NOT_STARTED:
            raise LauncherStateError(f"Launcher cannot start from state '{self._state.value}'")

        try:
            artifact_path = self.resolve()
            spec = self.build_launch_spec(artifact_path)
            logger.debug("Spawning server: %s", " ".join(spec.argv))
            try:
                process = await self._spawn(spec)
            except (OSError, ValueError) as e:
                raise SpawnError(spec.command, e) from e
        except BaseException:
            self._state = LauncherState.TERMINATED
            raise

        self._process = process
        self._state = LauncherState.RUNNING
        logger.debug("Server running with pid %s", process.pid)

        try:
            if self._handle_signals:
                self._register_signals()
            returncode = await process.wait()
        finally:
            self._unregister_signals()
            self._process = None
            self._state = LauncherState.TERMINATED

        logger.debug("Server exited with return code %s", returncode)
        if self._stop_requested and returncode == -signal.SIGTERM:
            # Shut down by our own terminate request
            return 0

        exit_code = normalize_exit_code(returncode)
        if exit_code != 0:
            self._write_to_stderr(f"Server exited with code: {exit_code}\n")
        return exit_code

    def stop(self) -> None:
        """
        Ask the running server to terminate.

        Idempotent: does nothing without a running child or once a stop has
        been requested. Does not wait for the child; ``start()`` returns
        when it exits.
        """
        process = self._process
        if process is None or self._stop_requested:
            return
        self._stop_requested = True

        self._write_to_stderr(SHUTDOWN_NOTICE)
        logger.debug("Sending terminate request to pid %s", process.pid)
        try:
            process.terminate()
        except ProcessLookupError:
            logger.debug("Server process already gone")

    def _register_signals(self) -> None:
        loop = asyncio.get_running_loop()
        for signum in RELAYED_SIGNALS:
            try:
                loop.add_signal_handler(signum, self.stop)
                self._loop_signals.append(signum)
            except (NotImplementedError, RuntimeError):
                # No loop signal support (Windows); hand off to the loop thread.
                try:
                    self._previous_handlers[signum] = signal.signal(
                        signum, lambda _signum, _frame: loop.call_soon_threadsafe(self.stop)
                    )
                except ValueError:
                    # Not the main thread: signals stay with whoever owns it
                    logger.debug("Signal relay for %s unavailable in this thread", signum.name)

    def _unregister_signals(self) -> None:
        if self._loop_signals:
            loop = asyncio.get_running_loop()
            for signum in self._loop_signals:
                loop.remove_signal_handler(signum)
            self._loop_signals = []

        for signum, previous in self._previous_handlers.items():
            signal.signal(signum, previous)
        self._previous_handlers = {}

    @staticmethod
    def _write_to_stderr(message: str) -> None:
        """Write a diagnostic line to stderr; stdout belongs to the server."""
        sys.stderr.write(message)
        sys.stderr.flush()


__all__ = [
    "RELAYED_SIGNALS",
    "SHUTDOWN_NOTICE",
    "ServerLauncher",
    "SpawnFn",
    "normalize_exit_code",
    "resolve_java_command",
    "spawn_inherited",
]
