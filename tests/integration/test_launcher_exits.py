"""
Integration tests for launcher exit scenarios.

These tests run real child processes (small shell scripts standing in for
the native server) and verify:
- Exit codes pass through unchanged
- The forced environment reaches the child
- A stop request reaches the child as SIGTERM
- A missing or non-executable artifact fails without hanging
- start() works from a thread that cannot install signal handlers
"""

import asyncio
import stat
import sys
import threading
from pathlib import Path

import pytest

from cncf_advisor.core.config.models import LauncherConfig
from cncf_advisor.core.launch import (
    ArtifactNotFoundError,
    LauncherState,
    PlatformKey,
    ServerLauncher,
    SpawnError,
)

pytestmark = pytest.mark.skipif(sys.platform == "win32", reason="uses POSIX shell scripts")

LINUX_X64 = PlatformKey(os="linux", arch="x64")


def write_server(config: LauncherConfig, body: str, executable: bool = True) -> Path:
    """Install a shell script as the native server artifact."""
    path = Path(config.install_dir) / config.native_name
    path.write_text(f"#!/bin/sh\n{body}\n")
    if executable:
        path.chmod(path.stat().st_mode | stat.S_IXUSR)
    return path


def make_launcher(config: LauncherConfig) -> ServerLauncher:
    return ServerLauncher(config, platform_key=LINUX_X64)


@pytest.mark.asyncio
async def test_exit_code_passes_through(config: LauncherConfig) -> None:
    write_server(config, "exit 3")

    assert await make_launcher(config).start() == 3


@pytest.mark.asyncio
async def test_clean_exit(config: LauncherConfig, capfd: pytest.CaptureFixture[str]) -> None:
    write_server(config, "exit 0")
    launcher = make_launcher(config)

    assert await launcher.start() == 0
    assert launcher.state is LauncherState.TERMINATED
    assert capfd.readouterr().err == ""


@pytest.mark.asyncio
async def test_child_sees_forced_environment(
    config: LauncherConfig, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    out = tmp_path / "env.txt"
    monkeypatch.setenv("CNCF_ADVISOR_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("INHERITED_MARKER", "kept")
    write_server(
        config,
        f'echo "$QUARKUS_MCP_SERVER_STDIO_ENABLED $QUARKUS_MCP_SERVER_HTTP_ROOT_PATH '
        f'$QUARKUS_LOG_LEVEL $QUARKUS_BANNER_ENABLED $INHERITED_MARKER" > "{out}"',
    )

    assert await make_launcher(config).start() == 0
    assert out.read_text().split() == ["true", "/mcp", "DEBUG", "false", "kept"]


@pytest.mark.asyncio
async def test_stop_delivers_sigterm(config: LauncherConfig, tmp_path: Path) -> None:
    ready = tmp_path / "ready"
    write_server(
        config,
        f"trap 'exit 7' TERM\ntouch \"{ready}\"\nwhile true; do sleep 0.05; done",
    )
    launcher = make_launcher(config)
    task = asyncio.create_task(launcher.start())

    for _ in range(200):
        if ready.exists():
            break
        await asyncio.sleep(0.02)
    assert ready.exists()

    launcher.stop()

    assert await asyncio.wait_for(task, timeout=10) == 7


@pytest.mark.asyncio
async def test_missing_artifact(config: LauncherConfig) -> None:
    with pytest.raises(ArtifactNotFoundError):
        await make_launcher(config).start()


@pytest.mark.asyncio
async def test_non_executable_artifact(config: LauncherConfig) -> None:
    write_server(config, "exit 0", executable=False)

    with pytest.raises(SpawnError, match="Permission denied"):
        await make_launcher(config).start()


@pytest.mark.asyncio
async def test_stop_killing_child_is_clean_exit(
    config: LauncherConfig, tmp_path: Path, capfd: pytest.CaptureFixture[str]
) -> None:
    ready = tmp_path / "ready"
    write_server(config, f'touch "{ready}"\nwhile true; do sleep 0.05; done')
    launcher = make_launcher(config)
    task = asyncio.create_task(launcher.start())

    for _ in range(200):
        if ready.exists():
            break
        await asyncio.sleep(0.02)
    assert ready.exists()

    launcher.stop()

    assert await asyncio.wait_for(task, timeout=10) == 0
    assert "Server exited with code" not in capfd.readouterr().err


def test_start_in_worker_thread(config: LauncherConfig) -> None:
    write_server(config, "sleep 0.2\nexit 4")
    launcher = make_launcher(config)
    result: dict[str, object] = {}

    def run() -> None:
        try:
            result["code"] = asyncio.run(launcher.start())
        except BaseException as e:
            result["error"] = e

    worker = threading.Thread(target=run)
    worker.start()
    worker.join(timeout=10)

    assert result == {"code": 4}
    assert launcher.state is LauncherState.TERMINATED
    assert launcher.is_running is False
