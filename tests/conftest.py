"""
Pytest configuration and shared fixtures.

Provides an isolated home/config directory and launcher configs pointing at
a temporary install directory.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from cncf_advisor.core.config.models import LauncherConfig

# ==============================================================================
# Directory Fixtures
# ==============================================================================


@pytest.fixture
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME and XDG_CONFIG_HOME at a temporary directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    return home


@pytest.fixture
def install_dir(tmp_path: Path) -> Path:
    path = tmp_path / "install"
    path.mkdir()
    return path


# ==============================================================================
# Config / Artifact Fixtures
# ==============================================================================


@pytest.fixture
def config(install_dir: Path) -> LauncherConfig:
    """Launcher config with a temporary install directory."""
    return LauncherConfig(install_dir=install_dir)


@pytest.fixture
def native_artifact(config: LauncherConfig) -> Path:
    """Create an (empty) native artifact in the install directory."""
    path = Path(config.install_dir) / config.native_name
    path.write_text("")
    return path


@pytest.fixture
def jar_artifact(config: LauncherConfig) -> Path:
    """Create an (empty) JAR artifact in the install directory."""
    path = Path(config.install_dir) / config.jar_name
    path.write_text("")
    return path
