"""
Tests for launcher configuration and user env loading.
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from cncf_advisor.core.config import (
    LauncherConfig,
    default_install_dir,
    get_user_env_path,
    load_user_env,
)


class TestLauncherConfig:
    """Tests for the LauncherConfig model."""

    def test_defaults(self, isolated_home: Path) -> None:
        config = LauncherConfig()

        assert config.version == "1.0.0"
        assert config.jar_name == "cncf-tech-advisor-mcp-1.0.0-runner.jar"
        assert config.native_name == "cncf-tech-advisor-mcp-1.0.0-runner"
        assert config.install_dir == isolated_home / ".cncf-tech-advisor-mcp"
        assert config.install_dir == default_install_dir()
        assert config.java_home is None

    def test_urls(self) -> None:
        config = LauncherConfig()
        assert config.repository_url == "https://github.com/jeanlopezxyz/cncf-tech-advisor-mcp"
        assert config.releases_url.endswith("/cncf-tech-advisor-mcp/releases")
        assert config.documentation_url.endswith("#readme")

    def test_from_env_reads_java_home(self) -> None:
        config = LauncherConfig.from_env({"JAVA_HOME": "/opt/jdk-21"})
        assert config.java_home == "/opt/jdk-21"

    def test_from_env_ignores_empty_java_home(self) -> None:
        assert LauncherConfig.from_env({"JAVA_HOME": ""}).java_home is None

    def test_from_env_defaults_to_os_environ(self) -> None:
        with patch.dict(os.environ, {"JAVA_HOME": "/usr/lib/jvm/default"}):
            assert LauncherConfig.from_env().java_home == "/usr/lib/jvm/default"

    def test_install_dir_accepts_str(self, tmp_path: Path) -> None:
        config = LauncherConfig(install_dir=str(tmp_path))
        assert config.install_dir == tmp_path

    def test_frozen(self) -> None:
        config = LauncherConfig()
        with pytest.raises(ValidationError):
            config.version = "2.0.0"  # type: ignore[misc]


class TestLoadUserEnv:
    """Tests for load_user_env."""

    def test_default_path_uses_xdg(self, isolated_home: Path) -> None:
        assert get_user_env_path() == isolated_home / ".config" / "cncf-tech-advisor" / ".env"

    def test_missing_file_loads_nothing(self, tmp_path: Path) -> None:
        assert load_user_env([tmp_path / "missing.env"]) == []

    def test_loads_new_variables(self, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("CNCF_TEST_ONLY_VAR=from-file\n")

        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop("CNCF_TEST_ONLY_VAR", None)
            loaded = load_user_env([env_file])
            assert os.environ["CNCF_TEST_ONLY_VAR"] == "from-file"

        assert loaded == ["CNCF_TEST_ONLY_VAR"]

    def test_never_overrides_process_env(self, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("CNCF_ADVISOR_LOG_LEVEL=DEBUG\n")

        with patch.dict(os.environ, {"CNCF_ADVISOR_LOG_LEVEL": "ERROR"}):
            loaded = load_user_env([env_file])
            assert os.environ["CNCF_ADVISOR_LOG_LEVEL"] == "ERROR"

        assert loaded == []

    def test_skips_valueless_keys(self, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("CNCF_TEST_BARE_KEY\n")

        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop("CNCF_TEST_BARE_KEY", None)
            assert load_user_env([env_file]) == []
            assert "CNCF_TEST_BARE_KEY" not in os.environ
