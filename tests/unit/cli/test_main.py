"""Tests for the relay and installer entry points."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from windsurf_relay.acquirer import InstallStatus
from windsurf_relay.cli.main import install_main, main
from windsurf_relay.config.models import LauncherConfig


class TestMain:
    """Tests for windsurf-relay."""

    @patch("windsurf_relay.cli.main.relay", return_value=7)
    def test_passes_argv_and_returns_code(self, mock_relay) -> None:
        assert main(["--foo", "bar"]) == 7
        assert mock_relay.call_args[0][0] == ["--foo", "bar"]

    @patch("windsurf_relay.cli.main.relay", return_value=0)
    def test_defaults_to_sys_argv(self, mock_relay) -> None:
        with patch("sys.argv", ["windsurf-relay", "--help"]):
            main()
        assert mock_relay.call_args[0][0] == ["--help"]

    @patch("windsurf_relay.cli.main.relay", return_value=0)
    def test_uses_loaded_config(self, mock_relay) -> None:
        config = LauncherConfig(version="3.0.0")
        with patch("windsurf_relay.cli.main.load_config_or_default", return_value=config):
            main([])
        assert mock_relay.call_args[1]["config"] is config


class TestInstallMain:
    """Tests for windsurf-relay-install."""

    @patch("windsurf_relay.cli.main.ensure_installed", return_value=InstallStatus.FAILED)
    def test_always_exits_zero(self, mock_install) -> None:
        assert install_main() == 0
        mock_install.assert_called_once()

    @patch("windsurf_relay.cli.main.ensure_installed", return_value=InstallStatus.INSTALLED)
    def test_passes_config(self, mock_install) -> None:
        config = LauncherConfig(version="3.0.0")
        with patch("windsurf_relay.cli.main.load_config_or_default", return_value=config):
            install_main()
        assert mock_install.call_args[1]["config"] is config


def _broken_release_file(tmp_path: Path, kind: str) -> Path:
    path = tmp_path / "release.yml"
    if kind == "undecodable":
        path.write_bytes(b"version: \xff\xfe\n")
    elif kind == "directory":
        path.mkdir()
    elif kind == "not_a_mapping":
        path.write_text("- a\n- b\n")
    else:
        path.write_text("repository: [unclosed\n")
    return path


BROKEN_KINDS = ["undecodable", "directory", "not_a_mapping", "invalid_yaml"]


class TestBrokenBundledConfig:
    """Entry points run on defaults when the bundled release.yml is broken."""

    @pytest.mark.parametrize("kind", BROKEN_KINDS)
    def test_relay_still_runs(self, tmp_path: Path, kind: str) -> None:
        path = _broken_release_file(tmp_path, kind)
        with patch("windsurf_relay.config.loader.find_release_config", return_value=path), \
                patch("windsurf_relay.cli.main.relay", return_value=0) as mock_relay:
            assert main(["--foo"]) == 0

        mock_relay.assert_called_once()
        assert mock_relay.call_args[0][0] == ["--foo"]
        assert mock_relay.call_args[1]["config"] == LauncherConfig()

    @pytest.mark.parametrize("kind", BROKEN_KINDS)
    def test_installer_still_exits_zero(self, tmp_path: Path, kind: str) -> None:
        path = _broken_release_file(tmp_path, kind)
        with patch("windsurf_relay.config.loader.find_release_config", return_value=path), \
                patch("windsurf_relay.cli.main.ensure_installed") as mock_install:
            assert install_main() == 0

        mock_install.assert_called_once()
        assert mock_install.call_args[1]["config"] == LauncherConfig()
