"""Tests for windsurf-relay-status."""

from __future__ import annotations

import argparse
from pathlib import Path
from unittest.mock import patch

from tests.conftest import LINUX_ARTIFACT, LINUX_ASSET, LINUX_X64
from windsurf_relay.bootstrap.paths import RelayPaths
from windsurf_relay.bootstrap.platform import PlatformKey
from windsurf_relay.cli.status import build_parser, print_status, status_main
from windsurf_relay.config.models import LauncherConfig


class TestBuildParser:
    """Tests for the status argument parser."""

    def test_flags(self) -> None:
        parser = build_parser()
        assert isinstance(parser, argparse.ArgumentParser)
        for flag in ["--config", "--debug"]:
            assert any(a.option_strings and flag in a.option_strings for a in parser._actions)


class TestPrintStatus:
    """Tests for print_status."""

    def test_supported_platform(self, relay_paths: RelayPaths, config, capsys) -> None:
        print_status(config, LINUX_X64, relay_paths)
        out = capsys.readouterr().out

        assert "windsurf-relay version: 1.2.3" in out
        assert "Platform: linux-x64" in out
        assert f"Binary: {LINUX_ARTIFACT}" in out
        assert f"releases/download/v1.2.3/{LINUX_ASSET}" in out
        assert f"{relay_paths.artifact_path(LINUX_ARTIFACT)}: missing" in out

    def test_installed_binary(self, relay_paths: RelayPaths, config, capsys) -> None:
        binary = relay_paths.artifact_path(LINUX_ARTIFACT)
        binary.parent.mkdir(parents=True)
        binary.write_text("x")
        binary.chmod(0o755)

        print_status(config, LINUX_X64, relay_paths)
        assert f"{binary}: installed" in capsys.readouterr().out

    def test_unsupported_platform(self, relay_paths: RelayPaths, config, capsys) -> None:
        print_status(config, PlatformKey("haiku", "x64"), relay_paths)
        out = capsys.readouterr().out
        assert "unsupported platform" in out
        assert "Searched" not in out

    def test_reports_configured_checksum(self, relay_paths: RelayPaths, capsys) -> None:
        config = LauncherConfig(version="1.2.3", checksums={LINUX_ASSET: "ab" * 32})
        print_status(config, LINUX_X64, relay_paths)
        assert "Checksum: configured" in capsys.readouterr().out


class TestStatusMain:
    """Tests for status_main."""

    def test_success(self, capsys) -> None:
        assert status_main([]) == 0
        assert "Platform:" in capsys.readouterr().out

    def test_missing_config_file(self, tmp_path: Path, capsys) -> None:
        exit_code = status_main(["--config", str(tmp_path / "missing.yml")])
        assert exit_code == 3
        assert "Config file not found" in capsys.readouterr().err

    def test_explicit_config(self, tmp_path: Path, capsys) -> None:
        config_path = tmp_path / "release.yml"
        config_path.write_text("version: 4.5.6\n")
        with patch("windsurf_relay.cli.status.get_platform_key", return_value=LINUX_X64):
            assert status_main(["--config", str(config_path)]) == 0
        assert "v4.5.6" in capsys.readouterr().out
