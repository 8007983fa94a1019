"""End-to-end install and relay with a real archive and a real child process."""

from __future__ import annotations

import sys
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

from tests.conftest import LINUX_ARTIFACT, LINUX_X64, make_tar_gz
from windsurf_relay.acquirer import InstallStatus, ensure_installed
from windsurf_relay.bootstrap.paths import RelayPaths
from windsurf_relay.config.models import LauncherConfig
from windsurf_relay.relay import relay

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(sys.platform == "win32", reason="relays to a POSIX shell script"),
]

FAKE_BINARY = b"""#!/bin/sh
if [ "$1" = "--signal" ] || [ "$2" = "--signal" ]; then
    kill -TERM $$
fi
echo "argv: $*"
echo "env: $WINDSURF_RELAY_TEST_VAR"
exit 7
"""


@pytest.fixture
def installed(tmp_path: Path, monkeypatch) -> RelayPaths:
    monkeypatch.setattr(tempfile, "tempdir", str(tmp_path))
    package_dir = tmp_path / "windsurf_relay"
    package_dir.mkdir()
    paths = RelayPaths(package_dir)

    archive = make_tar_gz({LINUX_ARTIFACT: FAKE_BINARY})
    with patch("windsurf_relay.acquirer.fetch", return_value=archive):
        status = ensure_installed(
            config=LauncherConfig(version="1.0.0"),
            platform_key=LINUX_X64,
            paths=paths,
        )
    assert status == InstallStatus.INSTALLED
    return paths


def test_relays_args_env_and_exit_code(installed: RelayPaths, capfd, monkeypatch) -> None:
    monkeypatch.setenv("WINDSURF_RELAY_TEST_VAR", "passed-through")

    code = relay(
        ["--foo", "bar"],
        platform_key=LINUX_X64,
        paths=installed,
        config=LauncherConfig(version="1.0.0"),
    )

    out = capfd.readouterr().out
    assert code == 7
    assert "argv: --mcp --foo bar" in out
    assert "env: passed-through" in out


def test_child_killed_by_signal_exits_1(installed: RelayPaths) -> None:
    code = relay(
        ["--signal"],
        platform_key=LINUX_X64,
        paths=installed,
        config=LauncherConfig(version="1.0.0"),
    )
    assert code == 1


def test_second_install_is_noop(installed: RelayPaths) -> None:
    with patch("windsurf_relay.acquirer.fetch") as mock_fetch:
        status = ensure_installed(
            config=LauncherConfig(version="1.0.0"),
            platform_key=LINUX_X64,
            paths=installed,
        )
    assert status == InstallStatus.ALREADY_INSTALLED
    mock_fetch.assert_not_called()
