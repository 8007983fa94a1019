"""Shared fixtures for windsurf-relay tests."""

from __future__ import annotations

import io
import logging
import tarfile
from pathlib import Path
from typing import Dict, Iterator

import pytest

from windsurf_relay.bootstrap.paths import RelayPaths
from windsurf_relay.bootstrap.platform import PlatformKey
from windsurf_relay.config.models import LauncherConfig
from windsurf_relay.core.logging import LOGGER_NAME

LINUX_X64 = PlatformKey("linux", "x64")
WIN32_X64 = PlatformKey("win32", "x64")
LINUX_ARTIFACT = "windsurf-relay-linux-x64"
LINUX_ASSET = "windsurf-relay-linux-x64.tar.gz"


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Drop handlers added by configure_logging so they don't outlive capsys."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def relay_paths(tmp_path: Path) -> RelayPaths:
    """RelayPaths rooted in a temporary package directory."""
    package_dir = tmp_path / "windsurf_relay"
    package_dir.mkdir()
    return RelayPaths(package_dir)


@pytest.fixture
def config() -> LauncherConfig:
    return LauncherConfig(version="1.2.3")


def make_tar_gz(files: Dict[str, bytes]) -> bytes:
    """Build an in-memory .tar.gz with the given members."""
    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w:gz") as tar:
        for name, content in files.items():
            info = tarfile.TarInfo(name)
            info.size = len(content)
            info.mode = 0o644
            tar.addfile(info, io.BytesIO(content))
    return buffer.getvalue()
