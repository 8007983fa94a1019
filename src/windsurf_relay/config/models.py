"""Configuration data model for the launcher.

Defaults describe the official release. A packager can override them with
a ``release.yml`` shipped next to the package (see loader).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from windsurf_relay.bootstrap.download import DEFAULT_TIMEOUT
from windsurf_relay.bootstrap.versions import get_package_version

DEFAULT_REPOSITORY = "moyan78641/windsurf-relay"
DEFAULT_HOST = "github.com"
DEFAULT_MODE_FLAG = "--mcp"
DEFAULT_USER_AGENT = "windsurf-relay-cli"

BUILD_FROM_SOURCE_HINT = "cargo build --release"


@dataclass
class LauncherConfig:
    """Release coordinates and runtime settings."""

    repository: str = DEFAULT_REPOSITORY
    host: str = DEFAULT_HOST
    version: str = field(default_factory=get_package_version)
    mode_flag: str = DEFAULT_MODE_FLAG
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = DEFAULT_TIMEOUT  # Per-request, in seconds
    checksums: Dict[str, str] = field(default_factory=dict)  # asset name -> sha256
    debug: bool = False

    def checksum_for(self, asset_name: str) -> Optional[str]:
        """Published SHA-256 digest of a release asset, if configured."""
        return self.checksums.get(asset_name)
