"""Platform resolution for windsurf-relay release artifacts.

Maps an (OS, architecture) pair to the executable name and the release
archive name published on GitHub Releases. The mapping is a fixed table:
anything not listed is unsupported, and no name is guessed for it.

Host detection is kept separate from the lookup so the resolver can be
called with any PlatformKey.
"""

from __future__ import annotations

import platform
from dataclasses import dataclass
from typing import Dict, Optional

# Host spellings reported by platform.system() / platform.machine()
_OS_ALIASES: Dict[str, str] = {
    "darwin": "darwin",
    "linux": "linux",
    "windows": "win32",
    "win32": "win32",
}

_ARCH_ALIASES: Dict[str, str] = {
    "x86_64": "x64",
    "amd64": "x64",
    "x64": "x64",
    "arm64": "arm64",
    "aarch64": "arm64",
}


@dataclass(frozen=True)
class PlatformKey:
    """Canonical (OS, architecture) pair identifying a host."""

    os: str
    arch: str

    @property
    def is_windows(self) -> bool:
        return self.os == "win32"

    def __str__(self) -> str:
        return f"{self.os}-{self.arch}"


@dataclass(frozen=True)
class ResolvedArtifact:
    """Executable and release archive names for one supported platform."""

    artifact_name: str
    asset_name: str


SUPPORTED_PLATFORMS: Dict[PlatformKey, ResolvedArtifact] = {
    PlatformKey("darwin", "x64"): ResolvedArtifact(
        "windsurf-relay-darwin-x64", "windsurf-relay-darwin-x64.tar.gz"
    ),
    PlatformKey("darwin", "arm64"): ResolvedArtifact(
        "windsurf-relay-darwin-arm64", "windsurf-relay-darwin-arm64.tar.gz"
    ),
    PlatformKey("linux", "x64"): ResolvedArtifact(
        "windsurf-relay-linux-x64", "windsurf-relay-linux-x64.tar.gz"
    ),
    PlatformKey("linux", "arm64"): ResolvedArtifact(
        "windsurf-relay-linux-arm64", "windsurf-relay-linux-arm64.tar.gz"
    ),
    PlatformKey("win32", "x64"): ResolvedArtifact(
        "windsurf-relay-win32-x64.exe", "windsurf-relay-win32-x64.zip"
    ),
    PlatformKey("win32", "arm64"): ResolvedArtifact(
        "windsurf-relay-win32-arm64.exe", "windsurf-relay-win32-arm64.zip"
    ),
}


def get_platform_key(
    system: Optional[str] = None,
    machine: Optional[str] = None,
) -> PlatformKey:
    """Build a PlatformKey from host-reported identifiers.

    Known spellings are normalized (``Windows`` -> ``win32``,
    ``aarch64`` -> ``arm64``, ...). Unknown values are only lowercased so
    they still reach the resolver and come back unsupported.

    Args:
        system: OS name as reported by ``platform.system()``. Queried from
            the host when omitted.
        machine: Architecture as reported by ``platform.machine()``. Queried
            from the host when omitted.

    Returns:
        PlatformKey for the host.
    """
    if system is None:
        system = platform.system()
    if machine is None:
        machine = platform.machine()

    os_id = system.strip().lower()
    arch_id = machine.strip().lower()

    return PlatformKey(
        os=_OS_ALIASES.get(os_id, os_id),
        arch=_ARCH_ALIASES.get(arch_id, arch_id),
    )


def resolve(key: PlatformKey) -> Optional[ResolvedArtifact]:
    """Look up both names for a platform, or None if it is unsupported."""
    return SUPPORTED_PLATFORMS.get(key)


def resolve_artifact_name(key: PlatformKey) -> Optional[str]:
    """Return the executable file name for a platform, or None if unsupported."""
    resolved = resolve(key)
    return resolved.artifact_name if resolved else None


def resolve_asset_name(key: PlatformKey) -> Optional[str]:
    """Return the release archive name for a platform, or None if unsupported."""
    resolved = resolve(key)
    return resolved.asset_name if resolved else None
