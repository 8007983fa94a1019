"""Path management for the relayed binary.

The binary lives inside the installed package:

    windsurf_relay/
        bin/
            windsurf-relay-<os>-<arch>[.exe]   - managed install directory
        windsurf-relay-<os>-<arch>[.exe]       - secondary location

The installer writes to ``bin/``. The relay searches ``bin/`` first and
then the package root.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, Iterable, Optional, Tuple

# windsurf_relay/bootstrap/paths.py -> windsurf_relay/
PACKAGE_DIR = Path(__file__).resolve().parent.parent


@dataclass(frozen=True)
class RelayPaths:
    """Locations of the relayed binary relative to a package directory."""

    package_dir: Path

    _BIN_DIR: ClassVar[str] = "bin"

    @classmethod
    def default(cls) -> "RelayPaths":
        """Paths for the installed windsurf_relay package."""
        return cls(PACKAGE_DIR)

    @property
    def bin_dir(self) -> Path:
        """Managed install directory."""
        return self.package_dir / self._BIN_DIR

    def artifact_path(self, artifact_name: str) -> Path:
        """Where the installer places the binary."""
        return self.bin_dir / artifact_name

    def candidate_locations(self, artifact_name: str) -> Tuple[Path, ...]:
        """Ordered locations searched by the relay, first match wins.

        Args:
            artifact_name: Platform-specific executable name.

        Returns:
            Tuple of candidate paths, managed install directory first.
        """
        return (
            self.artifact_path(artifact_name),
            self.package_dir / artifact_name,
        )


def locate_binary(candidates: Iterable[Path]) -> Optional[Path]:
    """Return the first candidate that exists, or None."""
    for candidate in candidates:
        if candidate.exists():
            return candidate
    return None
