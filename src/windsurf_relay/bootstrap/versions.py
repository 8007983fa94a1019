"""Version of the release the launcher downloads.

The launcher and the binary are released together, so the release tag is
the installed distribution's own version.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

DISTRIBUTION_NAME = "windsurf-relay"


def get_package_version() -> str:
    """Return the installed windsurf-relay version."""
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        # Fallback for source checkouts that have no installed metadata.
        from windsurf_relay import __version__

        return __version__


def release_tag(version_string: str) -> str:
    """GitHub release tag for a version (``1.2.3`` -> ``v1.2.3``)."""
    return f"v{version_string.lstrip('v')}"
