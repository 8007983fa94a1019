"""Install-time acquisition of the windsurf-relay binary.

``ensure_installed`` runs once after the package is installed. It downloads
the release archive for the current platform, unpacks it into the
package's ``bin/`` directory and makes the binary executable.

Every failure is reported and absorbed: the install step always completes,
so a missing prebuilt binary never breaks installation of the package
itself. The relay reports the problem later if the binary is still absent.
"""

from __future__ import annotations

import tempfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, Optional

from windsurf_relay.bootstrap.download import (
    FetchError,
    fetch,
    release_url,
    releases_page_url,
)
from windsurf_relay.bootstrap.extract import ExtractionError, extract_archive
from windsurf_relay.bootstrap.paths import RelayPaths
from windsurf_relay.bootstrap.platform import (
    PlatformKey,
    ResolvedArtifact,
    get_platform_key,
    resolve,
)
from windsurf_relay.bootstrap.validation import verify_sha256
from windsurf_relay.bootstrap.versions import release_tag
from windsurf_relay.config import (
    BUILD_FROM_SOURCE_HINT,
    LauncherConfig,
    load_config_or_default,
)
from windsurf_relay.core.logging import get_logger
from windsurf_relay.core.result import Result

LOGGER = get_logger(__name__)

EXECUTABLE_MODE = 0o755


class InstallStatus(str, Enum):
    """Outcome of the install step. Every value is a completed step."""

    INSTALLED = "installed"
    ALREADY_INSTALLED = "already_installed"
    UNSUPPORTED = "unsupported"
    FAILED = "failed"


class AcquisitionErrorKind(str, Enum):
    """Failure categories of the acquisition steps."""

    UNSUPPORTED_PLATFORM = "unsupported_platform"
    FETCH_FAILURE = "fetch_failure"
    INTEGRITY_FAILURE = "integrity_failure"
    EXTRACTION_FAILURE = "extraction_failure"
    PERMISSION_FAILURE = "permission_failure"


@dataclass(frozen=True)
class AcquisitionError:
    """Error value carried by a failed acquisition step."""

    kind: AcquisitionErrorKind
    message: str
    status: Optional[int] = None

    def __str__(self) -> str:
        return self.message


_FAILURE_HEADLINES: Dict[AcquisitionErrorKind, str] = {
    AcquisitionErrorKind.FETCH_FAILURE: "Download failed",
    AcquisitionErrorKind.INTEGRITY_FAILURE: "Checksum verification failed",
    AcquisitionErrorKind.EXTRACTION_FAILURE: "Extraction failed",
    AcquisitionErrorKind.PERMISSION_FAILURE: "Could not make binary executable",
}


def resolve_step(key: PlatformKey) -> Result[ResolvedArtifact, AcquisitionError]:
    resolved = resolve(key)
    if resolved is None:
        return Result.err(AcquisitionError(
            AcquisitionErrorKind.UNSUPPORTED_PLATFORM,
            f"Unsupported platform: {key}",
        ))
    return Result.ok(resolved)


def download_step(url: str, config: LauncherConfig) -> Result[bytes, AcquisitionError]:
    try:
        data = fetch(url, user_agent=config.user_agent, timeout=config.timeout)
    except FetchError as e:
        return Result.err(AcquisitionError(
            AcquisitionErrorKind.FETCH_FAILURE, str(e), status=e.status
        ))
    return Result.ok(data)


def verify_step(
    data: bytes,
    asset_name: str,
    config: LauncherConfig,
) -> Result[None, AcquisitionError]:
    """Check the archive against its configured digest, if there is one."""
    expected = config.checksum_for(asset_name)
    if expected is None:
        LOGGER.debug(f"No published digest for {asset_name}, skipping verification")
        return Result.ok()

    if not verify_sha256(data, expected):
        return Result.err(AcquisitionError(
            AcquisitionErrorKind.INTEGRITY_FAILURE,
            f"SHA-256 of {asset_name} does not match the published digest",
        ))
    LOGGER.debug(f"Verified SHA-256 of {asset_name}")
    return Result.ok()


def _archive_suffix(asset_name: str) -> str:
    return ".tar.gz" if asset_name.endswith(".tar.gz") else Path(asset_name).suffix


def extract_step(
    data: bytes,
    asset_name: str,
    dest_dir: Path,
) -> Result[None, AcquisitionError]:
    """Write the archive to a temporary file and unpack it into ``dest_dir``.

    The temporary file is removed whether or not extraction succeeds.
    """
    try:
        dest_dir.mkdir(parents=True, exist_ok=True)
        # delete=False and manual cleanup: Windows cannot reopen an open temp file
        tmp_file = tempfile.NamedTemporaryFile(
            prefix="windsurf-relay-", suffix=_archive_suffix(asset_name), delete=False
        )
    except OSError as e:
        return Result.err(AcquisitionError(
            AcquisitionErrorKind.EXTRACTION_FAILURE,
            f"Could not prepare {dest_dir}: {e}",
        ))

    tmp_path = Path(tmp_file.name)
    try:
        tmp_file.write(data)
        tmp_file.close()
        extract_archive(tmp_path, dest_dir, asset_name)
    except (ExtractionError, OSError) as e:
        return Result.err(AcquisitionError(
            AcquisitionErrorKind.EXTRACTION_FAILURE, str(e)
        ))
    finally:
        if not tmp_file.closed:
            tmp_file.close()
        tmp_path.unlink(missing_ok=True)

    return Result.ok()


def finalize_step(binary_path: Path, key: PlatformKey) -> Result[Path, AcquisitionError]:
    """Confirm the binary landed where expected and make it executable."""
    if not binary_path.exists():
        return Result.err(AcquisitionError(
            AcquisitionErrorKind.EXTRACTION_FAILURE,
            f"Archive did not contain {binary_path.name}",
        ))

    if not key.is_windows:
        try:
            binary_path.chmod(EXECUTABLE_MODE)
        except OSError as e:
            return Result.err(AcquisitionError(
                AcquisitionErrorKind.PERMISSION_FAILURE, str(e)
            ))

    return Result.ok(binary_path)


def _acquire(
    url: str,
    resolved: ResolvedArtifact,
    binary_path: Path,
    key: PlatformKey,
    config: LauncherConfig,
) -> Result[Path, AcquisitionError]:
    """Run download -> verify -> extract -> finalize, stopping at the first error."""
    downloaded = download_step(url, config)
    if downloaded.is_err():
        return Result.err(downloaded.error)
    data = downloaded.unwrap()

    verified = verify_step(data, resolved.asset_name, config)
    if verified.is_err():
        return Result.err(verified.error)

    extracted = extract_step(data, resolved.asset_name, binary_path.parent)
    if extracted.is_err():
        return Result.err(extracted.error)

    return finalize_step(binary_path, key)


def _report_failure(
    error: AcquisitionError,
    config: LauncherConfig,
    binary_path: Path,
) -> None:
    headline = _FAILURE_HEADLINES.get(error.kind, "Installation failed")
    LOGGER.warning(f"{headline}: {error}")
    LOGGER.warning("You can:")
    LOGGER.warning(
        f"  1. Download manually from: {releases_page_url(config.host, config.repository)}"
    )
    LOGGER.warning(f"  2. Build from source: {BUILD_FROM_SOURCE_HINT}")
    LOGGER.warning(f"  3. Place the binary at: {binary_path}")


def ensure_installed(
    config: Optional[LauncherConfig] = None,
    platform_key: Optional[PlatformKey] = None,
    paths: Optional[RelayPaths] = None,
) -> InstallStatus:
    """Make sure the binary for this platform is installed.

    Never raises for acquisition failures and never overwrites an existing
    binary.

    Args:
        config: Launcher configuration. Loaded from the package when omitted.
        platform_key: Target platform. Detected from the host when omitted.
        paths: Binary locations. Defaults to the installed package.

    Returns:
        InstallStatus describing what happened.
    """
    if config is None:
        config = load_config_or_default()
    if platform_key is None:
        platform_key = get_platform_key()
    if paths is None:
        paths = RelayPaths.default()

    resolution = resolve_step(platform_key)
    if resolution.is_err():
        LOGGER.warning(str(resolution.error))
        LOGGER.warning(f"Please build from source: {BUILD_FROM_SOURCE_HINT}")
        return InstallStatus.UNSUPPORTED

    resolved = resolution.unwrap()
    binary_path = paths.artifact_path(resolved.artifact_name)

    if binary_path.exists():
        LOGGER.info(f"Binary already installed: {resolved.artifact_name}")
        return InstallStatus.ALREADY_INSTALLED

    url = release_url(
        config.host, config.repository, release_tag(config.version), resolved.asset_name
    )
    LOGGER.info(f"Downloading {resolved.asset_name}...")

    result = _acquire(url, resolved, binary_path, platform_key, config)
    if result.error is not None:
        _report_failure(result.error, config, binary_path)
        return InstallStatus.FAILED

    LOGGER.info(f"Installed: {resolved.artifact_name}")
    return InstallStatus.INSTALLED
