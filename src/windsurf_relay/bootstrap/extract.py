"""Archive extraction into the managed install directory.

``.tar.gz`` archives are unpacked with :mod:`tarfile`. ``.zip`` archives,
which are only published for Windows, go through the platform's own
tooling: PowerShell ``Expand-Archive`` first, ``unzip`` if PowerShell is
unavailable or fails.
"""

from __future__ import annotations

import shutil
import subprocess
import tarfile
from pathlib import Path
from typing import Callable, List, Sequence, Tuple

from windsurf_relay.core.logging import get_logger

LOGGER = get_logger(__name__)


class ExtractionError(Exception):
    """Archive could not be unpacked."""


def _ps_quote(path: Path) -> str:
    """Single-quoted PowerShell literal; embedded quotes are doubled."""
    return "'" + str(path).replace("'", "''") + "'"


def _powershell_command(archive: Path, dest_dir: Path) -> List[str]:
    return [
        "powershell",
        "-NoProfile",
        "-Command",
        f"Expand-Archive -LiteralPath {_ps_quote(archive)} "
        f"-DestinationPath {_ps_quote(dest_dir)} -Force",
    ]


def _unzip_command(archive: Path, dest_dir: Path) -> List[str]:
    return ["unzip", "-o", str(archive), "-d", str(dest_dir)]


# Tried in order; the first tool present on PATH that succeeds wins.
ZIP_EXTRACTORS: Sequence[Tuple[str, Callable[[Path, Path], List[str]]]] = (
    ("powershell", _powershell_command),
    ("unzip", _unzip_command),
)


def _ensure_within(dest_dir: Path, member_name: str) -> None:
    member_path = (dest_dir / member_name).resolve()
    if not member_path.is_relative_to(dest_dir.resolve()):
        raise ExtractionError(f"Path traversal detected: {member_name}")


def _check_member(dest_dir: Path, member: tarfile.TarInfo) -> None:
    _ensure_within(dest_dir, member.name)
    # Release archives carry plain files only; a link could redirect later
    # members outside dest_dir.
    if member.issym() or member.islnk():
        raise ExtractionError(
            f"Link member not allowed: {member.name} -> {member.linkname}"
        )
    if not (member.isfile() or member.isdir()):
        raise ExtractionError(f"Unsupported member type: {member.name}")


def extract_tar_gz(archive: Path, dest_dir: Path) -> None:
    """Unpack a gzipped tarball into ``dest_dir``.

    Raises:
        ExtractionError: If the archive is unreadable, contains a link or
            special file, or a member would land outside ``dest_dir``.
    """
    try:
        with tarfile.open(archive, "r:gz") as tar:
            members = tar.getmembers()
            for member in members:
                _check_member(dest_dir, member)
            if hasattr(tarfile, "data_filter"):
                tar.extractall(path=dest_dir, members=members, filter="data")
            else:
                tar.extractall(path=dest_dir, members=members)  # nosec B202
    except (tarfile.TarError, OSError) as e:
        raise ExtractionError(f"Failed to extract {archive.name}: {e}") from e


def extract_zip(archive: Path, dest_dir: Path) -> None:
    """Unpack a zip archive with the first working tool in ZIP_EXTRACTORS.

    Raises:
        ExtractionError: If no tool is available or every available tool
            failed.
    """
    failures: List[str] = []

    for tool, build_command in ZIP_EXTRACTORS:
        if shutil.which(tool) is None:
            LOGGER.debug(f"{tool} not available, trying next extractor")
            failures.append(f"{tool}: not found")
            continue

        cmd = build_command(archive, dest_dir)
        LOGGER.debug(f"Running: {' '.join(cmd)}")
        try:
            subprocess.run(cmd, capture_output=True, check=True)
            return
        except (subprocess.CalledProcessError, OSError) as e:
            LOGGER.debug(f"{tool} failed: {e}")
            failures.append(f"{tool}: {e}")

    raise ExtractionError(
        f"Failed to extract {archive.name} ({'; '.join(failures)})"
    )


def extract_archive(archive: Path, dest_dir: Path, asset_name: str) -> None:
    """Unpack ``archive`` into ``dest_dir`` based on the asset's extension.

    Args:
        archive: Downloaded archive on disk.
        dest_dir: Existing directory to extract into.
        asset_name: Release asset name; its suffix selects the format.

    Raises:
        ExtractionError: On unsupported formats or extraction failures.
    """
    if asset_name.endswith(".tar.gz"):
        extract_tar_gz(archive, dest_dir)
    elif asset_name.endswith(".zip"):
        extract_zip(archive, dest_dir)
    else:
        raise ExtractionError(f"Unsupported archive format: {asset_name}")
