"""``windsurf-relay-status``: report platform resolution and binary state."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Iterable, Optional

from windsurf_relay.bootstrap.download import release_url
from windsurf_relay.bootstrap.paths import RelayPaths
from windsurf_relay.bootstrap.platform import PlatformKey, get_platform_key, resolve
from windsurf_relay.bootstrap.validation import ToolStatus, validate_binary
from windsurf_relay.bootstrap.versions import release_tag
from windsurf_relay.cli.exit_codes import EXIT_INVALID_USAGE, EXIT_SUCCESS
from windsurf_relay.config import ConfigError, LauncherConfig, load_config
from windsurf_relay.core.logging import configure_logging, get_logger

LOGGER = get_logger(__name__)

_STATUS_LABELS = {
    ToolStatus.PRESENT: "installed",
    ToolStatus.MISSING: "missing",
    ToolStatus.NOT_EXECUTABLE: "not executable",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="windsurf-relay-status",
        description="Show how windsurf-relay resolves and locates its binary.",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        type=Path,
        help="Path to a release config file (default: bundled release.yml).",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def print_status(
    config: LauncherConfig,
    platform_key: PlatformKey,
    paths: RelayPaths,
) -> None:
    """Print version, platform resolution and each candidate location."""
    print(f"windsurf-relay version: {config.version}")
    print(f"Platform: {platform_key}")

    resolved = resolve(platform_key)
    if resolved is None:
        print("Binary: unsupported platform (no prebuilt release)")
        return

    print(f"Binary: {resolved.artifact_name}")
    print(f"Release asset: {resolved.asset_name}")
    print(
        "Download URL: "
        + release_url(config.host, config.repository, release_tag(config.version), resolved.asset_name)
    )
    if config.checksum_for(resolved.asset_name):
        print("Checksum: configured (SHA-256)")
    print()
    print("Searched locations:")
    for candidate in paths.candidate_locations(resolved.artifact_name):
        print(f"  {candidate}: {_STATUS_LABELS[validate_binary(candidate)]}")


def status_main(argv: Optional[Iterable[str]] = None) -> int:
    """Entry point for ``windsurf-relay-status``."""
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    configure_logging(debug=args.debug)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        LOGGER.error(str(e))
        return EXIT_INVALID_USAGE

    print_status(config, get_platform_key(), RelayPaths.default())
    return EXIT_SUCCESS
