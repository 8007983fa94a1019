"""
Bootstrap module for the relayed binary.

This module handles:
- Platform resolution (OS + architecture -> artifact and archive names)
- Binary locations inside the installed package
- Release downloads and archive extraction
- Binary and archive validation
"""

from windsurf_relay.bootstrap.platform import (
    PlatformKey,
    ResolvedArtifact,
    get_platform_key,
    resolve,
    resolve_artifact_name,
    resolve_asset_name,
)
from windsurf_relay.bootstrap.paths import RelayPaths, locate_binary
from windsurf_relay.bootstrap.validation import ToolStatus, validate_binary

__all__ = [
    "PlatformKey",
    "ResolvedArtifact",
    "get_platform_key",
    "resolve",
    "resolve_artifact_name",
    "resolve_asset_name",
    "RelayPaths",
    "locate_binary",
    "ToolStatus",
    "validate_binary",
]
