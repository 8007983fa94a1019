"""Validation helpers for the relayed binary and its release archive."""

from __future__ import annotations

import hashlib
import hmac
import os
from enum import Enum
from pathlib import Path


class ToolStatus(str, Enum):
    """Status of a binary on disk."""

    PRESENT = "present"
    MISSING = "missing"
    NOT_EXECUTABLE = "not_executable"


def validate_binary(path: Path) -> ToolStatus:
    """Validate a single binary file.

    Args:
        path: Path to the binary file.

    Returns:
        ToolStatus indicating whether the binary is present and executable.
    """
    if not path.exists():
        return ToolStatus.MISSING

    if not os.access(path, os.X_OK):
        return ToolStatus.NOT_EXECUTABLE

    return ToolStatus.PRESENT


def sha256_digest(data: bytes) -> str:
    """Hex SHA-256 digest of ``data``."""
    return hashlib.sha256(data).hexdigest()


def verify_sha256(data: bytes, expected: str) -> bool:
    """Check ``data`` against an expected hex SHA-256 digest.

    Comparison is case-insensitive and ignores surrounding whitespace, so
    digests pasted from a ``sha256sum`` listing work as-is.
    """
    return hmac.compare_digest(sha256_digest(data), expected.strip().lower())
