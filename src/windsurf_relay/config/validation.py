"""Configuration validation for windsurf-relay.

Warns on unknown keys and wrongly typed values. Never raises: a bad
release file must not stop the relay from running on defaults.
"""

from __future__ import annotations

from dataclasses import dataclass
from difflib import get_close_matches
from typing import Any, Dict, List, Optional, Set, Tuple, Type, Union

from windsurf_relay.core.logging import get_logger

LOGGER = get_logger(__name__)

# Expected type(s) per top-level key
EXPECTED_TYPES: Dict[str, Union[Type[Any], Tuple[Type[Any], ...]]] = {
    "repository": str,
    "host": str,
    "version": (str, int),
    "mode_flag": str,
    "user_agent": str,
    "timeout": (int, float),
    "checksums": dict,
    "debug": bool,
}

VALID_TOP_LEVEL_KEYS: Set[str] = set(EXPECTED_TYPES)


@dataclass
class ConfigValidationWarning:
    """A validation warning for configuration."""

    message: str
    source: str
    key: Optional[str] = None
    suggestion: Optional[str] = None


def validate_config(
    data: Dict[str, Any],
    source: str,
) -> List[ConfigValidationWarning]:
    """Validate a configuration dictionary.

    Args:
        data: Config dictionary to validate.
        source: Source file path for warning messages.

    Returns:
        List of validation warnings.
    """
    warnings: List[ConfigValidationWarning] = []

    if not isinstance(data, dict):
        warnings.append(ConfigValidationWarning(
            message=f"Config must be a mapping, got {type(data).__name__}",
            source=source,
        ))
        return warnings

    for key, value in data.items():
        if key not in VALID_TOP_LEVEL_KEYS:
            warning = ConfigValidationWarning(
                message=f"Unknown top-level key '{key}'",
                source=source,
                key=key,
                suggestion=_suggest_key(str(key), VALID_TOP_LEVEL_KEYS),
            )
            warnings.append(warning)
            _log_warning(warning)
            continue

        if not is_valid_value(key, value):
            warning = ConfigValidationWarning(
                message=_invalid_value_message(key, value),
                source=source,
                key=key,
            )
            warnings.append(warning)
            _log_warning(warning)

    checksums = data.get("checksums")
    if isinstance(checksums, dict):
        for asset, digest in checksums.items():
            if not isinstance(digest, str):
                warning = ConfigValidationWarning(
                    message=f"'checksums.{asset}' must be a string",
                    source=source,
                    key=f"checksums.{asset}",
                )
                warnings.append(warning)
                _log_warning(warning)

    return warnings


def is_valid_value(key: str, value: Any) -> bool:
    """Check a top-level value against its expected type."""
    expected = EXPECTED_TYPES[key]
    # bool is an int subclass; only 'debug' accepts it
    if isinstance(value, bool) and key != "debug":
        return False
    if not isinstance(value, expected):
        return False
    if key == "timeout":
        return value > 0
    return True


def _suggest_key(invalid_key: str, valid_keys: Set[str]) -> Optional[str]:
    """Suggest a valid key for a potential typo."""
    matches = get_close_matches(invalid_key, list(valid_keys), n=1, cutoff=0.6)
    return matches[0] if matches else None


def _log_warning(warning: ConfigValidationWarning) -> None:
    msg = f"{warning.message} in {warning.source}"
    if warning.suggestion:
        msg += f" (did you mean '{warning.suggestion}'?)"
    LOGGER.warning(msg)


def _invalid_value_message(key: str, value: Any) -> str:
    if key == "timeout" and isinstance(value, (int, float)) and not isinstance(value, bool):
        return f"'timeout' must be positive, got {value}"
    if key == "version" and isinstance(value, float):
        return f"'version' must be a quoted string, got float {value!r}"
    return f"'{key}' has invalid type {type(value).__name__}"
