"""Configuration module for windsurf-relay.

Provides the launcher's release coordinates and settings, with optional
overrides from a ``release.yml`` bundled next to the package.
"""

from windsurf_relay.config.models import (
    BUILD_FROM_SOURCE_HINT,
    LauncherConfig,
)
from windsurf_relay.config.loader import (
    ConfigError,
    find_release_config,
    load_config,
    load_config_or_default,
)
from windsurf_relay.config.validation import ConfigValidationWarning, validate_config

__all__ = [
    "BUILD_FROM_SOURCE_HINT",
    "LauncherConfig",
    "ConfigError",
    "find_release_config",
    "load_config",
    "load_config_or_default",
    "ConfigValidationWarning",
    "validate_config",
]
