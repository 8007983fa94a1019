"""Configuration file loading.

Precedence (highest to lowest):
1. Programmatic overrides
2. Explicit config file, or ``release.yml`` next to the package
3. Built-in defaults
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from windsurf_relay.bootstrap.paths import PACKAGE_DIR
from windsurf_relay.config.models import LauncherConfig
from windsurf_relay.config.validation import is_valid_value, validate_config
from windsurf_relay.core.logging import get_logger

LOGGER = get_logger(__name__)

RELEASE_CONFIG_NAME = "release.yml"


class ConfigError(Exception):
    """Configuration loading or parsing error."""

    pass


def find_release_config(package_dir: Path = PACKAGE_DIR) -> Optional[Path]:
    """Return the bundled release.yml if the package ships one."""
    config_path = package_dir / RELEASE_CONFIG_NAME
    if config_path.exists():
        return config_path
    return None


def load_yaml_file(path: Path) -> Dict[str, Any]:
    """Load and parse a YAML config file.

    Raises:
        ConfigError: If the file cannot be read, is not valid YAML, or is
            not a mapping.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ConfigError(
            f"Config file must be a YAML mapping, got {type(data).__name__}"
        )

    return data


def load_config(
    config_path: Optional[Path] = None,
    overrides: Optional[Dict[str, Any]] = None,
    package_dir: Path = PACKAGE_DIR,
) -> LauncherConfig:
    """Load launcher configuration.

    Args:
        config_path: Explicit config file. When omitted, the package's
            bundled ``release.yml`` is used if present.
        overrides: Values applied on top of the file.
        package_dir: Directory searched for ``release.yml``.

    Returns:
        LauncherConfig instance.

    Raises:
        ConfigError: If an explicit file is missing, or any file used is
            not valid YAML or not a mapping.
    """
    merged: Dict[str, Any] = {}
    sources: List[str] = []

    if config_path is not None:
        if not config_path.exists():
            raise ConfigError(f"Config file not found: {config_path}")
        file_path: Optional[Path] = config_path
    else:
        file_path = find_release_config(package_dir)

    if file_path is not None:
        file_data = load_yaml_file(file_path)
        validate_config(file_data, source=str(file_path))
        merged.update(file_data)
        sources.append(str(file_path))

    if overrides:
        merged.update(overrides)
        sources.append("overrides")

    LOGGER.debug(f"Config loaded from sources: {sources or ['defaults']}")
    return dict_to_config(merged)


def dict_to_config(data: Dict[str, Any]) -> LauncherConfig:
    """Convert a config dict to LauncherConfig.

    Unknown keys and values of the wrong type are dropped so the defaults
    apply; validate_config has already warned about them.
    """
    kwargs: Dict[str, Any] = {}
    for key, value in data.items():
        if key not in LauncherConfig.__dataclass_fields__:
            continue
        if not is_valid_value(key, value):
            continue
        kwargs[key] = value

    if "version" in kwargs:
        kwargs["version"] = str(kwargs["version"])

    if "checksums" in kwargs:
        kwargs["checksums"] = {
            str(asset): digest
            for asset, digest in kwargs["checksums"].items()
            if isinstance(digest, str)
        }

    return LauncherConfig(**kwargs)


def load_config_or_default(config_path: Optional[Path] = None) -> LauncherConfig:
    """Load config, falling back to defaults if the bundled file is broken.

    Used by the relay and installer entry points, which must keep working
    on a damaged release.yml.
    """
    try:
        return load_config(config_path)
    except ConfigError as e:
        LOGGER.warning(f"Ignoring configuration: {e}")
        return LauncherConfig()
