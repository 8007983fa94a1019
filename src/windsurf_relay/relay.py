"""Per-invocation relay to the windsurf-relay binary.

Finds the platform binary and runs it in MCP mode with the caller's
arguments. The child inherits this process's environment and its stdin,
stdout and stderr directly; nothing is piped, buffered or rewritten. The
relay exits with the child's exit code.
"""

from __future__ import annotations

import os
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Mapping, Optional, Sequence

from windsurf_relay.bootstrap.download import releases_page_url
from windsurf_relay.bootstrap.paths import RelayPaths, locate_binary
from windsurf_relay.bootstrap.platform import (
    PlatformKey,
    get_platform_key,
    resolve_artifact_name,
)
from windsurf_relay.cli.exit_codes import EXIT_FAILURE
from windsurf_relay.config import LauncherConfig, load_config_or_default
from windsurf_relay.core.logging import get_logger

LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class ExitStatus:
    """How a child process ended.

    Exactly one of ``code``, ``signal`` or ``error`` is set: a normal exit,
    termination by a signal (POSIX), or a failure to start the process.
    """

    code: Optional[int] = None
    signal: Optional[int] = None
    error: Optional[str] = None

    @classmethod
    def from_returncode(cls, returncode: int) -> "ExitStatus":
        # Popen reports death by signal N as -N on POSIX
        if returncode < 0:
            return cls(signal=-returncode)
        return cls(code=returncode)

    def exit_code(self) -> int:
        """Exit code for this process: the child's own, otherwise 1."""
        if self.code is not None:
            return self.code
        return EXIT_FAILURE


def compose_argv(binary: Path, args: Sequence[str], mode_flag: str) -> List[str]:
    """Build the child's argv: binary, mode flag, then the caller's args as-is."""
    return [str(binary), mode_flag, *args]


def spawn_inherited(
    argv: Sequence[str],
    env: Optional[Mapping[str, str]] = None,
) -> ExitStatus:
    """Run ``argv`` with inherited standard streams and wait for it.

    Args:
        argv: Program and arguments.
        env: Child environment. Defaults to a copy of this process's
            environment.

    Returns:
        ExitStatus of the child.
    """
    if env is None:
        env = dict(os.environ)

    try:
        process = subprocess.Popen(list(argv), env=dict(env))
    except OSError as e:
        return ExitStatus(error=str(e))

    with process:
        while True:
            try:
                returncode = process.wait()
                break
            except KeyboardInterrupt:
                # The child received the same interrupt; let it decide when to exit.
                LOGGER.debug("Interrupted, waiting for child to exit")

    return ExitStatus.from_returncode(returncode)


def _report_missing(artifact_name: str, candidates: Sequence[Path], config: LauncherConfig) -> None:
    searched = "\n".join(f"  - {candidate}" for candidate in candidates)
    print(
        f"Binary not found: {artifact_name}\n"
        f"Run 'windsurf-relay-install', reinstall the package "
        f"(pip install --force-reinstall windsurf-relay) "
        f"or download it from {releases_page_url(config.host, config.repository)}\n"
        f"Searched:\n{searched}",
        file=sys.stderr,
    )


def relay(
    args: Sequence[str],
    platform_key: Optional[PlatformKey] = None,
    paths: Optional[RelayPaths] = None,
    config: Optional[LauncherConfig] = None,
) -> int:
    """Relay an invocation to the platform binary.

    Args:
        args: Caller's arguments, forwarded unmodified after the mode flag.
        platform_key: Target platform. Detected from the host when omitted.
        paths: Binary locations. Defaults to the installed package.
        config: Launcher configuration. Loaded from the package when omitted.

    Returns:
        Exit code for this process.
    """
    if platform_key is None:
        platform_key = get_platform_key()
    if paths is None:
        paths = RelayPaths.default()
    if config is None:
        config = load_config_or_default()

    artifact_name = resolve_artifact_name(platform_key)
    if artifact_name is None:
        print(f"Unsupported platform: {platform_key}", file=sys.stderr)
        return EXIT_FAILURE

    candidates = paths.candidate_locations(artifact_name)
    binary = locate_binary(candidates)
    if binary is None:
        _report_missing(artifact_name, candidates, config)
        return EXIT_FAILURE

    argv = compose_argv(binary, args, config.mode_flag)
    LOGGER.debug(f"Running: {' '.join(argv)}")

    status = spawn_inherited(argv)
    if status.error is not None:
        print(f"Failed to start {binary}: {status.error}", file=sys.stderr)
    elif status.signal is not None:
        LOGGER.debug(f"Child terminated by signal {status.signal}")

    return status.exit_code()
