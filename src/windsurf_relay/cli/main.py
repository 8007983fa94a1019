"""Relay and installer entry points."""

from __future__ import annotations

import sys
from typing import Iterable, Optional

from windsurf_relay.acquirer import ensure_installed
from windsurf_relay.cli.exit_codes import EXIT_SUCCESS
from windsurf_relay.config import load_config_or_default
from windsurf_relay.core.logging import configure_logging
from windsurf_relay.relay import relay


def main(argv: Optional[Iterable[str]] = None) -> int:
    """Entry point for ``windsurf-relay``.

    Takes no options of its own: every argument goes to the binary.
    """
    args = list(argv) if argv is not None else sys.argv[1:]

    configure_logging()
    config = load_config_or_default()
    if config.debug:
        configure_logging(debug=True)

    return relay(args, config=config)


def install_main() -> int:
    """Entry point for ``windsurf-relay-install``.

    Always succeeds; failures are reported with manual recovery steps.
    """
    configure_logging(verbose=True)
    config = load_config_or_default()
    if config.debug:
        configure_logging(debug=True)

    ensure_installed(config=config)
    return EXIT_SUCCESS


if __name__ == "__main__":  # pragma: no cover - exercised via console script
    raise SystemExit(main())
