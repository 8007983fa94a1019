"""Allow ``python -m windsurf_relay`` to relay to the bundled binary."""

from windsurf_relay.cli.main import main

if __name__ == "__main__":  # pragma: no cover - exercised via python -m
    raise SystemExit(main())
