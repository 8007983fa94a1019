"""Exit codes for the windsurf-relay entry points.

The relay itself exits with the child's code; these cover the launcher's
own outcomes:
- 0: Success
- 1: Relay could not run the binary (unsupported platform, missing binary,
  spawn failure, or the child had no exit code)
- 3: Invalid usage (bad arguments, unreadable config)
"""

from __future__ import annotations

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_INVALID_USAGE = 3
