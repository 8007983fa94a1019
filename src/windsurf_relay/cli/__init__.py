"""Console entry points for windsurf-relay.

- ``windsurf-relay``: relay to the platform binary (``main``)
- ``windsurf-relay-install``: download the binary (``install_main``)
- ``windsurf-relay-status``: show platform and binary status (``status_main``)
"""
