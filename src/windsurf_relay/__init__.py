"""windsurf-relay - launcher for the prebuilt windsurf-relay MCP client.

Downloads the platform-specific release binary at install time and relays
every invocation to it with the ``--mcp`` flag.
"""

__version__ = "0.1.0"
