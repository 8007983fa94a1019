"""Core utilities shared by the relay and the installer."""
