"""devctl: developer console commands for local project tooling."""

__version__ = "0.1.0"
