"""Configuration: settings, devctl.toml discovery, section models, logging."""
