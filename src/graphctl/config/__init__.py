"""Configuration: TOML discovery, layered settings, and logging setup."""
