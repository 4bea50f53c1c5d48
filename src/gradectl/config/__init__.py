"""Configuration — gradectl.toml discovery, settings, and logging."""
