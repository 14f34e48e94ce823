"""Core services: paths, settings, theme, state storage and command policy."""
