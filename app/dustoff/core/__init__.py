"""Core infrastructure: paths, settings, theme and error types."""
