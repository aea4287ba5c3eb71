"""Core infrastructure: event bus, hidden logger, command metadata."""
