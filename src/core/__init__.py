"""Configuration, constants and the in-memory clinic state."""
