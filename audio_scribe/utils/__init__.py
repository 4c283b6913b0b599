"""Shared helpers: configuration constants, env loading, logging and paths."""
