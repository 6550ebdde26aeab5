"""Launcher infrastructure: env loading and logging policy."""
