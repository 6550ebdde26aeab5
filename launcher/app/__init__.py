"""Launcher application layer: focus ownership and input routing."""
