"""Headless navigation models for launcher surfaces."""
