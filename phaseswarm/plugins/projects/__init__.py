"""Inspect the project registry."""
