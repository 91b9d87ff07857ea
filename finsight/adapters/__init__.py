"""Adapters package (CLI and user interface entry points)."""
