"""Utility modules for plugin-query."""
