"""plugin-query: structured search queries for plugin listings."""

__version__ = "0.3.0"
