"""Structured search queries for the trending and installed plugin listings."""

from plugin_query.search.filtering import (
    PluginState,
    filter_installed,
    load_inventory,
    matches,
)
from plugin_query.search.installed import InstalledAttributes, InstalledQuery
from plugin_query.search.parser import (
    AttributeEvent,
    AttributeSink,
    ParseOutcome,
    ParseResult,
    parse_query,
)
from plugin_query.search.tokenizer import split_query
from plugin_query.search.trending import TrendingAttributes, TrendingQuery

__all__ = [
    "AttributeEvent",
    "AttributeSink",
    "InstalledAttributes",
    "InstalledQuery",
    "ParseOutcome",
    "ParseResult",
    "PluginState",
    "TrendingAttributes",
    "TrendingQuery",
    "filter_installed",
    "load_inventory",
    "matches",
    "parse_query",
    "split_query",
]
