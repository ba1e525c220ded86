"""Build marketplace search URLs from trending queries.

Only the URL string is built here; fetching it is up to the caller.
"""

from __future__ import annotations

from plugin_query.search.trending import TrendingQuery

DEFAULT_MARKETPLACE_URL = "https://plugins.jetbrains.com/api/searchPlugins"


def build_search_url(base_url: str, query: TrendingQuery) -> str:
    """Append the query's URL parameters to ``base_url``.

    Args:
        base_url: Marketplace search endpoint.
        query: Parsed trending query.

    Returns:
        ``base_url`` unchanged when the query serializes to nothing,
        otherwise ``base_url?<params>`` (or ``&<params>`` when ``base_url``
        already carries a query string).
    """
    params = query.url_query()
    if not params:
        return base_url
    separator = "&" if "?" in base_url else "?"
    return f"{base_url}{separator}{params}"
