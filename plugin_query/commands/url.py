"""Print the marketplace search URL for a trending query."""

from __future__ import annotations

import click
from rich.markup import escape

from plugin_query.cli import EXIT_USAGE_ERROR, Context, join_query, pass_context
from plugin_query.marketplace import build_search_url
from plugin_query.search.parser import ParseOutcome
from plugin_query.search.trending import TrendingQuery
from plugin_query.utils.output import debug, error


@click.command("url")
@click.argument("query", nargs=-1)
@click.option(
    "--base-url",
    "-b",
    default=None,
    help="Marketplace search endpoint (default: from config)",
)
@pass_context
def cli(ctx: Context, query: tuple[str, ...], base_url: str | None) -> None:
    """Print the marketplace search URL for QUERY.

    Only tag:, sort_by: and the free text end up in the URL; excluded tags
    and repository: are listing-side filters.

    \b
    Examples:
      plugin-query url 'sort_by:downloads tag:Theme'
      plugin-query url --base-url https://example.org/api/search kotlin
    """
    config = ctx.config
    if config is None:
        error("Configuration not loaded")
        raise SystemExit(EXIT_USAGE_ERROR)

    trending = TrendingQuery.from_string(join_query(query))
    if trending.outcome is ParseOutcome.FALLBACK:
        debug("Query is ambiguous; searching for the raw text")
    if trending.exclude_tags:
        debug(f"Excluded tags are not sent: {escape(', '.join(sorted(trending.exclude_tags)))}")

    click.echo(build_search_url(base_url or config.marketplace_url, trending))
