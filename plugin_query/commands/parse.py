"""Show how a search string is interpreted by a plugin listing."""

from __future__ import annotations

import json
from typing import Any

import click
from rich.markup import escape

from plugin_query.cli import EXIT_USAGE_ERROR, Context, join_query, pass_context
from plugin_query.config import LISTINGS
from plugin_query.search.installed import InstalledQuery
from plugin_query.search.trending import TrendingQuery
from plugin_query.utils.output import console, create_table, debug, error, format_flag


def trending_to_dict(query: TrendingQuery) -> dict[str, Any]:
    """Plain-data view of a trending query, for JSON output."""
    return {
        "listing": "trending",
        "outcome": query.outcome.value,
        "search_query": query.search_query,
        "tags": sorted(query.tags),
        "exclude_tags": sorted(query.exclude_tags),
        "sort_by": query.sort_by,
        "repository": query.repository,
        "url_query": query.url_query(),
    }


def installed_to_dict(query: InstalledQuery) -> dict[str, Any]:
    """Plain-data view of an installed query, for JSON output."""
    return {
        "listing": "installed",
        "outcome": query.outcome.value,
        "search_query": query.search_query,
        **query.flags(),
        "has_attributes": query.has_attributes,
    }


def _optional(value: str | None) -> str:
    if value is None:
        return "[flag.unset]-[/flag.unset]"
    return escape(value)


def _tag_list(tags: frozenset[str], style: str) -> str:
    if not tags:
        return "[flag.unset]-[/flag.unset]"
    return ", ".join(f"[{style}]{escape(tag)}[/{style}]" for tag in sorted(tags))


def _print_trending(query: TrendingQuery) -> None:
    table = create_table(title="Trending query", show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("Outcome", query.outcome.value)
    table.add_row("Search", _optional(query.search_query))
    table.add_row("Tags", _tag_list(query.tags, "tag.include"))
    table.add_row("Excluded tags", _tag_list(query.exclude_tags, "tag.exclude"))
    table.add_row("Sort by", _optional(query.sort_by))
    table.add_row("Repository", _optional(query.repository))
    table.add_row("URL query", _optional(query.url_query() or None))
    console.print(table)


def _print_installed(query: InstalledQuery) -> None:
    table = create_table(title="Installed query", show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("Outcome", query.outcome.value)
    table.add_row("Search", _optional(query.search_query))
    for name, value in query.flags().items():
        table.add_row(name.replace("_", " ").capitalize(), format_flag(value))
    table.add_row("Has attributes", "yes" if query.has_attributes else "no")
    console.print(table)


@click.command("parse")
@click.argument("query", nargs=-1)
@click.option(
    "--listing",
    "-l",
    type=click.Choice(LISTINGS),
    default=None,
    help="Listing whose attributes to apply (default: from config)",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format (default: table)",
)
@pass_context
def cli(
    ctx: Context,
    query: tuple[str, ...],
    listing: str | None,
    output_format: str,
) -> None:
    """Parse QUERY and show the resulting filters.

    QUERY arguments are joined with spaces. Quote the whole query to keep
    phrases like 'tag:"Code tools"' intact.

    \b
    Trending attributes:
      tag:NAME, -tag:NAME      include / exclude a tag
      sort_by:KEY              featured, updates, downloads, rating, name
      repository:URL           custom plugin repository

    \b
    Installed attributes:
      status:VALUE, -status:VALUE
        enabled, disabled, bundled, installed, invalid,
        outdated, uninstalled, inactive
    """
    config = ctx.config
    if config is None:
        error("Configuration not loaded")
        raise SystemExit(EXIT_USAGE_ERROR)

    listing = listing or config.default_listing
    query_string = join_query(query)
    debug(escape(f"Parsing {query_string!r} for the {listing} listing"))

    if listing == "installed":
        installed = InstalledQuery.from_string(query_string)
        if output_format == "json":
            click.echo(json.dumps(installed_to_dict(installed), indent=2))
        else:
            _print_installed(installed)
        return

    trending = TrendingQuery.from_string(query_string)
    if output_format == "json":
        click.echo(json.dumps(trending_to_dict(trending), indent=2))
    else:
        _print_trending(trending)
