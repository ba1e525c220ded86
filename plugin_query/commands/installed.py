"""Filter an installed-plugin inventory with a search query."""

from __future__ import annotations

import io
import json
from dataclasses import asdict
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from plugin_query.cli import (
    EXIT_INVENTORY_ERROR,
    EXIT_USAGE_ERROR,
    Context,
    join_query,
    pass_context,
)
from plugin_query.exceptions import InventoryError
from plugin_query.search.filtering import PluginState, filter_installed, load_inventory
from plugin_query.search.installed import InstalledQuery
from plugin_query.utils.output import (
    THEME,
    console,
    create_table,
    debug,
    error,
    info,
    verbose,
)

_RENDER_WIDTH = 1000

# Columns shown in table output: (header, PluginState attribute)
_FLAG_COLUMNS: tuple[tuple[str, str], ...] = (
    ("Enabled", "enabled"),
    ("Bundled", "bundled"),
    ("Invalid", "invalid"),
    ("Update", "need_update"),
    ("Deleted", "deleted"),
    ("Restart", "need_restart"),
)


def _print_table(plugins: list[PluginState], query_string: str) -> None:
    """Print matching plugins as a Rich table."""
    info(f"Installed: {escape(query_string) or '(all)'} ({len(plugins)} results)")

    table = create_table(show_header=True, header_style="bold")
    table.add_column("Name", style="plugin.name", no_wrap=True)
    table.add_column("ID", no_wrap=True)
    table.add_column("Vendor")
    table.add_column("Version", justify="right")
    for header, _ in _FLAG_COLUMNS:
        table.add_column(header, justify="center")

    for plugin in plugins:
        row = [
            escape(plugin.name),
            escape(plugin.id),
            escape(plugin.vendor or ""),
            escape(plugin.version or ""),
        ]
        row.extend("yes" if getattr(plugin, attr) else "" for _, attr in _FLAG_COLUMNS)
        table.add_row(*row)

    # Render wide so columns size to their content instead of the terminal
    buf = io.StringIO()
    render_console = Console(
        file=buf,
        theme=THEME,
        force_terminal=not console.no_color,
        width=_RENDER_WIDTH,
        no_color=console.no_color,
    )
    render_console.print(table)
    click.echo(buf.getvalue(), nl=False)


@click.command("installed")
@click.argument("query", nargs=-1)
@click.option(
    "--inventory",
    "-i",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    required=True,
    help="JSON file listing installed plugins",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["table", "ids", "json"]),
    default="table",
    help="Output format (default: table)",
)
@pass_context
def cli(
    ctx: Context,
    query: tuple[str, ...],
    inventory: Path,
    output_format: str,
) -> None:
    """Filter installed plugins with QUERY.

    The inventory is a JSON array of objects with an "id" and optional
    "name", "vendor", "version" and boolean "enabled", "bundled",
    "invalid", "need_update", "deleted", "need_restart" keys.

    \b
    Examples:
      plugin-query installed status:disabled -i plugins.json
      plugin-query installed 'status:outdated -status:bundled' -i plugins.json
      plugin-query installed kotlin -i plugins.json --format ids
    """
    if ctx.config is None:
        error("Configuration not loaded")
        raise SystemExit(EXIT_USAGE_ERROR)

    query_string = join_query(query)
    parsed = InstalledQuery.from_string(query_string)
    debug(escape(f"Installed flags: {parsed.flags()} (search: {parsed.search_query!r})"))

    try:
        plugins = load_inventory(inventory)
    except InventoryError as e:
        error(escape(str(e)), hint="Expected a JSON array of plugin objects")
        raise SystemExit(EXIT_INVENTORY_ERROR)

    matching = filter_installed(plugins, parsed)

    if output_format == "json":
        click.echo(json.dumps([asdict(plugin) for plugin in matching], indent=2))
    elif output_format == "ids":
        for plugin in matching:
            click.echo(plugin.id)
    else:
        verbose(escape(f"Loaded {len(plugins)} plugins from {inventory}"))
        _print_table(matching, query_string)
