"""Command-line interface for plugin-query."""

from __future__ import annotations

import os
from pathlib import Path

import click
from rich.markup import escape

from plugin_query import __version__
from plugin_query.config import Config, load_config
from plugin_query.exceptions import ConfigError
from plugin_query.utils.output import (
    error,
    set_color,
    set_verbosity,
    warning,
)

EXIT_USAGE_ERROR = 1
EXIT_INVENTORY_ERROR = 2


class Context:
    """Shared context for all commands."""

    def __init__(self) -> None:
        self.config: Config | None = None
        self.verbose: bool = False
        self.debug: bool = False
        self.quiet: bool = False


pass_context = click.make_pass_decorator(Context, ensure=True)


def join_query(words: tuple[str, ...]) -> str:
    """Join QUERY arguments back into a single raw query string."""
    return " ".join(words)


@click.group()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=False, path_type=Path),
    help="Path to config file (default: ~/.config/plugin-query/config.toml)",
)
@click.option(
    "--no-color",
    is_flag=True,
    default=False,
    help="Disable colored output",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Enable verbose output",
)
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Enable debug output (implies --verbose)",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    default=False,
    help="Suppress non-error output",
)
@click.version_option(version=__version__, prog_name="plugin-query")
@click.pass_context
def cli(
    ctx: click.Context,
    config: Path | None,
    no_color: bool,
    verbose: bool,
    debug: bool,
    quiet: bool,
) -> None:
    """plugin-query: Parse plugin search queries into structured filters.

    A query mixes free text with name:value attributes. Prefix an
    attribute with - to invert it.

    Examples:

    \b
        # Trending listing: tags, sort order, free text
        plugin-query parse 'tag:Database -tag:Paid sort_by:rating postgres'

    \b
        # Marketplace URL for a query
        plugin-query url 'sort_by:downloads tag:Theme'

    \b
        # Filter an installed-plugin inventory
        plugin-query installed 'status:disabled' --inventory plugins.json
    """
    # Initialize context
    ctx.ensure_object(Context)
    app_ctx = ctx.obj
    app_ctx.verbose = verbose or debug
    app_ctx.debug = debug
    app_ctx.quiet = quiet

    # Configure module-level verbosity for output helpers
    set_verbosity(verbose=verbose, debug=debug)

    # Configure color output: disabled by --no-color, NO_COLOR env, or config
    disable_color = no_color or os.environ.get("NO_COLOR") is not None

    if disable_color:
        set_color(False)

    # Load configuration
    try:
        loaded_config, warnings = load_config(config)
    except ConfigError as e:
        error(escape(str(e)))
        ctx.exit(EXIT_USAGE_ERROR)
        return

    app_ctx.config = loaded_config

    # Apply config settings
    if not disable_color and not loaded_config.colored_output:
        set_color(False)

    # Show warnings unless quiet (the missing-file notice only with --verbose)
    if not quiet:
        for warn in warnings:
            if loaded_config.config_path is None and not app_ctx.verbose:
                continue
            warning(warn)


@cli.command("help")
@click.argument("command", required=False, nargs=-1)
@click.pass_context
def help_cmd(ctx: click.Context, command: tuple[str, ...]) -> None:
    """Show help for a command."""
    group = cli
    # Resolve subcommand chain
    for name in command:
        cmd = group.get_command(ctx, name)
        if cmd is None:
            error(f"Unknown command: {name}")
            ctx.exit(EXIT_USAGE_ERROR)
            return
        if isinstance(cmd, click.Group):
            group = cmd
        else:
            click.echo(cmd.get_help(ctx))
            return
    # Print group help
    click.echo(group.get_help(ctx))


def register_commands() -> None:
    """Register all commands from the commands package."""
    from plugin_query.commands import discover_commands

    for command in discover_commands():
        cli.add_command(command)


# Register commands on import
register_commands()
