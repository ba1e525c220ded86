"""Initialize configuration file for plugin-query."""

from __future__ import annotations

from importlib import resources
from pathlib import Path

import click

from plugin_query.cli import EXIT_USAGE_ERROR, Context, pass_context
from plugin_query.config import get_default_config_path
from plugin_query.utils.output import error, info, success


def _load_example_config() -> str:
    """Load the example configuration from package data."""
    return resources.files("plugin_query").joinpath("config.example.toml").read_text()


@click.command("init-config")
@click.option(
    "--force",
    "-f",
    is_flag=True,
    default=False,
    help="Overwrite existing config file",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    default=None,
    help="Output path for config file (default: ~/.config/plugin-query/config.toml)",
)
@click.option(
    "--stdout",
    "to_stdout",
    is_flag=True,
    default=False,
    help="Print the example config instead of writing a file",
)
@pass_context
def cli(ctx: Context, force: bool, output: Path | None, to_stdout: bool) -> None:
    """Create a new configuration file with default settings.

    The generated config file includes all available options with
    their defaults and documentation comments.

    Examples:

    \b
      # Create config at default location
      plugin-query init-config

    \b
      # Create config at custom location
      plugin-query init-config --output ./my-config.toml

    \b
      # Overwrite existing config
      plugin-query init-config --force

    \b
      # Print the example config
      plugin-query init-config --stdout
    """
    if to_stdout:
        click.echo(_load_example_config(), nl=False)
        return

    config_path = output if output is not None else get_default_config_path()
    config_path = config_path.expanduser().resolve()

    if config_path.exists() and not force:
        error(
            f"Config file already exists: {config_path}",
            hint="Use --force to overwrite",
        )
        raise SystemExit(EXIT_USAGE_ERROR)

    config_content = _load_example_config()

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(config_content)
    except OSError as e:
        error(f"Failed to write config file: {e}")
        raise SystemExit(EXIT_USAGE_ERROR)

    success(f"Created config file: {config_path}")
    info("Edit this file to customize your settings.")
