"""Allow ``python -m plugin_query``."""

from plugin_query.cli import cli

if __name__ == "__main__":
    cli()
