"""
README regenerator - Main entry point.

Regenerates the README of every member of a workspace with an external
documentation generator, then the README of the workspace itself.
"""

import sys

import click

from utils.Args import Args
from utils.Errors import RegenError
from utils.Logger import Logger


def setup() -> None:
    """
    Initialize the application: configuration and logging.

    Note: Args must be initialized before Logger since Logger configuration
    comes from Args. Args uses print() for warnings, not Logger, so this order is safe.
    """
    Args.initialize()

    Logger.initialize(log_level=Args.log_level, log_file=Args.log_file, log_color=Args.log_color)

    Logger.debug(f"Python version: {sys.version}")
    if Args.config_file:
        Logger.info(f"Using config file: {Args.config_file}")


def main() -> None:
    """Main entry point for the README regenerator."""
    setup()

    from orchestration import Orchestrator

    Orchestrator.run()


def cli() -> None:
    """Console script wrapper: maps failures to a non-zero exit code."""
    try:
        main()
    except SystemExit:
        raise  # Preserve exit code from --help etc.
    except click.ClickException as e:
        print(e.format_message(), file=sys.stderr)
        sys.exit(e.exit_code)
    except RegenError:
        # Already logged where it was raised
        sys.exit(1)


if __name__ == "__main__":
    cli()
