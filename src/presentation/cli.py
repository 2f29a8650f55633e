"""
CLI Presentation Layer - Main Entry Point
Clean routing to modular commands
"""

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

# Import commands
from .commands.build_command import build_command
from .commands.inspect_command import inspect_command
from .commands.recent_command import recent_command
from .commands.validate_command import validate_command


def configure_logging(verbose: bool = False) -> None:
    """Route log records through rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def cli(verbose):
    """🔎 Search Index CLI - Static search artifact builder"""
    configure_logging(verbose)


# Register commands
cli.add_command(build_command)
cli.add_command(inspect_command)
cli.add_command(recent_command)
cli.add_command(validate_command)


if __name__ == "__main__":
    cli()
