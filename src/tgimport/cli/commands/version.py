"""Version command - show tgimport version."""

import click
from ... import __version__


@click.command()
def version():
    """Show tgimport version."""
    click.echo(f"tgimport version {__version__}")
