"""CLI commands implementation."""

import click
import clicycle

from config import get_config
from prefkit import __version__
from prefkit.interfaces.cli import setup_logging
from prefkit.interfaces.cli.slots import get_slot, list_slots, remove_slot, set_slot

# Configure clicycle
clicycle.configure(app_name="prefkit")


@click.group()
@click.version_option(version=__version__, prog_name="prefkit")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def cli(verbose: bool):
    """prefkit - inspect and edit stored preferences."""
    setup_logging(get_config().runtime.level, verbose)


@cli.group()
def slots():
    """Work with raw store slots (prefix + key)."""
    pass


@slots.command(name="list")
@click.option("--prefix", "-p", default=None, help="Only show slots starting with this prefix")
def list_slots_command(prefix: str | None):
    """List stored slots."""
    list_slots(prefix if prefix is not None else get_config().store.prefix)


@slots.command(name="get")
@click.argument("key")
def get_slot_command(key: str):
    """Show a stored slot."""
    get_slot(key)


@slots.command(name="set")
@click.argument("key")
@click.argument("value")
@click.option(
    "--type",
    "-t",
    "value_type",
    type=click.Choice(["str", "int", "float", "bool", "url"]),
    default="str",
    help="How to interpret VALUE",
)
def set_slot_command(key: str, value: str, value_type: str):
    """Store VALUE under KEY."""
    set_slot(key, value, value_type)


@slots.command(name="remove")
@click.argument("key")
def remove_slot_command(key: str):
    """Remove a stored slot."""
    remove_slot(key)


if __name__ == "__main__":
    cli()
