"""Initialize project command."""

import click

from ..db import get_db_path, init_db
from .base import async_command, echo_info, echo_success, get_data_dir


@click.command()
@async_command
async def init():
    """Initialize the habit-forge data directory and database."""
    data_dir = get_data_dir()
    db_path = get_db_path(data_dir)

    echo_info(f"Initializing habit-forge in {data_dir}")

    await init_db(db_path)
    echo_success("Database initialized")

    click.echo()
    click.echo("habit-forge is ready to use!")
    click.echo()
    click.echo("Next steps:")
    click.echo("  1. Create your account:")
    click.echo("     habit-forge account register")
    click.echo("     habit-forge account topup 1000")
    click.echo()
    click.echo("  2. Start the API and track challenges:")
    click.echo("     habit-forge serve")
