"""CLI entry point for habit-forge."""

import logging

import click

from .commands import account, init, serve
from .config import Config


@click.group()
@click.version_option(version="0.1.0", prog_name="habit-forge")
def main():
    """habit-forge: habit tracking with staked challenges.

    Stake virtual currency on personal exercise challenges or join the
    weekly group pool.

    Example usage:

        # Initialize the project
        habit-forge init

        # Create an account and add funds
        habit-forge account register
        habit-forge account topup 1000

        # Run the API
        habit-forge serve
    """
    logging.basicConfig(level=Config.LOG_LEVEL, format=Config.log_format())


# Register commands
main.add_command(init)
main.add_command(account)
main.add_command(serve)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
