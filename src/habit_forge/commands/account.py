"""Account commands."""

import click
import questionary

from ..errors import HabitForgeError
from .base import (
    async_command,
    cli_session,
    echo_error,
    echo_info,
    echo_success,
    echo_warning,
    ensure_initialized,
    format_table,
    require_authenticated,
)


@click.group()
@click.pass_context
def account(ctx):
    """Manage your local account and balance."""
    ensure_initialized(ctx)


@account.command()
@click.option("--name", help="Login name (at least 5 characters)")
@click.option("--email", help="Email address")
@click.option("--password", help="Password")
@click.pass_context
@async_command
async def register(ctx, name: str | None, email: str | None, password: str | None):
    """Register the local account and sign in.

    Missing values are asked for interactively.
    """
    if name is None:
        name = await questionary.text("Choose a login name:").ask_async()
    if email is None:
        email = await questionary.text("Your email:").ask_async()
    if password is None:
        password = await questionary.password("Choose a password:").ask_async()

    if name is None or email is None or password is None:
        echo_info("Cancelled")
        return

    async with cli_session() as session:
        try:
            user = session.accounts.register(name, email, password)
        except HabitForgeError as e:
            echo_error(e.user_message)
            ctx.exit(1)
        echo_success(f"Registered as {user.name}")


@account.command()
@click.argument("identifier")
@click.option("--password", help="Password (prompted if omitted)")
@click.pass_context
@async_command
async def login(ctx, identifier: str, password: str | None):
    """Sign in with your login name or email."""
    if password is None:
        password = await questionary.password("Password:").ask_async()
        if password is None:
            echo_info("Cancelled")
            return

    async with cli_session() as session:
        try:
            session.accounts.login(identifier, password)
        except HabitForgeError as e:
            echo_error(e.user_message)
            ctx.exit(1)
        echo_success(f"Signed in as {session.profile.login_name}")


@account.command()
@async_command
async def logout():
    """Sign out and forget the stored session."""
    async with cli_session() as session:
        if not session.profile.is_authenticated:
            echo_warning("Not signed in")
            return
        session.accounts.logout()
    echo_success("Signed out")


@account.command()
@click.pass_context
@async_command
async def status(ctx):
    """Show your profile and balance."""
    async with cli_session() as session:
        require_authenticated(ctx, session)
        profile = session.profile
        user = profile.registered_user

        rows = [
            ["Login", profile.login_name],
            ["Email", user.email if user else "N/A"],
            ["Avatar", profile.avatar_ref or "default"],
            ["Balance", str(session.balance.balance)],
        ]
        click.echo()
        click.echo(format_table(["Field", "Value"], rows))
        click.echo()


@account.command()
@click.argument("amount", type=int)
@click.pass_context
@async_command
async def topup(ctx, amount: int):
    """Add virtual currency to your balance."""
    async with cli_session() as session:
        require_authenticated(ctx, session)
        try:
            balance = session.balance.top_up(amount)
        except HabitForgeError as e:
            echo_error(e.user_message)
            ctx.exit(1)
        echo_success(f"Balance topped up by {amount}, now {balance}")


@account.command()
@click.argument("new_name")
@click.pass_context
@async_command
async def rename(ctx, new_name: str):
    """Change your login name."""
    async with cli_session() as session:
        require_authenticated(ctx, session)
        try:
            session.accounts.change_login(new_name)
        except HabitForgeError as e:
            echo_error(e.user_message)
            ctx.exit(1)
        echo_success(f"Login changed to {session.profile.login_name}")
