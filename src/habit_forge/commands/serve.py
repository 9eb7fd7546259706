"""Web server command."""

import click

from ..config import Config
from .base import ensure_initialized


@click.command()
@click.option("--host", default=Config.HOST, help=f"Host to bind to (default: {Config.HOST})")
@click.option("--port", "-p", default=Config.PORT, type=int, help=f"Port to bind to (default: {Config.PORT})")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development")
@click.pass_context
def serve(ctx: click.Context, host: str, port: int, reload: bool):
    """Start the API server.

    The server holds challenges and the group week in memory; only the
    account snapshot (login and balance) is written to disk.

    Examples:

        # Start on default port (8000)
        habit-forge serve

        # Development mode with auto-reload
        habit-forge serve --reload
    """
    ensure_initialized(ctx)

    import uvicorn

    from ..web import create_app

    click.echo()
    click.echo(click.style("Starting habit-forge API server...", fg="green"))
    click.echo()
    click.echo(f"  Local:   http://{host}:{port}")
    click.echo(f"  Docs:    http://{host}:{port}/docs")
    click.echo()
    click.echo("Press Ctrl+C to stop the server.")
    click.echo()

    uvicorn.run(
        create_app() if not reload else "habit_forge.web:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=reload,
    )
