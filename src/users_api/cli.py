#!/usr/bin/env python3
"""
Main CLI entry point for the Users API server.
"""

import os
import sys

import click
import uvicorn

from users_api import __version__
from users_api.config import settings
from users_api.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="users-api")
def cli() -> None:
    """Users API CLI - run the server and inspect the schema."""
    pass


@cli.command()
@click.option(
    "--host",
    default=settings.api_host,
    show_default=True,
    help="Host to bind to",
)
@click.option(
    "--port",
    default=settings.api_port,
    show_default=True,
    type=int,
    help="Port to bind to (USERS_API_API_PORT or PORT override the default)",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--workers",
    default=1,
    type=int,
    help="Number of worker processes; each holds its own user list (default: 1)",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(
    host: str,
    port: int,
    reload: bool,
    workers: int,
    log_level: str,
) -> None:
    """Start the Users API server."""
    configure_logging(debug=(log_level == "debug"), log_level=log_level)

    logger.info(
        "Starting Users API server",
        host=host,
        port=port,
        reload=reload,
        workers=workers,
        log_level=log_level,
    )
    logger.info("GraphQL endpoint", url=f"http://localhost:{port}/graphql")

    # Reloaded and worker processes import the app afresh and read these
    if log_level == "debug":
        os.environ["USERS_API_DEBUG"] = "true"
        os.environ["USERS_API_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("USERS_API_DEBUG", "false")
        os.environ.setdefault("USERS_API_LOG_LEVEL", log_level)

    try:
        if reload or workers > 1:
            uvicorn.run(
                "users_api.api.app:app",
                host=host,
                port=port,
                reload=reload,
                workers=(workers if not reload else 1),
                log_level=log_level,
                access_log=True,
            )
        else:
            from users_api.api.app import app

            uvicorn.run(
                app,
                host=host,
                port=port,
                log_level=log_level,
                access_log=True,
            )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command()
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the SDL to this file instead of stdout",
)
def schema(output: str | None) -> None:
    """Print the GraphQL schema as SDL."""
    from users_api.graphql.schema import export_sdl

    sdl = export_sdl()
    if output:
        with open(output, "w", encoding="utf-8") as fh:
            fh.write(sdl + "\n")
        click.echo(f"✓ Schema written to {output}")
    else:
        click.echo(sdl)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
