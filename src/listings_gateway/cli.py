#!/usr/bin/env python3
"""
Main CLI entry point for the listings gateway.
"""

import os
import sys

import click
import uvicorn

from listings_gateway import __version__
from listings_gateway.config import Settings, settings
from listings_gateway.errors import StartupError
from listings_gateway.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="listings-gateway")
def cli() -> None:
    """Listings gateway CLI - run the GraphQL server and inspect its schema."""
    pass


@cli.command()
@click.option(
    "--host",
    default=None,
    help=f"Host to bind to (default: {settings.api_host})",
)
@click.option(
    "--port",
    default=None,
    type=int,
    help=f"Port to bind to (default: {settings.api_port}; 0 picks a free port)",
)
@click.option(
    "--reload",
    is_flag=True,
    default=settings.api_reload,
    help=(
        "Enable auto-reload for development. Startup failures are not fatal in this "
        "mode: the reloader keeps watching and retries on the next change"
    ),
)
@click.option(
    "--log-level",
    default=settings.log_level.lower(),
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level",
)
def serve(host: str | None, port: int | None, reload: bool, log_level: str) -> None:
    """Start the GraphQL gateway server."""
    if host is None:
        host = settings.api_host
    if port is None:
        port = settings.api_port

    # Reload workers re-import the app and read their settings from the environment
    if log_level == "debug":
        os.environ["LISTINGS_DEBUG"] = "true"
    os.environ["LISTINGS_LOG_LEVEL"] = log_level

    configure_logging(debug=settings.debug or log_level == "debug", level=log_level)

    logger.info(
        "Starting listings gateway server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    if reload:
        uvicorn.run(
            "listings_gateway.api.app:create_app",
            factory=True,
            host=host,
            port=port,
            reload=True,
            log_level=log_level,
        )
        return

    from listings_gateway.api.app import create_app

    try:
        app = create_app(Settings())
    except StartupError as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)

    server = uvicorn.Server(
        uvicorn.Config(
            app,
            host=host,
            port=port,
            log_level=log_level,
            lifespan="on",
            access_log=True,
        )
    )

    try:
        server.run()
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
        return
    except SystemExit as e:
        # uvicorn exits with its own status when the lifespan or the bind fails
        if e.code not in (0, None):
            logger.error("Server startup failed", host=host, port=port, status=e.code)
            sys.exit(1)
        raise

    if not server.started:
        logger.error("Server startup failed", host=host, port=port)
        sys.exit(1)

    logger.info("Server stopped")


@cli.command("export-schema")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the SDL to this file instead of stdout",
)
def export_schema(output: str | None) -> None:
    """Print the GraphQL schema in SDL form."""
    from listings_gateway.graphql.schema import export_sdl

    sdl = export_sdl()
    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(sdl + "\n")
        click.echo(f"✓ Schema written to {output}")
    else:
        click.echo(sdl)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
