#!/usr/bin/env python3
"""
Main CLI entry point for the blogql server.
"""

import asyncio
import os
import sys

import click
import uvicorn

from blogql import __version__
from blogql.config import MissingConfigurationError
from blogql.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="blogql")
def cli() -> None:
    """blogql CLI - run the server and manage the database."""
    pass


@cli.command()
@click.option("--host", default="0.0.0.0", help="Host to bind to (default: 0.0.0.0)")
@click.option("--port", default=4000, type=int, help="Port to bind to (default: 4000)")
@click.option("--reload", is_flag=True, default=False, help="Enable auto-reload for development")
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the blogql API server."""
    configure_logging(debug=(log_level == "debug"), log_level=log_level)

    logger.info("Starting blogql API server", host=host, port=port, reload=reload)

    # The app module reads these at import time
    if log_level == "debug":
        os.environ["BLOGQL_DEBUG"] = "true"
        os.environ["BLOGQL_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("BLOGQL_DEBUG", "false")
        os.environ.setdefault("BLOGQL_LOG_LEVEL", log_level)

    try:
        uvicorn.run(
            "blogql.api.app:app",
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command()
@click.option("--users", default=3, type=int, help="Number of users (default: 3)")
@click.option("--posts", default=5, type=int, help="Number of posts (default: 5)")
@click.option("--comments", default=8, type=int, help="Number of comments (default: 8)")
@click.option("--seed", "random_seed", default=None, type=int, help="Random seed")
def seed(users: int, posts: int, comments: int, random_seed: int | None) -> None:
    """Seed the database with sample users, posts and comments."""
    from blogql.database import close_database, create_document_store, init_database
    from blogql.database.seed_data import seed_sample_data

    configure_logging()

    async def do_seed():
        try:
            init_database()
            result = await seed_sample_data(
                create_document_store(),
                users=users,
                posts=posts,
                comments=comments,
                seed=random_seed,
            )
        finally:
            await close_database()
        return result

    try:
        result = asyncio.run(do_seed())
    except MissingConfigurationError as e:
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)
    except Exception as e:
        logger.error("Failed to seed database", error=str(e))
        click.echo(f"✗ Error seeding database: {e}", err=True)
        sys.exit(1)

    click.echo("✓ Database seeded successfully")
    click.echo(f"  Users: {len(result.user_ids)}")
    click.echo(f"  Posts: {len(result.post_ids)}")
    click.echo(f"  Comments: {len(result.comment_ids)}")


@cli.command()
def check() -> None:
    """Check database connectivity and ensure indexes."""
    from blogql.database import close_database, create_document_store, init_database
    from blogql.validation import validate_database

    configure_logging()

    async def do_check():
        try:
            init_database()
            return await validate_database(create_document_store())
        finally:
            await close_database()

    try:
        results = asyncio.run(do_check())
    except MissingConfigurationError as e:
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)

    if not results["valid"]:
        for error in results["errors"]:
            click.echo(f"✗ {error}", err=True)
        sys.exit(1)
    click.echo("✓ Database reachable and indexes in place")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
