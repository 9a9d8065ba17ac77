"""Flask CLI commands seeding demo customers and products."""

from __future__ import annotations

import logging

import click
from flask import current_app
from flask.cli import with_appcontext

from storefront.core.extensions import db
from storefront.seeds import seed_data
from storefront.services._shared.errors import ServiceError

LOGGER = logging.getLogger(__name__)

SEEDERS = {
    "customers": seed_data.seed_customers,
    "sellers": seed_data.seed_sellers,
    "products": seed_data.seed_products,
}


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.getLogger(seed_data.__name__).setLevel(level)
    LOGGER.setLevel(level)


def _echo_summary(summary: dict[str, dict[str, int]]) -> None:
    """Print one line per table with created/existing counters."""
    click.echo("Seed summary:")
    if not summary:
        click.echo("  (no changes)")
        return
    width = max(len(name) for name in summary)
    for table, counters in sorted(summary.items()):
        click.echo(
            f"  {table.ljust(width)}  created={counters.get('created', 0):>2}"
            f"  existing={counters.get('existing', 0):>2}"
        )


def _ensure_non_production() -> None:
    """Abort destructive commands when running in production."""
    config = current_app.config
    if str(config.get("APP_ENV", "")).lower() == "production" or (
        not config.get("DEBUG") and not config.get("TESTING")
        and str(config.get("ENV", "production")).lower() == "production"
    ):
        raise click.UsageError(
            "The 'flask seed fresh' command is restricted to non-production environments."
        )


def _run(only: str | None, verbose: bool) -> dict[str, dict[str, int]]:
    if only is None:
        return seed_data.run_all(db, verbose=verbose)
    return SEEDERS[only](db, verbose=verbose)


@click.group("seed")
@click.option("--verbose", is_flag=True, help="Enable verbose logging for seeding.")
@click.pass_context
def seed_cli(ctx: click.Context, verbose: bool) -> None:
    """Demo data for the storefront database."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    _configure_logging(verbose)


@seed_cli.command("run")
@click.option(
    "--only",
    type=click.Choice(sorted(SEEDERS)),
    default=None,
    help="Seed a single table instead of everything.",
)
@click.pass_context
@with_appcontext
def run_command(ctx: click.Context, only: str | None) -> None:
    """Insert demo customers, sellers and products that are not present yet."""
    try:
        summary = _run(only, bool(ctx.obj.get("verbose", False)))
    except (ServiceError, RuntimeError) as exc:
        raise click.ClickException(f"Seeding failed: {exc}") from exc
    _echo_summary(summary)


@seed_cli.command("fresh")
@click.option("--yes", is_flag=True, help="Skip the destructive confirmation prompt.")
@click.pass_context
@with_appcontext
def fresh_command(ctx: click.Context, yes: bool) -> None:
    """Drop the storefront tables, recreate them and seed demo data."""
    _ensure_non_production()
    if not yes:
        click.confirm(
            "This will DROP the customers, sellers and products tables and recreate them. "
            "Continue?",
            abort=True,
        )
    LOGGER.info("Recreating database schema...")
    db.session.remove()
    db.drop_all()
    db.create_all()
    try:
        summary = _run(None, bool(ctx.obj.get("verbose", False)))
    except (ServiceError, RuntimeError) as exc:
        raise click.ClickException(f"Fresh seed failed: {exc}") from exc
    _echo_summary(summary)
