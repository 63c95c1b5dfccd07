"""Main CLI entry point."""

import logging

import click
from fueleu.config import load_config
from fueleu.database.factories import create_sqlite_database

# Import and register all commands at module level
from fueleu.cli.commands import (
    init_routes,
    route,
    compliance,
    banking,
    pool,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides FUELEU_DB_PATH environment variable)",
    envvar="FUELEU_DB_PATH",
)
@click.option(
    "--target-intensity",
    type=float,
    help="Target GHG intensity in gCO2e/MJ (overrides FUELEU_TARGET_INTENSITY, default 89.3368)",
)
@click.option("--verbose", "-v", is_flag=True, help="Log ledger operations to stderr")
@click.pass_context
def cli(ctx, db_path: str | None, target_intensity: float | None, verbose: bool):
    """FuelEU - Maritime compliance balance ledger.

    Compute ship compliance balances from route data, bank surplus for later
    years (Article 20) and pool balances between ships (Article 21).
    """
    ctx.ensure_object(dict)

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        try:
            ctx.obj["config"] = load_config(target_intensity=target_intensity)
        except ValueError as e:
            click.echo(f"Error: {e}", err=True)
            ctx.exit(1)
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db


# Register all commands
init_routes.register_commands(cli)
route.register_commands(cli)
compliance.register_commands(cli)
banking.register_commands(cli)
pool.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
