"""Compliance balance commands."""

import click
from fueleu.cli.error_handling import handle_domain_error
from fueleu.domain.compliance import ComplianceService
from fueleu.domain.errors import DomainError
from fueleu.utils.amount_parser import parse_amount


def _status(cb: float) -> str:
    if cb > 0:
        return "surplus"
    if cb < 0:
        return "deficit"
    return "neutral"


@click.group()
def compliance_group():
    """Compute and inspect compliance balances."""
    pass


@compliance_group.command("compute")
@click.option("--year", type=int, help="Only compute for routes of this year")
@click.pass_context
def compute(ctx, year: int | None):
    """Compute CB for every route and store it (ship ID = route ID)."""
    service = ComplianceService(ctx.obj["db"], ctx.obj["config"])

    results = service.compute_and_store(year=year)
    if not results:
        click.echo("No routes found. Run 'fueleu init-routes' first.")
        return

    click.echo(f"\nComputed CB for {len(results)} ship(s):")
    click.echo("-" * 80)
    click.echo(f"{'Ship':<8} {'Year':<6} {'Energy (MJ)':>16} {'gCO2e/MJ':>10} {'CB (gCO2eq)':>20}  Status")
    click.echo("-" * 80)
    for r in results:
        click.echo(
            f"{r.ship_id:<8} {r.year:<6} {r.energy_in_scope:>16,.0f} {r.actual_intensity:>10.4f} "
            f"{r.cb:>20,.2f}  {_status(r.cb)}"
        )


@compliance_group.command("show")
@click.argument("ship_id", metavar="SHIP_ID")
@click.option("--year", type=int, required=True, help="Reporting year")
@click.pass_context
def show(ctx, ship_id: str, year: int):
    """Show the stored CB of a ship."""
    service = ComplianceService(ctx.obj["db"], ctx.obj["config"])

    record = service.get_compliance(ship_id, year)
    if record is None:
        click.echo(f"Error: No compliance record for ship {ship_id} in {year}", err=True)
        ctx.exit(1)

    click.echo(f"Ship {record.ship_id} ({record.year}): {record.cb:,.2f} gCO2eq ({_status(record.cb)})")


@compliance_group.command("set")
@click.argument("ship_id", metavar="SHIP_ID")
@click.option("--year", type=int, required=True, help="Reporting year")
@click.option("--cb", "cb_str", required=True, help="Compliance balance in gCO2eq (negative for deficit)")
@click.pass_context
def set_cb(ctx, ship_id: str, year: int, cb_str: str):
    """Store a CB value for a ship directly.

    Examples:
        fueleu compliance set R003 --year 2024 --cb -500
    """
    service = ComplianceService(ctx.obj["db"], ctx.obj["config"])

    try:
        cb = parse_amount(cb_str)
        service.set_compliance(ship_id, year, cb)
    except (DomainError, ValueError) as e:
        handle_domain_error(ctx, e)

    click.echo(f"Set CB of ship {ship_id} ({year}) to {cb:,.2f} gCO2eq")


@compliance_group.command("list")
@click.option("--year", type=int, help="Only show balances of this year")
@click.pass_context
def list_cb(ctx, year: int | None):
    """List stored compliance balances."""
    service = ComplianceService(ctx.obj["db"], ctx.obj["config"])

    records = service.list_compliance(year=year)
    if not records:
        click.echo("No compliance records found.")
        return

    click.echo("\nCompliance balances:")
    click.echo("-" * 50)
    for r in records:
        click.echo(f"{r.ship_id:<8} {r.year:<6} {r.cb:>20,.2f}  {_status(r.cb)}")


def register_commands(cli):
    """Register compliance commands with main CLI."""
    cli.add_command(compliance_group, name="compliance")
