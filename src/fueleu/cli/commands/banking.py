"""Banking commands (Article 20)."""

import click
from fueleu.cli.error_handling import handle_domain_error
from fueleu.domain.banking import BankingService
from fueleu.domain.entities import BankingResult
from fueleu.domain.errors import DomainError
from fueleu.utils.amount_parser import parse_amount


def _echo_result(result: BankingResult) -> None:
    click.echo(f"  CB before: {result.cb_before:,.2f} gCO2eq")
    click.echo(f"  Applied:   {result.applied:+,.2f} gCO2eq")
    click.echo(f"  CB after:  {result.cb_after:,.2f} gCO2eq")


@click.group()
def bank_group():
    """Bank surplus and apply banked surplus."""
    pass


@bank_group.command("deposit")
@click.argument("ship_id", metavar="SHIP_ID")
@click.option("--year", type=int, required=True, help="Reporting year with the surplus")
@click.option("--amount", "amount_str", required=True, help="Amount to bank in gCO2eq")
@click.pass_context
def deposit(ctx, ship_id: str, year: int, amount_str: str):
    """Bank surplus CB of a ship.

    Examples:
        fueleu bank deposit R002 --year 2024 --amount 400
    """
    service = BankingService(ctx.obj["db"])

    try:
        amount = parse_amount(amount_str)
        result = service.bank_surplus(ship_id, year, amount)
    except (DomainError, ValueError) as e:
        handle_domain_error(ctx, e)

    click.echo(f"Banked surplus for ship {ship_id} ({year}):")
    _echo_result(result)


@bank_group.command("apply")
@click.argument("ship_id", metavar="SHIP_ID")
@click.option("--year", type=int, required=True, help="Reporting year with the deficit")
@click.option("--amount", "amount_str", required=True, help="Amount to apply in gCO2eq")
@click.pass_context
def apply(ctx, ship_id: str, year: int, amount_str: str):
    """Apply banked surplus to a ship's deficit.

    Examples:
        fueleu bank apply R003 --year 2025 --amount 300
    """
    service = BankingService(ctx.obj["db"])

    try:
        amount = parse_amount(amount_str)
        result = service.apply_banked_surplus(ship_id, year, amount)
    except (DomainError, ValueError) as e:
        handle_domain_error(ctx, e)

    click.echo(f"Applied banked surplus for ship {ship_id} ({year}):")
    _echo_result(result)


@bank_group.command("balance")
@click.argument("ship_id", metavar="SHIP_ID")
@click.pass_context
def balance(ctx, ship_id: str):
    """Show the banked surplus available to a ship."""
    service = BankingService(ctx.obj["db"])
    available = service.get_available_banked(ship_id)
    click.echo(f"Available banked for ship {ship_id}: {available:,.2f} gCO2eq")


@bank_group.command("list")
@click.argument("ship_id", metavar="SHIP_ID", required=False)
@click.option("--year", type=int, help="Only show entries of this year")
@click.pass_context
def list_entries(ctx, ship_id: str | None, year: int | None):
    """List bank entries, optionally for one ship."""
    service = BankingService(ctx.obj["db"])

    entries = service.list_bank_entries(ship_id=ship_id, year=year)
    if not entries:
        click.echo("No bank entries found.")
        return

    click.echo(f"\nFound {len(entries)} bank entr{'y' if len(entries) == 1 else 'ies'}:")
    click.echo("-" * 60)
    click.echo(f"{'ID':<6} {'Ship':<8} {'Year':<6} {'Amount (gCO2eq)':>20}  Type")
    click.echo("-" * 60)
    for e in entries:
        kind = "banked" if e.amount > 0 else "applied"
        click.echo(f"{e.id:<6} {e.ship_id:<8} {e.year:<6} {e.amount:>+20,.2f}  {kind}")


def register_commands(cli):
    """Register banking commands with main CLI."""
    cli.add_command(bank_group, name="bank")
