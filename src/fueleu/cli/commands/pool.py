"""Pooling commands (Article 21)."""

import click
from fueleu.cli.error_handling import handle_domain_error
from fueleu.domain.entities import PoolMember
from fueleu.domain.errors import DomainError, pool_not_found
from fueleu.domain.pooling import PoolService
from fueleu.utils.member_parser import parse_member


def _echo_members(members: list[PoolMember]) -> None:
    click.echo("-" * 60)
    click.echo(f"{'Ship':<10} {'CB before':>20} {'CB after':>20}")
    click.echo("-" * 60)
    for m in members:
        click.echo(f"{m.ship_id:<10} {m.cb_before:>20,.2f} {m.cb_after:>20,.2f}")


@click.group()
def pool_group():
    """Create and inspect compliance pools."""
    pass


@pool_group.command("create")
@click.argument("members", nargs=-1, required=True, metavar="MEMBER...")
@click.option("--year", type=int, required=True, help="Reporting year of the pool")
@click.option(
    "--from-store",
    is_flag=True,
    help="MEMBERs are ship IDs; use each ship's stored CB for the year",
)
@click.pass_context
def create_pool(ctx, members: tuple[str, ...], year: int, from_store: bool):
    """Create a pool and allocate surplus to deficit ships.

    Each MEMBER is SHIP=CB, or a bare ship ID with --from-store.

    Examples:
        fueleu pool create --year 2024 A=1000 B=-300 C=-700
        fueleu pool create --year 2024 --from-store R001 R002 R003
    """
    service = PoolService(ctx.obj["db"])

    try:
        if from_store:
            result = service.create_pool_from_store(year, list(members))
        else:
            inputs = [parse_member(m) for m in members]
            result = service.create_pool(year, inputs)
    except (DomainError, ValueError) as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created pool {result.pool.id} for {year} with {len(result.members)} members")
    _echo_members(result.members)
    click.echo(f"Total CB before: {result.total_cb_before:,.2f} gCO2eq")
    click.echo(f"Total CB after:  {result.total_cb_after:,.2f} gCO2eq")


@pool_group.command("list")
@click.option("--year", type=int, help="Only show pools of this year")
@click.pass_context
def list_pools(ctx, year: int | None):
    """List pools."""
    service = PoolService(ctx.obj["db"])

    pools = service.list_pools(year=year)
    if not pools:
        click.echo("No pools found.")
        return

    click.echo("\nPools:")
    click.echo("-" * 60)
    for p in pools:
        member_count = len(service.get_pool_members(p.id))
        click.echo(
            f"ID: {p.id:3d} | Year: {p.year} | Members: {member_count} | "
            f"Created: {p.created_at:%Y-%m-%d %H:%M}"
        )


@pool_group.command("show")
@click.argument("pool_id", type=int, metavar="POOL_ID")
@click.pass_context
def show_pool(ctx, pool_id: int):
    """Show a pool and its member allocations."""
    service = PoolService(ctx.obj["db"])

    pool = service.get_pool(pool_id)
    if pool is None:
        click.echo(f"Error: {pool_not_found(pool_id)}", err=True)
        ctx.exit(1)

    members = service.get_pool_members(pool_id)
    click.echo(f"\nPool {pool.id} (year {pool.year}, created {pool.created_at:%Y-%m-%d %H:%M})")
    _echo_members(members)
    click.echo(f"Total CB: {sum(m.cb_after for m in members):,.2f} gCO2eq")


def register_commands(cli):
    """Register pool commands with main CLI."""
    cli.add_command(pool_group, name="pool")
