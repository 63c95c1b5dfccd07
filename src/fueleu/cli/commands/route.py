"""Route management commands."""

import click
from fueleu.cli.error_handling import handle_domain_error
from fueleu.domain.errors import DomainError
from fueleu.domain.route import RouteService


@click.group()
def route_group():
    """Manage routes."""
    pass


@route_group.command("list")
@click.option("--year", type=int, help="Only show routes of this year")
@click.pass_context
def list_routes(ctx, year: int | None):
    """List routes."""
    service = RouteService(ctx.obj["db"])

    routes = service.list_routes(year=year)
    if not routes:
        click.echo("No routes found.")
        return

    click.echo("\nRoutes:")
    click.echo("-" * 100)
    click.echo(
        f"{'Route':<8} {'Vessel':<12} {'Fuel':<6} {'Year':<6} {'gCO2e/MJ':>10} "
        f"{'Fuel (t)':>10} {'Dist (km)':>10} {'Emis (t)':>10}  Baseline"
    )
    click.echo("-" * 100)
    for r in routes:
        click.echo(
            f"{r.route_id:<8} {r.vessel_type:<12} {r.fuel_type:<6} {r.year:<6} "
            f"{r.ghg_intensity:>10.2f} {r.fuel_consumption:>10.1f} {r.distance:>10.1f} "
            f"{r.total_emissions:>10.1f}  {'yes' if r.is_baseline else ''}"
        )


@route_group.command("baseline")
@click.argument("route_id", metavar="ROUTE_ID")
@click.pass_context
def set_baseline(ctx, route_id: str) -> None:
    """Set ROUTE_ID as the baseline route.

    Examples:
        fueleu route baseline R002
    """
    service = RouteService(ctx.obj["db"])
    try:
        service.set_baseline(route_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Route '{route_id}' is now the baseline")


@route_group.command("compare")
@click.pass_context
def compare_routes(ctx) -> None:
    """Compare every route's GHG intensity against the baseline."""
    service = RouteService(ctx.obj["db"])
    target = ctx.obj["config"].target_intensity

    try:
        baseline, comparisons = service.get_comparison(target)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"\nBaseline: {baseline.route_id} ({baseline.ghg_intensity:.4f} gCO2e/MJ)")
    click.echo(f"Target intensity: {target:.4f} gCO2e/MJ")
    click.echo("-" * 60)
    click.echo(f"{'Route':<8} {'gCO2e/MJ':>10} {'% diff':>10}  Compliant")
    click.echo("-" * 60)
    for c in comparisons:
        click.echo(
            f"{c.route.route_id:<8} {c.route.ghg_intensity:>10.4f} {c.percent_diff:>+10.2f}  "
            f"{'yes' if c.compliant else 'no'}"
        )


def register_commands(cli):
    """Register route commands with main CLI."""
    cli.add_command(route_group, name="route")
