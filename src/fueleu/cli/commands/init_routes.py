"""Initialize sample route data."""

import click
from fueleu.domain.route import RouteService
from fueleu.domain.errors import DomainError


# Sample routes: (route_id, vessel_type, fuel_type, year, ghg_intensity,
# fuel_consumption, distance, total_emissions, is_baseline)
INITIAL_ROUTES = [
    ("R001", "Container", "HFO", 2024, 91.0, 5000.0, 12000.0, 4500.0, True),
    ("R002", "BulkCarrier", "LNG", 2024, 88.0, 4800.0, 11500.0, 4200.0, False),
    ("R003", "Tanker", "MGO", 2024, 93.5, 5100.0, 12500.0, 4700.0, False),
    ("R004", "RoRo", "HFO", 2025, 89.2, 4900.0, 11800.0, 4300.0, False),
    ("R005", "Container", "LNG", 2025, 90.5, 4950.0, 11900.0, 4400.0, False),
]


@click.command("init-routes")
@click.pass_context
def init_routes(ctx):
    """Load the sample routes R001-R005 (R001 is the baseline)."""
    db = ctx.obj["db"]
    service = RouteService(db)

    created = 0
    skipped = 0
    for (
        route_id,
        vessel_type,
        fuel_type,
        year,
        ghg_intensity,
        fuel_consumption,
        distance,
        total_emissions,
        is_baseline,
    ) in INITIAL_ROUTES:
        try:
            service.create_route(
                route_id=route_id,
                vessel_type=vessel_type,
                fuel_type=fuel_type,
                year=year,
                ghg_intensity=ghg_intensity,
                fuel_consumption=fuel_consumption,
                distance=distance,
                total_emissions=total_emissions,
                is_baseline=is_baseline,
            )
            created += 1
        except DomainError as e:
            click.echo(f"Warning: Could not create route '{route_id}': {e}", err=True)
            skipped += 1

    if skipped == 0:
        click.echo(f"Successfully created {created} routes.")
    else:
        click.echo(f"Created {created} routes, skipped {skipped}.")


def register_commands(cli):
    """Register init-routes command with main CLI."""
    cli.add_command(init_routes)
