"""Route domain service."""

from typing import Optional

from fueleu.database.base import Database
from fueleu.domain.entities import Route, RouteComparison
from fueleu.domain.errors import ConflictError, NotFoundError, ValidationError, route_not_found


def calculate_percent_diff(comparison: float, baseline: float) -> float:
    """Percent difference of an intensity against the baseline intensity.

    Returns 0.0 when the baseline is zero.
    """
    if baseline == 0:
        return 0.0
    return ((comparison / baseline) - 1) * 100


class RouteService:
    """Service for managing routes and baseline comparison."""

    def __init__(self, db: Database):
        """Initialize route service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_route(
        self,
        route_id: str,
        vessel_type: str,
        fuel_type: str,
        year: int,
        ghg_intensity: float,
        fuel_consumption: float,
        distance: float,
        total_emissions: float,
        is_baseline: bool = False,
    ) -> int:
        """Create a route.

        Returns:
            Internal route ID

        Raises:
            ConflictError: If the route ID already exists
            ValidationError: If fuel consumption is negative
        """
        if self.db.get_route(route_id) is not None:
            raise ConflictError(f"Route '{route_id}' already exists")
        if fuel_consumption < 0:
            raise ValidationError(f"Fuel consumption must not be negative, got {fuel_consumption}")

        new_id = self.db.create_route(
            route_id=route_id,
            vessel_type=vessel_type,
            fuel_type=fuel_type,
            year=year,
            ghg_intensity=ghg_intensity,
            fuel_consumption=fuel_consumption,
            distance=distance,
            total_emissions=total_emissions,
        )
        if is_baseline:
            self.db.set_baseline(route_id)
        return new_id

    def get_route(self, route_id: str) -> Optional[Route]:
        """Get route by route identifier, or None if not found."""
        return self.db.get_route(route_id)

    def list_routes(self, year: Optional[int] = None) -> list[Route]:
        """List routes, optionally filtered by year."""
        return self.db.list_routes(year=year)

    def set_baseline(self, route_id: str) -> None:
        """Make a route the single baseline route.

        Raises:
            NotFoundError: If the route doesn't exist
        """
        if self.db.get_route(route_id) is None:
            raise NotFoundError(route_not_found(route_id))
        self.db.set_baseline(route_id)

    def get_baseline(self) -> Optional[Route]:
        """Get the baseline route, or None if no baseline is set."""
        for route in self.db.list_routes():
            if route.is_baseline:
                return route
        return None

    def get_comparison(self, target_intensity: float) -> tuple[Route, list[RouteComparison]]:
        """Compare every route's GHG intensity against the baseline route.

        Args:
            target_intensity: Target intensity (gCO2e/MJ) used for the
                compliant flag

        Returns:
            Tuple of (baseline route, comparisons for all other routes)

        Raises:
            NotFoundError: If no baseline route is set
        """
        baseline = self.get_baseline()
        if baseline is None:
            raise NotFoundError("No baseline route set")

        comparisons = [
            RouteComparison(
                route=route,
                percent_diff=calculate_percent_diff(route.ghg_intensity, baseline.ghg_intensity),
                compliant=route.ghg_intensity <= target_intensity,
            )
            for route in self.db.list_routes()
            if route.route_id != baseline.route_id
        ]
        return baseline, comparisons
