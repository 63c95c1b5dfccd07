"""Compliance balance domain service.

CB = (target intensity - actual intensity) x energy in scope, where energy in
scope is fuel consumption (t) x energy factor (MJ/t). Positive CB is a
surplus, negative CB a deficit.
"""

import logging
import math
from typing import Optional

from fueleu.config import ComplianceConfig
from fueleu.database.base import Database
from fueleu.domain.entities import ComplianceBalance, ComplianceComputation
from fueleu.domain.errors import ValidationError

logger = logging.getLogger(__name__)


def calculate_energy_in_scope(fuel_consumption: float, energy_factor: float) -> float:
    """Energy in scope (MJ) for a fuel consumption in tonnes."""
    return fuel_consumption * energy_factor


def calculate_compliance_balance(
    target_intensity: float, actual_intensity: float, energy_in_scope: float
) -> float:
    """Compliance balance in gCO2eq."""
    return (target_intensity - actual_intensity) * energy_in_scope


class ComplianceService:
    """Service for computing and storing compliance balances."""

    def __init__(self, db: Database, config: Optional[ComplianceConfig] = None):
        """Initialize compliance service.

        Args:
            db: Database instance
            config: Regulatory constants; defaults apply if None
        """
        self.db = db
        self.config = config if config is not None else ComplianceConfig()

    def compute_and_store(self, year: Optional[int] = None) -> list[ComplianceComputation]:
        """Compute CB for every route and store it under the route's ship ID.

        Args:
            year: Only compute for routes of this year if given

        Returns:
            One computation per route
        """
        results = []
        for route in self.db.list_routes(year=year):
            energy = calculate_energy_in_scope(route.fuel_consumption, self.config.energy_factor)
            cb = calculate_compliance_balance(
                self.config.target_intensity, route.ghg_intensity, energy
            )
            self.db.save_compliance(ship_id=route.route_id, year=route.year, cb=cb)
            results.append(
                ComplianceComputation(
                    ship_id=route.route_id,
                    year=route.year,
                    cb=cb,
                    energy_in_scope=energy,
                    target_intensity=self.config.target_intensity,
                    actual_intensity=route.ghg_intensity,
                    route=route,
                )
            )

        logger.info(
            "Computed CB for %d route(s) with target intensity %.4f",
            len(results), self.config.target_intensity,
        )
        return results

    def get_compliance(self, ship_id: str, year: int) -> Optional[ComplianceBalance]:
        """Get the stored CB for a ship and year, or None."""
        return self.db.get_compliance(ship_id, year)

    def set_compliance(self, ship_id: str, year: int, cb: float) -> None:
        """Store a CB value directly, replacing any existing record.

        Raises:
            ValidationError: If cb is not a finite number
        """
        if not math.isfinite(cb):
            raise ValidationError(f"Compliance balance must be a finite number, got {cb}")
        self.db.save_compliance(ship_id=ship_id, year=year, cb=cb)

    def list_compliance(self, year: Optional[int] = None) -> list[ComplianceBalance]:
        """List stored compliance balances, optionally filtered by year."""
        return self.db.list_compliance(year=year)
