"""Banking domain service (FuelEU Maritime Article 20).

The ledger is a single signed journal per ship: deposits are positive entries,
applications of banked surplus are negative entries. The available banked
amount is the sum of all of a ship's entries, whatever year they were
recorded in.
"""

import logging
import math
from typing import Optional

from fueleu.database.base import Database
from fueleu.domain.entities import BankEntry, BankingResult, ComplianceBalance
from fueleu.domain.errors import (
    ComplianceNotFoundError,
    ExceedsDeficitError,
    InsufficientBankedError,
    InsufficientSurplusError,
    InvalidAmountError,
    NoBankedSurplusError,
    NoSurplusToBankError,
    NotInDeficitError,
    format_gco2eq,
)

logger = logging.getLogger(__name__)


def _validate_amount(amount: float, action: str) -> None:
    if isinstance(amount, bool) or not isinstance(amount, (int, float)):
        raise InvalidAmountError(f"Amount to {action} must be a number")
    if not math.isfinite(amount) or amount <= 0:
        raise InvalidAmountError(f"Amount to {action} must be a positive finite number, got {amount}")


class BankingService:
    """Service for banking and applying compliance surplus."""

    def __init__(self, db: Database):
        """Initialize banking service.

        Args:
            db: Database instance
        """
        self.db = db

    def _require_compliance(self, ship_id: str, year: int) -> ComplianceBalance:
        compliance = self.db.get_compliance(ship_id, year)
        if compliance is None:
            raise ComplianceNotFoundError([ship_id], year)
        return compliance

    def get_available_banked(self, ship_id: str) -> float:
        """Get the banked surplus still available to a ship.

        Args:
            ship_id: Ship identifier

        Returns:
            Sum of all the ship's bank entry amounts (0.0 if none)
        """
        return sum((entry.amount for entry in self.db.list_bank_entries(ship_id=ship_id)), 0.0)

    def list_bank_entries(
        self, ship_id: Optional[str] = None, year: Optional[int] = None
    ) -> list[BankEntry]:
        """List bank entries, optionally filtered by ship and year."""
        return self.db.list_bank_entries(ship_id=ship_id, year=year)

    def bank_surplus(self, ship_id: str, year: int, amount: float) -> BankingResult:
        """Bank part or all of a ship's surplus for future use.

        Args:
            ship_id: Ship identifier
            year: Reporting year whose surplus is banked
            amount: Amount to bank in gCO2eq

        Returns:
            BankingResult with a negative ``applied`` amount

        Raises:
            InvalidAmountError: If amount is not positive and finite
            ComplianceNotFoundError: If no CB exists for the ship and year
            NoSurplusToBankError: If the ship's CB is not positive
            InsufficientSurplusError: If amount exceeds the ship's CB
        """
        _validate_amount(amount, "bank")
        compliance = self._require_compliance(ship_id, year)
        cb_before = compliance.cb

        if cb_before <= 0:
            raise NoSurplusToBankError(
                f"Cannot bank surplus. Ship {ship_id} has CB of {format_gco2eq(cb_before)} (<= 0). "
                "Banking is only allowed when CB > 0."
            )

        if amount > cb_before:
            raise InsufficientSurplusError(
                f"Cannot bank {format_gco2eq(amount)}. Ship {ship_id} only has "
                f"{format_gco2eq(cb_before)} surplus."
            )

        self.db.add_bank_entry(ship_id=ship_id, year=year, amount=amount)
        cb_after = cb_before - amount
        self.db.save_compliance(ship_id=ship_id, year=year, cb=cb_after)

        logger.info(
            "Banked surplus: ship=%s year=%d amount=%.2f cb_before=%.2f cb_after=%.2f",
            ship_id, year, amount, cb_before, cb_after,
        )
        return BankingResult(cb_before=cb_before, applied=-amount, cb_after=cb_after)

    def apply_banked_surplus(self, ship_id: str, year: int, amount: float) -> BankingResult:
        """Apply previously banked surplus to a ship's deficit.

        The withdrawal is recorded as a negative bank entry, so the available
        banked amount reflects it on the next call.

        Args:
            ship_id: Ship identifier
            year: Reporting year whose deficit is reduced
            amount: Amount to apply in gCO2eq

        Returns:
            BankingResult with a positive ``applied`` amount

        Raises:
            InvalidAmountError: If amount is not positive and finite
            ComplianceNotFoundError: If no CB exists for the ship and year
            NotInDeficitError: If the ship's CB is positive
            NoBankedSurplusError: If nothing is banked for the ship
            InsufficientBankedError: If amount exceeds the banked surplus
            ExceedsDeficitError: If amount exceeds the ship's deficit
        """
        _validate_amount(amount, "apply")
        compliance = self._require_compliance(ship_id, year)
        cb_before = compliance.cb

        if cb_before > 0:
            raise NotInDeficitError(
                f"Cannot apply banked surplus. Ship {ship_id} has CB of {format_gco2eq(cb_before)} (> 0). "
                "Banked surplus can only be applied when CB <= 0."
            )

        available = self.get_available_banked(ship_id)
        if available <= 0:
            raise NoBankedSurplusError(
                f"Ship {ship_id} has no banked surplus available. Cannot apply banking."
            )

        if amount > available:
            raise InsufficientBankedError(
                f"Insufficient banked surplus. Available: {format_gco2eq(available)}, "
                f"Requested: {format_gco2eq(amount)}"
            )

        deficit = abs(cb_before)
        if amount > deficit:
            raise ExceedsDeficitError(
                f"Cannot apply {format_gco2eq(amount)}. Ship {ship_id} only has a deficit of "
                f"{format_gco2eq(deficit)}. You can only apply up to the deficit amount."
            )

        self.db.add_bank_entry(ship_id=ship_id, year=year, amount=-amount)
        cb_after = cb_before + amount
        self.db.save_compliance(ship_id=ship_id, year=year, cb=cb_after)

        logger.info(
            "Applied banked surplus: ship=%s year=%d amount=%.2f cb_before=%.2f cb_after=%.2f",
            ship_id, year, amount, cb_before, cb_after,
        )
        return BankingResult(cb_before=cb_before, applied=amount, cb_after=cb_after)
