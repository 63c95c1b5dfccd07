"""Domain model entities for fueleu.

These are pure data classes representing regulatory concepts, independent of
database schema. All compliance balance values are floats in gCO2eq; positive
means surplus, negative means deficit.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Route:
    """Voyage route domain entity."""

    id: int
    route_id: str
    vessel_type: str
    fuel_type: str
    year: int
    ghg_intensity: float  # gCO2e/MJ
    fuel_consumption: float  # t
    distance: float  # km
    total_emissions: float  # t
    is_baseline: bool = False


@dataclass(frozen=True)
class ComplianceBalance:
    """Compliance balance of one ship for one reporting year."""

    ship_id: str
    year: int
    cb: float


@dataclass(frozen=True)
class BankEntry:
    """Signed banking journal entry.

    Deposits are positive amounts, withdrawals negative.
    """

    id: int
    ship_id: str
    year: int
    amount: float


@dataclass(frozen=True)
class Pool:
    """Pool domain entity."""

    id: int
    year: int
    created_at: datetime


@dataclass(frozen=True)
class PoolMember:
    """Allocation of one ship within a pool."""

    pool_id: int
    ship_id: str
    cb_before: float
    cb_after: float


@dataclass(frozen=True)
class PoolMemberInput:
    """Ship and entry balance submitted for pooling."""

    ship_id: str
    cb_before: float


@dataclass(frozen=True)
class BankingResult:
    """Outcome of a banking operation.

    ``applied`` is negative for a deposit (the ship's CB goes down) and
    positive for an application of banked surplus.
    """

    cb_before: float
    applied: float
    cb_after: float


@dataclass(frozen=True)
class PoolResult:
    """Outcome of a committed pool."""

    pool: Pool
    members: list[PoolMember]
    total_cb_before: float
    total_cb_after: float

    @property
    def surplus_ship_count(self) -> int:
        return sum(1 for m in self.members if m.cb_before > 0)

    @property
    def deficit_ship_count(self) -> int:
        return sum(1 for m in self.members if m.cb_before < 0)


@dataclass(frozen=True)
class RouteComparison:
    """Route intensity compared against the baseline route."""

    route: Route
    percent_diff: float
    compliant: bool


@dataclass(frozen=True)
class ComplianceComputation:
    """Compliance balance computed from a route."""

    ship_id: str
    year: int
    cb: float
    energy_in_scope: float  # MJ
    target_intensity: float  # gCO2e/MJ
    actual_intensity: float  # gCO2e/MJ
    route: Optional[Route] = None
