"""Pooling domain service (FuelEU Maritime Article 21).

A pool redistributes compliance balance between ships of the same reporting
year. Eligibility is checked first, then a greedy allocation moves surplus
from the largest donors to the largest deficits, and the result is checked
against the two allocation rules before anything is written:

* a deficit ship may not exit the pool worse than it entered
* a surplus ship may not exit the pool with a deficit
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from fueleu.database.base import Database
from fueleu.domain.entities import Pool, PoolMember, PoolMemberInput, PoolResult
from fueleu.domain.errors import (
    AllocationRuleViolatedError,
    ComplianceNotFoundError,
    DuplicateShipError,
    NegativePoolTotalError,
    NoDeficitMemberError,
    NoSurplusMemberError,
    TooFewMembersError,
    format_gco2eq,
)

logger = logging.getLogger(__name__)

MIN_POOL_MEMBERS = 2


@dataclass
class Allocation:
    """Working allocation of one member during greedy transfer."""

    ship_id: str
    cb_before: float
    cb_after: float


def _check_membership(ship_ids: list[str]) -> None:
    if len(ship_ids) < MIN_POOL_MEMBERS:
        raise TooFewMembersError(f"Pool must have at least {MIN_POOL_MEMBERS} members")

    seen = set()
    duplicates = []
    for ship_id in ship_ids:
        if ship_id in seen and ship_id not in duplicates:
            duplicates.append(ship_id)
        seen.add(ship_id)
    if duplicates:
        raise DuplicateShipError(
            f"Duplicate ships detected: {', '.join(duplicates)}. "
            "Each ship can only join a pool once."
        )


def validate_pool_members(members: list[PoolMemberInput]) -> None:
    """Check pool eligibility rules, in order.

    Raises:
        TooFewMembersError: If fewer than two members
        DuplicateShipError: If a ship appears twice
        NegativePoolTotalError: If the sum of balances is negative
        NoSurplusMemberError: If no member has a surplus
        NoDeficitMemberError: If no member has a deficit
    """
    _check_membership([m.ship_id for m in members])

    total = sum(m.cb_before for m in members)
    if total < 0:
        raise NegativePoolTotalError(
            f"Pool total CB must be >= 0. Current total: {format_gco2eq(total)}. "
            "Cannot create pool with net deficit."
        )

    if not any(m.cb_before > 0 for m in members):
        raise NoSurplusMemberError(
            "Pool must have at least one ship with surplus (positive CB) to share."
        )

    if not any(m.cb_before < 0 for m in members):
        raise NoDeficitMemberError(
            "Pool must have at least one ship with deficit (negative CB) to assist. "
            "If all ships have surplus, pooling is unnecessary."
        )


def greedy_allocation(members: Iterable[PoolMemberInput]) -> list[Allocation]:
    """Transfer surplus from donors to deficit ships.

    Members are ordered by balance descending, ties by ship ID. A donor cursor
    walks from the front and a recipient cursor from the back; each transfer
    exhausts either the donor's surplus or the recipient's deficit.

    Args:
        members: Pool members with their entry balances

    Returns:
        Allocations in sorted order
    """
    allocated = [
        Allocation(ship_id=m.ship_id, cb_before=m.cb_before, cb_after=m.cb_before)
        for m in sorted(members, key=lambda m: (-m.cb_before, m.ship_id))
    ]

    i, j = 0, len(allocated) - 1
    while i < j:
        donor = allocated[i]
        recipient = allocated[j]
        if donor.cb_after <= 0:
            break
        if recipient.cb_after >= 0:
            j -= 1
            continue

        transfer = min(donor.cb_after, abs(recipient.cb_after))
        donor.cb_after -= transfer
        recipient.cb_after += transfer
        logger.debug(
            "Pool transfer: %s -> %s amount=%.2f", donor.ship_id, recipient.ship_id, transfer
        )

        if donor.cb_after == 0:
            i += 1

    return allocated


def validate_allocation(allocations: Iterable[Allocation]) -> None:
    """Re-check the allocation rules for every member.

    Raises:
        AllocationRuleViolatedError: If a deficit ship exits worse or a
            surplus ship exits with a deficit
    """
    for a in allocations:
        if a.cb_before < 0 and a.cb_after < a.cb_before:
            raise AllocationRuleViolatedError(
                a.ship_id, f"Deficit ship {a.ship_id} cannot exit worse than entry"
            )
        if a.cb_before > 0 and a.cb_after < 0:
            raise AllocationRuleViolatedError(
                a.ship_id, f"Surplus ship {a.ship_id} cannot exit with negative CB"
            )


class PoolService:
    """Service for creating and querying compliance pools."""

    def __init__(self, db: Database):
        """Initialize pool service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_pool(self, year: int, members: list[PoolMemberInput]) -> PoolResult:
        """Create a pool from members with given entry balances.

        Nothing is written unless validation and allocation both succeed.
        Each member's stored CB for ``year`` is overwritten with its post-pool
        balance; members without a stored record are skipped with a warning.

        Args:
            year: Reporting year
            members: Ships and their entry balances

        Returns:
            PoolResult with the pool, its members and the totals

        Raises:
            DomainError subclasses from validate_pool_members and
            AllocationRuleViolatedError from validate_allocation
        """
        members = list(members)
        validate_pool_members(members)

        allocations = greedy_allocation(members)
        validate_allocation(allocations)

        pool = self.db.create_pool(year)
        pool_members = [
            PoolMember(
                pool_id=pool.id,
                ship_id=a.ship_id,
                cb_before=a.cb_before,
                cb_after=a.cb_after,
            )
            for a in allocations
        ]
        self.db.add_pool_members(pool_members)

        for member in pool_members:
            if self.db.get_compliance(member.ship_id, year) is None:
                logger.warning(
                    "Pool %d: ship %s has no compliance record for %d, CB not updated",
                    pool.id, member.ship_id, year,
                )
                continue
            self.db.save_compliance(ship_id=member.ship_id, year=year, cb=member.cb_after)

        total_before = sum(m.cb_before for m in pool_members)
        total_after = sum(m.cb_after for m in pool_members)
        logger.info(
            "Created pool %d: year=%d members=%d total_cb=%.2f",
            pool.id, year, len(pool_members), total_before,
        )
        return PoolResult(
            pool=pool,
            members=pool_members,
            total_cb_before=total_before,
            total_cb_after=total_after,
        )

    def create_pool_from_store(self, year: int, ship_ids: list[str]) -> PoolResult:
        """Create a pool using each ship's stored CB for ``year``.

        Raises:
            TooFewMembersError: If fewer than two ships
            DuplicateShipError: If a ship appears twice
            ComplianceNotFoundError: Listing every ship without a CB record
        """
        ship_ids = list(ship_ids)
        _check_membership(ship_ids)

        members = []
        missing = []
        for ship_id in ship_ids:
            compliance = self.db.get_compliance(ship_id, year)
            if compliance is None:
                missing.append(ship_id)
                continue
            members.append(PoolMemberInput(ship_id=ship_id, cb_before=compliance.cb))

        if missing:
            raise ComplianceNotFoundError(missing, year)

        return self.create_pool(year, members)

    def get_pool(self, pool_id: int) -> Optional[Pool]:
        """Get pool by ID."""
        return self.db.get_pool(pool_id)

    def list_pools(self, year: Optional[int] = None) -> list[Pool]:
        """List pools, optionally filtered by year."""
        return self.db.list_pools(year=year)

    def get_pool_members(self, pool_id: int) -> list[PoolMember]:
        """List the members of a pool."""
        return self.db.list_pool_members(pool_id)
