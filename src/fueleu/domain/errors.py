"""Shared domain error messages and error types."""

from typing import Iterable


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


# Banking (Article 20)


class InvalidAmountError(ValidationError):
    """Amount is not a positive finite number."""


class ComplianceNotFoundError(NotFoundError):
    """One or more ships have no compliance balance for the year."""

    def __init__(self, ship_ids: Iterable[str], year: int):
        self.ship_ids = list(ship_ids)
        self.year = year
        if len(self.ship_ids) == 1:
            message = compliance_not_found(self.ship_ids[0], year)
        else:
            message = compliance_missing_for_pool(self.ship_ids, year)
        super().__init__(message)


class NoSurplusToBankError(ValidationError):
    """Banking requires a strictly positive compliance balance."""


class InsufficientSurplusError(ValidationError):
    """Amount to bank exceeds the current surplus."""


class NotInDeficitError(ValidationError):
    """Banked surplus can only be applied when CB <= 0."""


class NoBankedSurplusError(ValidationError):
    """Ship has nothing banked."""


class InsufficientBankedError(ValidationError):
    """Amount to apply exceeds the available banked surplus."""


class ExceedsDeficitError(ValidationError):
    """Amount to apply exceeds the ship's deficit."""


# Pooling (Article 21)


class TooFewMembersError(ValidationError):
    """A pool needs at least two members."""


class DuplicateShipError(ConflictError):
    """A ship appears more than once in a pool."""


class NegativePoolTotalError(ValidationError):
    """Sum of member balances is negative."""


class NoSurplusMemberError(ValidationError):
    """No member has a positive balance."""


class NoDeficitMemberError(ValidationError):
    """No member has a negative balance."""


class AllocationRuleViolatedError(DomainError):
    """Allocation breaks a pooling rule; indicates an allocation bug."""

    def __init__(self, ship_id: str, message: str):
        self.ship_id = ship_id
        super().__init__(message)


def format_gco2eq(value: float) -> str:
    """Format a balance for messages."""
    return f"{value:,.2f} gCO2eq"


def compliance_not_found(ship_id: str, year: int) -> str:
    """Return message for a missing compliance record."""
    return (
        f"No compliance record found for ship {ship_id} in year {year}. "
        "Please compute CB first."
    )


def compliance_missing_for_pool(ship_ids: list[str], year: int) -> str:
    """Return message when pool members have no compliance record."""
    return (
        f"The following ships do not have compliance records for year {year}: "
        f"{', '.join(ship_ids)}. All ships in a pool must have CB computed for the "
        "same year. Please compute CB first."
    )


def route_not_found(route_id: str) -> str:
    """Return message for missing route."""
    return f"Route '{route_id}' not found"


def pool_not_found(pool_id: int) -> str:
    """Return message for missing pool."""
    return f"Pool {pool_id} not found"
