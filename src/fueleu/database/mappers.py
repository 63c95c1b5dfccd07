"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so the table layout (column names
such as ``cb_gco2eq``) can change without touching the domain services.
"""

from fueleu.domain import entities as domain
from fueleu.database.models import (
    Route as ORMRoute,
    ShipCompliance as ORMShipCompliance,
    BankEntry as ORMBankEntry,
    Pool as ORMPool,
    PoolMember as ORMPoolMember,
)


def route_to_domain(orm_route: ORMRoute) -> domain.Route:
    """Convert SQLAlchemy Route model to domain Route entity."""
    return domain.Route(
        id=orm_route.id,
        route_id=orm_route.route_id,
        vessel_type=orm_route.vessel_type,
        fuel_type=orm_route.fuel_type,
        year=orm_route.year,
        ghg_intensity=orm_route.ghg_intensity,
        fuel_consumption=orm_route.fuel_consumption,
        distance=orm_route.distance,
        total_emissions=orm_route.total_emissions,
        is_baseline=bool(orm_route.is_baseline),
    )


def compliance_to_domain(orm_compliance: ORMShipCompliance) -> domain.ComplianceBalance:
    """Convert SQLAlchemy ShipCompliance model to domain ComplianceBalance entity."""
    return domain.ComplianceBalance(
        ship_id=orm_compliance.ship_id,
        year=orm_compliance.year,
        cb=orm_compliance.cb_gco2eq,
    )


def bank_entry_to_domain(orm_entry: ORMBankEntry) -> domain.BankEntry:
    """Convert SQLAlchemy BankEntry model to domain BankEntry entity."""
    return domain.BankEntry(
        id=orm_entry.id,
        ship_id=orm_entry.ship_id,
        year=orm_entry.year,
        amount=orm_entry.amount_gco2eq,
    )


def pool_to_domain(orm_pool: ORMPool) -> domain.Pool:
    """Convert SQLAlchemy Pool model to domain Pool entity."""
    return domain.Pool(
        id=orm_pool.id,
        year=orm_pool.year,
        created_at=orm_pool.created_at,
    )


def pool_member_to_domain(orm_member: ORMPoolMember) -> domain.PoolMember:
    """Convert SQLAlchemy PoolMember model to domain PoolMember entity."""
    return domain.PoolMember(
        pool_id=orm_member.pool_id,
        ship_id=orm_member.ship_id,
        cb_before=orm_member.cb_before,
        cb_after=orm_member.cb_after,
    )
