"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional

# Import entities directly to avoid circular import through domain/__init__.py
from fueleu.domain.entities import (
    Route,
    ComplianceBalance,
    BankEntry,
    Pool,
    PoolMember,
)


class Database(ABC):
    """Abstract database interface for fueleu."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Route operations
    @abstractmethod
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
        """Create a route. Returns internal route ID."""
        pass

    @abstractmethod
    def get_route(self, route_id: str) -> Optional[Route]:
        """Get route by route identifier (e.g., 'R001')."""
        pass

    @abstractmethod
    def list_routes(self, year: Optional[int] = None) -> list[Route]:
        """List routes, optionally filtered by year."""
        pass

    @abstractmethod
    def set_baseline(self, route_id: str) -> None:
        """Mark a route as the only baseline route."""
        pass

    # Compliance balance operations
    @abstractmethod
    def get_compliance(self, ship_id: str, year: int) -> Optional[ComplianceBalance]:
        """Get compliance balance for a ship and year."""
        pass

    @abstractmethod
    def save_compliance(self, ship_id: str, year: int, cb: float) -> None:
        """Store compliance balance, replacing any existing record for (ship_id, year)."""
        pass

    @abstractmethod
    def list_compliance(self, year: Optional[int] = None) -> list[ComplianceBalance]:
        """List compliance balances, optionally filtered by year."""
        pass

    # Bank entry operations
    @abstractmethod
    def add_bank_entry(self, ship_id: str, year: int, amount: float) -> int:
        """Append a signed bank entry. Returns entry ID."""
        pass

    @abstractmethod
    def list_bank_entries(
        self, ship_id: Optional[str] = None, year: Optional[int] = None
    ) -> list[BankEntry]:
        """List bank entries in insertion order, optionally filtered by ship and year."""
        pass

    # Pool operations
    @abstractmethod
    def create_pool(self, year: int) -> Pool:
        """Create a pool record."""
        pass

    @abstractmethod
    def get_pool(self, pool_id: int) -> Optional[Pool]:
        """Get pool by ID."""
        pass

    @abstractmethod
    def list_pools(self, year: Optional[int] = None) -> list[Pool]:
        """List pools, optionally filtered by year."""
        pass

    @abstractmethod
    def add_pool_members(self, members: list[PoolMember]) -> None:
        """Write all members of a pool as one batch."""
        pass

    @abstractmethod
    def list_pool_members(self, pool_id: int) -> list[PoolMember]:
        """List members of a pool."""
        pass
