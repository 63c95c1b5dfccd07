"""Shared pytest fixtures for fueleu tests."""

import tempfile
import os
import pytest

from fueleu.config import ComplianceConfig
from fueleu.database.factories import create_sqlite_database
from fueleu.domain.banking import BankingService
from fueleu.domain.compliance import ComplianceService
from fueleu.domain.pooling import PoolService
from fueleu.domain.route import RouteService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def config():
    """Default regulatory configuration."""
    return ComplianceConfig()


@pytest.fixture
def banking_service(temp_db):
    """Create a BankingService with a temporary database."""
    return BankingService(temp_db)


@pytest.fixture
def pool_service(temp_db):
    """Create a PoolService with a temporary database."""
    return PoolService(temp_db)


@pytest.fixture
def route_service(temp_db):
    """Create a RouteService with a temporary database."""
    return RouteService(temp_db)


@pytest.fixture
def compliance_service(temp_db, config):
    """Create a ComplianceService with a temporary database."""
    return ComplianceService(temp_db, config)


@pytest.fixture
def sample_routes(route_service):
    """Load the sample routes and return them keyed by route ID."""
    from fueleu.cli.commands.init_routes import INITIAL_ROUTES

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
        route_service.create_route(
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

    return {r.route_id: r for r in route_service.list_routes()}


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
