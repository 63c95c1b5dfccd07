"""Tests for compliance balance computation."""

import math

import pytest

from fueleu.config import ComplianceConfig
from fueleu.domain.compliance import (
    ComplianceService,
    calculate_compliance_balance,
    calculate_energy_in_scope,
)
from fueleu.domain.errors import ValidationError


def test_energy_in_scope():
    assert calculate_energy_in_scope(5000.0, 41000.0) == 205_000_000.0


def test_compliance_balance_sign():
    assert calculate_compliance_balance(89.3368, 88.0, 1000.0) > 0
    assert calculate_compliance_balance(89.3368, 91.0, 1000.0) < 0
    assert calculate_compliance_balance(89.0, 89.0, 1000.0) == 0


def test_compute_and_store(compliance_service, temp_db, sample_routes):
    results = compliance_service.compute_and_store()

    assert len(results) == 5
    by_ship = {r.ship_id: r for r in results}
    assert by_ship["R001"].energy_in_scope == pytest.approx(205_000_000.0)
    assert by_ship["R001"].cb == pytest.approx((89.3368 - 91.0) * 205_000_000.0)
    assert by_ship["R002"].cb == pytest.approx((89.3368 - 88.0) * 4800.0 * 41000.0)
    assert by_ship["R002"].target_intensity == 89.3368
    assert by_ship["R002"].actual_intensity == 88.0

    stored = temp_db.get_compliance("R002", 2024)
    assert stored.cb == pytest.approx(by_ship["R002"].cb)
    assert temp_db.get_compliance("R004", 2025) is not None


def test_compute_for_year(compliance_service, sample_routes):
    results = compliance_service.compute_and_store(year=2025)

    assert sorted(r.ship_id for r in results) == ["R004", "R005"]
    assert compliance_service.get_compliance("R001", 2024) is None


def test_compute_uses_configured_target(temp_db, sample_routes):
    """Target intensity comes from the injected configuration."""
    service = ComplianceService(temp_db, ComplianceConfig(target_intensity=100.0))

    results = service.compute_and_store()

    assert all(r.cb > 0 for r in results)
    assert all(r.target_intensity == 100.0 for r in results)


def test_recompute_overwrites(compliance_service, temp_db, sample_routes):
    temp_db.save_compliance("R001", 2024, 1.0)

    compliance_service.compute_and_store()

    assert len(temp_db.list_compliance(year=2024)) == 3
    assert temp_db.get_compliance("R001", 2024).cb != 1.0


def test_set_and_list_compliance(compliance_service):
    compliance_service.set_compliance("A", 2024, 1000.0)
    compliance_service.set_compliance("B", 2024, -300.0)
    compliance_service.set_compliance("A", 2025, 5.0)

    assert [(c.ship_id, c.cb) for c in compliance_service.list_compliance(year=2024)] == [
        ("A", 1000.0),
        ("B", -300.0),
    ]
    assert len(compliance_service.list_compliance()) == 3


@pytest.mark.parametrize("cb", [math.inf, -math.inf, math.nan])
def test_set_compliance_rejects_non_finite(compliance_service, cb):
    with pytest.raises(ValidationError):
        compliance_service.set_compliance("A", 2024, cb)


def test_default_config(temp_db):
    service = ComplianceService(temp_db)

    assert service.config == ComplianceConfig()
