"""Tests for banking commands."""

import pytest
from fueleu.cli.main import cli


def test_bank_deposit(cli_runner, temp_db):
    """Test banking surplus via CLI."""
    temp_db.save_compliance("R001", 2024, 1000.0)

    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "bank", "deposit", "R001", "--year", "2024", "--amount", "400"],
    )

    assert result.exit_code == 0
    assert "Banked surplus for ship R001 (2024)" in result.output
    assert "CB before: 1,000.00" in result.output
    assert "Applied:   -400.00" in result.output
    assert "CB after:  600.00" in result.output


def test_bank_deposit_without_compliance(cli_runner, temp_db):
    """Test banking fails when CB has not been computed."""
    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "bank", "deposit", "R001", "--year", "2024", "--amount", "400"],
    )

    assert result.exit_code == 1
    assert "compute CB first" in result.output


def test_bank_deposit_invalid_amount(cli_runner, temp_db):
    """Test non-numeric amounts are rejected."""
    temp_db.save_compliance("R001", 2024, 1000.0)

    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "bank", "deposit", "R001", "--year", "2024", "--amount", "lots"],
    )

    assert result.exit_code == 1
    assert "Error:" in result.output


@pytest.mark.parametrize("amount", ["0", "-5"])
def test_bank_deposit_non_positive(cli_runner, temp_db, amount):
    temp_db.save_compliance("R001", 2024, 1000.0)

    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "bank", "deposit", "R001", "--year", "2024", "--amount", amount],
    )

    assert result.exit_code == 1
    assert "positive" in result.output


def test_bank_apply(cli_runner, temp_db):
    """Test applying banked surplus via CLI."""
    temp_db.save_compliance("R003", 2024, -500.0)
    temp_db.add_bank_entry("R003", 2023, 300.0)

    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "bank", "apply", "R003", "--year", "2024", "--amount", "300"],
    )

    assert result.exit_code == 0
    assert "CB before: -500.00" in result.output
    assert "Applied:   +300.00" in result.output
    assert "CB after:  -200.00" in result.output


def test_bank_apply_insufficient(cli_runner, temp_db):
    temp_db.save_compliance("R003", 2024, -500.0)
    temp_db.add_bank_entry("R003", 2023, 300.0)

    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "bank", "apply", "R003", "--year", "2024", "--amount", "400"],
    )

    assert result.exit_code == 1
    assert "Insufficient banked surplus" in result.output


def test_bank_balance(cli_runner, temp_db):
    temp_db.add_bank_entry("R001", 2023, 300.0)
    temp_db.add_bank_entry("R001", 2024, -100.0)

    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "bank", "balance", "R001"])

    assert result.exit_code == 0
    assert "Available banked for ship R001: 200.00 gCO2eq" in result.output


def test_bank_list(cli_runner, temp_db):
    temp_db.add_bank_entry("R001", 2023, 300.0)
    temp_db.add_bank_entry("R001", 2024, -100.0)
    temp_db.add_bank_entry("R002", 2024, 50.0)

    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "bank", "list", "R001"])

    assert result.exit_code == 0
    assert "Found 2 bank entries" in result.output
    assert "banked" in result.output
    assert "applied" in result.output
    assert "R002" not in result.output


def test_bank_list_empty(cli_runner, temp_db):
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "bank", "list"])

    assert result.exit_code == 0
    assert "No bank entries found" in result.output
