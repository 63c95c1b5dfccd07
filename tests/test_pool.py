"""Tests for pool commands."""

from fueleu.cli.main import cli


def test_pool_create(cli_runner, temp_db):
    """Test creating a pool with explicit balances."""
    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "pool", "create", "--year", "2024", "A=1000", "B=-300", "C=-700"],
    )

    assert result.exit_code == 0
    assert "Created pool 1 for 2024 with 3 members" in result.output
    assert "Total CB before: 0.00" in result.output
    assert "Total CB after:  0.00" in result.output
    assert len(temp_db.list_pool_members(1)) == 3


def test_pool_create_negative_total(cli_runner, temp_db):
    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "pool", "create", "--year", "2024", "A=100", "B=-300"],
    )

    assert result.exit_code == 1
    assert "Pool total CB must be >= 0" in result.output
    assert temp_db.list_pools() == []


def test_pool_create_no_deficit(cli_runner, temp_db):
    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "pool", "create", "--year", "2024", "A=100", "B=200"],
    )

    assert result.exit_code == 1
    assert "deficit" in result.output


def test_pool_create_bad_member(cli_runner, temp_db):
    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "pool", "create", "--year", "2024", "A", "B=-100"],
    )

    assert result.exit_code == 1
    assert "expected SHIP=CB" in result.output


def test_pool_create_from_store(cli_runner, temp_db):
    temp_db.save_compliance("R002", 2024, 800.0)
    temp_db.save_compliance("R003", 2024, -500.0)

    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "pool", "create", "--year", "2024", "--from-store", "R002", "R003"],
    )

    assert result.exit_code == 0
    assert "Total CB after:  300.00" in result.output
    assert temp_db.get_compliance("R003", 2024).cb == 0.0


def test_pool_create_from_store_missing(cli_runner, temp_db):
    temp_db.save_compliance("R002", 2024, 800.0)

    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "pool", "create", "--year", "2024", "--from-store", "R002", "R003", "R009"],
    )

    assert result.exit_code == 1
    assert "R003, R009" in result.output


def test_pool_list_and_show(cli_runner, temp_db):
    cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "pool", "create", "--year", "2024", "A=1000", "B=-400"],
    )

    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "pool", "list"])
    assert result.exit_code == 0
    assert "Year: 2024 | Members: 2" in result.output

    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "pool", "show", "1"])
    assert result.exit_code == 0
    assert "Pool 1 (year 2024" in result.output
    assert "600.00" in result.output


def test_pool_show_missing(cli_runner, temp_db):
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "pool", "show", "42"])

    assert result.exit_code == 1
    assert "Pool 42 not found" in result.output


def test_pool_list_empty(cli_runner, temp_db):
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "pool", "list", "--year", "2024"])

    assert result.exit_code == 0
    assert "No pools found" in result.output
