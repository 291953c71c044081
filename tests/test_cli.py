"""Tests for the absorb command-line tool and logging setup."""

import json
import logging
import sys

import pytest
from click.testing import CliRunner

from porous_absorber.cli.compute import main
from porous_absorber.cli.report import absorption_table, format_absorption, to_json
from porous_absorber.config import (
    AirProperties,
    CavityProperties,
    IncidenceAngle,
    PorousLayerProperties,
    SweepConfig,
)
from porous_absorber.devices import porous_absorber
from porous_absorber.logging_config import LOGGER_NAME, setup_logging


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def reset_logger():
    """Close any handlers the CLI installed on the package logger."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


class TestJsonOutput:
    """Tests for --json output."""

    def test_porous_absorber(self, runner):
        result = runner.invoke(main, ["porous-absorber", "--json"])
        assert result.exit_code == 0, result.output

        data = json.loads(result.output)
        assert data["device"] == "porous_absorber"
        assert [s["name"] for s in data["series"]] == ["Air Gap", "No Air Gap"]
        assert len(data["series"][0]["points"]) == 25
        assert data["series"][0]["points"][0]["freq"] == 62.5

    def test_perforated_panel(self, runner):
        result = runner.invoke(
            main, ["perforated-panel", "--hole-radius", "5", "--subdivisions", "1", "--json"]
        )
        assert result.exit_code == 0, result.output

        data = json.loads(result.output)
        assert data["device"] == "perforated_panel"
        assert [s["name"] for s in data["series"]] == [
            "No Air Gap",
            "Absorber Against Panel",
            "Absorber Against Backing",
        ]
        for series in data["series"]:
            assert len(series["points"]) == 9
            for point in series["points"]:
                assert 0.0 <= point["abs"] <= 1.0

    def test_slotted_panel(self, runner):
        result = runner.invoke(main, ["slotted-panel", "--slot-width", "10", "--json"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["device"] == "slotted_panel"

    def test_microperforated_panel(self, runner):
        result = runner.invoke(
            main, ["microperforated-panel", "--angle", "30", "--start-freq", "100", "--json"]
        )
        assert result.exit_code == 0, result.output

        data = json.loads(result.output)
        assert data["device"] == "microperforated_panel"
        assert len(data["series"]) == 1
        assert data["series"][0]["points"][-1]["freq"] == pytest.approx(25600.0)

    def test_matches_library(self, runner):
        result = runner.invoke(
            main,
            ["porous-absorber", "--air-gap", "200", "--absorber-thickness", "50", "--json"],
        )
        assert result.exit_code == 0, result.output

        info = porous_absorber.calculate_plot_points(
            SweepConfig().frequencies,
            AirProperties(),
            CavityProperties(air_gap_mm=200),
            PorousLayerProperties(thickness_mm=50),
            IncidenceAngle(),
        )
        assert json.loads(result.output) == json.loads(to_json(info))

    def test_zero_air_gap_is_strict_json(self, runner):
        result = runner.invoke(
            main, ["porous-absorber", "--air-gap", "0", "--subdivisions", "1", "--json"]
        )
        assert result.exit_code == 0, result.output

        def reject(constant):
            raise ValueError(f"non-standard JSON constant {constant}")

        data = json.loads(result.output, parse_constant=reject)
        air_gap, no_air_gap = data["series"]
        assert air_gap["name"] == "Air Gap"
        assert all(point["abs"] is None for point in air_gap["points"])
        assert all(0.0 <= point["abs"] <= 1.0 for point in no_air_gap["points"])


class TestTableOutput:
    """Tests for the rich table output."""

    def test_porous_absorber_table(self, runner):
        result = runner.invoke(main, ["porous-absorber", "--subdivisions", "1"])
        assert result.exit_code == 0, result.output
        assert "Rigid Backed Porous Absorber" in result.output
        assert "62.5 Hz" in result.output
        assert "16.00 kHz" in result.output

    def test_absorption_table_columns(self, air, cavity, porous_layer, normal_incidence):
        info = porous_absorber.calculate_plot_points(
            [125.0, 250.0], air, cavity, porous_layer, normal_incidence
        )
        table = absorption_table(info)
        assert [column.header for column in table.columns] == [
            "Frequency",
            "Air Gap",
            "No Air Gap",
        ]
        assert table.row_count == 2

    def test_format_absorption(self):
        assert format_absorption(0.5) == "0.50"
        assert format_absorption(float("nan")) == "n/a"


class TestInputErrors:
    """Out-of-range inputs are all reported and exit with status 1."""

    def test_single_error(self, runner):
        result = runner.invoke(main, ["porous-absorber", "--air-temp", "150"])
        assert result.exit_code == 1
        assert "Air Temperature" in result.output

    def test_all_errors_reported(self, runner):
        result = runner.invoke(
            main,
            ["porous-absorber", "--air-temp", "150", "--air-gap", "900", "--angle", "90"],
        )
        assert result.exit_code == 1
        assert "Invalid input (3)" in result.output
        assert "Air Temperature" in result.output
        assert "Air Gap" in result.output
        assert "Angle of Incidence" in result.output

    def test_bad_subdivisions(self, runner):
        result = runner.invoke(main, ["microperforated-panel", "--subdivisions", "4"])
        assert result.exit_code == 1
        assert "subdivisions" in result.output

    def test_bad_porosity(self, runner):
        result = runner.invoke(main, ["slotted-panel", "--porosity", "2"])
        assert result.exit_code == 1
        assert "Porosity" in result.output

    def test_json_not_printed_on_error(self, runner):
        result = runner.invoke(main, ["perforated-panel", "--hole-radius", "0.5", "--json"])
        assert result.exit_code == 1
        assert "Hole Radius" in result.output
        assert '"device"' not in result.output


class TestMain:
    """Tests for the command group."""

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_help_lists_commands(self, runner):
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        for command in (
            "porous-absorber",
            "perforated-panel",
            "slotted-panel",
            "microperforated-panel",
        ):
            assert command in result.output

    def test_log_file(self, runner, tmp_path):
        log_file = tmp_path / "absorb.log"
        result = runner.invoke(
            main,
            ["--verbose", "--log-file", str(log_file), "porous-absorber", "--subdivisions", "1"],
        )
        assert result.exit_code == 0, result.output
        contents = log_file.read_text()
        assert "Logging initialized." in contents
        assert "DEBUG" in contents


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_level_and_handlers(self, tmp_path):
        logger = setup_logging(logging.DEBUG, log_file=str(tmp_path / "test.log"))
        assert logger.name == "porous_absorber"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2

    def test_repeated_setup_does_not_duplicate_handlers(self):
        setup_logging(logging.WARNING)
        logger = setup_logging(logging.WARNING)
        assert len(logger.handlers) == 1

    def test_console_handler_writes_to_stderr(self):
        logger = setup_logging(logging.INFO)
        (handler,) = logger.handlers
        assert handler.stream is sys.stderr
        assert handler.formatter.datefmt == "%H:%M:%S"
