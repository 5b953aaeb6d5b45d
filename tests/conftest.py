# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures for all tests.
#
# FIXTURES:
# ---------
# - sample_row      → One raw CSV row, as csv.DictReader yields it
# - make_cell       → Build a Cell from keyword overrides of sample_row
# - store           → Empty CellStore
# - config          → CellsConfig that never touches the environment
# - csv_file        → Factory writing rows to a CSV under tmp_path
# ==============================================

import csv
import logging

import pytest

from cellstats.config import CellsConfig, reset_config
from cellstats.normalization import CELL_FIELDS, Cell
from cellstats.storage import CellStore


@pytest.fixture(autouse=True)
def _fresh_config():
    """Each test starts without a cached config or package log handlers."""
    reset_config()
    yield
    reset_config()
    logging.getLogger("cellstats").handlers.clear()


@pytest.fixture
def sample_row() -> dict:
    """Raw row matching the cells.csv format."""
    return {
        "oem": "Samsung",
        "model": "Galaxy S10",
        "launch_announced": "2019, February 20",
        "launch_status": "Available. Released 2019, March 08",
        "body_dimensions": "149.9 x 70.4 x 7.8 mm (5.90 x 2.77 x 0.31 in)",
        "body_weight": "157 g (5.54 oz)",
        "body_sim": "Single SIM (Nano-SIM) or Hybrid Dual SIM",
        "display_type": "Dynamic AMOLED capacitive touchscreen, 16M colors",
        "display_size": "6.1 inches, 93.2 cm2 (~88.3% screen-to-body ratio)",
        "display_resolution": "1440 x 3040 pixels, 19:9 ratio (~550 ppi density)",
        "features_sensors": "Fingerprint (under display, ultrasonic), accelerometer, gyro, proximity",
        "platform_os": "Android 9.0 (Pie), upgradable to Android 10, One UI 2",
    }


@pytest.fixture
def make_cell(sample_row):
    """Build a Cell from sample_row with some fields replaced."""
    def _make(**overrides) -> Cell:
        row = dict(sample_row)
        row.update(overrides)
        return Cell.from_raw(row)
    return _make


@pytest.fixture
def store() -> CellStore:
    return CellStore()


@pytest.fixture
def config(tmp_path) -> CellsConfig:
    return CellsConfig(
        csv_path=str(tmp_path / "cells.csv"),
        log_level="DEBUG",
        report_on_load=True,
        interactive=False,
    )


@pytest.fixture
def csv_file(tmp_path):
    """Write rows (dicts) to a CSV file and return its path."""
    def _write(rows, name="cells.csv", fieldnames=CELL_FIELDS):
        path = tmp_path / name
        with open(path, "w", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=list(fieldnames))
            writer.writeheader()
            for row in rows:
                writer.writerow(row)
        return path
    return _write
