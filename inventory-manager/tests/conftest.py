"""
Pytest configuration for inventory tests.

This file adds the parent directory to the Python path so that tests
can import from the domain, repositories, services and scripts modules,
and provides a fixed clock for audit timestamps.
"""

import sys
from datetime import datetime
from pathlib import Path

import pytest

# Add the inventory-manager directory to the Python path
# so tests can import domain, repositories, etc.
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

FIXED_NOW = datetime(2025, 5, 9, 14, 30, 5)


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def storage_env(monkeypatch):
    """
    Start with the storage variables unset and undo whatever a test (or a .env
    file it loads) puts into them.
    """

    for var in ("INVENTORY_SNAPSHOT_PATH", "INVENTORY_LOG_PATH"):
        monkeypatch.setenv(var, "")
        monkeypatch.delenv(var)
    return monkeypatch
