"""
Test fixtures for musclemap-core.

Provides a catalog built from the bundled exercise data, empty stores and a
fixed clock so recovery tests are deterministic.
"""

import sys
from datetime import datetime
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Make src/ importable so tests can do `import musclemap_core...`
for p in {ROOT, SRC}:
    p_str = str(p)
    if p_str not in sys.path:
        sys.path.insert(0, p_str)

from musclemap_core.catalog import ExerciseCatalog
from musclemap_core.config import DEFAULT_CATALOG_PATH
from musclemap_core.storage import InMemoryWorkoutStore, SQLiteWorkoutStore


# ---------------------------------------------------------------------------
# Reference data
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def catalog() -> ExerciseCatalog:
    """Bundled exercise catalog, loaded once per test session."""
    loaded = ExerciseCatalog.from_json_file(DEFAULT_CATALOG_PATH)
    assert len(loaded) > 0, "bundled catalog failed to load"
    return loaded


# ---------------------------------------------------------------------------
# Storage
# ---------------------------------------------------------------------------


@pytest.fixture
def memory_store() -> InMemoryWorkoutStore:
    return InMemoryWorkoutStore()


@pytest.fixture
def sqlite_store(tmp_path) -> SQLiteWorkoutStore:
    return SQLiteWorkoutStore(tmp_path / "musclemap.sqlite3")


# ---------------------------------------------------------------------------
# Clock
# ---------------------------------------------------------------------------


@pytest.fixture
def now() -> datetime:
    """Fixed 'current time' for recovery and menu tests."""
    return datetime(2026, 1, 20, 12, 0, 0)
