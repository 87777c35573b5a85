"""Storage backends for imported workouts."""

from .models import WorkoutSession, WorkoutSetRecord, StimulationRecord
from .base import WorkoutStore, StorageError
from .memory_store import InMemoryWorkoutStore
from .sqlite_store import SQLiteWorkoutStore

__all__ = [
    "WorkoutSession",
    "WorkoutSetRecord",
    "StimulationRecord",
    "WorkoutStore",
    "StorageError",
    "InMemoryWorkoutStore",
    "SQLiteWorkoutStore",
]
