"""Tests for the in-memory and SQLite workout stores."""
from datetime import datetime, timedelta

import pytest

from musclemap_core.storage import (
    SQLiteWorkoutStore,
    StimulationRecord,
    StorageError,
    WorkoutSession,
    WorkoutSetRecord,
)


@pytest.fixture(params=["memory", "sqlite"])
def store(request, memory_store, tmp_path):
    if request.param == "memory":
        return memory_store
    return SQLiteWorkoutStore(tmp_path / "store.sqlite3")


def make_session(day=18, hour=12):
    start = datetime(2026, 1, day, hour)
    return WorkoutSession(start_date=start, end_date=start + timedelta(hours=1))


def make_stimulation(session, muscle="lats", days_offset=0, total_sets=3):
    return StimulationRecord(
        muscle=muscle,
        stimulation_date=session.start_date + timedelta(days=days_offset),
        max_intensity=0.8,
        total_sets=total_sets,
        session_id=session.id,
    )


class TestWorkoutStore:
    """Behaviour shared by every backend."""

    def test_add_and_list(self, store):
        session = make_session()
        store.add_session(session)
        store.add_set(WorkoutSetRecord(
            session_id=session.id,
            exercise_id="squat",
            set_number=1,
            weight=100,
            reps=5,
            completed_at=session.start_date,
        ))
        store.add_stimulation(make_stimulation(session))

        assert store.list_sessions() == [session]
        assert store.list_sets(session.id)[0].exercise_id == "squat"
        assert store.list_stimulations("lats")[0].session_id == session.id
        assert store.list_stimulations("biceps") == []

    def test_transaction_commits(self, store):
        session = make_session()
        with store.transaction():
            store.add_session(session)
            store.add_stimulation(make_stimulation(session))

        assert len(store.list_sessions()) == 1
        assert len(store.list_stimulations()) == 1

    def test_transaction_rolls_back_on_error(self, store):
        with pytest.raises(StorageError):
            with store.transaction():
                store.add_session(make_session())
                raise StorageError("boom")

        assert store.list_sessions() == []

    def test_transaction_rolls_back_on_any_exception(self, store):
        with pytest.raises(ValueError):
            with store.transaction():
                store.add_session(make_session())
                raise ValueError("bad data")

        assert store.list_sessions() == []

    def test_nested_transaction_rejected(self, store):
        with pytest.raises(StorageError):
            with store.transaction():
                with store.transaction():
                    pass

    def test_exists_session_on_same_day(self, store):
        store.add_session(make_session(day=18, hour=12))

        assert store.exists_session_on(datetime(2026, 1, 18, 0, 0))
        assert store.exists_session_on(datetime(2026, 1, 18, 23, 59))
        assert not store.exists_session_on(datetime(2026, 1, 17, 23, 59))
        assert not store.exists_session_on(datetime(2026, 1, 19, 0, 0))

    def test_latest_stimulation(self, store):
        session = make_session()
        store.add_session(session)
        store.add_stimulation(make_stimulation(session, days_offset=0, total_sets=2))
        store.add_stimulation(make_stimulation(session, days_offset=3, total_sets=5))

        latest = store.latest_stimulation("lats")
        assert latest.total_sets == 5
        assert store.latest_stimulation("biceps") is None


class TestSQLiteWorkoutStore:
    """SQLite specifics."""

    def test_data_persists_across_instances(self, tmp_path):
        path = tmp_path / "persist.sqlite3"
        session = make_session()
        SQLiteWorkoutStore(path).add_session(session)

        reopened = SQLiteWorkoutStore(path)
        assert reopened.list_sessions() == [session]

    def test_creates_parent_directory(self, tmp_path):
        path = tmp_path / "nested" / "dir" / "db.sqlite3"
        SQLiteWorkoutStore(path)
        assert path.exists()

    def test_duplicate_id_raises_storage_error(self, sqlite_store):
        session = make_session()
        sqlite_store.add_session(session)
        with pytest.raises(StorageError):
            sqlite_store.add_session(session)

    def test_failed_write_rolls_back_transaction(self, sqlite_store):
        """A constraint violation inside a transaction discards earlier writes."""
        existing = make_session(day=10)
        sqlite_store.add_session(existing)

        with pytest.raises(StorageError):
            with sqlite_store.transaction():
                sqlite_store.add_session(make_session(day=11))
                sqlite_store.add_session(existing)

        assert sqlite_store.list_sessions() == [existing]
