"""
SQLite Workout Store

File-backed store. Datetimes are stored as ISO-8601 text, ids as UUID text.
Each public call opens its own connection unless a transaction is active,
in which case the transaction's connection is reused.
"""

import logging
import sqlite3
import uuid
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Iterator, List, Optional, Union

from .base import WorkoutStore, StorageError, day_bounds
from .models import WorkoutSession, WorkoutSetRecord, StimulationRecord
from ..config import settings

logger = logging.getLogger(__name__)


SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS workout_sessions (
        id TEXT PRIMARY KEY,
        start_date TEXT NOT NULL,
        end_date TEXT,
        note TEXT
    );
    """,
    """
    CREATE TABLE IF NOT EXISTS workout_sets (
        id TEXT PRIMARY KEY,
        session_id TEXT NOT NULL REFERENCES workout_sessions(id),
        exercise_id TEXT NOT NULL,
        set_number INTEGER NOT NULL,
        weight REAL NOT NULL,
        reps INTEGER NOT NULL,
        completed_at TEXT NOT NULL
    );
    """,
    """
    CREATE TABLE IF NOT EXISTS muscle_stimulations (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        muscle TEXT NOT NULL,
        stimulation_date TEXT NOT NULL,
        max_intensity REAL NOT NULL,
        total_sets INTEGER NOT NULL,
        session_id TEXT NOT NULL REFERENCES workout_sessions(id)
    );
    """,
    "CREATE INDEX IF NOT EXISTS idx_sessions_start ON workout_sessions(start_date);",
    "CREATE INDEX IF NOT EXISTS idx_stimulations_muscle ON muscle_stimulations(muscle, stimulation_date);",
)


def init_db(db_path: Path) -> None:
    """Create tables if they do not exist yet."""
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(db_path)
    try:
        cur = conn.cursor()
        for statement in SCHEMA:
            cur.execute(statement)
        conn.commit()
    finally:
        conn.close()


def _to_text(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def _from_text(value: Optional[str]) -> Optional[datetime]:
    return datetime.fromisoformat(value) if value is not None else None


class SQLiteWorkoutStore(WorkoutStore):
    """WorkoutStore backed by a SQLite database file"""

    def __init__(self, db_path: Optional[Union[str, Path]] = None):
        self.db_path = Path(db_path) if db_path is not None else settings.DB_PATH
        self._tx_conn: Optional[sqlite3.Connection] = None
        try:
            init_db(self.db_path)
        except sqlite3.Error as e:
            raise StorageError(f"Cannot initialise database at {self.db_path}: {e}") from e

    @contextmanager
    def _conn(self) -> Iterator[sqlite3.Connection]:
        if self._tx_conn is not None:
            yield self._tx_conn
            return
        conn = sqlite3.connect(self.db_path)
        try:
            yield conn
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            raise StorageError(str(e)) from e
        finally:
            conn.close()

    @contextmanager
    def transaction(self) -> Iterator["SQLiteWorkoutStore"]:
        if self._tx_conn is not None:
            raise StorageError("Nested transactions are not supported")
        conn = sqlite3.connect(self.db_path)
        self._tx_conn = conn
        try:
            yield self
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            raise StorageError(str(e)) from e
        except Exception:
            conn.rollback()
            raise
        finally:
            self._tx_conn = None
            conn.close()

    def _execute(self, sql: str, params: tuple) -> None:
        with self._conn() as conn:
            try:
                conn.execute(sql, params)
            except sqlite3.Error as e:
                logger.error(f"SQLite write failed: {e}")
                raise StorageError(str(e)) from e

    def add_session(self, session: WorkoutSession) -> None:
        self._execute(
            "INSERT INTO workout_sessions (id, start_date, end_date, note) VALUES (?, ?, ?, ?)",
            (str(session.id), _to_text(session.start_date), _to_text(session.end_date), session.note),
        )

    def add_set(self, workout_set: WorkoutSetRecord) -> None:
        self._execute(
            "INSERT INTO workout_sets "
            "(id, session_id, exercise_id, set_number, weight, reps, completed_at) "
            "VALUES (?, ?, ?, ?, ?, ?, ?)",
            (
                str(workout_set.id),
                str(workout_set.session_id),
                workout_set.exercise_id,
                workout_set.set_number,
                workout_set.weight,
                workout_set.reps,
                _to_text(workout_set.completed_at),
            ),
        )

    def add_stimulation(self, stimulation: StimulationRecord) -> None:
        self._execute(
            "INSERT INTO muscle_stimulations "
            "(muscle, stimulation_date, max_intensity, total_sets, session_id) "
            "VALUES (?, ?, ?, ?, ?)",
            (
                stimulation.muscle,
                _to_text(stimulation.stimulation_date),
                stimulation.max_intensity,
                stimulation.total_sets,
                str(stimulation.session_id),
            ),
        )

    def _query(self, sql: str, params: tuple = ()) -> list:
        with self._conn() as conn:
            try:
                return conn.execute(sql, params).fetchall()
            except sqlite3.Error as e:
                logger.error(f"SQLite read failed: {e}")
                raise StorageError(str(e)) from e

    def list_sessions(self) -> List[WorkoutSession]:
        rows = self._query(
            "SELECT id, start_date, end_date, note FROM workout_sessions ORDER BY start_date"
        )
        return [
            WorkoutSession(
                id=uuid.UUID(row[0]),
                start_date=_from_text(row[1]),
                end_date=_from_text(row[2]),
                note=row[3],
            )
            for row in rows
        ]

    def list_sets(self, session_id: Optional[uuid.UUID] = None) -> List[WorkoutSetRecord]:
        sql = (
            "SELECT id, session_id, exercise_id, set_number, weight, reps, completed_at "
            "FROM workout_sets"
        )
        params: tuple = ()
        if session_id is not None:
            sql += " WHERE session_id = ?"
            params = (str(session_id),)
        sql += " ORDER BY completed_at, set_number"
        return [
            WorkoutSetRecord(
                id=uuid.UUID(row[0]),
                session_id=uuid.UUID(row[1]),
                exercise_id=row[2],
                set_number=row[3],
                weight=row[4],
                reps=row[5],
                completed_at=_from_text(row[6]),
            )
            for row in self._query(sql, params)
        ]

    def list_stimulations(self, muscle: Optional[str] = None) -> List[StimulationRecord]:
        sql = (
            "SELECT muscle, stimulation_date, max_intensity, total_sets, session_id "
            "FROM muscle_stimulations"
        )
        params: tuple = ()
        if muscle is not None:
            sql += " WHERE muscle = ?"
            params = (muscle,)
        sql += " ORDER BY stimulation_date"
        return [
            StimulationRecord(
                muscle=row[0],
                stimulation_date=_from_text(row[1]),
                max_intensity=row[2],
                total_sets=row[3],
                session_id=uuid.UUID(row[4]),
            )
            for row in self._query(sql, params)
        ]

    def exists_session_on(self, date: datetime) -> bool:
        start, end = day_bounds(date)
        rows = self._query(
            "SELECT 1 FROM workout_sessions WHERE start_date >= ? AND start_date < ? LIMIT 1",
            (_to_text(start), _to_text(end)),
        )
        return bool(rows)
