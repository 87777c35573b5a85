"""
Workout Store

Abstract storage collaborator for sessions, sets and stimulation records.

Writes made inside ``with store.transaction():`` become visible together when
the block exits normally and are discarded when it raises. Writes made
outside a transaction are committed immediately.
"""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from datetime import datetime, timedelta
from typing import Iterator, List, Optional, Tuple
import uuid

from .models import WorkoutSession, WorkoutSetRecord, StimulationRecord


class StorageError(RuntimeError):
    """The store refused a read or write"""


def day_bounds(date: datetime) -> Tuple[datetime, datetime]:
    """[start of day, start of next day) for a datetime"""
    start = datetime(date.year, date.month, date.day, tzinfo=date.tzinfo)
    return start, start + timedelta(days=1)


class WorkoutStore(ABC):
    """Abstract base class for workout storage backends"""

    @abstractmethod
    @contextmanager
    def transaction(self) -> Iterator["WorkoutStore"]:
        """Group writes so they commit or roll back together"""
        yield self

    @abstractmethod
    def add_session(self, session: WorkoutSession) -> None:
        pass

    @abstractmethod
    def add_set(self, workout_set: WorkoutSetRecord) -> None:
        pass

    @abstractmethod
    def add_stimulation(self, stimulation: StimulationRecord) -> None:
        pass

    @abstractmethod
    def list_sessions(self) -> List[WorkoutSession]:
        pass

    @abstractmethod
    def list_sets(self, session_id: Optional[uuid.UUID] = None) -> List[WorkoutSetRecord]:
        pass

    @abstractmethod
    def list_stimulations(self, muscle: Optional[str] = None) -> List[StimulationRecord]:
        pass

    def exists_session_on(self, date: datetime) -> bool:
        """True when a session starts on the same calendar day"""
        start, end = day_bounds(date)
        return any(start <= s.start_date < end for s in self.list_sessions())

    def latest_stimulation(self, muscle: str) -> Optional[StimulationRecord]:
        """Most recent stimulation record for a muscle id"""
        records = self.list_stimulations(muscle)
        if not records:
            return None
        return max(records, key=lambda r: r.stimulation_date)
