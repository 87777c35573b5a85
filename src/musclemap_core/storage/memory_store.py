"""In-process workout store used by tests and previews."""

import logging
from contextlib import contextmanager
from typing import Iterator, List, Optional
import uuid

from .base import WorkoutStore, StorageError
from .models import WorkoutSession, WorkoutSetRecord, StimulationRecord

logger = logging.getLogger(__name__)


class InMemoryWorkoutStore(WorkoutStore):
    """Keeps records in lists; transactions stage writes until commit"""

    def __init__(self):
        self.sessions: List[WorkoutSession] = []
        self.sets: List[WorkoutSetRecord] = []
        self.stimulations: List[StimulationRecord] = []
        self._staged: Optional[dict] = None

    @contextmanager
    def transaction(self) -> Iterator["InMemoryWorkoutStore"]:
        if self._staged is not None:
            raise StorageError("Nested transactions are not supported")
        self._staged = {"sessions": [], "sets": [], "stimulations": []}
        try:
            yield self
        except Exception:
            logger.debug("Rolling back in-memory transaction")
            raise
        else:
            self.sessions.extend(self._staged["sessions"])
            self.sets.extend(self._staged["sets"])
            self.stimulations.extend(self._staged["stimulations"])
        finally:
            self._staged = None

    def _target(self, kind: str) -> list:
        if self._staged is not None:
            return self._staged[kind]
        return getattr(self, kind)

    def add_session(self, session: WorkoutSession) -> None:
        self._target("sessions").append(session)

    def add_set(self, workout_set: WorkoutSetRecord) -> None:
        self._target("sets").append(workout_set)

    def add_stimulation(self, stimulation: StimulationRecord) -> None:
        self._target("stimulations").append(stimulation)

    def list_sessions(self) -> List[WorkoutSession]:
        return list(self.sessions)

    def list_sets(self, session_id: Optional[uuid.UUID] = None) -> List[WorkoutSetRecord]:
        if session_id is None:
            return list(self.sets)
        return [s for s in self.sets if s.session_id == session_id]

    def list_stimulations(self, muscle: Optional[str] = None) -> List[StimulationRecord]:
        if muscle is None:
            return list(self.stimulations)
        return [s for s in self.stimulations if s.muscle == muscle]
