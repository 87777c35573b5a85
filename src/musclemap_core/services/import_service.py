"""
Import Service

Merges parsed workouts into a WorkoutStore.

Workflow:
1. preview  - resolve names and count likely duplicates without writing
2. import   - one transaction per workout: session, sets, per-muscle stimulation

Each workout is committed or rolled back before the next one starts, so a
duplicate check for a later workout sees every earlier workout of the batch.
"""

import logging
from datetime import timedelta
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from ..catalog import CanonicalExercise, ExerciseCatalog
from ..parsers.models import ParsedWorkout
from ..storage import (
    StimulationRecord,
    StorageError,
    WorkoutSession,
    WorkoutSetRecord,
    WorkoutStore,
)
from .exercise_resolver import ExerciseResolver

logger = logging.getLogger(__name__)


SESSION_DURATION = timedelta(hours=1)


# ============================================================================
# Result models
# ============================================================================

class ImportResult(BaseModel):
    """Outcome of one import batch"""
    sessions_created: int = 0
    sets_created: int = 0
    unmatched_exercises: List[str] = Field(default_factory=list, description="Sorted, unique raw names")
    duplicates_skipped: int = 0
    errors: List[str] = Field(default_factory=list)

    @property
    def is_success(self) -> bool:
        return not self.errors

    @property
    def summary(self) -> str:
        lines = [
            f"Imported {self.sessions_created} workouts",
            f"Added {self.sets_created} sets",
        ]
        if self.unmatched_exercises:
            lines.append(f"Unmatched exercises: {', '.join(self.unmatched_exercises)}")
        if self.duplicates_skipped > 0:
            lines.append(f"Skipped {self.duplicates_skipped} duplicates")
        if self.errors:
            lines.extend(self.errors)
        return "\n".join(lines)


class ImportPreview(BaseModel):
    """What an import would do, computed without writing"""
    workouts: List[ParsedWorkout] = Field(default_factory=list)
    matched_exercises: Dict[str, CanonicalExercise] = Field(default_factory=dict)
    unmatched_exercises: List[str] = Field(default_factory=list)
    potential_duplicates: int = 0

    @property
    def total_sets(self) -> int:
        return sum(w.total_sets for w in self.workouts)


# ============================================================================
# Service
# ============================================================================

class ImportService:
    """Resolve, de-duplicate and persist parsed workouts"""

    def __init__(
        self,
        store: WorkoutStore,
        catalog: Optional[ExerciseCatalog] = None,
        resolver: Optional[ExerciseResolver] = None,
    ):
        self.store = store
        self.resolver = resolver if resolver is not None else ExerciseResolver(catalog)

    def preview(self, workouts: List[ParsedWorkout]) -> ImportPreview:
        matched: Dict[str, CanonicalExercise] = {}
        unmatched = set()

        for workout in workouts:
            for exercise in workout.exercises:
                if exercise.name in matched or exercise.name in unmatched:
                    continue
                found = self.resolver.resolve(exercise.name)
                if found is not None:
                    matched[exercise.name] = found
                else:
                    unmatched.add(exercise.name)

        duplicates = sum(1 for w in workouts if self.store.exists_session_on(w.date))

        logger.info(
            f"Import preview: {len(workouts)} workouts, {len(matched)} matched, "
            f"{len(unmatched)} unmatched, {duplicates} potential duplicates"
        )
        return ImportPreview(
            workouts=workouts,
            matched_exercises=matched,
            unmatched_exercises=sorted(unmatched),
            potential_duplicates=duplicates,
        )

    def import_workouts(
        self,
        workouts: List[ParsedWorkout],
        skip_duplicates: bool = True,
    ) -> ImportResult:
        sessions_created = 0
        sets_created = 0
        duplicates_skipped = 0
        unmatched = set()
        failures: List[str] = []

        for workout in workouts:
            if skip_duplicates and self.store.exists_session_on(workout.date):
                duplicates_skipped += 1
                logger.debug(f"Skipping duplicate workout on {workout.date.date()}")
                continue

            try:
                with self.store.transaction():
                    created, missing = self._import_single_workout(workout)
            except StorageError as e:
                logger.error(f"Failed to import workout on {workout.date.date()}: {e}")
                failures.append(f"{workout.date.date().isoformat()}: {e}")
                continue

            sessions_created += 1
            sets_created += created
            unmatched.update(missing)

        errors = []
        if failures:
            errors.append(f"Failed to save {len(failures)} workout(s): " + "; ".join(failures))

        result = ImportResult(
            sessions_created=sessions_created,
            sets_created=sets_created,
            unmatched_exercises=sorted(unmatched),
            duplicates_skipped=duplicates_skipped,
            errors=errors,
        )
        logger.info(
            f"Import finished: {sessions_created} sessions, {sets_created} sets, "
            f"{duplicates_skipped} duplicates skipped, {len(failures)} failed"
        )
        return result

    def _import_single_workout(self, workout: ParsedWorkout):
        """Write one workout inside the caller's transaction.

        Returns (sets written, unmatched names).
        """
        session = WorkoutSession(
            start_date=workout.date,
            end_date=workout.date + SESSION_DURATION,
        )
        self.store.add_session(session)

        set_number = 1
        unmatched: List[str] = []
        muscle_set_counts: Dict[str, int] = {}
        muscle_max_intensity: Dict[str, float] = {}

        for exercise in workout.exercises:
            matched = self.resolver.resolve(exercise.name)
            if matched is None:
                unmatched.append(exercise.name)
                continue

            for parsed_set in exercise.sets:
                self.store.add_set(WorkoutSetRecord(
                    session_id=session.id,
                    exercise_id=matched.id,
                    set_number=set_number,
                    weight=parsed_set.weight,
                    reps=parsed_set.reps,
                    completed_at=workout.date,
                ))
                set_number += 1

                for muscle_id, intensity in matched.muscle_mapping.items():
                    muscle_set_counts[muscle_id] = muscle_set_counts.get(muscle_id, 0) + 1
                    muscle_max_intensity[muscle_id] = max(
                        muscle_max_intensity.get(muscle_id, 0.0),
                        intensity / 100.0,
                    )

        for muscle_id, total_sets in muscle_set_counts.items():
            self.store.add_stimulation(StimulationRecord(
                muscle=muscle_id,
                stimulation_date=workout.date,
                max_intensity=muscle_max_intensity[muscle_id],
                total_sets=total_sets,
                session_id=session.id,
            ))

        return set_number - 1, unmatched
