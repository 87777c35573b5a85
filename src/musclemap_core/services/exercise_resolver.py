"""
Exercise Resolver

Maps free-form exercise names from parsed logs onto catalog exercises.

Lookup order:
1. exact Japanese name (case-insensitive)
2. exact English name (case-insensitive)
3. substring match in either direction on the Japanese name
4. substring match in either direction on the English name
5. keyword alias table
"""

import logging
from typing import List, Optional, Tuple

from ..catalog import CanonicalExercise, ExerciseCatalog

logger = logging.getLogger(__name__)


# (keyword, catalog id); checked in order against the lower-cased name
KEYWORD_ALIASES: List[Tuple[str, str]] = [
    ("ベンチプレス", "bench_press"),
    ("bench press", "bench_press"),
    ("チンニング", "lat_pulldown"),
    ("懸垂", "lat_pulldown"),
    ("ラットプル", "lat_pulldown"),
    ("lat pull", "lat_pulldown"),
    ("シーテッドロー", "seated_row"),
    ("seated row", "seated_row"),
    ("レッグプレス", "leg_press"),
    ("leg press", "leg_press"),
    ("レッグカール", "leg_curl"),
    ("leg curl", "leg_curl"),
    ("スクワット", "squat"),
    ("squat", "squat"),
    ("デッドリフト", "deadlift"),
    ("deadlift", "deadlift"),
]


class ExerciseResolver:
    """Resolve raw exercise names against an ExerciseCatalog"""

    def __init__(self, catalog: Optional[ExerciseCatalog] = None):
        self.catalog = catalog if catalog is not None else ExerciseCatalog.load_default()

    def resolve(self, name: str) -> Optional[CanonicalExercise]:
        normalized = name.strip().lower()
        if not normalized:
            return None

        exercises = self.catalog.exercises

        for exercise in exercises:
            if exercise.name_ja.lower() == normalized:
                return exercise
        for exercise in exercises:
            if exercise.name_en.lower() == normalized:
                return exercise

        for exercise in exercises:
            if self._contains_either_way(exercise.name_ja, normalized):
                return exercise
        for exercise in exercises:
            if self._contains_either_way(exercise.name_en, normalized):
                return exercise

        for keyword, exercise_id in KEYWORD_ALIASES:
            if keyword in normalized:
                exercise = self.catalog.lookup_by_id(exercise_id)
                if exercise is not None:
                    return exercise

        logger.debug(f"No catalog match for exercise name '{name}'")
        return None

    @staticmethod
    def _contains_either_way(candidate: str, normalized: str) -> bool:
        candidate = candidate.lower()
        if not candidate:
            return False
        return candidate in normalized or normalized in candidate
