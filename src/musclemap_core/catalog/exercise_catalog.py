"""
Exercise Catalog

Read-only collection of canonical exercises, loaded from JSON.

The catalog is an ordinary object handed to the services that need it, so
tests can build one from fixtures. ``ExerciseCatalog.load_default()`` caches
the bundled catalog.
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

from .models import CanonicalExercise
from .muscles import Muscle
from ..config import settings

logger = logging.getLogger(__name__)


class ExerciseCatalog:
    """Lookup of canonical exercises by id, name and target muscle"""

    _default_cache: Optional["ExerciseCatalog"] = None

    def __init__(self, exercises: List[CanonicalExercise]):
        self._exercises = list(exercises)
        self._by_id: Dict[str, CanonicalExercise] = {e.id: e for e in self._exercises}

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> "ExerciseCatalog":
        """Load a catalog file; an unreadable file yields an empty catalog"""
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
            exercises = [CanonicalExercise(**item) for item in data]
            logger.info(f"Loaded {len(exercises)} exercises from {path}")
            return cls(exercises)
        except Exception as e:
            logger.error(f"Failed to load exercise catalog from {path}: {e}")
            return cls([])

    @classmethod
    def load_default(cls) -> "ExerciseCatalog":
        """Catalog at settings.CATALOG_PATH, loaded once"""
        if cls._default_cache is None:
            cls._default_cache = cls.from_json_file(settings.CATALOG_PATH)
        return cls._default_cache

    @property
    def exercises(self) -> List[CanonicalExercise]:
        return list(self._exercises)

    def __len__(self) -> int:
        return len(self._exercises)

    def lookup_by_id(self, exercise_id: str) -> Optional[CanonicalExercise]:
        return self._by_id.get(exercise_id)

    def lookup_by_name(self, name: str) -> Optional[CanonicalExercise]:
        """Case-insensitive exact match on either display name"""
        normalized = name.strip().lower()
        if not normalized:
            return None
        for exercise in self._exercises:
            if normalized in (exercise.name_ja.lower(), exercise.name_en.lower()):
                return exercise
        return None

    def exercises_targeting(self, muscle: Muscle) -> List[CanonicalExercise]:
        """Exercises hitting a muscle, strongest stimulation first"""
        targeting = [e for e in self._exercises if muscle.value in e.muscle_mapping]
        return sorted(targeting, key=lambda e: e.muscle_mapping[muscle.value], reverse=True)
