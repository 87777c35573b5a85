"""Exercise and muscle reference data."""

from .muscles import Muscle, MuscleGroup
from .models import CanonicalExercise
from .exercise_catalog import ExerciseCatalog

__all__ = ["Muscle", "MuscleGroup", "CanonicalExercise", "ExerciseCatalog"]
