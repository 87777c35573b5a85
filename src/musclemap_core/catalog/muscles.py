"""Muscle reference data: 21 muscles in 6 groups with base recovery times."""

from enum import Enum
from typing import Dict, List, Optional


class MuscleGroup(str, Enum):
    """Body regions used for menu suggestions"""
    CHEST = "chest"
    BACK = "back"
    SHOULDERS = "shoulders"
    ARMS = "arms"
    CORE = "core"
    LOWER_BODY = "lower_body"

    @property
    def display_name(self) -> str:
        return _GROUP_NAMES[self]

    @property
    def muscles(self) -> List["Muscle"]:
        return [muscle for muscle in Muscle if muscle.group == self]


class Muscle(str, Enum):
    """Muscles tracked by the recovery model; values are catalog muscle ids"""
    # Chest
    CHEST_UPPER = "chest_upper"
    CHEST_LOWER = "chest_lower"
    # Back
    LATS = "lats"
    TRAPS_UPPER = "traps_upper"
    TRAPS_MIDDLE_LOWER = "traps_middle_lower"
    ERECTOR_SPINAE = "erector_spinae"
    # Shoulders
    DELTOID_ANTERIOR = "deltoid_anterior"
    DELTOID_LATERAL = "deltoid_lateral"
    DELTOID_POSTERIOR = "deltoid_posterior"
    # Arms
    BICEPS = "biceps"
    TRICEPS = "triceps"
    FOREARMS = "forearms"
    # Core
    RECTUS_ABDOMINIS = "rectus_abdominis"
    OBLIQUES = "obliques"
    # Lower body
    GLUTES = "glutes"
    QUADRICEPS = "quadriceps"
    HAMSTRINGS = "hamstrings"
    ADDUCTORS = "adductors"
    HIP_FLEXORS = "hip_flexors"
    GASTROCNEMIUS = "gastrocnemius"
    SOLEUS = "soleus"

    @classmethod
    def from_id(cls, muscle_id: str) -> Optional["Muscle"]:
        try:
            return cls(muscle_id)
        except ValueError:
            return None

    @property
    def display_name(self) -> str:
        return _MUSCLE_INFO[self][0]

    @property
    def group(self) -> MuscleGroup:
        return _MUSCLE_INFO[self][1]

    @property
    def base_recovery_hours(self) -> int:
        """Recovery time before volume adjustment"""
        return _MUSCLE_INFO[self][2]


# Recovery tiers
LARGE_MUSCLE_HOURS = 72
MEDIUM_MUSCLE_HOURS = 48
SMALL_MUSCLE_HOURS = 24

_GROUP_NAMES: Dict[MuscleGroup, str] = {
    MuscleGroup.CHEST: "Chest",
    MuscleGroup.BACK: "Back",
    MuscleGroup.SHOULDERS: "Shoulders",
    MuscleGroup.ARMS: "Arms",
    MuscleGroup.CORE: "Core",
    MuscleGroup.LOWER_BODY: "Lower body",
}

# muscle -> (display name, group, base recovery hours)
_MUSCLE_INFO: Dict[Muscle, tuple] = {
    Muscle.CHEST_UPPER: ("Upper chest", MuscleGroup.CHEST, MEDIUM_MUSCLE_HOURS),
    Muscle.CHEST_LOWER: ("Lower chest", MuscleGroup.CHEST, MEDIUM_MUSCLE_HOURS),
    Muscle.LATS: ("Lats", MuscleGroup.BACK, LARGE_MUSCLE_HOURS),
    Muscle.TRAPS_UPPER: ("Upper traps", MuscleGroup.BACK, LARGE_MUSCLE_HOURS),
    Muscle.TRAPS_MIDDLE_LOWER: ("Middle/lower traps", MuscleGroup.BACK, LARGE_MUSCLE_HOURS),
    Muscle.ERECTOR_SPINAE: ("Erector spinae", MuscleGroup.BACK, LARGE_MUSCLE_HOURS),
    Muscle.DELTOID_ANTERIOR: ("Front delts", MuscleGroup.SHOULDERS, MEDIUM_MUSCLE_HOURS),
    Muscle.DELTOID_LATERAL: ("Side delts", MuscleGroup.SHOULDERS, MEDIUM_MUSCLE_HOURS),
    Muscle.DELTOID_POSTERIOR: ("Rear delts", MuscleGroup.SHOULDERS, MEDIUM_MUSCLE_HOURS),
    Muscle.BICEPS: ("Biceps", MuscleGroup.ARMS, MEDIUM_MUSCLE_HOURS),
    Muscle.TRICEPS: ("Triceps", MuscleGroup.ARMS, MEDIUM_MUSCLE_HOURS),
    Muscle.FOREARMS: ("Forearms", MuscleGroup.ARMS, SMALL_MUSCLE_HOURS),
    Muscle.RECTUS_ABDOMINIS: ("Abs", MuscleGroup.CORE, SMALL_MUSCLE_HOURS),
    Muscle.OBLIQUES: ("Obliques", MuscleGroup.CORE, SMALL_MUSCLE_HOURS),
    Muscle.GLUTES: ("Glutes", MuscleGroup.LOWER_BODY, LARGE_MUSCLE_HOURS),
    Muscle.QUADRICEPS: ("Quadriceps", MuscleGroup.LOWER_BODY, LARGE_MUSCLE_HOURS),
    Muscle.HAMSTRINGS: ("Hamstrings", MuscleGroup.LOWER_BODY, LARGE_MUSCLE_HOURS),
    Muscle.ADDUCTORS: ("Adductors", MuscleGroup.LOWER_BODY, LARGE_MUSCLE_HOURS),
    Muscle.HIP_FLEXORS: ("Hip flexors", MuscleGroup.LOWER_BODY, LARGE_MUSCLE_HOURS),
    Muscle.GASTROCNEMIUS: ("Gastrocnemius", MuscleGroup.LOWER_BODY, SMALL_MUSCLE_HOURS),
    Muscle.SOLEUS: ("Soleus", MuscleGroup.LOWER_BODY, SMALL_MUSCLE_HOURS),
}
