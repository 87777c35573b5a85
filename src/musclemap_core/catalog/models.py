"""Canonical exercise definitions."""

from typing import Annotated, Dict, Optional
from pydantic import BaseModel, Field

from .muscles import Muscle


# Stimulation intensity in percent
Intensity = Annotated[int, Field(ge=0, le=100)]


class CanonicalExercise(BaseModel):
    """A catalog exercise with a fixed muscle stimulation mapping"""
    id: str = Field(..., description="Stable exercise id, e.g. 'bench_press'")
    name_en: str
    name_ja: str
    category: str = ""
    equipment: str = ""
    muscle_mapping: Dict[str, Intensity] = Field(
        default_factory=dict,
        description="muscle id -> stimulation intensity in percent (0-100)",
    )

    @property
    def primary_muscle(self) -> Optional[Muscle]:
        """Muscle with the highest stimulation percentage"""
        if not self.muscle_mapping:
            return None
        muscle_id = max(self.muscle_mapping, key=self.muscle_mapping.get)
        return Muscle.from_id(muscle_id)

    def stimulation_percentage(self, muscle: Muscle) -> int:
        """Stimulation percentage for a muscle, 0 when it is not targeted"""
        return self.muscle_mapping.get(muscle.value, 0)
