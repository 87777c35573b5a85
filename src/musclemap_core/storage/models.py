"""Persisted records written by the import service."""

import uuid
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class WorkoutSession(BaseModel):
    """One training session"""
    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    start_date: datetime
    end_date: Optional[datetime] = None
    note: Optional[str] = None

    @property
    def is_active(self) -> bool:
        return self.end_date is None


class WorkoutSetRecord(BaseModel):
    """One recorded set inside a session"""
    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    session_id: uuid.UUID
    exercise_id: str = Field(..., description="Canonical exercise id")
    set_number: int = Field(..., ge=1, description="1-based position within the session")
    weight: float = Field(..., description="kg; negative means assisted")
    reps: int = Field(..., ge=0)
    completed_at: datetime


class StimulationRecord(BaseModel):
    """How hard one muscle was worked in one session; input to the recovery model"""
    muscle: str = Field(..., description="Muscle id, e.g. 'lats'")
    stimulation_date: datetime
    max_intensity: float = Field(..., ge=0.0, le=1.0, description="Highest mapped intensity / 100")
    total_sets: int = Field(..., ge=1, description="Sets touching this muscle in the session")
    session_id: uuid.UUID
