"""
Parser Models

Pydantic models for the intermediate workout schema that all parsers output to.
Instances are created in memory by a parser, consumed once by the import
service and never persisted in this form.
"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field


class ParsedSet(BaseModel):
    """A single set: load and repetition count"""
    weight: float = Field(..., description="Load in kg; negative means assisted")
    reps: int = Field(..., ge=0, description="Completed repetitions")


class ParsedExercise(BaseModel):
    """An exercise as written in the source, not yet resolved to the catalog"""
    name: str = Field(..., description="Raw exercise name from the source")
    sets: List[ParsedSet] = Field(default_factory=list)


class ParsedWorkout(BaseModel):
    """One training day from any parser"""
    date: datetime = Field(..., description="Day of the workout; time of day is not meaningful")
    muscle_group: Optional[str] = Field(default=None, description="Free-text group label, e.g. '背中'")
    exercises: List[ParsedExercise] = Field(default_factory=list)

    @property
    def total_sets(self) -> int:
        return sum(len(exercise.sets) for exercise in self.exercises)


class ParseResult(BaseModel):
    """Result from a parser run over a whole file"""
    success: bool = True
    workouts: List[ParsedWorkout] = Field(default_factory=list)
    errors: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)

    # Detection quality
    confidence: float = Field(default=0, ge=0, le=100)
    detected_format: Optional[str] = None  # 'strong_hevy', 'markdown_journal', 'ocr_text'
    total_rows: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.workouts or all(not w.exercises for w in self.workouts)

    @property
    def summary(self) -> str:
        exercise_count = sum(len(w.exercises) for w in self.workouts)
        set_count = sum(w.total_sets for w in self.workouts)
        return f"Detected {len(self.workouts)} workouts, {exercise_count} exercises, {set_count} sets"


class FileInfo(BaseModel):
    """Information about the file being parsed"""
    filename: str
    extension: str
    size_bytes: int = 0
    encoding: Optional[str] = None
