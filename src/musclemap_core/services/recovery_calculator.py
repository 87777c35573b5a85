"""
Recovery Calculator

Decay-based recovery model. Each muscle has a base recovery time (72/48/24h),
scaled by how many sets it received:

    sets    coefficient
    <=1     0.7
    2       0.85
    3       1.0
    4       1.1
    >=5     1.15

progress = clamp(elapsed hours / adjusted hours, 0, 1)
"""

import math
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..catalog import Muscle

NEGLECTED_DAYS = 7
NEGLECTED_SEVERE_DAYS = 14


class RecoveryState(str, Enum):
    RECOVERING = "recovering"
    FULLY_RECOVERED = "fully_recovered"
    NEGLECTED = "neglected"
    NEGLECTED_SEVERE = "neglected_severe"


class RecoveryStatus(BaseModel):
    """Recovery state of one muscle; progress is only meaningful while recovering"""
    model_config = ConfigDict(frozen=True)

    state: RecoveryState
    progress: float = Field(1.0, ge=0.0, le=1.0)

    @classmethod
    def recovering(cls, progress: float) -> "RecoveryStatus":
        return cls(state=RecoveryState.RECOVERING, progress=progress)

    @classmethod
    def fully_recovered(cls) -> "RecoveryStatus":
        return cls(state=RecoveryState.FULLY_RECOVERED)

    @classmethod
    def neglected(cls) -> "RecoveryStatus":
        return cls(state=RecoveryState.NEGLECTED)

    @classmethod
    def neglected_severe(cls) -> "RecoveryStatus":
        return cls(state=RecoveryState.NEGLECTED_SEVERE)

    @property
    def is_neglected(self) -> bool:
        return self.state in (RecoveryState.NEGLECTED, RecoveryState.NEGLECTED_SEVERE)


class RecoveryCalculator:
    """Stateless recovery functions; ``now`` defaults to the current time"""

    @staticmethod
    def volume_coefficient(total_sets: int) -> float:
        if total_sets <= 1:
            return 0.7
        if total_sets == 2:
            return 0.85
        if total_sets == 3:
            return 1.0
        if total_sets == 4:
            return 1.1
        return 1.15

    @classmethod
    def adjusted_recovery_hours(
        cls,
        muscle: Muscle,
        total_sets: int,
        base_hours: Optional[float] = None,
    ) -> float:
        base = muscle.base_recovery_hours if base_hours is None else base_hours
        return base * cls.volume_coefficient(total_sets)

    @classmethod
    def recovery_progress(
        cls,
        stimulation_date: datetime,
        muscle: Muscle,
        total_sets: int,
        now: Optional[datetime] = None,
        base_hours: Optional[float] = None,
    ) -> float:
        now = now or datetime.now()
        adjusted = cls.adjusted_recovery_hours(muscle, total_sets, base_hours)
        if adjusted <= 0:
            return 1.0
        elapsed_hours = (now - stimulation_date).total_seconds() / 3600
        return max(0.0, min(1.0, elapsed_hours / adjusted))

    @staticmethod
    def days_since_stimulation(stimulation_date: datetime, now: Optional[datetime] = None) -> int:
        """Whole elapsed days, floored"""
        now = now or datetime.now()
        return math.floor((now - stimulation_date).total_seconds() / 86400)

    @classmethod
    def recovery_status(
        cls,
        stimulation_date: datetime,
        muscle: Muscle,
        total_sets: int,
        now: Optional[datetime] = None,
        base_hours: Optional[float] = None,
    ) -> RecoveryStatus:
        now = now or datetime.now()
        # Neglect is judged in whole days, recovery in hours; the two are not reconciled.
        days = cls.days_since_stimulation(stimulation_date, now)
        if days >= NEGLECTED_SEVERE_DAYS:
            return RecoveryStatus.neglected_severe()
        if days >= NEGLECTED_DAYS:
            return RecoveryStatus.neglected()

        progress = cls.recovery_progress(stimulation_date, muscle, total_sets, now, base_hours)
        if progress >= 1.0:
            return RecoveryStatus.fully_recovered()
        return RecoveryStatus.recovering(progress)
