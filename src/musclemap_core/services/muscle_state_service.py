"""Current per-muscle state derived from stored stimulation records."""

import logging
from datetime import datetime
from typing import Dict, Optional

from ..catalog import Muscle
from ..storage import StimulationRecord, WorkoutStore
from .recovery_calculator import RecoveryCalculator, RecoveryStatus

logger = logging.getLogger(__name__)


class MuscleStateService:

    def __init__(self, store: WorkoutStore):
        self.store = store

    def latest_stimulations(self) -> Dict[Muscle, StimulationRecord]:
        """Most recent record per muscle; records for unknown muscle ids are ignored"""
        latest: Dict[Muscle, StimulationRecord] = {}
        for record in self.store.list_stimulations():
            muscle = Muscle.from_id(record.muscle)
            if muscle is None:
                logger.debug(f"Ignoring stimulation for unknown muscle '{record.muscle}'")
                continue
            current = latest.get(muscle)
            if current is None or record.stimulation_date > current.stimulation_date:
                latest[muscle] = record
        return latest

    def recovery_statuses(self, now: Optional[datetime] = None) -> Dict[Muscle, RecoveryStatus]:
        now = now or datetime.now()
        return {
            muscle: RecoveryCalculator.recovery_status(
                record.stimulation_date, muscle, record.total_sets, now
            )
            for muscle, record in self.latest_stimulations().items()
        }
