"""
Menu Suggestion Service

Suggests today's training menu from per-muscle stimulation records.

1. Score each muscle group by the mean recovery progress of its muscles
   (a muscle that was never trained scores 2.0).
2. The highest scoring group is primary and gets a fixed partner group.
3. Each muscle of the paired groups contributes its strongest catalog exercise.
4. The longest-neglected muscle (7+ days) adds one corrective exercise.
"""

import logging
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, Field

from ..catalog import CanonicalExercise, ExerciseCatalog, Muscle, MuscleGroup
from ..storage import StimulationRecord
from .recovery_calculator import NEGLECTED_DAYS, RecoveryCalculator

logger = logging.getLogger(__name__)


NEVER_TRAINED_SCORE = 2.0
EXERCISES_PER_GROUP = 3
MAX_EXERCISES = 6

GROUP_PAIRINGS: Dict[MuscleGroup, List[MuscleGroup]] = {
    MuscleGroup.CHEST: [MuscleGroup.CHEST, MuscleGroup.ARMS],
    MuscleGroup.BACK: [MuscleGroup.BACK, MuscleGroup.ARMS],
    MuscleGroup.SHOULDERS: [MuscleGroup.SHOULDERS, MuscleGroup.CORE],
    MuscleGroup.LOWER_BODY: [MuscleGroup.LOWER_BODY],
    MuscleGroup.ARMS: [MuscleGroup.ARMS, MuscleGroup.SHOULDERS],
    MuscleGroup.CORE: [MuscleGroup.CORE, MuscleGroup.SHOULDERS],
}


class SuggestedExercise(BaseModel):
    exercise: CanonicalExercise
    suggested_sets: int = Field(..., ge=1)
    suggested_reps: int = Field(..., ge=1)
    is_neglected_fix: bool = False


class SuggestedMenu(BaseModel):
    """Today's suggestion: primary group, its partner and a ranked exercise list"""
    primary_group: MuscleGroup
    paired_groups: List[MuscleGroup]
    reason: str
    exercises: List[SuggestedExercise] = Field(default_factory=list)
    neglected_warning: Optional[Muscle] = None


class MenuSuggestionService:

    def __init__(self, catalog: Optional[ExerciseCatalog] = None):
        self.catalog = catalog if catalog is not None else ExerciseCatalog.load_default()

    def suggest_today_menu(
        self,
        stimulations: Dict[Muscle, StimulationRecord],
        now: Optional[datetime] = None,
    ) -> SuggestedMenu:
        now = now or datetime.now()

        scores = self.group_scores(stimulations, now)
        # max() keeps the first of equal scores, i.e. declaration order
        primary = max(MuscleGroup, key=lambda group: scores[group])
        paired = GROUP_PAIRINGS[primary]

        exercises: List[SuggestedExercise] = []
        limit = len(paired) * EXERCISES_PER_GROUP
        for group in paired:
            for muscle in group.muscles:
                if len(exercises) >= limit:
                    break
                best = self._top_exercise(muscle)
                if best is not None and not self._contains(exercises, best):
                    exercises.append(SuggestedExercise(
                        exercise=best,
                        suggested_sets=3,
                        suggested_reps=10,
                    ))

        neglected = self.find_neglected_muscle(stimulations, now)
        if neglected is not None:
            fix = self._top_exercise(neglected[0])
            if fix is not None and not self._contains(exercises, fix):
                exercises.append(SuggestedExercise(
                    exercise=fix,
                    suggested_sets=2,
                    suggested_reps=12,
                    is_neglected_fix=True,
                ))

        exercises = exercises[:MAX_EXERCISES]

        menu = SuggestedMenu(
            primary_group=primary,
            paired_groups=paired,
            reason=self._reason(primary, neglected, stimulations),
            exercises=exercises,
            neglected_warning=neglected[0] if neglected else None,
        )
        logger.debug(f"Suggested {primary.value} menu with {len(exercises)} exercises")
        return menu

    @staticmethod
    def group_scores(
        stimulations: Dict[Muscle, StimulationRecord],
        now: datetime,
    ) -> Dict[MuscleGroup, float]:
        """Higher score means the group needs stimulation more"""
        scores: Dict[MuscleGroup, float] = {}
        for group in MuscleGroup:
            muscles = group.muscles
            total = 0.0
            for muscle in muscles:
                record = stimulations.get(muscle)
                if record is None:
                    total += NEVER_TRAINED_SCORE
                else:
                    total += RecoveryCalculator.recovery_progress(
                        record.stimulation_date, muscle, record.total_sets, now
                    )
            scores[group] = total / len(muscles)
        return scores

    @staticmethod
    def find_neglected_muscle(
        stimulations: Dict[Muscle, StimulationRecord],
        now: datetime,
    ) -> Optional[Tuple[Muscle, int]]:
        """Muscle with the most days since stimulation, if at least 7"""
        worst: Optional[Tuple[Muscle, int]] = None
        for muscle in Muscle:
            record = stimulations.get(muscle)
            if record is None:
                continue
            days = RecoveryCalculator.days_since_stimulation(record.stimulation_date, now)
            if days >= NEGLECTED_DAYS and (worst is None or days > worst[1]):
                worst = (muscle, days)
        return worst

    def _top_exercise(self, muscle: Muscle) -> Optional[CanonicalExercise]:
        targeting = self.catalog.exercises_targeting(muscle)
        return targeting[0] if targeting else None

    @staticmethod
    def _contains(exercises: List[SuggestedExercise], exercise: CanonicalExercise) -> bool:
        return any(s.exercise.id == exercise.id for s in exercises)

    @staticmethod
    def _reason(
        group: MuscleGroup,
        neglected: Optional[Tuple[Muscle, int]],
        stimulations: Dict[Muscle, StimulationRecord],
    ) -> str:
        if not stimulations:
            return f"No training recorded yet. Start with {group.display_name.lower()}."
        reason = f"{group.display_name} is the most recovered muscle group."
        if neglected is not None:
            muscle, days = neglected
            reason += f" {muscle.display_name} has not been trained for {days} days."
        return reason
