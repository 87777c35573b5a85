"""Import, recovery and menu services."""

from .exercise_resolver import ExerciseResolver, KEYWORD_ALIASES
from .import_service import ImportService, ImportResult, ImportPreview
from .journal_sync_service import JournalSyncService
from .recovery_calculator import RecoveryCalculator, RecoveryState, RecoveryStatus
from .muscle_state_service import MuscleStateService
from .menu_suggestion_service import MenuSuggestionService, SuggestedMenu, SuggestedExercise

__all__ = [
    "ExerciseResolver",
    "KEYWORD_ALIASES",
    "ImportService",
    "ImportResult",
    "ImportPreview",
    "JournalSyncService",
    "RecoveryCalculator",
    "RecoveryState",
    "RecoveryStatus",
    "MuscleStateService",
    "MenuSuggestionService",
    "SuggestedMenu",
    "SuggestedExercise",
]
