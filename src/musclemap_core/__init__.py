"""musclemap-core: training-log ingestion and muscle recovery model."""

from .parsers import (
    CSVParser,
    FileParserFactory,
    MarkdownParser,
    OCRTextParser,
    ParsedExercise,
    ParsedSet,
    ParsedWorkout,
    ParseResult,
)
from .catalog import CanonicalExercise, ExerciseCatalog, Muscle, MuscleGroup
from .storage import InMemoryWorkoutStore, SQLiteWorkoutStore, StorageError, WorkoutStore
from .services import (
    ExerciseResolver,
    ImportPreview,
    ImportResult,
    ImportService,
    JournalSyncService,
    MenuSuggestionService,
    MuscleStateService,
    RecoveryCalculator,
    RecoveryStatus,
    SuggestedMenu,
)

__version__ = "0.1.0"
