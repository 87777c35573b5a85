"""
Journal Sync Service

Imports a directory of Markdown training journals (e.g. an Obsidian vault).
Files are found recursively; hidden files and directories are skipped.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from ..config import settings
from ..parsers import FileParserFactory, MarkdownParser, ParsedWorkout
from .import_service import ImportPreview, ImportResult, ImportService

logger = logging.getLogger(__name__)


class JournalSyncService:
    """Parse every journal file under a directory and hand it to ImportService"""

    def __init__(self, import_service: ImportService, parser: Optional[MarkdownParser] = None):
        self.import_service = import_service
        self.parser = parser or MarkdownParser()

    @staticmethod
    def find_journal_files(directory: Union[str, Path]) -> List[Path]:
        """Markdown files under directory, sorted, hidden entries excluded"""
        root = Path(directory)
        files = []
        for path in root.rglob("*"):
            relative = path.relative_to(root)
            if any(part.startswith(".") for part in relative.parts):
                continue
            if path.is_file() and path.suffix.lower() in MarkdownParser.EXTENSIONS:
                files.append(path)
        return sorted(files)

    def load_workouts(self, directory: Union[str, Path]) -> List[ParsedWorkout]:
        workouts: List[ParsedWorkout] = []
        for path in self.find_journal_files(directory):
            try:
                content = path.read_bytes()
            except OSError as e:
                logger.warning(f"Skipping unreadable journal file {path}: {e}")
                continue

            result = self.parser.parse_file(content, FileParserFactory.file_info(path.name, content))
            if not result.success:
                logger.warning(f"Skipping journal file {path}: {'; '.join(result.errors)}")
                continue
            workouts.extend(result.workouts)

        logger.info(f"Loaded {len(workouts)} workouts from journals in {directory}")
        return workouts

    def _check_directory(self, directory: Union[str, Path]) -> Optional[str]:
        root = Path(directory)
        if not root.is_dir():
            return f"Journal directory not found: {root}"
        if not self.find_journal_files(root):
            return f"No Markdown files found in {root}"
        return None

    def sync_directory(
        self,
        directory: Union[str, Path],
        skip_duplicates: Optional[bool] = None,
    ) -> ImportResult:
        error = self._check_directory(directory)
        if error:
            logger.warning(error)
            return ImportResult(errors=[error])

        if skip_duplicates is None:
            skip_duplicates = settings.SKIP_DUPLICATES

        workouts = self.load_workouts(directory)
        return self.import_service.import_workouts(workouts, skip_duplicates=skip_duplicates)

    def preview_directory(self, directory: Union[str, Path]) -> ImportPreview:
        error = self._check_directory(directory)
        if error:
            logger.warning(error)
            return ImportPreview()
        return self.import_service.preview(self.load_workouts(directory))
