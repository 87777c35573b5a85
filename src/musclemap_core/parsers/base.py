"""
Base Parser

Abstract base class for all training-log parsers.

Every parser exposes a pure ``parse(text)`` that turns decoded text into
``ParsedWorkout`` objects, and inherits ``parse_file(content, file_info)`` which
wraps it with decoding, diagnostics and a ``ParseResult`` envelope.
"""

import logging
from abc import ABC, abstractmethod
from typing import List

from .models import ParseResult, ParsedWorkout, FileInfo

logger = logging.getLogger(__name__)


class BaseParser(ABC):
    """Abstract base class for training-log parsers"""

    FORMAT_NAME = "unknown"
    EXTENSIONS: tuple = ()

    def __init__(self):
        self.errors: List[str] = []
        self.warnings: List[str] = []

    @abstractmethod
    def parse(self, text: str) -> List[ParsedWorkout]:
        """
        Parse decoded text into workouts.

        Must not raise on malformed input: unrecognized formats return an
        empty list and malformed records are dropped.
        """
        pass

    def can_parse(self, file_info: FileInfo) -> bool:
        """Check if this parser can handle the given file"""
        return file_info.extension.lower() in self.EXTENSIONS

    def parse_file(self, content: bytes, file_info: FileInfo) -> ParseResult:
        """Decode file content and parse it into a ParseResult"""
        self.errors = []
        self.warnings = []

        try:
            text = self._decode_content(content)
            workouts = self.parse(text)

            if not workouts:
                self.add_warning(f"No workouts found in {file_info.filename}")

            total_rows = len([line for line in text.splitlines() if line.strip()])
            return ParseResult(
                success=len(self.errors) == 0,
                workouts=workouts,
                errors=self.errors,
                warnings=self.warnings,
                confidence=self._calculate_confidence(text, workouts),
                detected_format=self.FORMAT_NAME if workouts else None,
                total_rows=total_rows,
            )

        except Exception as e:
            logger.exception(f"Failed to parse {file_info.filename}: {e}")
            return ParseResult(
                success=False,
                errors=[f"Failed to parse {file_info.filename}: {str(e)}"],
                confidence=0,
            )

    def _calculate_confidence(self, text: str, workouts: List[ParsedWorkout]) -> float:
        """Structured formats either match or they don't"""
        return 90 if workouts else 0

    def _decode_content(self, content: bytes) -> str:
        """Decode bytes to string, trying multiple encodings"""
        encodings = ['utf-8-sig', 'cp932', 'latin-1']

        for encoding in encodings:
            try:
                return content.decode(encoding)
            except UnicodeDecodeError:
                continue

        # Fallback with error replacement
        return content.decode('utf-8', errors='replace')

    def add_error(self, error: str):
        """Add an error message"""
        self.errors.append(error)
        logger.error(f"Parser error: {error}")

    def add_warning(self, warning: str):
        """Add a warning message"""
        self.warnings.append(warning)
        logger.warning(f"Parser warning: {warning}")
