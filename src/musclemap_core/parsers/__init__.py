"""
Training-log parsers.

All parsers normalize into the same ParsedWorkout model.
"""

import os
from typing import List, Optional

from .models import ParsedSet, ParsedExercise, ParsedWorkout, ParseResult, FileInfo
from .base import BaseParser
from .csv_parser import CSVParser, CSVFormat
from .markdown_parser import MarkdownParser, format_workout, format_workouts
from .text_parser import OCRTextParser, SetInfo


class FileParserFactory:
    """Pick a parser for a file by its extension"""

    PARSERS = [CSVParser, MarkdownParser, OCRTextParser]

    @classmethod
    def file_info(cls, filename: str, content: bytes = b"") -> FileInfo:
        return FileInfo(
            filename=filename,
            extension=os.path.splitext(filename)[1].lower(),
            size_bytes=len(content),
        )

    @classmethod
    def get_parser(cls, file_info: FileInfo) -> Optional[BaseParser]:
        for parser_cls in cls.PARSERS:
            parser = parser_cls()
            if parser.can_parse(file_info):
                return parser
        return None

    @classmethod
    def parse_file(cls, filename: str, content: bytes) -> ParseResult:
        info = cls.file_info(filename, content)
        parser = cls.get_parser(info)
        if parser is None:
            return ParseResult(
                success=False,
                errors=[f"Unsupported file type: {info.extension or filename}"],
            )
        return parser.parse_file(content, info)

    @classmethod
    def supported_extensions(cls) -> List[str]:
        return [ext for parser_cls in cls.PARSERS for ext in parser_cls.EXTENSIONS if ext]


__all__ = [
    "ParsedSet",
    "ParsedExercise",
    "ParsedWorkout",
    "ParseResult",
    "FileInfo",
    "BaseParser",
    "CSVParser",
    "CSVFormat",
    "MarkdownParser",
    "format_workout",
    "format_workouts",
    "OCRTextParser",
    "SetInfo",
    "FileParserFactory",
]
