"""
CSV Parser

Parses spreadsheet exports in the Strong / Hevy shape:

    Date,Exercise,Weight (kg),Reps,Sets

Features:
- Header-based format detection (unknown headers yield no workouts)
- Double-quoted fields with embedded commas
- Several date layouts, comma decimal separators in weights
- Rows grouped by calendar day and exercise name
"""

import logging
from collections import defaultdict
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from .base import BaseParser
from .models import ParsedWorkout, ParsedExercise, ParsedSet
from ..utils import to_int, to_float

logger = logging.getLogger(__name__)


# Tried in order, first successful parse wins
DATE_FORMATS = [
    "%Y-%m-%d",
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%d/%m/%Y",
    "%Y-%m-%d %H:%M:%S",
]

MIN_COLUMNS = 4  # date, exercise, weight, reps


class CSVFormat(str, Enum):
    """Known CSV layouts"""
    STRONG_HEVY = "strong_hevy"
    UNKNOWN = "unknown"


class CSVParser(BaseParser):
    """Parser for Strong/Hevy style CSV exports"""

    FORMAT_NAME = CSVFormat.STRONG_HEVY.value
    EXTENSIONS = ('.csv',)

    def parse(self, text: str) -> List[ParsedWorkout]:
        """Parse CSV text and return one workout per day, oldest first"""
        lines = [line.strip() for line in text.splitlines()]
        lines = [line for line in lines if line]

        if len(lines) < 2:
            return []

        detected = self.detect_format(lines[0])
        if detected == CSVFormat.UNKNOWN:
            logger.info(f"Unrecognized CSV header: {lines[0][:80]!r}")
            return []

        return self._parse_strong_hevy(lines[1:])

    @staticmethod
    def detect_format(header: str) -> CSVFormat:
        """Detect the CSV layout from its header line"""
        lowered = header.lower()
        if ("date" in lowered
                and "exercise" in lowered
                and ("weight" in lowered or "kg" in lowered)
                and "reps" in lowered):
            return CSVFormat.STRONG_HEVY
        return CSVFormat.UNKNOWN

    def _parse_strong_hevy(self, lines: List[str]) -> List[ParsedWorkout]:
        """Group data rows by day, then by exercise name"""
        # day -> exercise name -> sets
        workouts_by_day: Dict[datetime, Dict[str, List[ParsedSet]]] = defaultdict(dict)

        for line_no, line in enumerate(lines, start=2):
            columns = self.split_line(line)
            if len(columns) < MIN_COLUMNS:
                logger.debug(f"Skipping CSV line {line_no}: {len(columns)} columns")
                continue

            date = self.parse_date(columns[0])
            exercise_name = columns[1]
            weight = to_float(columns[2])
            reps = to_int(columns[3])

            if date is None or weight is None or reps is None or reps < 0:
                logger.debug(f"Skipping CSV line {line_no}: unparseable values")
                continue

            set_count = 1
            if len(columns) > MIN_COLUMNS:
                parsed_count = to_int(columns[4])
                if parsed_count is not None:
                    set_count = parsed_count

            day = datetime(date.year, date.month, date.day)
            sets = workouts_by_day[day].setdefault(exercise_name, [])
            for _ in range(set_count):
                sets.append(ParsedSet(weight=weight, reps=reps))

        workouts = []
        for day in sorted(workouts_by_day):
            exercises = [
                ParsedExercise(name=name, sets=sets)
                for name, sets in workouts_by_day[day].items()
                if sets
            ]
            if exercises:
                workouts.append(ParsedWorkout(date=day, muscle_group=None, exercises=exercises))

        return workouts

    @staticmethod
    def split_line(line: str) -> List[str]:
        """Split one CSV line on commas, honouring double quotes"""
        columns = []
        current = []
        in_quotes = False

        for char in line:
            if char == '"':
                in_quotes = not in_quotes
            elif char == ',' and not in_quotes:
                columns.append("".join(current).strip())
                current = []
            else:
                current.append(char)
        columns.append("".join(current).strip())

        return columns

    @staticmethod
    def parse_date(value: str) -> Optional[datetime]:
        """Parse a date using the first matching known layout"""
        for fmt in DATE_FORMATS:
            try:
                return datetime.strptime(value, fmt)
            except ValueError:
                continue
        return None
