"""
Markdown Parser

Parses training journals kept as Markdown notes (e.g. an Obsidian vault):

    ### 2026/1/18（背中）
    - ラットプルダウン: 68kg×21回, 75kg×8回
    - アシストチンニング: -27kg×10回

A date header starts a new workout; bullet lines under it are exercises
holding one or more ``<weight>kg×<reps>回`` set expressions. Negative weights
(assisted exercises) are kept as written.
"""

import re
import logging
from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Tuple

from .base import BaseParser
from .models import ParsedWorkout, ParsedExercise, ParsedSet

logger = logging.getLogger(__name__)

# Journal dates carry no time of day; noon keeps them clear of day boundaries
DEFAULT_HOUR = 12


class MarkdownParser(BaseParser):
    """Parser for Markdown training journals"""

    FORMAT_NAME = "markdown_journal"
    EXTENSIONS = ('.md', '.markdown')

    # "### 2026/1/18（背中）", group label optional, trailing text ignored
    DATE_HEADER_PATTERN = re.compile(
        r'###\s*(\d{4})/(\d{1,2})/(\d{1,2})'
        r'(?:\s*[（(]([^）)]+)[）)])?'
    )
    # "- name: set data"
    EXERCISE_PATTERN = re.compile(r'^[-*]\s*(.+?)[:：]\s*(.+)$')
    # "68kg×21回", "-27kg x 10", "182.5kg×11"
    SET_PATTERN = re.compile(r'(-?\d+(?:\.\d+)?)\s*kg\s*[×xX]\s*(\d+)回?')

    def parse(self, text: str) -> List[ParsedWorkout]:
        """Parse journal text; workouts are returned in document order"""
        workouts: List[ParsedWorkout] = []
        current_date: Optional[datetime] = None
        current_group: Optional[str] = None
        current_exercises: List[ParsedExercise] = []

        for line in text.splitlines():
            trimmed = line.strip()

            header = self.parse_date_header(trimmed)
            if header:
                if current_date is not None and current_exercises:
                    workouts.append(ParsedWorkout(
                        date=current_date,
                        muscle_group=current_group,
                        exercises=current_exercises,
                    ))
                current_date, current_group = header
                current_exercises = []
                continue

            if current_date is None:
                continue

            exercise = self.parse_exercise_line(trimmed)
            if exercise:
                current_exercises.append(exercise)

        if current_date is not None and current_exercises:
            workouts.append(ParsedWorkout(
                date=current_date,
                muscle_group=current_group,
                exercises=current_exercises,
            ))

        return workouts

    def parse_date_header(self, line: str) -> Optional[Tuple[datetime, Optional[str]]]:
        """Return (date at noon, group label) for a date header line"""
        match = self.DATE_HEADER_PATTERN.search(line)
        if not match:
            return None

        year, month, day = (int(match.group(i)) for i in range(1, 4))
        try:
            date = datetime(year, month, day, DEFAULT_HOUR)
        except ValueError:
            logger.debug(f"Ignoring impossible journal date: {line!r}")
            return None

        group = match.group(4).strip() if match.group(4) else None
        return date, group or None

    def parse_exercise_line(self, line: str) -> Optional[ParsedExercise]:
        """Parse one bullet line; lines without any set expression are ignored"""
        match = self.EXERCISE_PATTERN.match(line)
        if not match:
            return None

        name = match.group(1).strip()
        sets = self.parse_sets(match.group(2))
        if not name or not sets:
            return None

        return ParsedExercise(name=name, sets=sets)

    def parse_sets(self, text: str) -> List[ParsedSet]:
        """Extract every set expression from the rest of an exercise line"""
        return [
            ParsedSet(weight=float(m.group(1)), reps=int(m.group(2)))
            for m in self.SET_PATTERN.finditer(text)
        ]


def _format_weight(weight: float) -> str:
    if float(weight).is_integer():
        return str(int(weight))
    # Fixed-point only; SET_PATTERN does not read exponents
    text = format(Decimal(repr(float(weight))), "f")
    return text.rstrip("0").rstrip(".") if "." in text else text


def format_workout(workout: ParsedWorkout) -> str:
    """Serialize a workout back into journal Markdown"""
    header = f"### {workout.date.year}/{workout.date.month}/{workout.date.day}"
    if workout.muscle_group:
        header += f"（{workout.muscle_group}）"

    lines = [header]
    for exercise in workout.exercises:
        sets = ", ".join(
            f"{_format_weight(s.weight)}kg×{s.reps}回" for s in exercise.sets
        )
        lines.append(f"- {exercise.name}: {sets}")
    return "\n".join(lines)


def format_workouts(workouts: List[ParsedWorkout]) -> str:
    """Serialize several workouts, separated by blank lines"""
    return "\n\n".join(format_workout(w) for w in workouts) + "\n"
