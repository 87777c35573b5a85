"""
Text Parser

Parses loosely formatted text, typically OCR output from a screenshot of
another app or a handwritten log:

    2026/1/18
    ベンチプレス 60kg×10回 3セット
    Squat 80 kg x 8 3 sets

Every line is run through small pattern extractors (date, weight, reps, set
count, exercise name). Lines that yield nothing are ignored, so noisy input
degrades to fewer results rather than an error.
"""

import re
import logging
from datetime import datetime
from typing import Dict, List, NamedTuple, Optional

from .base import BaseParser
from .models import ParsedWorkout, ParsedExercise, ParsedSet

logger = logging.getLogger(__name__)

KG_PER_LB = 0.453592

UNKNOWN_EXERCISE_NAME = "unknown exercise"


class SetInfo(NamedTuple):
    """Sets extracted from one line and how sure we are about them"""
    sets: List[ParsedSet]
    confidence: float


class OCRTextParser(BaseParser):
    """Parser for unstructured OCR text"""

    FORMAT_NAME = "ocr_text"
    EXTENSIONS = ('.txt', '.text', '')

    # 60kg, 60 KG, 60キロ, 135lb, 225 lbs; longer units first so "lbs" is consumed whole
    WEIGHT_PATTERN = re.compile(r'(\d+\.?\d*)\s*(kg|KG|キロ|lbs|LBS|lb|LB|ポンド)')
    POUND_UNITS = {'lb', 'lbs', 'ポンド'}

    # 10rep, 10 reps, 10回
    REPS_PATTERN = re.compile(r'(\d+)\s*(reps|rep|REPS|REP|回)')
    # ×10, x10, X 10
    REPS_ALT_PATTERN = re.compile(r'[×xX]\s*(\d+)')

    # 3set, 3 sets, 3セット
    SET_COUNT_PATTERN = re.compile(r'(\d+)\s*(sets|set|セット|SETS|SET)')

    # 2026/1/18, 2026-01-18, 2026年1月18日, 1/18
    DATE_PATTERN = re.compile(r'(\d{4})?[/\-年]?(\d{1,2})[/\-月](\d{1,2})日?')

    BARE_DIGITS_PATTERN = re.compile(r'\d+')
    MULTI_SPACE_PATTERN = re.compile(r' {2,}')

    # Removed from candidate names after the numeric parts are gone
    NAME_PUNCTUATION = {
        ':': '',
        '-': ' ',
        '・': '',
        '×': '',
        ',': '',
        '.': '',
    }

    def parse(self, text: str, now: Optional[datetime] = None) -> List[ParsedWorkout]:
        """Parse OCR text into workouts sorted by date"""
        now = now or datetime.now()
        workouts: List[ParsedWorkout] = []
        accumulator = _WorkoutAccumulator(date=now)

        for line in text.splitlines():
            trimmed = line.strip()
            if not trimmed:
                continue

            date = self.extract_date(trimmed, now=now)
            if date is not None:
                if accumulator.seen_date and accumulator.exercises:
                    workouts.append(accumulator.flush())
                accumulator.date = date
                accumulator.seen_date = True
                continue

            set_info = self.extract_set_info(trimmed)
            if set_info is None:
                continue

            name = self.extract_exercise_name(trimmed) or UNKNOWN_EXERCISE_NAME
            accumulator.add(name, set_info.sets)

        if accumulator.exercises:
            workouts.append(accumulator.flush())

        return sorted(workouts, key=lambda w: w.date)

    def _calculate_confidence(self, text: str, workouts: List[ParsedWorkout]) -> float:
        """Average line confidence, scaled to 0-100"""
        if not workouts:
            return 0

        scores = []
        for line in text.splitlines():
            trimmed = line.strip()
            if not trimmed or self.extract_date(trimmed) is not None:
                continue
            set_info = self.extract_set_info(trimmed)
            if set_info is not None:
                scores.append(set_info.confidence)

        if not scores:
            return 0
        return round(sum(scores) / len(scores) * 100, 1)

    # ------------------------------------------------------------------
    # Extractors
    # ------------------------------------------------------------------

    @classmethod
    def extract_date(cls, text: str, now: Optional[datetime] = None) -> Optional[datetime]:
        """Extract a date; a missing year means the current year"""
        match = cls.DATE_PATTERN.search(text)
        if not match:
            return None

        year = int(match.group(1)) if match.group(1) else (now or datetime.now()).year
        try:
            return datetime(year, int(match.group(2)), int(match.group(3)))
        except ValueError:
            return None

    @classmethod
    def extract_weight(cls, text: str) -> Optional[float]:
        """Extract a weight in kg, converting pounds"""
        match = cls.WEIGHT_PATTERN.search(text)
        if not match:
            return None

        try:
            value = float(match.group(1))
        except ValueError:
            return None

        if match.group(2).lower() in cls.POUND_UNITS:
            return value * KG_PER_LB
        return value

    @classmethod
    def extract_reps(cls, text: str) -> Optional[int]:
        """Extract repetitions: '10回' style first, then '×10' style"""
        for pattern in (cls.REPS_PATTERN, cls.REPS_ALT_PATTERN):
            match = pattern.search(text)
            if match:
                return int(match.group(1))
        return None

    @classmethod
    def extract_set_count(cls, text: str) -> Optional[int]:
        """Extract a set count such as '3セット' or '3 sets'"""
        match = cls.SET_COUNT_PATTERN.search(text)
        if not match:
            return None
        return int(match.group(1))

    @classmethod
    def extract_set_info(cls, text: str) -> Optional[SetInfo]:
        """Build the sets described by one line, or None without weight and reps"""
        weight = cls.extract_weight(text)
        reps = cls.extract_reps(text)
        if weight is None and reps is None:
            return None

        set_count = cls.extract_set_count(text) or 1

        confidence = 0.0
        if weight is not None:
            confidence += 0.4
        if reps is not None:
            confidence += 0.4
        if set_count > 1:
            confidence += 0.2

        sets = [
            ParsedSet(weight=weight if weight is not None else 0, reps=reps if reps is not None else 0)
            for _ in range(set_count)
        ]
        return SetInfo(sets=sets, confidence=min(confidence, 1.0))

    @classmethod
    def extract_exercise_name(cls, text: str) -> Optional[str]:
        """Guess the exercise name by removing every numeric part of the line"""
        # Spans are collected on the original line so that one removal cannot
        # create or destroy a match for the next pattern ("×10回 3セット").
        removed = [False] * len(text)
        for pattern in (cls.WEIGHT_PATTERN, cls.REPS_PATTERN,
                        cls.REPS_ALT_PATTERN, cls.SET_COUNT_PATTERN):
            for match in pattern.finditer(text):
                for i in range(match.start(), match.end()):
                    removed[i] = True

        cleaned = "".join(char for char, drop in zip(text, removed) if not drop)
        cleaned = cls.BARE_DIGITS_PATTERN.sub('', cleaned)

        for char, replacement in cls.NAME_PUNCTUATION.items():
            cleaned = cleaned.replace(char, replacement)

        cleaned = cls.MULTI_SPACE_PATTERN.sub(' ', cleaned).strip()
        return cleaned or None


class _WorkoutAccumulator:
    """Exercises collected since the last date line"""

    def __init__(self, date: datetime):
        self.date = date
        self.seen_date = False
        self.exercises: List[ParsedExercise] = []
        self._by_name: Dict[str, ParsedExercise] = {}

    def add(self, name: str, sets: List[ParsedSet]):
        existing = self._by_name.get(name)
        if existing:
            existing.sets.extend(sets)
        else:
            exercise = ParsedExercise(name=name, sets=list(sets))
            self._by_name[name] = exercise
            self.exercises.append(exercise)

    def flush(self) -> ParsedWorkout:
        workout = ParsedWorkout(date=self.date, muscle_group=None, exercises=self.exercises)
        self.exercises = []
        self._by_name = {}
        return workout
