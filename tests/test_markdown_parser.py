"""Unit tests for the Markdown journal parser and serializer."""
from datetime import datetime

import pytest

from musclemap_core.parsers import (
    MarkdownParser,
    ParsedExercise,
    ParsedSet,
    ParsedWorkout,
    format_workout,
    format_workouts,
)


@pytest.fixture
def parser():
    return MarkdownParser()


JOURNAL = """# トレーニング記録

### 2026/1/18（背中）
- ラットプルダウン: 68kg×21回, 75kg×8回
- アシストチンニング: -27kg×10回, -20kg×8回

### 2026/1/20（脚）⬆️PR更新
- スクワット: 100kg×5回, 102.5kg×5回
- メモ: 調子よし
"""


class TestMarkdownParser:
    """Parsing of journal documents."""

    def test_single_header_and_exercise(self, parser):
        """A header with one exercise line gives one workout with its sets."""
        workouts = parser.parse("### 2026/1/18（背中）\n- ラットプルダウン: 68kg×21回, 75kg×8回")

        assert len(workouts) == 1
        workout = workouts[0]
        assert workout.date.date() == datetime(2026, 1, 18).date()
        assert workout.muscle_group == "背中"
        assert workout.exercises == [
            ParsedExercise(name="ラットプルダウン", sets=[
                ParsedSet(weight=68, reps=21),
                ParsedSet(weight=75, reps=8),
            ])
        ]

    def test_date_is_noon(self, parser):
        """Journal dates are placed at 12:00."""
        workouts = parser.parse("### 2026/1/18\n- Squat: 100kg×5回")
        assert workouts[0].date == datetime(2026, 1, 18, 12, 0)

    def test_full_journal(self, parser):
        """Multiple headers produce workouts in document order."""
        workouts = parser.parse(JOURNAL)

        assert len(workouts) == 2
        assert workouts[0].muscle_group == "背中"
        assert workouts[1].muscle_group == "脚"
        assert [e.name for e in workouts[1].exercises] == ["スクワット"]
        assert workouts[1].exercises[0].sets[1] == ParsedSet(weight=102.5, reps=5)

    def test_negative_weight_preserved(self, parser):
        """Assisted exercises keep their negative weight."""
        workouts = parser.parse(JOURNAL)
        assisted = workouts[0].exercises[1]
        assert assisted.name == "アシストチンニング"
        assert [s.weight for s in assisted.sets] == [-27, -20]

    def test_line_without_sets_ignored(self, parser):
        """Bullet lines without a set expression are not exercises."""
        workouts = parser.parse(JOURNAL)
        assert "メモ" not in [e.name for e in workouts[1].exercises]

    def test_header_without_group(self, parser):
        """The group label is optional."""
        workouts = parser.parse("### 2026/1/18\n- Squat: 100kg×5回")
        assert workouts[0].muscle_group is None

    def test_ascii_parentheses_group(self, parser):
        """ASCII parentheses are accepted around the group label."""
        workouts = parser.parse("### 2026/1/18 (legs)\n- Squat: 100kg x 5")
        assert workouts[0].muscle_group == "legs"
        assert workouts[0].exercises[0].sets == [ParsedSet(weight=100, reps=5)]

    def test_exercise_before_header_ignored(self, parser):
        """Exercise lines before the first date header are dropped."""
        workouts = parser.parse("- Squat: 100kg×5回\n### 2026/1/18\n- Bench: 60kg×10回")
        assert len(workouts) == 1
        assert [e.name for e in workouts[0].exercises] == ["Bench"]

    def test_header_without_exercises_is_skipped(self, parser):
        """A header followed directly by another header produces no workout."""
        workouts = parser.parse("### 2026/1/17\n### 2026/1/18\n- Bench: 60kg×10回")
        assert len(workouts) == 1
        assert workouts[0].date.day == 18

    def test_impossible_date_is_not_a_header(self, parser):
        """Month 13 is not a date header; its lines stay with the previous workout."""
        text = "### 2026/1/18\n- Bench: 60kg×10回\n### 2026/13/1\n- Squat: 100kg×5回"
        workouts = parser.parse(text)

        assert len(workouts) == 1
        assert [e.name for e in workouts[0].exercises] == ["Bench", "Squat"]

    def test_full_width_colon(self, parser):
        """A full-width colon separates name and sets."""
        workouts = parser.parse("### 2026/1/18\n- ベンチプレス：60kg×10回")
        assert workouts[0].exercises[0].name == "ベンチプレス"

    def test_empty_input(self, parser):
        assert parser.parse("") == []


class TestParseHelpers:
    """Line-level helpers."""

    def test_parse_sets_variants(self, parser):
        """Set expressions accept ×, x and X, with or without 回."""
        sets = parser.parse_sets("60kg×10回, 62.5 kg x 8, 65kgX6")
        assert sets == [
            ParsedSet(weight=60, reps=10),
            ParsedSet(weight=62.5, reps=8),
            ParsedSet(weight=65, reps=6),
        ]

    def test_parse_date_header_rejects_plain_text(self, parser):
        assert parser.parse_date_header("2026/1/18") is None

    def test_parse_exercise_line_requires_bullet(self, parser):
        assert parser.parse_exercise_line("Squat: 100kg×5回") is None


class TestFormatWorkout:
    """Serializing workouts back into journal Markdown."""

    def test_format_matches_journal_grammar(self):
        """Output uses the header and bullet layout of hand-written journals."""
        workout = ParsedWorkout(
            date=datetime(2026, 1, 18, 12),
            muscle_group="背中",
            exercises=[ParsedExercise(name="ラットプルダウン", sets=[
                ParsedSet(weight=68, reps=21),
                ParsedSet(weight=75, reps=8),
            ])],
        )
        assert format_workout(workout) == "### 2026/1/18（背中）\n- ラットプルダウン: 68kg×21回, 75kg×8回"

    @pytest.mark.parametrize("workout", [
        ParsedWorkout(
            date=datetime(2026, 1, 18, 12),
            muscle_group="背中",
            exercises=[
                ParsedExercise(name="ラットプルダウン", sets=[
                    ParsedSet(weight=68, reps=21),
                    ParsedSet(weight=75, reps=8),
                ]),
                ParsedExercise(name="アシストチンニング", sets=[ParsedSet(weight=-27, reps=10)]),
            ],
        ),
        ParsedWorkout(
            date=datetime(2025, 12, 31, 12),
            muscle_group=None,
            exercises=[ParsedExercise(name="Deadlift", sets=[
                ParsedSet(weight=182.5, reps=11),
                ParsedSet(weight=0, reps=0),
            ])],
        ),
        ParsedWorkout(
            date=datetime(2026, 1, 19, 12),
            muscle_group=None,
            exercises=[ParsedExercise(name="Curl", sets=[ParsedSet(weight=0.00001, reps=10)])],
        ),
    ], ids=["back-day", "fractional-weight", "tiny-weight"])
    def test_round_trip(self, parser, workout):
        """Parsing a serialized workout gives back an equal workout."""
        assert parser.parse(format_workout(workout)) == [workout]

    @pytest.mark.parametrize("weight,expected", [
        (0.00001, "0.00001kg"),
        (1234567.25, "1234567.25kg"),
        (2.5, "2.5kg"),
    ])
    def test_weight_written_in_fixed_point(self, weight, expected):
        """Small and large weights never use exponent notation."""
        workout = ParsedWorkout(
            date=datetime(2026, 1, 19, 12),
            exercises=[ParsedExercise(name="Curl", sets=[ParsedSet(weight=weight, reps=10)])],
        )
        assert f"- Curl: {expected}×10回" in format_workout(workout)

    def test_round_trip_many(self, parser):
        """Several workouts survive serialization as one document."""
        workouts = parser.parse(JOURNAL)
        assert parser.parse(format_workouts(workouts)) == workouts
