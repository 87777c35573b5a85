"""Tests for resolving raw exercise names against the catalog."""
import pytest

from musclemap_core.catalog import CanonicalExercise, ExerciseCatalog
from musclemap_core.services import ExerciseResolver


@pytest.fixture
def resolver(catalog):
    return ExerciseResolver(catalog)


class TestExerciseResolver:
    """Lookup order and keyword fallbacks."""

    @pytest.mark.parametrize("name,expected_id", [
        ("ベンチプレス", "bench_press"),
        ("Bench Press", "bench_press"),
        ("bench press", "bench_press"),
        ("  スクワット  ", "squat"),
        ("デッドリフト", "deadlift"),
        ("ルーマニアンデッドリフト", "romanian_deadlift"),
    ])
    def test_exact_matches(self, resolver, name, expected_id):
        assert resolver.resolve(name).id == expected_id

    def test_substring_japanese(self, resolver):
        """A catalog name contained in the raw name matches."""
        assert resolver.resolve("ラットプルダウン（ワイド）").id == "lat_pulldown"

    def test_substring_english(self, resolver):
        """A raw name contained in the catalog name matches."""
        assert resolver.resolve("Pulldown").id == "lat_pulldown"

    @pytest.mark.parametrize("name,expected_id", [
        ("アシストチンニング", "lat_pulldown"),
        ("懸垂", "lat_pulldown"),
        ("Wide Lat Pull Machine", "lat_pulldown"),
        ("Smith Machine Squats", "squat"),
        ("Machine Leg Curls", "leg_curl"),
    ])
    def test_keyword_aliases(self, resolver, name, expected_id):
        assert resolver.resolve(name).id == expected_id

    @pytest.mark.parametrize("name", ["", "   ", "Zercher Carry", "unknown exercise"])
    def test_no_match(self, resolver, name):
        assert resolver.resolve(name) is None

    def test_japanese_name_checked_before_english(self):
        """An exact Japanese match wins over an exact English match."""
        catalog = ExerciseCatalog([
            CanonicalExercise(id="first", name_en="Row", name_ja="ロウ"),
            CanonicalExercise(id="second", name_en="Other", name_ja="Row"),
        ])
        assert ExerciseResolver(catalog).resolve("row").id == "second"

    def test_alias_target_missing_from_catalog(self):
        """Aliases pointing at ids absent from the catalog resolve to nothing."""
        catalog = ExerciseCatalog([CanonicalExercise(id="crunch", name_en="Crunch", name_ja="クランチ")])
        assert ExerciseResolver(catalog).resolve("チンニング") is None
