"""
Tests for conflict/similarity.py - scoring primitives
"""

import pytest
from datetime import datetime, timedelta, timezone

from calendar_mcp.conflict.config import ConflictDetectionConfig
from calendar_mcp.conflict.similarity import (
    duplicate_score,
    intervals_overlap,
    location_match,
    normalize_title,
    overlap_minutes,
    time_proximity,
    title_similarity,
)

BASE = datetime(2024, 1, 15, 10, 0, tzinfo=timezone.utc)


def at(minutes: int) -> datetime:
    return BASE + timedelta(minutes=minutes)


class TestTitleSimilarity:
    """Golden values for title similarity."""

    def test_normalize_title(self):
        assert normalize_title("  Team   SYNC ") == "team sync"
        assert normalize_title(None) == ""

    def test_identical_titles(self):
        assert title_similarity("Team Sync", "team  sync") == 1.0

    def test_word_order_ignored(self):
        assert title_similarity("Sync Team", "Team Sync") == 1.0

    @pytest.mark.parametrize("a,b,expected", [
        ("Team Sync", "Team Standup", 1 / 3),
        ("Weekly Team Sync", "Team Sync", 2 / 3),
        ("Dentist", "Team Sync", 0.0),
        ("Lunch with Sam", "Lunch with Alex", 0.5),
    ])
    def test_golden_values(self, a, b, expected):
        assert title_similarity(a, b) == pytest.approx(expected)

    def test_empty_title_scores_zero(self):
        assert title_similarity("", "Team Sync") == 0.0
        assert title_similarity(None, None) == 0.0

    def test_symmetric(self):
        assert title_similarity("Weekly Team Sync", "Team Sync") == title_similarity("Team Sync", "Weekly Team Sync")


class TestTimeProximity:
    """Tests for start-time proximity decay."""

    def test_identical_starts(self):
        assert time_proximity(BASE, BASE, 120) == 1.0

    def test_linear_decay(self):
        assert time_proximity(BASE, at(30), 120) == pytest.approx(0.75)
        assert time_proximity(at(60), BASE, 120) == pytest.approx(0.5)

    def test_zero_at_and_beyond_window(self):
        assert time_proximity(BASE, at(120), 120) == 0.0
        assert time_proximity(BASE, at(-600), 120) == 0.0


class TestLocationMatch:
    """Tests for location matching."""

    def test_case_insensitive_match(self):
        assert location_match("Room A", " room a ") == 1.0

    def test_different_locations(self):
        assert location_match("Room A", "Room B") == 0.0

    def test_one_missing(self):
        assert location_match("Room A", None) == 0.0

    def test_both_missing_match(self):
        assert location_match(None, "") == 1.0


class TestOverlap:
    """Tests for half-open interval overlap."""

    def test_overlapping(self):
        assert intervals_overlap(at(0), at(60), at(30), at(90))
        assert overlap_minutes(at(0), at(60), at(30), at(90)) == 30

    def test_adjacent_intervals_do_not_overlap(self):
        assert not intervals_overlap(at(0), at(60), at(60), at(120))
        assert overlap_minutes(at(0), at(60), at(60), at(120)) == 0

    def test_containment(self):
        assert intervals_overlap(at(0), at(120), at(30), at(60))
        assert overlap_minutes(at(0), at(120), at(30), at(60)) == 30

    def test_zero_length_interval_overlaps_nothing(self):
        assert not intervals_overlap(at(30), at(30), at(0), at(60))
        assert not intervals_overlap(at(0), at(60), at(30), at(30))
        assert not intervals_overlap(at(30), at(30), at(30), at(30))

    @pytest.mark.parametrize("a,b", [
        ((0, 60), (30, 90)),
        ((0, 60), (60, 120)),
        ((0, 120), (30, 60)),
        ((0, 30), (90, 120)),
        ((0, 0), (0, 60)),
    ])
    def test_symmetric(self, a, b):
        sa, ea = at(a[0]), at(a[1])
        sb, eb = at(b[0]), at(b[1])
        assert intervals_overlap(sa, ea, sb, eb) == intervals_overlap(sb, eb, sa, ea)


class TestDuplicateScore:
    """Tests for the weighted duplicate score."""

    def test_perfect_match(self):
        assert duplicate_score(1.0, 1.0, 1.0, ConflictDetectionConfig()) == 1.0

    def test_weights(self):
        assert duplicate_score(1.0, 0.0, 0.0, ConflictDetectionConfig()) == pytest.approx(0.6)
        assert duplicate_score(0.0, 1.0, 0.0, ConflictDetectionConfig()) == pytest.approx(0.3)
        assert duplicate_score(0.0, 0.0, 1.0, ConflictDetectionConfig()) == pytest.approx(0.1)

    def test_clamped(self):
        config = ConflictDetectionConfig(title_weight=1.0, time_weight=1.0, location_weight=1.0)
        assert duplicate_score(1.0, 1.0, 1.0, config) == 1.0

    def test_monotone_in_title_similarity(self):
        config = ConflictDetectionConfig()
        scores = [duplicate_score(t / 10, 0.5, 1.0, config) for t in range(11)]
        assert scores == sorted(scores)
