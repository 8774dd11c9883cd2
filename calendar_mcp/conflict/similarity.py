"""
Scoring primitives for conflict and duplicate detection.
"""

import re
from datetime import datetime
from typing import FrozenSet, Optional

from calendar_mcp.conflict.config import ConflictDetectionConfig

_WHITESPACE = re.compile(r"\s+")
_WORD = re.compile(r"\w+")


def normalize_title(title: Optional[str]) -> str:
    """Lower-case a title and collapse runs of whitespace."""
    if not title:
        return ""
    return _WHITESPACE.sub(" ", title).strip().lower()


def title_tokens(title: Optional[str]) -> FrozenSet[str]:
    """The set of words in a normalized title."""
    return frozenset(_WORD.findall(normalize_title(title)))


def title_similarity(a: Optional[str], b: Optional[str]) -> float:
    """
    Jaccard ratio of the word sets of two titles, in [0, 1].

    Identical titles (after normalization) score 1.0; an empty title scores 0.0.
    Word order does not matter, so "Sync: Team" and "team sync" are identical.

    Examples:
        >>> title_similarity("Team Sync", "team  sync")
        1.0
        >>> round(title_similarity("Team Sync", "Team Standup"), 4)
        0.3333
    """
    s1 = normalize_title(a)
    s2 = normalize_title(b)
    if not s1 or not s2:
        return 0.0
    if s1 == s2:
        return 1.0

    tokens_a = title_tokens(s1)
    tokens_b = title_tokens(s2)
    union = tokens_a | tokens_b
    if not union:
        return 0.0
    return len(tokens_a & tokens_b) / len(union)


def time_proximity(start_a: datetime, start_b: datetime, window_minutes: int) -> float:
    """
    1.0 for identical start times, decaying linearly to 0.0 at window_minutes apart.
    """
    difference = abs((start_a - start_b).total_seconds()) / 60
    if difference >= window_minutes:
        return 0.0
    return 1.0 - difference / window_minutes


def location_match(a: Optional[str], b: Optional[str]) -> float:
    """
    1.0 when both locations are equal ignoring case and surrounding whitespace, else 0.0.

    Two events with no location at all count as a match.
    """
    return 1.0 if (a or "").strip().casefold() == (b or "").strip().casefold() else 0.0


def intervals_overlap(start_a: datetime, end_a: datetime, start_b: datetime, end_b: datetime) -> bool:
    """
    Half-open overlap test: an event ending exactly when another starts does not overlap.

    A zero-length interval is empty and overlaps nothing.
    """
    if start_a >= end_a or start_b >= end_b:
        return False
    return start_a < end_b and start_b < end_a


def overlap_minutes(start_a: datetime, end_a: datetime, start_b: datetime, end_b: datetime) -> float:
    """Length of the intersection of two intervals in minutes (0 if disjoint)."""
    seconds = (min(end_a, end_b) - max(start_a, start_b)).total_seconds()
    return max(seconds, 0.0) / 60


def duplicate_score(
    title: float,
    proximity: float,
    location: float,
    config: ConflictDetectionConfig
) -> float:
    """
    Weighted duplicate score, clamped to [0, 1] and rounded to 4 places.

    Args:
        title (float): Title similarity.
        proximity (float): Temporal proximity of the start times.
        location (float): Location match.
        config (ConflictDetectionConfig): Supplies the weights.

    Returns:
        float: The combined score.
    """
    score = (
        config.title_weight * title
        + config.time_weight * proximity
        + config.location_weight * location
    )
    return round(min(max(score, 0.0), 1.0), 4)
