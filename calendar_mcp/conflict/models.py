"""
Conflict Detection Models

Request-scoped values used by the detector. None of them are persisted.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class CandidateEvent(BaseModel):
    """
    The event being proposed.

    ``start`` and ``end`` may be ISO values or natural-language phrases; the
    detector normalizes them in ``timezone``.
    """
    title: str
    start: str
    end: str
    calendar_id: str = "primary"
    timezone: str = "UTC"
    description: Optional[str] = None
    location: Optional[str] = None
    attendees: List[str] = []
    calendars_to_check: Optional[List[str]] = None


class ExistingEvent(BaseModel):
    """An event already on a checked calendar, as returned by the event source."""
    id: str
    title: str
    start: str
    end: str
    calendar_id: str
    is_all_day: bool = False
    location: Optional[str] = None
    url: Optional[str] = None


class DetectionOptions(BaseModel):
    """Per-call detection switches."""
    calendars_to_check: Optional[List[str]] = None
    check_conflicts: bool = True
    check_duplicates: bool = True
    # None means "use the configured default threshold"
    duplicate_similarity_threshold: Optional[float] = Field(None, ge=0.0, le=1.0)
    # The event being updated, so it is never compared with itself
    exclude_event_id: Optional[str] = None


class MatchResult(BaseModel):
    """An existing event matched against the candidate."""
    existing_event: ExistingEvent
    similarity: float = Field(ge=0.0, le=1.0)
    kind: Literal["conflict", "duplicate"]
    overlap_minutes: float = 0.0
    suggestion: Optional[str] = None


class DetectionReport(BaseModel):
    """Aggregate result of a single detection call."""
    conflicts: List[MatchResult] = []
    duplicates: List[MatchResult] = []
    should_block: bool = False
    calendars_checked: List[str] = []

    @property
    def top_duplicate(self) -> Optional[MatchResult]:
        """The highest-scoring duplicate, if any."""
        return self.duplicates[0] if self.duplicates else None
