"""
Conflict & duplicate detection for proposed calendar events.

Example:
    from calendar_mcp.conflict import ConflictDetector, CandidateEvent
    from calendar_mcp.calendar.event_source import GoogleCalendarEventSource

    detector = ConflictDetector(GoogleCalendarEventSource(service))
    report = detector.detect(CandidateEvent(title="Team Sync", start="tomorrow 10am", end="tomorrow 11am"))
"""

from calendar_mcp.conflict.config import (
    BLOCKING_THRESHOLD,
    DEFAULT_DUPLICATE_THRESHOLD,
    ConflictDetectionConfig,
    load_detection_config,
)
from calendar_mcp.conflict.detector import ConflictDetector, EventSource, enforce_blocking_policy
from calendar_mcp.conflict.models import (
    CandidateEvent,
    DetectionOptions,
    DetectionReport,
    ExistingEvent,
    MatchResult,
)

__all__ = [
    "BLOCKING_THRESHOLD",
    "DEFAULT_DUPLICATE_THRESHOLD",
    "ConflictDetectionConfig",
    "load_detection_config",
    "ConflictDetector",
    "EventSource",
    "enforce_blocking_policy",
    "CandidateEvent",
    "DetectionOptions",
    "DetectionReport",
    "ExistingEvent",
    "MatchResult",
]
