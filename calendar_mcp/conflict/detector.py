"""
Conflict & Duplicate Detector

Compares a candidate event with the events already on one or more calendars
and classifies each as a conflict (overlapping time), a duplicate (similar
content), both, or neither. The report also says whether the best duplicate is
close enough that creation should be refused.
"""

import concurrent.futures
from datetime import datetime, timedelta
from typing import List, Optional, Protocol, Tuple

from calendar_mcp.calendar.datetime_normalizer import normalize_datetime, to_datetime
from calendar_mcp.conflict.config import ConflictDetectionConfig
from calendar_mcp.conflict.models import (
    CandidateEvent,
    DetectionOptions,
    DetectionReport,
    ExistingEvent,
    MatchResult,
)
from calendar_mcp.conflict.similarity import (
    duplicate_score,
    intervals_overlap,
    location_match,
    overlap_minutes,
    time_proximity,
    title_similarity,
)
from calendar_mcp.exceptions import BlockedDuplicate, DetectionUnavailable, ValidationError
from calendar_mcp.utils.logger import get_logger

logger = get_logger(__name__)


class EventSource(Protocol):
    """Anything that can list the events of a calendar inside a time window."""

    def fetch_events(self, calendar_id: str, time_min: datetime, time_max: datetime) -> List[ExistingEvent]:
        ...


def _dedupe(calendar_ids: List[str]) -> List[str]:
    seen = set()
    ordered = []
    for calendar_id in calendar_ids:
        if calendar_id and calendar_id not in seen:
            seen.add(calendar_id)
            ordered.append(calendar_id)
    return ordered


def build_suggestion(
    similarity: float,
    existing: ExistingEvent,
    existing_start: datetime,
    candidate_start: datetime,
    blocking: bool
) -> str:
    """Human-readable advice for a duplicate match."""
    percentage = round(similarity * 100)
    if existing_start == candidate_start:
        when = "at the same time"
    else:
        when = f"on {existing_start.strftime('%Y-%m-%d at %H:%M')}"

    advice = (
        "set allow_duplicates to override"
        if blocking
        else "consider updating the existing event instead"
    )
    return f"An event with {percentage}% similarity (\"{existing.title}\") already exists {when}; {advice}."


def enforce_blocking_policy(report: DetectionReport, allow_duplicates: bool = False) -> None:
    """
    Refuse creation when the report says so and the caller has not opted out.

    Raises:
        BlockedDuplicate: If report.should_block is true and allow_duplicates is false.
    """
    if report.should_block and not allow_duplicates:
        raise BlockedDuplicate(report.top_duplicate)


class ConflictDetector:
    """
    Scores a candidate event against existing events on the target calendars.

    Args:
        event_source (EventSource): Lists existing events per calendar.
        config (ConflictDetectionConfig): Thresholds, weights and search window.
    """

    def __init__(self, event_source: EventSource, config: Optional[ConflictDetectionConfig] = None) -> None:
        self.event_source = event_source
        self.config = config or ConflictDetectionConfig()

    def resolve_interval(self, candidate: CandidateEvent) -> Tuple[datetime, datetime]:
        """
        Normalize the candidate's start and end into aware datetimes.

        Raises:
            ValidationError: If either value cannot be understood or the end precedes the start.
        """
        start_value = normalize_datetime(candidate.start, candidate.timezone).value
        end_value = normalize_datetime(candidate.end, candidate.timezone).value

        start = to_datetime(start_value, candidate.timezone)
        if start is None:
            raise ValidationError(f"Could not parse start time: {candidate.start}")

        end = to_datetime(end_value, candidate.timezone)
        if end is None:
            raise ValidationError(f"Could not parse end time: {candidate.end}")

        if end < start:
            raise ValidationError("Event end time must not be before its start time")

        return start, end

    def _fetch_all(
        self,
        calendar_ids: List[str],
        time_min: datetime,
        time_max: datetime
    ) -> Tuple[List[ExistingEvent], List[str], List[str]]:
        """
        Fetch every calendar concurrently; a failed calendar contributes no events.

        Returns:
            Tuple: (events, calendars that answered, calendars that failed)
        """
        events: List[ExistingEvent] = []
        succeeded: List[str] = []
        failed: List[str] = []

        max_workers = min(len(calendar_ids), self.config.max_workers)
        with concurrent.futures.ThreadPoolExecutor(max_workers=max_workers) as executor:
            future_to_calendar = {
                executor.submit(self.event_source.fetch_events, calendar_id, time_min, time_max): calendar_id
                for calendar_id in calendar_ids
            }

            for future in concurrent.futures.as_completed(future_to_calendar):
                calendar_id = future_to_calendar[future]
                try:
                    events.extend(future.result())
                    succeeded.append(calendar_id)
                except Exception as e:
                    logger.warning(f"Could not check calendar {calendar_id}: {e}")
                    failed.append(calendar_id)

        # Report calendars in request order, not completion order
        order = {calendar_id: i for i, calendar_id in enumerate(calendar_ids)}
        succeeded.sort(key=order.__getitem__)
        failed.sort(key=order.__getitem__)
        return events, succeeded, failed

    def detect(self, candidate: CandidateEvent, options: Optional[DetectionOptions] = None) -> DetectionReport:
        """
        Classify the candidate against existing events.

        Args:
            candidate (CandidateEvent): The proposed event.
            options (Optional[DetectionOptions]): Calendars to check, switches and threshold.

        Returns:
            DetectionReport: Sorted conflicts and duplicates plus the blocking decision.

        Raises:
            ValidationError: If the candidate's times are invalid (raised before any fetch).
            DetectionUnavailable: If every requested calendar failed to return events.
        """
        options = options or DetectionOptions()
        start, end = self.resolve_interval(candidate)

        threshold = options.duplicate_similarity_threshold
        if threshold is None:
            threshold = self.config.default_duplicate_threshold

        calendar_ids = _dedupe(options.calendars_to_check or candidate.calendars_to_check or [candidate.calendar_id])
        if not calendar_ids:
            raise ValidationError("No calendar to check")

        if not (options.check_conflicts or options.check_duplicates):
            return DetectionReport(calendars_checked=[])

        padding = timedelta(hours=self.config.search_padding_hours)
        existing_events, succeeded, failed = self._fetch_all(calendar_ids, start - padding, end + padding)

        if not succeeded:
            raise DetectionUnavailable(
                "Could not query any of the requested calendars",
                failed_calendars=failed,
            )

        # (match, existing start) pairs; the start is only needed for ordering
        conflicts: List[Tuple[MatchResult, datetime]] = []
        duplicates: List[Tuple[MatchResult, datetime]] = []

        for existing in existing_events:
            if options.exclude_event_id and existing.id == options.exclude_event_id:
                continue

            existing_start = to_datetime(existing.start, candidate.timezone)
            existing_end = to_datetime(existing.end, candidate.timezone)
            if existing_start is None or existing_end is None:
                logger.debug(f"Skipping event {existing.id} with unparseable times")
                continue

            similarity = 0.0
            if options.check_duplicates:
                similarity = duplicate_score(
                    title_similarity(candidate.title, existing.title),
                    time_proximity(start, existing_start, self.config.proximity_window_minutes),
                    location_match(candidate.location, existing.location),
                    self.config,
                )

            if options.check_conflicts and intervals_overlap(start, end, existing_start, existing_end):
                conflict = MatchResult(
                    existing_event=existing,
                    similarity=similarity,
                    kind="conflict",
                    overlap_minutes=overlap_minutes(start, end, existing_start, existing_end),
                )
                conflicts.append((conflict, existing_start))

            if options.check_duplicates and similarity >= threshold:
                duplicate = MatchResult(
                    existing_event=existing,
                    similarity=similarity,
                    kind="duplicate",
                    suggestion=build_suggestion(
                        similarity,
                        existing,
                        existing_start,
                        start,
                        similarity >= self.config.blocking_threshold,
                    ),
                )
                duplicates.append((duplicate, existing_start))

        def tie_break(pair: Tuple[MatchResult, datetime]) -> tuple:
            match, existing_start = pair
            return (existing_start, match.existing_event.calendar_id, match.existing_event.id)

        conflicts.sort(key=lambda p: (-p[0].overlap_minutes, -p[0].similarity) + tie_break(p))
        duplicates.sort(key=lambda p: (-p[0].similarity,) + tie_break(p))

        conflict_matches = [match for match, _ in conflicts]
        duplicate_matches = [match for match, _ in duplicates]

        should_block = (
            bool(duplicate_matches)
            and duplicate_matches[0].similarity >= self.config.blocking_threshold
        )

        if failed:
            logger.info(f"Detection ran without calendars: {', '.join(failed)}")
        logger.debug(
            f"Detection for '{candidate.title}': {len(conflicts)} conflicts, "
            f"{len(duplicates)} duplicates, block={should_block}"
        )

        return DetectionReport(
            conflicts=conflict_matches,
            duplicates=duplicate_matches,
            should_block=should_block,
            calendars_checked=succeeded,
        )
