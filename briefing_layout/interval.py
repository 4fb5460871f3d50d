"""
Interval Model — reduce calendar events to minute-of-day intervals.

Minutes are the wall-clock hour * 60 + minute of each timestamp exactly as
supplied; timezones are resolved upstream. Seconds are truncated.

Midnight crossing: an event ending on a later calendar date than it starts
is clipped to 24:00 of its start day.
"""

import logging
from collections import Counter
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import datetime

from pydantic import ValidationError

from briefing_layout.errors import DuplicateEventError, InvalidEventError
from briefing_layout.models import (
    MINUTES_PER_DAY,
    CalendarEvent,
    Exclusion,
    ExclusionReason,
    Interval,
)
from briefing_layout.observability import log_fields

logger = logging.getLogger(__name__)


@dataclass
class NormalizedDay:
    """A day's events split into layable intervals and exclusions."""

    events: list[CalendarEvent] = field(default_factory=list)
    intervals: list[Interval] = field(default_factory=list)
    exclusions: list[Exclusion] = field(default_factory=list)


def _parse_timestamp(value: datetime | str) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value.strip())


def _minute_of_day(dt: datetime) -> int:
    return dt.hour * 60 + dt.minute


def to_interval(event: CalendarEvent) -> Interval | Exclusion:
    """
    Convert one event into an Interval, or an Exclusion saying why not.

    Never raises for bad event data.
    """
    if event.all_day:
        return Exclusion(event.google_id, ExclusionReason.ALL_DAY)

    if not event.start_time or not event.end_time:
        missing = "start_time" if not event.start_time else "end_time"
        return Exclusion(event.google_id, ExclusionReason.MISSING_TIME, f"{missing} is empty")

    try:
        start_dt = _parse_timestamp(event.start_time)
        end_dt = _parse_timestamp(event.end_time)
    except ValueError as exc:
        return Exclusion(event.google_id, ExclusionReason.UNPARSEABLE_TIME, str(exc))

    start = _minute_of_day(start_dt)
    if end_dt.date() > start_dt.date():
        end = MINUTES_PER_DAY
    elif end_dt.date() < start_dt.date():
        end = start
    else:
        end = _minute_of_day(end_dt)

    if end <= start:
        return Exclusion(
            event.google_id,
            ExclusionReason.NON_POSITIVE_DURATION,
            f"end {event.end_time} is not after start {event.start_time}",
        )

    return Interval(event_id=event.google_id, start=start, end=end, event=event)


def coerce_events(events: Iterable[CalendarEvent | Mapping]) -> list[CalendarEvent]:
    """Validate raw dicts into CalendarEvent; pass CalendarEvent through."""
    coerced = []
    for index, item in enumerate(events):
        if isinstance(item, CalendarEvent):
            coerced.append(item)
            continue
        if not isinstance(item, Mapping):
            raise InvalidEventError(
                f"Event #{index} must be a CalendarEvent or mapping, got {type(item).__name__}"
            )
        try:
            coerced.append(CalendarEvent.model_validate(dict(item)))
        except ValidationError as exc:
            raise InvalidEventError(f"Event #{index} failed validation: {exc}") from exc
    return coerced


def check_unique_ids(events: list[CalendarEvent]) -> None:
    """Raise DuplicateEventError if any google_id repeats."""
    counts = Counter(event.google_id for event in events)
    duplicates = sorted(event_id for event_id, n in counts.items() if n > 1)
    if duplicates:
        raise DuplicateEventError(duplicates)


def normalize_events(events: Iterable[CalendarEvent | Mapping]) -> NormalizedDay:
    """
    Validate a day's input and reduce it to intervals.

    Structural problems (bad shape, duplicate ids) raise. Per-event data
    problems become exclusions.
    """
    day = NormalizedDay(events=coerce_events(events))
    check_unique_ids(day.events)

    for event in day.events:
        result = to_interval(event)
        if isinstance(result, Exclusion):
            logger.debug(
                "Excluded event %s from layout: %s",
                result.event_id,
                result.reason.value,
                extra=log_fields(event_id=result.event_id, reason=result.reason.value),
            )
            day.exclusions.append(result)
        else:
            day.intervals.append(result)

    return day
