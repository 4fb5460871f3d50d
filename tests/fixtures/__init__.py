"""
Test fixtures for deterministic layout testing.

This module provides:
- make_event: CalendarEvent on a pinned day from 'HH:MM' strings
- minute strategies for Hypothesis property tests
"""

from .day_events import DAY, event_from_minutes, make_event, minute_to_iso, timed_events

__all__ = ["DAY", "make_event", "event_from_minutes", "minute_to_iso", "timed_events"]
