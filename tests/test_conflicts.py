"""
Tests for the conflict reporter — direct pairwise overlaps, banner count,
mobile overlap titles.
"""

import pytest

from briefing_layout.conflicts import (
    conflict_pairs,
    count_conflicts,
    detect_conflicts,
    overlap_titles,
)
from briefing_layout.errors import DuplicateEventError
from tests.fixtures import make_event


def ids(conflicts):
    return {k: sorted(e.google_id for e in v) for k, v in conflicts.items()}


@pytest.fixture
def chained_day():
    return [
        make_event("A", "09:00", "10:00", title="Cabinet prep"),
        make_event("B", "09:30", "10:30", title="GPL board"),
        make_event("C", "10:15", "11:00", title="Press briefing"),
        make_event("D", "13:00", "14:00", title="Lunch"),
    ]


class TestDetectConflicts:
    def test_pairwise_not_transitive(self, chained_day):
        assert ids(detect_conflicts(chained_day)) == {
            "A": ["B"],
            "B": ["A", "C"],
            "C": ["B"],
        }

    def test_values_are_source_events(self, chained_day):
        conflicts = detect_conflicts(chained_day)
        assert conflicts["A"][0] is chained_day[1]

    def test_back_to_back_no_conflict(self):
        events = [make_event("A", "09:00", "10:00"), make_event("B", "10:00", "11:00")]
        assert detect_conflicts(events) == {}

    def test_excluded_events_never_conflict(self):
        events = [
            make_event("A", "09:00", "10:00"),
            make_event("allday", "00:00", "23:59", all_day=True),
            make_event("broken", "09:30", "09:00"),
            make_event("untimed", None, None),
        ]
        assert detect_conflicts(events) == {}

    def test_empty(self):
        assert detect_conflicts([]) == {}

    def test_dict_input(self):
        events = [
            {"google_id": "a", "start_time": "2026-10-19T09:00:00", "end_time": "2026-10-19T10:00:00"},
            {"google_id": "b", "start_time": "2026-10-19T09:59:00", "end_time": "2026-10-19T10:30:00"},
        ]
        assert ids(detect_conflicts(events)) == {"a": ["b"], "b": ["a"]}

    def test_duplicate_ids_rejected(self):
        with pytest.raises(DuplicateEventError):
            detect_conflicts([make_event("A", "09:00", "10:00"), make_event("A", "11:00", "12:00")])


class TestConflictSummary:
    def test_pairs(self, chained_day):
        assert conflict_pairs(chained_day) == [("A", "B"), ("B", "C")]

    def test_count(self, chained_day):
        assert count_conflicts(chained_day) == 2

    def test_count_full_overlap(self):
        events = [make_event(f"m{i}", "09:00", "10:00") for i in range(4)]
        assert count_conflicts(events) == 6

    def test_count_empty(self):
        assert count_conflicts([]) == 0

    def test_overlap_titles(self, chained_day):
        titles = overlap_titles(chained_day)
        assert titles["A"] == ["GPL board"]
        assert sorted(titles["B"]) == ["Cabinet prep", "Press briefing"]
        assert "D" not in titles
