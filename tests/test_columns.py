"""
Tests for the column assignor — greedy placement with a column cap.
"""

import logging

import pytest

from briefing_layout.clusters import build_clusters
from briefing_layout.columns import UNBOUNDED, assign_columns
from briefing_layout.errors import ClusterIntegrityError
from briefing_layout.interval import normalize_events
from tests.fixtures import make_event


def single_cluster(*events):
    clusters = build_clusters(normalize_events(events).intervals)
    assert len(clusters) == 1
    return clusters[0]


def columns_of(layout):
    return {event_id: info.column for event_id, info in layout.items()}


class TestGreedyPlacement:
    def test_reuses_freed_column(self):
        cluster = single_cluster(
            make_event("A", "09:00", "10:00"),
            make_event("B", "09:30", "10:30"),
            make_event("C", "10:15", "11:00"),
        )
        layout = assign_columns(cluster)
        assert columns_of(layout) == {"A": 0, "B": 1, "C": 0}
        assert {info.total_columns for info in layout.values()} == {2}
        assert not any(info.forced for info in layout.values())

    def test_first_free_column_wins(self):
        cluster = single_cluster(
            make_event("A", "09:00", "09:30"),
            make_event("B", "09:00", "10:00"),
            make_event("C", "09:00", "11:00"),
            make_event("D", "09:30", "12:00"),
        )
        # C (longest) col 0, B col 1, A col 2; D starts as A ends -> col 2
        layout = assign_columns(cluster)
        assert columns_of(layout) == {"C": 0, "B": 1, "A": 2, "D": 2}
        assert layout["D"].total_columns == 3

    def test_input_order_irrelevant(self):
        events = [
            make_event("A", "09:00", "10:00"),
            make_event("B", "09:30", "10:30"),
            make_event("C", "10:15", "11:00"),
        ]
        forward = assign_columns(single_cluster(*events))
        backward = assign_columns(list(reversed(single_cluster(*events))))
        assert forward == backward

    def test_singleton(self):
        layout = assign_columns(single_cluster(make_event("D", "13:00", "14:00")))
        assert layout["D"].column == 0
        assert layout["D"].total_columns == 1

    def test_empty_cluster(self):
        assert assign_columns([]) == {}


class TestColumnCap:
    def test_fifth_identical_meeting_is_forced(self):
        cluster = single_cluster(*[make_event(f"m{i}", "09:00", "10:00") for i in range(5)])
        layout = assign_columns(cluster, column_cap=4)

        assert {info.total_columns for info in layout.values()} == {4}
        forced = [info for info in layout.values() if info.forced]
        assert len(forced) == 1
        # all columns end at 10:00; lowest index wins the tie
        assert forced[0].event_id == "m4"
        assert forced[0].column == 0

    def test_forced_into_soonest_ending_column(self):
        cluster = single_cluster(
            make_event("a", "09:00", "12:00"),
            make_event("b", "09:00", "10:00"),
            make_event("c", "09:15", "11:00"),
        )
        layout = assign_columns(cluster, column_cap=2)
        assert columns_of(layout)["a"] == 0
        assert columns_of(layout)["b"] == 1
        assert layout["c"].forced
        assert layout["c"].column == 1

    def test_forced_column_end_is_extended(self):
        cluster = single_cluster(
            make_event("a", "09:00", "12:00"),
            make_event("b", "09:00", "10:00"),
            make_event("c", "09:15", "11:00"),
            make_event("d", "10:30", "11:30"),
        )
        layout = assign_columns(cluster, column_cap=2)
        # column 1 now ends 11:00 (c), so d cannot sit there unforced
        assert layout["d"].forced

    def test_later_event_fits_after_forced_one_ends(self):
        cluster = single_cluster(
            make_event("a", "09:00", "12:00"),
            make_event("b", "09:00", "10:00"),
            make_event("c", "09:15", "11:00"),
            make_event("d", "11:00", "11:30"),
        )
        layout = assign_columns(cluster, column_cap=2)
        assert not layout["d"].forced
        assert layout["d"].column == 1

    def test_cap_of_one_stacks_everything(self):
        cluster = single_cluster(
            make_event("a", "09:00", "10:00"),
            make_event("b", "09:30", "10:30"),
        )
        layout = assign_columns(cluster, column_cap=1)
        assert columns_of(layout) == {"a": 0, "b": 0}
        assert layout["b"].forced
        assert layout["a"].total_columns == 1

    def test_unbounded(self):
        cluster = single_cluster(*[make_event(f"m{i}", "09:00", "10:00") for i in range(7)])
        layout = assign_columns(cluster, column_cap=UNBOUNDED)
        assert sorted(columns_of(layout).values()) == list(range(7))
        assert not any(info.forced for info in layout.values())

    def test_overflow_logged(self, caplog):
        cluster = single_cluster(*[make_event(f"m{i}", "09:00", "10:00") for i in range(3)])
        with caplog.at_level(logging.WARNING, logger="briefing_layout.columns"):
            assign_columns(cluster, column_cap=2)
        assert "m2" in caplog.text

    @pytest.mark.parametrize("cap", [0, -1])
    def test_invalid_cap(self, cap):
        with pytest.raises(ValueError):
            assign_columns(single_cluster(make_event("a", "09:00", "10:00")), column_cap=cap)


class TestClusterIntegrity:
    def test_rejects_two_clusters(self):
        intervals = normalize_events(
            [make_event("A", "09:00", "10:00"), make_event("B", "10:00", "11:00")]
        ).intervals
        with pytest.raises(ClusterIntegrityError):
            assign_columns(intervals)

    def test_rejects_duplicate_interval(self):
        cluster = single_cluster(make_event("A", "09:00", "10:00"))
        with pytest.raises(ClusterIntegrityError):
            assign_columns(cluster + cluster)
