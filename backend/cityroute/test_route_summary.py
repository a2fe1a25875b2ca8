"""
Unit tests for route summaries and the step trace viewer model.
"""

import math

import pytest

from cityroute.core.graph.graph_manager import City, Road
from cityroute.core.graph.network import SAMPLE_CITIES, SAMPLE_ROADS
from cityroute.core.graph.shortest_path import compute_shortest_path
from cityroute.core.routing.route_summary import (
    RouteStop,
    estimate_travel_time,
    round_half_up,
    summarize_route,
)
from cityroute.core.routing.step_trace import StepTrace, format_distance


# -------------------- Route summary -------------------- #

def test_summary_names_each_stop():
    result = compute_shortest_path(SAMPLE_CITIES, SAMPLE_ROADS, 2, 4)

    summary = summarize_route(SAMPLE_CITIES, result)

    assert summary.found
    assert summary.stops == [
        RouteStop(2, "Boston"),
        RouteStop(1, "New York"),
        RouteStop(4, "Chicago"),
    ]
    assert summary.total_distance == 1005
    # 1005 / 60 = 16.75 -> 17 hours, 1005 % 60 = 45 minutes
    assert (summary.travel_hours, summary.travel_minutes) == (17, 45)


def test_summary_for_missing_route():
    cities = [City(1, "A"), City(2, "B")]
    summary = summarize_route(cities, compute_shortest_path(cities, [], 1, 2))

    assert not summary.found
    assert summary.stops == []
    assert summary.total_distance == 0
    assert (summary.travel_hours, summary.travel_minutes) == (0, 0)


def test_summary_falls_back_to_generic_name():
    cities = [City(1, "A"), City(2, "B")]
    result = compute_shortest_path(cities, [Road(1, 2, 30)], 1, 2)

    summary = summarize_route([City(1, "A")], result)

    assert [s.name for s in summary.stops] == ["A", "City 2"]


@pytest.mark.parametrize(
    "value, expected",
    [(0.5, 1), (1.5, 2), (2.5, 3), (2.49, 2), (0, 0)],
)
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


def test_estimate_travel_time():
    assert estimate_travel_time(90) == (2, 30)
    assert estimate_travel_time(215) == (4, 35)
    assert estimate_travel_time(0) == (0, 0)


# -------------------- Step trace -------------------- #

@pytest.fixture
def trace():
    cities = [City(1, "Alpha"), City(2, "Beta"), City(3, "Gamma")]
    roads = [Road(1, 2, 5), Road(2, 3, 5), Road(1, 3, 20)]
    result = compute_shortest_path(cities, roads, 1, 3)
    return StepTrace(result.steps, cities)


def test_format_distance():
    assert format_distance(math.inf) == "∞"
    assert format_distance(10.0) == "10"
    assert format_distance(7) == "7"
    assert format_distance(2.5) == "2.5"


def test_describe_step(trace):
    view = trace.describe(1)

    assert view.label == "Step 2 of 3"
    assert view.current == "Beta"
    assert view.visited == ["Alpha", "Beta"]
    assert view.distances == [("Alpha", "0"), ("Beta", "5"), ("Gamma", "20")]


def test_describe_terminal_step(trace):
    view = trace.describe(2)

    assert view.current is None
    assert view.distances[-1] == ("Gamma", "10")
    assert trace.is_last(2)


def test_first_step_shows_unreached_cities(trace):
    assert trace.describe(0).distances == [("Alpha", "0"), ("Beta", "∞"), ("Gamma", "∞")]


def test_random_access_is_idempotent(trace):
    before = trace.describe(0)
    trace.describe(2)
    trace.describe(1)

    assert trace.describe(0) == before
    assert trace.step(0) == trace.step(0)


def test_navigation_is_clamped(trace):
    assert len(trace) == 3
    assert trace.previous_index(0) == 0
    assert trace.previous_index(2) == 1
    assert trace.next_index(1) == 2
    assert trace.next_index(2) == 2


@pytest.mark.parametrize("index", [-1, 3])
def test_step_out_of_range(trace, index):
    with pytest.raises(IndexError):
        trace.step(index)


def test_unknown_city_name_fallback():
    result = compute_shortest_path([City(4, "D")], [], 4, 4)
    trace = StepTrace(result.steps)

    assert trace.name(4) == "City 4"
