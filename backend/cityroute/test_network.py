"""
Unit tests for the in-memory CityNetwork.
"""

import pytest

from cityroute.core.config import DEFAULT_ROAD_DISTANCE
from cityroute.core.graph.exceptions import InvalidRoadError, NetworkError, UnknownCityError
from cityroute.core.graph.graph_manager import City, Road
from cityroute.core.graph.network import SAMPLE_CITIES, SAMPLE_ROADS, CityNetwork, parse_road_distance


@pytest.fixture
def network():
    return CityNetwork.with_sample_data()


def test_sample_data(network):
    cities, roads = network.snapshot()

    assert len(cities) == 10
    assert len(roads) == 13
    assert network.get_city(7).name == "Los Angeles"


def test_add_city_takes_next_id(network):
    city = network.add_city("Atlanta", 70, 70)

    assert city == City(11, "Atlanta", 70, 70)
    assert network.cities()[-1] == city


def test_add_city_default_name():
    network = CityNetwork()

    first = network.add_city(None, 1, 2)
    second = network.add_city("   ", 3, 4)

    assert (first.id, first.name) == (1, "City 1")
    assert (second.id, second.name) == (2, "City 2")


def test_add_road(network):
    road = network.add_road(5, 7, 2730)

    assert road == Road(5, 7, 2730.0)
    assert network.roads()[-1] == road


def test_parallel_road_is_kept(network):
    network.add_road(1, 2, 100)

    assert [r for r in network.roads() if {r.from_id, r.to_id} == {1, 2}] == [Road(1, 2, 215), Road(1, 2, 100)]


def test_add_road_unknown_city(network):
    with pytest.raises(UnknownCityError) as excinfo:
        network.add_road(1, 404, 10)

    assert excinfo.value.city_id == 404
    assert len(network.roads()) == 13


def test_add_road_to_same_city(network):
    with pytest.raises(InvalidRoadError):
        network.add_road(3, 3, 10)


def test_errors_share_base_class():
    assert issubclass(UnknownCityError, NetworkError)
    assert issubclass(InvalidRoadError, NetworkError)


def test_get_city_unknown(network):
    with pytest.raises(UnknownCityError):
        network.get_city(0)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("250", 250.0),
        ("12.5", 12.5),
        (80, 80.0),
        (None, DEFAULT_ROAD_DISTANCE),
        ("", DEFAULT_ROAD_DISTANCE),
        ("far", DEFAULT_ROAD_DISTANCE),
        (0, DEFAULT_ROAD_DISTANCE),
        (-5, DEFAULT_ROAD_DISTANCE),
        ("nan", DEFAULT_ROAD_DISTANCE),
        ("inf", DEFAULT_ROAD_DISTANCE),
    ],
)
def test_parse_road_distance(raw, expected):
    assert parse_road_distance(raw) == expected


def test_snapshot_is_a_copy(network):
    cities, roads = network.snapshot()
    cities.clear()
    roads.clear()

    assert len(network.cities()) == 10
    assert len(network.roads()) == 13


def test_reset_restores_sample(network):
    network.add_city("Atlanta", 70, 70)
    network.add_road(11, 5, 660)

    network.reset()

    assert network.cities() == list(SAMPLE_CITIES)
    assert network.roads() == list(SAMPLE_ROADS)
