"""In-memory city network edited through the API.

The network is held in process memory only; restarting the server brings
back the sample data. Reads hand out copies (`snapshot`) so an engine call
never sees a list that another request is appending to.
"""

from __future__ import annotations

import logging
import math
import threading
from typing import List, Optional, Sequence, Tuple

from ..config import DEFAULT_ROAD_DISTANCE
from .exceptions import InvalidRoadError, UnknownCityError
from .graph_manager import City, NodeId, Road

logger = logging.getLogger(__name__)


SAMPLE_CITIES: Tuple[City, ...] = (
    City(1, "New York", 80, 40),
    City(2, "Boston", 90, 30),
    City(3, "Washington DC", 75, 50),
    City(4, "Chicago", 60, 35),
    City(5, "Miami", 80, 80),
    City(6, "Dallas", 45, 65),
    City(7, "Los Angeles", 15, 60),
    City(8, "San Francisco", 10, 45),
    City(9, "Seattle", 15, 20),
    City(10, "Denver", 40, 45),
)

# distances in miles
SAMPLE_ROADS: Tuple[Road, ...] = (
    Road(1, 2, 215),
    Road(1, 3, 225),
    Road(1, 4, 790),
    Road(2, 3, 440),
    Road(3, 5, 1020),
    Road(4, 10, 1000),
    Road(4, 6, 920),
    Road(5, 6, 1340),
    Road(6, 7, 1430),
    Road(7, 8, 380),
    Road(8, 9, 810),
    Road(9, 10, 1330),
    Road(10, 7, 1020),
)


def parse_road_distance(value) -> float:
    """Turn user input into a road distance.

    Anything that is not a positive number falls back to
    ``DEFAULT_ROAD_DISTANCE``.
    """
    if value is None or isinstance(value, bool):
        return DEFAULT_ROAD_DISTANCE
    try:
        distance = float(value)
    except (TypeError, ValueError):
        return DEFAULT_ROAD_DISTANCE
    if math.isnan(distance) or math.isinf(distance) or distance <= 0:
        return DEFAULT_ROAD_DISTANCE
    return distance


class CityNetwork:
    """Editable list of cities and roads guarded by a lock."""

    def __init__(self, cities: Sequence[City] = (), roads: Sequence[Road] = ()):
        self._lock = threading.Lock()
        self._cities: List[City] = list(cities)
        self._roads: List[Road] = list(roads)

    @classmethod
    def with_sample_data(cls) -> "CityNetwork":
        return cls(SAMPLE_CITIES, SAMPLE_ROADS)

    # --- Reads ---------------------------------------------------------------

    def cities(self) -> List[City]:
        with self._lock:
            return list(self._cities)

    def roads(self) -> List[Road]:
        with self._lock:
            return list(self._roads)

    def snapshot(self) -> Tuple[List[City], List[Road]]:
        """Consistent copy of both lists, taken under one lock acquisition."""
        with self._lock:
            return list(self._cities), list(self._roads)

    def get_city(self, city_id: NodeId) -> City:
        with self._lock:
            return self._find(city_id)

    def _find(self, city_id: NodeId) -> City:
        for city in self._cities:
            if city.id == city_id:
                return city
        raise UnknownCityError(city_id)

    # --- Mutations -----------------------------------------------------------

    def add_city(self, name: Optional[str] = None, x: float = 0.0, y: float = 0.0) -> City:
        """Append a city with the next free id (max id + 1)."""
        with self._lock:
            new_id = max((c.id for c in self._cities), default=0) + 1
            city = City(id=new_id, name=(name or "").strip() or f"City {new_id}", x=x, y=y)
            self._cities.append(city)
        logger.info("Added city %s (%s) at (%.1f, %.1f)", city.id, city.name, x, y)
        return city

    def add_road(self, from_id: NodeId, to_id: NodeId, distance=None) -> Road:
        """Append a road between two existing, distinct cities.

        Parallel roads between the same two cities are allowed.
        """
        if from_id == to_id:
            raise InvalidRoadError(f"A road must connect two different cities (got {from_id} twice)")
        with self._lock:
            self._find(from_id)
            self._find(to_id)
            road = Road(from_id=from_id, to_id=to_id, distance=parse_road_distance(distance))
            self._roads.append(road)
        logger.info("Added road %s <-> %s (%s)", from_id, to_id, road.distance)
        return road

    def reset(self) -> None:
        """Throw away edits and go back to the sample network."""
        with self._lock:
            self._cities = list(SAMPLE_CITIES)
            self._roads = list(SAMPLE_ROADS)
        logger.info("City network reset to sample data")


# Process-wide network used by the HTTP routers
network = CityNetwork.with_sample_data()


def get_network() -> CityNetwork:
    """FastAPI dependency returning the shared network."""
    return network
