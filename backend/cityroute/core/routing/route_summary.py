"""Human-readable summary of a computed route.

Turns the id path produced by the engine into named stops plus a rough
travel-time estimate, the way the route panel of the map frontend shows it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from ..config import AVERAGE_SPEED
from ..graph.graph_manager import City, NodeId
from ..graph.shortest_path import ShortestPathResult


@dataclass(frozen=True)
class RouteStop:
    id: NodeId
    name: str


@dataclass
class RouteSummary:
    """Named stops, total distance and estimated travel time of a route.

    When no route exists ``stops`` is empty and ``found`` is False; the
    distance and travel time are then 0 and carry no meaning.
    """

    found: bool
    stops: List[RouteStop]
    total_distance: float
    travel_hours: int
    travel_minutes: int


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (Python's round() uses banker's rounding)."""
    return int(math.floor(value + 0.5))


def city_name(city_id: NodeId, names: Dict[NodeId, str]) -> str:
    """Display name for a city id, falling back to ``City <id>``."""
    return names.get(city_id, f"City {city_id}")


def estimate_travel_time(distance: float) -> Tuple[int, int]:
    """Return (hours, minutes) for a distance.

    Both parts are rounded independently: hours from ``distance / AVERAGE_SPEED``
    and minutes from the remainder, matching what the route panel displays.
    """
    hours = round_half_up(distance / AVERAGE_SPEED)
    minutes = round_half_up(distance % AVERAGE_SPEED)
    return hours, minutes


def summarize_route(cities: Iterable[City], result: ShortestPathResult) -> RouteSummary:
    names = {city.id: city.name for city in cities}
    if not result.found:
        return RouteSummary(found=False, stops=[], total_distance=0.0, travel_hours=0, travel_minutes=0)

    hours, minutes = estimate_travel_time(result.distance)
    return RouteSummary(
        found=True,
        stops=[RouteStop(id=node_id, name=city_name(node_id, names)) for node_id in result.path],
        total_distance=result.distance,
        travel_hours=hours,
        travel_minutes=minutes,
    )
