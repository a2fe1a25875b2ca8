"""Routing-related API endpoints.

This router connects the map frontend to the DSA-based shortest-path core.
It exposes the path, its distance, a route summary, and the full list of
Dijkstra steps so the frontend can replay the search one step at a time.
"""

import logging
import math
from typing import Dict, List, Optional, Tuple

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field, model_validator

from cityroute.core.graph.graph_manager import City, Road
from cityroute.core.graph.network import CityNetwork, get_network
from cityroute.core.graph.shortest_path import PathStep, ShortestPathResult, compute_shortest_path
from cityroute.core.routing.route_summary import summarize_route
from cityroute.core.routing.step_trace import StepTrace
from cityroute.routers.cities import CityOut

logger = logging.getLogger(__name__)

router = APIRouter()


# -------------------- Schemas -------------------- #

class RouteRequest(BaseModel):
    start_id: int = Field(..., description="City where the route starts")
    end_id: int = Field(..., description="City where the route ends")


class SolveRoadIn(BaseModel):
    from_id: int
    to_id: int
    distance: float = Field(..., ge=0, allow_inf_nan=False, description="Road length; must not be negative")


class SolveRequest(RouteRequest):
    cities: List[CityOut] = Field(..., description="All cities, in the order the search should scan them")
    roads: List[SolveRoadIn] = Field(default_factory=list, description="Undirected roads between cities")

    @model_validator(mode="after")
    def check_unique_city_ids(self) -> "SolveRequest":
        seen = set()
        for city in self.cities:
            if city.id in seen:
                raise ValueError(f"City id {city.id} appears more than once")
            seen.add(city.id)
        return self


class StepViewOut(BaseModel):
    index: int
    label: str
    current: Optional[str]
    visited: List[str]
    # (city name, distance label) in city order
    distances: List[Tuple[str, str]]
    is_last: bool


class DijkstraStepOut(BaseModel):
    current: Optional[int]
    visited: List[int]
    # None stands for "not reached yet" (infinity has no JSON literal)
    distances: Dict[int, Optional[float]]
    previous: Dict[int, Optional[int]]


class RouteStopOut(BaseModel):
    id: int
    name: str


class RouteSummaryOut(BaseModel):
    stops: List[RouteStopOut]
    total_distance: float
    travel_hours: int
    travel_minutes: int


class RouteResponse(BaseModel):
    start_id: int
    end_id: int
    found: bool
    path: List[int]
    distance: float
    summary: RouteSummaryOut
    steps: List[DijkstraStepOut]


# -------------------- Helpers -------------------- #

def _step_out(step: PathStep) -> DijkstraStepOut:
    return DijkstraStepOut(
        current=step.current,
        visited=list(step.visited),
        distances={k: (None if math.isinf(v) else v) for k, v in step.distances.items()},
        previous=dict(step.previous),
    )


def _route_response(cities: List[City], result: ShortestPathResult, start_id: int, end_id: int) -> RouteResponse:
    summary = summarize_route(cities, result)
    return RouteResponse(
        start_id=start_id,
        end_id=end_id,
        found=result.found,
        path=result.path,
        distance=result.distance,
        summary=RouteSummaryOut(
            stops=[RouteStopOut(id=s.id, name=s.name) for s in summary.stops],
            total_distance=summary.total_distance,
            travel_hours=summary.travel_hours,
            travel_minutes=summary.travel_minutes,
        ),
        steps=[_step_out(s) for s in result.steps],
    )


# -------------------- Endpoints -------------------- #

@router.post("/shortest", response_model=RouteResponse)
def shortest_route(payload: RouteRequest, network: CityNetwork = Depends(get_network)):
    """Shortest route between two cities of the current network.

    Unknown or unreachable cities are not an error: the response simply has
    ``found = false`` and an empty path.
    """
    cities, roads = network.snapshot()
    result = compute_shortest_path(cities, roads, payload.start_id, payload.end_id)
    if not result.found:
        logger.info("No route from city %s to city %s", payload.start_id, payload.end_id)
    return _route_response(cities, result, payload.start_id, payload.end_id)


@router.post("/solve", response_model=RouteResponse)
def solve_route(payload: SolveRequest):
    """Run the engine on a network supplied in the request body.

    Nothing is stored; the server's own network is not touched.
    """
    cities = [City(id=c.id, name=c.name, x=c.x, y=c.y) for c in payload.cities]
    roads = [Road(from_id=r.from_id, to_id=r.to_id, distance=r.distance) for r in payload.roads]
    result = compute_shortest_path(cities, roads, payload.start_id, payload.end_id)
    return _route_response(cities, result, payload.start_id, payload.end_id)


@router.post("/shortest/steps/{index}", response_model=StepViewOut)
def shortest_route_step(index: int, payload: RouteRequest, network: CityNetwork = Depends(get_network)):
    """One step of the search, labelled for the step-by-step panel.

    ``index`` is 0-based; the same index always renders the same view.
    """
    cities, roads = network.snapshot()
    result = compute_shortest_path(cities, roads, payload.start_id, payload.end_id)
    trace = StepTrace(result.steps, cities)
    try:
        view = trace.describe(index)
    except IndexError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return StepViewOut(
        index=view.index,
        label=view.label,
        current=view.current,
        visited=view.visited,
        distances=view.distances,
        is_last=trace.is_last(index),
    )
