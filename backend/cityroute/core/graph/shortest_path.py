"""Dijkstra shortest path with a replayable trace of the search.

Returns a `ShortestPathResult` holding the path (list of city ids), its
total distance, and one `PathStep` snapshot per finalized city plus a
terminal snapshot. A trace viewer can index into ``steps`` in any order.

The selection step is a linear scan over the unvisited cities (O(V^2)
overall) instead of a heap. Networks here are small and dense, and the scan
gives a fixed tie-break: among equally distant cities, the one listed first
in the input wins. That keeps the recorded trace identical across runs.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from .graph_manager import City, GraphManager, NodeId, Road, build_graph

logger = logging.getLogger(__name__)

INFINITY = math.inf


@dataclass(frozen=True)
class PathStep:
    """Snapshot of the search state at one instant.

    ``distances`` and ``previous`` are copies taken when the step was
    recorded; later relaxations never reach them.
    """

    current: Optional[NodeId]
    visited: Tuple[NodeId, ...]
    distances: Dict[NodeId, float]
    previous: Dict[NodeId, Optional[NodeId]]

    def to_dict(self) -> dict:
        return {
            "current": self.current,
            "visited": list(self.visited),
            "distances": dict(self.distances),
            "previous": dict(self.previous),
        }


@dataclass
class ShortestPathResult:
    """Outcome of one engine call.

    Attributes
    ----------
    path:
        City ids from start to end inclusive, or empty when the end city
        cannot be reached.
    distance:
        Sum of road distances along ``path``. It is 0 when no path exists,
        so callers should check ``found`` (or ``path``) rather than rely on
        the distance alone.
    steps:
        One snapshot per finalized city, followed by a terminal snapshot
        whose ``current`` is None.
    """

    path: List[NodeId]
    distance: float
    steps: List[PathStep] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return bool(self.path)


def _snapshot(
    current: Optional[NodeId],
    visited: List[NodeId],
    dist: Dict[NodeId, float],
    prev: Dict[NodeId, Optional[NodeId]],
) -> PathStep:
    return PathStep(current=current, visited=tuple(visited), distances=dict(dist), previous=dict(prev))


def _select_closest(unvisited: List[NodeId], dist: Dict[NodeId, float]) -> Tuple[Optional[NodeId], float]:
    """Linear scan for the unvisited node with strictly the smallest distance.

    Strict ``<`` means the first node in ``unvisited`` wins ties.
    """
    best: Optional[NodeId] = None
    best_distance = INFINITY
    for node_id in unvisited:
        if dist[node_id] < best_distance:
            best_distance = dist[node_id]
            best = node_id
    return best, best_distance


def _reconstruct_path(
    prev: Dict[NodeId, Optional[NodeId]], start_id: NodeId, end_id: NodeId
) -> List[NodeId]:
    # end never initialized (not a city), or never reached from start
    if end_id not in prev:
        return []
    if prev[end_id] is None and start_id != end_id:
        return []

    path: List[NodeId] = []
    cur: Optional[NodeId] = end_id
    while cur is not None:
        path.append(cur)
        cur = prev.get(cur)
    path.reverse()
    return path


def dijkstra_with_steps(
    graph: GraphManager,
    cities: Sequence[City],
    start_id: NodeId,
    end_id: NodeId,
) -> ShortestPathResult:
    """Run Dijkstra over ``graph`` and capture a snapshot per finalized city.

    Algorithm:
    1. Every city starts at distance infinity with no predecessor; the start
       city (if it is a city at all) starts at 0.
    2. Repeatedly pick the closest unvisited city. Stop when there is none,
       when it is the end city, or when its distance is infinite.
    3. Move it to visited and record a snapshot *before* relaxing, so the
       snapshot shows the distances that led to this choice.
    4. Relax every unvisited neighbour; only a strictly shorter candidate
       replaces the neighbour's distance and predecessor.
    5. Record a terminal snapshot and walk predecessors back from the end.
    """
    dist: Dict[NodeId, float] = {}
    prev: Dict[NodeId, Optional[NodeId]] = {}
    for city in cities:
        dist[city.id] = INFINITY
        prev[city.id] = None
    if start_id in dist:
        dist[start_id] = 0.0

    unvisited: List[NodeId] = [city.id for city in cities]
    visited: List[NodeId] = []
    visited_set = set()
    steps: List[PathStep] = []
    reason = "exhausted"

    while unvisited:
        current, current_distance = _select_closest(unvisited, dist)

        if current is None:
            reason = "no candidate"
            break
        if current == end_id:
            reason = "reached end"
            break
        if current_distance == INFINITY:
            reason = "unreachable"
            break

        unvisited.remove(current)
        visited.append(current)
        visited_set.add(current)

        # snapshot BEFORE relaxing neighbours
        steps.append(_snapshot(current, visited, dist, prev))

        for neighbor_id, weight, _road_index in graph.neighbors(current):
            if neighbor_id in visited_set:
                continue
            # roads to ids that are not cities are inert
            if neighbor_id not in dist:
                continue
            alt = current_distance + weight
            if alt < dist[neighbor_id]:
                dist[neighbor_id] = alt
                prev[neighbor_id] = current

    steps.append(_snapshot(None, visited, dist, prev))

    path = _reconstruct_path(prev, start_id, end_id)
    distance = dist[end_id] if path else 0.0

    logger.debug(
        "Dijkstra %s -> %s stopped (%s) after %d iterations; path=%s distance=%s",
        start_id,
        end_id,
        reason,
        len(visited),
        path,
        distance,
    )

    return ShortestPathResult(path=path, distance=distance, steps=steps)


def compute_shortest_path(
    cities: Sequence[City],
    roads: Sequence[Road],
    start_id: NodeId,
    end_id: NodeId,
) -> ShortestPathResult:
    """Build a fresh graph from ``cities``/``roads`` and search it.

    Never raises for unknown ids: a start or end that is not a city simply
    yields an empty path with distance 0.
    """
    cities = list(cities)
    graph = build_graph(cities, roads)
    return dijkstra_with_steps(graph, cities, start_id, end_id)
