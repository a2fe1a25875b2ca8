"""Graph construction for the shortest-path engine.

This module is intentionally **DSA-focused**:
- It turns the plain city/road lists owned by the caller into an
  *adjacency list* that Dijkstra can walk.
- It knows nothing about HTTP, FastAPI or how the network is stored.

IMPORTANT DESIGN CHOICES:
1. Roads are *undirected*: each Road(from_id, to_id, distance) becomes two
   adjacency entries, one in each endpoint's list, with the same weight.
2. The adjacency list is a *multigraph*: two roads between the same pair of
   cities stay as two independent entries. Nothing is overwritten, so the
   relaxation step simply sees both and keeps the cheaper one.
3. A road that mentions a city id which is not in the city list still gets
   an adjacency row. That id is never in the unvisited set, so the search
   can never select it and the road is inert.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

# Type aliases for clarity when reading the algorithm code
NodeId = int
RoadIndex = int
# (neighbor_node_id, weight, index of the road in the input list)
AdjacencyEntry = Tuple[NodeId, float, RoadIndex]


@dataclass(frozen=True)
class City:
    """A node of the network. Only ``id`` matters to the algorithm."""

    id: NodeId
    name: str
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Road:
    """An undirected, weighted connection between two cities."""

    from_id: NodeId
    to_id: NodeId
    distance: float


@dataclass
class GraphManager:
    """In-memory adjacency list built from one city/road snapshot.

    The graph is built once per engine call by `build_graph` and is not
    modified afterwards.
    """

    # adjacency list: node_id -> list of (neighbor_node_id, weight, road_index)
    adjacency: Dict[NodeId, List[AdjacencyEntry]]

    def neighbors(self, node_id: NodeId) -> List[AdjacencyEntry]:
        """Return all edges leaving a node (both directions of each road).

        Time complexity: O(k) where k is the degree of the node.
        """
        return self.adjacency.get(node_id, [])


def build_graph(cities: Iterable[City], roads: Iterable[Road]) -> GraphManager:
    """Build a GraphManager from city and road lists.

    Steps:
    1. Create an empty adjacency row for every city, in input order.
    2. For each road, append the forward entry to ``from_id``'s row and the
       reverse entry to ``to_id``'s row. Rows are created on demand for ids
       that are not cities.
    """
    graph = GraphManager(adjacency={city.id: [] for city in cities})

    for index, road in enumerate(roads):
        graph.adjacency.setdefault(road.from_id, []).append((road.to_id, road.distance, index))
        graph.adjacency.setdefault(road.to_id, []).append((road.from_id, road.distance, index))

    return graph
