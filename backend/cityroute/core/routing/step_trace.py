"""Read-only navigation over a recorded Dijkstra trace.

A `StepTrace` wraps the ``steps`` list of a `ShortestPathResult` and answers
the questions a step-by-step viewer asks: what is step *i*, which index is
before/after it, and how should its distances be labelled. Every lookup is
random access and idempotent; nothing here mutates the recorded steps.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..graph.graph_manager import City, NodeId
from ..graph.shortest_path import PathStep
from .route_summary import city_name

INFINITY_LABEL = "∞"


def format_distance(value: float) -> str:
    """Label for a tentative distance: ``∞`` when unreached, no trailing ``.0`` for whole numbers."""
    if math.isinf(value):
        return INFINITY_LABEL
    if float(value).is_integer():
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class StepView:
    index: int
    label: str
    current: Optional[str]
    visited: List[str]
    distances: List[Tuple[str, str]]


class StepTrace:
    def __init__(self, steps: Sequence[PathStep], cities: Sequence[City] = ()):
        self._steps = tuple(steps)
        self._names = {city.id: city.name for city in cities}

    def __len__(self) -> int:
        return len(self._steps)

    def step(self, index: int) -> PathStep:
        if not 0 <= index < len(self._steps):
            raise IndexError(f"step {index} out of range (trace has {len(self._steps)} steps)")
        return self._steps[index]

    def previous_index(self, index: int) -> int:
        return max(index - 1, 0)

    def next_index(self, index: int) -> int:
        return min(index + 1, len(self._steps) - 1)

    def is_last(self, index: int) -> bool:
        return index == len(self._steps) - 1

    def label(self, index: int) -> str:
        return f"Step {index + 1} of {len(self._steps)}"

    def name(self, city_id: NodeId) -> str:
        return city_name(city_id, self._names)

    def describe(self, index: int) -> StepView:
        """Render one step with city names and distance labels."""
        step = self.step(index)
        return StepView(
            index=index,
            label=self.label(index),
            current=self.name(step.current) if step.current is not None else None,
            visited=[self.name(city_id) for city_id in step.visited],
            distances=[(self.name(city_id), format_distance(d)) for city_id, d in step.distances.items()],
        )
