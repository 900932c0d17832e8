"""
Fastest Route

Finds the route with the least total travel time, counting a fixed penalty
for every change of line.
"""

from typing import List

from ..models.route import RouteSegment, RouteResult, RouteCriterion
from .pathfinding_algorithm import RouteFinder, Cost


class FastestRouteFinder(RouteFinder):
    """Minimises elapsed minutes. Cost is ``(minutes,)``."""

    criterion = RouteCriterion.FASTEST

    def start_cost(self) -> Cost:
        return (0.0,)

    def extend_cost(self, cost: Cost, minutes: float, is_change: bool) -> Cost:
        elapsed = cost[0] + minutes
        if is_change:
            elapsed += self.change_penalty
        return (elapsed,)

    def make_result(self, start: str, end: str, segments: List[RouteSegment],
                    cost: Cost) -> RouteResult:
        return RouteResult(
            start=start,
            end=end,
            segments=tuple(segments),
            total_time=cost[0],
            criterion=self.criterion
        )
