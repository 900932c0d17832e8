"""
Fewest Changes Route

Finds the route with the fewest line changes. Among routes with the same
number of changes the one with the least travel time wins.
"""

from typing import List

from ..models.route import RouteSegment, RouteResult, RouteCriterion
from .pathfinding_algorithm import RouteFinder, Cost


class FewestChangesRouteFinder(RouteFinder):
    """
    Minimises ``(changes, minutes)`` lexicographically.

    A change costs one change and the change penalty in minutes together, so
    the reported time is comparable with the fastest route's.
    """

    criterion = RouteCriterion.FEWEST_CHANGES

    def start_cost(self) -> Cost:
        return (0, 0.0)

    def extend_cost(self, cost: Cost, minutes: float, is_change: bool) -> Cost:
        changes, elapsed = cost
        elapsed += minutes
        if is_change:
            changes += 1
            elapsed += self.change_penalty
        return (changes, elapsed)

    def make_result(self, start: str, end: str, segments: List[RouteSegment],
                    cost: Cost) -> RouteResult:
        changes, elapsed = cost
        return RouteResult(
            start=start,
            end=end,
            segments=tuple(segments),
            total_time=elapsed,
            criterion=self.criterion,
            total_changes=changes
        )
