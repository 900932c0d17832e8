"""
Pathfinding Algorithm

Dijkstra search over (station, arrival line) states, shared by the fastest
and fewest-changes route finders.
"""

import heapq
import itertools
import logging
from abc import ABC, abstractmethod
from typing import Dict, List, NamedTuple, Optional, Set, Tuple

from ..models.route import RouteSegment, RouteResult, NoRoute, RouteCriterion, RouteOutcome
from .network_graph import NetworkGraph

CHANGE_PENALTY_MINUTES = 2.0

Cost = Tuple


class SearchState(NamedTuple):
    """
    A station reached while travelling on ``line``.

    ``line`` is None only for the start state, before any line has been used.
    The same station can be settled once per distinct arrival line.
    """

    station: str
    line: Optional[str] = None

    def is_change_to(self, line: str) -> bool:
        """Check whether departing on ``line`` is a line change."""
        return self.line is not None and self.line != line

    def __str__(self) -> str:
        return f"{self.station}::{self.line}"


def build_path(previous: Dict[SearchState, Optional[SearchState]],
               end_state: SearchState) -> List[SearchState]:
    """Walk predecessor links back from ``end_state`` and return the states in travel order."""
    path = []
    state: Optional[SearchState] = end_state
    while state is not None:
        path.append(state)
        state = previous[state]
    path.reverse()
    return path


def path_to_segments(path: List[SearchState]) -> List[RouteSegment]:
    """Turn consecutive states into route segments, each labelled with the line ridden."""
    return [
        RouteSegment(from_state.station, to_state.station, to_state.line)
        for from_state, to_state in zip(path, path[1:])
    ]


class RouteFinder(ABC):
    """
    Lazy-deletion Dijkstra over SearchState.

    Subclasses choose the cost tuple and how a segment extends it; costs are
    compared lexicographically. A state popped at a closed station is dropped
    without being settled or expanded, so closed stations are neither passed
    through nor accepted as the destination, and a closed start station yields
    no route at all.
    """

    criterion: RouteCriterion = RouteCriterion.FASTEST

    def __init__(self, change_penalty: float = CHANGE_PENALTY_MINUTES):
        """
        Initialize the route finder.

        Args:
            change_penalty: Minutes added each time the route switches line
        """
        if change_penalty < 0:
            raise ValueError("Change penalty cannot be negative")
        self.change_penalty = float(change_penalty)
        self.logger = logging.getLogger(__name__)

    @abstractmethod
    def start_cost(self) -> Cost:
        """Cost of the start state."""

    @abstractmethod
    def extend_cost(self, cost: Cost, minutes: float, is_change: bool) -> Cost:
        """Cost after riding one segment of ``minutes`` from a state of cost ``cost``."""

    @abstractmethod
    def make_result(self, start: str, end: str, segments: List[RouteSegment],
                    cost: Cost) -> RouteResult:
        """Package the settled end state into a result."""

    def find_route(self, graph: NetworkGraph, start: str, end: str) -> RouteOutcome:
        """
        Find the optimal route between two stations.

        Raises:
            StationNotFound: if either station is not in the graph

        Returns:
            RouteResult, or NoRoute when the end station cannot be settled
        """
        graph.get_station(start)
        graph.get_station(end)

        start_state = SearchState(start)
        best: Dict[SearchState, Cost] = {start_state: self.start_cost()}
        previous: Dict[SearchState, Optional[SearchState]] = {start_state: None}
        settled: Set[SearchState] = set()
        # Counter breaks ties so states are never compared directly
        counter = itertools.count()
        queue = [(best[start_state], next(counter), start_state)]

        while queue:
            cost, _, state = heapq.heappop(queue)

            if not graph.is_open(state.station):
                continue
            if state in settled:
                continue
            settled.add(state)

            if state.station == end:
                path = build_path(previous, state)
                self.logger.debug(
                    f"{self.criterion.value}: settled '{end}' via {state.line} "
                    f"after {len(settled)} states"
                )
                return self.make_result(start, end, path_to_segments(path), cost)

            for segment in graph.neighbors(state.station):
                candidate = self.extend_cost(cost, segment.time, state.is_change_to(segment.line))
                neighbor = SearchState(segment.to_station, segment.line)
                known = best.get(neighbor)
                if known is None or candidate < known:
                    best[neighbor] = candidate
                    previous[neighbor] = state
                    heapq.heappush(queue, (candidate, next(counter), neighbor))

        self.logger.debug(
            f"{self.criterion.value}: no route from '{start}' to '{end}' "
            f"after {len(settled)} states"
        )
        return NoRoute(start, end, self.criterion)
