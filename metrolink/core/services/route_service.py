"""
Route Service

Query and update facade over a live network graph. Route queries hold the
graph's read lock for the whole search; delays and closures take its write
lock, so a query never sees a half-applied update.
"""

import logging
import threading
from typing import Dict, List, Any, Union

from ..exceptions import StationAlreadyClosed
from ..interfaces.i_route_service import IRouteService
from ..models.route import RouteOutcome, RouteCriterion
from .network_graph import NetworkGraph
from .pathfinding_algorithm import RouteFinder, CHANGE_PENALTY_MINUTES
from .fastest_route import FastestRouteFinder
from .fewest_changes_route import FewestChangesRouteFinder


class RouteService(IRouteService):
    """Route queries, delays and closures over one NetworkGraph."""

    def __init__(self, graph: NetworkGraph, change_penalty: float = CHANGE_PENALTY_MINUTES):
        """
        Initialize the route service.

        Args:
            graph: The live network graph
            change_penalty: Minutes added for each change of line
        """
        self.graph = graph
        self.logger = logging.getLogger(__name__)
        self._finders: Dict[RouteCriterion, RouteFinder] = {
            RouteCriterion.FASTEST: FastestRouteFinder(change_penalty),
            RouteCriterion.FEWEST_CHANGES: FewestChangesRouteFinder(change_penalty),
        }
        self._query_count = 0
        self._stats_lock = threading.Lock()
        self.logger.info(
            f"Initialized RouteService with {graph.size} stations, "
            f"change penalty {change_penalty} min"
        )

    @property
    def change_penalty(self) -> float:
        return self._finders[RouteCriterion.FASTEST].change_penalty

    @property
    def query_count(self) -> int:
        """Number of route queries answered so far."""
        with self._stats_lock:
            return self._query_count

    def compute_fastest(self, start: str, end: str) -> RouteOutcome:
        return self.compute_route(start, end, RouteCriterion.FASTEST)

    def compute_fewest_changes(self, start: str, end: str) -> RouteOutcome:
        return self.compute_route(start, end, RouteCriterion.FEWEST_CHANGES)

    def compute_route(self, start: str, end: str,
                      criterion: Union[RouteCriterion, str] = RouteCriterion.FASTEST) -> RouteOutcome:
        criterion = RouteCriterion(criterion)
        finder = self._finders[criterion]

        self.logger.info(f"Finding {criterion.value} route from '{start}' to '{end}'")
        with self.graph.lock.read_locked():
            outcome = finder.find_route(self.graph, start, end)
        with self._stats_lock:
            self._query_count += 1

        if outcome:
            self.logger.info(
                f"Found {criterion.value} route '{start}' -> '{end}': "
                f"{len(outcome.segments)} segments, {outcome.total_time} min"
            )
        else:
            self.logger.info(f"No {criterion.value} route from '{start}' to '{end}'")
        return outcome

    def apply_delay(self, station_a: str, station_b: str, line: str, minutes: float) -> float:
        delayed = self.graph.apply_delay(station_a, station_b, line, minutes)
        new_time = delayed[0].time
        self.logger.info(
            f"Delay of {minutes} min added on {line} between '{station_a}' and "
            f"'{station_b}' ({len(delayed)} connection(s), now {new_time} min)"
        )
        return new_time

    def apply_closure(self, station: str) -> None:
        if self.graph.apply_closure(station):
            self.logger.info(f"Station closed: '{station}'")
        else:
            self.logger.debug(f"Station '{station}' was already closed")

    def close_station(self, station: str) -> None:
        """
        Close a station, rejecting a station that is already closed.

        Raises:
            StationNotFound: if the station is missing
            StationAlreadyClosed: if the station was closed before
        """
        if not self.graph.apply_closure(station):
            raise StationAlreadyClosed(station)
        self.logger.info(f"Station closed: '{station}'")

    def reopen_station(self, station: str) -> bool:
        """Reopen a closed station. Returns False if it was already open."""
        reopened = self.graph.reopen_station(station)
        if reopened:
            self.logger.info(f"Station reopened: '{station}'")
        return reopened

    def validate_endpoints(self, start: str, end: str) -> List[str]:
        problems = []
        with self.graph.lock.read_locked():
            start_station = self.graph.find_station(start)
            end_station = self.graph.find_station(end)

            if start_station is None:
                problems.append(f"Invalid start station: '{start}'")
            if end_station is None:
                problems.append(f"Invalid end station: '{end}'")
            if problems:
                return problems

            if not start_station.is_open:
                problems.append(f"The start station is closed: '{start}'")
            if not end_station.is_open:
                problems.append(f"The end station is closed: '{end}'")

        if problems:
            self.logger.warning(f"Rejected query '{start}' -> '{end}': {'; '.join(problems)}")
        return problems

    def get_network_statistics(self) -> Dict[str, Any]:
        with self.graph.lock.read_locked():
            stations = self.graph.stations()
            lines = {connection.line for connection in self.graph.connections()}
            return {
                "stations": len(stations),
                "connections": len(self.graph.connections()),
                "segments": self.graph.segment_count(),
                "lines": sorted(lines),
                "closed_stations": [station.name for station in stations if not station.is_open],
                "interchange_stations": sum(1 for station in stations if station.is_interchange),
                "queries_served": self.query_count,
                "change_penalty_minutes": self.change_penalty,
            }
