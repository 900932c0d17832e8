"""
Route Service Interface

Interface for route queries and live network updates.
"""

from abc import ABC, abstractmethod
from typing import List, Dict, Any, Union

from ..models.route import RouteOutcome, RouteCriterion


class IRouteService(ABC):
    """Interface for route calculation and network mutation services."""

    @abstractmethod
    def compute_fastest(self, start: str, end: str) -> RouteOutcome:
        """
        Get the route with the least total travel time between two stations.

        Args:
            start: Starting station name
            end: Destination station name

        Returns:
            RouteResult if a route exists, NoRoute otherwise
        """
        pass

    @abstractmethod
    def compute_fewest_changes(self, start: str, end: str) -> RouteOutcome:
        """
        Get the route with the fewest line changes between two stations.

        Ties on changes are broken by total travel time.

        Args:
            start: Starting station name
            end: Destination station name

        Returns:
            RouteResult with total_changes set if a route exists, NoRoute otherwise
        """
        pass

    @abstractmethod
    def compute_route(self, start: str, end: str,
                      criterion: Union[RouteCriterion, str] = RouteCriterion.FASTEST) -> RouteOutcome:
        """
        Dispatch to the route finder for ``criterion``.

        Args:
            start: Starting station name
            end: Destination station name
            criterion: RouteCriterion or its value ("fastest", "fewest_changes")
        """
        pass

    @abstractmethod
    def apply_delay(self, station_a: str, station_b: str, line: str, minutes: float) -> float:
        """
        Add a delay to the connection on ``line`` between two stations.

        Returns:
            The new travel time of the connection
        """
        pass

    @abstractmethod
    def apply_closure(self, station: str) -> None:
        """Close a station. Idempotent."""
        pass

    @abstractmethod
    def validate_endpoints(self, start: str, end: str) -> List[str]:
        """
        Check that both stations exist and are open.

        Returns:
            A list of problems, empty when the query may proceed
        """
        pass

    @abstractmethod
    def get_network_statistics(self) -> Dict[str, Any]:
        """Get summary counts for the network."""
        pass
