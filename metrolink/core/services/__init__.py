"""
Core Services Package

Network graph, route finders and the services built on them.
"""

from .network_graph import NetworkGraph
from .pathfinding_algorithm import RouteFinder, SearchState, CHANGE_PENALTY_MINUTES
from .fastest_route import FastestRouteFinder
from .fewest_changes_route import FewestChangesRouteFinder
from .route_service import RouteService
from .csv_network_loader import CsvNetworkLoader
from .service_factory import (
    ServiceFactory,
    get_service_factory,
    get_route_service,
    shutdown_services
)

__all__ = [
    'NetworkGraph',
    'RouteFinder',
    'SearchState',
    'CHANGE_PENALTY_MINUTES',
    'FastestRouteFinder',
    'FewestChangesRouteFinder',
    'RouteService',
    'CsvNetworkLoader',
    'ServiceFactory',
    'get_service_factory',
    'get_route_service',
    'shutdown_services'
]
