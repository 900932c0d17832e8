"""
Core Package

Core services, interfaces, models and errors for the network router.
"""

# Import errors
from .exceptions import (
    NetworkError, StationNotFound, SegmentNotFound, InvalidWeight,
    StationAlreadyClosed, GraphLoadError, InvalidName
)

# Import interfaces
from .interfaces import IRouteService

# Import models
from .models import (
    Station, Connection, Segment, RouteSegment, RouteResult, NoRoute,
    RouteCriterion, RouteOutcome
)

# Import services
from .services import (
    NetworkGraph, RouteFinder, SearchState, CHANGE_PENALTY_MINUTES,
    FastestRouteFinder, FewestChangesRouteFinder, RouteService, CsvNetworkLoader,
    ServiceFactory, get_service_factory, get_route_service, shutdown_services
)

__all__ = [
    # Errors
    'NetworkError',
    'StationNotFound',
    'SegmentNotFound',
    'InvalidWeight',
    'StationAlreadyClosed',
    'GraphLoadError',
    'InvalidName',

    # Interfaces
    'IRouteService',

    # Models
    'Station',
    'Connection',
    'Segment',
    'RouteSegment',
    'RouteResult',
    'NoRoute',
    'RouteCriterion',
    'RouteOutcome',

    # Services
    'NetworkGraph',
    'RouteFinder',
    'SearchState',
    'CHANGE_PENALTY_MINUTES',
    'FastestRouteFinder',
    'FewestChangesRouteFinder',
    'RouteService',
    'CsvNetworkLoader',

    # Service Factory Functions
    'ServiceFactory',
    'get_service_factory',
    'get_route_service',
    'shutdown_services'
]
