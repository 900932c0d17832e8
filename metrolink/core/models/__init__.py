"""
Core Models Package

Data models for the network and route results.
"""

from .station import Station, Connection, Segment
from .route import RouteSegment, RouteResult, NoRoute, RouteCriterion, RouteOutcome

__all__ = [
    'Station',
    'Connection',
    'Segment',
    'RouteSegment',
    'RouteResult',
    'NoRoute',
    'RouteCriterion',
    'RouteOutcome'
]
