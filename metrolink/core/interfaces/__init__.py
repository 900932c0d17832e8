"""
Core Interfaces Package

Interface definitions for the route service.
"""

from .i_route_service import IRouteService

__all__ = [
    'IRouteService'
]
