"""
Formatters Package

Text rendering of route results.
"""

from .route_formatter import RouteFormatter, ChangePoint

__all__ = ['RouteFormatter', 'ChangePoint']
