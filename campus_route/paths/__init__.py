"""
Paths Module for Campus Routing
Route assembly, distance and walking-time estimation
"""

from .route_calculator import (
    RouteCalculator, RouteResult, calculate_route, find_nearest_poi,
    find_nearest_point_on_path, generate_route_summary
)

__all__ = [
    'RouteCalculator',
    'RouteResult',
    'calculate_route',
    'find_nearest_poi',
    'find_nearest_point_on_path',
    'generate_route_summary'
]
