"""
Campus Route Utils Package
Configuration, geodesic helpers and caching
"""

from .cache import GraphCache, obj_hash, graph_cache_key
from .config import (
    RouteConfig, CONFIG, LatLon, setup_logging,
    EARTH_RADIUS_M, coordinate_mask, is_valid_coordinate,
    calculate_haversine_distance, haversine_distance_matrix,
    calculate_path_distance, estimate_walking_time,
    format_time, format_distance, to_lonlat
)

__all__ = [
    'GraphCache',
    'obj_hash',
    'graph_cache_key',
    'RouteConfig',
    'CONFIG',
    'LatLon',
    'setup_logging',
    'EARTH_RADIUS_M',
    'coordinate_mask',
    'is_valid_coordinate',
    'calculate_haversine_distance',
    'haversine_distance_matrix',
    'calculate_path_distance',
    'estimate_walking_time',
    'format_time',
    'format_distance',
    'to_lonlat'
]
