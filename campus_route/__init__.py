"""
Campus Route
Walking route estimation over a proximity graph of campus points of interest
"""

__version__ = "1.0.0"

from .errors import (
    CampusRouteError, InvalidCoordinateError, UnknownNodeError, POILoadError
)
from .utils import (
    RouteConfig, CONFIG, GraphCache, setup_logging,
    calculate_haversine_distance, calculate_path_distance,
    estimate_walking_time, format_distance, format_time
)
from .graph import (
    PointOfInterest, Edge, GraphNode, ShortestPath,
    build_campus_graph, dijkstra_shortest_path, graph_edges_frame
)
from .paths import (
    RouteCalculator, RouteResult, calculate_route, find_nearest_poi,
    find_nearest_point_on_path, generate_route_summary
)
from .data import (
    SAMPLE_CAMPUS_POIS, pois_from_records, pois_from_dataframe,
    load_pois_csv, load_pois_geojson, load_pois
)

__all__ = [
    'CampusRouteError',
    'InvalidCoordinateError',
    'UnknownNodeError',
    'POILoadError',
    'RouteConfig',
    'CONFIG',
    'GraphCache',
    'setup_logging',
    'calculate_haversine_distance',
    'calculate_path_distance',
    'estimate_walking_time',
    'format_distance',
    'format_time',
    'PointOfInterest',
    'Edge',
    'GraphNode',
    'ShortestPath',
    'build_campus_graph',
    'dijkstra_shortest_path',
    'graph_edges_frame',
    'RouteCalculator',
    'RouteResult',
    'calculate_route',
    'find_nearest_poi',
    'find_nearest_point_on_path',
    'generate_route_summary',
    'SAMPLE_CAMPUS_POIS',
    'pois_from_records',
    'pois_from_dataframe',
    'load_pois_csv',
    'load_pois_geojson',
    'load_pois'
]
