"""
Route assembly for campus navigation
Snaps start/end coordinates to the nearest POIs, searches the proximity
graph and derives walking distance and time
"""
from typing import Any, Dict, List, Optional, Sequence
from dataclasses import dataclass, field, replace

from ..errors import InvalidCoordinateError
from ..graph import (
    PointOfInterest, CampusGraph, build_campus_graph, dijkstra_shortest_path
)
from ..utils import (
    CONFIG, RouteConfig, GraphCache, LatLon, graph_cache_key, setup_logging,
    is_valid_coordinate, calculate_haversine_distance, calculate_path_distance,
    estimate_walking_time, format_distance, format_time, to_lonlat
)

logger = setup_logging()

@dataclass
class RouteResult:
    """Walking route between two coordinates"""
    distance: float  # meters
    estimated_time: int  # minutes
    start_coords: LatLon
    end_coords: LatLon
    route_path: List[LatLon]  # (lat, lon) pairs, start first, end last
    waypoints: List[str] = field(default_factory=list)  # POI ids along the path

    @property
    def used_graph(self) -> bool:
        return bool(self.waypoints)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'distance': self.distance,
            'estimated_time': self.estimated_time,
            'start_coords': list(self.start_coords),
            'end_coords': list(self.end_coords),
            'route_path': [list(p) for p in self.route_path],
            'waypoints': list(self.waypoints),
        }

    def to_geojson(self) -> Dict:
        """Export route as GeoJSON FeatureCollection

        Returns:
            FeatureCollection with the route LineString and start/end Points
        """
        features = [
            {
                "type": "Feature",
                "geometry": {
                    "type": "LineString",
                    "coordinates": to_lonlat(self.route_path)
                },
                "properties": {
                    "type": "route",
                    "distance_m": round(self.distance, 1),
                    "estimated_time_min": self.estimated_time,
                    "waypoints": list(self.waypoints)
                }
            }
        ]

        for label, coords in (("start", self.start_coords), ("end", self.end_coords)):
            features.append({
                "type": "Feature",
                "geometry": {
                    "type": "Point",
                    "coordinates": to_lonlat([coords])[0]
                },
                "properties": {"type": label}
            })

        return {
            "type": "FeatureCollection",
            "features": features
        }

def find_nearest_poi(coord: LatLon,
                     pois: Sequence[PointOfInterest]) -> PointOfInterest:
    """Linear scan for the POI closest to a coordinate

    The first POI wins on ties.

    Raises:
        ValueError: pois is empty
    """
    if not pois:
        raise ValueError("Cannot find nearest POI in an empty collection")

    nearest = pois[0]
    min_distance = calculate_haversine_distance(coord, nearest.coords)
    for poi in pois[1:]:
        distance = calculate_haversine_distance(coord, poi.coords)
        if distance < min_distance:
            min_distance = distance
            nearest = poi

    return nearest

def find_nearest_point_on_path(point: LatLon, path: Sequence[LatLon]) -> LatLon:
    """Return the path coordinate closest to point

    Raises:
        ValueError: path is empty
    """
    if not path:
        raise ValueError("Cannot find nearest point on an empty path")

    nearest = path[0]
    min_distance = calculate_haversine_distance(point, nearest)
    for path_point in path[1:]:
        distance = calculate_haversine_distance(point, path_point)
        if distance < min_distance:
            min_distance = distance
            nearest = path_point

    return nearest

class RouteCalculator:
    """Calculates walking routes across the campus proximity graph"""

    def __init__(self, config: RouteConfig = None, cache: GraphCache = None):
        """Initialize route calculator

        Args:
            config: Routing configuration (defaults to the global CONFIG)
            cache: Graph cache; one is created when config.CACHE_ENABLED
        """
        self.config = config or CONFIG
        if cache is not None:
            self.cache = cache
        elif self.config.CACHE_ENABLED:
            self.cache = GraphCache(self.config.CACHE_MAX_ENTRIES)
        else:
            self.cache = None

    def get_graph(self, pois: Sequence[PointOfInterest]) -> CampusGraph:
        """Build the proximity graph for pois, reusing a cached one if present"""
        build_args = (
            self.config.MAX_NEIGHBOR_DISTANCE_M,
            self.config.MAX_NEIGHBORS,
            self.config.SYMMETRIC_GRAPH,
        )

        cache_key = None
        if self.cache is not None:
            cache_key = graph_cache_key(pois, *build_args)
            graph = self.cache.get(cache_key)
            if graph is not None:
                logger.debug(f"Using cached graph {cache_key}")
                return graph

        graph = build_campus_graph(
            pois,
            max_distance=build_args[0],
            max_neighbors=build_args[1],
            symmetric=build_args[2]
        )

        if cache_key is not None:
            self.cache.put(cache_key, graph)

        return graph

    def calculate_route(self, start: LatLon, end: LatLon,
                        pois: Optional[Sequence[PointOfInterest]] = None) -> RouteResult:
        """Calculate a walking route between two coordinates

        Without POIs the route is the straight line start -> end. With POIs
        the route passes through the shortest graph path between the POIs
        nearest to start and end, falling back to a straight line when no
        such path exists.

        Args:
            start: Start (lat, lon)
            end: End (lat, lon)
            pois: Optional campus POIs

        Returns:
            RouteResult
        """
        if self.config.VALIDATE_COORDINATES:
            for label, coord in (("start", start), ("end", end)):
                if not is_valid_coordinate(coord):
                    raise InvalidCoordinateError(coord, label)

        route_path: List[LatLon] = [start, end]
        waypoints: List[str] = []

        pois = list(pois) if pois is not None else []
        if pois:
            graph = self.get_graph(pois)

            nearest_start = find_nearest_poi(start, pois)
            nearest_end = find_nearest_poi(end, pois)

            result = dijkstra_shortest_path(graph, nearest_start.id, nearest_end.id)

            if result is not None and len(result.path) > 1:
                waypoints = result.path
                route_path = ([start] +
                              [graph[poi_id].poi.coords for poi_id in waypoints] +
                              [end])
            else:
                logger.info(f"No graph path between {nearest_start.id} and "
                            f"{nearest_end.id}, using direct line")

        distance = calculate_path_distance(route_path)
        estimated_time = estimate_walking_time(distance, self.config.WALKING_SPEED_MS)

        return RouteResult(
            distance=distance,
            estimated_time=estimated_time,
            start_coords=start,
            end_coords=end,
            route_path=route_path,
            waypoints=waypoints
        )

def calculate_route(start: LatLon, end: LatLon,
                    pois: Optional[Sequence[PointOfInterest]] = None,
                    config: RouteConfig = None) -> RouteResult:
    """Calculate a walking route without keeping any state between calls"""
    calculator = RouteCalculator(config=replace(config or CONFIG, CACHE_ENABLED=False))
    return calculator.calculate_route(start, end, pois)

def generate_route_summary(route: RouteResult) -> Dict[str, Any]:
    """Generate summary information for a route

    Args:
        route: RouteResult object

    Returns:
        Route summary dictionary
    """
    hours = route.estimated_time / 60
    return {
        'distance_m': round(route.distance, 1),
        'distance_km': round(route.distance / 1000, 2),
        'estimated_time_min': route.estimated_time,
        'pace_kmh': round(route.distance / 1000 / hours, 1) if hours > 0 else 0,
        'waypoints_count': len(route.waypoints),
        'points_count': len(route.route_path),
        'used_graph': route.used_graph,
        'formatted_distance': format_distance(route.distance),
        'formatted_time': format_time(route.estimated_time)
    }
