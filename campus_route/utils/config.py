"""
Configuration and geodesic utility functions for campus routing
"""
import os
import math
import logging
import numpy as np
import pandas as pd
from typing import List, Sequence, Tuple
from dataclasses import dataclass, fields

LatLon = Tuple[float, float]

# Mean earth radius in meters
EARTH_RADIUS_M = 6371000.0

# Route Configuration
@dataclass
class RouteConfig:
    """Campus routing configuration"""

    # Proximity graph
    MAX_NEIGHBOR_DISTANCE_M: float = 500.0  # cutoff radius in meters
    MAX_NEIGHBORS: int = 5
    SYMMETRIC_GRAPH: bool = True

    # Walking speed in m/s (~5 km/h)
    WALKING_SPEED_MS: float = 1.4

    # Cache Configuration
    CACHE_ENABLED: bool = True
    CACHE_MAX_ENTRIES: int = 32

    # Input validation at the RouteCalculator boundary
    VALIDATE_COORDINATES: bool = False

    LOG_LEVEL: str = "INFO"

    @classmethod
    def from_env(cls, prefix: str = "CAMPUS_ROUTE_") -> "RouteConfig":
        """Build a config with overrides from environment variables

        Args:
            prefix: Environment variable prefix, e.g. CAMPUS_ROUTE_MAX_NEIGHBORS

        Returns:
            RouteConfig instance
        """
        overrides = {}
        for f in fields(cls):
            raw = os.getenv(f"{prefix}{f.name}")
            if raw is None:
                continue
            if f.type in (bool, "bool"):
                overrides[f.name] = raw.strip().lower() in ("1", "true", "yes", "on")
            elif f.type in (int, "int"):
                overrides[f.name] = int(raw)
            elif f.type in (float, "float"):
                overrides[f.name] = float(raw)
            else:
                overrides[f.name] = raw
        return cls(**overrides)

# Global configuration instance
CONFIG = RouteConfig.from_env()

def setup_logging(level: str = None) -> logging.Logger:
    """Setup logging for campus routing

    Args:
        level: Logging level (defaults to CONFIG.LOG_LEVEL)

    Returns:
        Configured logger
    """
    level = level or CONFIG.LOG_LEVEL
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    logger = logging.getLogger('campus_route')
    return logger

def coordinate_mask(df: pd.DataFrame, lat_col: str = 'lat',
                    lon_col: str = 'lon') -> pd.Series:
    """Row-wise check that coordinates are present and within WGS84 range

    Args:
        df: DataFrame with numeric coordinate columns
        lat_col: Latitude column name
        lon_col: Longitude column name

    Returns:
        Boolean Series aligned with df
    """
    return (df[lat_col].between(-90, 90) &
            df[lon_col].between(-180, 180) &
            df[[lat_col, lon_col]].notna().all(axis=1))

def is_valid_coordinate(coord: LatLon) -> bool:
    """Check a single (lat, lon) pair is finite and in range"""
    try:
        lat, lon = float(coord[0]), float(coord[1])
    except (TypeError, ValueError, IndexError):
        return False
    if not (math.isfinite(lat) and math.isfinite(lon)):
        return False
    return -90 <= lat <= 90 and -180 <= lon <= 180

def calculate_haversine_distance(coord1: LatLon, coord2: LatLon) -> float:
    """Calculate haversine distance between two points

    NaN input propagates to a NaN result.

    Args:
        coord1: First point (lat, lon) in degrees
        coord2: Second point (lat, lon) in degrees

    Returns:
        Distance in meters
    """
    lat1, lon1 = coord1
    lat2, lon2 = coord2

    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)
    a = (math.sin(dlat / 2) ** 2 +
         math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) *
         math.sin(dlon / 2) ** 2)
    # atan2 form stays stable near antipodal points
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_M * c

def haversine_distance_matrix(coords: Sequence[LatLon]) -> np.ndarray:
    """Create haversine distance matrix for a list of coordinates

    Args:
        coords: Sequence of (lat, lon) pairs

    Returns:
        NxN distance matrix in meters, zero diagonal
    """
    n = len(coords)
    if n == 0:
        return np.zeros((0, 0))

    points = np.asarray(coords, dtype=float).reshape(n, 2)
    lat = np.radians(points[:, 0])
    lon = np.radians(points[:, 1])

    dlat = lat[None, :] - lat[:, None]
    dlon = lon[None, :] - lon[:, None]
    a = (np.sin(dlat / 2) ** 2 +
         np.cos(lat)[:, None] * np.cos(lat)[None, :] * np.sin(dlon / 2) ** 2)
    a = np.clip(a, 0.0, 1.0)
    matrix = EARTH_RADIUS_M * 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))
    np.fill_diagonal(matrix, 0.0)

    return matrix

def calculate_path_distance(path: Sequence[LatLon]) -> float:
    """Sum of haversine distances between consecutive points of a path

    Args:
        path: Ordered (lat, lon) coordinates

    Returns:
        Total distance in meters
    """
    total_distance = 0.0
    for i in range(len(path) - 1):
        total_distance += calculate_haversine_distance(path[i], path[i + 1])
    return total_distance

def estimate_walking_time(distance_m: float, speed_ms: float = None) -> int:
    """Estimate walking time from distance

    Args:
        distance_m: Distance in meters
        speed_ms: Walking speed in m/s (defaults to CONFIG.WALKING_SPEED_MS)

    Returns:
        Whole minutes, rounded up
    """
    if speed_ms is None:
        speed_ms = CONFIG.WALKING_SPEED_MS

    minutes = distance_m / (speed_ms * 60)
    if math.isnan(minutes):
        return math.nan
    # 84 / 1.4 / 60 evaluates to 1.0000000000000002, so absorb float noise
    return math.ceil(round(minutes, 9))

def format_time(minutes: float) -> str:
    """Format walking time in human-readable format

    Args:
        minutes: Duration in minutes

    Returns:
        Formatted duration string
    """
    if math.isnan(minutes):
        return "n/a"
    if minutes < 1:
        return "< 1 min"
    elif minutes < 60:
        return f"{int(minutes)} min"
    else:
        hours = int(minutes // 60)
        mins = int(minutes % 60)
        return f"{hours}h {mins}m"

def format_distance(meters: float) -> str:
    """Format distance in human-readable format

    Args:
        meters: Distance in meters

    Returns:
        Formatted distance string
    """
    if math.isnan(meters):
        return "n/a"
    if meters < 1000:
        return f"{round(meters)} m"
    else:
        return f"{meters/1000:.2f} km"

def to_lonlat(coords: List[LatLon]) -> List[List[float]]:
    """Convert (lat, lon) pairs to GeoJSON [lon, lat] positions"""
    return [[float(lon), float(lat)] for lat, lon in coords]
