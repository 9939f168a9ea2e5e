"""
POI ingestion for campus routing
Turns records, DataFrames, CSV and GeoJSON files into PointOfInterest lists
"""
import json
import os
from typing import Any, Dict, Iterable, List, Mapping, Optional
import numpy as np
import pandas as pd

from ..errors import POILoadError
from ..graph import PointOfInterest
from ..utils import LatLon, coordinate_mask, is_valid_coordinate, setup_logging

logger = setup_logging()

# Sample campus buildings for demos and tests
SAMPLE_CAMPUS_POIS = [
    PointOfInterest(id="1", name="Main Gate", coords=(-0.3603, 37.0093), category="entrance"),
    PointOfInterest(id="2", name="Main Library", coords=(-0.3605, 37.0095), category="building"),
    PointOfInterest(id="3", name="Engineering Building", coords=(-0.3608, 37.0098), category="building"),
    PointOfInterest(id="4", name="Student Center", coords=(-0.361, 37.009), category="building"),
    PointOfInterest(id="5", name="Sports Complex", coords=(-0.36, 37.0085), category="facility"),
]


def pois_from_records(records: Iterable[Mapping[str, Any]]) -> List[PointOfInterest]:
    """
    Build POIs from plain mappings.

    Each record needs an 'id', and either 'lat'/'lon' or a 'coords' pair.
    'name' defaults to the id and 'category' is optional.

    Raises:
        POILoadError: a record has no id, or no finite in-range coordinates
    """
    pois = []
    for i, record in enumerate(records):
        if record.get('id') is None:
            raise POILoadError(f"Record {i} has no id")

        if 'coords' in record:
            lat, lon = record['coords']
        elif 'lat' in record and 'lon' in record:
            lat, lon = record['lat'], record['lon']
        else:
            raise POILoadError(f"Record {i} has no coordinates")

        if not is_valid_coordinate((lat, lon)):
            raise POILoadError(f"Record {i} has invalid coordinates: ({lat!r}, {lon!r})")

        poi_id = str(record['id'])
        pois.append(PointOfInterest(
            id=poi_id,
            name=str(record.get('name') or poi_id),
            coords=(float(lat), float(lon)),
            category=record.get('category')
        ))
    return pois


def pois_from_dataframe(df: pd.DataFrame, id_col: str = 'id', name_col: str = 'name',
                        lat_col: str = 'lat', lon_col: str = 'lon',
                        category_col: Optional[str] = 'category') -> List[PointOfInterest]:
    """
    Build POIs from a DataFrame.

    Coordinates are coerced to numeric; rows with missing, non-numeric or
    out-of-range coordinates are dropped.

    Args:
        df: Table of locations
        id_col: Identifier column
        name_col: Display name column (falls back to id when missing)
        lat_col: Latitude column
        lon_col: Longitude column
        category_col: Optional category column

    Returns:
        List of PointOfInterest

    Raises:
        POILoadError: required columns are missing
    """
    missing = [col for col in (id_col, lat_col, lon_col) if col not in df.columns]
    if missing:
        raise POILoadError(f"Missing columns: {missing}")

    df = df.copy()
    df[lat_col] = pd.to_numeric(df[lat_col], errors='coerce')
    df[lon_col] = pd.to_numeric(df[lon_col], errors='coerce')

    valid = coordinate_mask(df, lat_col, lon_col) & df[id_col].notna()
    dropped = int((~valid).sum())
    if dropped:
        logger.warning(f"Dropped {dropped} POI rows with missing id or invalid coordinates")
    df = df[valid]

    pois = []
    for row in df.to_dict('records'):
        poi_id = str(row[id_col])
        name = row.get(name_col) if name_col in df.columns else None
        category = row.get(category_col) if category_col and category_col in df.columns else None
        pois.append(PointOfInterest(
            id=poi_id,
            name=str(name) if pd.notna(name) else poi_id,
            coords=(float(row[lat_col]), float(row[lon_col])),
            category=str(category) if pd.notna(category) else None
        ))
    return pois


def load_pois_csv(path: str, **kwargs) -> List[PointOfInterest]:
    """
    Load POIs from a CSV file with id, name, lat, lon columns.

    Extra keyword arguments are passed to pois_from_dataframe.
    """
    if not os.path.exists(path):
        raise POILoadError(f"POI file not found: {path}")

    try:
        df = pd.read_csv(path, dtype={kwargs.get('id_col', 'id'): str})
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        raise POILoadError(f"Could not read {path}: {e}") from e

    pois = pois_from_dataframe(df, **kwargs)
    logger.info(f"Loaded {len(pois)} POIs from {path}")
    return pois


def _feature_point(geometry: Dict[str, Any]) -> Optional[LatLon]:
    """(lat, lon) for a Point, or the mean of a polygon's exterior ring"""
    geom_type = geometry.get('type')
    coordinates = geometry.get('coordinates')
    if not coordinates:
        return None

    if geom_type == 'Point':
        lon, lat = coordinates[:2]
        return float(lat), float(lon)

    if geom_type == 'Polygon':
        ring = coordinates[0]
    elif geom_type == 'MultiPolygon':
        ring = [pos for polygon in coordinates for pos in polygon[0]]
    else:
        return None

    ring = np.asarray([pos[:2] for pos in ring], dtype=float)
    if ring.size == 0:
        return None
    # Closed rings repeat the first vertex
    if len(ring) > 1 and np.array_equal(ring[0], ring[-1]):
        ring = ring[:-1]
    lon, lat = ring.mean(axis=0)
    return float(lat), float(lon)


def load_pois_geojson(path: str) -> List[PointOfInterest]:
    """
    Load POIs from a GeoJSON FeatureCollection.

    Points are used as-is; Polygon and MultiPolygon features (building
    footprints) collapse to the mean of their exterior ring. Other geometry
    types are skipped.

    Raises:
        POILoadError: the file is missing, not JSON, or not a FeatureCollection
    """
    if not os.path.exists(path):
        raise POILoadError(f"POI file not found: {path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise POILoadError(f"Invalid GeoJSON in {path}: {e}") from e

    if not isinstance(data, dict) or data.get('type') != 'FeatureCollection':
        raise POILoadError(f"{path} is not a GeoJSON FeatureCollection")

    records = []
    for index, feature in enumerate(data.get('features', [])):
        point = _feature_point(feature.get('geometry') or {})
        if point is None:
            logger.debug(f"Skipping feature {index} without usable geometry")
            continue

        properties = feature.get('properties') or {}
        poi_id = properties.get('id', feature.get('id', index))
        records.append({
            'id': poi_id,
            'name': properties.get('name'),
            'coords': point,
            'category': properties.get('type') or properties.get('category')
        })

    pois = pois_from_records(records)
    logger.info(f"Loaded {len(pois)} POIs from {path}")
    return pois


def load_pois(path: str) -> List[PointOfInterest]:
    """Load POIs from a .csv or .geojson/.json file"""
    ext = os.path.splitext(path)[1].lower()
    if ext == '.csv':
        return load_pois_csv(path)
    if ext in ('.geojson', '.json'):
        return load_pois_geojson(path)
    raise POILoadError(f"Unsupported POI file type: {ext or path}")
