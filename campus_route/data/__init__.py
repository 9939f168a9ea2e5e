"""
Data Module for Campus Routing
POI ingestion from records, tables and geographic files
"""

from .loader import (
    SAMPLE_CAMPUS_POIS, pois_from_records, pois_from_dataframe,
    load_pois_csv, load_pois_geojson, load_pois
)

__all__ = [
    'SAMPLE_CAMPUS_POIS',
    'pois_from_records',
    'pois_from_dataframe',
    'load_pois_csv',
    'load_pois_geojson',
    'load_pois'
]
