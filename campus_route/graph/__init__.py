"""
Graph Module for Campus Routing
Proximity graph construction and shortest path search
"""

from .builder import (
    PointOfInterest, Edge, GraphNode, CampusGraph,
    build_campus_graph, graph_edges_frame
)
from .dijkstra import ShortestPath, dijkstra_shortest_path

__all__ = [
    'PointOfInterest',
    'Edge',
    'GraphNode',
    'CampusGraph',
    'build_campus_graph',
    'graph_edges_frame',
    'ShortestPath',
    'dijkstra_shortest_path'
]
