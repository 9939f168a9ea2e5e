"""
Proximity graph construction over campus points of interest
Connects every POI to its nearest neighbours within a cutoff radius
"""
import numpy as np
import pandas as pd
from typing import Dict, List, Optional, Sequence
from dataclasses import dataclass, field

from ..utils import CONFIG, LatLon, setup_logging, haversine_distance_matrix

logger = setup_logging()

@dataclass(frozen=True)
class PointOfInterest:
    """Named campus location used as a routing graph node"""
    id: str
    name: str
    coords: LatLon  # (lat, lon) in degrees
    category: Optional[str] = None

@dataclass(frozen=True)
class Edge:
    """Directed adjacency entry: neighbour id and distance in meters"""
    id: str
    distance: float

@dataclass
class GraphNode:
    """Graph node holding its POI and neighbours sorted by distance"""
    poi: PointOfInterest
    neighbors: List[Edge] = field(default_factory=list)

CampusGraph = Dict[str, GraphNode]

def build_campus_graph(pois: Sequence[PointOfInterest],
                       max_distance: float = None,
                       max_neighbors: int = None,
                       symmetric: bool = False) -> CampusGraph:
    """Build a proximity graph from campus POIs

    Each POI keeps at most ``max_neighbors`` of the closest other POIs lying
    within ``max_distance`` meters. Selection is done per node, so without
    ``symmetric`` A may list B while B does not list A.

    Args:
        pois: Points of interest
        max_distance: Cutoff radius in meters (default CONFIG.MAX_NEIGHBOR_DISTANCE_M)
        max_neighbors: Neighbour cap per node (default CONFIG.MAX_NEIGHBORS)
        symmetric: Add missing reverse edges after selection

    Returns:
        Mapping of POI id to GraphNode
    """
    if max_distance is None:
        max_distance = CONFIG.MAX_NEIGHBOR_DISTANCE_M
    if max_neighbors is None:
        max_neighbors = CONFIG.MAX_NEIGHBORS

    # Last occurrence of a duplicated id wins
    unique: Dict[str, PointOfInterest] = {}
    for poi in pois:
        if poi.id in unique:
            logger.debug(f"Duplicate POI id {poi.id!r}, keeping last occurrence")
        unique[poi.id] = poi
    nodes = list(unique.values())

    graph: CampusGraph = {poi.id: GraphNode(poi=poi) for poi in nodes}
    if not nodes:
        return graph

    distance_matrix = haversine_distance_matrix([poi.coords for poi in nodes])

    for i, poi in enumerate(nodes):
        row = distance_matrix[i]
        candidates = np.array(
            [j for j in range(len(nodes)) if j != i and row[j] <= max_distance],
            dtype=int
        )
        if candidates.size == 0:
            continue

        order = np.argsort(row[candidates], kind='stable')[:max_neighbors]
        graph[poi.id].neighbors = [
            Edge(id=nodes[j].id, distance=float(row[j]))
            for j in candidates[order]
        ]

    if symmetric:
        _symmetrize(graph)

    logger.debug(f"Built campus graph: {len(graph)} nodes, "
                 f"{sum(len(n.neighbors) for n in graph.values())} directed edges")
    return graph

def _symmetrize(graph: CampusGraph) -> None:
    """Add each missing reverse edge, then re-sort neighbour lists"""
    missing = []
    for node_id, node in graph.items():
        for edge in node.neighbors:
            reverse_ids = {e.id for e in graph[edge.id].neighbors}
            if node_id not in reverse_ids:
                missing.append((edge.id, Edge(id=node_id, distance=edge.distance)))

    for target_id, edge in missing:
        neighbors = graph[target_id].neighbors
        if all(e.id != edge.id for e in neighbors):
            neighbors.append(edge)

    for node in graph.values():
        node.neighbors.sort(key=lambda e: e.distance)

def graph_edges_frame(graph: CampusGraph) -> pd.DataFrame:
    """List the directed edges of a graph

    Args:
        graph: Campus graph

    Returns:
        DataFrame with source, target and distance_m columns
    """
    rows = [
        {'source': node_id, 'target': edge.id, 'distance_m': edge.distance}
        for node_id, node in graph.items()
        for edge in node.neighbors
    ]
    return pd.DataFrame(rows, columns=['source', 'target', 'distance_m'])
