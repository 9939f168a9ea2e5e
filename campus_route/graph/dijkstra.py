"""
Dijkstra shortest path search over a campus graph
"""
import heapq
import math
from typing import Dict, List, Optional, Set
from dataclasses import dataclass

from ..errors import UnknownNodeError
from ..utils import setup_logging
from .builder import CampusGraph

logger = setup_logging()

@dataclass(frozen=True)
class ShortestPath:
    """Node ids from start to end and the summed edge weight"""
    distance: float
    path: List[str]

def dijkstra_shortest_path(graph: CampusGraph, start_id: str,
                           end_id: str) -> Optional[ShortestPath]:
    """Find the minimum-weight path between two graph nodes

    Equal tentative distances are settled in ascending node id order.

    An end that cannot be reached yields None, but an id that is not in the
    graph at all is a caller error and raises instead of returning None.

    Args:
        graph: Campus graph
        start_id: Id of the start node
        end_id: Id of the end node

    Returns:
        ShortestPath, or None when end is unreachable from start

    Raises:
        UnknownNodeError: start_id or end_id is not a node of the graph
    """
    for node_id in (start_id, end_id):
        if node_id not in graph:
            raise UnknownNodeError(node_id)

    distances: Dict[str, float] = {node_id: math.inf for node_id in graph}
    previous: Dict[str, Optional[str]] = {node_id: None for node_id in graph}
    visited: Set[str] = set()

    distances[start_id] = 0.0
    queue = [(0.0, start_id)]

    while queue:
        current_distance, current = heapq.heappop(queue)

        # Stale entry
        if current in visited or current_distance > distances[current]:
            continue

        if current == end_id:
            path = []
            node = end_id
            while node is not None:
                path.append(node)
                node = previous[node]
            path.reverse()
            logger.debug(f"Path {start_id} -> {end_id}: {len(path)} nodes, "
                         f"{current_distance:.1f} m")
            return ShortestPath(distance=current_distance, path=path)

        visited.add(current)

        for edge in graph[current].neighbors:
            # Edges to ids outside the graph are ignored
            if edge.id not in distances or edge.id in visited:
                continue
            new_distance = current_distance + edge.distance
            if new_distance < distances[edge.id]:
                distances[edge.id] = new_distance
                previous[edge.id] = current
                heapq.heappush(queue, (new_distance, edge.id))

    logger.debug(f"No path found from {start_id} to {end_id}")
    return None
