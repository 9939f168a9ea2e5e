"""
Cache system for campus routing
Holds built proximity graphs in memory with hash-based keys
"""
import hashlib
import json
import threading
from collections import OrderedDict
from typing import Any, Dict, Optional, Sequence


def obj_hash(o: Any) -> str:
    """
    Generate a SHA1 hash of an object to use as a cache key.

    Args:
        o: Object to hash (should be JSON serializable)

    Returns:
        Hex SHA1 string
    """
    try:
        json_str = json.dumps(o, sort_keys=True, ensure_ascii=False)
    except (TypeError, ValueError):
        # Not JSON serializable
        json_str = str(o)

    return hashlib.sha1(json_str.encode('utf-8')).hexdigest()


def graph_cache_key(pois: Sequence, max_distance: float, max_neighbors: int,
                    symmetric: bool) -> str:
    """
    Build the cache key for a proximity graph.

    POI ids and exact coordinates plus the builder parameters identify
    the graph, so any change to the POI set yields a new key.
    """
    poi_data = [
        [str(p.id), float(p.coords[0]), float(p.coords[1])]
        for p in pois
    ]
    return "graph_" + obj_hash({
        'pois': poi_data,
        'max_distance': float(max_distance),
        'max_neighbors': int(max_neighbors),
        'symmetric': bool(symmetric),
    })


class GraphCache:
    """Thread-safe in-memory LRU cache for built graphs"""

    def __init__(self, max_entries: int = 32):
        """Initialize cache

        Args:
            max_entries: Maximum number of graphs kept before evicting
                the least recently used one
        """
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")

        self.max_entries = max_entries
        self._entries: "OrderedDict[str, Any]" = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def get(self, key: str) -> Optional[Any]:
        """Return the cached graph for key, or None"""
        with self._lock:
            if key not in self._entries:
                self._misses += 1
                return None
            self._entries.move_to_end(key)
            self._hits += 1
            return self._entries[key]

    def put(self, key: str, graph: Any) -> None:
        """Store a graph, evicting the oldest entry when full"""
        with self._lock:
            self._entries[key] = graph
            self._entries.move_to_end(key)
            while len(self._entries) > self.max_entries:
                self._entries.popitem(last=False)

    def clear(self) -> None:
        """Drop every cached graph and reset counters"""
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def get_cache_stats(self) -> Dict[str, int]:
        """Get cache statistics

        Returns:
            Dictionary with hit/miss counts and current size
        """
        with self._lock:
            return {
                'hits': self._hits,
                'misses': self._misses,
                'size': len(self._entries),
                'max_entries': self.max_entries,
            }
