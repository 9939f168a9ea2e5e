"""
Exception types raised by campus routing
"""


class CampusRouteError(Exception):
    """Base class for campus routing errors"""


class InvalidCoordinateError(CampusRouteError, ValueError):
    """A coordinate is NaN, infinite or outside lat/lon range"""

    def __init__(self, coord, label: str = "coordinate"):
        self.coord = coord
        self.label = label
        super().__init__(f"Invalid {label}: {coord!r}")


class UnknownNodeError(CampusRouteError, KeyError):
    """A node id passed to the path search is not in the graph"""

    def __init__(self, node_id):
        self.node_id = node_id
        super().__init__(node_id)

    def __str__(self):
        return f"Node not found in graph: {self.node_id!r}"


class POILoadError(CampusRouteError):
    """A POI source could not be read or is malformed"""
