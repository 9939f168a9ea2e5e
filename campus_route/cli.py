"""
Command line entry point for campus route estimation
"""
import argparse
import json
import sys
from dataclasses import replace
from typing import List, Optional

from .errors import CampusRouteError
from .data import SAMPLE_CAMPUS_POIS, load_pois
from .paths import RouteCalculator, generate_route_summary
from .utils import CONFIG, setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="campus_route",
        description="Estimate a walking route between two campus coordinates"
    )
    # Separate LAT LON values so negative latitudes parse as numbers
    parser.add_argument("--start", type=float, nargs=2, metavar=("LAT", "LON"),
                        required=True, help="Start coordinate")
    parser.add_argument("--end", type=float, nargs=2, metavar=("LAT", "LON"),
                        required=True, help="End coordinate")
    parser.add_argument("--pois", help="CSV or GeoJSON file of campus POIs "
                                       "(default: built-in sample campus)")
    parser.add_argument("--direct", action="store_true",
                        help="Ignore POIs and use a straight line")
    parser.add_argument("--max-distance", type=float,
                        default=CONFIG.MAX_NEIGHBOR_DISTANCE_M,
                        help="Neighbour cutoff radius in meters")
    parser.add_argument("--max-neighbors", type=int, default=CONFIG.MAX_NEIGHBORS,
                        help="Maximum neighbours per POI")

    symmetry = parser.add_mutually_exclusive_group()
    symmetry.add_argument("--symmetric", dest="symmetric", action="store_true",
                          default=CONFIG.SYMMETRIC_GRAPH,
                          help="Add reverse edges to the graph")
    symmetry.add_argument("--asymmetric", dest="symmetric", action="store_false",
                          help="Keep per-node nearest neighbour selection only")

    parser.add_argument("--format", choices=["text", "json", "geojson"],
                        default="text", help="Output format")
    parser.add_argument("--log-level", default=CONFIG.LOG_LEVEL,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def format_text(route, summary) -> str:
    lines = [
        f"Distance:       {summary['formatted_distance']}",
        f"Estimated time: {summary['formatted_time']}",
        f"Route points:   {summary['points_count']}",
    ]
    if route.waypoints:
        lines.append(f"Via POIs:       {' -> '.join(route.waypoints)}")
    else:
        lines.append("Via POIs:       direct line")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logger = setup_logging(args.log_level)
    logger.setLevel(args.log_level)

    config = replace(
        CONFIG,
        MAX_NEIGHBOR_DISTANCE_M=args.max_distance,
        MAX_NEIGHBORS=args.max_neighbors,
        SYMMETRIC_GRAPH=args.symmetric,
        LOG_LEVEL=args.log_level
    )

    pois = None
    if not args.direct:
        try:
            pois = load_pois(args.pois) if args.pois else SAMPLE_CAMPUS_POIS
        except CampusRouteError as e:
            print(f"error: {e}", file=sys.stderr)
            return 2

    start, end = tuple(args.start), tuple(args.end)
    route = RouteCalculator(config=config).calculate_route(start, end, pois)
    logger.info(f"Route computed: {route.distance:.1f} m, {route.estimated_time} min")

    if args.format == "json":
        print(json.dumps({**route.to_dict(), 'summary': generate_route_summary(route)}, indent=2))
    elif args.format == "geojson":
        print(json.dumps(route.to_geojson(), indent=2))
    else:
        print(format_text(route, generate_route_summary(route)))

    return 0


if __name__ == "__main__":
    sys.exit(main())
