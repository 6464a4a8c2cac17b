#!/usr/bin/env python3
"""
Tour route planning tool.
This script reads a GPX track, summarizes distance and elevation, and
suggests how to split the route into days of similar length.

Requirements:
    pip install gpxpy shapely pyproj requests

"""

from typing import Any, Dict, List, Optional
import argparse
import json
import logging
import sys
from gpxpy import gpx

from . import __version__
from .analysis import RouteAnalysis, estimate_duration_hours
from .config import TourRouteConfig
from .elevation import fetch_elevations, interpolate_missing_elevations
from .metrics import collect_metrics, log_metrics
from .route import Route
from .splitting import DaySegment

# Configure logging
logger = logging.getLogger("tourroute")


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the command-line argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    defaults = TourRouteConfig()
    parser = argparse.ArgumentParser(
        description="Multi-day hiking route analysis and day splitting tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "filename",
        type=str,
        nargs="?",
        help="GPX file to process (- for stdin)",
    )
    parser.add_argument(
        "--days",
        type=int,
        default=defaults.days,
        help=f"Number of days to split the route into (default: {defaults.days})",
    )
    parser.add_argument(
        "--simplify",
        type=float,
        default=defaults.simplify_tolerance,
        metavar="METERS",
        help="Simplify the route with this tolerance in meters before analysis (default: off)",
    )
    parser.add_argument(
        "--bbox-buffer",
        type=float,
        default=defaults.bbox_buffer,
        help=f"Buffer around the route for the reported map bounds in meters (default: {defaults.bbox_buffer})",
    )
    parser.add_argument(
        "--flat-speed",
        type=float,
        default=defaults.flat_speed_kmh,
        help=f"Walking speed on level ground in km/h (default: {defaults.flat_speed_kmh})",
    )
    parser.add_argument(
        "--climb-rate",
        type=float,
        default=defaults.climb_rate_m_per_h,
        help=f"Ascent in meters per extra hour of walking (default: {defaults.climb_rate_m_per_h})",
    )
    parser.add_argument(
        "--fill-elevation",
        action="store_true",
        help="Fill missing elevations, from the elevation API when reachable, otherwise by interpolation",
    )
    parser.add_argument(
        "--elevation-api-url",
        type=str,
        default=defaults.elevation_api_url,
        help="Open-Elevation compatible lookup endpoint",
    )
    parser.add_argument(
        "--timeout",
        type=int,
        default=defaults.elevation_api_timeout,
        help=f"Elevation API timeout in seconds (default: {defaults.elevation_api_timeout})",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output the day plan as JSON instead of text",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Write output to this file instead of stdout",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=defaults.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help=f"Set logging level (default: {defaults.log_level})",
    )
    parser.add_argument(
        "--metrics",
        action="store_true",
        help="Output structured split metrics after processing",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"tourroute {__version__}",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> TourRouteConfig:
    """Build a TourRouteConfig from parsed command-line arguments."""
    return TourRouteConfig(
        days=args.days,
        simplify_tolerance=args.simplify,
        bbox_buffer=args.bbox_buffer,
        flat_speed_kmh=args.flat_speed,
        climb_rate_m_per_h=args.climb_rate,
        fill_elevation=args.fill_elevation,
        elevation_api_url=args.elevation_api_url,
        elevation_api_timeout=args.timeout,
        log_level=args.log_level,
        metrics=args.metrics,
    )


def setup_logging(config: TourRouteConfig) -> None:
    """Setup logging configuration."""
    level = getattr(logging, config.log_level)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S"
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    # Configure the root logger so all modules inherit the configuration
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)

    # Suppress overly verbose third-party logging
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("requests").setLevel(logging.WARNING)


def fill_elevation(route: Route, config: TourRouteConfig) -> Route:
    """Fill missing elevations, falling back to interpolation if the lookup fails."""
    coords = fetch_elevations(
        route.coords,
        url=config.elevation_api_url,
        timeout=config.elevation_api_timeout,
    )
    coords = interpolate_missing_elevations(coords)
    return Route(coords, route.waypoints)


def segment_duration(segment: DaySegment, config: TourRouteConfig) -> int:
    return estimate_duration_hours(
        segment.analysis.total_distance_km,
        segment.analysis.elevation_gain_m,
        config.flat_speed_kmh,
        config.climb_rate_m_per_h,
    )


def build_plan(
    route: Route,
    analysis: RouteAnalysis,
    segments: List[DaySegment],
    config: TourRouteConfig,
) -> Dict[str, Any]:
    """
    Build a JSON-serializable summary of the route and its day segments.

    Args:
        route: The analyzed route
        analysis: Whole-route analysis
        segments: Day segments of the route
        config: Settings used for durations and map bounds

    Returns:
        Dictionary with "route" and "days" entries
    """
    bbox = analysis.bounding_box
    south, west, north, east = bbox.buffered(config.bbox_buffer)
    return {
        "route": {
            "points": len(route),
            "distance_km": round(analysis.total_distance_km, 2),
            "elevation_gain_m": analysis.elevation_gain_m,
            "elevation_loss_m": analysis.elevation_loss_m,
            "estimated_duration_hours": estimate_duration_hours(
                analysis.total_distance_km,
                analysis.elevation_gain_m,
                config.flat_speed_kmh,
                config.climb_rate_m_per_h,
            ),
            "has_elevation_data": route.has_elevation_data,
            "center": {"lat": bbox.center.lat, "lng": bbox.center.lng},
            "radius_km": round(bbox.radius_km, 2),
            "bounds": [[south, west], [north, east]],
        },
        "days": [
            {
                "day": segment.day_number,
                "start_index": segment.start_index,
                "end_index": segment.end_index,
                "distance_km": round(segment.analysis.total_distance_km, 2),
                "elevation_gain_m": segment.analysis.elevation_gain_m,
                "elevation_loss_m": segment.analysis.elevation_loss_m,
                "estimated_duration_hours": segment_duration(segment, config),
            }
            for segment in segments
        ],
    }


def format_plan(plan: Dict[str, Any]) -> str:
    """
    Format a day plan as aligned text.

    Args:
        plan: Dictionary produced by build_plan

    Returns:
        Multi-line text summary
    """
    summary = plan["route"]
    lines = [
        f"Route: {summary['distance_km']:.2f} km, "
        f"+{summary['elevation_gain_m']} m / -{summary['elevation_loss_m']} m, "
        f"~{summary['estimated_duration_hours']} hrs ({summary['points']} points)"
    ]
    if not summary["has_elevation_data"]:
        lines.append("No elevation data in track")

    days = plan["days"]
    distance_width = len(f"{max(d['distance_km'] for d in days):.0f}") + 3
    index_width = len(str(max(d["end_index"] for d in days)))

    for day in days:
        lines.append(
            f"Day {day['day']}: "
            f"points {day['start_index']:{index_width}d}-{day['end_index']:{index_width}d}  "
            f"{day['distance_km']:{distance_width}.2f} km  "
            f"+{day['elevation_gain_m']} m / -{day['elevation_loss_m']} m  "
            f"~{day['estimated_duration_hours']} hrs"
        )
    return "\n".join(lines)


def write_output(text: str, output_filename: Optional[str]) -> None:
    """Write text to a file, or print it when no file is given."""
    if output_filename is None:
        print(text)
        return

    with open(output_filename, "w", encoding="utf-8") as f:
        f.write(text + "\n")
    logger.debug(f"Output written to {output_filename}")


def main():
    """
    Parses command-line arguments, loads the GPX file,
    analyzes the route, and prints the suggested day plan.
    """
    parser = create_argument_parser()
    args = parser.parse_args()

    if not args.filename:
        parser.print_help()
        sys.exit(1)

    config = config_from_args(args)
    setup_logging(config)

    if config.days < 1:
        logger.error(f"Number of days must be at least 1, got {config.days}")
        sys.exit(1)

    # Load and parse the GPX file into a route
    try:
        route = Route.from_file(args.filename)
    except FileNotFoundError:
        logger.error(f"GPX file not found: {args.filename}")
        sys.exit(1)
    except PermissionError:
        logger.error(f"Cannot read GPX file (permission denied): {args.filename}")
        sys.exit(1)
    except gpx.GPXException as e:
        logger.error(f"Invalid GPX file: {e}")
        sys.exit(1)
    except ValueError as e:
        logger.error(f"Unusable GPX file: {e}")
        sys.exit(1)
    logger.info(f"Loaded GPX route with {len(route)} points")

    if config.fill_elevation and not route.has_elevation_data:
        route = fill_elevation(route, config)

    if config.simplify_tolerance > 0:
        route = route.simplified(config.simplify_tolerance)
        logger.info(f"Simplified route to {len(route)} points")

    analysis = route.analyze()
    logger.info(f"Total route distance: {analysis.total_distance_km:.2f} km")

    segments = route.split_into_days(config.days)
    if len(segments) < config.days:
        logger.warning(
            f"Route has too few points for {config.days} days, planned {len(segments)}"
        )

    plan = build_plan(route, analysis, segments, config)
    text = json.dumps(plan, indent=2) if args.json else format_plan(plan)

    try:
        write_output(text, args.output)
    except OSError as e:
        logger.error(f"Cannot write output file {args.output}: {e}")
        sys.exit(1)

    log_metrics(collect_metrics(segments), config.metrics)


if __name__ == "__main__":
    main()
