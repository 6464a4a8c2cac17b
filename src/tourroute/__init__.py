#!/usr/bin/env python3
"""
Tourroute - route geometry and day splitting for multi-day hiking tours.

This package provides tools to measure GPS tracks (distance, elevation
gain/loss, bounding box) and to split a multi-day route into daily segments
of similar length.
"""
import importlib.metadata

__version__ = importlib.metadata.version("tourroute")
__author__ = "tourroute contributors"

# Import main classes for public API
from .geometry import Coordinate
from .distance import haversine_distance, calculate_cumulative_distances
from .bbox import BoundingBox, get_route_bounding_box
from .analysis import (
    ProfilePoint,
    RouteAnalysis,
    analyze_route,
    calculate_elevation_profile,
    estimate_duration_hours,
)
from .splitting import (
    DaySegment,
    DaySplitSuggestion,
    build_day_segments,
    snap_to_track,
    suggest_day_splits,
)
from .route import Route

__all__ = [
    "Coordinate",
    "haversine_distance",
    "calculate_cumulative_distances",
    "BoundingBox",
    "get_route_bounding_box",
    "ProfilePoint",
    "RouteAnalysis",
    "analyze_route",
    "calculate_elevation_profile",
    "estimate_duration_hours",
    "DaySegment",
    "DaySplitSuggestion",
    "build_day_segments",
    "snap_to_track",
    "suggest_day_splits",
    "Route",
]
