#!/usr/bin/env python3
"""
Route object tying a track to the analysis and day-splitting functions.
"""

from typing import List, Optional, Sequence, TextIO
import logging

from .analysis import ProfilePoint, RouteAnalysis, analyze_route, calculate_elevation_profile
from .bbox import BoundingBox, get_route_bounding_box
from .distance import calculate_cumulative_distances
from .geometry import Coordinate
from .gpx import TrackData, Waypoint, load_gpx, parse_gpx
from .simplify import DEFAULT_SIMPLIFY_TOLERANCE_M, simplify_route
from .splitting import (
    DaySegment,
    DaySplitSuggestion,
    build_day_segments,
    snap_to_track,
    suggest_day_splits,
)

logger = logging.getLogger(__name__)


class Route:
    """Represents a hiking route as an ordered list of coordinates.

    Every method recomputes its result from the coordinates; nothing is
    cached, so the caller decides how often to recompute while editing.
    """

    def __init__(
        self, coords: Sequence[Coordinate], waypoints: Optional[List[Waypoint]] = None
    ):
        """Initializes a Route object.

        Args:
            coords: Coordinates of the route in travel order. May be empty
                while a route is still being drawn.
            waypoints: Optional named points of interest along the route.
        """
        self.coords: List[Coordinate] = list(coords)
        self.waypoints: List[Waypoint] = list(waypoints) if waypoints else []

    def analyze(self) -> RouteAnalysis:
        """Distance, elevation gain/loss and bounding box for the whole route."""
        return analyze_route(self.coords)

    def get_bounding_box(self) -> BoundingBox:
        return get_route_bounding_box(self.coords)

    def get_cumulative_distances(self) -> List[float]:
        """Cumulative distances in kilometers, one per coordinate."""
        return calculate_cumulative_distances(self.coords)

    def elevation_profile(self) -> List[ProfilePoint]:
        return calculate_elevation_profile(self.coords)

    def suggest_day_splits(self, days_count: int) -> List[DaySplitSuggestion]:
        return suggest_day_splits(self.coords, days_count)

    def split_into_days(
        self, days_count: int, split_indices: Optional[Sequence[int]] = None
    ) -> List[DaySegment]:
        """
        Cut the route into day segments.

        Args:
            days_count: Number of days, used when split_indices is not given
            split_indices: Explicit split indices, e.g. after manual editing

        Returns:
            One DaySegment per day
        """
        if split_indices is None:
            split_indices = [s.split_index for s in self.suggest_day_splits(days_count)]
        return build_day_segments(self.coords, split_indices)

    def snap(self, lat: float, lng: float) -> int:
        """Index of the route point nearest to (lat, lng)."""
        return snap_to_track(self.coords, lat, lng)

    def simplified(self, tolerance_m: float = DEFAULT_SIMPLIFY_TOLERANCE_M) -> "Route":
        """Return a new Route with fewer points, see simplify_route."""
        return Route(simplify_route(self.coords, tolerance_m), self.waypoints)

    @property
    def has_elevation_data(self) -> bool:
        return any(c.elevation for c in self.coords)

    @classmethod
    def from_track(cls, track: TrackData) -> "Route":
        return cls(track.trackpoints, track.waypoints)

    @classmethod
    def from_gpx(cls, file_input: TextIO) -> "Route":
        """
        Parse GPX data and concatenate all tracks/segments into a single route.

        Args:
            file_input: File-like object containing GPX data

        Returns:
            Route object representing the concatenated route

        Raises:
            gpxpy.gpx.GPXException: If GPX data is malformed.
            ValueError: If the GPX data contains no track points.
        """
        route = cls.from_track(parse_gpx(file_input))
        logger.debug(f"Parsed {len(route.coords)} track points from GPX file")
        return route

    @classmethod
    def from_file(cls, filename: str) -> "Route":
        """
        Load and parse a GPX file into a route.

        Args:
            filename: Path to GPX file, or "-" for stdin

        Returns:
            Route object representing the route

        Raises:
            FileNotFoundError: If file doesn't exist.
            PermissionError: If file can't be read.
            gpxpy.gpx.GPXException: If GPX file is malformed.
            ValueError: If the file contains no track points.
        """
        return cls.from_track(load_gpx(filename))

    def __len__(self) -> int:
        """Return number of trackpoints in route."""
        return len(self.coords)

    def __getitem__(self, index):
        """Allow indexing into trackpoints."""
        return self.coords[index]

    def __iter__(self):
        """Allow iteration over trackpoints."""
        return iter(self.coords)
