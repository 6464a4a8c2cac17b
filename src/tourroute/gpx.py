#!/usr/bin/env python3
"""
GPX file parsing into track coordinates and waypoints.
"""

from dataclasses import dataclass, field
from typing import List, NamedTuple, Optional, TextIO
import logging
import sys
import gpxpy
import gpxpy.gpx

from .geometry import Coordinate

logger = logging.getLogger(__name__)


class Waypoint(NamedTuple):
    """A named point of interest stored alongside the track."""

    name: str
    lat: float
    lng: float
    elevation: float = 0.0
    description: Optional[str] = None


@dataclass
class TrackData:
    """Trackpoints and waypoints read from a GPX file."""

    trackpoints: List[Coordinate]
    waypoints: List[Waypoint] = field(default_factory=list)

    @property
    def has_elevation_data(self) -> bool:
        """True if any trackpoint has a non-zero elevation."""
        return any(p.elevation for p in self.trackpoints)


def _to_coordinate(point: gpxpy.gpx.GPXTrackPoint) -> Coordinate:
    return Coordinate(
        lat=point.latitude,
        lng=point.longitude,
        elevation=point.elevation if point.elevation is not None else 0.0,
    )


def parse_gpx(file_input: TextIO) -> TrackData:
    """
    Parse GPX data and concatenate all tracks/segments into a single track.

    Route points are used when the file has no tracks.

    Args:
        file_input: File-like object containing GPX data

    Returns:
        TrackData with the trackpoints and waypoints

    Raises:
        gpxpy.gpx.GPXException: If GPX data is malformed
        ValueError: If the GPX data contains no track points
    """
    gpx_data = gpxpy.parse(file_input)

    trackpoints = [
        _to_coordinate(point)
        for track in gpx_data.tracks
        for segment in track.segments
        for point in segment.points
    ]

    if not trackpoints:
        trackpoints = [
            _to_coordinate(point)
            for route in gpx_data.routes
            for point in route.points
        ]
        if trackpoints:
            logger.debug("No tracks in GPX data, using route points")

    if not trackpoints:
        raise ValueError("No trackpoints found in GPX file")

    waypoints = [
        Waypoint(
            name=wpt.name or "Unnamed",
            lat=wpt.latitude,
            lng=wpt.longitude,
            elevation=wpt.elevation if wpt.elevation is not None else 0.0,
            description=wpt.description,
        )
        for wpt in gpx_data.waypoints
    ]

    track = TrackData(trackpoints=trackpoints, waypoints=waypoints)

    logger.debug(
        f"Parsed {len(trackpoints)} trackpoints and {len(waypoints)} waypoints "
        f"(elevation data: {track.has_elevation_data})"
    )

    return track


def load_gpx(filename: str) -> TrackData:
    """
    Load and parse a GPX file.

    Args:
        filename: Path to GPX file, or "-" for stdin

    Returns:
        TrackData read from the file

    Raises:
        FileNotFoundError: If file doesn't exist
        PermissionError: If file can't be read
        gpxpy.gpx.GPXException: If GPX file is malformed
        ValueError: If the file contains no track points
    """
    if filename == "-":
        logger.debug("Reading GPX data from stdin")
        return parse_gpx(sys.stdin)

    logger.debug(f"Reading GPX file: {filename}")
    with open(filename, "r", encoding="utf-8") as f:
        return parse_gpx(f)
