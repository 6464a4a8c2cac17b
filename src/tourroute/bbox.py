#!/usr/bin/env python3
"""
Bounding box calculation for centering and zooming a map on a route.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple
import logging
from math import cos, radians

from .distance import haversine_distance
from .geometry import Coordinate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned lat/lng rectangle around a set of points.

    The center is the simple average of the two corners, not a geodesic
    centroid, which is close enough at the scale of a hiking route.
    The radius is the distance from the center to the north-east corner,
    so a circle of that radius contains every corner of the rectangle.
    """

    south_west: Coordinate
    north_east: Coordinate
    center: Coordinate
    radius_km: float

    @property
    def south(self) -> float:
        return self.south_west.lat

    @property
    def west(self) -> float:
        return self.south_west.lng

    @property
    def north(self) -> float:
        return self.north_east.lat

    @property
    def east(self) -> float:
        return self.north_east.lng

    def as_bounds(self) -> Tuple[Tuple[float, float], Tuple[float, float]]:
        """Return ((south, west), (north, east)) as expected by map fit-bounds calls."""
        return ((self.south, self.west), (self.north, self.east))

    def buffered(self, buffer: float) -> Tuple[float, float, float, float]:
        """
        Get the bounds grown by a buffer, e.g. for map padding.

        Args:
            buffer: Buffer distance in meters

        Returns:
            Tuple of (south, west, north, east) in decimal degrees
        """
        if buffer == 0.0:
            return (self.south, self.west, self.north, self.east)

        # 1 degree latitude ≈ 111 km; longitude shrinks with latitude
        avg_lat = (self.south + self.north) / 2
        lat_buffer = buffer / 111000.0
        lon_buffer = buffer / (111000.0 * abs(cos(radians(avg_lat))))

        buffered_south = max(-90.0, self.south - lat_buffer)
        buffered_north = min(90.0, self.north + lat_buffer)
        buffered_west = max(-180.0, self.west - lon_buffer)
        buffered_east = min(180.0, self.east + lon_buffer)

        logger.debug(
            f"Buffered bounding box: ({buffered_south:.4f}, {buffered_west:.4f}, {buffered_north:.4f}, {buffered_east:.4f}) with {buffer}m buffer"
        )
        return (buffered_south, buffered_west, buffered_north, buffered_east)


EMPTY_BOUNDING_BOX = BoundingBox(
    south_west=Coordinate(0.0, 0.0),
    north_east=Coordinate(0.0, 0.0),
    center=Coordinate(0.0, 0.0),
    radius_km=0.0,
)


def get_route_bounding_box(points: Sequence[Coordinate]) -> BoundingBox:
    """
    Calculate the bounding box, center and radius for a set of points.

    Args:
        points: Coordinates to enclose

    Returns:
        BoundingBox for the points. A single point gives a zero-size box
        centered on it; an empty sequence gives an all-zero box.
    """
    if not points:
        logger.debug("No points given, returning empty bounding box")
        return EMPTY_BOUNDING_BOX

    latitudes = [p.lat for p in points]
    longitudes = [p.lng for p in points]

    south, north = min(latitudes), max(latitudes)
    west, east = min(longitudes), max(longitudes)

    south_west = Coordinate(south, west)
    north_east = Coordinate(north, east)
    center = Coordinate((south + north) / 2, (west + east) / 2)
    radius_km = haversine_distance(center, north_east)

    logger.debug(
        f"Route bounding box: ({south:.4f}, {west:.4f}, {north:.4f}, {east:.4f}), "
        f"radius {radius_km:.2f} km"
    )

    return BoundingBox(
        south_west=south_west,
        north_east=north_east,
        center=center,
        radius_km=radius_km,
    )
