"""
Coordinate type and helpers for working with Shapely geometries and projections.

This module provides the Coordinate track sample used throughout the package,
plus helper functions for creating custom map projections (Transverse Mercator)
and converting coordinate lists to Shapely LineString objects.
"""

from typing import List, Optional, Tuple, NamedTuple
from shapely.geometry import LineString
import pyproj


class Coordinate(NamedTuple):
    """A single track sample: latitude, longitude and elevation in meters.

    An elevation of 0.0 is used both for sea level and for "no elevation data".
    """

    lat: float
    lng: float
    elevation: float = 0.0


def create_transverse_mercator_projection(
    bbox: Tuple[float, float, float, float],
) -> pyproj.Proj:
    """
    Create a custom transverse mercator projection centered on the given bounding box.

    Args:
        bbox: Tuple of (south, west, north, east) in decimal degrees

    Returns:
        pyproj.Proj object for the custom projection
    """
    south, west, north, east = bbox

    center_lat = (south + north) / 2.0
    center_lon = (west + east) / 2.0

    proj_string = f"+proj=tmerc +lat_0={center_lat} +lon_0={center_lon} +k=1 +x_0=0 +y_0=0 +datum=WGS84 +units=m +no_defs"
    return pyproj.Proj(proj_string)


def coords_to_polyline(
    coords: List[Coordinate], projection: Optional[pyproj.Proj] = None
) -> LineString:
    """
    Convert a list of coordinates to a Shapely LineString.

    Args:
        coords: List of Coordinate objects
        projection: Optional pyproj.Proj object for coordinate transformation.
                   If None, uses (lng, lat) coordinates directly.

    Returns:
        LineString object in projected coordinates (meters) if projection is
        provided, otherwise in geographic coordinates

    Raises:
        ValueError: If coords has less than 2 points
    """
    if not coords or len(coords) < 2:
        raise ValueError("At least two coordinates are required to create a LineString.")

    lons = [coord.lng for coord in coords]
    lats = [coord.lat for coord in coords]

    if projection is not None:
        x_coords, y_coords = projection(lons, lats)
        return LineString(list(zip(x_coords, y_coords)))

    return LineString(list(zip(lons, lats)))
