#!/usr/bin/env python3
"""
Distance calculation utilities for route analysis.
"""

from typing import List, Sequence
import logging
import math

from .geometry import Coordinate

logger = logging.getLogger(__name__)

# Mean Earth radius in kilometers
EARTH_RADIUS_KM = 6371.0


def haversine_distance(pos1: Coordinate, pos2: Coordinate) -> float:
    """
    Calculate the great circle distance between two coordinates.

    Elevation is ignored. Coordinates are not validated: out-of-range
    values flow straight through the formula, and a NaN or infinite
    latitude or longitude gives a NaN distance.

    Args:
        pos1: First coordinate
        pos2: Second coordinate

    Returns:
        Distance in kilometers
    """
    if not all(math.isfinite(v) for v in (pos1.lat, pos1.lng, pos2.lat, pos2.lng)):
        return math.nan

    lat1, lon1 = math.radians(pos1.lat), math.radians(pos1.lng)
    lat2, lon2 = math.radians(pos2.lat), math.radians(pos2.lng)

    dlat = lat2 - lat1
    dlon = lon2 - lon1
    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    )
    # Rounding can push a marginally above 1 for antipodal points
    if a > 1.0:
        a = 1.0
    c = 2 * math.asin(math.sqrt(a))

    return EARTH_RADIUS_KM * c


def calculate_cumulative_distances(route: Sequence[Coordinate]) -> List[float]:
    """
    Calculate cumulative distances along a route.

    Args:
        route: Ordered coordinates of the route

    Returns:
        List of cumulative distances in kilometers, with same length as route
    """
    if not route:
        return []

    cumulative_distances = [0.0]

    for i in range(1, len(route)):
        segment_distance = haversine_distance(route[i - 1], route[i])
        cumulative_distances.append(cumulative_distances[-1] + segment_distance)

    return cumulative_distances
