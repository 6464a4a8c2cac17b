#!/usr/bin/env python3
"""
Route simplification (Douglas-Peucker) with elevations preserved.
"""

from typing import List, Sequence
import logging

from .bbox import get_route_bounding_box
from .geometry import (
    Coordinate,
    coords_to_polyline,
    create_transverse_mercator_projection,
)

logger = logging.getLogger(__name__)

DEFAULT_SIMPLIFY_TOLERANCE_M = 10.0


def simplify_route(
    points: Sequence[Coordinate], tolerance_m: float = DEFAULT_SIMPLIFY_TOLERANCE_M
) -> List[Coordinate]:
    """
    Reduce the number of points in a route.

    The route is projected onto a transverse mercator centered on its
    bounding box so the tolerance is in meters, then simplified with
    Shapely's Douglas-Peucker implementation. Douglas-Peucker only ever
    drops vertices, so the kept points are matched back to the input in
    order and returned with their original elevation.

    Args:
        points: Ordered coordinates of the route
        tolerance_m: Maximum allowed deviation from the original route in meters

    Returns:
        The kept coordinates, always including the first and last point
    """
    if len(points) <= 2 or tolerance_m <= 0:
        return list(points)

    bbox = get_route_bounding_box(points)
    projection = create_transverse_mercator_projection(
        (bbox.south, bbox.west, bbox.north, bbox.east)
    )
    linestring = coords_to_polyline(list(points), projection)
    projected = list(linestring.coords)

    simplified = linestring.simplify(tolerance_m, preserve_topology=False)
    kept_coords = list(simplified.coords)

    last_index = len(points) - 1
    kept_indices = [0]
    j = 1
    for i in range(1, last_index + 1):
        if j < len(kept_coords) and projected[i] == kept_coords[j]:
            kept_indices.append(i)
            j += 1

    # Repeated points can make the in-order match stop short of the end
    if kept_indices[-1] != last_index:
        if len(kept_indices) > 1 and projected[kept_indices[-1]] == projected[last_index]:
            kept_indices[-1] = last_index
        else:
            kept_indices.append(last_index)

    result = [points[i] for i in kept_indices]

    logger.debug(
        f"Simplified route from {len(points)} to {len(result)} points "
        f"(tolerance {tolerance_m} m)"
    )

    return result
