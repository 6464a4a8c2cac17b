"""
Filling in missing elevation data.

Tracks drawn by hand or recorded without a barometer come with an
elevation of 0 for every point. These helpers either interpolate between
known elevations or look the missing values up from an Open-Elevation
compatible API.
"""

from typing import Dict, List, Optional, Sequence, Tuple
import logging

import requests

from .geometry import Coordinate

DEFAULT_API_TIMEOUT = 30
OPEN_ELEVATION_API_URL = "https://api.open-elevation.com/api/v1/lookup"
DEFAULT_CHUNK_SIZE = 100

logger = logging.getLogger(__name__)


def _needs_elevation(point: Coordinate) -> bool:
    return not point.elevation


def interpolate_missing_elevations(
    points: Sequence[Coordinate],
) -> List[Coordinate]:
    """
    Fill zero elevations by linear interpolation between known neighbors.

    Interpolation is by index, not by distance. Points that do not have a
    known elevation on both sides (including the first and last point)
    keep their zero elevation.

    Args:
        points: Ordered coordinates of the route

    Returns:
        A new list of coordinates
    """
    result = list(points)
    known = [i for i, p in enumerate(points) if not _needs_elevation(p)]

    for before, after in zip(known[:-1], known[1:]):
        if after - before < 2:
            continue
        start = points[before].elevation
        end = points[after].elevation
        for i in range(before + 1, after):
            ratio = (i - before) / (after - before)
            result[i] = points[i]._replace(elevation=start + ratio * (end - start))

    return result


def _lookup_chunk(
    session: requests.Session,
    chunk: List[Coordinate],
    url: str,
    timeout: int,
) -> List[float]:
    """POST one batch of locations and return their elevations in order."""
    locations = [{"latitude": p.lat, "longitude": p.lng} for p in chunk]
    response = session.post(url, json={"locations": locations}, timeout=timeout)
    response.raise_for_status()
    results = response.json().get("results", [])
    if len(results) != len(chunk):
        raise ValueError(
            f"Elevation API returned {len(results)} results for {len(chunk)} locations"
        )
    return [float(r["elevation"]) for r in results]


def fetch_elevations(
    points: Sequence[Coordinate],
    url: str = OPEN_ELEVATION_API_URL,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    timeout: int = DEFAULT_API_TIMEOUT,
    session: Optional[requests.Session] = None,
) -> List[Coordinate]:
    """
    Look up elevations for points that have none.

    The lookup is best effort: if any request fails the input is returned
    unchanged, so a caller can always carry on with the route it has.

    Args:
        points: Ordered coordinates of the route
        url: Open-Elevation compatible lookup endpoint
        chunk_size: Maximum number of locations per request
        timeout: Request timeout in seconds
        session: Optional requests session to reuse

    Returns:
        A new list of coordinates with elevations filled in where found
    """
    missing = [p for p in points if _needs_elevation(p)]
    if not missing:
        return list(points)

    http = session or requests.Session()
    looked_up: Dict[Tuple[float, float], float] = {}

    try:
        for start in range(0, len(missing), chunk_size):
            chunk = missing[start : start + chunk_size]
            logger.debug(
                f"Requesting elevation for {len(chunk)} points "
                f"({start + len(chunk)}/{len(missing)})"
            )
            elevations = _lookup_chunk(http, chunk, url, timeout)
            for point, elevation in zip(chunk, elevations):
                looked_up[(point.lat, point.lng)] = elevation
    except (requests.exceptions.RequestException, ValueError, KeyError) as e:
        logger.warning(f"Elevation lookup failed, keeping original elevations: {e}")
        return list(points)
    finally:
        if session is None:
            http.close()

    logger.info(f"Fetched elevation for {len(looked_up)} locations")

    return [
        p._replace(elevation=looked_up.get((p.lat, p.lng), 0.0))
        if _needs_elevation(p)
        else p
        for p in points
    ]
