#!/usr/bin/env python3
"""
Whole-route and per-day statistics: distance, elevation gain/loss,
bounding box, elevation profile and hiking time estimate.
"""

from dataclasses import dataclass
from typing import List, NamedTuple, Sequence, Union
import logging
import math

from .bbox import BoundingBox, get_route_bounding_box
from .distance import calculate_cumulative_distances, haversine_distance
from .geometry import Coordinate

logger = logging.getLogger(__name__)

# Hiking time rule of thumb: 4 km/h on the flat plus 1 h per 600 m ascent
DEFAULT_FLAT_SPEED_KMH = 4.0
DEFAULT_CLIMB_RATE_M_PER_H = 600.0


def round_half_up(value: float) -> Union[int, float]:
    """Round to the nearest integer, halves away from zero for positive values.

    NaN and infinity are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    return int(math.floor(value + 0.5))


def estimate_duration_hours(
    distance_km: float,
    elevation_gain_m: float,
    flat_speed_kmh: float = DEFAULT_FLAT_SPEED_KMH,
    climb_rate_m_per_h: float = DEFAULT_CLIMB_RATE_M_PER_H,
) -> Union[int, float]:
    """
    Estimate walking time in whole hours, rounded up.

    Args:
        distance_km: Distance to walk
        elevation_gain_m: Total ascent
        flat_speed_kmh: Walking speed on level ground
        climb_rate_m_per_h: Ascent rate added on top of the flat time

    Returns:
        Estimated hours, or NaN/infinity when an input is not finite
    """
    hours = distance_km / flat_speed_kmh + elevation_gain_m / climb_rate_m_per_h
    if not math.isfinite(hours):
        return hours
    return math.ceil(hours)


@dataclass(frozen=True)
class RouteAnalysis:
    """Summary of a track or sub-track.

    elevation_loss_m is a positive magnitude.
    """

    total_distance_km: float
    elevation_gain_m: int
    elevation_loss_m: int
    bounding_box: BoundingBox

    @property
    def estimated_duration_hours(self) -> int:
        return estimate_duration_hours(self.total_distance_km, self.elevation_gain_m)


class ProfilePoint(NamedTuple):
    """One sample of an elevation profile chart."""

    distance_km: float  # cumulative distance from the route start
    elevation_m: float


def analyze_route(points: Sequence[Coordinate]) -> RouteAnalysis:
    """
    Analyze a route to calculate distance, elevation gain/loss, and bounding box.

    Empty and single-point inputs give a zero distance, zero elevation
    change and a degenerate bounding box instead of an error, since a route
    that is still being drawn is a normal state.

    Args:
        points: Ordered coordinates of the route

    Returns:
        RouteAnalysis for the route
    """
    total_distance = 0.0
    elevation_gain = 0.0
    elevation_loss = 0.0

    for i in range(1, len(points)):
        prev_point = points[i - 1]
        curr_point = points[i]

        total_distance += haversine_distance(prev_point, curr_point)

        diff = curr_point.elevation - prev_point.elevation
        if diff > 0:
            elevation_gain += diff
        elif diff < 0:
            elevation_loss += -diff
        elif math.isnan(diff):
            elevation_gain += diff
            elevation_loss += diff

    analysis = RouteAnalysis(
        total_distance_km=total_distance,
        elevation_gain_m=round_half_up(elevation_gain),
        elevation_loss_m=round_half_up(elevation_loss),
        bounding_box=get_route_bounding_box(points),
    )

    logger.debug(
        f"Analyzed {len(points)} points: {analysis.total_distance_km:.2f} km, "
        f"+{analysis.elevation_gain_m} m / -{analysis.elevation_loss_m} m"
    )

    return analysis


def calculate_elevation_profile(points: Sequence[Coordinate]) -> List[ProfilePoint]:
    """
    Calculate the elevation profile of a route for charting.

    Args:
        points: Ordered coordinates of the route

    Returns:
        One ProfilePoint per input point, with cumulative distance rounded
        to two decimals
    """
    cumulative_distances = calculate_cumulative_distances(points)
    return [
        ProfilePoint(round(distance, 2), point.elevation)
        for distance, point in zip(cumulative_distances, points)
    ]
