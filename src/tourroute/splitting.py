#!/usr/bin/env python3
"""
Splitting a multi-day route into day segments.

A split index is a position in the track. The point at a split index is
shared: it is the last point of one day and the first point of the next.
Because that shared point adds no distance on either side, per-day
distances add up to the whole-route distance.
"""

from bisect import bisect_left
from dataclasses import dataclass
from typing import List, Sequence, Tuple
import logging

from .analysis import RouteAnalysis, analyze_route
from .distance import calculate_cumulative_distances, haversine_distance
from .geometry import Coordinate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DaySplitSuggestion:
    """A proposed boundary between two consecutive days."""

    split_index: int
    coordinate: Coordinate
    reason: str


@dataclass(frozen=True)
class DaySegment:
    """The contiguous part of a track walked on one day."""

    day_number: int
    start_index: int
    end_index: int
    coordinates: Tuple[Coordinate, ...]
    analysis: RouteAnalysis

    @property
    def point_count(self) -> int:
        return len(self.coordinates)

    @property
    def estimated_duration_hours(self) -> int:
        return self.analysis.estimated_duration_hours


def _nearest_index(
    cumulative_distances: List[float], target: float, lo: int, hi: int
) -> int:
    """
    Find the index in [lo, hi] whose cumulative distance is closest to target.

    Ties go to the earlier index, including runs of equal cumulative
    distance left by repeated points.
    """
    i = bisect_left(cumulative_distances, target, lo, hi + 1)
    if i <= lo:
        best = lo
    elif i > hi:
        best = hi
    else:
        before = target - cumulative_distances[i - 1]
        after = cumulative_distances[i] - target
        best = i - 1 if before <= after else i

    while best > lo and cumulative_distances[best - 1] == cumulative_distances[best]:
        best -= 1
    return best


def suggest_day_splits(
    points: Sequence[Coordinate], days_count: int
) -> List[DaySplitSuggestion]:
    """
    Suggest where to split a route into multiple days of similar distance.

    For each day boundary k the track index whose cumulative distance is
    nearest to k * total / days is chosen, so densely sampled stretches do
    not skew the result the way a split by point count would.

    When the track has too few points for the requested days, the largest
    possible number of splits is returned (one per interior point) and the
    targets are spread over that smaller number of days.

    Args:
        points: Ordered coordinates of the route
        days_count: Number of days to split the route into

    Returns:
        Suggestions with strictly increasing split indices, each strictly
        between 0 and len(points) - 1
    """
    if days_count <= 1:
        return []

    split_count = min(days_count - 1, len(points) - 2)
    if split_count <= 0:
        logger.debug(
            f"Route with {len(points)} points cannot be split into {days_count} days"
        )
        return []

    if split_count < days_count - 1:
        logger.debug(
            f"Only {split_count + 1} days possible for a route with {len(points)} points "
            f"({days_count} requested)"
        )

    analysis = analyze_route(points)
    effective_days = split_count + 1
    target_distance_per_day = analysis.total_distance_km / effective_days

    cumulative_distances = calculate_cumulative_distances(points)
    last_index = len(points) - 1

    suggestions: List[DaySplitSuggestion] = []
    previous_split = 0

    for k in range(1, effective_days):
        target = k * target_distance_per_day

        # Leave one interior point free for each split still to come
        lo = previous_split + 1
        hi = last_index - 1 - (split_count - k)

        split_index = _nearest_index(cumulative_distances, target, lo, hi)

        logger.debug(
            f"Day {k}: target {target:.2f} km, split at index {split_index} "
            f"({cumulative_distances[split_index]:.2f} km)"
        )

        suggestions.append(
            DaySplitSuggestion(
                split_index=split_index,
                coordinate=points[split_index],
                reason=f"Day {k} → Day {k + 1}",
            )
        )
        previous_split = split_index

    return suggestions


def build_day_segments(
    points: Sequence[Coordinate], split_indices: Sequence[int]
) -> List[DaySegment]:
    """
    Cut a route into day segments at the given split indices.

    The indices may come from suggest_day_splits or from manual editing,
    so they are sorted first, and duplicates or indices that would create
    an empty day are dropped with a warning.

    Args:
        points: Ordered coordinates of the route
        split_indices: Track indices where one day ends and the next begins

    Returns:
        One DaySegment per day, in order. An empty route gives no segments.
    """
    if not points:
        return []

    last_index = len(points) - 1
    valid_splits = []
    for index in sorted(set(split_indices)):
        if 0 < index < last_index:
            valid_splits.append(index)
        else:
            logger.warning(
                f"Ignoring split index {index} outside the route interior (0, {last_index})"
            )

    boundaries = [0] + valid_splits + [last_index]

    segments = []
    for day_number, (start, end) in enumerate(
        zip(boundaries[:-1], boundaries[1:]), start=1
    ):
        day_points = tuple(points[start : end + 1])
        segments.append(
            DaySegment(
                day_number=day_number,
                start_index=start,
                end_index=end,
                coordinates=day_points,
                analysis=analyze_route(day_points),
            )
        )

    logger.debug(f"Built {len(segments)} day segments from {len(points)} points")

    return segments


def snap_to_track(points: Sequence[Coordinate], lat: float, lng: float) -> int:
    """
    Find the track point nearest to a map position.

    Used to move a dragged split marker back onto the route.

    Args:
        points: Ordered coordinates of the route
        lat: Latitude of the dropped marker
        lng: Longitude of the dropped marker

    Returns:
        Index of the nearest point (earliest on ties). -1 when no distance
        can be compared: an empty route, a NaN or infinite marker position,
        or a route whose points all have non-finite coordinates
    """
    target = Coordinate(lat, lng)
    nearest_index = -1
    min_distance = float("inf")

    for i, point in enumerate(points):
        distance = haversine_distance(point, target)
        if distance < min_distance:
            min_distance = distance
            nearest_index = i

    return nearest_index
