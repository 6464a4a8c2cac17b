"""
Module for collecting and logging metrics about how evenly a route is split into days.
"""

import logging
from typing import List, NamedTuple, Sequence
from .splitting import DaySegment

logger = logging.getLogger(__name__)


class SplitMetrics(NamedTuple):
    """Container for day split metrics data."""

    day_distances_km: List[float]
    day_gains_m: List[int]
    mean_distance_km: float
    max_deviation_pct: float


def collect_metrics(segments: Sequence[DaySegment]) -> SplitMetrics:
    """
    Collect balance metrics from day segments.

    Args:
        segments: Day segments of one route

    Returns:
        SplitMetrics where max_deviation_pct is the largest distance
        difference of any day from the mean day, as a percentage of the mean
    """
    day_distances = [s.analysis.total_distance_km for s in segments]
    day_gains = [s.analysis.elevation_gain_m for s in segments]

    if not day_distances:
        return SplitMetrics([], [], 0.0, 0.0)

    mean_distance = sum(day_distances) / len(day_distances)
    if mean_distance > 0:
        max_deviation = max(abs(d - mean_distance) for d in day_distances)
        max_deviation_pct = 100.0 * max_deviation / mean_distance
    else:
        max_deviation_pct = 0.0

    return SplitMetrics(
        day_distances_km=day_distances,
        day_gains_m=day_gains,
        mean_distance_km=mean_distance,
        max_deviation_pct=max_deviation_pct,
    )


def log_metrics(metrics: SplitMetrics, enabled: bool) -> None:
    """
    Log detailed split metrics.

    Args:
        metrics: SplitMetrics collected from the day segments
        enabled: Whether metrics output was requested
    """
    if not enabled:
        return

    logger.debug("=== TOURROUTE_METRICS ===")
    logger.debug(f"days={len(metrics.day_distances_km)}")
    for day, (distance, gain) in enumerate(
        zip(metrics.day_distances_km, metrics.day_gains_m), start=1
    ):
        logger.debug(f"day_distance_km[{day}]={distance:.3f}")
        logger.debug(f"day_gain_m[{day}]={gain}")
    logger.debug(f"mean_distance_km={metrics.mean_distance_km:.3f}")
    logger.debug(f"max_deviation_pct={metrics.max_deviation_pct:.1f}")
    logger.debug("=== END_TOURROUTE_METRICS ===")
