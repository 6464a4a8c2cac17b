from dataclasses import dataclass

from .analysis import DEFAULT_CLIMB_RATE_M_PER_H, DEFAULT_FLAT_SPEED_KMH
from .elevation import DEFAULT_API_TIMEOUT, OPEN_ELEVATION_API_URL


@dataclass
class TourRouteConfig:
    """Configuration for the tourroute CLI."""

    days: int = 1
    simplify_tolerance: float = 0.0
    bbox_buffer: float = 50.0
    flat_speed_kmh: float = DEFAULT_FLAT_SPEED_KMH
    climb_rate_m_per_h: float = DEFAULT_CLIMB_RATE_M_PER_H
    fill_elevation: bool = False
    elevation_api_url: str = OPEN_ELEVATION_API_URL
    elevation_api_timeout: int = DEFAULT_API_TIMEOUT
    log_level: str = "WARNING"
    metrics: bool = False
