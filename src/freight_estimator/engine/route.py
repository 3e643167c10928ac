"""Route estimate — mock distance matrix + flat per-km rates.

Stands in for a distance-matrix service: the trip planner only needs a
distance to prefill duration, fuel, and tolls.
"""

from __future__ import annotations

import logging
import math

from freight_estimator.config.route import RouteConfig
from freight_estimator.models.results import RouteEstimate

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


def route_key(origin: str, destination: str) -> str:
    return f"{origin}-{destination}"


def estimate_route(
    origin: str,
    destination: str,
    route: RouteConfig | None = None,
) -> RouteEstimate:
    """Look up distance and derive duration, fuel cost, and tolls.

    Unknown pairs (including the reverse of a known pair) fall back to
    ``default_distance_km``.
    """
    if not origin or not destination:
        raise ValueError("origin and destination are required")
    route = route or RouteConfig()

    key = route_key(origin, destination)
    known = key in route.distances_km
    distance = route.distances_km[key] if known else route.default_distance_km
    if not known:
        logger.debug("No distance for %s, using default %.0f km", key, distance)

    return RouteEstimate(
        origin=origin,
        destination=destination,
        distance_km=distance,
        duration_hours=round_half_up(distance / route.average_speed_kmh),
        fuel_cost=round_half_up(distance * route.fuel_rate_per_km),
        toll_charges=round_half_up(distance * route.toll_rate_per_km),
        known_route=known,
    )
