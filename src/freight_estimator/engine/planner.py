"""Trip planner — route estimate feeding the trip cost estimate."""

from __future__ import annotations

import datetime as dt
import logging

from freight_estimator.config.settings import EstimatorConfig
from freight_estimator.engine.references import TripReferenceAllocator
from freight_estimator.engine.route import estimate_route
from freight_estimator.engine.trip_cost import compute_trip_cost
from freight_estimator.models.inputs import TripCostInput, TripRequest
from freight_estimator.models.results import TripPlan

logger = logging.getLogger(__name__)


def plan_trip(
    request: TripRequest,
    config: EstimatorConfig | None = None,
    allocator: TripReferenceAllocator | None = None,
    today: dt.date | None = None,
) -> TripPlan:
    """Route and cost one trip.

    Fuel and tolls come from the route unless the request overrides them;
    the driver allowance falls back to the configured default.
    """
    config = config or EstimatorConfig()
    route = estimate_route(request.origin, request.destination, config.route)

    cost_input = TripCostInput(
        fuel_cost=request.fuel_cost if request.fuel_cost is not None else route.fuel_cost,
        toll_charges=request.toll_charges if request.toll_charges is not None else route.toll_charges,
        driver_allowance=request.driver_allowance,
    )
    costs = compute_trip_cost(cost_input, config.pricing, allocator, today)

    logger.info(
        "Planned %s: %s -> %s, %.0f km, %s %.2f",
        costs.trip_reference, request.origin, request.destination,
        route.distance_km, costs.currency, costs.selling_price,
    )
    return TripPlan(request=request, route=route, costs=costs)
