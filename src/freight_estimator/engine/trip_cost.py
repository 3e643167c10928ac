"""Trip costing — variable costs + base overhead, marked up to a selling price."""

from __future__ import annotations

import datetime as dt
import logging

from freight_estimator.config.pricing import PricingConfig
from freight_estimator.engine.references import (
    RandomTripReferenceAllocator,
    TripReferenceAllocator,
)
from freight_estimator.models.inputs import TripCostInput
from freight_estimator.models.results import TripCostResult

logger = logging.getLogger(__name__)


def compute_trip_cost(
    cost_input: TripCostInput,
    pricing: PricingConfig | None = None,
    allocator: TripReferenceAllocator | None = None,
    today: dt.date | None = None,
) -> TripCostResult:
    """Compute total cost, selling price, and profit, and mint a trip reference.

    Parameters
    ----------
    cost_input : TripCostInput
        Fuel, tolls, and driver allowance.  A missing allowance falls back
        to ``pricing.default_driver_allowance``.
    pricing : PricingConfig, optional
        Base overhead and markup.  Defaults to the standard rules.
    allocator : TripReferenceAllocator, optional
        Reference strategy.  Defaults to a random suffix with the
        configured prefix.  A supplied allocator keeps its own prefix;
        ``pricing.reference_prefix`` only applies to the default.
    today : datetime.date, optional
        Date whose year goes into the reference.  Defaults to today.

    Returns
    -------
    TripCostResult
        Cost fields are deterministic; only ``trip_reference`` may vary.
    """
    pricing = pricing or PricingConfig()
    if allocator is None:
        allocator = RandomTripReferenceAllocator(prefix=pricing.reference_prefix)
    year = (today or dt.date.today()).year
    driver_allowance = (
        cost_input.driver_allowance
        if cost_input.driver_allowance is not None
        else pricing.default_driver_allowance
    )

    total_cost = (
        cost_input.fuel_cost
        + cost_input.toll_charges
        + driver_allowance
        + pricing.base_cost
    )
    selling_price = total_cost * (1.0 + pricing.markup_rate)
    profit = selling_price - total_cost

    result = TripCostResult(
        fuel_cost=cost_input.fuel_cost,
        toll_charges=cost_input.toll_charges,
        driver_allowance=driver_allowance,
        base_cost=pricing.base_cost,
        total_cost=total_cost,
        selling_price=selling_price,
        profit=profit,
        profit_margin_pct=pricing.markup_rate * 100.0,
        currency=pricing.currency,
        trip_reference=allocator.allocate(year),
    )
    logger.debug(
        "Trip %s: cost %.2f, price %.2f, profit %.2f",
        result.trip_reference, total_cost, selling_price, profit,
    )
    return result


def estimate_trip_cost(
    fuel_cost: float,
    toll_charges: float,
    driver_allowance: float | None = None,
    pricing: PricingConfig | None = None,
    allocator: TripReferenceAllocator | None = None,
    today: dt.date | None = None,
) -> TripCostResult:
    """Primitive-argument entry point.  Negative amounts raise ``ValidationError``."""
    cost_input = TripCostInput(
        fuel_cost=fuel_cost,
        toll_charges=toll_charges,
        driver_allowance=driver_allowance,
    )
    return compute_trip_cost(cost_input, pricing, allocator, today)
