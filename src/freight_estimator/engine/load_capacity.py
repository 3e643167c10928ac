"""Load-capacity estimate: shipment size vs. one standard truck.

Pure arithmetic: ShipmentLoad + CapacityConfig → LoadCapacityResult.
"""

from __future__ import annotations

import logging

from freight_estimator.config.capacity import CapacityConfig
from freight_estimator.models.inputs import ShipmentLoad
from freight_estimator.models.results import LoadCapacityResult

logger = logging.getLogger(__name__)


def _utilization_pct(quantity: float, capacity: float) -> float:
    """quantity / capacity as a percentage, clamped to [0, 100]."""
    if capacity <= 0:
        return 0.0
    return min(max(quantity * 100.0 / capacity, 0.0), 100.0)


def compute_load_capacity(
    load: ShipmentLoad,
    capacity: CapacityConfig | None = None,
) -> LoadCapacityResult:
    """Compute utilization ratios and recommend a vehicle class."""
    capacity = capacity or CapacityConfig()

    by_dimension = {
        "weight": _utilization_pct(load.weight_kg, capacity.max_weight_kg),
        "volume": _utilization_pct(load.volume_cbm, capacity.max_volume_cbm),
        "pallets": _utilization_pct(load.pallet_count, capacity.max_pallets),
    }

    # max() keeps the first key on ties, so weight → volume → pallets
    binding = max(by_dimension, key=by_dimension.__getitem__)
    overall = by_dimension[binding]

    vehicle_class = (
        capacity.large_vehicle_class
        if overall > capacity.large_vehicle_threshold_pct
        else capacity.standard_vehicle_class
    )

    result = LoadCapacityResult(
        weight_utilization_pct=by_dimension["weight"],
        volume_utilization_pct=by_dimension["volume"],
        pallet_utilization_pct=by_dimension["pallets"],
        overall_utilization_pct=overall,
        binding_constraint=binding,
        recommended_vehicle_class=vehicle_class,
        combinable=overall < capacity.combinable_threshold_pct,
    )
    logger.debug(
        "Load %.1f kg / %.2f cbm / %d pallets -> %.2f%% (%s), %s",
        load.weight_kg, load.volume_cbm, load.pallet_count,
        overall, binding, vehicle_class,
    )
    return result


def estimate_load_capacity(
    weight_kg: float,
    volume_cbm: float,
    pallet_count: int,
    capacity: CapacityConfig | None = None,
) -> LoadCapacityResult:
    """Primitive-argument entry point.

    Raises ``pydantic.ValidationError`` for non-positive weight or volume,
    or fewer than one pallet.
    """
    load = ShipmentLoad(weight_kg=weight_kg, volume_cbm=volume_cbm, pallet_count=pallet_count)
    return compute_load_capacity(load, capacity)
