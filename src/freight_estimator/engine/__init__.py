"""Engine — pure estimators over validated inputs."""

from freight_estimator.engine.load_capacity import compute_load_capacity, estimate_load_capacity
from freight_estimator.engine.trip_cost import compute_trip_cost, estimate_trip_cost
from freight_estimator.engine.references import (
    RandomTripReferenceAllocator,
    SequentialTripReferenceAllocator,
    TripReferenceAllocator,
    format_trip_reference,
)
from freight_estimator.engine.route import estimate_route
from freight_estimator.engine.planner import plan_trip
from freight_estimator.engine.compliance import document_status, rest_status

__all__ = [
    "compute_load_capacity",
    "estimate_load_capacity",
    "compute_trip_cost",
    "estimate_trip_cost",
    "TripReferenceAllocator",
    "RandomTripReferenceAllocator",
    "SequentialTripReferenceAllocator",
    "format_trip_reference",
    "estimate_route",
    "plan_trip",
    "document_status",
    "rest_status",
]
