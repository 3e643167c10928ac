"""Input and result models — estimator contracts."""

from freight_estimator.models.inputs import (
    DocumentCheck,
    RestCheck,
    ShipmentLoad,
    TripCostInput,
    TripRequest,
)
from freight_estimator.models.results import (
    DocumentStatus,
    LoadCapacityResult,
    RestStatus,
    RouteEstimate,
    TripCostResult,
    TripPlan,
)

__all__ = [
    "ShipmentLoad",
    "TripCostInput",
    "TripRequest",
    "DocumentCheck",
    "RestCheck",
    "LoadCapacityResult",
    "TripCostResult",
    "RouteEstimate",
    "TripPlan",
    "DocumentStatus",
    "RestStatus",
]
