"""Result types — the contract between estimators and their callers.

Every result is frozen: derived once per call, never mutated afterwards.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

from freight_estimator.models.inputs import TripRequest


# ═══════════════════════════════════════════════════════════════════════════
# Load capacity
# ═══════════════════════════════════════════════════════════════════════════

class LoadCapacityResult(BaseModel):
    """Utilization of one shipment against a standard truck."""

    model_config = ConfigDict(frozen=True)

    weight_utilization_pct: float
    """weight_kg / max_weight_kg × 100, clamped to [0, 100]."""

    volume_utilization_pct: float
    """volume_cbm / max_volume_cbm × 100, clamped to [0, 100]."""

    pallet_utilization_pct: float
    """pallet_count / max_pallets × 100, clamped to [0, 100]."""

    overall_utilization_pct: float
    """Max of the three; the tightest dimension binds."""

    binding_constraint: Literal["weight", "volume", "pallets"]
    """Dimension that set the overall figure (ties resolve weight → volume → pallets)."""

    recommended_vehicle_class: str
    combinable: bool
    """True when the load is small enough to share a vehicle."""


# ═══════════════════════════════════════════════════════════════════════════
# Trip costing
# ═══════════════════════════════════════════════════════════════════════════

class TripCostResult(BaseModel):
    """Cost, price, and profit for one trip."""

    model_config = ConfigDict(frozen=True)

    fuel_cost: float
    toll_charges: float
    driver_allowance: float
    base_cost: float

    total_cost: float
    """fuel + tolls + driver allowance + base cost."""

    selling_price: float
    """total_cost × (1 + markup_rate)."""

    profit: float
    """selling_price − total_cost."""

    profit_margin_pct: float
    """markup_rate × 100."""

    currency: str
    trip_reference: str
    """e.g. ``TCN-2024-042``. Not guaranteed unique."""


# ═══════════════════════════════════════════════════════════════════════════
# Routing & planning
# ═══════════════════════════════════════════════════════════════════════════

class RouteEstimate(BaseModel):
    """Mock distance lookup plus distance-derived trip figures."""

    model_config = ConfigDict(frozen=True)

    origin: str
    destination: str
    distance_km: float
    duration_hours: int
    fuel_cost: int
    toll_charges: int
    known_route: bool
    """False when the default distance was used."""


class TripPlan(BaseModel):
    """A routed and costed trip."""

    model_config = ConfigDict(frozen=True)

    request: TripRequest
    route: RouteEstimate
    costs: TripCostResult


# ═══════════════════════════════════════════════════════════════════════════
# Compliance
# ═══════════════════════════════════════════════════════════════════════════

class DocumentStatus(BaseModel):
    """Validity of a vehicle document or driver licence."""

    model_config = ConfigDict(frozen=True)

    status: Literal["Expired", "Expiring Soon", "Valid"]
    days_until_expiry: int


class RestStatus(BaseModel):
    """Whether a driver has rested enough to take a trip."""

    model_config = ConfigDict(frozen=True)

    status: Literal["Ready", "Resting", "Available"]
    progress_pct: float
