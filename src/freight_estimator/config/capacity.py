"""Vehicle capacity limits and load-planning thresholds."""

from pydantic import BaseModel, Field


class CapacityConfig(BaseModel):
    """Standard truck capacity used for every load-capacity estimate."""

    max_weight_kg: float = Field(default=25_000.0, gt=0, description="Payload limit of a standard truck (kg)")
    max_volume_cbm: float = Field(default=80.0, gt=0, description="Cargo volume limit (m³)")
    max_pallets: int = Field(default=33, ge=1, description="Standard pallet positions")
    large_vehicle_threshold_pct: float = Field(
        default=80.0, ge=0, le=100,
        description="Overall utilization above which the large vehicle class is recommended",
    )
    combinable_threshold_pct: float = Field(
        default=70.0, ge=0, le=100,
        description="Overall utilization below which the load can share a vehicle (LTL)",
    )
    large_vehicle_class: str = Field(default="40ft Container", min_length=1)
    standard_vehicle_class: str = Field(default="20ft Container", min_length=1)
