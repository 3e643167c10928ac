"""Document expiry and driver rest rules."""

from pydantic import BaseModel, Field


class ComplianceConfig(BaseModel):
    """Thresholds for vehicle document, licence, and driver rest checks."""

    expiry_warning_days: int = Field(
        default=30, ge=0,
        description="Documents expiring within this many days are flagged 'Expiring Soon'",
    )
    required_rest_hours: float = Field(default=24.0, gt=0, description="Rest a driver needs between trips (hours)")
