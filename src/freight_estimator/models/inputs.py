"""Input records — one fresh, immutable instance per estimate call."""

from __future__ import annotations

import datetime as dt
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ShipmentLoad(BaseModel):
    """Physical size of one shipment."""

    model_config = ConfigDict(frozen=True)

    weight_kg: float = Field(gt=0, description="Gross weight (kg)")
    volume_cbm: float = Field(gt=0, description="Cargo volume (m³)")
    pallet_count: int = Field(ge=1, description="Number of standard pallets")


class TripCostInput(BaseModel):
    """Variable trip costs entered (or prefilled) on the trip plan."""

    model_config = ConfigDict(frozen=True)

    fuel_cost: float = Field(default=0.0, ge=0, description="Fuel cost (AED)")
    toll_charges: float = Field(default=0.0, ge=0, description="Toll charges (AED)")
    driver_allowance: float | None = Field(
        default=None, ge=0,
        description="Driver allowance (AED). None = configured default.",
    )


class TripRequest(BaseModel):
    """Everything needed to plan and cost one trip.

    ``fuel_cost`` and ``toll_charges`` are normally derived from the route;
    set them to override the route-based figures.
    """

    model_config = ConfigDict(frozen=True)

    origin: str = Field(min_length=1, description="Origin city code")
    destination: str = Field(min_length=1, description="Destination city code")
    vehicle: str | None = Field(default=None, description="Assigned vehicle")
    driver: str | None = Field(default=None, description="Assigned driver")
    load_type: Literal["FCL", "LTL"] = Field(default="FCL")
    driver_allowance: float | None = Field(
        default=None, ge=0,
        description="Driver allowance (AED). None = configured default.",
    )
    fuel_cost: float | None = Field(default=None, ge=0)
    toll_charges: float | None = Field(default=None, ge=0)
    notes: str = ""


class DocumentCheck(BaseModel):
    """Expiry date of a vehicle document or driver licence."""

    model_config = ConfigDict(frozen=True)

    expiry_date: dt.date
    today: dt.date | None = Field(default=None, description="Reference date. None = current date.")


class RestCheck(BaseModel):
    """Hours a driver has rested since the last trip."""

    model_config = ConfigDict(frozen=True)

    resting_hours: float = Field(ge=0)
