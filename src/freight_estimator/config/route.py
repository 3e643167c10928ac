"""Route lookup table and per-km cost rates used to prefill trip plans."""

from typing import Annotated

from pydantic import BaseModel, Field


def _default_cities() -> dict[str, str]:
    return {
        "dubai": "Dubai, UAE",
        "abu-dhabi": "Abu Dhabi, UAE",
        "sharjah": "Sharjah, UAE",
        "riyadh": "Riyadh, Saudi Arabia",
        "jeddah": "Jeddah, Saudi Arabia",
        "dammam": "Dammam, Saudi Arabia",
        "kuwait-city": "Kuwait City, Kuwait",
        "doha": "Doha, Qatar",
        "manama": "Manama, Bahrain",
        "muscat": "Muscat, Oman",
    }


def _default_distances() -> dict[str, float]:
    return {
        "dubai-riyadh": 1_050.0,
        "dubai-kuwait-city": 850.0,
        "abu-dhabi-doha": 650.0,
        "sharjah-muscat": 350.0,
    }


class RouteConfig(BaseModel):
    """Mock distance matrix plus the flat rates derived from distance."""

    cities: dict[str, str] = Field(
        default_factory=_default_cities,
        description="Known city codes mapped to display labels",
    )
    distances_km: dict[str, Annotated[float, Field(gt=0)]] = Field(
        default_factory=_default_distances,
        description="Road distance keyed by '<origin>-<destination>'. Lookup is directional.",
    )
    default_distance_km: float = Field(default=800.0, gt=0, description="Distance used for pairs not in the table (km)")
    average_speed_kmh: float = Field(default=80.0, gt=0, description="Average line-haul speed (km/h)")
    fuel_rate_per_km: float = Field(default=0.8, ge=0, description="Fuel cost per km (AED)")
    toll_rate_per_km: float = Field(default=0.1, ge=0, description="Toll charges per km (AED)")
