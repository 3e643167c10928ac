"""Trip pricing — base overhead, markup, and trip reference format."""

from pydantic import BaseModel, Field


class PricingConfig(BaseModel):
    """Fixed pricing rules applied on top of the variable trip costs."""

    base_cost: float = Field(default=200.0, ge=0, description="Fixed overhead added to every trip (AED)")
    markup_rate: float = Field(
        default=0.25, ge=0,
        description="Markup applied to total cost to get the selling price (0.25 = 25%)",
    )
    default_driver_allowance: float = Field(default=500.0, ge=0, description="Driver allowance when none is given (AED)")
    currency: str = Field(default="AED", min_length=1)
    reference_prefix: str = Field(default="TCN", min_length=1, description="Prefix of generated trip references")
