"""Configuration models — every business constant as a named, tunable value."""

from freight_estimator.config.capacity import CapacityConfig
from freight_estimator.config.pricing import PricingConfig
from freight_estimator.config.route import RouteConfig
from freight_estimator.config.compliance import ComplianceConfig
from freight_estimator.config.settings import (
    CONFIG_ENV_VAR,
    EstimatorConfig,
    build_config,
    deep_merge,
    load_config,
)

__all__ = [
    "CapacityConfig",
    "PricingConfig",
    "RouteConfig",
    "ComplianceConfig",
    "EstimatorConfig",
    "CONFIG_ENV_VAR",
    "build_config",
    "deep_merge",
    "load_config",
]
