"""Top-level estimator configuration — bundles every tunable constant.

A deployment tunes constants by pointing ``FREIGHT_ESTIMATOR_CONFIG`` at a
JSON file holding partial overrides, e.g.::

    {"capacity": {"max_weight_kg": 24000}, "pricing": {"markup_rate": 0.3}}

Missing sections and fields keep their defaults.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from freight_estimator.config.capacity import CapacityConfig
from freight_estimator.config.compliance import ComplianceConfig
from freight_estimator.config.pricing import PricingConfig
from freight_estimator.config.route import RouteConfig

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "FREIGHT_ESTIMATOR_CONFIG"


class EstimatorConfig(BaseModel):
    """Complete input bundle shared by all estimators."""

    capacity: CapacityConfig = Field(default_factory=CapacityConfig)
    pricing: PricingConfig = Field(default_factory=PricingConfig)
    route: RouteConfig = Field(default_factory=RouteConfig)
    compliance: ComplianceConfig = Field(default_factory=ComplianceConfig)


def deep_merge(base: dict, overrides: dict) -> dict:
    """Recursively merge overrides into base dict."""
    for key, val in overrides.items():
        if key in base and isinstance(base[key], dict) and isinstance(val, dict):
            deep_merge(base[key], val)
        else:
            base[key] = val
    return base


def build_config(overrides: dict[str, Any] | None = None) -> EstimatorConfig:
    """Build an EstimatorConfig from partial overrides merged onto defaults."""
    defaults = EstimatorConfig().model_dump()
    deep_merge(defaults, overrides or {})
    return EstimatorConfig(**defaults)


def load_config(path: str | Path | None = None) -> EstimatorConfig:
    """Load configuration from a JSON override file.

    ``path`` wins over the ``FREIGHT_ESTIMATOR_CONFIG`` environment variable.
    With neither set, the defaults are returned.

    Raises
    ------
    FileNotFoundError
        The configured file does not exist.
    pydantic.ValidationError
        An override violates a field constraint.
    """
    if path is None:
        path = os.getenv(CONFIG_ENV_VAR) or None
    if path is None:
        return EstimatorConfig()

    config_path = Path(path)
    if not config_path.is_file():
        raise FileNotFoundError(f"Estimator config not found: {config_path}")

    overrides = json.loads(config_path.read_text(encoding="utf-8"))
    config = build_config(overrides)
    logger.info("Loaded estimator config from %s", config_path)
    return config
