"""Shared test fixtures — default configs and deterministic allocators."""

from __future__ import annotations

import datetime as dt

import numpy as np
import pytest

from freight_estimator.config import (
    CapacityConfig,
    ComplianceConfig,
    EstimatorConfig,
    PricingConfig,
    RouteConfig,
)
from freight_estimator.engine.references import (
    RandomTripReferenceAllocator,
    SequentialTripReferenceAllocator,
)


@pytest.fixture
def capacity() -> CapacityConfig:
    return CapacityConfig(
        max_weight_kg=25_000,
        max_volume_cbm=80,
        max_pallets=33,
        large_vehicle_threshold_pct=80,
        combinable_threshold_pct=70,
    )


@pytest.fixture
def pricing() -> PricingConfig:
    return PricingConfig(base_cost=200, markup_rate=0.25, reference_prefix="TCN")


@pytest.fixture
def route() -> RouteConfig:
    return RouteConfig()


@pytest.fixture
def compliance() -> ComplianceConfig:
    return ComplianceConfig(expiry_warning_days=30, required_rest_hours=24)


@pytest.fixture
def config() -> EstimatorConfig:
    return EstimatorConfig()


@pytest.fixture
def sequential() -> SequentialTripReferenceAllocator:
    return SequentialTripReferenceAllocator(prefix="TCN", start=1)


@pytest.fixture
def seeded() -> RandomTripReferenceAllocator:
    return RandomTripReferenceAllocator(prefix="TCN", rng=np.random.default_rng(42))


@pytest.fixture
def today() -> dt.date:
    return dt.date(2024, 6, 15)
