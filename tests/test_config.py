"""Tests for config/: defaults, overrides, and file loading."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from freight_estimator.config import (
    CONFIG_ENV_VAR,
    CapacityConfig,
    ComplianceConfig,
    EstimatorConfig,
    PricingConfig,
    RouteConfig,
    build_config,
    deep_merge,
    load_config,
)


# ═══════════════════════════════════════════════════════════════════════════
# Defaults
# ═══════════════════════════════════════════════════════════════════════════

def test_default_constants():
    cfg = EstimatorConfig()
    assert cfg.capacity.max_weight_kg == 25_000
    assert cfg.capacity.max_volume_cbm == 80
    assert cfg.capacity.max_pallets == 33
    assert cfg.capacity.large_vehicle_threshold_pct == 80
    assert cfg.capacity.combinable_threshold_pct == 70
    assert cfg.pricing.base_cost == 200
    assert cfg.pricing.markup_rate == 0.25
    assert cfg.route.default_distance_km == 800
    assert len(cfg.route.cities) == 10
    assert cfg.compliance.required_rest_hours == 24


def test_default_factories_not_shared():
    a, b = RouteConfig(), RouteConfig()
    a.distances_km["x-y"] = 1
    assert "x-y" not in b.distances_km


# ═══════════════════════════════════════════════════════════════════════════
# Merging
# ═══════════════════════════════════════════════════════════════════════════

class TestDeepMerge:

    def test_simple(self):
        assert deep_merge({"a": 1, "b": 2}, {"b": 3, "c": 4}) == {"a": 1, "b": 3, "c": 4}

    def test_nested(self):
        base = {"pricing": {"base_cost": 200, "markup_rate": 0.25}}
        deep_merge(base, {"pricing": {"markup_rate": 0.3}})
        assert base == {"pricing": {"base_cost": 200, "markup_rate": 0.3}}

    def test_dict_replaced_by_scalar(self):
        assert deep_merge({"a": {"b": 1}}, {"a": 5}) == {"a": 5}


def test_build_config_partial():
    cfg = build_config({"capacity": {"max_weight_kg": 24_000}})
    assert cfg.capacity.max_weight_kg == 24_000
    assert cfg.capacity.max_volume_cbm == 80


def test_build_config_none():
    assert build_config() == EstimatorConfig()


def test_route_table_override_merges_keys():
    cfg = build_config({"route": {"distances_km": {"doha-manama": 140}}})
    assert cfg.route.distances_km["doha-manama"] == 140
    assert cfg.route.distances_km["dubai-riyadh"] == 1_050


# ═══════════════════════════════════════════════════════════════════════════
# File loading
# ═══════════════════════════════════════════════════════════════════════════

class TestLoadConfig:

    def test_no_path_no_env(self, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        assert load_config() == EstimatorConfig()

    def test_explicit_path(self, tmp_path):
        path = tmp_path / "estimator.json"
        path.write_text(json.dumps({"pricing": {"markup_rate": 0.3}}))
        assert load_config(path).pricing.markup_rate == 0.3

    def test_env_var(self, tmp_path, monkeypatch):
        path = tmp_path / "estimator.json"
        path.write_text(json.dumps({"compliance": {"expiry_warning_days": 14}}))
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        assert load_config().compliance.expiry_warning_days == 14

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.json")

    def test_invalid_value(self, tmp_path):
        path = tmp_path / "estimator.json"
        path.write_text(json.dumps({"capacity": {"max_weight_kg": 0}}))
        with pytest.raises(ValidationError):
            load_config(path)


# ═══════════════════════════════════════════════════════════════════════════
# Field constraints
# ═══════════════════════════════════════════════════════════════════════════

class TestConstraints:

    @pytest.mark.parametrize("field", ["max_weight_kg", "max_volume_cbm"])
    def test_zero_capacity_rejected(self, field):
        with pytest.raises(ValidationError):
            CapacityConfig(**{field: 0})

    def test_zero_pallets_rejected(self):
        with pytest.raises(ValidationError):
            CapacityConfig(max_pallets=0)

    def test_threshold_above_100_rejected(self):
        with pytest.raises(ValidationError):
            CapacityConfig(large_vehicle_threshold_pct=101)

    def test_negative_markup_rejected(self):
        with pytest.raises(ValidationError):
            PricingConfig(markup_rate=-0.1)

    def test_empty_prefix_rejected(self):
        with pytest.raises(ValidationError):
            PricingConfig(reference_prefix="")

    @pytest.mark.parametrize("km", [0, -100])
    def test_non_positive_route_distance_rejected(self, km):
        with pytest.raises(ValidationError):
            build_config({"route": {"distances_km": {"dubai-riyadh": km}}})

    def test_non_positive_distance_in_file_rejected(self, tmp_path):
        path = tmp_path / "estimator.json"
        path.write_text(json.dumps({"route": {"distances_km": {"doha-manama": -1}}}))
        with pytest.raises(ValidationError):
            load_config(path)

    def test_zero_speed_rejected(self):
        with pytest.raises(ValidationError):
            RouteConfig(average_speed_kmh=0)

    def test_zero_rest_rejected(self):
        with pytest.raises(ValidationError):
            ComplianceConfig(required_rest_hours=0)
