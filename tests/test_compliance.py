"""Tests for engine/compliance.py."""

from __future__ import annotations

import datetime as dt

import pytest

from freight_estimator.config import ComplianceConfig
from freight_estimator.engine.compliance import document_status, rest_status


class TestDocumentStatus:

    @pytest.mark.parametrize("offset,status", [
        (-365, "Expired"),
        (-1, "Expired"),
        (0, "Expiring Soon"),
        (10, "Expiring Soon"),
        (30, "Expiring Soon"),
        (31, "Valid"),
        (400, "Valid"),
    ])
    def test_boundaries(self, offset, status, today, compliance):
        r = document_status(today + dt.timedelta(days=offset), today, compliance)
        assert r.status == status
        assert r.days_until_expiry == offset

    def test_custom_warning_window(self, today):
        cfg = ComplianceConfig(expiry_warning_days=60)
        assert document_status(today + dt.timedelta(days=45), today, cfg).status == "Expiring Soon"

    def test_defaults_to_current_date(self):
        far = dt.date.today() + dt.timedelta(days=1_000)
        assert document_status(far).status == "Valid"


class TestRestStatus:

    def test_ready(self, compliance):
        assert rest_status(24, compliance).model_dump() == {"status": "Ready", "progress_pct": 100.0}
        assert rest_status(30, compliance).status == "Ready"

    def test_resting(self, compliance):
        r = rest_status(12, compliance)
        assert r.status == "Resting"
        assert r.progress_pct == pytest.approx(50.0)

    def test_no_rest_recorded(self, compliance):
        assert rest_status(0, compliance).model_dump() == {"status": "Available", "progress_pct": 100.0}

    def test_custom_requirement(self):
        r = rest_status(6, ComplianceConfig(required_rest_hours=8))
        assert r.progress_pct == pytest.approx(75.0)
